"""Render the launcher script launchd executes."""

from ...templating import render_template
from .compose_update_command import compose_update_command
from .UpdateOptions import UpdateOptions

_TEMPLATE = """#!/bin/bash
/bin/date && {{ command }}
"""


def render_launcher_script(brew: str, options: UpdateOptions) -> str:
    """Two lines: interpreter directive, then a date stamp chained to the brew commands."""
    return render_template(_TEMPLATE, {"command": compose_update_command(brew, options)})
