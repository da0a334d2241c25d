"""Turn a ``cmd_*`` function into a CLI action."""

import functools
from collections.abc import Callable

import click

from ._run_single_execution import _run_single_execution


def _verbose_requested() -> bool:
    """Whether ``--verbose`` was given on this invocation or a parent group."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, dict) and "verbose" in ctx.obj:
            return bool(ctx.obj["verbose"])
        ctx = ctx.parent
    return False


def _handle_stage_result(func: Callable) -> Callable[..., None]:
    """Wrap ``func`` so calling it renders its StageResult and exits.

    Announcement, progress (with ``--verbose``) and the one-line result go to
    stderr; the command's message goes to stdout.
    """

    @functools.wraps(func)
    def run(*args, **kwargs) -> None:
        from .display import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), verbose=_verbose_requested())

    return run
