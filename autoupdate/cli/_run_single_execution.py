"""Drive one StageResult through the display."""

import sys
from collections.abc import Callable
from datetime import datetime

from autoupdate.api.config.validate_output import validate_output

from .display.Display import Display


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: Display,
    verbose: bool = False,
) -> None:
    """Run ``func`` once, show what it reports and exit with its status.

    Commands report failure through their output schema; an exception
    escaping here is a bug in the command.
    """
    stage = func(*args, **kwargs)
    display.status(stage.announce)

    for fraction, step in stage.progress_callback(stage):
        if verbose:
            display.info(f"[dim]{datetime.now():%H:%M:%S}[/dim] {step} ({fraction:.0%})")

    if not stage.result or not stage.output:
        raise ValueError(f"{func.__name__} finished without setting its result and output")
    output = validate_output(func, stage.output)

    for warning in output["warnings"]:
        display.warning(warning)
    (display.success if stage.success else display.error)(stage.result)

    if output.get("message"):
        display.text(output["message"])

    sys.exit(0 if stage.success else 1)
