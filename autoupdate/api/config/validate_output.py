"""Check a command's output dict against the model registered for it."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .._output_schemas._registry import get_output_schema

_API_PREFIX = "autoupdate.api."


def command_id(func: Callable) -> str | None:
    """``autoupdate.api.service.cmd_status`` -> ``service.status``; None for non-commands."""
    module = func.__module__
    name = func.__name__
    if not module.startswith(_API_PREFIX) or not name.startswith("cmd_"):
        return None
    domain = module[len(_API_PREFIX) :].split(".", 1)[0]
    return f"{domain}.{name.removeprefix('cmd_')}"


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` and return it normalised by its schema.

    Output of functions without a registered schema passes through untouched.

    Raises:
        ValueError: If the output does not match the schema
    """
    cid = command_id(func)
    schema_class = get_output_schema(cid) if cid else None
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise ValueError(f"Output of {cid} does not match {schema_class.__name__}: {problems}") from e
