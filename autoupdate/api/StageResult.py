"""What a ``cmd_*`` function hands back to the CLI."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

ProgressFn = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """A command split into announce, progress, result and output.

    ``progress_callback`` does the work. It yields ``(fraction, message)``
    pairs and fills in ``result``, ``output`` and ``success`` before it ends.
    """

    announce: str
    progress_callback: ProgressFn
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False
