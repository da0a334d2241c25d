"""Interface the CLI renders command results through."""

from abc import ABC, abstractmethod


class Display(ABC):
    """Where announcements, progress and results are written."""

    @abstractmethod
    def status(self, message: str) -> None:
        """Announce what a command is about to do."""

    @abstractmethod
    def success(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...

    @abstractmethod
    def warning(self, message: str) -> None: ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Progress and other detail shown with ``--verbose``."""

    @abstractmethod
    def text(self, message: str) -> None:
        """Write the command's message verbatim, without markup."""
