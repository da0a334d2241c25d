"""Abstract base class for service implementations (per-user agent installers)."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from .ServiceIdentity import ServiceIdentity
from .StatusSnapshot import StatusSnapshot
from .UpdateOptions import UpdateOptions


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific service implementations.

    Implementations generate the launcher and the service manager's
    definition, load and unload it, and read it back for status.
    """

    identity: ServiceIdentity

    @abstractmethod
    def is_running(self) -> bool:
        """Whether the service manager currently lists the agent."""
        pass

    @abstractmethod
    def install_service(self, options: UpdateOptions) -> dict[str, Any]:
        """Write the launcher and definition for ``options`` and load them.

        Returns:
            Dictionary with installation result (label, plist_path, loaded, warnings, etc.)

        Raises:
            AlreadyRunningError: If the agent is already loaded
        """
        pass

    @abstractmethod
    def get_service_status(self, today: date, stale_after_days: int) -> StatusSnapshot:
        """Inspect the installed files and the service manager."""
        pass

    @abstractmethod
    def stop_service(self) -> dict[str, Any]:
        """Unload the agent, keeping its files.

        Returns:
            Dictionary with stop result
        """
        pass

    @abstractmethod
    def delete_service(self) -> dict[str, Any]:
        """Unload the agent and remove its files.

        Returns:
            Dictionary with deletion result
        """
        pass
