"""Service public API - installs and inspects the updater agent."""

from datetime import date
from typing import Any

from .ServiceConfig import _BACKEND_REGISTRY, ServiceConfig
from .ServiceIdentity import ServiceIdentity
from .StatusSnapshot import StatusSnapshot
from .UpdateOptions import UpdateOptions
from ._AbstractImpl import _AbstractImpl


class Service:
    """Public API for service operations."""

    def __init__(self, service_config: ServiceConfig):
        self.service_config = service_config
        self._impl: _AbstractImpl | None = None

    def __enter__(self):
        backend_type = self.service_config.type

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import implementation class directly from backend _Impl module
        module = __import__(f"autoupdate.api.service._{backend_type}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.service_config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    @property
    def identity(self) -> ServiceIdentity:
        return self._require_impl().identity

    def is_running(self) -> bool:
        """Whether the service manager lists the agent."""
        return self._require_impl().is_running()

    def install_service(self, options: UpdateOptions) -> dict[str, Any]:
        """Write and load the agent.

        Raises:
            AlreadyRunningError: If the agent is already loaded
        """
        return self._require_impl().install_service(options)

    def get_service_status(self, today: date, stale_after_days: int) -> StatusSnapshot:
        return self._require_impl().get_service_status(today, stale_after_days)

    def stop_service(self) -> dict[str, Any]:
        return self._require_impl().stop_service()

    def delete_service(self) -> dict[str, Any]:
        return self._require_impl().delete_service()
