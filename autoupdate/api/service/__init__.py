"""Service module - launchd agent installation and introspection."""

from .._output_schemas.service import (
    ServiceDeleteOutput,
    ServiceStartOutput,
    ServiceStatusOutput,
    ServiceStopOutput,
)
from .ServiceConfig import ServiceConfig

__all__ = [
    "ServiceConfig",
    "ServiceDeleteOutput",
    "ServiceStartOutput",
    "ServiceStatusOutput",
    "ServiceStopOutput",
]
