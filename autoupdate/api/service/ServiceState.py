"""Top-level states reported by ``status``."""

from enum import Enum


class ServiceState(str, Enum):
    RUNNING = "running"
    INSTALLED_BUT_STOPPED = "installed_but_stopped"
    NOT_CONFIGURED = "not_configured"
    UNKNOWN = "unknown"
