"""Choose the single status state that applies."""

from .ServiceState import ServiceState


def select_state(running: bool, script_exists: bool, definition_exists: bool) -> ServiceState:
    """First match wins: running, installed but stopped, not configured, unknown."""
    if running:
        return ServiceState.RUNNING
    if script_exists:
        return ServiceState.INSTALLED_BUT_STOPPED
    if not definition_exists:
        return ServiceState.NOT_CONFIGURED
    return ServiceState.UNKNOWN
