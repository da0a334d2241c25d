"""Raised when ``start`` finds the agent already loaded."""


class AlreadyRunningError(RuntimeError):
    """The agent is already loaded into launchd."""
