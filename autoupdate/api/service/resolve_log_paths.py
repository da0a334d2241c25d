"""Pick a writable directory for the agent's stdout/stderr."""

import os

from ...utils.get_logger import get_logger
from .LogPaths import LogPaths
from .ServiceIdentity import ServiceIdentity


def resolve_log_paths(identity: ServiceIdentity) -> LogPaths:
    """Resolve log destinations, falling back when the log directory is not ours.

    The log directory may have been created by an earlier run under another
    user, so this tries the configured directory, then its parent, and
    finally gives up on redirection with a warning instead of failing.
    """
    log = get_logger("service.logs")
    log_dir = identity.log_dir

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        log.warning("Could not create log directory %s: %s", log_dir, exc)

    if log_dir.is_dir() and os.access(log_dir, os.W_OK):
        target = log_dir
    elif log_dir.parent.is_dir() and os.access(log_dir.parent, os.W_OK):
        target = log_dir.parent
        log.info("Log directory %s is not writable, using %s", log_dir, target)
    else:
        warning = f"{log_dir} does not seem to be writable. You may wish to `chown` it back to your user."
        log.warning("%s", warning)
        return LogPaths(stdout=None, stderr=None, warning=warning)

    return LogPaths(stdout=target / identity.stdout_name, stderr=target / identity.stderr_name)
