"""macOS service implementation - installs the updater as a launchd agent."""

import json
import shutil
import subprocess
from datetime import date
from typing import Any

from ....constants import LAUNCHCTL
from ....utils.get_logger import get_logger
from .._AbstractImpl import _AbstractImpl
from ..AlreadyRunningError import AlreadyRunningError
from ..get_install_date import get_install_date
from ..is_stale import is_stale
from ..load_service_definition import load_service_definition
from ..read_launcher_command import read_launcher_command
from ..read_options_record import read_options_record
from ..read_run_at_load import read_run_at_load
from ..read_start_interval import read_start_interval
from ..reconstruct_flags import reconstruct_flags
from ..render_launcher_script import render_launcher_script
from ..render_service_definition import render_service_definition
from ..resolve_log_paths import resolve_log_paths
from ..select_state import select_state
from ..ServiceConfig import ServiceConfig
from ..ServiceIdentity import ServiceIdentity
from ..ServiceState import ServiceState
from ..StatusSnapshot import StatusSnapshot
from ..UpdateOptions import UpdateOptions
from ._Data import _Data


class _Impl(_AbstractImpl):
    """macOS-specific service implementation."""

    def __init__(self, service_config: ServiceConfig):
        """Initialize macOS service implementation.

        Args:
            service_config: Service configuration with launchd data
        """
        if not isinstance(service_config.data, _Data):
            raise ValueError("macOS service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data
        self.identity = ServiceIdentity(
            name=self._data.label,
            install_dir=self._data.install_dir,
            log_dir=self._data.log_dir,
            definition_path=self._data.launch_agents_dir / f"{self._data.label}.plist",
            brew=self._data.brew,
        )
        self._log = get_logger("service.darwin")

    def _launchctl(self, *args: str) -> subprocess.CompletedProcess | None:
        """Run launchctl, returning None when it cannot be executed at all."""
        try:
            return subprocess.run(
                [LAUNCHCTL, *args],
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            self._log.warning("Unable to run %s %s: %s", LAUNCHCTL, " ".join(args), exc)
            return None

    def list_services(self) -> str | None:
        """Output of ``launchctl list``, or None if launchctl is unavailable or failed."""
        result = self._launchctl("list")
        if result is None:
            return None
        if result.returncode != 0:
            self._log.warning("launchctl list exited with %s: %s", result.returncode, result.stderr.strip())
            return None
        return result.stdout

    def is_running(self) -> bool:
        listing = self.list_services()
        return listing is not None and self.identity.name in listing

    def _load(self) -> tuple[bool, str]:
        """Load the plist; returns (loaded, error)."""
        result = self._launchctl("load", str(self.identity.definition_path))
        if result is None:
            return False, f"Unable to run {LAUNCHCTL}; the agent was written but not loaded."
        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            return False, f"launchctl load failed ({result.returncode}): {detail}"
        return True, ""

    def install_service(self, options: UpdateOptions) -> dict[str, Any]:
        """Write the launcher and plist for ``options`` and load the agent.

        Writes are plain overwrites, so re-running after a failed load is safe.
        """
        if self.is_running():
            raise AlreadyRunningError(
                "The command already appears to have been started. "
                "Please run `autoupdate stop` and try again."
            )

        identity = self.identity
        log_paths = resolve_log_paths(identity)

        identity.install_dir.mkdir(parents=True, exist_ok=True)
        identity.definition_path.parent.mkdir(parents=True, exist_ok=True)

        # The previous launcher is read-only; replace it rather than write through it
        script_path = identity.script_path
        if script_path.exists() or script_path.is_symlink():
            script_path.unlink()
        script_path.write_text(render_launcher_script(identity.brew, options), encoding="utf-8")
        script_path.chmod(0o555)
        self._log.info("Wrote launcher %s", script_path)

        identity.definition_path.write_text(render_service_definition(identity, log_paths), encoding="utf-8")
        identity.options_path.write_text(json.dumps(options.model_dump(), indent=2) + "\n", encoding="utf-8")
        self._log.info("Wrote service definition %s", identity.definition_path)

        loaded, load_error = self._load()
        if load_error:
            self._log.error(load_error)

        return {
            "success": True,
            "type": "darwin",
            "label": identity.name,
            "plist_path": str(identity.definition_path),
            "script_path": str(script_path),
            "loaded": loaded,
            "load_error": load_error,
            "warnings": [w for w in (log_paths.warning, load_error) if w],
        }

    def get_service_status(self, today: date, stale_after_days: int) -> StatusSnapshot:
        """Work out the agent's state and, when installed, the options it runs with."""
        identity = self.identity
        warnings: list[str] = []

        listing = self.list_services()
        if listing is None:
            warnings.append(f"Unable to query {LAUNCHCTL}; assuming the agent is not running.")
        running = listing is not None and identity.name in listing

        script_path = None
        for candidate in (identity.script_path, identity.legacy_script_path):
            if candidate.exists():
                script_path = candidate
                break

        state = select_state(running, script_path is not None, identity.definition_path.exists())
        snapshot = StatusSnapshot(
            state=state,
            definition_path=str(identity.definition_path),
            script_path=str(script_path or identity.script_path),
            warnings=warnings,
        )
        if state not in (ServiceState.RUNNING, ServiceState.INSTALLED_BUT_STOPPED):
            return snapshot

        definition, error = load_service_definition(identity.definition_path)
        if error:
            warnings.append(error)
        snapshot.interval = read_start_interval(definition)
        snapshot.run_at_load = read_run_at_load(definition)

        options, error = read_options_record(identity.options_path)
        if error:
            warnings.append(error)
        if options is not None:
            snapshot.flags = options.effective_flags()
            snapshot.flags_source = "recorded"
        elif script_path is not None:
            command = read_launcher_command(script_path)
            if command is None:
                warnings.append(f"Unable to read launcher {script_path}")
            else:
                snapshot.flags = reconstruct_flags(command)
                snapshot.flags_source = "inferred"

        if script_path is not None:
            snapshot.installed_on = get_install_date(script_path)
        if snapshot.installed_on is not None:
            snapshot.is_stale = is_stale(snapshot.installed_on.date(), today, stale_after_days)
        return snapshot

    def stop_service(self) -> dict[str, Any]:
        """Unload the agent via launchctl; files stay in place."""
        plist_path = self.identity.definition_path
        if not plist_path.exists():
            return {
                "success": False,
                "error": "Autoupdate is not configured. Use `autoupdate start` to begin.",
            }

        result = self._launchctl("unload", str(plist_path))
        if result is None:
            return {"success": False, "error": f"Unable to run {LAUNCHCTL}."}
        if result.returncode != 0:
            error_msg = (result.stderr or result.stdout).strip()
            if not self.is_running():
                return {
                    "success": True,
                    "label": self.identity.name,
                    "note": "Service was not running (already stopped).",
                }
            return {
                "success": False,
                "error": f"Failed to stop service: {error_msg}" if error_msg else "Failed to stop service.",
            }
        return {"success": True, "label": self.identity.name}

    def delete_service(self) -> dict[str, Any]:
        """Unload the agent and remove the plist and install directory. Logs are kept."""
        identity = self.identity
        removed: list[str] = []

        if identity.definition_path.exists():
            result = self._launchctl("unload", str(identity.definition_path))
            if result is not None and result.returncode != 0:
                self._log.info("launchctl unload before delete: %s", result.stderr.strip())
            identity.definition_path.unlink()
            removed.append(str(identity.definition_path))

        if identity.install_dir.exists():
            shutil.rmtree(identity.install_dir)
            removed.append(str(identity.install_dir))

        self._log.info("Deleted %s", ", ".join(removed) or "nothing")
        response: dict[str, Any] = {"success": True, "label": identity.name, "removed": removed}
        if not removed:
            response["note"] = "Autoupdate was not installed; nothing to delete."
        return response
