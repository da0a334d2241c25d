"""Render the launchd property list for the agent."""

from ...constants import START_INTERVAL_SECS
from ...templating import render_template
from .LogPaths import LogPaths
from .ServiceIdentity import ServiceIdentity

_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
  <key>Label</key>
  <string>{{ label | e }}</string>
  <key>Program</key>
  <string>{{ script | e }}</string>
  <key>ProgramArguments</key>
  <array>
    <string>{{ script | e }}</string>
  </array>
  <key>RunAtLoad</key>
  <true/>
{% if stderr %}
  <key>StandardErrorPath</key>
  <string>{{ stderr | e }}</string>
{% endif %}
{% if stdout %}
  <key>StandardOutPath</key>
  <string>{{ stdout | e }}</string>
{% endif %}
  <key>StartInterval</key>
  <integer>{{ interval }}</integer>
</dict>
</plist>
"""


def render_service_definition(identity: ServiceIdentity, log_paths: LogPaths) -> str:
    """Plist running the launcher on load and every 24 hours.

    Log keys are left out entirely when no writable log directory was found.
    """
    return render_template(
        _TEMPLATE,
        {
            "label": identity.name,
            "script": str(identity.script_path),
            "stdout": str(log_paths.stdout) if log_paths.stdout else "",
            "stderr": str(log_paths.stderr) if log_paths.stderr else "",
            "interval": START_INTERVAL_SECS,
        },
    )
