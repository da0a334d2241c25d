"""Render a StatusSnapshot as the text shown to the user."""

from datetime import date

from ...constants import ISSUES_URL, STALE_AFTER_DAYS
from ...templating import render_template
from .ServiceState import ServiceState
from .staleness_advisory import staleness_advisory
from .StatusSnapshot import StatusSnapshot

MISSING_DATE = "Unable to determine date of command invocation. Please report this."
MISSING_INTERVAL = "Interval: Not found, maybe using `StartCalendarInterval`"

_INSTALLED = """Autoupdate is installed {{ 'and running' if running else 'but stopped' }}.

{{ 'Options' if running else 'Options at last start' }}:
{{ interval_line }}
{% for flag in flags %}
{{ flag }}
{% endfor %}
{% if run_at_load %}
--immediate
{% endif %}

Autoupdate was initialised on {{ installed_on }}.
{% if advisory %}
{{ advisory }}
{% endif %}
"""

_NOT_CONFIGURED = "Autoupdate is not configured. Use `autoupdate start` to begin.\n"

_UNKNOWN = """Autoupdate cannot determine its status.
Please feel free to file an issue with further information here:
{{ url }}
"""


def render_status(
    snapshot: StatusSnapshot,
    today: date | None = None,
    stale_after_days: int = STALE_AFTER_DAYS,
) -> str:
    """Narrative for exactly one state; never raises on missing data."""
    if snapshot.state is ServiceState.NOT_CONFIGURED:
        return _NOT_CONFIGURED
    if snapshot.state is ServiceState.UNKNOWN:
        return render_template(_UNKNOWN, {"url": ISSUES_URL})

    today = today or date.today()
    installed = snapshot.installed_on.date() if snapshot.installed_on else None
    return render_template(
        _INSTALLED,
        {
            "running": snapshot.running,
            "interval_line": f"Interval: {snapshot.interval}" if snapshot.interval is not None else MISSING_INTERVAL,
            "flags": snapshot.flags,
            "run_at_load": snapshot.run_at_load,
            "installed_on": installed.strftime("%x") if installed else MISSING_DATE,
            "advisory": staleness_advisory(installed, today, stale_after_days),
        },
    )
