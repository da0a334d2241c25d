"""Shared constants for the autoupdate agent and its artefacts."""

AUTOUPDATE_HOME_EXT = ".autoupdate"  # user-level state/config directory suffix

DEFAULT_LABEL = "com.github.domt4.homebrew-autoupdate"

# launchd re-runs the launcher this often (seconds); not configurable
START_INTERVAL_SECS = 86400

# Launcher filenames inside the install directory
SCRIPT_NAME = "updater"
LEGACY_SCRIPT_NAME = "brew_autoupdate"
OPTIONS_NAME = "options.json"

LAUNCHCTL = "/bin/launchctl"

ISSUES_URL = "https://github.com/Homebrew/homebrew-autoupdate/issues"

# Installs older than this are flagged in status output
STALE_AFTER_DAYS = 90
