"""Autoupdate - keeps Homebrew up to date with a per-user launchd agent."""
