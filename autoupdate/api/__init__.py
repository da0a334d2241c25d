"""Autoupdate API - command functions returning StageResult objects."""
