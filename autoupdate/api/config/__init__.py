"""Configuration for the autoupdate agent."""
