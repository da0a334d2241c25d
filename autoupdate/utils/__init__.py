"""Utility helpers shared by the API and CLI layers."""
