"""Shared helpers for farce CLI commands."""
