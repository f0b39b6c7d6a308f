"""Utility helpers for farce."""

from farce.utils.text import truncate_string

__all__ = ["truncate_string"]
