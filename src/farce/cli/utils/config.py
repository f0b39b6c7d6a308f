"""Configuration utilities for CLI commands."""

from __future__ import annotations

from typing import Any

import typer

from farce.config import FarceSettings, get_settings_for_cli


def load_cli_settings(ctx: typer.Context, **overrides: Any) -> FarceSettings:
    """Load settings honoring the global ``--config`` option and CLI overrides.

    Args:
        ctx: Typer context carrying the options of the main callback
        **overrides: Setting values given on the command line; None is ignored

    Returns:
        Settings with all sources merged
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return get_settings_for_cli(
        config_file=obj.get("config"),
        cli_overrides=overrides or None,
    )
