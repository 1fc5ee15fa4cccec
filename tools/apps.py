"""App configuration for the tools Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ToolsConfig(AppConfig):
    """Configuration for the `tools` app."""

    name = "tools"

    def ready(self) -> None:
        """Load the configured cost tables so malformed data fails at startup."""

        from tools.tables import load_configured_tables

        load_configured_tables()
