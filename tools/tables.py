"""Settings-driven access to the upgrade cost tables.

The pure `upgrades` package ships default tables; deployments may point
`settings.UPGRADE_TABLES` at other files. Tables are loaded once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from upgrades.errors import UpgradeTableError
from upgrades.tables import (
    ArtifactUpgradeTable,
    SkinUpgradeTable,
    load_artifact_table,
    load_skin_table,
)

logger = logging.getLogger(__name__)


def configured_table_path(kind: str) -> Path:
    """Return the configured path for the `artifact` or `skin` table."""

    return Path(settings.UPGRADE_TABLES[kind])


@lru_cache(maxsize=1)
def configured_artifact_table() -> ArtifactUpgradeTable:
    """Return the artifact table named by settings."""

    return load_artifact_table(configured_table_path("artifact"))


@lru_cache(maxsize=1)
def configured_skin_table() -> SkinUpgradeTable:
    """Return the skin table named by settings."""

    return load_skin_table(configured_table_path("skin"))


def load_configured_tables() -> tuple[ArtifactUpgradeTable, SkinUpgradeTable]:
    """Eagerly load both configured tables.

    Raises:
        ImproperlyConfigured: When either table fails to load or validate.
    """

    try:
        return configured_artifact_table(), configured_skin_table()
    except UpgradeTableError as exc:
        logger.error("Rejected upgrade table %s: %s", exc.source or "(unknown)", "; ".join(exc.errors))
        raise ImproperlyConfigured(str(exc)) from exc


def clear_table_cache() -> None:
    """Drop cached tables so the next access reloads from settings."""

    configured_artifact_table.cache_clear()
    configured_skin_table.cache_clear()
