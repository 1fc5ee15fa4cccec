"""Artifact upgrade calculator.

Computes the colored components and chests needed to take an artifact from its
current level to the maximum level, tier by tier.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from upgrades.chests import chests_needed
from upgrades.errors import require_level
from upgrades.tables import (
    ARTIFACT_MAX_LEVEL,
    ARTIFACT_MIN_LEVEL,
    ArtifactUpgradeTable,
    ColorTier,
    default_artifact_table,
)


@dataclass(frozen=True, slots=True)
class ArtifactUpgradeResult:
    """Components and chests remaining to reach the maximum artifact level.

    Attributes:
        components: Components needed per color tier (all five tiers present).
        chests: Chests needed per color tier (all five tiers present).
        total_chests: Sum of `chests` across tiers.
    """

    components: Mapping[ColorTier, int]
    chests: Mapping[ColorTier, int]
    total_chests: int

    @property
    def is_maxed(self) -> bool:
        """Return True when nothing remains to upgrade."""

        return self.total_chests == 0 and not any(self.components.values())

    def tiers_needed(self) -> tuple[ColorTier, ...]:
        """Return tiers with at least one chest needed, in upgrade order."""

        return tuple(tier for tier in ColorTier if self.chests[tier] > 0)

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "components": {tier.value: self.components[tier] for tier in ColorTier},
            "chests": {tier.value: self.chests[tier] for tier in ColorTier},
            "totalChests": self.total_chests,
        }


def _zeros() -> dict[ColorTier, int]:
    return {tier: 0 for tier in ColorTier}


def calculate_artifact_upgrade(
    current_level: object,
    *,
    table: ArtifactUpgradeTable | None = None,
) -> ArtifactUpgradeResult:
    """Calculate components and chests needed to upgrade an artifact to level 100.

    For each tier (white through orange) the per-level costs from
    `max(current_level + 1, tier.start)` through `tier.end` are summed, then
    converted to chests by rounding up against the tier's chest yield. Tiers
    the artifact has already completed contribute nothing.

    Args:
        current_level: Current artifact level (integer, 1-100).
        table: Cost table to use; defaults to the packaged table.

    Returns:
        ArtifactUpgradeResult with all five tiers present.

    Raises:
        InvalidArgument: If `current_level` is not an integer between 1 and 100.
    """

    level = require_level(current_level, minimum=ARTIFACT_MIN_LEVEL, maximum=ARTIFACT_MAX_LEVEL)
    components = _zeros()
    chests = _zeros()
    total_chests = 0

    if level < ARTIFACT_MAX_LEVEL:
        costs_table = table if table is not None else default_artifact_table()
        for tier in costs_table:
            if level >= tier.end:
                continue
            needed = sum(
                tier.cost_for_level(step)
                for step in range(max(level + 1, tier.start), tier.end + 1)
            )
            components[tier.tier] = needed
            if needed > 0:
                tier_chests = chests_needed(needed, tier.chest_yield)
                chests[tier.tier] = tier_chests
                total_chests += tier_chests

    return ArtifactUpgradeResult(
        components=MappingProxyType(components),
        chests=MappingProxyType(chests),
        total_chests=total_chests,
    )
