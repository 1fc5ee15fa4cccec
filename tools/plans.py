"""Planning helpers for the artifact and skin calculator tools.

This module bridges the static cost tables and the pure calculators into
template-ready rows: one row per artifact slot, one row per skin, plus totals.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from django.utils.text import slugify

from upgrades.artifacts import ArtifactUpgradeResult, calculate_artifact_upgrade
from upgrades.skins import NO_UPGRADE, SkinUpgradeResult, calculate_skin_upgrade
from upgrades.tables import ArtifactUpgradeTable, ColorTier, SkinType, SkinUpgradeTable


@dataclass(frozen=True, slots=True)
class ArtifactSlot:
    """One of a hero's three artifacts and the component it consumes."""

    key: str
    label: str
    component_label: str


ARTIFACT_SLOTS: tuple[ArtifactSlot, ...] = (
    ArtifactSlot(key="weapon", label="Weapon", component_label="Artifact Essences"),
    ArtifactSlot(key="book", label="Book", component_label="Artifact Scrolls"),
    ArtifactSlot(key="ring", label="Ring", component_label="Artifact Metals"),
)


@dataclass(frozen=True, slots=True)
class TierBreakdown:
    """Components and chests needed for one color tier."""

    tier: ColorTier
    components: int
    chests: int


@dataclass(frozen=True, slots=True)
class ArtifactPlanRow:
    """A template-ready artifact slot result.

    Attributes:
        slot: The artifact slot.
        current_level: Level the calculation starts from.
        result: Calculator output for the slot.
        tiers: Breakdown for tiers that still need chests, in upgrade order.
    """

    slot: ArtifactSlot
    current_level: int
    result: ArtifactUpgradeResult
    tiers: tuple[TierBreakdown, ...]

    @property
    def is_maxed(self) -> bool:
        """Return True when the artifact is already at the maximum level."""

        return self.result.is_maxed


@dataclass(frozen=True, slots=True)
class ArtifactPlan:
    """Per-slot artifact results plus chests combined across slots."""

    rows: tuple[ArtifactPlanRow, ...]
    chests_by_tier: Mapping[ColorTier, int]
    total_chests: int


@dataclass(frozen=True, slots=True)
class SkinRow:
    """A selectable skin row for the skin calculator."""

    key: str
    name: str
    skin_type: SkinType


@dataclass(frozen=True, slots=True)
class SkinPlanRow:
    """A template-ready skin result."""

    skin: SkinRow
    current_level: int
    result: SkinUpgradeResult


@dataclass(frozen=True, slots=True)
class SkinPlan:
    """Per-skin results and their totals."""

    rows: tuple[SkinPlanRow, ...]
    totals: SkinUpgradeResult
    include_unlock_cost: bool


def build_artifact_plan(
    levels_by_slot: Mapping[str, int],
    *,
    table: ArtifactUpgradeTable,
) -> ArtifactPlan:
    """Calculate every artifact slot and the combined chest totals.

    Args:
        levels_by_slot: Mapping of slot key (weapon/book/ring) -> current level.
            Missing slots are treated as level 1.
        table: Artifact cost table.

    Returns:
        ArtifactPlan with one row per slot in ARTIFACT_SLOTS order.

    Raises:
        InvalidArgument: When a level is outside 1-100.
    """

    rows: list[ArtifactPlanRow] = []
    combined = {tier: 0 for tier in ColorTier}
    for slot in ARTIFACT_SLOTS:
        level = levels_by_slot.get(slot.key, 1)
        result = calculate_artifact_upgrade(level, table=table)
        for tier in ColorTier:
            combined[tier] += result.chests[tier]
        rows.append(
            ArtifactPlanRow(
                slot=slot,
                current_level=int(level),
                result=result,
                tiers=tuple(
                    TierBreakdown(tier=tier, components=result.components[tier], chests=result.chests[tier])
                    for tier in result.tiers_needed()
                ),
            )
        )
    return ArtifactPlan(
        rows=tuple(rows),
        chests_by_tier=MappingProxyType(combined),
        total_chests=sum(row.result.total_chests for row in rows),
    )


def skin_rows(*, table: SkinUpgradeTable) -> tuple[SkinRow, ...]:
    """Return skin rows in display order: Default, Champion, others, Winter.

    Keys are slugs of the display names. A name whose slug is empty falls
    back to `skin`, and a slug already taken gets a numeric suffix, so every
    row has its own form field.
    """

    used: set[str] = set()

    def row(name: str, skin_type: SkinType) -> SkinRow:
        base = slugify(name) or "skin"
        key = base
        suffix = 2
        while key in used:
            key = f"{base}-{suffix}"
            suffix += 1
        used.add(key)
        return SkinRow(key=key, name=name, skin_type=skin_type)

    return (
        row(table[SkinType.default].name, SkinType.default),
        row(table[SkinType.champion].name, SkinType.champion),
        *(row(name, SkinType.other) for name in table.other_skin_names),
        row(table[SkinType.winter].name, SkinType.winter),
    )


def build_skin_plan(
    levels_by_key: Mapping[str, int],
    *,
    include_unlock_cost: bool,
    table: SkinUpgradeTable,
) -> SkinPlan:
    """Calculate every skin row and the summed totals.

    Rows at level 0 are kept so their cells can show the unlock cost of
    unowned "other" skins, but only owned skins (level 1 or above) count
    towards the totals.

    Args:
        levels_by_key: Mapping of skin row key -> current level. Missing rows
            are treated as level 0.
        include_unlock_cost: Show the unlock cost in unowned "other" skin rows.
        table: Skin cost table.

    Returns:
        SkinPlan with one row per skin in display order.

    Raises:
        InvalidArgument: When a level is outside 0-60.
    """

    rows: list[SkinPlanRow] = []
    totals = NO_UPGRADE
    for skin in skin_rows(table=table):
        level = levels_by_key.get(skin.key, 0)
        result = calculate_skin_upgrade(
            skin.skin_type,
            level,
            include_unlock_cost=include_unlock_cost,
            table=table,
        )
        if level:
            totals = totals + result
        rows.append(SkinPlanRow(skin=skin, current_level=int(level), result=result))
    return SkinPlan(rows=tuple(rows), totals=totals, include_unlock_cost=include_unlock_cost)
