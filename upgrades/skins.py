"""Skin upgrade calculator.

Computes the skin stones and chest counts needed to take a skin from its
current level to the maximum level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from upgrades.chests import chests_needed
from upgrades.errors import InvalidArgument, require_level
from upgrades.tables import (
    SKIN_MAX_LEVEL,
    SKIN_MIN_LEVEL,
    SkinType,
    SkinUpgradeTable,
    default_skin_table,
)

OTHER_SKIN_UNLOCK_COST: Final[int] = 5000
SMALL_CHEST_STONES: Final[int] = 10
LARGE_CHEST_STONES: Final[int] = 150


@dataclass(frozen=True, slots=True)
class SkinUpgradeResult:
    """Stones and chest counts for a skin upgrade."""

    stones: int
    small_chests: int
    large_chests: int

    @classmethod
    def for_stones(cls, stones: int) -> SkinUpgradeResult:
        """Build a result by converting a stone amount to chest counts."""

        return cls(
            stones=stones,
            small_chests=chests_needed(stones, SMALL_CHEST_STONES),
            large_chests=chests_needed(stones, LARGE_CHEST_STONES),
        )

    def __add__(self, other: SkinUpgradeResult) -> SkinUpgradeResult:
        if not isinstance(other, SkinUpgradeResult):
            return NotImplemented
        return SkinUpgradeResult(
            stones=self.stones + other.stones,
            small_chests=self.small_chests + other.small_chests,
            large_chests=self.large_chests + other.large_chests,
        )

    def as_json(self) -> dict[str, int]:
        """Return a JSON-serializable representation."""

        return {
            "stones": self.stones,
            "smallChests": self.small_chests,
            "largeChests": self.large_chests,
        }


NO_UPGRADE: Final[SkinUpgradeResult] = SkinUpgradeResult(stones=0, small_chests=0, large_chests=0)


def coerce_skin_type(skin_type: SkinType | str) -> SkinType:
    """Return a SkinType for an enum member or its string value.

    Raises:
        InvalidArgument: For unknown skin types.
    """

    if isinstance(skin_type, SkinType):
        return skin_type
    try:
        return SkinType(skin_type)
    except ValueError:
        raise InvalidArgument(f"Unknown skin type: {skin_type!r}") from None


def calculate_skin_upgrade(
    skin_type: SkinType | str,
    current_level: object,
    *,
    include_unlock_cost: bool = False,
    table: SkinUpgradeTable | None = None,
) -> SkinUpgradeResult:
    """Calculate stones and chests needed to upgrade a skin to level 60.

    Level 0 means the skin is not owned: the result is zero, except for
    "other" skins with `include_unlock_cost`, which report the one-time unlock
    cost. Otherwise every per-level cost from `current_level` to the end of the
    skin type's cost array is summed.

    Args:
        skin_type: Skin category (enum member or value).
        current_level: Current skin level (integer, 0-60).
        include_unlock_cost: Report the unlock cost for unowned "other" skins.
        table: Cost table to use; defaults to the packaged table.

    Returns:
        SkinUpgradeResult with stones and small/large chest counts.

    Raises:
        InvalidArgument: If `current_level` is not an integer between 0 and 60,
            or the skin type is unknown.
    """

    level = require_level(current_level, minimum=SKIN_MIN_LEVEL, maximum=SKIN_MAX_LEVEL)
    kind = coerce_skin_type(skin_type)

    if level == SKIN_MIN_LEVEL:
        if kind is SkinType.other and include_unlock_cost:
            return SkinUpgradeResult.for_stones(OTHER_SKIN_UNLOCK_COST)
        return NO_UPGRADE
    if level == SKIN_MAX_LEVEL:
        return NO_UPGRADE

    costs_table = table if table is not None else default_skin_table()
    # Arrays run past index 59 for some skin types; sum to the end as stored.
    stones = sum(costs_table[kind].costs[level:])
    return SkinUpgradeResult.for_stones(stones)


def get_other_skin_names(*, table: SkinUpgradeTable | None = None) -> tuple[str, ...]:
    """Return the alphabetically sorted display names of "other" skins."""

    costs_table = table if table is not None else default_skin_table()
    return costs_table.other_skin_names
