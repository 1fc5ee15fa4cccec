"""Static cost tables for artifact and skin upgrades.

Tables are stored as JSON (see `upgrades/data/`) and parsed into frozen,
enum-keyed records. Every schema problem is collected before a table is
rejected, so a malformed file reports all of its errors at once.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, cast

from upgrades.errors import UpgradeTableError

logger = logging.getLogger(__name__)

DATA_DIR: Final[Path] = Path(__file__).resolve().parent / "data"
DEFAULT_ARTIFACT_TABLE_PATH: Final[Path] = DATA_DIR / "artifact-upgrades.json"
DEFAULT_SKIN_TABLE_PATH: Final[Path] = DATA_DIR / "skin-upgrades.json"

ARTIFACT_MIN_LEVEL: Final[int] = 1
ARTIFACT_MAX_LEVEL: Final[int] = 100
SKIN_MIN_LEVEL: Final[int] = 0
SKIN_MAX_LEVEL: Final[int] = 60


class ColorTier(Enum):
    """Artifact color tiers, declared in upgrade order."""

    white = "white"
    green = "green"
    blue = "blue"
    violet = "violet"
    orange = "orange"

    @property
    def label(self) -> str:
        """Return the display label for the tier."""

        return self.value.title()


class SkinType(Enum):
    """Skin cost categories."""

    default = "default"
    champion = "champion"
    winter = "winter"
    other = "other"


@dataclass(frozen=True, slots=True)
class ArtifactTier:
    """Level range, per-level costs and chest yield for one color tier.

    Attributes:
        tier: The color tier this record describes.
        start: First level in the tier.
        end: Last level in the tier (inclusive).
        costs: Per-level costs; index `level - start` is the cost for `level`.
        chest_yield: Components produced by one chest of this tier.
    """

    tier: ColorTier
    start: int
    end: int
    costs: tuple[int, ...]
    chest_yield: int

    def cost_for_level(self, level: int) -> int:
        """Return the cost attributed to `level` within this tier."""

        return self.costs[level - self.start]


@dataclass(frozen=True, slots=True)
class ArtifactUpgradeTable:
    """Immutable artifact cost table keyed by color tier."""

    tiers: Mapping[ColorTier, ArtifactTier]

    def __iter__(self) -> Iterator[ArtifactTier]:
        return (self.tiers[tier] for tier in ColorTier)

    def __getitem__(self, tier: ColorTier) -> ArtifactTier:
        return self.tiers[tier]


@dataclass(frozen=True, slots=True)
class SkinTypeCosts:
    """Per-level stone costs for one skin type."""

    skin_type: SkinType
    name: str
    max_level: int
    costs: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class SkinUpgradeTable:
    """Immutable skin cost table keyed by skin type."""

    skin_types: Mapping[SkinType, SkinTypeCosts]
    other_skin_names: tuple[str, ...]

    def __getitem__(self, skin_type: SkinType) -> SkinTypeCosts:
        return self.skin_types[skin_type]


@dataclass(frozen=True, slots=True)
class TableValidationResult:
    """Validation result for a decoded table payload.

    Args:
        is_valid: True when no errors exist.
        errors: Every schema violation found.
    """

    is_valid: bool
    errors: tuple[str, ...] = ()


def _is_int(value: object) -> bool:
    """Return True for real integers (booleans excluded)."""

    return isinstance(value, int) and not isinstance(value, bool)


def _validate_costs(costs: object, *, label: str, errors: list[str]) -> bool:
    """Append errors for a cost array; return True when it is a list of non-negative ints."""

    if not isinstance(costs, list):
        errors.append(f"{label} must be a list of integers.")
        return False
    bad = [idx for idx, cost in enumerate(costs) if not _is_int(cost) or cost < 0]
    if bad:
        errors.append(f"{label} must contain non-negative integers (bad indices: {bad[:5]}).")
        return False
    return True


def _tier_section(payload: Mapping[str, Any], key: str, errors: list[str]) -> Mapping[str, Any]:
    """Return a per-tier section, recording missing and unknown tier keys."""

    section = payload.get(key)
    if not isinstance(section, dict):
        errors.append(f"{key} must be an object keyed by color tier.")
        return {}
    expected = {tier.value for tier in ColorTier}
    missing = [tier.value for tier in ColorTier if tier.value not in section]
    if missing:
        errors.append(f"{key} is missing tiers: {missing}.")
    unknown = sorted(set(section) - expected)
    if unknown:
        errors.append(f"{key} has unknown tiers: {unknown}.")
    return section


def validate_artifact_payload(payload: object) -> TableValidationResult:
    """Validate a decoded artifact-upgrades payload.

    Args:
        payload: Decoded JSON object with `levelRanges`, `upgradeCosts` and
            `chestYields` sections.

    Returns:
        TableValidationResult containing every error found.
    """

    errors: list[str] = []
    if not isinstance(payload, dict):
        return TableValidationResult(is_valid=False, errors=("Artifact table must be a JSON object.",))

    ranges = _tier_section(payload, "levelRanges", errors)
    costs = _tier_section(payload, "upgradeCosts", errors)
    yields = _tier_section(payload, "chestYields", errors)

    expected_start = ARTIFACT_MIN_LEVEL
    for tier in ColorTier:
        name = tier.value
        level_range = ranges.get(name)
        start = end = None
        if level_range is not None:
            if not isinstance(level_range, dict):
                errors.append(f"levelRanges.{name} must be an object with start and end.")
            else:
                start, end = level_range.get("start"), level_range.get("end")
                if not _is_int(start) or not _is_int(end):
                    errors.append(f"levelRanges.{name} start and end must be integers.")
                    start = end = None
                elif start > end:
                    errors.append(f"levelRanges.{name} start must be <= end.")
                    start = end = None
                elif start != expected_start:
                    errors.append(
                        f"levelRanges.{name} must start at {expected_start} (got {start})."
                    )
        if end is not None:
            expected_start = end + 1

        tier_costs = costs.get(name)
        if tier_costs is not None:
            costs_ok = _validate_costs(tier_costs, label=f"upgradeCosts.{name}", errors=errors)
            if costs_ok and start is not None and end is not None and len(tier_costs) != end - start + 1:
                errors.append(
                    f"upgradeCosts.{name} must have {end - start + 1} entries (got {len(tier_costs)})."
                )

        chest_yield = yields.get(name)
        if chest_yield is not None and (not _is_int(chest_yield) or chest_yield <= 0):
            errors.append(f"chestYields.{name} must be a positive integer.")

    if expected_start != ARTIFACT_MAX_LEVEL + 1 and not errors:
        errors.append(f"levelRanges must end at level {ARTIFACT_MAX_LEVEL} (got {expected_start - 1}).")

    return TableValidationResult(is_valid=not errors, errors=tuple(errors))


def validate_skin_payload(payload: object) -> TableValidationResult:
    """Validate a decoded skin-upgrades payload.

    Args:
        payload: Decoded JSON object with `skinTypes` and `otherSkinNames`.

    Returns:
        TableValidationResult containing every error found.
    """

    errors: list[str] = []
    if not isinstance(payload, dict):
        return TableValidationResult(is_valid=False, errors=("Skin table must be a JSON object.",))

    skin_types = payload.get("skinTypes")
    if not isinstance(skin_types, dict):
        errors.append("skinTypes must be an object keyed by skin type.")
        skin_types = {}
    else:
        missing = [skin.value for skin in SkinType if skin.value not in skin_types]
        if missing:
            errors.append(f"skinTypes is missing skin types: {missing}.")
        unknown = sorted(set(skin_types) - {skin.value for skin in SkinType})
        if unknown:
            errors.append(f"skinTypes has unknown skin types: {unknown}.")

    for skin in SkinType:
        entry = skin_types.get(skin.value)
        if entry is None:
            continue
        label = f"skinTypes.{skin.value}"
        if not isinstance(entry, dict):
            errors.append(f"{label} must be an object.")
            continue
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"{label}.name must be a non-empty string.")
        max_level = entry.get("maxLevel")
        if not _is_int(max_level) or max_level != SKIN_MAX_LEVEL:
            errors.append(f"{label}.maxLevel must be {SKIN_MAX_LEVEL}.")
        entry_costs = entry.get("costs")
        if _validate_costs(entry_costs, label=f"{label}.costs", errors=errors) and len(entry_costs) < SKIN_MAX_LEVEL:
            errors.append(
                f"{label}.costs must have at least {SKIN_MAX_LEVEL} entries (got {len(entry_costs)})."
            )

    names = payload.get("otherSkinNames")
    if not isinstance(names, list) or not names:
        errors.append("otherSkinNames must be a non-empty list.")
    elif not all(isinstance(item, str) and item.strip() for item in names):
        errors.append("otherSkinNames must contain non-empty strings.")
    else:
        if len(set(names)) != len(names):
            errors.append("otherSkinNames must not contain duplicates.")
        if names != sorted(names):
            errors.append("otherSkinNames must be sorted alphabetically.")

    return TableValidationResult(is_valid=not errors, errors=tuple(errors))


def parse_artifact_table(payload: object, *, source: str | None = None) -> ArtifactUpgradeTable:
    """Validate and build an ArtifactUpgradeTable from a decoded payload.

    Raises:
        UpgradeTableError: When the payload violates the schema.
    """

    result = validate_artifact_payload(payload)
    if not result.is_valid:
        raise UpgradeTableError(result.errors, source=source)
    data = cast(dict[str, Any], payload)
    tiers = {
        tier: ArtifactTier(
            tier=tier,
            start=int(data["levelRanges"][tier.value]["start"]),
            end=int(data["levelRanges"][tier.value]["end"]),
            costs=tuple(int(cost) for cost in data["upgradeCosts"][tier.value]),
            chest_yield=int(data["chestYields"][tier.value]),
        )
        for tier in ColorTier
    }
    return ArtifactUpgradeTable(tiers=MappingProxyType(tiers))


def parse_skin_table(payload: object, *, source: str | None = None) -> SkinUpgradeTable:
    """Validate and build a SkinUpgradeTable from a decoded payload.

    Raises:
        UpgradeTableError: When the payload violates the schema.
    """

    result = validate_skin_payload(payload)
    if not result.is_valid:
        raise UpgradeTableError(result.errors, source=source)
    data = cast(dict[str, Any], payload)
    skin_types = {
        skin: SkinTypeCosts(
            skin_type=skin,
            name=str(data["skinTypes"][skin.value]["name"]),
            max_level=int(data["skinTypes"][skin.value]["maxLevel"]),
            costs=tuple(int(cost) for cost in data["skinTypes"][skin.value]["costs"]),
        )
        for skin in SkinType
    }
    return SkinUpgradeTable(
        skin_types=MappingProxyType(skin_types),
        other_skin_names=tuple(str(name) for name in data["otherSkinNames"]),
    )


def _read_json(path: Path) -> object:
    """Read and decode a JSON table file."""

    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise UpgradeTableError((f"Unable to read {path}: {exc.strerror or exc}.",), source=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise UpgradeTableError((f"Invalid JSON at line {exc.lineno}: {exc.msg}.",), source=str(path)) from exc


def load_artifact_table(path: Path | str) -> ArtifactUpgradeTable:
    """Load and validate an artifact-upgrades JSON file.

    Args:
        path: Location of the JSON file.

    Returns:
        The parsed ArtifactUpgradeTable.

    Raises:
        UpgradeTableError: When the file cannot be read or fails validation.
    """

    path = Path(path)
    table = parse_artifact_table(_read_json(path), source=str(path))
    logger.info("Loaded artifact upgrade table from %s", path)
    return table


def load_skin_table(path: Path | str) -> SkinUpgradeTable:
    """Load and validate a skin-upgrades JSON file.

    Args:
        path: Location of the JSON file.

    Returns:
        The parsed SkinUpgradeTable.

    Raises:
        UpgradeTableError: When the file cannot be read or fails validation.
    """

    path = Path(path)
    table = parse_skin_table(_read_json(path), source=str(path))
    logger.info("Loaded skin upgrade table from %s (%d other skins)", path, len(table.other_skin_names))
    return table


@lru_cache(maxsize=1)
def default_artifact_table() -> ArtifactUpgradeTable:
    """Return the packaged artifact table, loaded once per process."""

    return load_artifact_table(DEFAULT_ARTIFACT_TABLE_PATH)


@lru_cache(maxsize=1)
def default_skin_table() -> SkinUpgradeTable:
    """Return the packaged skin table, loaded once per process."""

    return load_skin_table(DEFAULT_SKIN_TABLE_PATH)
