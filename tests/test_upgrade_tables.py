"""Unit tests for cost table parsing, validation and loading."""

from __future__ import annotations

import pytest

from upgrades.errors import UpgradeTableError
from upgrades.tables import (
    ColorTier,
    SkinType,
    default_artifact_table,
    default_skin_table,
    load_artifact_table,
    load_skin_table,
    parse_artifact_table,
    parse_skin_table,
    validate_artifact_payload,
    validate_skin_payload,
)

pytestmark = pytest.mark.unit


def test_packaged_artifact_table_is_valid(artifact_payload: dict) -> None:
    """The shipped artifact table passes validation."""

    result = validate_artifact_payload(artifact_payload)
    assert result.is_valid is True
    assert result.errors == ()


def test_packaged_artifact_table_ranges_and_yields() -> None:
    """Tiers are contiguous from 1 to 100 with decreasing chest yields."""

    table = default_artifact_table()
    assert [(tier.tier, tier.start, tier.end) for tier in table] == [
        (ColorTier.white, 1, 25),
        (ColorTier.green, 26, 50),
        (ColorTier.blue, 51, 70),
        (ColorTier.violet, 71, 85),
        (ColorTier.orange, 86, 100),
    ]
    assert [tier.chest_yield for tier in table] == [12, 7, 4, 3, 2]
    assert table[ColorTier.green].cost_for_level(26) == 10
    assert table[ColorTier.orange].cost_for_level(100) == 44


def test_default_tables_are_cached() -> None:
    """The packaged tables are loaded once per process."""

    assert default_artifact_table() is default_artifact_table()
    assert default_skin_table() is default_skin_table()


def test_color_tier_label() -> None:
    """Tier labels are title-cased values."""

    assert ColorTier.violet.label == "Violet"


def test_artifact_rejects_non_object() -> None:
    """A top-level list is not a table."""

    result = validate_artifact_payload([])
    assert result.is_valid is False
    assert result.errors == ("Artifact table must be a JSON object.",)


def test_artifact_reports_missing_and_unknown_tiers(artifact_payload: dict) -> None:
    """Missing and unrecognized tier keys are both reported."""

    del artifact_payload["chestYields"]["blue"]
    artifact_payload["upgradeCosts"]["gold"] = [1]

    errors = validate_artifact_payload(artifact_payload).errors
    assert "chestYields is missing tiers: ['blue']." in errors
    assert "upgradeCosts has unknown tiers: ['gold']." in errors


def test_artifact_reports_range_gap(artifact_payload: dict) -> None:
    """Ranges must be contiguous."""

    artifact_payload["levelRanges"]["green"]["start"] = 27

    errors = validate_artifact_payload(artifact_payload).errors
    assert "levelRanges.green must start at 26 (got 27)." in errors


def test_artifact_reports_inverted_range(artifact_payload: dict) -> None:
    """A range whose start exceeds its end is rejected."""

    artifact_payload["levelRanges"]["white"] = {"start": 30, "end": 25}

    errors = validate_artifact_payload(artifact_payload).errors
    assert "levelRanges.white start must be <= end." in errors


def test_artifact_reports_short_coverage(artifact_payload: dict) -> None:
    """Ranges must reach the maximum level."""

    artifact_payload["levelRanges"]["orange"]["end"] = 99
    artifact_payload["upgradeCosts"]["orange"] = artifact_payload["upgradeCosts"]["orange"][:14]

    errors = validate_artifact_payload(artifact_payload).errors
    assert errors == ("levelRanges must end at level 100 (got 99).",)


def test_artifact_reports_cost_length_mismatch(artifact_payload: dict) -> None:
    """Each tier needs exactly one cost per level in its range."""

    artifact_payload["upgradeCosts"]["orange"].append(45)

    errors = validate_artifact_payload(artifact_payload).errors
    assert "upgradeCosts.orange must have 15 entries (got 16)." in errors


def test_artifact_reports_negative_costs(artifact_payload: dict) -> None:
    """Costs must be non-negative integers."""

    artifact_payload["upgradeCosts"]["blue"][3] = -1

    errors = validate_artifact_payload(artifact_payload).errors
    assert "upgradeCosts.blue must contain non-negative integers (bad indices: [3])." in errors


@pytest.mark.parametrize("chest_yield", [0, -2, 2.5, True, "3"])
def test_artifact_reports_invalid_yield(artifact_payload: dict, chest_yield: object) -> None:
    """Chest yields must be positive integers."""

    artifact_payload["chestYields"]["violet"] = chest_yield

    errors = validate_artifact_payload(artifact_payload).errors
    assert "chestYields.violet must be a positive integer." in errors


def test_parse_artifact_table_collects_every_error(artifact_payload: dict) -> None:
    """Parsing fails with all problems at once."""

    artifact_payload["chestYields"]["white"] = 0
    artifact_payload["upgradeCosts"]["green"] = "ten"

    with pytest.raises(UpgradeTableError) as excinfo:
        parse_artifact_table(artifact_payload, source="custom.json")

    assert excinfo.value.source == "custom.json"
    assert excinfo.value.errors == (
        "chestYields.white must be a positive integer.",
        "upgradeCosts.green must be a list of integers.",
    )
    assert str(excinfo.value).startswith("Invalid upgrade table custom.json: ")


def test_packaged_skin_table_is_valid(skin_payload: dict) -> None:
    """The shipped skin table passes validation."""

    assert validate_skin_payload(skin_payload).is_valid is True


def test_packaged_skin_table_contents() -> None:
    """Every skin type is present and the default array carries an extra entry."""

    table = default_skin_table()
    assert {skin.skin_type for skin in table.skin_types.values()} == set(SkinType)
    assert len(table[SkinType.default].costs) == 61
    assert all(len(table[skin].costs) == 60 for skin in (SkinType.champion, SkinType.winter, SkinType.other))
    assert table[SkinType.champion].name == "Champion"
    assert table.other_skin_names[0] == "Beach"


def test_skin_reports_missing_and_unknown_types(skin_payload: dict) -> None:
    """Missing and unrecognized skin types are both reported."""

    skin_payload["skinTypes"]["legendary"] = skin_payload["skinTypes"].pop("winter")

    errors = validate_skin_payload(skin_payload).errors
    assert "skinTypes is missing skin types: ['winter']." in errors
    assert "skinTypes has unknown skin types: ['legendary']." in errors


def test_skin_reports_bad_entry_fields(skin_payload: dict) -> None:
    """Name, maxLevel and cost count are checked per skin type."""

    entry = skin_payload["skinTypes"]["champion"]
    entry["name"] = " "
    entry["maxLevel"] = 50
    entry["costs"] = entry["costs"][:59]

    errors = validate_skin_payload(skin_payload).errors
    assert errors == (
        "skinTypes.champion.name must be a non-empty string.",
        "skinTypes.champion.maxLevel must be 60.",
        "skinTypes.champion.costs must have at least 60 entries (got 59).",
    )


@pytest.mark.parametrize(
    ("names", "message"),
    [
        ([], "otherSkinNames must be a non-empty list."),
        ("Beach", "otherSkinNames must be a non-empty list."),
        (["Beach", ""], "otherSkinNames must contain non-empty strings."),
        (["Beach", "Beach"], "otherSkinNames must not contain duplicates."),
        (["Pirate", "Beach"], "otherSkinNames must be sorted alphabetically."),
    ],
)
def test_skin_reports_bad_other_names(skin_payload: dict, names: object, message: str) -> None:
    """The other-skin name list must be a sorted list of unique names."""

    skin_payload["otherSkinNames"] = names

    assert message in validate_skin_payload(skin_payload).errors


def test_parse_skin_table_raises_on_invalid_payload(skin_payload: dict) -> None:
    """Parsing an invalid payload raises UpgradeTableError."""

    del skin_payload["skinTypes"]

    with pytest.raises(UpgradeTableError, match="skinTypes must be an object keyed by skin type"):
        parse_skin_table(skin_payload)


def test_load_tables_from_disk(artifact_payload: dict, skin_payload: dict, write_json) -> None:
    """Tables round through JSON files on disk."""

    skin_payload["otherSkinNames"] = ["Aurora", "Beach"]
    artifact = load_artifact_table(write_json("artifact.json", artifact_payload))
    skins = load_skin_table(write_json("skin.json", skin_payload))

    assert list(artifact) == list(default_artifact_table())
    assert skins.other_skin_names == ("Aurora", "Beach")


def test_load_reports_missing_file(tmp_path) -> None:
    """Unreadable files surface as UpgradeTableError."""

    path = tmp_path / "missing.json"
    with pytest.raises(UpgradeTableError, match="Unable to read") as excinfo:
        load_artifact_table(path)
    assert excinfo.value.source == str(path)


def test_load_reports_invalid_json(tmp_path) -> None:
    """Malformed JSON surfaces as UpgradeTableError with its line number."""

    path = tmp_path / "broken.json"
    path.write_text('{"skinTypes": ', encoding="utf-8")

    with pytest.raises(UpgradeTableError, match="Invalid JSON at line 1"):
        load_skin_table(path)


@pytest.mark.parametrize("payload", [None, [], "table"])
def test_parse_tables_reject_non_objects(payload: object) -> None:
    """Non-object payloads raise UpgradeTableError rather than failing later."""

    with pytest.raises(UpgradeTableError, match="must be a JSON object"):
        parse_artifact_table(payload)
    with pytest.raises(UpgradeTableError, match="must be a JSON object"):
        parse_skin_table(payload)
