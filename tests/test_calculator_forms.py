"""Tests for calculator form validation and defaults."""

from __future__ import annotations

import pytest

from tools.forms import (
    ArtifactCalculatorForm,
    ArtifactUpgradeQueryForm,
    SkinCalculatorForm,
    SkinUpgradeQueryForm,
)
from tools.plans import skin_rows
from upgrades.tables import default_skin_table, parse_skin_table

pytestmark = pytest.mark.integration


def test_artifact_form_blank_levels_default_to_one() -> None:
    """Blank artifact inputs are treated as level 1."""

    form = ArtifactCalculatorForm({"weapon_level": "80"})

    assert form.is_valid()
    assert form.levels_by_slot() == {"weapon": 80, "book": 1, "ring": 1}


@pytest.mark.parametrize("value", ["0", "101", "abc"])
def test_artifact_form_rejects_out_of_range_levels(value: str) -> None:
    """Levels outside 1-100 fail field validation."""

    form = ArtifactCalculatorForm({"ring_level": value})

    assert not form.is_valid()
    assert "ring_level" in form.errors


def test_skin_form_has_one_field_per_skin() -> None:
    """Fields are generated from the skin rows."""

    skins = skin_rows(table=default_skin_table())
    form = SkinCalculatorForm({}, skins=skins)

    assert "level_default" in form.fields
    assert "level_masquerade" in form.fields
    assert "include_unlock_cost" in form.fields
    assert [skin.key for skin, _field in form.level_fields()] == [skin.key for skin in skins]


def test_skin_form_blank_levels_default_to_zero() -> None:
    """Blank skin inputs are treated as level 0."""

    skins = skin_rows(table=default_skin_table())
    form = SkinCalculatorForm({"level_winter": "12", "include_unlock_cost": "on"}, skins=skins)

    assert form.is_valid()
    levels = form.levels_by_key()
    assert levels["winter"] == 12
    assert levels["default"] == 0
    assert form.cleaned_data["include_unlock_cost"] is True


def test_skin_form_rejects_level_above_sixty() -> None:
    """Skin levels cap at 60."""

    form = SkinCalculatorForm({"level_pirate": "61"}, skins=skin_rows(table=default_skin_table()))

    assert not form.is_valid()
    assert "level_pirate" in form.errors


def test_query_forms_require_their_fields() -> None:
    """API query forms report missing parameters."""

    artifact = ArtifactUpgradeQueryForm({})
    skin = SkinUpgradeQueryForm({"skin_type": "gold", "level": "3"})

    assert not artifact.is_valid()
    assert "level" in artifact.errors
    assert not skin.is_valid()
    assert "skin_type" in skin.errors


def test_skin_form_keeps_a_field_for_every_colliding_name(skin_payload: dict) -> None:
    """Names that slug alike still get one input each."""

    skin_payload["otherSkinNames"] = ["Lunar New Year", "Lunar-New-Year"]
    skins = skin_rows(table=parse_skin_table(skin_payload))
    form = SkinCalculatorForm({"level_lunar-new-year": "3", "level_lunar-new-year-2": "7"}, skins=skins)

    assert len(form.fields) == len(skins) + 1
    assert form.is_valid()
    levels = form.levels_by_key()
    assert (levels["lunar-new-year"], levels["lunar-new-year-2"]) == (3, 7)
