"""Forms for the calculator tools and their JSON endpoints."""

from __future__ import annotations

from django import forms

from tools.plans import ARTIFACT_SLOTS, SkinRow
from upgrades.tables import (
    ARTIFACT_MAX_LEVEL,
    ARTIFACT_MIN_LEVEL,
    SKIN_MAX_LEVEL,
    SKIN_MIN_LEVEL,
    SkinType,
)


def _level_field(*, label: str, minimum: int, maximum: int, help_text: str = "") -> forms.IntegerField:
    """Build an optional level input bounded to a calculator's range."""

    return forms.IntegerField(
        required=False,
        min_value=minimum,
        max_value=maximum,
        label=label,
        help_text=help_text,
        widget=forms.NumberInput(attrs={"min": minimum, "max": maximum}),
    )


class ArtifactCalculatorForm(forms.Form):
    """Validate current artifact levels for the three artifact slots.

    Blank inputs default to level 1.
    """

    def __init__(self, *args, **kwargs) -> None:
        """Add one level field per artifact slot."""

        super().__init__(*args, **kwargs)
        for slot in ARTIFACT_SLOTS:
            self.fields[self.field_name(slot.key)] = _level_field(
                label=slot.label,
                minimum=ARTIFACT_MIN_LEVEL,
                maximum=ARTIFACT_MAX_LEVEL,
                help_text=slot.component_label,
            )

    @staticmethod
    def field_name(slot_key: str) -> str:
        """Return the form field name for an artifact slot."""

        return f"{slot_key}_level"

    def levels_by_slot(self) -> dict[str, int]:
        """Return validated levels keyed by slot (blank -> 1)."""

        levels: dict[str, int] = {}
        for slot in ARTIFACT_SLOTS:
            value = self.cleaned_data.get(self.field_name(slot.key))
            levels[slot.key] = ARTIFACT_MIN_LEVEL if value is None else int(value)
        return levels


class SkinCalculatorForm(forms.Form):
    """Validate current levels for every skin row plus the unlock-cost option.

    Blank inputs default to level 0 (skin not owned).
    """

    include_unlock_cost = forms.BooleanField(
        required=False,
        label='Include unlock cost for "Other" skins (5,000 stones)',
    )

    def __init__(self, *args, skins: tuple[SkinRow, ...], **kwargs) -> None:
        """Add one level field per skin row."""

        super().__init__(*args, **kwargs)
        self.skins = skins
        for skin in skins:
            self.fields[self.field_name(skin.key)] = _level_field(
                label=skin.name,
                minimum=SKIN_MIN_LEVEL,
                maximum=SKIN_MAX_LEVEL,
            )

    @staticmethod
    def field_name(skin_key: str) -> str:
        """Return the form field name for a skin row."""

        return f"level_{skin_key}"

    def levels_by_key(self) -> dict[str, int]:
        """Return validated levels keyed by skin row key (blank -> 0)."""

        levels: dict[str, int] = {}
        for skin in self.skins:
            value = self.cleaned_data.get(self.field_name(skin.key))
            levels[skin.key] = SKIN_MIN_LEVEL if value is None else int(value)
        return levels

    def level_fields(self) -> list[tuple[SkinRow, forms.BoundField]]:
        """Return (skin row, bound field) pairs for template rendering."""

        return [(skin, self[self.field_name(skin.key)]) for skin in self.skins]


class ArtifactUpgradeQueryForm(forms.Form):
    """Validate query parameters for the artifact upgrade JSON endpoint.

    Range checks are left to the calculator so its error message is returned
    verbatim.
    """

    level = forms.IntegerField()


class SkinUpgradeQueryForm(forms.Form):
    """Validate query parameters for the skin upgrade JSON endpoint."""

    skin_type = forms.ChoiceField(choices=[(skin.value, skin.value.title()) for skin in SkinType])
    level = forms.IntegerField()
    include_unlock_cost = forms.BooleanField(required=False)
