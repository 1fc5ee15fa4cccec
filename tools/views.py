"""Views for the artifact and skin calculator tools."""

from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from tools.context_processors import format_title
from tools.forms import (
    ArtifactCalculatorForm,
    ArtifactUpgradeQueryForm,
    SkinCalculatorForm,
    SkinUpgradeQueryForm,
)
from tools.plans import ARTIFACT_SLOTS, build_artifact_plan, build_skin_plan, skin_rows
from tools.tables import configured_artifact_table, configured_skin_table
from upgrades.artifacts import calculate_artifact_upgrade
from upgrades.errors import InvalidArgument
from upgrades.skins import (
    LARGE_CHEST_STONES,
    OTHER_SKIN_UNLOCK_COST,
    SMALL_CHEST_STONES,
    calculate_skin_upgrade,
    get_other_skin_names,
)
from upgrades.tables import ColorTier

logger = logging.getLogger(__name__)


def _bad_request(message: str, *, fields: dict[str, list[str]] | None = None) -> JsonResponse:
    """Return a 400 JSON response carrying an error message."""

    payload: dict[str, object] = {"error": message}
    if fields:
        payload["fields"] = fields
    return JsonResponse(payload, status=400)


def _form_field_errors(form) -> dict[str, list[str]]:
    """Flatten bound form errors into plain strings."""

    return {name: [str(message) for message in messages] for name, messages in form.errors.items()}


@require_GET
def index(request: HttpRequest) -> HttpResponse:
    """Render the tools landing page."""

    return render(request, "tools/index.html", {"page_title": format_title()})


@require_GET
def artifact_calculator(request: HttpRequest) -> HttpResponse:
    """Render the Artifact Chest Calculator for the weapon, book and ring."""

    table = configured_artifact_table()
    form = ArtifactCalculatorForm(request.GET)
    plan = None
    if form.is_valid():
        try:
            plan = build_artifact_plan(form.levels_by_slot(), table=table)
        except InvalidArgument as exc:
            form.add_error(None, str(exc))

    return render(
        request,
        "tools/artifact_calculator.html",
        {
            "page_title": format_title("Artifact Chest Calculator"),
            "form": form,
            "plan": plan,
            "slots": ARTIFACT_SLOTS,
            "tiers": [table[tier] for tier in ColorTier],
        },
    )


@require_GET
def skin_calculator(request: HttpRequest) -> HttpResponse:
    """Render the Skin Upgrade Calculator for every skin row."""

    table = configured_skin_table()
    skins = skin_rows(table=table)
    form = SkinCalculatorForm(request.GET, skins=skins)
    plan = None
    if form.is_valid():
        try:
            plan = build_skin_plan(
                form.levels_by_key(),
                include_unlock_cost=bool(form.cleaned_data.get("include_unlock_cost")),
                table=table,
            )
        except InvalidArgument as exc:
            form.add_error(None, str(exc))

    plan_rows = plan.rows if plan is not None else (None,) * len(skins)
    table_rows = [
        (skin, field, plan_row) for (skin, field), plan_row in zip(form.level_fields(), plan_rows)
    ]

    return render(
        request,
        "tools/skin_calculator.html",
        {
            "page_title": format_title("Skin Upgrade Calculator"),
            "form": form,
            "plan": plan,
            "table_rows": table_rows,
            "unlock_cost": OTHER_SKIN_UNLOCK_COST,
            "small_chest_stones": SMALL_CHEST_STONES,
            "large_chest_stones": LARGE_CHEST_STONES,
        },
    )


@require_GET
def artifact_upgrade_api(request: HttpRequest) -> JsonResponse:
    """Return the artifact upgrade requirements for `?level=N` as JSON."""

    form = ArtifactUpgradeQueryForm(request.GET)
    if not form.is_valid():
        logger.debug("Rejected artifact upgrade query: %s", form.errors.as_json())
        return _bad_request("Invalid query parameters.", fields=_form_field_errors(form))
    try:
        result = calculate_artifact_upgrade(form.cleaned_data["level"], table=configured_artifact_table())
    except InvalidArgument as exc:
        logger.debug("Rejected artifact upgrade level: %s", exc)
        return _bad_request(str(exc))
    return JsonResponse({"level": form.cleaned_data["level"], **result.as_json()})


@require_GET
def skin_upgrade_api(request: HttpRequest) -> JsonResponse:
    """Return the skin upgrade requirements for a skin type and level as JSON."""

    form = SkinUpgradeQueryForm(request.GET)
    if not form.is_valid():
        logger.debug("Rejected skin upgrade query: %s", form.errors.as_json())
        return _bad_request("Invalid query parameters.", fields=_form_field_errors(form))
    try:
        result = calculate_skin_upgrade(
            form.cleaned_data["skin_type"],
            form.cleaned_data["level"],
            include_unlock_cost=bool(form.cleaned_data.get("include_unlock_cost")),
            table=configured_skin_table(),
        )
    except InvalidArgument as exc:
        logger.debug("Rejected skin upgrade level: %s", exc)
        return _bad_request(str(exc))
    return JsonResponse(
        {
            "skinType": form.cleaned_data["skin_type"],
            "level": form.cleaned_data["level"],
            **result.as_json(),
        }
    )


@require_GET
def other_skin_names_api(request: HttpRequest) -> JsonResponse:
    """Return the alphabetically sorted "other" skin names as JSON."""

    return JsonResponse({"names": list(get_other_skin_names(table=configured_skin_table()))})
