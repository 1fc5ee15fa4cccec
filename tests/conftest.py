"""Pytest fixtures shared across unit and Django integration tests."""

from __future__ import annotations

import copy
import json
from collections.abc import Sequence

import pytest

from upgrades.tables import DEFAULT_ARTIFACT_TABLE_PATH, DEFAULT_SKIN_TABLE_PATH


def _read(path) -> dict:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


_ARTIFACT_PAYLOAD = _read(DEFAULT_ARTIFACT_TABLE_PATH)
_SKIN_PAYLOAD = _read(DEFAULT_SKIN_TABLE_PATH)


@pytest.fixture
def artifact_payload() -> dict:
    """Return a mutable copy of the packaged artifact-upgrades payload."""

    return copy.deepcopy(_ARTIFACT_PAYLOAD)


@pytest.fixture
def skin_payload() -> dict:
    """Return a mutable copy of the packaged skin-upgrades payload."""

    return copy.deepcopy(_SKIN_PAYLOAD)


@pytest.fixture
def write_json(tmp_path):
    """Return a helper that writes a payload to a temporary JSON file."""

    def _write(name: str, payload: object):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite must be runnable by intent:
    - `unit`: pure, fast tests with no Django request/response cycle.
    - `integration`: tests touching Django views, settings, commands, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
