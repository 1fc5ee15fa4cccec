"""Error types and the shared level precondition for upgrade calculators."""

from __future__ import annotations

import math
from numbers import Integral


class InvalidArgument(ValueError):
    """Raised when a calculator receives an out-of-range or non-integer input."""


class UpgradeTableError(ValueError):
    """Raised when a cost table fails schema validation at load time.

    Attributes:
        errors: Every validation message collected for the table.
    """

    def __init__(self, errors: tuple[str, ...] | list[str], *, source: str | None = None) -> None:
        self.errors = tuple(errors)
        self.source = source
        prefix = f"Invalid upgrade table {source}" if source else "Invalid upgrade table"
        super().__init__(f"{prefix}: " + "; ".join(self.errors))


def require_level(value: object, *, minimum: int, maximum: int) -> int:
    """Return `value` as an int when it is an integer level within bounds.

    Integral floats (e.g. `80.0`) are accepted as the integer they denote.
    Booleans, NaN, non-integral floats and non-numbers are rejected.

    Args:
        value: Candidate level.
        minimum: Lowest accepted level (inclusive).
        maximum: Highest accepted level (inclusive).

    Returns:
        The validated level.

    Raises:
        InvalidArgument: When the value is not an integer in range.
    """

    message = f"Current level must be an integer between {minimum} and {maximum} inclusive"
    if isinstance(value, bool):
        raise InvalidArgument(message)
    if isinstance(value, Integral):
        level = int(value)
    elif isinstance(value, float) and math.isfinite(value) and value.is_integer():
        level = int(value)
    else:
        raise InvalidArgument(message)
    if level < minimum or level > maximum:
        raise InvalidArgument(message)
    return level
