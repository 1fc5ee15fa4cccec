"""Round-up conversion from component/stone amounts to whole chests."""

from __future__ import annotations


def chests_needed(amount: int, per_chest: int) -> int:
    """Return how many chests cover `amount` when each yields `per_chest`.

    Uses integer ceiling division so exact multiples never drift by one.

    Raises:
        ValueError: When `per_chest` is not positive.
    """

    if per_chest <= 0:
        raise ValueError(f"per_chest must be positive, got {per_chest!r}.")
    if amount <= 0:
        return 0
    return -(-amount // per_chest)
