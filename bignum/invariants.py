"""Invariant checkers for the `BigNumber` representation.

Each function returns True when the invariant holds for ``(digits, negative)``,
and `check_all()` returns the list of violated invariant IDs (empty = all pass).
"""

from __future__ import annotations

from typing import Callable, Sequence

from .digits import BASE


def inv_digits_nonempty(digits: Sequence[int], negative: bool) -> bool:
    return len(digits) > 0


def inv_no_leading_zero(digits: Sequence[int], negative: bool) -> bool:
    if len(digits) <= 1:
        return True
    return digits[-1] != 0


def inv_zero_nonnegative(digits: Sequence[int], negative: bool) -> bool:
    if len(digits) != 1 or digits[0] != 0:
        return True
    return not negative


def inv_digit_range(digits: Sequence[int], negative: bool) -> bool:
    return all(
        isinstance(d, int) and not isinstance(d, bool) and 0 <= d < BASE
        for d in digits
    )


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[Sequence[int], bool], bool]] = {
    "inv_digits_nonempty": inv_digits_nonempty,
    "inv_no_leading_zero": inv_no_leading_zero,
    "inv_zero_nonnegative": inv_zero_nonnegative,
    "inv_digit_range": inv_digit_range,
}


def check_all(digits: Sequence[int], negative: bool) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(digits, negative)
    ]
