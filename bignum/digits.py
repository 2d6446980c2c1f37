"""Pure magnitude arithmetic for `bignum`.

Every function is stateless and operates on plain tuples of base-10 digits,
least-significant digit first (``(3, 2, 1)`` is 123). None of them look at a
sign; sign dispatch lives in ``number.py``.

Inputs are expected to be canonical (no most-significant zero digits, except
the single-digit zero ``(0,)``). Length comparison in ``mag_cmp`` relies on it.
"""

from __future__ import annotations

from .types import Ordering

Digits = tuple[int, ...]

BASE: int = 10
ZERO: Digits = (0,)
ONE: Digits = (1,)

# Native signed 64-bit bounds.
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


# -- Canonicalization --------------------------------------------------------

def strip_leading_zeros(digits: list[int] | Digits) -> Digits:
    """Drop most-significant zero digits, keeping at least one digit."""
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return ZERO
    return tuple(digits[:end])


def canonicalize(digits: list[int] | Digits, negative: bool) -> tuple[Digits, bool]:
    """Canonical ``(digits, negative)``: stripped digits, zero never negative.

    Idempotent. This is the only place the zero-sign rule is applied.
    """
    stripped = strip_leading_zeros(digits)
    if stripped == ZERO:
        return ZERO, False
    return stripped, bool(negative)


def is_zero(digits: Digits) -> bool:
    return digits == ZERO


# -- Magnitude primitives ----------------------------------------------------

def mag_add(a: Digits, b: Digits) -> Digits:
    """``|a| + |b|``."""
    out: list[int] = []
    carry = 0
    i = 0
    while i < len(a) or i < len(b) or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        out.append(total % BASE)
        carry = total // BASE
        i += 1
    return tuple(out)


def mag_sub(a: Digits, b: Digits) -> Digits:
    """``|a| - |b|``. Requires ``|a| >= |b|``."""
    if mag_cmp(a, b) is Ordering.LESS:
        raise ValueError("mag_sub requires |a| >= |b|")
    return mag_sub_ordered(a, b)


def mag_sub_ordered(a: Digits, b: Digits) -> Digits:
    """``|a| - |b|`` for callers that already compared the operands.

    No ordering check; ``|a| < |b|`` gives a meaningless result.
    """
    out: list[int] = []
    borrow = 0
    for i, da in enumerate(a):
        db = b[i] if i < len(b) else 0
        diff = da - db - borrow
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        out.append(diff)
    return strip_leading_zeros(out)


def mag_cmp(a: Digits, b: Digits) -> Ordering:
    """Three-way comparison of ``|a|`` and ``|b|``."""
    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return Ordering.GREATER if a[i] > b[i] else Ordering.LESS
    return Ordering.EQUAL


def mag_mul(a: Digits, b: Digits) -> Digits:
    """``|a| * |b|`` by the schoolbook double loop.

    The buffer holds ``len(a) + len(b)`` digits, which always fits the product;
    the unused high positions are stripped at the end.
    """
    buf = [0] * (len(a) + len(b))
    for i, da in enumerate(a):
        carry = 0
        j = 0
        while j < len(b) or carry:
            db = b[j] if j < len(b) else 0
            current = buf[i + j] + da * db + carry
            buf[i + j] = current % BASE
            carry = current // BASE
            j += 1
    return strip_leading_zeros(buf)


# -- Conversion helpers ------------------------------------------------------

def digits_from_int(n: int) -> tuple[Digits, bool]:
    """Split a native int into ``(digits, negative)``.

    Python ints widen on negation, so ``INT64_MIN`` needs no special path.
    """
    negative = n < 0
    magnitude = -n if negative else n
    out: list[int] = []
    while True:
        out.append(magnitude % BASE)
        magnitude //= BASE
        if magnitude == 0:
            break
    return canonicalize(out, negative)


def digits_to_int(digits: Digits, negative: bool = False) -> int:
    value = 0
    for d in reversed(digits):
        value = value * BASE + d
    return -value if negative else value


def decimal_rejection(text: str, max_digits: int = 0) -> str | None:
    """Check ``text`` against ``'-'? [0-9]+``. Returns a rejection reason or None.

    ``max_digits`` bounds the length after the optional sign (0 = unbounded)
    and is checked before any character is scanned.
    """
    if not text:
        return "empty"
    start = 1 if text[0] == "-" else 0
    if start == len(text):
        return "sign_only"
    # Bound checked first so a configured limit also caps the scan below.
    if max_digits and len(text) - start > max_digits:
        return "too_long"
    for i in range(start, len(text)):
        # str.isdigit() accepts non-ASCII digits; only '0'..'9' are allowed.
        if not ("0" <= text[i] <= "9"):
            return f"invalid_char:{i}"
    return None


def digits_from_decimal(text: str) -> tuple[Digits, bool]:
    """Convert already-validated decimal text into canonical ``(digits, negative)``."""
    negative = text[0] == "-"
    start = 1 if negative else 0
    out = [ord(text[i]) - ord("0") for i in range(len(text) - 1, start - 1, -1)]
    return canonicalize(out, negative)


def digits_to_decimal(digits: Digits, negative: bool = False) -> str:
    body = "".join(str(d) for d in reversed(digits))
    return "-" + body if negative else body
