"""The `BigNumber` arbitrary-precision signed integer.

Representation: a canonical tuple of base-10 digits (least-significant first)
plus a sign flag. Magnitude work is delegated to ``digits.py``; this module
only does sign dispatch and the operator surface.

Binary operators return new instances. ``+=``, ``-=``, ``*=`` and the
increment/decrement methods replace the receiver's state with the result of
the corresponding binary operation.
"""

from __future__ import annotations

from typing import Iterable, Union

from .config import get_config
from .digits import (
    ONE,
    Digits,
    canonicalize,
    decimal_rejection,
    digits_from_decimal,
    digits_from_int,
    digits_to_decimal,
    digits_to_int,
    is_zero,
    mag_add,
    mag_cmp,
    mag_mul,
    mag_sub_ordered,
)
from .errors import InvalidFormatError
from .invariants import check_all
from .types import Ordering

Operand = Union["BigNumber", int]


class BigNumber:
    """Arbitrary-precision signed integer.

    ``BigNumber()`` is zero; ``BigNumber(int)`` and ``BigNumber(str)`` convert,
    ``BigNumber(BigNumber)`` copies. Malformed strings raise
    ``InvalidFormatError``; use ``parse()`` for a non-raising variant.
    """

    __slots__ = ("_digits", "_negative")

    # Mutable (compound assignment, increment/decrement), so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: BigNumber | int | str = 0) -> None:
        if isinstance(value, BigNumber):
            self._digits, self._negative = value._digits, value._negative
        elif isinstance(value, bool):
            raise TypeError("BigNumber does not accept bool")
        elif isinstance(value, int):
            self._digits, self._negative = digits_from_int(value)
        elif isinstance(value, str):
            reason = decimal_rejection(value, get_config().max_input_digits)
            if reason is not None:
                raise InvalidFormatError(reason, value)
            self._digits, self._negative = digits_from_decimal(value)
        else:
            raise TypeError(f"cannot build BigNumber from {type(value).__name__}")

    @classmethod
    def _from_parts(cls, digits: Digits | list[int], negative: bool) -> BigNumber:
        out = cls.__new__(cls)
        out._digits, out._negative = canonicalize(digits, negative)
        return out

    @classmethod
    def from_digits(cls, digits: Iterable[int], negative: bool = False) -> BigNumber:
        """Build from least-significant-first digits. Raises ValueError on bad digits."""
        raw = list(digits)
        violations = check_all(raw, negative)
        # Leading zeros and a signed zero are fixed by canonicalization.
        violations = [v for v in violations if v not in ("inv_no_leading_zero", "inv_zero_nonnegative")]
        if violations:
            raise ValueError(f"invalid digits: {', '.join(violations)}")
        return cls._from_parts(raw, negative)

    # -- Accessors -----------------------------------------------------------

    @property
    def digits(self) -> Digits:
        """Least-significant-first digits (canonical)."""
        return self._digits

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def is_zero(self) -> bool:
        return is_zero(self._digits)

    def copy(self) -> BigNumber:
        return BigNumber(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> BigNumber:
        return BigNumber(self)

    def _assign(self, other: BigNumber) -> BigNumber:
        self._digits, self._negative = other._digits, other._negative
        return self

    # -- Arithmetic ----------------------------------------------------------

    def __add__(self, other: Operand) -> BigNumber:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if self._negative == rhs._negative:
            return BigNumber._from_parts(mag_add(self._digits, rhs._digits), self._negative)
        if mag_cmp(self._digits, rhs._digits) is not Ordering.LESS:
            return BigNumber._from_parts(mag_sub_ordered(self._digits, rhs._digits), self._negative)
        return BigNumber._from_parts(mag_sub_ordered(rhs._digits, self._digits), rhs._negative)

    def __radd__(self, other: int) -> BigNumber:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: Operand) -> BigNumber:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: int) -> BigNumber:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Operand) -> BigNumber:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigNumber._from_parts(
            mag_mul(self._digits, rhs._digits),
            self._negative != rhs._negative,
        )

    def __rmul__(self, other: int) -> BigNumber:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __neg__(self) -> BigNumber:
        return BigNumber._from_parts(self._digits, not self._negative)

    def __pos__(self) -> BigNumber:
        return BigNumber(self)

    def __abs__(self) -> BigNumber:
        return BigNumber._from_parts(self._digits, False)

    # -- Compound assignment (in place) --------------------------------------

    def __iadd__(self, other: Operand) -> BigNumber:
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __isub__(self, other: Operand) -> BigNumber:
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __imul__(self, other: Operand) -> BigNumber:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    # -- Increment / decrement -----------------------------------------------

    def increment(self) -> BigNumber:
        """Pre-increment: add one in place and return ``self``."""
        return self._assign(self + _ONE)

    def decrement(self) -> BigNumber:
        """Pre-decrement: subtract one in place and return ``self``."""
        return self._assign(self - _ONE)

    def post_increment(self) -> BigNumber:
        """Post-increment: add one in place and return the prior value."""
        snapshot = self.copy()
        self.increment()
        return snapshot

    def post_decrement(self) -> BigNumber:
        """Post-decrement: subtract one in place and return the prior value."""
        snapshot = self.copy()
        self.decrement()
        return snapshot

    # -- Comparison ----------------------------------------------------------

    def _less_than(self, other: BigNumber) -> bool:
        if self._negative != other._negative:
            return self._negative
        if self._negative:
            return mag_cmp(self._digits, other._digits) is Ordering.GREATER
        return mag_cmp(self._digits, other._digits) is Ordering.LESS

    def compare(self, other: Operand) -> Ordering:
        """Three-way signed comparison."""
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare BigNumber with {type(other).__name__}")
        if self._less_than(rhs):
            return Ordering.LESS
        if rhs._less_than(self):
            return Ordering.GREATER
        return Ordering.EQUAL

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._digits == rhs._digits and self._negative == rhs._negative

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._less_than(rhs)

    def __gt__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs._less_than(self)

    def __le__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not rhs._less_than(self)

    def __ge__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not self._less_than(rhs)

    # -- Conversion ----------------------------------------------------------

    def __str__(self) -> str:
        return digits_to_decimal(self._digits, self._negative)

    def __repr__(self) -> str:
        return f"BigNumber({str(self)!r})"

    def __int__(self) -> int:
        return digits_to_int(self._digits, self._negative)

    def __bool__(self) -> bool:
        return not self.is_zero


def _coerce(value: object) -> BigNumber | None:
    if isinstance(value, BigNumber):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigNumber(value)
    return None


_ONE = BigNumber._from_parts(ONE, False)
