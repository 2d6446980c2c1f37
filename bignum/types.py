"""Data types shared across `bignum`.

- `Ordering` is the three-way comparison result used by the magnitude
  primitives and ``BigNumber.compare``.
- `ParseResult` is the non-raising outcome of ``parse()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, unique
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .number import BigNumber


@unique
class Ordering(IntEnum):
    """Sign of ``a - b``."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing decimal text.

    Exactly one of ``value`` / ``rejection`` is set, selected by ``ok``.
    Rejection reasons: ``empty``, ``sign_only``, ``invalid_char:<index>``,
    ``too_long``.
    """

    ok: bool
    value: BigNumber | None = None
    rejection: str | None = None
