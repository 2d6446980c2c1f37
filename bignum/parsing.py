"""Parsing and serialization for `BigNumber`.

`parse()` never raises on malformed text; it returns a ``ParseResult`` the
caller can branch on. `parse_or_raise()` is the raising form.

Round-trip property (tested): ``number_from_dict(number_to_dict(x)) == x``.
"""

from __future__ import annotations

from typing import Any, Mapping

from .config import BignumConfig, get_config
from .digits import decimal_rejection, digits_from_decimal
from .errors import InvalidFormatError
from .number import BigNumber
from .types import ParseResult


def parse(text: str, *, config: BignumConfig | None = None) -> ParseResult:
    """Parse decimal text (``'-'? [0-9]+``).

    Returns ``ParseResult`` with ``ok=True`` and the value on success, or
    ``ok=False`` with a ``rejection`` reason string.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")
    cfg = config if config is not None else get_config()
    reason = decimal_rejection(text, cfg.max_input_digits)
    if reason is not None:
        return ParseResult(ok=False, rejection=reason)
    digits, negative = digits_from_decimal(text)
    return ParseResult(ok=True, value=BigNumber._from_parts(digits, negative))


def parse_or_raise(text: str, *, config: BignumConfig | None = None) -> BigNumber:
    """Like ``parse()`` but raises on rejection.

    Raises:
        InvalidFormatError: ``text`` is not a decimal integer.
    """
    result = parse(text, config=config)
    if result.ok and result.value is not None:
        return result.value
    raise InvalidFormatError(result.rejection or "", text)


def number_to_dict(value: BigNumber) -> dict[str, Any]:
    """Serialize to a plain dict: ``{"negative": bool, "digits": [lsd, ...]}``."""
    return {"negative": value.negative, "digits": list(value.digits)}


def number_from_dict(d: Mapping[str, Any]) -> BigNumber:
    """Deserialize a dict from ``number_to_dict``. Raises KeyError on missing fields."""
    negative = d["negative"]
    digits = d["digits"]
    if not isinstance(negative, bool):
        raise TypeError(f"'negative' must be bool, got {type(negative).__name__}")
    if not isinstance(digits, (list, tuple)):
        raise TypeError(f"'digits' must be a list, got {type(digits).__name__}")
    return BigNumber.from_digits(digits, negative)
