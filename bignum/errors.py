"""Exception types for `bignum`.

``parse()`` reports malformed text through ``ParseResult``; these exceptions
are for callers that prefer raising (``parse_or_raise()`` and the
``BigNumber(str)`` constructor) and for scenario-file validation.
"""

from __future__ import annotations


class BigNumberError(Exception):
    """Base class for all `bignum` errors."""


class InvalidFormatError(BigNumberError, ValueError):
    """Raised when text is not a decimal integer (``'-'? [0-9]+``)."""

    def __init__(self, reason: str, text: str = "") -> None:
        self.reason = reason
        self.text = text
        shown = text if len(text) <= 40 else text[:37] + "..."
        super().__init__(f"invalid decimal integer {shown!r}: {reason}")


class ScenarioError(BigNumberError):
    """Raised when a scenario file is malformed."""
