"""`bignum`: arbitrary-precision signed integers in pure Python.

Values are stored as canonical base-10 digit tuples (least-significant first)
plus a sign flag:
- no most-significant zero digits except the single digit zero,
- zero is never negative,
- schoolbook add/subtract/multiply with explicit carry and borrow.

Public API:
- `BigNumber` (``+ - *``, unary ``-``, comparisons, ``+= -= *=``,
  ``increment()`` / ``post_increment()`` / ``decrement()`` / ``post_decrement()``)
- `parse(text) -> ParseResult` (never raises on malformed text)
- `parse_or_raise(text) -> BigNumber` (raises ``InvalidFormatError``)
"""

from .config import BignumConfig, get_config, load_config
from .errors import BigNumberError, InvalidFormatError, ScenarioError
from .number import BigNumber
from .parsing import number_from_dict, number_to_dict, parse, parse_or_raise
from .types import Ordering, ParseResult

__all__ = [
    "BigNumber",
    "parse",
    "parse_or_raise",
    "number_to_dict",
    "number_from_dict",
    "Ordering",
    "ParseResult",
    "BignumConfig",
    "get_config",
    "load_config",
    "BigNumberError",
    "InvalidFormatError",
    "ScenarioError",
]
