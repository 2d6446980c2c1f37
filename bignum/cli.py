"""`bignum-calc`: command line front end for `BigNumber`.

Examples:
    bignum-calc eval 13206478842272655311 + 80250025245863872589
    bignum-calc eval -48084066885301367633 '*' -30477676548372141302
    bignum-calc neg -90000000000000000000000000000
    bignum-calc check scenarios/reference.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

from .errors import ScenarioError
from .number import BigNumber
from .parsing import parse
from .scenarios import load_scenarios, run_scenarios

_log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

OPERATORS: dict[str, Callable[[BigNumber, BigNumber], BigNumber | bool]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
    "<=": lambda a, b: a <= b,
    ">=": lambda a, b: a >= b,
}


def _format(value: BigNumber | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _operand(text: str) -> BigNumber | None:
    result = parse(text)
    if not result.ok:
        print(f"invalid number {text!r}: {result.rejection}", file=sys.stderr)
        return None
    return result.value


def _cmd_eval(args: argparse.Namespace) -> int:
    left = _operand(args.left)
    right = _operand(args.right)
    if left is None or right is None:
        return EXIT_USAGE
    print(_format(OPERATORS[args.op](left, right)))
    return EXIT_OK


def _cmd_neg(args: argparse.Namespace) -> int:
    value = _operand(args.value)
    if value is None:
        return EXIT_USAGE
    print(_format(-value))
    return EXIT_OK


def _cmd_check(args: argparse.Namespace) -> int:
    path = Path(args.file)
    if not path.exists():
        print(f"missing scenario file: {path}", file=sys.stderr)
        return EXIT_USAGE
    try:
        scenarios = load_scenarios(path)
    except ScenarioError as exc:
        print(f"scenario file invalid: {exc}", file=sys.stderr)
        return EXIT_USAGE

    results = run_scenarios(scenarios)
    failed = [r for r in results if not r.passed]
    for r in failed:
        print(f"FAIL {r.id}: {r.detail}")
    print(f"{len(results) - len(failed)}/{len(results)} scenarios passed")
    return EXIT_FAILED if failed else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bignum-calc", description="Exact big-integer arithmetic")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_eval = sub.add_parser("eval", help="Evaluate LEFT OP RIGHT")
    p_eval.add_argument("left", help="Decimal integer")
    p_eval.add_argument("op", choices=sorted(OPERATORS), help="Operator")
    p_eval.add_argument("right", help="Decimal integer")
    p_eval.set_defaults(func=_cmd_eval)

    p_neg = sub.add_parser("neg", help="Negate VALUE")
    p_neg.add_argument("value", help="Decimal integer")
    p_neg.set_defaults(func=_cmd_neg)

    p_check = sub.add_parser("check", help="Run a YAML scenario file")
    p_check.add_argument("file", help="Path to scenario YAML")
    p_check.set_defaults(func=_cmd_check)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    _log.debug("command=%s", args.command)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
