"""
YAML scenario files: fixed-input checks run against `BigNumber`.

Fail-closed loading:
- checks schema/version + required fields
- checks uniqueness of scenario ids
- checks op names and argument counts

Running a scenario never raises for bad number text in its arguments; it
produces a failed ``ScenarioResult`` instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import yaml

from .errors import ScenarioError
from .number import BigNumber
from .parsing import parse

_log = logging.getLogger(__name__)

SCHEMA = "bignum/scenarios/v1"

_BINARY: dict[str, Callable[[BigNumber, BigNumber], BigNumber]] = {
    "add": lambda a, b: a + b,
    "sub": lambda a, b: a - b,
    "mul": lambda a, b: a * b,
}

_COMPARE: dict[str, Callable[[BigNumber, BigNumber], bool]] = {
    "eq": lambda a, b: a == b,
    "ne": lambda a, b: a != b,
    "lt": lambda a, b: a < b,
    "gt": lambda a, b: a > b,
    "le": lambda a, b: a <= b,
    "ge": lambda a, b: a >= b,
}

_STEP: dict[str, Callable[[BigNumber], BigNumber]] = {
    "pre_inc": BigNumber.increment,
    "pre_dec": BigNumber.decrement,
    "post_inc": BigNumber.post_increment,
    "post_dec": BigNumber.post_decrement,
}

# op -> number of args
OP_ARITY: dict[str, int] = {
    **{op: 2 for op in _BINARY},
    **{op: 2 for op in _COMPARE},
    **{op: 1 for op in _STEP},
    "neg": 1,
    "format": 1,
    "reject": 1,
}


@dataclass(frozen=True)
class Scenario:
    id: str
    op: str
    args: tuple[str, ...]
    expect: str | bool
    expect_after: str | None = None


@dataclass(frozen=True)
class ScenarioResult:
    id: str
    passed: bool
    detail: str = ""


def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ScenarioError(f"{name} must be a mapping")
    return obj


def _require_list(obj: Any, *, name: str) -> list[Any]:
    if not isinstance(obj, list):
        raise ScenarioError(f"{name} must be a list")
    return obj


def _require_str(obj: Any, *, name: str) -> str:
    if not isinstance(obj, str) or not obj.strip():
        raise ScenarioError(f"{name} must be a non-empty string")
    return obj.strip()


def _require_quoted(obj: Any, *, name: str) -> str:
    # YAML reads unquoted 010 as 8 and 0x10 as 16; number text must stay text.
    if not isinstance(obj, str):
        raise ScenarioError(f"{name} must be a quoted string, got {type(obj).__name__}")
    return obj


def _scenario_from_obj(obj: Any, idx: int) -> Scenario:
    entry = _require_mapping(obj, name=f"scenarios[{idx}]")
    sid = _require_str(entry.get("id"), name=f"scenarios[{idx}].id")
    op = _require_str(entry.get("op"), name=f"scenarios[{idx}].op")
    if op not in OP_ARITY:
        raise ScenarioError(f"scenarios[{idx}].op unknown: {op}")

    raw_args = _require_list(entry.get("args"), name=f"scenarios[{idx}].args")
    if len(raw_args) != OP_ARITY[op]:
        raise ScenarioError(f"scenarios[{idx}].args: {op} takes {OP_ARITY[op]} argument(s), got {len(raw_args)}")
    args = [_require_quoted(a, name=f"scenarios[{idx}].args[{i}]") for i, a in enumerate(raw_args)]

    if "expect" not in entry:
        raise ScenarioError(f"scenarios[{idx}].expect is required")
    expect = entry["expect"]
    if op in _COMPARE:
        if not isinstance(expect, bool):
            raise ScenarioError(f"scenarios[{idx}].expect must be a bool for {op}")
    else:
        expect = _require_quoted(expect, name=f"scenarios[{idx}].expect")

    expect_after = entry.get("expect_after")
    if expect_after is not None:
        if op not in _STEP:
            raise ScenarioError(f"scenarios[{idx}].expect_after is only valid for increment/decrement ops")
        expect_after = _require_quoted(expect_after, name=f"scenarios[{idx}].expect_after")

    return Scenario(id=sid, op=op, args=tuple(args), expect=expect, expect_after=expect_after)


def scenarios_from_obj(root_obj: Any) -> list[Scenario]:
    """Validate an already-decoded scenario document."""
    root = _require_mapping(root_obj, name="document")
    schema = _require_str(root.get("schema"), name="schema")
    if schema != SCHEMA:
        raise ScenarioError(f"unsupported schema: {schema}")

    out: list[Scenario] = []
    seen_ids: set[str] = set()
    for idx, obj in enumerate(_require_list(root.get("scenarios"), name="scenarios")):
        scenario = _scenario_from_obj(obj, idx)
        if scenario.id in seen_ids:
            raise ScenarioError(f"duplicate scenario id: {scenario.id}")
        seen_ids.add(scenario.id)
        out.append(scenario)
    return out


def load_scenarios(path: Path) -> list[Scenario]:
    """Load and validate a scenario file. Raises ScenarioError if malformed."""
    raw = path.read_text(encoding="utf-8")
    try:
        obj = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScenarioError(f"{path}: not valid YAML: {exc}") from exc
    scenarios = scenarios_from_obj(obj)
    _log.debug("loaded %d scenario(s) from %s", len(scenarios), path)
    return scenarios


def _evaluate(scenario: Scenario) -> tuple[str | bool, str | None] | str:
    """Return ``(actual, actual_after)`` or a failure detail string."""
    if scenario.op == "reject":
        result = parse(scenario.args[0])
        if result.ok:
            return f"expected rejection, parsed {result.value}"
        return result.rejection or "", None

    operands: list[BigNumber] = []
    for text in scenario.args:
        result = parse(text)
        if not result.ok or result.value is None:
            return f"argument {text!r} rejected: {result.rejection}"
        operands.append(result.value)

    if scenario.op in _BINARY:
        return str(_BINARY[scenario.op](operands[0], operands[1])), None
    if scenario.op in _COMPARE:
        return _COMPARE[scenario.op](operands[0], operands[1]), None
    if scenario.op in _STEP:
        receiver = operands[0]
        returned = _STEP[scenario.op](receiver)
        return str(returned), str(receiver)
    if scenario.op == "neg":
        return str(-operands[0]), None
    return str(operands[0]), None


def run_scenario(scenario: Scenario) -> ScenarioResult:
    outcome = _evaluate(scenario)
    if isinstance(outcome, str):
        return ScenarioResult(scenario.id, False, outcome)

    actual, actual_after = outcome
    if scenario.op == "reject":
        passed = isinstance(actual, str) and actual.startswith(str(scenario.expect))
    else:
        passed = actual == scenario.expect
    if not passed:
        return ScenarioResult(scenario.id, False, f"expected {scenario.expect!r}, got {actual!r}")
    if scenario.expect_after is not None and actual_after != scenario.expect_after:
        return ScenarioResult(
            scenario.id, False, f"expected value after {scenario.expect_after!r}, got {actual_after!r}"
        )
    return ScenarioResult(scenario.id, True)


def run_scenarios(scenarios: list[Scenario]) -> list[ScenarioResult]:
    results = [run_scenario(s) for s in scenarios]
    failed = sum(1 for r in results if not r.passed)
    _log.debug("ran %d scenario(s), %d failed", len(results), failed)
    return results
