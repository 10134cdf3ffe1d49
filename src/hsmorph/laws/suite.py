"""Law suite configuration and execution.

A suite is a YAML file naming a list of cases. Each case picks a law from
``LAWS`` and gives its arguments as plain YAML data::

    name: sublists
    cases:
      - name: span-small-numbers
        law: span
        predicate: {name: lt, arg: 3}
        xs: [1, 2, 3, 4, 1, 2, 3, 4]
      - name: group-letters
        law: group_by
        xs: Mississippi

YAML sequences become Lists and strings become Lists of characters. Mappings
``{just: x}``, ``{nothing: null}`` and ``{tuple: [a, b]}`` build Maybe and
Tuple values.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from hsmorph.eq import is_eq
from hsmorph.errors import HaskError
from hsmorph.laws.checks import LAWS, LawResult
from hsmorph.lists import from_iterable, from_string
from hsmorph.maybes import just
from hsmorph.tuples import tuple_
from hsmorph.types import Nothing

# Named predicates usable from YAML; each takes the case's ``arg``.
PREDICATES: dict[str, Callable[[Any], Callable[[Any], bool]]] = {
    "lt": lambda arg: lambda x: x < arg,
    "le": lambda arg: lambda x: x <= arg,
    "gt": lambda arg: lambda x: x > arg,
    "ge": lambda arg: lambda x: x >= arg,
    "eq": lambda arg: lambda x: x == arg,
    "ne": lambda arg: lambda x: x != arg,
    "even": lambda _: lambda x: x % 2 == 0,
    "odd": lambda _: lambda x: x % 2 == 1,
    "is_space": lambda _: lambda c: c.isspace(),
    "is_alpha": lambda _: lambda c: c.isalpha(),
}

# Named equality relations for group_by.
EQUALITIES: dict[str, Callable[[Any, Any], bool]] = {
    "equal": is_eq,
    "same_parity": lambda a, b: a % 2 == b % 2,
    "ignore_case": lambda a, b: a.lower() == b.lower(),
}


@dataclass
class LawCase:
    """Configuration for a single law check.

    Attributes:
        name: Case identifier.
        law: Key into ``LAWS``.
        args: Remaining YAML keys of the case, converted lazily.
        enabled: Whether the case runs.
    """

    name: str
    law: str
    args: dict[str, Any] = field(default_factory=dict)
    enabled: bool = True


@dataclass
class LawSuite:
    """Collection of law cases.

    Attributes:
        name: Suite name.
        cases: Cases in file order.
        source: File the suite was loaded from, if any.
    """

    name: str
    cases: list[LawCase]
    source: Path | None = None


@dataclass
class CaseResult:
    """Result of running one case.

    Attributes:
        case: Case name.
        law: Law checked.
        result: Outcome of the check, or None if it raised.
        error: Error message if the check raised a library error.
    """

    case: str
    law: str
    result: LawResult | None = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.result is not None and self.result.passed


def to_value(data: Any) -> Any:
    """Convert plain YAML data into hsmorph values."""
    match data:
        case {"just": inner}:
            return just(to_value(inner))
        case {"nothing": _}:
            return Nothing
        case {"tuple": [*items]}:
            return tuple_(*(to_value(item) for item in items))
        case list():
            return from_iterable(to_value(item) for item in data)
        case str():
            return from_string(data)
        case bool() | int() | float() | None:
            return data
        case _:
            msg = f"Cannot convert {data!r} to a value"
            raise ValueError(msg)


def load_predicate(entry: Any) -> Callable[[Any], bool]:
    """Resolve ``name`` or ``{name: ..., arg: ...}`` to a predicate."""
    if isinstance(entry, str):
        entry = {"name": entry}
    name = entry["name"]
    if name not in PREDICATES:
        msg = f"Unknown predicate '{name}'"
        raise ValueError(msg)
    return PREDICATES[name](entry.get("arg"))


def load_equality(name: str) -> Callable[[Any, Any], bool]:
    if name not in EQUALITIES:
        msg = f"Unknown equality '{name}'"
        raise ValueError(msg)
    return EQUALITIES[name]


def build_arguments(case: LawCase) -> tuple[Any, ...]:
    """Convert a case's YAML arguments into the law's positional arguments."""
    args = case.args
    match case.law:
        case "take_drop":
            return int(args["n"]), to_value(args["xs"])
        case "span":
            return load_predicate(args["predicate"]), to_value(args["xs"])
        case "group_by":
            return load_equality(args.get("eq", "equal")), to_value(args["xs"])
        case "strip_prefix":
            return to_value(args["prefix"]), to_value(args["xs"])
        case "monoid_identity":
            return (to_value(args["value"]),)
        case "monoid_associativity":
            values = args["values"]
            if len(values) != 3:
                msg = f"Case '{case.name}': monoid_associativity needs 3 values"
                raise ValueError(msg)
            return tuple(to_value(v) for v in values)
    msg = f"Unknown law '{case.law}'"
    raise ValueError(msg)


def load_suite_config(config_path: Path) -> LawSuite:
    """Load a law suite from YAML.

    Args:
        config_path: Path to the suite file.

    Returns:
        LawSuite configuration.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        msg = f"Suite must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    case_list = data.get("cases", [])
    if not isinstance(case_list, list):
        msg = f"'cases' must be a list, got {type(case_list).__name__}"
        raise ValueError(msg)

    cases = []
    for index, case_data in enumerate(case_list):
        if not isinstance(case_data, dict):
            msg = f"Case {index}: expected a mapping, got {case_data!r}"
            raise ValueError(msg)
        law = case_data.get("law")
        if law not in LAWS:
            msg = f"Case {index}: unknown law {law!r}"
            raise ValueError(msg)
        args = {
            key: value
            for key, value in case_data.items()
            if key not in ("name", "law", "enabled")
        }
        case = LawCase(
            name=case_data.get("name", f"{law}-{index}"),
            law=law,
            args=args,
            enabled=case_data.get("enabled", True),
        )
        # Fail at load time rather than halfway through a run.
        build_arguments(case)
        cases.append(case)

    return LawSuite(
        name=data.get("name", "laws"),
        cases=cases,
        source=Path(config_path),
    )


# Type for progress callbacks
ProgressCallback = Callable[[CaseResult], None]


class LawRunner:
    """Runs the enabled cases of a suite."""

    def __init__(
        self,
        suite: LawSuite,
        law: str | None = None,
        progress: ProgressCallback | None = None,
    ) -> None:
        self.suite = suite
        self.law = law
        self.progress = progress

    def run_case(self, case: LawCase) -> CaseResult:
        """Run one case, recording library errors instead of raising them."""
        check = LAWS[case.law]
        try:
            result = check(*build_arguments(case))
        except HaskError as e:
            return CaseResult(case=case.name, law=case.law, error=str(e))
        return CaseResult(case=case.name, law=case.law, result=result)

    def run_all(self) -> list[CaseResult]:
        results = []
        for case in self.suite.cases:
            if not case.enabled:
                continue
            if self.law and case.law != self.law:
                continue
            case_result = self.run_case(case)
            if self.progress:
                self.progress(case_result)
            results.append(case_result)
        return results


def format_results_table(results: list[CaseResult]) -> str:
    """Format case results as a table.

    Args:
        results: Results from ``LawRunner.run_all``.

    Returns:
        Formatted table string.
    """
    lines = []

    lines.append("=" * 80)
    lines.append("LAW CHECKS")
    lines.append("=" * 80)
    lines.append(f"{'Case':<30} {'Law':<22} {'Status':<6} Detail")
    lines.append("-" * 80)

    for case_result in results:
        status = "ok" if case_result.passed else "FAIL"
        if case_result.error is not None:
            detail = f"error: {case_result.error}"
        elif case_result.result is not None:
            detail = case_result.result.detail
        else:
            detail = ""
        if len(detail) > 40:
            detail = detail[:37] + "..."
        lines.append(
            f"{case_result.case:<30} {case_result.law:<22} {status:<6} {detail}"
        )

    passed = sum(1 for r in results if r.passed)
    lines.append("-" * 80)
    lines.append(f"Passed: {passed}/{len(results)}")
    return "\n".join(lines)
