"""Law checks for hsmorph.

This package verifies the algebraic promises of the library on concrete
values:
- take/drop and span partition their input
- group_by runs flatten back to the input
- strip_prefix agrees with append
- Monoid identity and associativity
"""

from __future__ import annotations

from hsmorph.laws.checks import (
    LAWS,
    LawResult,
    check_group_by,
    check_monoid_associativity,
    check_monoid_identity,
    check_span,
    check_strip_prefix,
    check_take_drop,
)
from hsmorph.laws.suite import (
    CaseResult,
    LawCase,
    LawRunner,
    LawSuite,
    format_results_table,
    load_suite_config,
    to_value,
)

__all__ = [
    "LAWS",
    "CaseResult",
    "LawCase",
    "LawResult",
    "LawRunner",
    "LawSuite",
    "check_group_by",
    "check_monoid_associativity",
    "check_monoid_identity",
    "check_span",
    "check_strip_prefix",
    "check_take_drop",
    "format_results_table",
    "load_suite_config",
    "to_value",
]
