"""Command-line interface for the law suite.

Provides the `hsmorph-laws` command with subcommands for:
- Running the law checks of a suite
- Listing the cases of a suite
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from hsmorph.laws.checks import LAWS
from hsmorph.laws.suite import (
    CaseResult,
    LawRunner,
    LawSuite,
    format_results_table,
    load_suite_config,
)

DEFAULT_SUITE_PATH = Path(__file__).parent / "default_suite.yaml"


def _load(args: argparse.Namespace) -> LawSuite | None:
    suite_path = Path(args.suite) if args.suite else DEFAULT_SUITE_PATH

    if not suite_path.exists():
        print(f"Error: Suite configuration not found: {suite_path}")
        return None

    try:
        return load_suite_config(suite_path)
    except (OSError, KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading suite configuration: {e}")
        return None


def cmd_run(args: argparse.Namespace) -> int:
    """Run the law checks."""
    suite = _load(args)
    if suite is None:
        return 1

    if args.law and args.law not in LAWS:
        print(f"Error: Unknown law '{args.law}'")
        print(f"Known laws: {', '.join(sorted(LAWS))}")
        return 1

    print(f"hsmorph law suite: {suite.name}")
    print(f"Source: {suite.source}")

    def progress(result: CaseResult) -> None:
        if not args.quiet:
            status = "ok" if result.passed else "FAIL"
            print(f"  {result.case:<40} {status}")

    runner = LawRunner(suite, law=args.law, progress=progress)
    results = runner.run_all()

    print()
    print(format_results_table(results))

    return 0 if all(r.passed for r in results) else 1


def cmd_list(args: argparse.Namespace) -> int:
    """List the cases of a suite."""
    suite = _load(args)
    if suite is None:
        return 1

    print(f"Law Suite: {suite.name}")
    print("=" * 70)
    print(f"{'Case':<40} {'Law':<22} Enabled")
    print("-" * 70)

    for case in suite.cases:
        enabled = "yes" if case.enabled else "no"
        print(f"{case.name:<40} {case.law:<22} {enabled}")

    print("-" * 70)
    print(f"Total: {len(suite.cases)} case(s)")

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hsmorph-laws",
        description="Check the algebraic laws of hsmorph on concrete values",
    )
    parser.add_argument(
        "--suite",
        help="Path to a suite YAML file (default: the bundled suite)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Run law checks")
    run_parser.add_argument(
        "--law",
        help="Run only cases checking the given law",
    )
    run_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress per-case progress output",
    )
    run_parser.set_defaults(func=cmd_run)

    # list command
    list_parser = subparsers.add_parser("list", help="List suite cases")
    list_parser.set_defaults(func=cmd_list)

    return parser


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
