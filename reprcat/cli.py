import argparse
import dataclasses
import json
import logging
import sys
from collections.abc import Sequence

from reprcat.either import Err, Ok
from reprcat.laws.check import SuiteReport, check_suite
from reprcat.laws.config import CheckConfig
from reprcat.load import load_suites_from_file
from reprcat.report import format_report, render_markdown, report_json


def handle_check(
    files: Sequence[str],
    *,
    max_examples: int | None,
    seed: int | None,
    output: str,
) -> int:
    """Load, check, and report on a list of suite .py files."""
    match CheckConfig.from_env():
        case Ok(config):
            pass
        case Err(e):
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 1

    overrides: dict[str, int] = {}
    if max_examples is not None:
        overrides["max_examples"] = max_examples
    if seed is not None:
        overrides["seed"] = seed
    try:
        config = dataclasses.replace(config, **overrides)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    reports: list[SuiteReport] = []
    errors: list[tuple[str, str]] = []

    for path in files:
        match load_suites_from_file(path):
            case str(err):
                errors.append((path, err))
            case suites:
                for suite in suites:
                    reports.append(check_suite(suite, config))

    match output:
        case "json":
            payload = {
                "suites": [report_json(r) for r in reports],
                "errors": [{"file": path, "error": err} for path, err in errors],
            }
            print(json.dumps(payload, indent=2))
        case "markdown":
            print(render_markdown(reports, errors))
        case _:
            for r in reports:
                print(format_report(r))
            for path, err in errors:
                print(f"{path}: {err}", file=sys.stderr)

    any_failure = bool(errors) or any(not r.ok for r in reports)
    return 1 if any_failure else 0


def handle_list(files: Sequence[str]) -> int:
    """Print the effective property names of every suite in each file."""
    status = 0
    for path in files:
        match load_suites_from_file(path):
            case str(err):
                print(f"{path}: {err}", file=sys.stderr)
                status = 1
            case suites:
                for suite in suites:
                    print(suite.name)
                    for q in suite.all_properties():
                        print(f"  {q.qualified_name}")
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reprcat",
        description="Check type-class laws for Representable-derived instances",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: check
    check_parser = subparsers.add_parser(
        "check",
        help="Load *_laws entry-points from .py files and check every property.",
    )
    check_parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="Suite .py file(s). Shell globs are expanded by your shell.",
    )
    check_parser.add_argument(
        "--max-examples",
        type=int,
        default=None,
        help="Examples per property (default: REPRCAT_MAX_EXAMPLES or 100).",
    )
    check_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Fixed hypothesis seed (default: REPRCAT_SEED, else random).",
    )
    fmt = check_parser.add_mutually_exclusive_group()
    fmt.add_argument(
        "--json",
        dest="output",
        action="store_const",
        const="json",
        help="Print a machine-readable JSON report.",
    )
    fmt.add_argument(
        "--markdown",
        dest="output",
        action="store_const",
        const="markdown",
        help="Print a Markdown report.",
    )
    check_parser.set_defaults(output="text")
    check_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Log progress to stderr.",
    )

    # Command: list
    list_parser = subparsers.add_parser(
        "list",
        help="Print the effective property names of each suite.",
    )
    list_parser.add_argument("files", nargs="+", metavar="FILE", help="Suite .py file(s).")

    return parser


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match args.command:
        case "check":
            if args.verbose:
                logging.basicConfig(
                    level=logging.DEBUG,
                    format="%(levelname)s %(name)s: %(message)s",
                )
            return handle_check(
                args.files,
                max_examples=args.max_examples,
                seed=args.seed,
                output=args.output,
            )
        case "list":
            return handle_list(args.files)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the console script."""
    try:
        return run(argv)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
