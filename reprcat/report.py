from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any

import jinja2

from .laws.check import LawViolation, SuiteReport

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)
_ENV.filters["typename"] = lambda obj: type(obj).__name__


def format_report(report: SuiteReport) -> str:
    """Human-readable report for terminal output."""
    total = len(report.reports)
    lines = [f"{report.suite_name} — {len(report.passed)}/{total} properties passed"]

    for r in report.reports:
        if r.passed:
            lines.append(f"  ✓ {r.suite}: {r.name} ({r.examples} examples)")
        else:
            lines.append(f"  × {r.suite}: {r.name}")
            if r.violation is not None:
                for detail in _violation_lines(r.violation):
                    lines.append(f"      {detail}")

    seed = report.config.seed
    lines.append(
        f"  Config: max_examples={report.config.max_examples}, "
        f"seed={'random' if seed is None else seed}"
    )
    return "\n".join(lines)


def _violation_lines(v: LawViolation) -> list[str]:
    lines = [f"inputs: ({', '.join(v.inputs)})"]
    if v.cause is not None:
        lines.append(f"raised: {type(v.cause).__name__}: {v.cause}")
    if v.lhs is not None or v.rhs is not None:
        lines.append(f"lhs: {v.lhs}")
        lines.append(f"rhs: {v.rhs}")
    return lines


def report_json(report: SuiteReport) -> dict[str, Any]:
    """Machine-readable report."""
    return {
        "suite": report.suite_name,
        "ok": report.ok,
        "passed": len(report.passed),
        "failed": len(report.failures),
        "max_examples": report.config.max_examples,
        "seed": report.config.seed,
        "properties": [
            {
                "suite": r.suite,
                "name": r.name,
                "status": r.status.value,
                "examples": r.examples,
                "violation": None
                if r.violation is None
                else {
                    "inputs": list(r.violation.inputs),
                    "lhs": r.violation.lhs,
                    "rhs": r.violation.rhs,
                    "cause": None if r.violation.cause is None else repr(r.violation.cause),
                },
            }
            for r in report.reports
        ],
    }


def render_markdown(reports: Sequence[SuiteReport], errors: Sequence[tuple[str, str]] = ()) -> str:
    """Markdown summary of several suite reports, plus any files that failed to load."""
    template = _ENV.get_template("report.md.j2")
    return template.render(reports=reports, errors=errors)
