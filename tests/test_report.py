import json

import pytest
from hypothesis import strategies as st

from reprcat.laws import CheckConfig, IsEq, RuleSet, SuiteReport, check_suite, forall
from reprcat.report import format_report, render_markdown, report_json


@pytest.fixture
def report(config: CheckConfig) -> SuiteReport:
    ints = st.integers(min_value=0, max_value=10)
    ruleset = RuleSet(
        "demo",
        props=(
            forall("add zero", lambda n: IsEq(n + 0, n), ints),
            forall("double is square", lambda n: IsEq(n * 2, n * n), ints),
        ),
    )
    return check_suite(ruleset, config)


def test_format_report(report: SuiteReport) -> None:
    text = format_report(report)
    lines = text.splitlines()

    assert lines[0] == "demo — 1/2 properties passed"
    assert lines[1].startswith("  ✓ demo: add zero (")
    assert lines[2] == "  × demo: double is square"
    assert "      inputs: (1)" in lines
    assert "      lhs: 2" in lines
    assert "      rhs: 1" in lines
    assert lines[-1] == "  Config: max_examples=25, seed=20240611"


def test_format_report_unseeded() -> None:
    text = format_report(check_suite(RuleSet("empty"), CheckConfig()))
    assert text.splitlines() == ["empty — 0/0 properties passed", "  Config: max_examples=100, seed=random"]


def test_report_json(report: SuiteReport) -> None:
    data = report_json(report)

    assert data["suite"] == "demo"
    assert data["ok"] is False
    assert (data["passed"], data["failed"]) == (1, 1)
    assert data["seed"] == 20240611
    passed, failed = data["properties"]
    assert passed["status"] == "passed"
    assert passed["violation"] is None
    assert failed["status"] == "falsified"
    assert failed["violation"] == {"inputs": ["1"], "lhs": "2", "rhs": "1", "cause": None}
    json.dumps(data)


def test_render_markdown(report: SuiteReport) -> None:
    md = render_markdown([report], errors=[("bad.py", "Code execution failed: boom")])

    assert md.startswith("# Law check report")
    assert "| demo | 1 | 1 |" in md
    assert "## demo" in md
    assert "- [x] `demo`: add zero" in md
    assert "- [ ] `demo`: double is square" in md
    assert "  - inputs: `(1)`" in md
    assert "  - lhs: `2`" in md
    assert "## Load errors" in md
    assert "- `bad.py`: Code execution failed: boom" in md


def test_render_markdown_reports_exceptions(config: CheckConfig) -> None:
    ruleset = RuleSet("div", props=(forall("reciprocal", lambda n: IsEq(1 // n, 1 // n), st.integers(0, 5)),))
    md = render_markdown([check_suite(ruleset, config)])

    assert "  - raised: `ZeroDivisionError: integer division or modulo by zero`" in md
    assert "## Load errors" not in md
