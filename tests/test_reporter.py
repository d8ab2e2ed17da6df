import json

from site_lint.metrics import LintMetrics
from site_lint.reporter import (
    format_detailed_report,
    format_json_report,
    format_scope_report,
    get_exit_code,
    get_summary,
)
from site_lint.types import Diagnostic, ScopeResult, Severity


def make_result(errors=(), warnings=()):
    result = ScopeResult()
    for message, line in errors:
        result.add(Diagnostic("style.css", Severity.ERROR, message, "rule", line=line))
    for message, line in warnings:
        result.add(Diagnostic("style.css", Severity.WARNING, message, "rule", line=line))
    return result


def make_metrics():
    metrics = LintMetrics()
    metrics.files_checked = {"html": 1, "css": 2}
    metrics.finish()
    return metrics


def test_scope_without_issues():
    """Test a clean scope prints a single no-issues line."""
    assert format_scope_report("html", ScopeResult()) == ["[html] ✔ No issues found."]


def test_scope_lists_warnings_then_errors():
    """Test warnings are printed before errors under the header."""
    result = make_result(errors=[("Tabs detected.", 2)], warnings=[("Avoid !important.", None)])

    assert format_scope_report("css", result) == [
        "[css]",
        "  warning: style.css: Avoid !important.",
        "  error: style.css:2: Tabs detected.",
    ]


def test_format_detailed_report():
    """Test formatting a detailed human-readable report."""
    results = {
        "html": ScopeResult(),
        "css": make_result(errors=[("Tabs detected.", 2)], warnings=[("Long line.", 5)]),
    }

    report = format_detailed_report(results, make_metrics())

    assert "[html] ✔ No issues found." in report
    assert "  error: style.css:2: Tabs detected." in report
    assert "  warning: style.css:5: Long line." in report
    assert "1 error(s), 1 warning(s) in 3 file(s)" in report


def test_format_json_report():
    """Test formatting JSON report."""
    results = {"css": make_result(errors=[("Missing closing brace detected.", None)])}

    data = json.loads(format_json_report(results, make_metrics()))

    assert data["scopes"]["css"]["errors"][0]["message"] == "Missing closing brace detected."
    assert data["scopes"]["css"]["errors"][0]["line"] is None
    assert data["scopes"]["css"]["warnings"] == []
    assert data["summary"]["errors"] == 1
    assert data["metrics"]["total_files"] == 3


def test_reporter_get_exit_code():
    """Test exit code depends only on errors."""
    assert get_exit_code({"html": ScopeResult()}) == 0
    assert get_exit_code({"css": make_result(warnings=[("w", 1)])}) == 0
    assert (
        get_exit_code({"css": make_result(warnings=[("w", 1)]), "js": make_result(errors=[("e", None)])})
        == 1
    )


def test_get_summary():
    """Test summary statistics."""
    results = {
        "html": ScopeResult(),
        "css": make_result(errors=[("e1", 1)], warnings=[("w1", 2), ("w2", 3)]),
        "js": make_result(warnings=[("w3", None)]),
    }

    summary = get_summary(results)

    assert summary == {"scopes": 3, "errors": 1, "warnings": 3, "scopes_with_issues": 2}
