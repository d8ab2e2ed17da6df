"""Report formatting and output."""
import json

from site_lint.metrics import LintMetrics
from site_lint.types import ScopeResult


def format_scope_report(scope: str, result: ScopeResult) -> list[str]:
    """Format one scope as report lines.

    Args:
        scope: Scope name
        result: Diagnostics for the scope

    Returns:
        A single no-issues line, or a header followed by warnings then errors
    """
    if not result.has_issues:
        return [f"[{scope}] ✔ No issues found."]

    lines = [f"[{scope}]"]
    lines.extend(f"  warning: {warning}" for warning in result.warnings)
    lines.extend(f"  error: {error}" for error in result.errors)
    return lines


def format_detailed_report(results: dict[str, ScopeResult], metrics: LintMetrics) -> str:
    """Format results as a human-readable report.

    Args:
        results: Results keyed by scope
        metrics: Run metrics

    Returns:
        Formatted report string
    """
    lines = []
    for scope, result in results.items():
        lines.extend(format_scope_report(scope, result))

    summary = get_summary(results)
    lines.append("")
    lines.append(
        f"{summary['errors']} error(s), {summary['warnings']} warning(s) "
        f"in {metrics.total_files} file(s) ({metrics.elapsed_seconds:.2f}s)"
    )

    return "\n".join(lines)


def format_json_report(results: dict[str, ScopeResult], metrics: LintMetrics) -> str:
    """Format results as JSON.

    Args:
        results: Results keyed by scope
        metrics: Run metrics

    Returns:
        JSON string
    """
    report = {
        "scopes": {scope: result.to_dict() for scope, result in results.items()},
        "summary": get_summary(results),
        "metrics": metrics.to_dict(),
    }

    return json.dumps(report, indent=2)


def get_exit_code(results: dict[str, ScopeResult]) -> int:
    """Get exit code based on results.

    Returns:
        1 if any scope produced an error, otherwise 0; warnings never fail
    """
    return 1 if any(result.has_errors for result in results.values()) else 0


def get_summary(results: dict[str, ScopeResult]) -> dict[str, int]:
    """Get summary statistics.

    Args:
        results: Results keyed by scope

    Returns:
        Dict with error, warning and scope counts
    """
    return {
        "scopes": len(results),
        "errors": sum(len(r.errors) for r in results.values()),
        "warnings": sum(len(r.warnings) for r in results.values()),
        "scopes_with_issues": sum(1 for r in results.values() if r.has_issues),
    }
