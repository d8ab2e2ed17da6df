"""Stylesheet (CSS) rules."""
import re

from site_lint.text import line_of_offset
from site_lint.types import Diagnostic, ScopeResult, Severity

DEFAULT_MAX_LINE_LENGTH = 140

SELECTOR_PATTERN = re.compile(r"([^{}]+)\{")
WHITESPACE_PATTERN = re.compile(r"\s+")
IMPORTANT_PATTERN = re.compile(r"!important", re.IGNORECASE)
LINE_BREAK_PATTERN = re.compile(r"\r?\n")


def check_lines(rel_path: str, contents: str, max_line_length: int, result: ScopeResult) -> None:
    """Flag tab indentation and overlong lines."""
    for index, line in enumerate(LINE_BREAK_PATTERN.split(contents), start=1):
        if "\t" in line:
            result.add(
                Diagnostic(
                    file=rel_path,
                    line=index,
                    severity=Severity.ERROR,
                    rule="no-tabs",
                    message="Tabs detected; please use spaces for indentation.",
                )
            )
        if len(line) > max_line_length:
            result.add(
                Diagnostic(
                    file=rel_path,
                    line=index,
                    severity=Severity.WARNING,
                    rule="max-line-length",
                    message=(
                        f"Line exceeds {max_line_length} characters and may harm readability."
                    ),
                )
            )


def check_brace_balance(rel_path: str, contents: str, result: ScopeResult) -> None:
    """Report the first unexpected closing brace, or unclosed braces at the end."""
    balance = 0
    for char in contents:
        if char == "{":
            balance += 1
        elif char == "}":
            balance -= 1
            if balance < 0:
                result.add(
                    Diagnostic(
                        file=rel_path,
                        severity=Severity.ERROR,
                        rule="brace-balance",
                        message="Unexpected closing brace detected.",
                    )
                )
                return

    if balance > 0:
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.ERROR,
                rule="brace-balance",
                message="Missing closing brace detected.",
            )
        )


def check_duplicate_selectors(rel_path: str, contents: str, result: ScopeResult) -> None:
    """Warn on every repeat of a selector already seen in this file.

    At-rule preludes such as ``@media screen`` are skipped; rules nested in
    at-rule blocks share the table with top-level rules.
    """
    first_seen: dict[str, int] = {}

    for match in SELECTOR_PATTERN.finditer(contents):
        raw = match.group(1)
        stripped = raw.strip()
        if not stripped or stripped.startswith("@"):
            continue

        normalized = WHITESPACE_PATTERN.sub(" ", stripped)
        leading = len(raw) - len(raw.lstrip())
        line = line_of_offset(contents, match.start(1) + leading)

        if normalized in first_seen:
            result.add(
                Diagnostic(
                    file=rel_path,
                    line=line,
                    severity=Severity.WARNING,
                    rule="duplicate-selector",
                    message=(
                        f'Duplicate selector "{normalized}" detected '
                        f"(first seen at line {first_seen[normalized]})."
                    ),
                )
            )
        else:
            first_seen[normalized] = line


def analyze_stylesheet(
    rel_path: str, contents: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH
) -> ScopeResult:
    """Run all stylesheet rules over one file.

    Args:
        rel_path: Project-relative path used in diagnostics
        contents: Full stylesheet text
        max_line_length: Lines longer than this are reported

    Returns:
        ScopeResult with diagnostics in rule order
    """
    result = ScopeResult()

    check_lines(rel_path, contents, max_line_length, result)
    check_brace_balance(rel_path, contents, result)
    check_duplicate_selectors(rel_path, contents, result)

    if IMPORTANT_PATTERN.search(contents):
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.WARNING,
                rule="no-important",
                message="Avoid using !important; consider refactoring specificity instead.",
            )
        )

    return result
