"""Script (JavaScript) rules."""
import re
from pathlib import Path

from site_lint.syntax_check import SyntaxChecker
from site_lint.types import Diagnostic, ScopeResult, Severity

STRICT_PRAGMAS = ('"use strict";', "'use strict';")
VAR_PATTERN = re.compile(r"\bvar\b")


def analyze_script(
    rel_path: str, file_path: Path, contents: str, syntax_checker: SyntaxChecker
) -> ScopeResult:
    """Run syntax validation and convention rules over one script.

    A syntax failure is reported as a single error and the convention
    rules are skipped for that file.

    Args:
        rel_path: Project-relative path used in diagnostics
        file_path: Absolute path handed to the syntax checker
        contents: Full script text
        syntax_checker: Returns None on success or diagnostic text

    Returns:
        ScopeResult for the file
    """
    result = ScopeResult()

    failure = syntax_checker(file_path)
    if failure is not None:
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.ERROR,
                rule="syntax",
                message=f"JavaScript syntax error detected.\n{failure}",
            )
        )
        return result

    if not contents.lstrip().startswith(STRICT_PRAGMAS):
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.WARNING,
                rule="strict-mode",
                message="Consider enabling strict mode at the top of the file.",
            )
        )

    if VAR_PATTERN.search(contents):
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.WARNING,
                rule="no-var",
                message="Avoid using var; prefer const or let.",
            )
        )

    return result
