"""Markup (HTML) rules.

Tags are matched with regular expressions over the raw text, not parsed.
A tag runs from ``<name`` to the next ``>``, so a ``>`` inside an attribute
value ends the tag early.
"""
import re

from site_lint.text import line_of_offset
from site_lint.types import Diagnostic, ScopeResult, Severity

DOCTYPE_PATTERN = re.compile(r"^<!DOCTYPE html>", re.IGNORECASE)
HTML_LANG_PATTERN = re.compile(r"<html\b[^>]*\blang=", re.IGNORECASE)
VIEWPORT_PATTERN = re.compile(r"""<meta\b[^>]*name=["']viewport["']""", re.IGNORECASE)
IMG_TAG_PATTERN = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
ALT_ATTR_PATTERN = re.compile(r"\balt=", re.IGNORECASE)
BUTTON_TAG_PATTERN = re.compile(r"<button\b[^>]*>", re.IGNORECASE)
TYPE_ATTR_PATTERN = re.compile(r"\btype=", re.IGNORECASE)


def analyze_markup(rel_path: str, contents: str) -> ScopeResult:
    """Run all markup rules over one document.

    Args:
        rel_path: Project-relative path used in diagnostics
        contents: Full document text

    Returns:
        ScopeResult with diagnostics in rule order
    """
    result = ScopeResult()

    if not DOCTYPE_PATTERN.match(contents.lstrip()):
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.ERROR,
                rule="missing-doctype",
                message="Missing <!DOCTYPE html> declaration.",
            )
        )

    if not HTML_LANG_PATTERN.search(contents):
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.ERROR,
                rule="html-lang",
                message="<html> tag is missing a lang attribute.",
            )
        )

    if not VIEWPORT_PATTERN.search(contents):
        result.add(
            Diagnostic(
                file=rel_path,
                severity=Severity.WARNING,
                rule="meta-viewport",
                message='Missing responsive <meta name="viewport"> tag.',
            )
        )

    for match in IMG_TAG_PATTERN.finditer(contents):
        if not ALT_ATTR_PATTERN.search(match.group(0)):
            result.add(
                Diagnostic(
                    file=rel_path,
                    line=line_of_offset(contents, match.start()),
                    severity=Severity.ERROR,
                    rule="img-alt",
                    message="<img> tag is missing an alt attribute.",
                )
            )

    for match in BUTTON_TAG_PATTERN.finditer(contents):
        if not TYPE_ATTR_PATTERN.search(match.group(0)):
            result.add(
                Diagnostic(
                    file=rel_path,
                    line=line_of_offset(contents, match.start()),
                    severity=Severity.WARNING,
                    rule="button-type",
                    message="<button> should explicitly declare a type attribute.",
                )
            )

    return result
