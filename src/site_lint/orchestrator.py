"""Runs the selected lint scopes over a project tree."""
import os
from collections.abc import Callable
from pathlib import Path

from site_lint.collector import relative_name, walk_for_extensions
from site_lint.config import Config
from site_lint.file_reader import read_source
from site_lint.logging_config import get_logger
from site_lint.markup import analyze_markup
from site_lint.metrics import LintMetrics
from site_lint.script import analyze_script
from site_lint.stylesheet import analyze_stylesheet
from site_lint.syntax_check import SyntaxChecker, make_node_checker
from site_lint.types import ScopeResult
from site_lint.validation import SCOPES, validate_project_root, validate_scope

logger = get_logger(__name__)

SCOPE_EXTENSIONS = {
    "html": {".html"},
    "css": {".css"},
    "js": {".js"},
}

# (relative path, absolute path, contents) -> ScopeResult
FileAnalyzer = Callable[[str, Path, str], ScopeResult]


def build_analyzers(
    config: Config, syntax_checker: SyntaxChecker, metrics: LintMetrics
) -> dict[str, FileAnalyzer]:
    """Bind each scope's analyzer to the run configuration."""

    def html(rel_path: str, file_path: Path, contents: str) -> ScopeResult:
        return analyze_markup(rel_path, contents)

    def css(rel_path: str, file_path: Path, contents: str) -> ScopeResult:
        return analyze_stylesheet(rel_path, contents, max_line_length=config.max_line_length)

    def js(rel_path: str, file_path: Path, contents: str) -> ScopeResult:
        metrics.syntax_checks_run += 1
        return analyze_script(rel_path, file_path, contents, syntax_checker)

    return {"html": html, "css": css, "js": js}


def _show_progress(config: Config) -> bool:
    return config.show_progress and not os.environ.get("SITE_LINT_NO_PROGRESS")


def lint_scope(
    scope: str,
    project_root: Path,
    config: Config,
    analyzer: FileAnalyzer,
    metrics: LintMetrics,
) -> ScopeResult:
    """Run one scope's analyzer across every matching file.

    Args:
        scope: Scope name
        project_root: Project root directory
        config: Configuration
        analyzer: Per-file analyzer for the scope
        metrics: Run metrics, updated in place

    Returns:
        Merged ScopeResult for the scope
    """
    files = walk_for_extensions(project_root, SCOPE_EXTENSIONS[scope], config.ignored_dirs)
    metrics.files_checked[scope] = len(files)
    logger.info(f"[{scope}] linting {len(files)} file(s)")

    scope_result = ScopeResult()

    def process(file_path: Path) -> None:
        rel_path = relative_name(file_path, project_root)
        contents = read_source(file_path, rel_path)
        scope_result.extend(analyzer(rel_path, file_path, contents))

    if _show_progress(config) and files:
        from rich.console import Console
        from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

        with Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TextColumn("[bold cyan]{task.fields[status]}"),
            console=Console(stderr=True),
            transient=True,
        ) as progress:
            task = progress.add_task(f"Linting {scope}", total=len(files), status="Starting...")
            for file_path in files:
                progress.update(task, status=file_path.name)
                process(file_path)
                progress.update(task, advance=1)
    else:
        for file_path in files:
            process(file_path)

    return scope_result


def run_lint(
    project_root: Path,
    config: Config,
    scope: str | None = None,
    syntax_checker: SyntaxChecker | None = None,
) -> tuple[dict[str, ScopeResult], LintMetrics]:
    """Run lint checks.

    Args:
        project_root: Project root directory
        config: Configuration
        scope: 'html', 'css' or 'js'; None runs all scopes
        syntax_checker: JavaScript syntax checker; defaults to node --check

    Returns:
        Tuple of (results keyed by scope in run order, metrics object)

    Raises:
        ValueError: If scope or project root are invalid
        OSError: If the tree or a file cannot be read
    """
    selected = validate_scope(scope)
    validate_project_root(project_root)

    metrics = LintMetrics()
    if syntax_checker is None:
        syntax_checker = make_node_checker(config.node_executable)

    analyzers = build_analyzers(config, syntax_checker, metrics)
    scopes_to_run = [selected] if selected else list(SCOPES)

    results: dict[str, ScopeResult] = {}
    for current_scope in scopes_to_run:
        results[current_scope] = lint_scope(
            current_scope, project_root, config, analyzers[current_scope], metrics
        )

    metrics.finish()
    return results, metrics
