"""File collection for lint scopes."""
from collections.abc import Iterable
from pathlib import Path

from site_lint.logging_config import get_logger

logger = get_logger(__name__)


def walk_for_extensions(
    root_path: Path, extensions: Iterable[str], ignored_dirs: Iterable[str]
) -> list[Path]:
    """Collect files with matching extensions under a directory tree.

    Entries whose name is in ``ignored_dirs`` are skipped at every depth.
    Symlinked files are collected, symlinked directories are not entered.
    Directory listing errors are not caught.

    Args:
        root_path: Root directory to search from
        extensions: Suffixes to include, e.g. {".html"}
        ignored_dirs: Directory names to skip

    Returns:
        Absolute file paths sorted lexicographically
    """
    wanted = set(extensions)
    ignored = set(ignored_dirs)
    results: list[Path] = []

    def visit(directory: Path) -> None:
        for entry in directory.iterdir():
            if entry.name in ignored:
                continue
            if entry.is_dir():
                # symlinked directories are not followed
                if not entry.is_symlink():
                    visit(entry)
            elif entry.suffix in wanted:
                results.append(entry)

    visit(root_path.resolve())
    results.sort(key=str)
    logger.info(f"Found {len(results)} file(s) matching {', '.join(sorted(wanted))}")
    return results


def relative_name(file_path: Path, project_root: Path) -> str:
    """Return the POSIX-style path of a file relative to the project root."""
    return file_path.relative_to(project_root.resolve()).as_posix()
