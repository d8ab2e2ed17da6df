"""Input validation functions."""
from pathlib import Path

SCOPES = ("html", "css", "js")


def validate_project_root(project_root: Path) -> None:
    """Validate project root directory exists.

    Args:
        project_root: Path to validate

    Raises:
        ValueError: If path does not exist or is not a directory
    """
    if not project_root.exists():
        raise ValueError(f"Project root does not exist: {project_root}")

    if not project_root.is_dir():
        raise ValueError(f"Project root is not a directory: {project_root}")


def validate_scope(scope: str | None) -> str | None:
    """Normalize and validate a requested scope.

    Args:
        scope: Scope name, or None for all scopes

    Returns:
        Lower-cased scope name, or None

    Raises:
        ValueError: If scope is not one of html, css, js
    """
    if scope is None:
        return None

    normalized = scope.strip().lower()
    if normalized not in SCOPES:
        raise ValueError(f'Unknown scope "{scope}". Expected one of {", ".join(SCOPES)}.')
    return normalized
