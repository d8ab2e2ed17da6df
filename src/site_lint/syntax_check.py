"""JavaScript syntax checking through an external interpreter."""
import subprocess
from collections.abc import Callable
from pathlib import Path

from site_lint.logging_config import get_logger

logger = get_logger(__name__)

# Returns None when the file parses, otherwise the checker's diagnostic text.
SyntaxChecker = Callable[[Path], str | None]


class SyntaxCheckUnavailableError(RuntimeError):
    """Raised when the syntax-check executable cannot be started."""


def check_with_node(file_path: Path, executable: str = "node") -> str | None:
    """Check a script with ``node --check``.

    Args:
        file_path: Script to check
        executable: Node.js executable name or path

    Returns:
        None if the script parses, otherwise the diagnostic text

    Raises:
        SyntaxCheckUnavailableError: If the executable cannot be run
    """
    logger.info(f"Checking syntax of {file_path.name} with {executable}")
    try:
        result = subprocess.run(
            [executable, "--check", str(file_path)],
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise SyntaxCheckUnavailableError(
            f"Cannot run '{executable}' for JavaScript syntax checks: {e}"
        ) from e

    if result.returncode == 0:
        return None

    output = (result.stderr or result.stdout).strip()
    return output or f"{executable} --check exited with status {result.returncode}"


def make_node_checker(executable: str = "node") -> SyntaxChecker:
    """Bind ``check_with_node`` to an executable."""

    def checker(file_path: Path) -> str | None:
        return check_with_node(file_path, executable=executable)

    return checker
