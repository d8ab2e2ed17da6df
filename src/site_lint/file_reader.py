"""File reading with encoding fallback."""
from pathlib import Path

from site_lint.logging_config import get_logger

logger = get_logger(__name__)


def read_source(file_path: Path, rel_path: str) -> str:
    """Read a source file as text.

    Tries UTF-8 first (dropping a byte order mark), falls back to latin-1.
    Filesystem errors propagate to the caller.

    Args:
        file_path: Absolute path to file
        rel_path: Project-relative path used in log messages

    Returns:
        File content as string
    """
    try:
        return file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        # latin-1 accepts all byte sequences
        logger.warning(f"File {rel_path} is not valid UTF-8, reading as latin-1")
        return file_path.read_text(encoding="latin-1")
