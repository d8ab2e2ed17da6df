"""Text helpers shared by the analyzers."""


def line_of_offset(contents: str, offset: int) -> int:
    """Return the 1-based line number of a character offset."""
    return contents.count("\n", 0, offset) + 1
