from site_lint.text import line_of_offset


def test_line_of_offset():
    """Test line numbers count preceding line breaks."""
    text = "a\nb\r\nc"

    assert line_of_offset(text, 0) == 1
    assert line_of_offset(text, 2) == 2
    assert line_of_offset(text, text.index("c")) == 3


def test_line_of_offset_at_line_break():
    """Test an offset on the line break itself belongs to that line."""
    assert line_of_offset("ab\ncd", 2) == 1
    assert line_of_offset("ab\ncd", 3) == 2
