"""Shared fixtures."""
import pytest

GOOD_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta name="viewport" content="width=device-width, initial-scale=1">
</head>
<body>
  <img src="avatar.png" alt="Avatar">
</body>
</html>
"""


@pytest.fixture
def site_tree(tmp_path):
    """Create a small site with violations in every scope."""
    (tmp_path / "index.html").write_text(
        "<html>\n<body>\n<img src='a.png'>\n<button>Go</button>\n</body>\n</html>\n"
    )
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_text(".a {\n\tcolor: red;\n}\n.a { margin: 0; }\n")
    (tmp_path / "js").mkdir()
    (tmp_path / "js" / "main.js").write_text("var x = 1;\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "vendor.css").write_text("\t}")
    return tmp_path


@pytest.fixture
def warnings_only_tree(tmp_path):
    """Create a site whose files only produce warnings."""
    (tmp_path / "index.html").write_text(GOOD_HTML.replace("<meta name=\"viewport\"", "<meta"))
    (tmp_path / "site.css").write_text(".a { color: red !important; }\n")
    (tmp_path / "app.js").write_text("const a = 1;\n")
    return tmp_path


@pytest.fixture
def passing_checker():
    """Syntax checker that accepts every script."""

    def checker(file_path):
        return None

    return checker
