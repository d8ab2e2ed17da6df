"""Tests for the optional progress bar."""
from unittest.mock import patch

from site_lint.config import Config
from site_lint.orchestrator import run_lint


def test_progress_shown_when_enabled(site_tree, passing_checker, monkeypatch):
    """Test rich progress is used when show_progress is enabled."""
    monkeypatch.delenv("SITE_LINT_NO_PROGRESS", raising=False)

    with patch("rich.progress.Progress") as mock_progress:
        progress = mock_progress.return_value.__enter__.return_value

        results, _ = run_lint(
            site_tree, Config(show_progress=True), scope="css", syntax_checker=passing_checker
        )

        assert mock_progress.called
        progress.add_task.assert_called_once()
        assert results["css"].has_errors


def test_progress_suppressed_by_environment(site_tree, passing_checker, monkeypatch):
    """Test SITE_LINT_NO_PROGRESS disables the progress bar."""
    monkeypatch.setenv("SITE_LINT_NO_PROGRESS", "1")

    with patch("rich.progress.Progress") as mock_progress:
        run_lint(site_tree, Config(show_progress=True), scope="css", syntax_checker=passing_checker)

        assert not mock_progress.called


def test_progress_disabled_by_default(site_tree, passing_checker, monkeypatch):
    """Test no progress bar with the default configuration."""
    monkeypatch.delenv("SITE_LINT_NO_PROGRESS", raising=False)

    with patch("rich.progress.Progress") as mock_progress:
        run_lint(site_tree, Config(), scope="css", syntax_checker=passing_checker)

        assert not mock_progress.called
