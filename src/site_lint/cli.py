"""Command-line interface for site-lint."""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from site_lint.__version__ import __version__
from site_lint.config import CONFIG_FILENAME, load_config
from site_lint.logging_config import get_logger, setup_logging
from site_lint.orchestrator import run_lint
from site_lint.reporter import format_detailed_report, format_json_report, get_exit_code
from site_lint.validation import validate_scope


@click.command()
@click.version_option(version=__version__, prog_name="site-lint")
@click.option("--scope", type=str, help="Only run one scope: html, css or js")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project root (defaults to the current directory)",
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to config file",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Only log errors")
def main(
    scope: str | None,
    root: Path | None,
    config: Path | None,
    output_json: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Site-lint: heuristic checks for HTML, CSS and JavaScript files."""
    logger = get_logger(__name__)

    try:
        setup_logging(verbose=verbose, quiet=quiet)
        selected = validate_scope(scope)
        project_root = root if root is not None else Path.cwd()
        config_path = config if config is not None else project_root / CONFIG_FILENAME
        cfg = load_config(config_path)

        results, metrics = run_lint(project_root, cfg, scope=selected)

        if output_json:
            output = format_json_report(results, metrics)
        else:
            output = format_detailed_report(results, metrics)

        click.echo(output)
        sys.exit(get_exit_code(results))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    except (ValueError, ValidationError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error during lint run")
        click.echo(f"Lint failed: {e}", err=True)
        sys.exit(1)


def run() -> None:
    """Console entry point; usage errors exit with status 1."""
    try:
        exit_code = main.main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    sys.exit(exit_code or 0)


if __name__ == "__main__":
    run()
