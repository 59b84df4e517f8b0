"""Main entry point for term-mouse CLI application."""

import logging
from pathlib import Path

import typer

from common.logging_utils import setup_logging_handler

from .config_loader import ConfigLoader
from .formatter import format_config_toml
from .formatter import format_summary
from .models import MouseConfig
from .url_launcher import UrlLauncher

app = typer.Typer(
    help='🖱️  Term Mouse - Validate and use terminal mouse settings',
    no_args_is_help=True
)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Setup logging for the term_mouse package.

    Args:
        debug: Whether to log at DEBUG level
        log_file: Log to this file instead of stderr
    """
    logger = logging.getLogger('term_mouse')
    setup_logging_handler(logger, 'DEBUG' if debug else 'WARNING', log_file)


def _load_config(config: Path | None) -> tuple[MouseConfig, Path]:
    """Load configuration, exiting with status 1 on failure."""
    try:
        return ConfigLoader.load(config)
    except FileNotFoundError as e:
        typer.echo(f'❌ Config file not found: {e}', err=True)
        typer.echo('\n💡 Tip: Create a config file at:', err=True)
        typer.echo('   ~/.config/term-mouse/config.toml', err=True)
        typer.echo("   Run 'term-mouse defaults' for a starting point", err=True)
        raise typer.Exit(1) from e
    except ValueError as e:
        typer.echo(f'❌ Configuration error: {e}', err=True)
        raise typer.Exit(1) from e


@app.command()
def check(
    config: Path | None = typer.Option(None, help="Path to config file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_file: Path | None = typer.Option(None, help="Write log messages to this file"),
) -> None:
    """Validate the [mouse] section of a configuration file.

    Malformed fields are reported as warnings and replaced by their
    defaults; an invalid url_pattern fails the check.

    Examples:
        term-mouse check
        term-mouse check --config /path/to/config.toml --debug
    """
    setup_logging(debug, log_file)

    mouse_config, config_path = _load_config(config)

    typer.echo('✓ Configuration is valid\n')
    typer.echo(f'Config file: {config_path}')
    typer.echo(format_summary(mouse_config))

    launcher = UrlLauncher(mouse_config.url, log_commands=False)
    if mouse_config.url.launcher is not None and not launcher.check_launcher_exists():
        typer.echo('   ⚠️  Warning: URL launcher not found')


@app.command()
def defaults() -> None:
    """Print the default [mouse] section as TOML.

    The launcher shown is the default for the current platform.

    Examples:
        term-mouse defaults >> ~/.config/term-mouse/config.toml
    """
    typer.echo(format_config_toml(MouseConfig()), nl=False)


@app.command(name='open')
def open_url(
    url: str = typer.Argument(..., help="URL to open"),
    config: Path | None = typer.Option(None, help="Path to config file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Open a URL with the configured launcher.

    Examples:
        term-mouse open https://example.org
    """
    setup_logging(debug)

    mouse_config, _config_path = _load_config(config)

    if mouse_config.url.launcher is None:
        typer.echo('❌ URL launcher is disabled in the configuration', err=True)
        raise typer.Exit(1)

    if not UrlLauncher(mouse_config.url).open(url):
        typer.echo(f'❌ Failed to open {url}', err=True)
        raise typer.Exit(1)


if __name__ == '__main__':
    app()
