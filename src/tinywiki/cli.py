"""CLI interface for Tinywiki."""

import logging
import sys
from pathlib import Path

import click
from jinja2 import TemplateError

from tinywiki.config import Config


@click.group()
def cli() -> None:
    """Tinywiki - a file-backed wiki server."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover tinywiki.toml)",
)
@click.option(
    "--pages-dir",
    "-d",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding page files (overrides config)",
)
@click.option(
    "--templates-dir",
    "-t",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding view.html and edit.html (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def serve(
    config_path: Path | None,
    pages_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from tinywiki.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            pages_dir=pages_dir,
            templates_dir=templates_dir,
        )

        click.echo(f"Starting server on {config.server.host}:{config.server.port}")
        click.echo(f"Pages directory: {config.wiki.pages_dir}")
        if config.wiki.templates_dir is not None:
            click.echo(f"Templates directory: {config.wiki.templates_dir}")
        else:
            click.echo("Templates: bundled")

        run_server(config)
    except (OSError, ValueError, TemplateError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)
