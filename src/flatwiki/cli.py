"""CLI interface for Flatwiki.

Command-line tool for serving and inspecting a page directory.
"""

import logging
import sys
from pathlib import Path

import click

from flatwiki.config import Config
from flatwiki.core.store import PageStore
from flatwiki.errors import WikiError

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover flatwiki.toml)",
)

pages_dir_option = click.option(
    "--pages-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Page storage directory (overrides config)",
)


def _load_config(
    config_path: Path | None,
    *,
    host: str | None = None,
    port: int | None = None,
    pages_dir: Path | None = None,
    templates_dir: Path | None = None,
) -> Config:
    try:
        config = Config.load(config_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    return config.with_overrides(
        host=host,
        port=port,
        pages_dir=pages_dir,
        templates_dir=templates_dir,
    )


@click.group()
def cli() -> None:
    """Flatwiki - pages as plain files."""


@cli.command()
@config_option
@pages_dir_option
@click.option(
    "--templates-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory with override templates (overrides config)",
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
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    pages_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the page server."""
    from flatwiki.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(
        config_path,
        host=host,
        port=port,
        pages_dir=pages_dir,
        templates_dir=templates_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Pages directory: {config.pages.pages_dir}")
    if config.templates.templates_dir is not None:
        click.echo(f"Templates directory: {config.templates.templates_dir}")
    else:
        click.echo("Templates: bundled")
    click.echo(f"Routes: {', '.join(config.routes.actions)}")

    try:
        run_server(config)
    except WikiError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command(name="list")
@config_option
@pages_dir_option
def list_command(config_path: Path | None, pages_dir: Path | None) -> None:
    """List stored pages."""
    config = _load_config(config_path, pages_dir=pages_dir)
    store = PageStore(config.pages.pages_dir)

    try:
        entries = store.list()
    except WikiError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not entries:
        click.echo("No pages.")
        return

    for entry in entries:
        click.echo(f"{entry.title}\t{entry.size}")
