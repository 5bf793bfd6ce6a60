"""CLI entry point for podfeed."""

import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from podfeed.config.logging import LOGGER_NAME, setup_logging
from podfeed.config.manager import ConfigManager
from podfeed.config.schema import PodfeedConfig
from podfeed.output.writer import FeedWriter
from podfeed.pipeline import PipelineOrchestrator, convert_page
from podfeed.utils.errors import ConfigError, MalformedPageError, PodfeedError

app = typer.Typer(
    name="podfeed",
    help="Turn a podcast content API page into an iTunes-ready RSS feed",
    no_args_is_help=True,
)
console = Console(stderr=True)
logger = logging.getLogger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podfeed - build podcast RSS feeds from a JSON content API."""
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = {"verbose": verbose}


def _load_config(ctx: typer.Context, config_path: Path | None) -> PodfeedConfig:
    """Load the explicit or default config and apply its log level."""
    manager = ConfigManager()
    if config_path is not None:
        config = manager.load_config_file(config_path)
    else:
        config = manager.load_config()

    if not (ctx.obj or {}).get("verbose"):
        logging.getLogger(LOGGER_NAME).setLevel(config.log_level)
    return config


def _fail(error: PodfeedError) -> None:
    """Log the error and terminate the run."""
    logger.debug("Run aborted", exc_info=True)
    console.print(f"[red]✗[/red] Error: {error}")
    sys.exit(1)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podfeed import __version__

    typer.echo(f"podfeed v{__version__}")


@app.command("init")
def init_config(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Create the default configuration file."""
    manager = ConfigManager()
    if manager.create_default_config(overwrite=force):
        console.print(f"[green]✓[/green] Config written to {manager.config_file}")
    else:
        console.print(
            f"[yellow]![/yellow] Config already exists at {manager.config_file} "
            "(use --force to replace it)"
        )


@app.command("generate")
def generate(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: user config dir)"
    ),
    url: str | None = typer.Option(None, "--url", help="Content API page URL"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Feed file to write"),
) -> None:
    """Fetch episodes from the content API and write the RSS feed.

    Examples:
        podfeed generate --url "https://api.example.com/posts?apikey=..."

        podfeed generate -c feed.yaml -o public/feed.xml
    """
    try:
        config = _load_config(ctx, config_path)
        if url:
            config.source.url = url
        if output:
            config.output.path = output

        written = PipelineOrchestrator(config).run()
        console.print(f"[green]✓[/green] Feed written to {written}")

    except PodfeedError as e:
        _fail(e)


@app.command("render")
def render(
    ctx: typer.Context,
    input_file: Path = typer.Argument(..., help="Saved content API JSON page"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: user config dir)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Feed file to write (default: stdout)"
    ),
) -> None:
    """Convert a saved JSON page into an RSS feed without fetching."""
    try:
        config = _load_config(ctx, config_path)

        try:
            with open(input_file, encoding="utf-8") as f:
                page = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Input file not found: {input_file}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read input file {input_file}: {e}") from e
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedPageError(f"{input_file} is not valid JSON: {e}") from e

        document = convert_page(page, config.channel, escape_guid=config.output.escape_guid)

        if output is None:
            typer.echo(document)
        else:
            written = FeedWriter().write(output, document)
            console.print(f"[green]✓[/green] Feed written to {written}")

    except PodfeedError as e:
        _fail(e)


if __name__ == "__main__":
    app()
