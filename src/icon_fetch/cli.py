"""Command-line interface for icon-fetch.

Runs the same lookup flow as the GUI, keeping history in a JSON file.
"""

import asyncio
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from .analysis.client import BrandAnalysisClient
from .config import Config, get_user_config_path, load_config, write_default_config
from .core.controller import LookupController, LookupState
from .core.domain import normalize_domain
from .core.favicon import build_icon_url
from .exceptions import InvalidDomainError
from .history.store import FileHistoryStore
from .messages import get_message
from .renderers import BaseRenderer, CLIRenderer, JSONRenderer
from .utils.http_utils import safe_http_get_content
from .utils.logger import VerbosityLevel, setup_logger

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="icon-fetch",
    help="Fetch website favicons with AI brand analysis",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


# ============================================================================
# Validation Functions
# ============================================================================


def validate_verbosity(value: str) -> str:
    """
    Validate verbosity level.

    Args:
        value: Verbosity level string

    Returns:
        Validated verbosity level

    Raises:
        typer.BadParameter: If verbosity is invalid
    """
    valid_levels = [level.value for level in VerbosityLevel]
    if value.lower() not in valid_levels:
        raise typer.BadParameter(
            f"Invalid verbosity: {value}. Must be one of: {', '.join(valid_levels)}"
        )
    return value.lower()


def validate_output_format(value: str) -> str:
    """Validate output format (cli or json)."""
    if value.lower() not in ("cli", "json"):
        raise typer.BadParameter(f"Unknown output format: {value}. Available formats: cli, json")
    return value.lower()


# ============================================================================
# Helper Functions
# ============================================================================


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
]

HistoryFileOption = Annotated[
    Path | None,
    typer.Option(
        "--history-file",
        help="History file (default: ~/.config/icon-fetch/history.json)",
        dir_okay=False,
    ),
]

VerbosityOption = Annotated[
    str,
    typer.Option(
        "--verbosity",
        "-v",
        help="Output verbosity: quiet, normal, verbose, debug",
        callback=validate_verbosity,
    ),
]

FormatOption = Annotated[
    str,
    typer.Option(
        "--format",
        "-f",
        help="Output format: cli, json",
        callback=validate_output_format,
    ),
]


def _load_config(config_file: Path | None) -> Config:
    """Load configuration, falling back to defaults on error."""
    try:
        return load_config(extra_paths=[config_file] if config_file else None)
    except Exception as e:
        logger.warning(f"Failed to load configuration: {e}")
        return Config()


def _history_store(config: Config, history_file: Path | None) -> FileHistoryStore:
    return FileHistoryStore(
        path=history_file or config.history.path,
        max_entries=config.history.max_entries,
    )


def _create_renderer(output_format: str, verbosity: str, config: Config) -> BaseRenderer:
    verbosity_level = VerbosityLevel(verbosity)
    if output_format == "json":
        return JSONRenderer(verbosity=verbosity_level, language=config.output.language)
    return CLIRenderer(
        verbosity=verbosity_level,
        language=config.output.language,
        color=config.output.color,
    )


# ============================================================================
# CLI Commands
# ============================================================================


@app.command()
def lookup(
    domain: Annotated[str, typer.Argument(help="Website address (e.g., github.com)")],
    no_analysis: Annotated[
        bool,
        typer.Option("--no-analysis", help="Skip the AI brand analysis"),
    ] = False,
    verbosity: VerbosityOption = "normal",
    output_format: FormatOption = "cli",
    config_file: ConfigOption = None,
    history_file: HistoryFileOption = None,
) -> None:
    """
    Look up the favicon of a website and analyze its brand.

    The lookup is recorded in history.

    Example:
        icon-fetch lookup github.com
        icon-fetch lookup https://www.github.com/about --format json
        icon-fetch lookup example.com --no-analysis
    """
    setup_logger(level=VerbosityLevel(verbosity))
    config = _load_config(config_file)

    client = BrandAnalysisClient(
        api_key=config.analysis.api_key,
        model=config.analysis.model,
        temperature=config.analysis.temperature,
        enabled=config.analysis.enabled and not no_analysis,
    )
    controller = LookupController(
        history_store=_history_store(config, history_file),
        analysis_client=client,
        icon_url_builder=partial(
            build_icon_url,
            size=config.favicon.size,
            service_url=config.favicon.service_url,
        ),
        language=config.output.language,
    )

    if output_format == "cli" and verbosity != "quiet" and client.available:
        with console.status(get_message("analysis_pending", config.output.language)):
            asyncio.run(controller.submit(domain))
    else:
        asyncio.run(controller.submit(domain))

    if controller.state != LookupState.READY or controller.current is None:
        message = controller.error or get_message("invalid_domain", config.output.language)
        console.print(f"[red]Error: {message}[/red]")
        raise typer.Exit(1)

    renderer = _create_renderer(output_format, verbosity, config)
    renderer.render_lookup(controller.current, controller.analysis)


@app.command()
def history(
    verbosity: VerbosityOption = "normal",
    output_format: FormatOption = "cli",
    config_file: ConfigOption = None,
    history_file: HistoryFileOption = None,
) -> None:
    """
    Show recent lookups, most recent first.

    Example:
        icon-fetch history
        icon-fetch history --format json
    """
    setup_logger(level=VerbosityLevel(verbosity))
    config = _load_config(config_file)

    records = _history_store(config, history_file).load()
    renderer = _create_renderer(output_format, verbosity, config)
    renderer.render_history(records)


@app.command()
def clear_history(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation"),
    ] = False,
    config_file: ConfigOption = None,
    history_file: HistoryFileOption = None,
) -> None:
    """
    Remove all recorded lookups.

    Example:
        icon-fetch clear-history --yes
    """
    config = _load_config(config_file)

    if not yes and not typer.confirm("Clear lookup history?"):
        raise typer.Exit(0)

    store = _history_store(config, history_file)
    try:
        store.clear()
    except OSError as e:
        console.print(f"[red]✗ Failed to clear history: {e}[/red]")
        raise typer.Exit(1)

    console.print("[green]✓ History cleared[/green]")


@app.command()
def download(
    domain: Annotated[str, typer.Argument(help="Website address (e.g., github.com)")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: <domain>.png)", dir_okay=False),
    ] = None,
    size: Annotated[
        int | None,
        typer.Option("--size", "-s", help="Icon size in pixels", min=1),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """
    Download the favicon image of a website.

    Example:
        icon-fetch download github.com
        icon-fetch download github.com -o github.png --size 64
    """
    config = _load_config(config_file)

    try:
        normalized = normalize_domain(domain)
    except InvalidDomainError:
        console.print(f"[red]Error: {get_message('invalid_domain', config.output.language)}[/red]")
        raise typer.Exit(1)

    icon_url = build_icon_url(
        normalized,
        size=size or config.favicon.size,
        service_url=config.favicon.service_url,
    )
    content, error = safe_http_get_content(
        icon_url,
        timeout=config.favicon.timeout,
        user_agent=config.favicon.user_agent,
    )
    if content is None:
        console.print(f"[red]✗ Failed to download icon: {error}[/red]")
        raise typer.Exit(1)

    output_path = output or Path(f"{normalized}.png")
    output_path.write_bytes(content)
    console.print(f"[green]✓ Saved {len(content)} bytes to {output_path}[/green]")


@app.command()
def create_config(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (default: .icon-fetch.toml)",
        ),
    ] = None,
    user: Annotated[
        bool,
        typer.Option(
            "--user",
            help="Write the user config (~/.config/icon-fetch/config.toml)",
        ),
    ] = False,
    current: Annotated[
        bool,
        typer.Option(
            "--current",
            help="Export the effective configuration (files and environment) "
            "instead of the packaged defaults; the API key is never written",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """
    Create a configuration file.

    Example:
        icon-fetch create-config
        icon-fetch create-config --user
        icon-fetch create-config --current --output exported.toml
    """
    if user and output:
        console.print("[red]Error: --user and --output are mutually exclusive[/red]")
        raise typer.Exit(1)

    target = get_user_config_path() if user else (output or Path(".icon-fetch.toml"))

    if target.exists() and not force:
        console.print(f"[yellow]File already exists: {target}[/yellow]")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    try:
        if current:
            target.parent.mkdir(parents=True, exist_ok=True)
            _load_config(config_file).to_toml_file(target)
        else:
            write_default_config(target)
        console.print(f"[green]✓ Created configuration file: {target}[/green]")
    except OSError as e:
        console.print(f"[red]✗ Failed to create config: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    try:
        import importlib.metadata

        version = importlib.metadata.version("icon-fetch")
        console.print(f"icon-fetch version {version}")
    except importlib.metadata.PackageNotFoundError:
        console.print("icon-fetch (version unknown)")


# ============================================================================
# Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
