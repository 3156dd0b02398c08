"""Command-line interface for the HAP website tooling."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.panel import Panel

from hapsite.cli.errorhandler import handle_cli_errors
from hapsite.config import (
    CONFIG_FILENAME,
    HapSiteConfig,
    SitePaths,
    load_config,
    read_manifest_version,
    save_config,
)
from hapsite.context import document_store, load_context_catalog, render_context, resolve_version
from hapsite.logging_setup import configure_logging, console
from hapsite.resources import TemplateRenderer
from hapsite.server import build_app, run_server
from hapsite.sync import sync_site

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="hapsite",
    help="Content sync and plain-text context endpoints for the Human Agency Protocol website",
    add_completion=False,
)

SiteRootOption = Annotated[
    Path,
    typer.Option("--site-root", "-s", help="Website directory (holds package.json)"),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks")]


@app.callback()
def _initialize_cli(
    *,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Log at DEBUG level")] = False,
) -> None:
    """Configure logging before any command runs."""
    configure_logging(logging.DEBUG if verbose else None)


@app.command()
def init(
    site_root: Annotated[Path, typer.Argument(help="Website directory to initialize")] = Path(),
) -> None:
    """Write a default hapsite.toml into the website directory."""
    site_root = site_root.resolve()
    config_path = site_root / CONFIG_FILENAME
    if config_path.exists():
        console.print(
            Panel(
                f"[bold yellow]⚠️ Configuration already exists at {config_path}[/bold yellow]\n\n"
                "Edit it directly or remove it to reinitialize.",
                title="📁 Config Exists",
                border_style="yellow",
            )
        )
        return

    save_config(HapSiteConfig(), site_root)
    console.print(
        Panel(
            f"[bold green]✅ Wrote {config_path}[/bold green]\n\n"
            "[bold]Next steps:[/bold]\n"
            f"• Sync content: [cyan]hapsite sync --site-root {site_root}[/cyan]\n"
            f"• Serve contexts: [cyan]hapsite serve --site-root {site_root}[/cyan]",
            title="🛠️ Initialization Complete",
            border_style="green",
        )
    )


@app.command()
def sync(
    site_root: SiteRootOption = Path(),
    *,
    debug: DebugOption = False,
) -> None:
    """Copy versioned, SDK and demo documents into the site's build input.

    Missing sources are reported as warnings; the command still succeeds.
    """
    with handle_cli_errors(debug=debug):
        config = load_config(site_root)
        paths = SitePaths.from_settings(site_root, config.paths)
        version = read_manifest_version(paths.manifest)
        result = sync_site(site_root, config, version)

    if result.complete:
        console.print(f"[green]Synced {len(result.copied)} source(s) for HAP v{version}.[/green]")
    else:
        console.print(
            f"[yellow]Synced {len(result.copied)} source(s) for HAP v{version}; "
            f"skipped: {', '.join(result.skipped)}.[/yellow]"
        )


@app.command()
def render(
    context_name: Annotated[str, typer.Argument(help="Context to assemble (e.g. 'context', 'sdk-context')")],
    site_root: SiteRootOption = Path(),
    *,
    version: Annotated[
        str | None,
        typer.Option("--version", "-v", help="Edition to render (defaults to the site version)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    debug: DebugOption = False,
) -> None:
    """Assemble a context and print it, or write it to a file."""
    with handle_cli_errors(debug=debug):
        config = load_config(site_root)
        paths = SitePaths.from_settings(site_root, config.paths)
        renderer = TemplateRenderer.for_site(paths.templates_dir)
        definition = load_context_catalog(renderer).get(context_name)
        if version is None:
            version = resolve_version(definition, read_manifest_version(paths.manifest))

        store = document_store(definition, paths, version)
        body = render_context(definition, version, store, renderer, config.site)

        if output is None:
            typer.echo(body)
            return
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(body + "\n", encoding="utf-8")

    console.print(f"[green]Wrote {definition.route.lstrip('/')} (v{version}) to {output}[/green]")


@app.command()
def serve(
    site_root: SiteRootOption = Path(),
    *,
    host: Annotated[str | None, typer.Option(help="Interface to bind")] = None,
    port: Annotated[int | None, typer.Option(help="Port to bind")] = None,
    debug: DebugOption = False,
) -> None:
    """Serve every context as a plain-text endpoint."""
    with handle_cli_errors(debug=debug):
        config = load_config(site_root)
        paths = SitePaths.from_settings(site_root, config.paths)
        version = read_manifest_version(paths.manifest)
        fastapi_app = build_app(site_root, config, version)

    exit_code = run_server(
        fastapi_app,
        host=host or config.server.host,
        port=port or config.server.port,
    )
    raise typer.Exit(exit_code)
