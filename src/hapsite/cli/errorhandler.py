"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer

from hapsite.config.exceptions import ConfigError, ManifestNotFoundError, ManifestVersionError
from hapsite.context.exceptions import ContextError, MissingDocumentError
from hapsite.exceptions import HapSiteError
from hapsite.logging_setup import console
from hapsite.sync.exceptions import SyncError


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise the original exception. If False, print a
            user-friendly error and exit with code 1.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except (ManifestNotFoundError, ManifestVersionError) as e:
        if debug:
            raise
        console.print(f"[bold red]🏷️ Version Unavailable:[/bold red] {e}")
        console.print("Check the [cyan]version[/cyan] field of the site's package.json.")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except MissingDocumentError as e:
        if debug:
            raise
        console.print(f"[bold red]📄 Missing Document:[/bold red] {e}")
        console.print("Run [cyan]hapsite sync[/cyan] or restore the file, then try again.")
        raise typer.Exit(1) from e
    except ContextError as e:
        if debug:
            raise
        console.print(f"[bold red]🧩 Context Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except SyncError as e:
        if debug:
            raise
        console.print(f"[bold red]📦 Sync Failed:[/bold red] {e}")
        raise typer.Exit(1) from e
    except HapSiteError as e:
        if debug:
            raise
        console.print(f"[bold red]🚨 Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]💥 An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
