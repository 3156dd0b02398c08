"""Centralized logging configuration for hapsite."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Final, cast

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

_LOG_LEVEL_ENV: Final[str] = "HAPSITE_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "INFO"

console = Console(stderr=True)

if TYPE_CHECKING:

    class _ManagedRichHandler(RichHandler):
        _hapsite_managed: bool
else:
    _ManagedRichHandler = RichHandler


def _resolve_level() -> int:
    """Return the logging level defined via environment variable."""
    level_name = os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level: int | None = None) -> None:
    """Configure logging once with a Rich handler.

    Calling this repeatedly reuses the handler installed by the first call.
    An explicit ``level`` takes precedence over ``HAPSITE_LOG_LEVEL``.
    """
    root_logger = logging.getLogger()
    if level is None:
        level = _resolve_level()

    managed_handler: _ManagedRichHandler | None = None
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler) and getattr(handler, "_hapsite_managed", False):
            managed_handler = cast(_ManagedRichHandler, handler)
            break

    if managed_handler is None:
        root_logger.handlers.clear()
        handler = _ManagedRichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._hapsite_managed = True
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    logging.captureWarnings(True)
