"""hapsite: content sync and plain-text context endpoints for the HAP website."""

__version__ = "0.2.0"
