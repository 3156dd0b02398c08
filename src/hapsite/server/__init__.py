"""HTTP endpoints for the assembled contexts."""

from hapsite.server.app import ERROR_BODY, build_app, run_server

__all__ = ["ERROR_BODY", "build_app", "run_server"]
