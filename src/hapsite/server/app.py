"""FastAPI app serving the assembled contexts as plain text."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from hapsite.config.paths import SitePaths
from hapsite.context.assembler import render_context
from hapsite.context.catalog import ContextCatalog, ContextDefinition, load_context_catalog
from hapsite.context.sources import document_store, resolve_versions
from hapsite.exceptions import HapSiteError
from hapsite.resources.templates import TemplateRenderer

if TYPE_CHECKING:
    from pathlib import Path

    from hapsite.config.settings import HapSiteConfig, SiteSettings

logger = logging.getLogger(__name__)

ERROR_BODY = "Internal Server Error"


def _context_endpoint(
    definition: ContextDefinition,
    version: str,
    paths: SitePaths,
    renderer: TemplateRenderer,
    site: SiteSettings,
) -> Callable[[], PlainTextResponse]:
    def endpoint() -> PlainTextResponse:
        # Files are re-read on every request.
        store = document_store(definition, paths, version)
        body = render_context(definition, version, store, renderer, site)
        return PlainTextResponse(body, status_code=200)

    return endpoint


async def _handle_site_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Failed to serve %s: %s", request.url.path, exc)
    return PlainTextResponse(ERROR_BODY, status_code=500)


def build_app(
    site_root: Path,
    config: HapSiteConfig,
    site_version: str,
    *,
    renderer: TemplateRenderer | None = None,
    catalog: ContextCatalog | None = None,
) -> FastAPI:
    """Construct the FastAPI application with one GET route per context."""
    paths = SitePaths.from_settings(site_root, config.paths)
    renderer = renderer or TemplateRenderer.for_site(paths.templates_dir)
    catalog = catalog or load_context_catalog(renderer)
    versions = resolve_versions(catalog, site_version)

    app = FastAPI(title=f"{config.site.title} context endpoints")
    app.state.paths = paths
    app.state.versions = versions

    for definition in catalog.definitions():
        app.add_api_route(
            definition.route,
            _context_endpoint(definition, versions[definition.name], paths, renderer, config.site),
            methods=["GET"],
            response_class=PlainTextResponse,
            name=definition.name,
        )
        logger.debug("Serving %s v%s at %s", definition.name, versions[definition.name], definition.route)

    app.add_exception_handler(HapSiteError, _handle_site_error)
    return app


def run_server(app: FastAPI, *, host: str, port: int) -> int:
    """Run the uvicorn server for the supplied FastAPI app."""
    url = f"http://{host}:{port}/"
    logger.info("Starting context server at %s", url)

    try:
        config = uvicorn.Config(app, host=host, port=port, log_config=None)
        server = uvicorn.Server(config)
        server.run()
    except Exception:  # pragma: no cover - depends on the bind environment
        logger.exception("Failed to start context server at %s", url)
        return 3
    return 0
