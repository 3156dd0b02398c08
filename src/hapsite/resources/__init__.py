"""Packaged resources: prose templates and the edition table."""

from hapsite.resources.templates import PACKAGE_TEMPLATES_DIR, TemplateRenderer, resolve_search_paths

__all__ = ["PACKAGE_TEMPLATES_DIR", "TemplateRenderer", "resolve_search_paths"]
