"""Template rendering behind a small protocol.

Route handlers only ever call ``render(name, context)`` on whatever renderer
the app was built with; Jinja is the default backend.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol

from flask import Flask, current_app, render_template
from jinja2 import TemplateNotFound, meta

from shopfront.app.errors import ConfigurationError

EXTENSION_KEY = "shopfront.renderer"


class TemplateRenderer(Protocol):
    def render(self, name: str, context: Mapping[str, Any]) -> bytes: ...

    def verify(self, names: Iterable[str]) -> None: ...


class JinjaRenderer:
    """Renders through Flask's Jinja environment (context processors included)."""

    def __init__(self, app: Flask) -> None:
        self._env = app.jinja_env

    def render(self, name: str, context: Mapping[str, Any]) -> bytes:
        return render_template(name, **context).encode("utf-8")

    def verify(self, names: Iterable[str]) -> None:
        """Load every named template and the layouts and partials it pulls in.

        Jinja resolves ``extends`` and ``include`` only at render time, so the
        references are followed here by parsing each source.
        """
        pending = list(names)
        seen: set[str] = set()
        while pending:
            name = pending.pop(0)
            if name in seen:
                continue
            seen.add(name)
            try:
                source, _, _ = self._env.loader.get_source(self._env, name)
            except TemplateNotFound as err:
                raise ConfigurationError("Template not found", template=name) from err
            # Names built at render time come back as None and cannot be checked
            pending.extend(
                ref for ref in meta.find_referenced_templates(self._env.parse(source)) if ref
            )


def init_renderer(app: Flask, renderer: TemplateRenderer | None = None) -> TemplateRenderer:
    renderer = renderer or JinjaRenderer(app)
    app.extensions[EXTENSION_KEY] = renderer
    return renderer


def get_renderer() -> TemplateRenderer:
    return current_app.extensions[EXTENSION_KEY]
