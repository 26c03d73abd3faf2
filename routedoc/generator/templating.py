"""Jinja environment shared by the suite and index generators."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from routedoc.model import RenderError
from routedoc.slug import slugify

if typ.TYPE_CHECKING:
    from routedoc.generator.renderer import HtmlContentRenderer
    from routedoc.model import Content, Route

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(
    renderer: HtmlContentRenderer, templates_dir: Path | None = None
) -> Environment:
    """Return a Jinja environment with routedoc filters registered.

    Filters
    -------
    content
        Render a :class:`~routedoc.model.Content` block to safe HTML; unknown
        kinds render as an inline placeholder instead of failing the page.
    slugify
        Slugify arbitrary text.
    route_anchor
        Anchor id for a route, matching the links in the table of contents.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )

    def _content(value: Content | None) -> Markup:
        if value is None:
            return Markup("")
        return Markup(renderer.text(value))  # noqa: S704 - renderer escapes plain text

    def _route_anchor(route: Route) -> str:
        return slugify(route.label)

    env.filters["content"] = _content
    env.filters["slugify"] = slugify
    env.filters["route_anchor"] = _route_anchor
    return env


def render_template(env: Environment, name: str, **context: typ.Any) -> str:
    """Render template ``name`` with ``context``, wrapping Jinja failures."""
    try:
        template = env.get_template(name)
        return template.render(**context)
    except TemplateError as exc:
        msg = f"Template '{name}' failed to render: {exc}"
        raise RenderError(msg) from exc


__all__ = ["DEFAULT_TEMPLATES_DIR", "build_environment", "render_template"]
