"""Render content blocks into HTML.

Content blocks carry a declared kind. Plain text is escaped here; markdown is
converted with Python-Markdown (tables, fenced code, strikethrough) and fenced
code is highlighted with Pygments and tagged with a ``data-language``
attribute. The set of supported kinds is closed: see :class:`ContentKind`.

Example
-------
>>> from routedoc.generator.renderer import HtmlContentRenderer
>>> from routedoc.model import Content
>>> HtmlContentRenderer().render(Content("text/plain", "<b>"))
'&lt;b&gt;'
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import functools
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from routedoc._constants import DEFAULT_PYGMENTS_STYLE
from routedoc.generator.strikethrough import StrikethroughExtension
from routedoc.model.errors import UnsupportedContentType

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

    from routedoc.model import Content
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any
    Content = typ.Any

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
LANGUAGE_PREFIX = "language-"


class ContentKind(enum.StrEnum):
    """Content kinds the renderer understands."""

    PLAIN = "text/plain"
    MARKDOWN = "text/markdown"


class LanguageHtmlFormatter(HtmlFormatter):
    """Pygments HTML formatter that tags its wrapper ``div`` with the language.

    Python-Markdown's ``codehilite`` builds one formatter per code block and
    passes ``lang_str`` (``lang_prefix`` followed by the lexer's primary
    alias), so fenced, tilde-fenced and indented blocks each carry their own
    language. Blocks without a recognised language are tagged ``text``.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANGUAGE_PREFIX) or "text"

    def _wrap_div(
        self, inner: cabc.Iterable[tuple[int, str]]
    ) -> cabc.Iterator[tuple[int, str]]:
        pieces = super()._wrap_div(inner)
        kind, opening = next(pieces)
        attribute = f' data-language="{escape(self.language, quote=True)}"'
        yield kind, opening.replace(">", f"{attribute}>", 1)
        yield from pieces


class HtmlContentRenderer:
    """Render content blocks with consistent markdown and code styling."""

    def __init__(self, pygments_style: str = DEFAULT_PYGMENTS_STYLE) -> None:
        """Initialize a renderer with the Pygments style used for code blocks."""
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, content: Content) -> str:
        """Render ``content`` to HTML according to its declared kind.

        Raises
        ------
        UnsupportedContentType
            If ``content.mime`` is not one of :class:`ContentKind`.
        """
        try:
            kind = ContentKind(content.mime)
        except ValueError as exc:
            raise UnsupportedContentType(content.mime) from exc
        match kind:
            case ContentKind.PLAIN:
                return escape(content.data)
            case ContentKind.MARKDOWN:
                return self.markdown(content.data)

    def text(self, content: Content) -> str:
        """Render ``content``, substituting a visible placeholder on failure."""
        try:
            return self.render(content)
        except UnsupportedContentType as exc:
            return f"* * * {escape(str(exc))}"

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
            StrikethroughExtension(),
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageHtmlFormatter,
                    "lang_prefix": LANGUAGE_PREFIX,
                }
            },
        )
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


@functools.cache
def default_renderer() -> HtmlContentRenderer:
    """Return a shared renderer using the default Pygments style."""
    return HtmlContentRenderer()


def render(content: Content) -> str:
    """Render ``content`` with the default renderer; see :meth:`HtmlContentRenderer.render`."""
    return default_renderer().render(content)


def text(content: Content) -> str:
    """Render ``content`` with the default renderer, never raising."""
    return default_renderer().text(content)


__all__ = [
    "ContentKind",
    "HtmlContentRenderer",
    "LanguageHtmlFormatter",
    "default_renderer",
    "render",
    "text",
]
