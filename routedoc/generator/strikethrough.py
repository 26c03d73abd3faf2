"""Markdown extension rendering ``~~text~~`` as ``<del>`` elements."""

from __future__ import annotations

import typing as typ

from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

if typ.TYPE_CHECKING:
    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any

STRIKETHROUGH_PATTERN = r"(~{2})(.+?)~{2}"


class StrikethroughExtension(Extension):
    """Add GitHub-style strikethrough to a ``markdown.Markdown`` instance.

    Python-Markdown has no built-in strikethrough; this registers a simple
    inline processor just above emphasis so ``~~gone~~`` becomes
    ``<del>gone</del>`` while code spans keep their literal tildes.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the strikethrough inline processor."""
        processor = SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del")
        md.inlinePatterns.register(processor, "routedoc_strikethrough", 65)


__all__ = ["STRIKETHROUGH_PATTERN", "StrikethroughExtension"]
