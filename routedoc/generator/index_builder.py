"""Build and render the index page listing every generated document.

The index links to each document with a path computed relative to the index
file itself, so the output tree can be served from any root. Entries follow
the order in which documents were configured.

>>> from pathlib import Path
>>> from routedoc.generator import IndexBuilder
>>> builder = IndexBuilder(Path("public/index.html"), generated)  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from pathlib import Path

from routedoc._constants import DEFAULT_INDEX_TITLE, INDEX_TEMPLATE
from routedoc.generator.metadata import build_meta
from routedoc.generator.renderer import HtmlContentRenderer
from routedoc.generator.templating import build_environment, render_template
from routedoc.model import Entry, Index, Link
from routedoc.paths import relative_path

if typ.TYPE_CHECKING:
    from routedoc.generator.suite_generator import GeneratedDocument

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Render a landing page enumerating generated documents."""

    def __init__(
        self,
        output: Path,
        documents: cabc.Sequence[GeneratedDocument],
        *,
        title: str = DEFAULT_INDEX_TITLE,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.output = output
        self.documents = list(documents)
        self.title = title
        self.renderer = renderer or HtmlContentRenderer()
        self.env = build_environment(self.renderer, templates_dir)

    def build(self) -> Index:
        """Return the :class:`Index` model for the configured documents."""
        base = self.output.resolve().parent
        entries = [
            Entry(
                link=Link(
                    title=document.title,
                    url=relative_path(base, document.output.resolve()),
                ),
                detail=document.suite.detail,
            )
            for document in self.documents
        ]
        return Index(entries=entries, title=self.title, meta=build_meta())

    def run(self) -> Path:
        """Render the index HTML file to the configured output path."""
        index = self.build()
        html = render_template(
            self.env,
            INDEX_TEMPLATE,
            index=index,
            html_title=index.title,
            pygments_css=self.renderer.stylesheet,
        )
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(html, encoding="utf-8")
        logger.info("rendered index with %d entries to %s", len(index.entries), self.output)
        return self.output


__all__ = ["IndexBuilder"]
