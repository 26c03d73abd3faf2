"""High-level orchestration for rendering one API description.

:class:`SuiteGenerator` loads a document described by a
:class:`~routedoc.config.DocumentConfig`, stamps it with generation metadata
(including the relative link back to the index, when one is built), resolves
its table of contents and writes the rendered HTML page.

Example
-------
>>> from pathlib import Path
>>> from routedoc.config import load_site_config
>>> from routedoc.generator import SuiteGenerator
>>> config = load_site_config(Path("routedoc.yaml"))  # doctest: +SKIP
>>> document = config.get_document("petstore")  # doctest: +SKIP
>>> SuiteGenerator(document).run().output  # doctest: +SKIP
PosixPath('public/petstore.html')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from routedoc._constants import SUITE_TEMPLATE
from routedoc.generator.metadata import build_meta, process
from routedoc.generator.renderer import HtmlContentRenderer
from routedoc.generator.templating import build_environment, render_template
from routedoc.model import load_suite
from routedoc.paths import relative_path

if typ.TYPE_CHECKING:
    from routedoc.config import DocumentConfig
    from routedoc.model import Suite

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class GeneratedDocument:
    """A document written to disk together with its processed suite."""

    key: str
    output: Path
    suite: Suite
    label: str | None = None

    @property
    def title(self) -> str:
        """Return the label override, the suite title, or the document key."""
        return self.label or self.suite.title or self.key


class SuiteGenerator:
    """Render a single API description into a themed HTML page."""

    def __init__(
        self,
        document: DocumentConfig,
        *,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
        index_output: Path | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        document : DocumentConfig
            Source location and output path of the document.
        renderer : HtmlContentRenderer, optional
            Content renderer; a default-styled renderer is created when omitted.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        index_output : Path, optional
            Location of the batch index page, used to stamp ``Meta.index``.
        """
        self.document = document
        self.renderer = renderer or HtmlContentRenderer()
        self.index_output = index_output
        self.env = build_environment(self.renderer, templates_dir)

    def run(self) -> GeneratedDocument:
        """Load, process, render and write the document.

        Raises
        ------
        DocumentError
            If the source cannot be read or is structurally invalid.
        RenderError
            If the page template fails.
        """
        suite = load_suite(self.document.source)
        processed = process(suite, build_meta(self._index_link()))
        html = self.render(processed)
        output = self.document.output
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        logger.info("rendered %s to %s", self.document.key, output)
        return GeneratedDocument(
            key=self.document.key,
            output=output,
            suite=processed,
            label=self.document.label,
        )

    def render(self, suite: Suite) -> str:
        """Render a processed suite with the page template."""
        return render_template(
            self.env,
            SUITE_TEMPLATE,
            suite=suite,
            html_title=suite.title or self.document.label or self.document.key,
            pygments_css=self.renderer.stylesheet,
        )

    def _index_link(self) -> str | None:
        """Return the link from the document's directory to the index page."""
        if self.index_output is None:
            return None
        return relative_path(
            self.document.output.resolve().parent, self.index_output.resolve()
        )


__all__ = ["GeneratedDocument", "SuiteGenerator"]
