"""Generate every configured document and the index that links them."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from routedoc.generator.index_builder import IndexBuilder
from routedoc.generator.renderer import HtmlContentRenderer
from routedoc.generator.suite_generator import GeneratedDocument, SuiteGenerator
from routedoc.model import RouteDocError, load_suite

if typ.TYPE_CHECKING:
    from routedoc.config import SiteConfig

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class GenerationReport:
    """Outcome of a batch run.

    Attributes
    ----------
    documents : list[GeneratedDocument]
        Successfully generated documents, in configuration order.
    failures : dict[str, RouteDocError]
        Errors keyed by document key for documents that were skipped.
    index : Path or None
        Path of the written index page, when one was built.
    """

    documents: list[GeneratedDocument] = dc.field(default_factory=list)
    failures: dict[str, RouteDocError] = dc.field(default_factory=dict)
    index: Path | None = None

    @property
    def written(self) -> list[Path]:
        """Return every written artifact, documents first."""
        paths = [document.output for document in self.documents]
        if self.index is not None:
            paths.append(self.index)
        return paths

    @property
    def ok(self) -> bool:
        """Return ``True`` when no document failed."""
        return not self.failures


def generate_site(
    site_config: SiteConfig, keys: cabc.Iterable[str] | None = None
) -> GenerationReport:
    """Render the selected documents (all by default) and the index page.

    A document that fails to load or render is logged and recorded in the
    report; its siblings are still generated and the index lists only the
    documents that were written. When ``keys`` narrows the run, the index
    also keeps the other configured documents whose pages already exist.

    Raises
    ------
    KeyError
        If ``keys`` names a document that is not configured.
    """
    if keys is None:
        selected = list(site_config.documents.values())
    else:
        selected = [site_config.get_document(key) for key in keys]

    renderer = HtmlContentRenderer(site_config.pygments_style)
    report = GenerationReport()
    for document in selected:
        generator = SuiteGenerator(
            document,
            renderer=renderer,
            templates_dir=site_config.templates_dir,
            index_output=site_config.index_output,
        )
        try:
            report.documents.append(generator.run())
        except RouteDocError as exc:
            logger.error("skipping document %s: %s", document.key, exc)
            report.failures[document.key] = exc

    if site_config.index_output is not None:
        builder = IndexBuilder(
            site_config.index_output,
            _index_documents(site_config, report, partial=keys is not None),
            title=site_config.index_title,
            renderer=renderer,
            templates_dir=site_config.templates_dir,
        )
        report.index = builder.run()
    return report


def _index_documents(
    site_config: SiteConfig, report: GenerationReport, *, partial: bool
) -> list[GeneratedDocument]:
    """Return the documents the index lists, in configuration order.

    A full run lists what it wrote. A partial run also keeps unselected
    documents whose pages already exist, reloading their sources for the
    entry title and detail, so the index still covers the whole site.
    """
    if not partial:
        return report.documents
    generated = {document.key: document for document in report.documents}
    entries: list[GeneratedDocument] = []
    for document in site_config.documents.values():
        if document.key in generated:
            entries.append(generated[document.key])
            continue
        if document.key in report.failures or not document.output.exists():
            continue
        try:
            suite = load_suite(document.source)
        except RouteDocError as exc:
            logger.warning("leaving %s out of the index: %s", document.key, exc)
            continue
        entries.append(
            GeneratedDocument(
                key=document.key,
                output=document.output,
                suite=suite,
                label=document.label,
            )
        )
    return entries


__all__ = ["GenerationReport", "generate_site"]
