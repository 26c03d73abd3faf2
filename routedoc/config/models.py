"""Typed dataclasses describing routedoc site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from routedoc._constants import DEFAULT_INDEX_TITLE, DEFAULT_PYGMENTS_STYLE


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class DocumentConfig:
    """A fully resolved document definition sourced from YAML config.

    Attributes
    ----------
    key : str
        Identifier of the document within the site configuration.
    source : str
        Filesystem path or ``http(s)://`` URL of the API description.
    output : Path
        Destination of the rendered HTML page.
    label : str or None
        Index label override; the suite title is used when ``None``.
    """

    key: str
    source: str
    output: Path
    label: str | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Collection of document configs alongside shared defaults."""

    documents: dict[str, DocumentConfig]
    output_dir: Path = Path("public")
    pygments_style: str = DEFAULT_PYGMENTS_STYLE
    templates_dir: Path | None = None
    index_output: Path | None = None
    index_title: str = DEFAULT_INDEX_TITLE

    def get_document(self, key: str) -> DocumentConfig:
        """Return the document configured under ``key``."""
        try:
            return self.documents[key]
        except KeyError as exc:
            available = ", ".join(sorted(self.documents))
            msg = f"Unknown document '{key}'. Known documents: {available}"
            raise KeyError(msg) from exc


__all__ = ["DocumentConfig", "SiteConfig", "SiteConfigError"]
