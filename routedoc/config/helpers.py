"""Utility helpers shared by the routedoc configuration loader."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

from routedoc._constants import DOCUMENT_FILENAME_TEMPLATE
from routedoc.slug import slugify

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None) -> Path | None:
    """Return a Path for non-empty values, otherwise None."""
    text = _optional_str(value)
    return Path(text) if text else None


def _resolve_source(value: object | None, *, key: str, base_dir: Path) -> str:
    """Return a URL unchanged or a path anchored at ``base_dir``."""
    text = _optional_str(value)
    if not text:
        msg = f"Document '{key}' is missing 'source'."
        raise SiteConfigError(msg)
    if urlsplit(text).scheme in {"http", "https"}:
        return text
    path = Path(text)
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _default_output(key: str, output_dir: Path) -> Path:
    """Return ``output_dir/<slug>.html`` for a document key."""
    stem = slugify(key) or "document"
    return output_dir / DOCUMENT_FILENAME_TEMPLATE.format(key=stem)


__all__ = [
    "_default_output",
    "_optional_path",
    "_optional_str",
    "_resolve_source",
]
