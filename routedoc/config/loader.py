"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from routedoc._constants import DEFAULT_INDEX_TITLE, DEFAULT_PYGMENTS_STYLE

from .helpers import _default_output, _optional_path, _optional_str, _resolve_source
from .models import DocumentConfig, SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the documents to generate.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``routedoc.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with every document resolved against the shared
        defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure is not a mapping, no documents are
        defined, or a document lacks a ``source``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from routedoc.config import load_site_config
    >>> config = load_site_config(Path("routedoc.yaml"))  # doctest: +SKIP
    >>> sorted(config.documents)  # doctest: +SKIP
    ['petstore']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise SiteConfigError(msg)

    output_dir = Path(defaults.get("output_dir", "public"))
    pygments_style = defaults.get("pygments_style", DEFAULT_PYGMENTS_STYLE)
    templates_dir = _optional_path(defaults.get("templates_dir"))
    index_output = _optional_path(defaults.get("index_output"))
    index_title = _optional_str(defaults.get("index_title")) or DEFAULT_INDEX_TITLE

    documents_raw = raw.get("documents") or {}
    if not documents_raw:
        msg = "No documents defined in configuration."
        raise SiteConfigError(msg)
    if not isinstance(documents_raw, dict):
        msg = "'documents' must be a mapping of keys to document settings."
        raise SiteConfigError(msg)

    base_dir = path.parent
    documents: dict[str, DocumentConfig] = {}
    for key, payload in documents_raw.items():
        match payload:
            case dict():
                documents[str(key)] = _build_document_config(
                    key=str(key),
                    payload=payload,
                    output_dir=output_dir,
                    base_dir=base_dir,
                )
            case str():
                documents[str(key)] = _build_document_config(
                    key=str(key),
                    payload={"source": payload},
                    output_dir=output_dir,
                    base_dir=base_dir,
                )
            case _:
                msg = f"Document '{key}' must be a mapping or a source path."
                raise SiteConfigError(msg)

    return SiteConfig(
        documents=documents,
        output_dir=output_dir,
        pygments_style=pygments_style,
        templates_dir=templates_dir,
        index_output=index_output,
        index_title=index_title,
    )


def _build_document_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    output_dir: Path,
    base_dir: Path,
) -> DocumentConfig:
    """Build a DocumentConfig for a single entry using defaults and overrides."""
    source = _resolve_source(payload.get("source"), key=key, base_dir=base_dir)
    output = _optional_path(payload.get("output")) or _default_output(key, output_dir)
    return DocumentConfig(
        key=key,
        source=source,
        output=output,
        label=_optional_str(payload.get("label")),
    )


__all__ = ["load_site_config"]
