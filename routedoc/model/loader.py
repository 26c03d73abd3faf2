"""Load API description documents into the typed suite model.

Sources may be local files or ``http(s)://`` URLs. JSON sources are decoded
with msgspec; everything else is read as YAML 1.2 (a superset of JSON) with
ruamel.yaml. Structural problems raise :class:`DocumentError` naming the
offending field, for example ``routes[2].method``.

Example
-------
>>> from routedoc.model.loader import build_suite
>>> suite = build_suite({"routes": [{"method": "GET", "resource": "/pets"}]})
>>> suite.routes[0].label
'GET /pets'
"""

from __future__ import annotations

import io
import logging
import typing as typ
from pathlib import Path
from urllib.parse import urlsplit

import msgspec
import msgspec.json as msgspec_json
import requests
from requests.adapters import HTTPAdapter
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from urllib3.util.retry import Retry

from .errors import DocumentError
from .models import (
    TOC,
    Content,
    Example,
    Listing,
    Parameter,
    Route,
    Section,
    Suite,
)

logger = logging.getLogger(__name__)

Source = str | Path


def load_suite(source: Source) -> Suite:
    """Read ``source`` and build a :class:`Suite` from it.

    Parameters
    ----------
    source : str or Path
        Filesystem path or ``http(s)://`` URL of the API description.

    Returns
    -------
    Suite
        The unprocessed suite; ``meta`` is ``None`` and TOC sections carry no
        links yet.

    Raises
    ------
    DocumentError
        If the source cannot be read or parsed, or its structure is invalid.
    """
    name = str(source)
    text = _read_source(source)
    payload = parse_document(text, name=name)
    logger.debug("loaded document %s", name)
    return build_suite(payload)


def parse_document(text: str, *, name: str) -> typ.Any:
    """Decode raw document text into plain Python data."""
    if name.lower().endswith(".json"):
        try:
            return msgspec_json.decode(text)
        except msgspec.DecodeError as exc:
            msg = f"Could not parse JSON document '{name}': {exc}"
            raise DocumentError(msg) from exc
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        return loader.load(io.StringIO(text))
    except YAMLError as exc:
        msg = f"Could not parse document '{name}': {exc}"
        raise DocumentError(msg) from exc


def _read_source(source: Source) -> str:
    """Return the text behind a local path or remote URL."""
    if isinstance(source, str) and urlsplit(source).scheme in {"http", "https"}:
        return _fetch_source(source)
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Could not read document '{path}': {exc}"
        raise DocumentError(msg) from exc


def _fetch_source(url: str) -> str:
    """Download a remote document, retrying transient server errors."""
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    try:
        resp = session.get(url, timeout=30)
        resp.raise_for_status()
        return resp.text
    except requests.RequestException as exc:
        msg = f"Could not fetch document '{url}': {exc}"
        raise DocumentError(msg) from exc
    finally:
        session.close()


def build_suite(payload: typ.Any) -> Suite:
    """Convert decoded document data into a :class:`Suite`.

    Raises
    ------
    DocumentError
        If required fields are missing or a field has the wrong type.
    """
    data = _mapping(payload, "document")
    routes_raw = data.get("routes")
    if routes_raw is None:
        routes_raw = []
    routes = [
        _build_route(item, f"routes[{idx}]")
        for idx, item in enumerate(_sequence(routes_raw, "routes"))
    ]
    return Suite(
        routes=routes,
        title=_optional_text(data.get("title"), "title"),
        detail=_build_content(data.get("detail"), "detail"),
        toc=_build_toc(data.get("toc"), "toc"),
    )


def _build_route(payload: typ.Any, path: str) -> Route:
    data = _mapping(payload, path)
    method = _required_text(data, "method", path)
    resource = _required_text(data, "resource", path)
    attrs = data.get("attrs")
    if attrs is not None:
        attrs = dict(_mapping(attrs, f"{path}.attrs"))
    params = _optional_list(data.get("params"), f"{path}.params", _build_param)
    examples = _optional_list(
        data.get("examples"), f"{path}.examples", _build_example
    )
    sections_raw = data.get("sections")
    sections = None
    if sections_raw is not None:
        sections = [
            _text(key, f"{path}.sections[{idx}]")
            for idx, key in enumerate(_sequence(sections_raw, f"{path}.sections"))
        ]
    return Route(
        method=method,
        resource=resource,
        title=_optional_text(data.get("title"), f"{path}.title"),
        detail=_build_content(data.get("detail"), f"{path}.detail"),
        attrs=attrs,
        params=params,
        examples=examples,
        sections=sections,
    )


def _build_param(payload: typ.Any, path: str) -> Parameter:
    data = _mapping(payload, path)
    return Parameter(
        name=_required_text(data, "name", path),
        data_type=_optional_text(data.get("data_type"), f"{path}.data_type"),
        detail=_build_content(data.get("detail"), f"{path}.detail"),
    )


def _build_example(payload: typ.Any, path: str) -> Example:
    data = _mapping(payload, path)
    return Example(
        title=_optional_text(data.get("title"), f"{path}.title"),
        detail=_build_content(data.get("detail"), f"{path}.detail"),
        request=_build_listing(data.get("request"), f"{path}.request"),
        response=_build_listing(data.get("response"), f"{path}.response"),
    )


def _build_listing(payload: typ.Any, path: str) -> Listing | None:
    if payload is None:
        return None
    data = _mapping(payload, path)
    return Listing(
        entity_type=_optional_text(data.get("entity_type"), f"{path}.entity_type"),
        title=_optional_text(data.get("title"), f"{path}.title"),
        data=_optional_text(data.get("data"), f"{path}.data"),
    )


def _build_toc(payload: typ.Any, path: str) -> TOC | None:
    if payload is None:
        return None
    data = _mapping(payload, path)
    sections_raw = data.get("sections")
    if sections_raw is None:
        sections_raw = []
    sections: list[Section] = []
    seen: set[str] = set()
    for idx, item in enumerate(_sequence(sections_raw, f"{path}.sections")):
        section = _build_section(item, f"{path}.sections[{idx}]")
        if section.key in seen:
            msg = f"{path}.sections[{idx}]: duplicate section key '{section.key}'"
            raise DocumentError(msg)
        seen.add(section.key)
        sections.append(section)
    return TOC(
        sections=sections,
        detail=_build_content(data.get("detail"), f"{path}.detail"),
    )


def _build_section(payload: typ.Any, path: str) -> Section:
    data = _mapping(payload, path)
    return Section(
        key=_required_text(data, "key", path),
        title=_required_text(data, "title", path),
        detail=_build_content(data.get("detail"), f"{path}.detail"),
    )


def _build_content(payload: typ.Any, path: str) -> Content | None:
    if payload is None:
        return None
    data = _mapping(payload, path)
    return Content(
        mime=_required_text(data, "type", path),
        data=_required_text(data, "data", path),
    )


T = typ.TypeVar("T")


def _optional_list(
    payload: typ.Any, path: str, build: typ.Callable[[typ.Any, str], T]
) -> list[T] | None:
    if payload is None:
        return None
    return [
        build(item, f"{path}[{idx}]")
        for idx, item in enumerate(_sequence(payload, path))
    ]


def _mapping(value: typ.Any, path: str) -> typ.Mapping[str, typ.Any]:
    if not isinstance(value, dict):
        msg = f"{path}: expected a mapping, got {type(value).__name__}"
        raise DocumentError(msg)
    return value


def _sequence(value: typ.Any, path: str) -> list[typ.Any]:
    if not isinstance(value, list):
        msg = f"{path}: expected a list, got {type(value).__name__}"
        raise DocumentError(msg)
    return value


def _required_text(data: typ.Mapping[str, typ.Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        msg = f"{path}: missing required field '{key}'"
        raise DocumentError(msg)
    return _text(value, f"{path}.{key}")


def _optional_text(value: typ.Any, path: str) -> str | None:
    if value is None:
        return None
    return _text(value, path)


def _text(value: typ.Any, path: str) -> str:
    match value:
        case str():
            return value
        case bool():
            msg = f"{path}: expected a string, got bool"
            raise DocumentError(msg)
        case int() | float():
            return str(value)
        case _:
            msg = f"{path}: expected a string, got {type(value).__name__}"
            raise DocumentError(msg)


__all__ = ["build_suite", "load_suite", "parse_document"]
