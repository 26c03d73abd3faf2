"""Typed dataclasses describing an API documentation suite.

Entities are loaded verbatim from a source document, processed exactly once
(metadata stamped, table of contents resolved) and then handed read-only to
the template renderer. Optional fields that were absent in the source stay
``None`` so templates can tell "not given" apart from "given but empty".
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Content:
    """A block of prose tagged with its content kind.

    Attributes
    ----------
    mime : str
        Declared kind, for example ``"text/markdown"``. Stored verbatim even
        when unsupported; only rendering rejects unknown kinds.
    data : str
        Raw text of the block.
    """

    mime: str
    data: str


@dc.dataclass(frozen=True, slots=True)
class Link:
    """A renderable reference to a route or a generated document."""

    url: str
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Meta:
    """Generation metadata stamped onto a document right before rendering.

    Attributes
    ----------
    generated : datetime
        Timezone-aware UTC timestamp of the generation pass.
    index : str or None
        Relative link from the rendered document to the generated index, when
        an index is part of the batch.
    """

    generated: dt.datetime
    index: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Parameter:
    """A named route parameter."""

    name: str
    data_type: str | None = None
    detail: Content | None = None


@dc.dataclass(frozen=True, slots=True)
class Listing:
    """An opaque example request or response body."""

    entity_type: str | None = None
    title: str | None = None
    data: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Example:
    """A request/response pair illustrating a route."""

    title: str | None = None
    detail: Content | None = None
    request: Listing | None = None
    response: Listing | None = None


@dc.dataclass(frozen=True, slots=True)
class Route:
    """One documented endpoint.

    Attributes
    ----------
    method : str
        HTTP method, for example ``"GET"``.
    resource : str
        Path pattern of the endpoint.
    title : str or None
        Display title; also the anchor source when present.
    detail : Content or None
        Prose describing the route.
    attrs : Mapping or None
        Free-form attributes passed through to templates untouched.
    params : list[Parameter] or None
        Ordered parameters.
    examples : list[Example] or None
        Ordered examples.
    sections : list[str] or None
        Keys of the table-of-contents sections listing this route.
    """

    method: str
    resource: str
    title: str | None = None
    detail: Content | None = None
    attrs: typ.Mapping[str, typ.Any] | None = None
    params: list[Parameter] | None = None
    examples: list[Example] | None = None
    sections: list[str] | None = None

    @property
    def label(self) -> str:
        """Return the title, falling back to ``"{method} {resource}"``."""
        return self.title or f"{self.method} {self.resource}"


@dc.dataclass(frozen=True, slots=True)
class Section:
    """A named grouping of routes in the table of contents.

    ``links`` stays ``None`` until the table of contents is resolved against
    the suite's routes; afterwards it is a (possibly empty) list.
    """

    key: str
    title: str
    detail: Content | None = None
    links: list[Link] | None = None


@dc.dataclass(frozen=True, slots=True)
class TOC:
    """Declared table of contents; section order is the display order."""

    sections: list[Section] = dc.field(default_factory=list)
    detail: Content | None = None


@dc.dataclass(frozen=True, slots=True)
class Suite:
    """Root document describing one API."""

    routes: list[Route] = dc.field(default_factory=list)
    title: str | None = None
    detail: Content | None = None
    toc: TOC | None = None
    meta: Meta | None = None


@dc.dataclass(frozen=True, slots=True)
class Entry:
    """One generated document listed in an index."""

    link: Link
    detail: Content | None = None


@dc.dataclass(frozen=True, slots=True)
class Index:
    """Landing page aggregating every document generated in one batch."""

    entries: list[Entry] = dc.field(default_factory=list)
    title: str | None = None
    meta: Meta | None = None


__all__ = [
    "TOC",
    "Content",
    "Entry",
    "Example",
    "Index",
    "Link",
    "Listing",
    "Meta",
    "Parameter",
    "Route",
    "Section",
    "Suite",
]
