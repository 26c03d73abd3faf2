"""Document model for API descriptions.

This subpackage holds the frozen dataclasses that describe a documentation
suite (:class:`Suite`, :class:`Route`, :class:`TOC` and friends), the
exceptions raised while handling them, and :func:`load_suite`, which reads a
YAML or JSON source into the model.

Examples
--------
>>> from routedoc.model import load_suite
>>> suite = load_suite("api/petstore.yaml")  # doctest: +SKIP
>>> [route.label for route in suite.routes]  # doctest: +SKIP
['List pets', 'GET /pets/{id}']
"""

from .errors import DocumentError, RenderError, RouteDocError, UnsupportedContentType
from .loader import build_suite, load_suite
from .models import (
    TOC,
    Content,
    Entry,
    Example,
    Index,
    Link,
    Listing,
    Meta,
    Parameter,
    Route,
    Section,
    Suite,
)

__all__ = [
    "TOC",
    "Content",
    "DocumentError",
    "Entry",
    "Example",
    "Index",
    "Link",
    "Listing",
    "Meta",
    "Parameter",
    "RenderError",
    "Route",
    "RouteDocError",
    "Section",
    "Suite",
    "UnsupportedContentType",
    "build_suite",
    "load_suite",
]
