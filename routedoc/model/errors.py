"""Exception types raised while loading and rendering API documents."""

from __future__ import annotations


class RouteDocError(Exception):
    """Base class for routedoc failures."""


class DocumentError(RouteDocError, ValueError):
    """Raised when a source document is missing fields or has the wrong shape.

    The error is fatal for the document being loaded only; batch generation
    skips the document and carries on with its siblings.
    """


class UnsupportedContentType(RouteDocError):
    """Raised when a content block declares a kind the renderer cannot handle."""

    def __init__(self, mime: str) -> None:
        self.mime = mime
        super().__init__(f"Content type is not supported: {mime}")


class RenderError(RouteDocError):
    """Raised when a template fails to render a processed document."""


__all__ = [
    "DocumentError",
    "RenderError",
    "RouteDocError",
    "UnsupportedContentType",
]
