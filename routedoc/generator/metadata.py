"""Prepare a suite for rendering by stamping generation metadata."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt

from routedoc.generator.toc import check_anchors, with_routes
from routedoc.model import Meta, Suite


def build_meta(index: str | None = None, *, generated: dt.datetime | None = None) -> Meta:
    """Return a :class:`Meta` stamped with ``generated`` or the current UTC time."""
    return Meta(generated=generated or dt.datetime.now(dt.UTC), index=index)


def process(suite: Suite, meta: Meta) -> Suite:
    """Return a copy of ``suite`` carrying ``meta`` and a resolved TOC.

    This is the last step before the suite is handed to the template
    renderer. ``suite`` itself is left untouched; processing an already
    processed suite replaces its metadata and recomputes the section links
    from the declared sections. Routes whose anchors are empty or
    collide are reported with a warning.
    """
    check_anchors(suite.routes)
    toc = suite.toc
    if toc is not None:
        toc = with_routes(toc, suite.routes)
    return dc.replace(suite, meta=meta, toc=toc)


__all__ = ["build_meta", "process"]
