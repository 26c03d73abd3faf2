"""Resolve table-of-contents sections into route links.

Routes name the sections they belong to; sections do not list their routes.
:func:`with_routes` inverts that relation into per-section link lists,
keeping the declared section order and the source order of routes.

Example
-------
>>> from routedoc.generator.toc import with_routes
>>> from routedoc.model import TOC, Route, Section
>>> toc = TOC(sections=[Section(key="pets", title="Pets")])
>>> routes = [Route(method="GET", resource="/pets", sections=["pets"])]
>>> with_routes(toc, routes).sections[0].links[0].url
'#get-pets'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging

from routedoc.model import TOC, Link, Route
from routedoc.slug import slugify

logger = logging.getLogger(__name__)


def route_link(route: Route) -> Link:
    """Return the in-page link for ``route``, anchored on its slugified label."""
    label = route.label
    return Link(title=label, url=f"#{slugify(label)}")


def with_routes(toc: TOC, routes: cabc.Iterable[Route]) -> TOC:
    """Return a copy of ``toc`` whose sections carry links to their routes.

    Parameters
    ----------
    toc : TOC
        Declared table of contents. Never modified.
    routes : Iterable[Route]
        Routes in source order.

    Returns
    -------
    TOC
        ``toc`` itself when it declares no sections; otherwise a new TOC with
        the same sections in declared order, each holding the links of the
        routes that reference it (an empty list when none do).

    Notes
    -----
    Section keys referenced by a route but absent from the TOC are dropped
    and reported with a warning.
    """
    if not toc.sections:
        return toc

    buckets: dict[str, list[Link]] = {section.key: [] for section in toc.sections}
    for route in routes:
        if not route.sections:
            continue
        link = route_link(route)
        for key in route.sections:
            bucket = buckets.get(key)
            if bucket is None:
                logger.warning(
                    "route '%s' references unknown section '%s'; skipping",
                    route.label,
                    key,
                )
                continue
            bucket.append(link)

    sections = [
        dc.replace(section, links=buckets[section.key]) for section in toc.sections
    ]
    return dc.replace(toc, sections=sections)


def check_anchors(routes: cabc.Iterable[Route]) -> None:
    """Warn about routes whose anchors are empty or shared with another route.

    A label with no sluggable characters produces an empty ``id`` and a bare
    ``#`` link; two routes with the same label share one ``id``, so links to
    the second land on the first.
    """
    owners: dict[str, str] = {}
    for route in routes:
        label = route.label
        anchor = slugify(label)
        if not anchor:
            logger.warning("route '%s' has an empty anchor", label)
            continue
        if anchor in owners:
            logger.warning(
                "route '%s' shares anchor '#%s' with route '%s'",
                label,
                anchor,
                owners[anchor],
            )
            continue
        owners[anchor] = label


__all__ = ["check_anchors", "route_link", "with_routes"]

