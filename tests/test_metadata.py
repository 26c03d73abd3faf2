"""Unit tests for the preparation step that stamps metadata onto suites."""

from __future__ import annotations

import datetime as dt

from routedoc.generator.metadata import build_meta, process
from routedoc.generator.toc import route_link
from routedoc.model import TOC, Meta, Route, Section, Suite


def _suite() -> Suite:
    route = Route(method="GET", resource="/pets", title="List pets", sections=["pets"])
    return Suite(
        title="Petstore",
        routes=[route],
        toc=TOC(sections=[Section(key="pets", title="Pets")]),
    )


def test_process_attaches_meta_and_resolves_toc() -> None:
    meta = Meta(generated=dt.datetime(2025, 1, 2, 3, 4, 5, tzinfo=dt.UTC), index="../index.html")
    suite = _suite()
    processed = process(suite, meta)
    assert processed.meta == meta
    assert processed.toc is not None
    assert processed.toc.sections[0].links == [route_link(suite.routes[0])]


def test_process_leaves_input_untouched() -> None:
    suite = _suite()
    process(suite, build_meta())
    assert suite.meta is None
    assert suite.toc is not None
    assert suite.toc.sections[0].links is None


def test_processing_twice_overwrites_meta() -> None:
    first = Meta(generated=dt.datetime(2025, 1, 1, tzinfo=dt.UTC), index="a.html")
    second = Meta(generated=dt.datetime(2025, 1, 2, tzinfo=dt.UTC))
    once = process(_suite(), first)
    twice = process(once, second)
    assert twice.meta == second
    assert twice.toc == once.toc


def test_suite_without_toc_only_gets_meta() -> None:
    suite = Suite(routes=[Route(method="GET", resource="/")])
    processed = process(suite, build_meta())
    assert processed.toc is None
    assert processed.routes == suite.routes


def test_build_meta_defaults_to_current_utc_time() -> None:
    before = dt.datetime.now(dt.UTC)
    meta = build_meta("index.html")
    after = dt.datetime.now(dt.UTC)
    assert meta.index == "index.html"
    assert meta.generated.tzinfo is not None
    assert before <= meta.generated <= after


def test_sequential_processing_is_monotonic() -> None:
    stamps = [process(_suite(), build_meta()).meta.generated for _ in range(5)]
    assert stamps == sorted(stamps)
