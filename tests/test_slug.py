"""Unit tests for anchor slug generation.

The slug rules feed every in-page anchor, so these tests pin the exact output
for ASCII input, transliterated input, and symbol-only runs.
"""

from __future__ import annotations

import pytest

from routedoc.slug import slugify


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        (" ", ""),
        ("    ", ""),
        ("a", "a"),
        ("abc", "abc"),
        ("abc def", "abc-def"),
        ("abc_def", "abc-def"),
        ("abc_def-GHI", "abc-def-ghi"),
        ("abc_def-GHI   789", "abc-def-ghi-789"),
        ("é", "e"),
        ("Crème brûlée", "creme-brulee"),
        ("GET /pets/{id}", "get-pets-id"),
        ("--List pets!--", "list-pets"),
    ],
)
def test_slugify_examples(text: str, expected: str) -> None:
    assert slugify(text) == expected


def test_multi_character_transliteration() -> None:
    """Characters expanding to several ASCII letters keep every letter."""
    assert slugify("Straße") == "strasse"


def test_untransliterable_character_acts_as_separator() -> None:
    """Characters without an ASCII form split words instead of failing."""
    assert slugify("a\U000f0000b") == "a-b"


@pytest.mark.parametrize(
    "text", ["  leading", "trailing!!", "mid -- dle", "Ünïcödé ", "???", "x__y"]
)
def test_separator_never_at_edges_or_doubled(text: str) -> None:
    slug = slugify(text)
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug


@pytest.mark.parametrize("text", ["abc_def-GHI   789", "Crème brûlée", "  x  "])
def test_slugify_is_idempotent(text: str) -> None:
    once = slugify(text)
    assert slugify(once) == once
