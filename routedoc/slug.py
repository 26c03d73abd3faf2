"""Derive ASCII anchor identifiers from display text.

Letters are lower-cased, digits kept, and every run of other characters
collapses into a single ``-``. Non-ASCII characters are transliterated with
Unidecode first, so accented titles still produce readable anchors.

Example
-------
>>> from routedoc.slug import slugify
>>> slugify("abc_def-GHI   789")
'abc-def-ghi-789'
>>> slugify("Café menu")
'cafe-menu'
"""

from __future__ import annotations

from unidecode import unidecode

SEPARATOR = "-"


def slugify(text: str) -> str:
    """Return a lowercase, hyphen-separated ASCII slug for ``text``.

    The function is total: empty or symbol-only input yields ``""`` and the
    result never starts or ends with the separator.
    """
    emitted: list[str] = []
    for char in text:
        if char.isascii():
            _push(emitted, char)
            continue
        expansion = unidecode(char)
        if not expansion:
            _push(emitted, SEPARATOR)
            continue
        for sub in expansion:
            _push(emitted, sub)
    if emitted and emitted[-1] == SEPARATOR:
        emitted.pop()
    return "".join(emitted)


def _push(emitted: list[str], char: str) -> None:
    """Append the slug form of ``char``, suppressing leading and doubled separators."""
    if char.isascii() and char.isalnum():
        emitted.append(char.lower())
    elif emitted and emitted[-1] != SEPARATOR:
        emitted.append(SEPARATOR)


__all__ = ["SEPARATOR", "slugify"]
