"""Compute relative links between independently placed output files.

Generated pages link to each other (documents to the index and back) without
knowing where the output root will be served from. Paths are compared purely
by component, so the result stays correct when the whole tree is relocated.

Example
-------
>>> from routedoc.paths import relative_path
>>> relative_path("/a/b/x", "/a/b/c/d.foo")
'../c/d.foo'
>>> relative_path("/a", "/a")
''
"""

from __future__ import annotations

import collections.abc as cabc
import os
from pathlib import PurePath, PurePosixPath

PARENT = ".."

PathLike = str | os.PathLike[str] | cabc.Sequence[str]


def relative_path(from_: PathLike, to: PathLike) -> str:
    """Return the minimal relative path leading from ``from_`` to ``to``.

    Parameters
    ----------
    from_ : str, PathLike, or sequence of str
        Directory the link is resolved against. Strings and path objects are
        split into components; sequences are used as-is.
    to : str, PathLike, or sequence of str
        Target location.

    Returns
    -------
    str
        ``..`` once for every component of ``from_`` beyond the common prefix,
        followed by the rest of ``to``, joined with ``/``. Identical inputs
        yield ``""``.

    Notes
    -----
    Components are compared for exact, case-sensitive equality. Existing
    ``.``/``..`` segments and symlinks are not resolved.
    """
    source = _components(from_)
    target = _components(to)
    common = 0
    for left, right in zip(source, target, strict=False):
        if left != right:
            break
        common += 1
    parts = [PARENT] * (len(source) - common) + list(target[common:])
    return "/".join(parts)


def _components(value: PathLike) -> tuple[str, ...]:
    """Split ``value`` into its path components."""
    match value:
        case str():
            return PurePosixPath(value).parts
        case PurePath():
            return value.parts
        case os.PathLike():
            return PurePosixPath(os.fspath(value)).parts
        case _:
            return tuple(value)


__all__ = ["PARENT", "relative_path"]
