"""Render structured HTTP API descriptions into cross-linked HTML pages.

This package loads API descriptions (routes, parameters, examples and prose
blocks), stamps them with generation metadata, resolves their table of
contents into anchor links, and renders them with Jinja templates. Several
descriptions can be generated together with an index page linking them.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from routedoc import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
