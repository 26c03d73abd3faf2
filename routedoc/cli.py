"""Cyclopts CLI entrypoint for generating API documentation pages.

The ``routedoc`` console script renders every document listed in a
``routedoc.yaml`` site configuration, plus an index page linking them, or
renders a single API description without any configuration.

Examples
--------
Generate every configured document and the index:

>>> from routedoc.cli import main
>>> main()  # doctest: +SKIP

Render a single description into a custom location:

>>> from routedoc.cli import app
>>> app(["render", "api/petstore.yaml", "--output", "dist/petstore.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from pygments.util import ClassNotFound

from ._constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_PYGMENTS_STYLE,
    DOCUMENT_FILENAME_TEMPLATE,
)
from .config import DocumentConfig, SiteConfigError, load_site_config
from .generator import HtmlContentRenderer, SuiteGenerator, generate_site
from .model import RouteDocError
from .slug import slugify

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)
CLI_ERRORS = (SiteConfigError, RouteDocError, FileNotFoundError, KeyError, ClassNotFound)

app = App(name="routedoc", config=cyclopts.config.Env("ROUTEDOC_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, debug: bool) -> None:
    """Send library log records to stderr at WARNING, or DEBUG with ``--debug``."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(exc: Exception) -> typ.NoReturn:
    """Print ``exc`` as a ``* * *`` error line and exit with status ``1``."""
    message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
    print(f"* * * {message}")
    sys.exit(1)


@app.command(help="Generate documentation pages for every configured API description.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="ROUTEDOC_CONFIG")
    ] = DEFAULT_CONFIG,
    document: typ.Annotated[
        list[str] | None,
        Parameter(help="Only generate these document keys", env_var="ROUTEDOC_DOCUMENT"),
    ] = None,
    debug: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate documentation pages and the index for a site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``routedoc.yaml`` configuration file.
    document : list[str] or None, optional
        Document keys to render; when ``None`` (default) all documents are
        rendered.
    debug : bool, optional
        Emit debug logging to stderr.

    Raises
    ------
    SystemExit
        With status ``1`` when at least one document failed; the remaining
        documents and the index are still written. Configuration, style and
        index errors also exit with ``1`` after printing a ``* * *`` line.
    """
    _configure_logging(debug=debug)
    try:
        site_config = load_site_config(config)
        report = generate_site(site_config, document)
    except CLI_ERRORS as exc:
        _fail(exc)
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for key, error in report.failures.items():
        print(f"* * * {key}: {error}")
    if not report.ok:
        sys.exit(1)


@app.command(help="Render a single API description without a site config.")
def render(
    source: typ.Annotated[str, Parameter(help="Path or URL of the API description")],
    *,
    output: typ.Annotated[
        Path | None, Parameter(help="Where to write the HTML page")
    ] = None,
    pygments_style: typ.Annotated[
        str, Parameter(help="Pygments style for code blocks")
    ] = DEFAULT_PYGMENTS_STYLE,
    debug: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render one API description to HTML.

    Parameters
    ----------
    source : str
        Filesystem path or ``http(s)://`` URL of the description.
    output : Path or None, optional
        Output file; defaults to ``<slug of the source stem>.html`` in the
        current directory.
    pygments_style : str, optional
        Pygments style used for highlighted code.
    debug : bool, optional
        Emit debug logging to stderr.
    """
    _configure_logging(debug=debug)
    key = Path(source).stem
    target = output or Path(
        DOCUMENT_FILENAME_TEMPLATE.format(key=slugify(key) or "document")
    )
    try:
        generator = SuiteGenerator(
            DocumentConfig(key=key, source=source, output=target),
            renderer=HtmlContentRenderer(pygments_style),
        )
        generated = generator.run()
    except CLI_ERRORS as exc:
        _fail(exc)
    print(f"wrote {_format_path(generated.output)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``routedoc`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
