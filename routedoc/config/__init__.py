"""Load and validate the routedoc site configuration.

This subpackage parses ``routedoc.yaml``, applies shared defaults to every
configured document, and produces typed dataclasses (:class:`SiteConfig`,
:class:`DocumentConfig`) that the generators consume. The primary entry point
is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from routedoc.config import load_site_config
>>> site = load_site_config(Path("routedoc.yaml"))  # doctest: +SKIP
>>> site.get_document("petstore").output  # doctest: +SKIP
PosixPath('public/petstore.html')
"""

from .loader import load_site_config
from .models import DocumentConfig, SiteConfig, SiteConfigError

__all__ = [
    "DocumentConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
