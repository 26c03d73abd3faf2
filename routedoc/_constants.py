"""Common literal values used across routedoc.

Template names and defaults live here so the generators, CLI, and tests can
import the same values without drifting. Intended for internal use within the
routedoc package.

Examples
--------
>>> from routedoc import _constants
>>> _constants.DOCUMENT_FILENAME_TEMPLATE.format(key="petstore")
'petstore.html'
"""

SUITE_TEMPLATE = "suite.jinja"
INDEX_TEMPLATE = "index.jinja"
DOCUMENT_FILENAME_TEMPLATE = "{key}.html"
DEFAULT_CONFIG_FILENAME = "routedoc.yaml"
DEFAULT_PYGMENTS_STYLE = "monokai"
DEFAULT_INDEX_TITLE = "API reference"
