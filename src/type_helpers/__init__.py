"""type-helpers — typed generic helpers for everyday Python code.

Guards, collection and object operations, a debounce primitive, and
date/string formatting, all importable from :mod:`type_helpers.core`.
"""

from type_helpers.version import __version__

__all__: list[str] = ["__version__"]
