"""Allow ``python -m type_helpers`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m type_helpers`` behaves identically to the ``type-helpers``
console script.
"""

from __future__ import annotations

from type_helpers.cli.app import cli

if __name__ == "__main__":
    cli()
