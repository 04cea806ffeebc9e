"""Custom exception hierarchy for type-helpers.

Well-typed input never raises; these exceptions cover the edge cases
where a sentinel return would hide a caller bug (negative lengths,
unparseable dates, values that cannot be copied).  Every exception the
library raises inherits from :class:`TypeHelpersError` so the CLI error
boundary can render a clean message.

Hierarchy
---------
TypeHelpersError
├── InvalidArgumentError (also ValueError)
├── InvalidDateError (also ValueError)
├── CloneError
└── EnvironmentError
"""

from __future__ import annotations


class TypeHelpersError(Exception):
    """Base exception for all type-helpers errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arguments -------------------------------------------------------------

class InvalidArgumentError(TypeHelpersError, ValueError):
    """Raised when a numeric argument is outside its valid range."""


class InvalidDateError(TypeHelpersError, ValueError):
    """Raised when a value cannot be interpreted as a calendar date."""


# --- Copying ---------------------------------------------------------------

class CloneError(TypeHelpersError):
    """Raised when a value contains something that cannot be deep-copied."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TypeHelpersError):
    """Raised when a required runtime dependency is not available."""
