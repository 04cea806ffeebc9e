"""Module-level defaults used across the library.

There is no configuration file and no environment lookup; callers that
need different values pass them explicitly.
"""

from __future__ import annotations

DEFAULT_TRUNCATE_SUFFIX: str = "..."
"""Suffix appended by :func:`~type_helpers.core.formatting.truncate`."""

UNKNOWN_USER_LABEL: str = "未知用户"
"""Display name returned when no user is available."""

USER_LABEL: str = "用户"
"""Prefix combined with the user id when name and email are both empty."""

ADMIN_ROLE: str = "admin"
"""Role tag that grants administrator status."""

SUCCESS_CODE: int = 200
"""Response code treated as success by ``is_success_response``."""

MIN_PYTHON: tuple[int, int] = (3, 11)
"""Lowest interpreter version reported as OK by ``type-helpers doctor``."""
