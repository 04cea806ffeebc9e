"""Business helpers built on the :class:`~type_helpers.core.models.User` model."""

from __future__ import annotations

from type_helpers.core.guards import is_not_nil
from type_helpers.core.models import User
from type_helpers.utils.constants import ADMIN_ROLE, UNKNOWN_USER_LABEL, USER_LABEL


def get_user_display_name(user: User | None) -> str:
    """Return the best available label for *user*.

    Fallback order: name, email, ``"用户<id>"``.  A missing user yields
    ``"未知用户"``.
    """
    if is_not_nil(user):
        return user.name or user.email or f"{USER_LABEL}{user.id}"
    return UNKNOWN_USER_LABEL


def is_admin(user: User | None) -> bool:
    return is_not_nil(user) and user.role == ADMIN_ROLE
