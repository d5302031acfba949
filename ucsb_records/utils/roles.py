"""
Application roles.

Two static roles gate the API: every authenticated user holds ``ROLE_USER``;
administrators additionally hold ``ROLE_ADMIN``.
"""

from typing import List


ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"

ALLOWED_ROLES = frozenset({ROLE_USER, ROLE_ADMIN})


def roles_for(is_admin: bool) -> List[str]:
    """Return the granted roles for an authenticated user, ``ROLE_USER`` first."""
    roles = [ROLE_USER]
    if is_admin:
        roles.append(ROLE_ADMIN)
    return roles


def has_role(roles, required: str) -> bool:
    if required not in ALLOWED_ROLES:
        raise ValueError(f"Unknown role: {required}. Allowed roles: {sorted(ALLOWED_ROLES)}")
    return required in set(roles or ())
