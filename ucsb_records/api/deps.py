"""
API dependency helpers.

Resolves the calling user and enforces the role each route requires. Role
checks run as route dependencies, so they are evaluated before query
parameters and request bodies are validated.
"""
import logging
from typing import Optional, Tuple, Dict, Any

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from ucsb_records.db.database import get_db
from ucsb_records.api.auth import resolve_identity_from_headers, get_or_create_user, get_user_roles
from ucsb_records.utils.roles import ROLE_USER, ROLE_ADMIN, has_role
from ucsb_records.utils.runtime import dev_identity

logger = logging.getLogger("ucsb_records.auth")

ACCESS_DENIED = "Access is denied"

# Integer keys are signed 64-bit on every backend
MAX_RECORD_ID = 2**63 - 1
MIN_RECORD_ID = -(2**63)

# Contract:
# Returns (sqlalchemy User model, current_user_context_dict)
# Raises 403 if identity cannot be resolved.

def get_current_user_context(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> Tuple[Any, Dict[str, Any]]:
    try:
        dev_user = dev_identity()
    except RuntimeError as exc:
        logger.error("DEV_MODE misconfiguration detected: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="DEV_MODE misconfigured")

    if dev_user is not None:
        name, email = dev_user
    else:
        name, email = resolve_identity_from_headers(
            x_auth_request_user=x_auth_request_user,
            x_auth_request_email=x_auth_request_email,
            x_forwarded_user=x_forwarded_user,
            x_forwarded_email=x_forwarded_email,
        )
        if not email:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCESS_DENIED)

    user = get_or_create_user(db, email=email, display_name=name)
    roles = get_user_roles(user)
    current_user = {
        "id": user.id,
        "email": user.email,
        "display_name": user.display_name,
        "is_admin": ROLE_ADMIN in roles,
        "roles": roles,
    }
    return user, current_user


def require_role(role: str):
    """Build a dependency that admits only users holding ``role``."""

    def _require_role(user_context=Depends(get_current_user_context)):
        _user, current_user = user_context
        if not has_role(current_user.get("roles"), role):
            logger.warning("access_denied: user=%s required_role=%s", current_user.get("email"), role)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCESS_DENIED)
        return user_context

    _require_role.__name__ = f"require_{role.lower()}"
    return _require_role


require_user = require_role(ROLE_USER)
require_admin = require_role(ROLE_ADMIN)
