"""
Authentication helpers and identity resolution.

Parses the identity headers set by the upstream OAuth2 proxy, normalizes
emails, upserts users, and derives their roles. Administrators are users
flagged ``admin`` or listed in ``ADMIN_EMAILS``.
"""
import os
from typing import Optional, List, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ucsb_records.db import models
from ucsb_records.db.repositories import users as user_repo
from ucsb_records.db.models import now_utc
from ucsb_records.utils.roles import roles_for


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower() or None


def _normalize_list_env(var_name: str) -> set:
    raw = os.getenv(var_name, "")
    values = set()
    for entry in raw.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.add(cleaned.lower())
    return values


def _admin_emails() -> set:
    return _normalize_list_env("ADMIN_EMAILS")


def is_admin_email(email: Optional[str]) -> bool:
    if not email:
        return False
    return _normalize_email(email) in _admin_emails()


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def _insert_user(db: Session, email: str, display_name: Optional[str]) -> Optional[models.User]:
    """Insert a new user; return None when a concurrent request created it first."""
    user = models.User(
        email=email,
        display_name=display_name or email.split("@")[0],
        admin=is_admin_email(email),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user


def get_or_create_user(db: Session, email: str, display_name: Optional[str] = None) -> models.User:
    user = user_repo.get_user_by_email(db, email)
    if not user:
        created = _insert_user(db, email, display_name)
        if created is not None:
            return created
        user = user_repo.get_user_by_email(db, email)
        if user is None:
            raise RuntimeError(f"Failed to create user {email}")

    # Existing users might predate a new ADMIN_EMAILS value; promote them when necessary.
    if is_admin_email(email) and not user.admin:
        user.admin = True
    user.last_online_at = now_utc()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user


def user_is_admin(user: models.User) -> bool:
    return bool(getattr(user, "admin", False)) or is_admin_email(user.email)


def get_user_roles(user: models.User) -> List[str]:
    return roles_for(user_is_admin(user))
