"""
Users API endpoints.

Exposes the calling user's profile and roles, and the admin user listing.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ucsb_records.db.database import get_db
from ucsb_records.api.deps import require_user, require_admin
from ucsb_records.db import schemas
from ucsb_records.db.repositories import users as user_repo

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/currentUser", response_model=schemas.CurrentUser)
def current_user(user_context=Depends(require_user)):
    user, ctx = user_context
    return {
        "user": schemas.User.model_validate(user),
        "roles": [{"authority": role} for role in ctx["roles"]],
    }


@router.get("/admin/users", response_model=List[schemas.User], dependencies=[Depends(require_admin)])
def list_users(db: Session = Depends(get_db)):
    return user_repo.get_users(db)
