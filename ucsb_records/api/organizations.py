"""
UCSB student organization API endpoints.

Organizations are keyed by the caller-supplied ``orgCode`` rather than a
generated id.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ucsb_records.db import schemas
from ucsb_records.db.database import get_db
from ucsb_records.db.repositories import organizations as repo
from ucsb_records.api.deps import require_user, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ucsborganization", tags=["UCSBOrganization"])


@router.get("/all", response_model=List[schemas.UCSBOrganization], dependencies=[Depends(require_user)])
def all_organizations(db: Session = Depends(get_db)):
    return repo.get_organizations(db)


@router.get("", response_model=schemas.UCSBOrganization, dependencies=[Depends(require_user)])
def get_organization(
    org_code: str = Query(alias="orgCode"),
    db: Session = Depends(get_db),
):
    return repo.get_organization_or_raise(db, org_code)


@router.post("/post", response_model=schemas.UCSBOrganization, dependencies=[Depends(require_admin)])
def post_organization(
    org_code: str = Query(alias="orgCode"),
    org_translation_short: str = Query(alias="orgTranslationShort"),
    org_translation: str = Query(alias="orgTranslation"),
    inactive: bool = Query(),
    db: Session = Depends(get_db),
):
    organization = schemas.UCSBOrganizationCreate(
        org_code=org_code,
        org_translation_short=org_translation_short,
        org_translation=org_translation,
        inactive=inactive,
    )
    created = repo.create_organization(db, organization)
    logger.info("organization_created: org_code=%s", created.org_code)
    return created


@router.put("", response_model=schemas.UCSBOrganization, dependencies=[Depends(require_admin)])
def update_organization(
    incoming: schemas.UCSBOrganizationUpdate,
    org_code: str = Query(alias="orgCode"),
    db: Session = Depends(get_db),
):
    db_organization = repo.get_organization_or_raise(db, org_code)
    updated = repo.update_organization(db, db_organization, incoming)
    logger.info("organization_updated: org_code=%s", org_code)
    return updated


@router.delete("", response_model=schemas.MessageResponse, dependencies=[Depends(require_admin)])
def delete_organization(
    org_code: str = Query(alias="orgCode"),
    db: Session = Depends(get_db),
):
    db_organization = repo.get_organization_or_raise(db, org_code)
    repo.delete_organization(db, db_organization)
    logger.info("organization_deleted: org_code=%s", org_code)
    return {"message": f"UCSBOrganization with id {org_code} deleted"}
