"""
UCSB organization repository functions.

Organizations are keyed by their caller-supplied ``org_code``; creating one
with an existing code replaces the stored row.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from ucsb_records.db import models, schemas
from ucsb_records.db.repositories.base import CrudRepository

repository: CrudRepository[models.UCSBOrganization, str] = CrudRepository(
    models.UCSBOrganization, "UCSBOrganization"
)


def get_organizations(db: Session) -> List[models.UCSBOrganization]:
    return repository.find_all(db)


def get_organization(db: Session, org_code: str) -> Optional[models.UCSBOrganization]:
    return repository.find_by_id(db, org_code)


def get_organization_or_raise(db: Session, org_code: str) -> models.UCSBOrganization:
    return repository.get_or_raise(db, org_code)


def create_organization(db: Session, organization: schemas.UCSBOrganizationCreate) -> models.UCSBOrganization:
    return repository.save(db, repository.build(organization))


def update_organization(
    db: Session,
    db_organization: models.UCSBOrganization,
    organization: schemas.UCSBOrganizationUpdate,
) -> models.UCSBOrganization:
    return repository.save(db, repository.replace_fields(db_organization, organization))


def delete_organization(db: Session, db_organization: models.UCSBOrganization) -> None:
    repository.delete(db, db_organization)
