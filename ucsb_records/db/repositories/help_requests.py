"""
Help request repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from ucsb_records.db import models, schemas
from ucsb_records.db.repositories.base import CrudRepository

repository: CrudRepository[models.HelpRequest, int] = CrudRepository(models.HelpRequest, "HelpRequest")


def get_help_requests(db: Session) -> List[models.HelpRequest]:
    return repository.find_all(db)


def get_help_request(db: Session, help_request_id: int) -> Optional[models.HelpRequest]:
    return repository.find_by_id(db, help_request_id)


def get_help_request_or_raise(db: Session, help_request_id: int) -> models.HelpRequest:
    return repository.get_or_raise(db, help_request_id)


def create_help_request(db: Session, help_request: schemas.HelpRequestCreate) -> models.HelpRequest:
    return repository.save(db, repository.build(help_request))


def update_help_request(
    db: Session, db_help_request: models.HelpRequest, help_request: schemas.HelpRequestUpdate
) -> models.HelpRequest:
    return repository.save(db, repository.replace_fields(db_help_request, help_request))


def delete_help_request(db: Session, db_help_request: models.HelpRequest) -> None:
    repository.delete(db, db_help_request)
