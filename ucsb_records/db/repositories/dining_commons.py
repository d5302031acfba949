"""
Dining commons menu item repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from ucsb_records.db import models, schemas
from ucsb_records.db.repositories.base import CrudRepository

repository: CrudRepository[models.UCSBDiningCommonsMenuItem, int] = CrudRepository(
    models.UCSBDiningCommonsMenuItem, "UCSBDiningCommonsMenuItem"
)


def get_menu_items(db: Session) -> List[models.UCSBDiningCommonsMenuItem]:
    return repository.find_all(db)


def get_menu_item(db: Session, item_id: int) -> Optional[models.UCSBDiningCommonsMenuItem]:
    return repository.find_by_id(db, item_id)


def get_menu_item_or_raise(db: Session, item_id: int) -> models.UCSBDiningCommonsMenuItem:
    return repository.get_or_raise(db, item_id)


def create_menu_item(
    db: Session, item: schemas.UCSBDiningCommonsMenuItemCreate
) -> models.UCSBDiningCommonsMenuItem:
    return repository.save(db, repository.build(item))


def update_menu_item(
    db: Session,
    db_item: models.UCSBDiningCommonsMenuItem,
    item: schemas.UCSBDiningCommonsMenuItemUpdate,
) -> models.UCSBDiningCommonsMenuItem:
    return repository.save(db, repository.replace_fields(db_item, item))


def delete_menu_item(db: Session, db_item: models.UCSBDiningCommonsMenuItem) -> None:
    repository.delete(db, db_item)
