"""
Menu item review repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from ucsb_records.db import models, schemas
from ucsb_records.db.repositories.base import CrudRepository

repository: CrudRepository[models.MenuItemReview, int] = CrudRepository(models.MenuItemReview, "MenuItemReview")


def get_menu_item_reviews(db: Session) -> List[models.MenuItemReview]:
    return repository.find_all(db)


def get_menu_item_review(db: Session, review_id: int) -> Optional[models.MenuItemReview]:
    return repository.find_by_id(db, review_id)


def get_menu_item_review_or_raise(db: Session, review_id: int) -> models.MenuItemReview:
    return repository.get_or_raise(db, review_id)


def create_menu_item_review(db: Session, review: schemas.MenuItemReviewCreate) -> models.MenuItemReview:
    return repository.save(db, repository.build(review))


def update_menu_item_review(
    db: Session, db_review: models.MenuItemReview, review: schemas.MenuItemReviewUpdate
) -> models.MenuItemReview:
    return repository.save(db, repository.replace_fields(db_review, review))


def delete_menu_item_review(db: Session, db_review: models.MenuItemReview) -> None:
    repository.delete(db, db_review)
