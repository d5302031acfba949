"""
Menu item review API endpoints.

A review is attached to a dining commons menu item by ``itemId``.
"""
import logging
from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ucsb_records.db import schemas
from ucsb_records.db.database import get_db
from ucsb_records.db.repositories import menu_item_reviews as repo
from ucsb_records.api.deps import require_user, require_admin, MIN_RECORD_ID, MAX_RECORD_ID

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/menuitemreview", tags=["MenuItemReview"])


@router.get("/all", response_model=List[schemas.MenuItemReview], dependencies=[Depends(require_user)])
def all_menu_item_reviews(db: Session = Depends(get_db)):
    return repo.get_menu_item_reviews(db)


@router.get("", response_model=schemas.MenuItemReview, dependencies=[Depends(require_user)])
def get_menu_item_review(
    review_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    return repo.get_menu_item_review_or_raise(db, review_id)


@router.post("/post", response_model=schemas.MenuItemReview, dependencies=[Depends(require_admin)])
def post_menu_item_review(
    item_id: int = Query(alias="itemId", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    reviewer_email: str = Query(alias="reviewerEmail"),
    stars: int = Query(),
    date_reviewed: datetime = Query(alias="dateReviewed"),
    comments: str = Query(),
    db: Session = Depends(get_db),
):
    review = schemas.MenuItemReviewCreate(
        item_id=item_id,
        reviewer_email=reviewer_email,
        stars=stars,
        date_reviewed=date_reviewed,
        comments=comments,
    )
    created = repo.create_menu_item_review(db, review)
    logger.info("menu_item_review_created: id=%s item_id=%s", created.id, created.item_id)
    return created


@router.put("", response_model=schemas.MenuItemReview, dependencies=[Depends(require_admin)])
def update_menu_item_review(
    incoming: schemas.MenuItemReviewUpdate,
    review_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_review = repo.get_menu_item_review_or_raise(db, review_id)
    updated = repo.update_menu_item_review(db, db_review, incoming)
    logger.info("menu_item_review_updated: id=%s", review_id)
    return updated


@router.delete("", response_model=schemas.MessageResponse, dependencies=[Depends(require_admin)])
def delete_menu_item_review(
    review_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_review = repo.get_menu_item_review_or_raise(db, review_id)
    repo.delete_menu_item_review(db, db_review)
    logger.info("menu_item_review_deleted: id=%s", review_id)
    return {"message": f"MenuItemReview with id {review_id} deleted"}
