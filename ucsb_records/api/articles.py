"""
Articles API endpoints.
"""
import logging
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ucsb_records.db import schemas
from ucsb_records.db.database import get_db
from ucsb_records.db.repositories import articles as repo
from ucsb_records.api.deps import require_user, require_admin, MIN_RECORD_ID, MAX_RECORD_ID

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["Articles"])


@router.get("/all", response_model=List[schemas.Articles], dependencies=[Depends(require_user)])
def all_articles(db: Session = Depends(get_db)):
    return repo.get_articles(db)


@router.get("", response_model=schemas.Articles, dependencies=[Depends(require_user)])
def get_article(
    article_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    return repo.get_article_or_raise(db, article_id)


@router.post("/post", response_model=schemas.Articles, dependencies=[Depends(require_admin)])
def post_article(
    title: str = Query(),
    url: str = Query(max_length=500),
    explanation: Optional[str] = Query(default=None),
    email: Optional[str] = Query(default=None),
    date_added: datetime = Query(alias="dateAdded"),
    db: Session = Depends(get_db),
):
    article = schemas.ArticlesCreate(
        title=title,
        url=url,
        explanation=explanation,
        email=email,
        date_added=date_added,
    )
    created = repo.create_article(db, article)
    logger.info("article_created: id=%s", created.id)
    return created


@router.put("", response_model=schemas.Articles, dependencies=[Depends(require_admin)])
def update_article(
    incoming: schemas.ArticlesUpdate,
    article_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_article = repo.get_article_or_raise(db, article_id)
    updated = repo.update_article(db, db_article, incoming)
    logger.info("article_updated: id=%s", article_id)
    return updated


@router.delete("", response_model=schemas.MessageResponse, dependencies=[Depends(require_admin)])
def delete_article(
    article_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_article = repo.get_article_or_raise(db, article_id)
    repo.delete_article(db, db_article)
    logger.info("article_deleted: id=%s", article_id)
    return {"message": f"Articles with id {article_id} deleted"}
