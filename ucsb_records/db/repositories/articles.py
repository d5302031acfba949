"""
Article repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from ucsb_records.db import models, schemas
from ucsb_records.db.repositories.base import CrudRepository

repository: CrudRepository[models.Articles, int] = CrudRepository(models.Articles, "Articles")


def get_articles(db: Session) -> List[models.Articles]:
    return repository.find_all(db)


def get_article(db: Session, article_id: int) -> Optional[models.Articles]:
    return repository.find_by_id(db, article_id)


def get_article_or_raise(db: Session, article_id: int) -> models.Articles:
    return repository.get_or_raise(db, article_id)


def create_article(db: Session, article: schemas.ArticlesCreate) -> models.Articles:
    return repository.save(db, repository.build(article))


def update_article(db: Session, db_article: models.Articles, article: schemas.ArticlesUpdate) -> models.Articles:
    return repository.save(db, repository.replace_fields(db_article, article))


def delete_article(db: Session, db_article: models.Articles) -> None:
    repository.delete(db, db_article)
