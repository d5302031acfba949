"""
Recommendation request repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from ucsb_records.db import models, schemas
from ucsb_records.db.repositories.base import CrudRepository

repository: CrudRepository[models.RecommendationRequest, int] = CrudRepository(
    models.RecommendationRequest, "RecommendationRequest"
)


def get_recommendation_requests(db: Session) -> List[models.RecommendationRequest]:
    return repository.find_all(db)


def get_recommendation_request(db: Session, request_id: int) -> Optional[models.RecommendationRequest]:
    return repository.find_by_id(db, request_id)


def get_recommendation_request_or_raise(db: Session, request_id: int) -> models.RecommendationRequest:
    return repository.get_or_raise(db, request_id)


def create_recommendation_request(
    db: Session, request: schemas.RecommendationRequestCreate
) -> models.RecommendationRequest:
    return repository.save(db, repository.build(request))


def update_recommendation_request(
    db: Session,
    db_request: models.RecommendationRequest,
    request: schemas.RecommendationRequestUpdate,
) -> models.RecommendationRequest:
    return repository.save(db, repository.replace_fields(db_request, request))


def delete_recommendation_request(db: Session, db_request: models.RecommendationRequest) -> None:
    repository.delete(db, db_request)
