"""
Recommendation request API endpoints.
"""
import logging
from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ucsb_records.db import schemas
from ucsb_records.db.database import get_db
from ucsb_records.db.repositories import recommendation_requests as repo
from ucsb_records.api.deps import require_user, require_admin, MIN_RECORD_ID, MAX_RECORD_ID

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recommendationrequest", tags=["RecommendationRequest"])


@router.get("/all", response_model=List[schemas.RecommendationRequest], dependencies=[Depends(require_user)])
def all_recommendation_requests(db: Session = Depends(get_db)):
    return repo.get_recommendation_requests(db)


@router.get("", response_model=schemas.RecommendationRequest, dependencies=[Depends(require_user)])
def get_recommendation_request(
    request_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    return repo.get_recommendation_request_or_raise(db, request_id)


@router.post("/post", response_model=schemas.RecommendationRequest, dependencies=[Depends(require_admin)])
def post_recommendation_request(
    requester_email: str = Query(alias="requesterEmail"),
    professor_email: str = Query(alias="professorEmail"),
    explanation: str = Query(),
    date_requested: datetime = Query(alias="dateRequested"),
    date_needed: datetime = Query(alias="dateNeeded"),
    done: bool = Query(),
    db: Session = Depends(get_db),
):
    logger.info("dateRequested=%s dateNeeded=%s", date_requested.isoformat(), date_needed.isoformat())
    request = schemas.RecommendationRequestCreate(
        requester_email=requester_email,
        professor_email=professor_email,
        explanation=explanation,
        date_requested=date_requested,
        date_needed=date_needed,
        done=done,
    )
    created = repo.create_recommendation_request(db, request)
    logger.info("recommendation_request_created: id=%s", created.id)
    return created


@router.put("", response_model=schemas.RecommendationRequest, dependencies=[Depends(require_admin)])
def update_recommendation_request(
    incoming: schemas.RecommendationRequestUpdate,
    request_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_request = repo.get_recommendation_request_or_raise(db, request_id)
    updated = repo.update_recommendation_request(db, db_request, incoming)
    logger.info("recommendation_request_updated: id=%s", request_id)
    return updated


@router.delete("", response_model=schemas.MessageResponse, dependencies=[Depends(require_admin)])
def delete_recommendation_request(
    request_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_request = repo.get_recommendation_request_or_raise(db, request_id)
    repo.delete_recommendation_request(db, db_request)
    logger.info("recommendation_request_deleted: id=%s", request_id)
    return {"message": f"RecommendationRequest with id {request_id} deleted"}
