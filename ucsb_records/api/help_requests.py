"""
Help request API endpoints.

Students' requests for help during lab sections: list and fetch for users,
create/update/delete for admins.
"""
import logging
from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ucsb_records.db import schemas
from ucsb_records.db.database import get_db
from ucsb_records.db.repositories import help_requests as repo
from ucsb_records.api.deps import require_user, require_admin, MIN_RECORD_ID, MAX_RECORD_ID

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/helprequest", tags=["HelpRequest"])


@router.get("/all", response_model=List[schemas.HelpRequest], dependencies=[Depends(require_user)])
def all_help_requests(db: Session = Depends(get_db)):
    return repo.get_help_requests(db)


@router.get("", response_model=schemas.HelpRequest, dependencies=[Depends(require_user)])
def get_help_request(
    help_request_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    return repo.get_help_request_or_raise(db, help_request_id)


@router.post("/post", response_model=schemas.HelpRequest, dependencies=[Depends(require_admin)])
def post_help_request(
    requester_email: str = Query(alias="requesterEmail"),
    team_id: str = Query(alias="teamId"),
    table_or_breakout_room: str = Query(alias="tableOrBreakoutRoom"),
    solved: bool = Query(),
    explanation: str = Query(),
    request_time: datetime = Query(alias="requestTime", description="ISO date-time, e.g. 2022-01-03T00:00:00"),
    db: Session = Depends(get_db),
):
    logger.info("requestTime=%s", request_time.isoformat())
    help_request = schemas.HelpRequestCreate(
        requester_email=requester_email,
        team_id=team_id,
        table_or_breakout_room=table_or_breakout_room,
        request_time=request_time,
        explanation=explanation,
        solved=solved,
    )
    created = repo.create_help_request(db, help_request)
    logger.info("help_request_created: id=%s", created.id)
    return created


@router.put("", response_model=schemas.HelpRequest, dependencies=[Depends(require_admin)])
def update_help_request(
    incoming: schemas.HelpRequestUpdate,
    help_request_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_help_request = repo.get_help_request_or_raise(db, help_request_id)
    updated = repo.update_help_request(db, db_help_request, incoming)
    logger.info("help_request_updated: id=%s", help_request_id)
    return updated


@router.delete("", response_model=schemas.MessageResponse, dependencies=[Depends(require_admin)])
def delete_help_request(
    help_request_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_help_request = repo.get_help_request_or_raise(db, help_request_id)
    repo.delete_help_request(db, db_help_request)
    logger.info("help_request_deleted: id=%s", help_request_id)
    return {"message": f"HelpRequest with id {help_request_id} deleted"}
