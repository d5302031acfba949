"""
UCSB dining commons menu item API endpoints.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ucsb_records.db import schemas
from ucsb_records.db.database import get_db
from ucsb_records.db.repositories import dining_commons as repo
from ucsb_records.api.deps import require_user, require_admin, MIN_RECORD_ID, MAX_RECORD_ID

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ucsbdiningcommonsmenuitem", tags=["UCSBDiningCommonsMenuItem"])


@router.get("/all", response_model=List[schemas.UCSBDiningCommonsMenuItem], dependencies=[Depends(require_user)])
def all_menu_items(db: Session = Depends(get_db)):
    return repo.get_menu_items(db)


@router.get("", response_model=schemas.UCSBDiningCommonsMenuItem, dependencies=[Depends(require_user)])
def get_menu_item(
    item_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    return repo.get_menu_item_or_raise(db, item_id)


@router.post("/post", response_model=schemas.UCSBDiningCommonsMenuItem, dependencies=[Depends(require_admin)])
def post_menu_item(
    dining_commons_code: str = Query(alias="diningCommonsCode"),
    name: str = Query(),
    station: str = Query(),
    db: Session = Depends(get_db),
):
    item = schemas.UCSBDiningCommonsMenuItemCreate(
        dining_commons_code=dining_commons_code,
        name=name,
        station=station,
    )
    created = repo.create_menu_item(db, item)
    logger.info("menu_item_created: id=%s dining_commons_code=%s", created.id, created.dining_commons_code)
    return created


@router.put("", response_model=schemas.UCSBDiningCommonsMenuItem, dependencies=[Depends(require_admin)])
def update_menu_item(
    incoming: schemas.UCSBDiningCommonsMenuItemUpdate,
    item_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_item = repo.get_menu_item_or_raise(db, item_id)
    updated = repo.update_menu_item(db, db_item, incoming)
    logger.info("menu_item_updated: id=%s", item_id)
    return updated


@router.delete("", response_model=schemas.MessageResponse, dependencies=[Depends(require_admin)])
def delete_menu_item(
    item_id: int = Query(alias="id", ge=MIN_RECORD_ID, le=MAX_RECORD_ID),
    db: Session = Depends(get_db),
):
    db_item = repo.get_menu_item_or_raise(db, item_id)
    repo.delete_menu_item(db, db_item)
    logger.info("menu_item_deleted: id=%s", item_id)
    return {"message": f"UCSBDiningCommonsMenuItem with id {item_id} deleted"}
