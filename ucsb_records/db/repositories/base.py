"""
Generic key-value repository over a single ORM model.

Every record type is stored the same way: list everything, look up by primary
key, insert-or-replace, delete. Per-entity repository modules bind one
instance of :class:`CrudRepository` to their model.
"""
from __future__ import annotations

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session

from ucsb_records.db.models import Base
from ucsb_records.errors import EntityNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
KeyT = TypeVar("KeyT")


class CrudRepository(Generic[ModelT, KeyT]):
    def __init__(self, model: Type[ModelT], entity_name: Optional[str] = None):
        self.model = model
        self.entity_name = entity_name or model.__name__
        self.key_attr = sa_inspect(model).primary_key[0].key

    def find_all(self, db: Session) -> List[ModelT]:
        return db.query(self.model).all()

    def find_by_id(self, db: Session, key: KeyT) -> Optional[ModelT]:
        if key is None:
            return None
        return db.get(self.model, key)

    def get_or_raise(self, db: Session, key: KeyT) -> ModelT:
        obj = self.find_by_id(db, key)
        if obj is None:
            raise EntityNotFoundError(self.entity_name, key)
        return obj

    def save(self, db: Session, obj: ModelT) -> ModelT:
        """Insert or replace ``obj`` and return the persistent instance."""
        try:
            saved = db.merge(obj)
            db.commit()
            db.refresh(saved)
            return saved
        except Exception as e:
            db.rollback()
            raise RuntimeError(
                f"Failed to save {self.entity_name} {getattr(obj, self.key_attr, None)}: {str(e)}"
            )

    def delete(self, db: Session, obj: ModelT) -> None:
        key = getattr(obj, self.key_attr, None)
        try:
            db.delete(obj)
            db.commit()
        except Exception as e:
            db.rollback()
            raise RuntimeError(f"Failed to delete {self.entity_name} {key}: {str(e)}")

    # Payload helpers shared by the per-entity modules

    def build(self, payload: BaseModel, **overrides: Any) -> ModelT:
        values = payload.model_dump()
        values.update(overrides)
        return self.model(**values)

    def replace_fields(self, obj: ModelT, payload: BaseModel) -> ModelT:
        """Overwrite every non-key field of ``obj`` from ``payload``."""
        for field, value in payload.model_dump().items():
            if field == self.key_attr:
                continue
            setattr(obj, field, value)
        return obj
