from datetime import datetime
from pydantic import ConfigDict, Field

from .base import CamelModel


class MenuItemReviewBase(CamelModel):
    item_id: int = Field(ge=-(2**63), le=2**63 - 1)
    reviewer_email: str
    stars: int
    date_reviewed: datetime
    comments: str


class MenuItemReviewCreate(MenuItemReviewBase):
    pass


class MenuItemReviewUpdate(MenuItemReviewBase):
    pass


class MenuItemReview(MenuItemReviewBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
