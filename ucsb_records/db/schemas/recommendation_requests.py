from datetime import datetime
from pydantic import ConfigDict

from .base import CamelModel


class RecommendationRequestBase(CamelModel):
    requester_email: str
    professor_email: str
    explanation: str
    date_requested: datetime
    date_needed: datetime
    done: bool


class RecommendationRequestCreate(RecommendationRequestBase):
    pass


class RecommendationRequestUpdate(RecommendationRequestBase):
    pass


class RecommendationRequest(RecommendationRequestBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
