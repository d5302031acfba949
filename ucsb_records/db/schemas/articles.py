from datetime import datetime
from pydantic import ConfigDict, Field

from .base import CamelModel


class ArticlesBase(CamelModel):
    title: str
    url: str = Field(max_length=500)
    explanation: str | None = None
    email: str | None = None
    date_added: datetime


class ArticlesCreate(ArticlesBase):
    pass


class ArticlesUpdate(ArticlesBase):
    pass


class Articles(ArticlesBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
