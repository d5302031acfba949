from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict

from .base import CamelModel


class User(CamelModel):
    id: int
    email: str
    display_name: str | None = None
    admin: bool = False
    created_at: datetime | None = None
    last_online_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)


class GrantedAuthority(BaseModel):
    authority: str


class CurrentUser(BaseModel):
    user: User
    roles: List[GrantedAuthority]
