from datetime import datetime
from pydantic import ConfigDict

from .base import CamelModel


class HelpRequestBase(CamelModel):
    requester_email: str
    team_id: str
    table_or_breakout_room: str
    request_time: datetime
    explanation: str
    solved: bool


class HelpRequestCreate(HelpRequestBase):
    pass


class HelpRequestUpdate(HelpRequestBase):
    """Full replacement payload; an ``id`` in the body is ignored."""


class HelpRequest(HelpRequestBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
