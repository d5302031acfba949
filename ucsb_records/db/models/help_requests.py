from sqlalchemy import Column, Integer, String, DateTime, Boolean
from .base import Base


class HelpRequest(Base):
    __tablename__ = 'helprequests'
    id = Column(Integer, primary_key=True, autoincrement=True)
    requester_email = Column(String(255))
    team_id = Column(String(255))
    table_or_breakout_room = Column(String(255))
    request_time = Column(DateTime)
    explanation = Column(String(255))
    solved = Column(Boolean, nullable=False, default=False)
