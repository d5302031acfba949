from sqlalchemy import Column, Integer, String, DateTime, Boolean
from .base import Base


class RecommendationRequest(Base):
    __tablename__ = 'recommendationrequests'
    id = Column(Integer, primary_key=True, autoincrement=True)
    requester_email = Column(String(255))
    professor_email = Column(String(255))
    explanation = Column(String(255))
    date_requested = Column(DateTime)
    date_needed = Column(DateTime)
    done = Column(Boolean, nullable=False, default=False)
