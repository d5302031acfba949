from sqlalchemy import Column, Integer, String, DateTime, Text
from .base import Base


class Articles(Base):
    __tablename__ = 'articles'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    url = Column(String(500), nullable=False)
    explanation = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    date_added = Column(DateTime, nullable=False)
