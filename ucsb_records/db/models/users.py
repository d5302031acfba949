from sqlalchemy import Column, Integer, String, DateTime, Boolean
from .base import Base, now_utc


class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    display_name = Column(String(255), nullable=True)
    # Granted ROLE_ADMIN in addition to ADMIN_EMAILS
    admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    last_online_at = Column(DateTime(timezone=True), default=now_utc)
