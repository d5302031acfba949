from sqlalchemy import Column, String, Boolean
from .base import Base


class UCSBOrganization(Base):
    __tablename__ = 'ucsborganization'
    # Natural key supplied by the caller (e.g. "ZPR")
    org_code = Column(String(50), primary_key=True)
    org_translation_short = Column(String(255))
    org_translation = Column(String(255))
    inactive = Column(Boolean, nullable=False, default=False)
