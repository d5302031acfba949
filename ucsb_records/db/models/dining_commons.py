from sqlalchemy import Column, Integer, String, Index
from .base import Base


class UCSBDiningCommonsMenuItem(Base):
    __tablename__ = 'ucsbdiningcommonsmenuitem'
    id = Column(Integer, primary_key=True, autoincrement=True)
    dining_commons_code = Column(String(255))
    name = Column(String(255))
    station = Column(String(255))

    __table_args__ = (
        Index('idx_ucsbdiningcommonsmenuitem_code', 'dining_commons_code'),
    )
