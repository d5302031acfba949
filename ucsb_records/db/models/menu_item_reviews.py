from sqlalchemy import Column, Integer, BigInteger, String, DateTime
from .base import Base


class MenuItemReview(Base):
    __tablename__ = 'menuitemreview'
    id = Column(Integer, primary_key=True, autoincrement=True)
    # Refers to a dining commons menu item by id; not a foreign key
    item_id = Column(BigInteger, nullable=False)
    reviewer_email = Column(String(255))
    stars = Column(Integer, nullable=False)
    date_reviewed = Column(DateTime)
    comments = Column(String(255))
