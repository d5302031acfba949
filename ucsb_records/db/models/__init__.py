"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from a single import point.
"""

from .base import Base, now_utc  # re-export

from .users import User
from .help_requests import HelpRequest
from .recommendation_requests import RecommendationRequest
from .menu_item_reviews import MenuItemReview
from .articles import Articles
from .dining_commons import UCSBDiningCommonsMenuItem
from .organizations import UCSBOrganization

__all__ = [
    # base
    "Base",
    "now_utc",
    # users
    "User",
    # records
    "HelpRequest",
    "RecommendationRequest",
    "MenuItemReview",
    "Articles",
    "UCSBDiningCommonsMenuItem",
    "UCSBOrganization",
]
