"""
Domain-split Pydantic schemas re-exported from a single import point.
"""

from .base import CamelModel, MessageResponse, ErrorResponse
from .users import User, GrantedAuthority, CurrentUser
from .help_requests import (
    HelpRequestBase,
    HelpRequestCreate,
    HelpRequestUpdate,
    HelpRequest,
)
from .recommendation_requests import (
    RecommendationRequestBase,
    RecommendationRequestCreate,
    RecommendationRequestUpdate,
    RecommendationRequest,
)
from .menu_item_reviews import (
    MenuItemReviewBase,
    MenuItemReviewCreate,
    MenuItemReviewUpdate,
    MenuItemReview,
)
from .articles import ArticlesBase, ArticlesCreate, ArticlesUpdate, Articles
from .dining_commons import (
    UCSBDiningCommonsMenuItemBase,
    UCSBDiningCommonsMenuItemCreate,
    UCSBDiningCommonsMenuItemUpdate,
    UCSBDiningCommonsMenuItem,
)
from .organizations import (
    UCSBOrganizationBase,
    UCSBOrganizationCreate,
    UCSBOrganizationUpdate,
    UCSBOrganization,
)

__all__ = [
    # Common
    "CamelModel",
    "MessageResponse",
    "ErrorResponse",
    # Users
    "User",
    "GrantedAuthority",
    "CurrentUser",
    # Help requests
    "HelpRequestBase",
    "HelpRequestCreate",
    "HelpRequestUpdate",
    "HelpRequest",
    # Recommendation requests
    "RecommendationRequestBase",
    "RecommendationRequestCreate",
    "RecommendationRequestUpdate",
    "RecommendationRequest",
    # Menu item reviews
    "MenuItemReviewBase",
    "MenuItemReviewCreate",
    "MenuItemReviewUpdate",
    "MenuItemReview",
    # Articles
    "ArticlesBase",
    "ArticlesCreate",
    "ArticlesUpdate",
    "Articles",
    # Dining commons
    "UCSBDiningCommonsMenuItemBase",
    "UCSBDiningCommonsMenuItemCreate",
    "UCSBDiningCommonsMenuItemUpdate",
    "UCSBDiningCommonsMenuItem",
    # Organizations
    "UCSBOrganizationBase",
    "UCSBOrganizationCreate",
    "UCSBOrganizationUpdate",
    "UCSBOrganization",
]
