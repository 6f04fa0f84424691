"""API façades, one per resource family."""

from .accounts import AccountOperations
from .base import AdsOperations, collect_all, iter_pages
from .campaigns import CampaignOperations
from .line_items import LineItemOperations
from .promotions import PromotionOperations
from .statistics import StatisticsOperations
from .tailored_audiences import TailoredAudienceOperations
from .targeting import TargetingOperations

__all__ = [
    "AccountOperations",
    "AdsOperations",
    "CampaignOperations",
    "LineItemOperations",
    "PromotionOperations",
    "StatisticsOperations",
    "TailoredAudienceOperations",
    "TargetingOperations",
    "collect_all",
    "iter_pages",
]
