"""Decoded API objects, enums and the statistics metric catalogue."""

from .entities import (
    Account,
    AccountPermissions,
    AdsModel,
    Behavior,
    BehaviorTaxonomy,
    Campaign,
    FundingInstrument,
    GlobalOptOut,
    LineItem,
    LineItemPlacements,
    PlatformVersion,
    PromotableUser,
    PromotedTweetReference,
    PromotedUserReference,
    TailoredAudience,
    TailoredAudienceChange,
    TargetingCriterion,
    TargetingEvent,
    TargetingSuggestion,
    TvMarket,
    TvShow,
    Tweet,
    TwitterObject,
)
from .statistics import (
    METRIC_CATALOG,
    BreakdownMetric,
    MetricCatalogEntry,
    ScalarMetric,
    StatisticsSegment,
    StatisticsSnapshot,
    metrics_in_family,
)

__all__ = [
    "Account",
    "AccountPermissions",
    "AdsModel",
    "Behavior",
    "BehaviorTaxonomy",
    "BreakdownMetric",
    "Campaign",
    "FundingInstrument",
    "GlobalOptOut",
    "LineItem",
    "LineItemPlacements",
    "METRIC_CATALOG",
    "MetricCatalogEntry",
    "PlatformVersion",
    "PromotableUser",
    "PromotedTweetReference",
    "PromotedUserReference",
    "ScalarMetric",
    "StatisticsSegment",
    "StatisticsSnapshot",
    "TailoredAudience",
    "TailoredAudienceChange",
    "TargetingCriterion",
    "TargetingEvent",
    "TargetingSuggestion",
    "TvMarket",
    "TvShow",
    "Tweet",
    "TwitterObject",
    "metrics_in_family",
]
