"""Query declarations for the Ads API list endpoints.

Each class lists the filters an endpoint accepts, in the order they are
written to the query string. Most entity listings share the tail
``with_deleted, q, cursor, count, sort_by`` from :class:`EntityQuery`.

Example::

    query = CampaignQuery(campaign_ids=["8wku2"], with_deleted=True)
    query.sort("updated_at", SortDirection.DESC)
    build_query_string(query)
    # '?campaign_ids=8wku2&with_deleted=true&sort_by=updated_at-desc'
"""

from enum import Enum
from typing import Optional, Union

from .encoding.codec import ValueKind
from .encoding.fields import ActiveWindowMixin, Param, ParameterSet
from .exceptions import UnknownMetric
from .models.enums import (
    AdvertisingObjective,
    AdvertisingProductType,
    AppStore,
    EventType,
    FeatureKey,
    LocationType,
    PromotedUserReferenceSorting,
    SortDirection,
    StatisticsGranularity,
    StatisticsSegmentationType,
)
from .models.statistics import METRIC_CATALOG


def _sort_token(field: Union[str, Enum], direction: Optional[SortDirection]) -> str:
    name = field.value if isinstance(field, Enum) else field
    return f"{name}-{(direction or SortDirection.ASC).value}"


class PagedQuery(ParameterSet):
    """Marker for queries that :func:`~twitter_ads.operations.base.iter_pages` can follow."""

    cursor: Param
    count: Param


class EntityQuery(PagedQuery):
    """Filters shared by entity listings."""

    with_deleted = Param(kind=ValueKind.BOOLEAN)
    q = Param()
    cursor = Param()
    count = Param(kind=ValueKind.INTEGER)
    sort_by = Param()

    def sort(self, field: Union[str, Enum], direction: Optional[SortDirection] = None):
        """Sort by ``field``, ascending unless told otherwise."""
        self.sort_by = _sort_token(field, direction)
        return self

    def paged_by(self, cursor: Optional[str] = None, count: Optional[int] = None):
        self.cursor = cursor
        self.count = count
        return self


# Accounts


class AccountQuery(EntityQuery):
    account_ids = Param(kind=ValueKind.STRING_LIST)


class AccountFeatureQuery(ParameterSet):
    feature_keys = Param(kind=ValueKind.ENUM_LIST, enum_type=FeatureKey)


class PromotableUserQuery(EntityQuery):
    pass


# Campaigns and funding


class CampaignQuery(EntityQuery):
    campaign_ids = Param(kind=ValueKind.STRING_LIST)
    funding_instrument_ids = Param(kind=ValueKind.STRING_LIST)


class FundingInstrumentQuery(EntityQuery):
    funding_instrument_ids = Param(kind=ValueKind.STRING_LIST)


# Line items


class LineItemQuery(ActiveWindowMixin, PagedQuery):
    """Line item listing; the API expects paging before ``with_deleted`` here.

    Unlike :meth:`~twitter_ads.operations.line_items.LineItemOperations.get_line_item`, which always asks for deleted items, the
    listing sends ``with_deleted`` only when it is set; set it to ``True``
    to include deleted line items.
    """

    campaign_ids = Param(kind=ValueKind.STRING_LIST)
    funding_instrument_ids = Param(kind=ValueKind.STRING_LIST)
    line_item_ids = Param(kind=ValueKind.STRING_LIST)
    count = Param(kind=ValueKind.INTEGER)
    cursor = Param()
    with_deleted = Param(kind=ValueKind.BOOLEAN)
    active_window = Param(kind=ValueKind.TIMESTAMP_RANGE)
    sort_by = Param()

    def sort(self, field: Union[str, Enum], direction: Optional[SortDirection] = None):
        self.sort_by = _sort_token(field, direction)
        return self


class LineItemPlacementsQuery(ParameterSet):
    product_type = Param(kind=ValueKind.ENUM, enum_type=AdvertisingProductType)


# Promoted content


class SponsoredTweetQuery(EntityQuery):
    user_ids = Param(kind=ValueKind.INTEGER_LIST)
    objective = Param(kind=ValueKind.ENUM, enum_type=AdvertisingObjective)
    trim_user = Param(kind=ValueKind.BOOLEAN)


class PromotedTweetReferenceQuery(EntityQuery):
    line_item_id = Param()


class PromotedUserReferenceQuery(EntityQuery):
    line_item_id = Param()
    sort_order = Param("sort")

    def sort_references(
        self, field: PromotedUserReferenceSorting, direction: Optional[SortDirection] = None
    ):
        """Set the ``sort`` parameter; without a direction only the field is sent."""
        self.sort_order = field.value if direction is None else f"{field.value}-{direction.value}"
        return self


# Targeting


class TargetingCriteriaQuery(EntityQuery):
    line_item_id = Param()


class AppStoreCategoriesQuery(EntityQuery):
    store = Param(kind=ValueKind.ENUM, enum_type=AppStore)


class BehaviorTaxonomiesQuery(EntityQuery):
    behavior_taxonomy_ids = Param(kind=ValueKind.STRING_LIST)
    parent_behavior_taxonomy_ids = Param(kind=ValueKind.STRING_LIST)


class BehaviorsQuery(EntityQuery):
    behavior_ids = Param(kind=ValueKind.STRING_LIST)


class EventsQuery(ActiveWindowMixin, EntityQuery):
    ids = Param(kind=ValueKind.STRING_LIST)
    event_types = Param(kind=ValueKind.ENUM_LIST, enum_type=EventType)
    country_codes = Param(kind=ValueKind.STRING_LIST)
    active_window = Param(kind=ValueKind.TIMESTAMP_RANGE)


class InterestsQuery(EntityQuery):
    lang = Param()


class LocationsQuery(EntityQuery):
    location_type = Param(kind=ValueKind.ENUM, enum_type=LocationType)
    country_code = Param()


class NetworkOperatorsQuery(EntityQuery):
    country_code = Param()


class PlatformsQuery(EntityQuery):
    lang = Param()


class TvShowsQuery(EntityQuery):
    tv_market_locale = Param()


class DiscoveryQuery(EntityQuery):
    """Discovery endpoints without their own filters (devices, languages, ...)."""


# Tailored audiences


class TailoredAudienceQuery(EntityQuery):
    pass


class TailoredAudienceChangeQuery(EntityQuery):
    pass


# Statistics


class StatisticsQuery(ActiveWindowMixin, ParameterSet):
    """Filters shared by every statistics endpoint.

    ``metrics`` is always sent under the plural key, for one metric or many.
    """

    segmentation_type = Param(kind=ValueKind.ENUM, enum_type=StatisticsSegmentationType)
    granularity = Param(kind=ValueKind.ENUM, enum_type=StatisticsGranularity)
    metrics = Param(kind=ValueKind.STRING_LIST)
    active_window = Param(kind=ValueKind.TIMESTAMP_RANGE)
    country = Param()
    platform = Param()

    def with_metrics(self, *names: str):
        """Request the given metrics.

        :raises UnknownMetric: If a name is not in the metric catalogue
        """
        for name in names:
            if name not in METRIC_CATALOG:
                raise UnknownMetric(name)
        self.metrics = list(names)
        return self


class AccountStatisticsQuery(StatisticsQuery):
    pass


class CampaignStatisticsQuery(StatisticsQuery):
    campaign_ids = Param(kind=ValueKind.STRING_LIST)


class FundingInstrumentStatisticsQuery(StatisticsQuery):
    funding_instrument_ids = Param(kind=ValueKind.STRING_LIST)


class LineItemStatisticsQuery(StatisticsQuery):
    line_item_ids = Param(kind=ValueKind.STRING_LIST)


class PromotedAccountStatisticsQuery(StatisticsQuery):
    promoted_account_ids = Param(kind=ValueKind.STRING_LIST)


class PromotedTweetStatisticsQuery(StatisticsQuery):
    promoted_tweet_ids = Param(kind=ValueKind.STRING_LIST)
