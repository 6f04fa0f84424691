"""Statistics metric catalogue and snapshot types.

``METRIC_CATALOG`` maps every metric name the Ads API reports to a
:class:`MetricCatalogEntry`. It is built once on import and is read-only.
A metric name missing from the catalogue is rejected when a statistics
payload is decoded.

Breakdown metrics carry ``post_view``, ``post_engagement`` and
``assisted`` components. The API describes their total as the sum of the
components, but values are exposed exactly as received and the sum is
never checked: upstream figures are eventually consistent and may not
add up at any given moment.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from .enums import MetricShape, StatisticsGranularity, StatisticsMetricFamily, StatisticsSegmentationType

Number = Union[int, float]

BREAKDOWN_COMPONENTS = ("post_view", "post_engagement", "assisted")


@dataclass(frozen=True)
class MetricCatalogEntry:
    """Static description of one metric.

    :param name: Metric name as used on the wire
    :param family: Reporting family the metric belongs to
    :param segmentation: Segmentation the metric can only be reported under,
        or ``None`` when it is available without segmentation
    :param shape: Scalar series or named breakdown series
    :param available_for_promoted_accounts: Whether promoted account
        statistics report this metric
    :param description: Human-readable description
    """

    name: str
    family: StatisticsMetricFamily
    segmentation: Optional[StatisticsSegmentationType]
    shape: MetricShape
    available_for_promoted_accounts: bool
    description: str = ""

    @property
    def is_breakdown(self) -> bool:
        return self.shape is MetricShape.BREAKDOWN


_F = StatisticsMetricFamily
_S = StatisticsSegmentationType
_SCALAR = MetricShape.SCALAR
_BREAKDOWN = MetricShape.BREAKDOWN
_BREAKDOWN_NOTE = "Provides a breakdown where total = post-view + post-engagement + assisted"

# name, family, segmentation, available for promoted accounts, shape, description
_METRICS = (
    ("conversion_custom", _F.CONVERSION, _S.PLATFORMS, True, _SCALAR, "Count of conversions of type CUSTOM"),
    ("conversion_downloads", _F.CONVERSION, _S.PLATFORMS, True, _SCALAR, "Count of conversions of type DOWNLOAD"),
    ("conversion_order_quantity", _F.CONVERSION, _S.CONVERSION_TAGS, True, _SCALAR, "Count of tw_sale_quantity from web event tag"),
    ("conversion_purchases", _F.CONVERSION, _S.PLATFORMS, True, _SCALAR, "Count of conversions of type PURCHASE"),
    ("conversion_sale_amount", _F.CONVERSION, _S.CONVERSION_TAGS, True, _SCALAR, "Count of tw_sale_amount from web event tag"),
    ("conversion_sign_ups", _F.CONVERSION, _S.PLATFORMS, True, _SCALAR, "Count of conversions of type SIGN_UP"),
    ("conversion_site_visits", _F.CONVERSION, _S.PLATFORMS, True, _SCALAR, "Count of conversions of type SITE_VISIT"),
    ("promotion_card_responses", _F.ENGAGEMENT, None, True, _SCALAR, "Card engagements"),
    ("promoted_account_follows", _F.ENGAGEMENT, None, True, _SCALAR, "Total follows for Promoted Account campaigns"),
    ("billed_engagements", _F.ENGAGEMENT, None, True, _SCALAR, "Total count of billed engagements"),
    ("billed_follows", _F.ENGAGEMENT, None, True, _SCALAR, "Total count of billed follows"),
    ("promoted_tweet_profile_clicks", _F.ENGAGEMENT, None, True, _SCALAR, "Catch-all clicks for Promoted Tweet in Profile inventory"),
    ("promoted_tweet_profile_engagements", _F.ENGAGEMENT, None, True, _SCALAR, "Total count of engagements for Promoted Tweet in Profiles"),
    ("promoted_tweet_profile_favorites", _F.ENGAGEMENT, None, True, _SCALAR, "Count of favorites of Promoted Tweet in Profiles"),
    ("promoted_tweet_profile_follows", _F.ENGAGEMENT, None, True, _SCALAR, "Count of follows for Promoted Tweet in Profiles"),
    ("promoted_tweet_profile_replies", _F.ENGAGEMENT, None, True, _SCALAR, "Count of replies for Promoted Tweet in Profiles"),
    ("promoted_tweet_profile_retweets", _F.ENGAGEMENT, None, True, _SCALAR, "Count of Retweets for Promoted Tweet in Profiles"),
    ("promoted_tweet_profile_url_clicks", _F.ENGAGEMENT, None, True, _SCALAR, "Count of URL clicks on Promoted Tweet in Profiles"),
    ("promoted_tweet_search_clicks", _F.ENGAGEMENT, None, True, _SCALAR, "Catch-all clicks for Promoted Tweet in Search inventory"),
    ("promoted_tweet_search_engagements", _F.ENGAGEMENT, None, True, _SCALAR, "Total count of engagements for Promoted Tweet in Search"),
    ("promoted_tweet_search_favorites", _F.ENGAGEMENT, None, True, _SCALAR, "Count of favorites of Promoted Tweet in Search"),
    ("promoted_tweet_search_follows", _F.ENGAGEMENT, None, True, _SCALAR, "Count of follows for Promoted Tweet in Search"),
    ("promoted_tweet_search_replies", _F.ENGAGEMENT, None, True, _SCALAR, "Count of replies for Promoted Tweet in Search"),
    ("promoted_tweet_search_retweets", _F.ENGAGEMENT, None, True, _SCALAR, "Count of Retweets for Promoted Tweet in Search"),
    ("promoted_tweet_search_url_clicks", _F.ENGAGEMENT, None, True, _SCALAR, "Count of URL clicks on Promoted Tweet in Search"),
    ("promoted_tweet_timeline_clicks", _F.ENGAGEMENT, None, True, _SCALAR, "Catch-all clicks for Promoted Tweet in Timeline inventory"),
    ("promoted_tweet_timeline_engagements", _F.ENGAGEMENT, None, True, _SCALAR, "Count of overall engagements for Promoted Tweet in Timeline"),
    ("promoted_tweet_timeline_favorites", _F.ENGAGEMENT, None, True, _SCALAR, "Count of favorites of Promoted Tweet in Timeline"),
    ("promoted_tweet_timeline_follows", _F.ENGAGEMENT, None, True, _SCALAR, "Count of follows for Promoted Tweet in Timeline"),
    ("promoted_tweet_timeline_replies", _F.ENGAGEMENT, None, True, _SCALAR, "Count of replies for Promoted Tweet in Timeline"),
    ("promoted_tweet_timeline_retweets", _F.ENGAGEMENT, None, True, _SCALAR, "Count of Retweets for Promoted Tweet in Timeline"),
    ("promoted_tweet_timeline_url_clicks", _F.ENGAGEMENT, None, True, _SCALAR, "Count of URL clicks of Promoted Tweet in Timeline"),
    ("mobile_conversion_achievement_unlocked", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_add_to_cart", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_added_payment_infos", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_add_to_wishlist", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_checkout_initiated", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_content_views", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_installs", _F.MAP, None, True, _SCALAR, "install conversion events"),
    ("mobile_conversion_invites", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_level_achieved", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_logins", _F.MAP, None, True, _SCALAR, "login conversion events"),
    ("mobile_conversion_purchases", _F.MAP, None, True, _SCALAR, "purchase conversion events"),
    ("mobile_conversion_re_engages", _F.MAP, None, True, _SCALAR, "re-engagement conversion events"),
    ("mobile_conversion_sign_ups", _F.MAP, None, True, _SCALAR, "sign-up conversion events"),
    ("mobile_conversion_rated", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_reservations", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_searches", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_shares", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_spent_credits", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_tutorial_completes", _F.MAP, None, True, _SCALAR, ""),
    ("mobile_conversion_updates", _F.MAP, None, True, _SCALAR, ""),
    ("promoted_tweet_app_install_attempts", _F.MAP, None, True, _SCALAR, "tracks install attempts within the twitter app"),
    ("promoted_tweet_app_open_attempts", _F.MAP, None, True, _SCALAR, "tracks open attempts within the twitter app"),
    ("mobile_conversion_achievement_unlocked_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_add_to_cart_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_add_to_wishlist_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_added_payment_infos_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_checkout_initiated_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_content_views_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_installs_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_invites_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_level_achieved_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_logins_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_order_quantity", _F.MAP, None, False, _BREAKDOWN, "order quantity conversion events"),
    ("mobile_conversion_purchases_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_rated_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_re_engages_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_reservations_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_sale_amount_local_micro", _F.MAP, None, False, _BREAKDOWN, "sale amount conversion events"),
    ("mobile_conversion_searches_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_shares_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_sign_ups_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_spent_credits_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_tutorial_completes_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("mobile_conversion_updates_breakdown", _F.MAP, None, False, _BREAKDOWN, _BREAKDOWN_NOTE),
    ("promoted_video_cta_clicks", _F.VIDEO, None, True, _SCALAR, "Total CTA clicks"),
    ("promoted_video_replays", _F.VIDEO, None, True, _SCALAR, "Number of times a user elects to re-watch a video"),
    ("promoted_video_total_views", _F.VIDEO, None, True, _SCALAR, "Total non-unique views where at least 3 seconds was viewed"),
    ("promoted_video_views_100", _F.VIDEO, None, True, _SCALAR, "Total number of views where 100% of the video was viewed"),
    ("promoted_video_views_25", _F.VIDEO, None, True, _SCALAR, "Total number of views where at least 25% of the video was viewed"),
    ("promoted_video_views_50", _F.VIDEO, None, True, _SCALAR, "Total number of views where at least 50% of the video was viewed"),
    ("promoted_video_views_75", _F.VIDEO, None, True, _SCALAR, "Total number of views where at least 75% of the video was viewed"),
    ("promoted_account_follow_rate", _F.OTHER, None, True, _SCALAR, "promoted_account_follows / promoted_account_impressions"),
    ("promoted_account_impressions", _F.OTHER, None, True, _SCALAR, "Total impressions for Promoted Account campaigns"),
    ("promoted_account_profile_visits", _F.OTHER, None, True, _SCALAR, "Total profile visits for Promoted Account campaigns"),
    ("promoted_tweet_search_engagement_rate", _F.OTHER, None, True, _SCALAR, "promoted_tweet_search_engagements / promoted_tweet_search_impressions"),
    ("promoted_tweet_profile_impressions", _F.OTHER, None, True, _SCALAR, "Count of impressions for Promoted Tweet in Profiles"),
    ("promoted_tweet_search_impressions", _F.OTHER, None, True, _SCALAR, "Count of impressions for Promoted Tweet in Search"),
    ("promoted_tweet_timeline_engagement_rate", _F.OTHER, None, True, _SCALAR, "promoted_tweet_timeline_engagements / promoted_tweet_timeline_impressions"),
    ("promoted_tweet_timeline_impressions", _F.OTHER, None, True, _SCALAR, "Count of impressions for Promoted Tweet in Timeline"),
    ("billed_charge_local_micro", _F.SPEND, None, True, _SCALAR, "Spend"),
    ("promoted_tweet_tpn_card_engagements", _F.TPN, None, True, _SCALAR, "Card engagements from TPN"),
    ("promoted_tweet_tpn_engagement_rate", _F.TPN, None, True, _SCALAR, "Engagement rate from TPN"),
    ("promoted_tweet_tpn_engagements", _F.TPN, None, True, _SCALAR, "Total engagements from TPN"),
    ("promoted_tweet_tpn_clicks", _F.TPN, None, True, _SCALAR, "Total clicks from Twitter Publisher Network (TPN)"),
    ("promoted_tweet_tpn_favorites", _F.TPN, None, True, _SCALAR, "Total favorites from TPN"),
    ("promoted_tweet_tpn_follows", _F.TPN, None, True, _SCALAR, "Total follows from TPN"),
    ("promoted_tweet_tpn_impressions", _F.TPN, None, True, _SCALAR, "Total impressions from TPN"),
    ("promoted_tweet_tpn_replies", _F.TPN, None, True, _SCALAR, "Total replies from TPN"),
    ("promoted_tweet_tpn_retweets", _F.TPN, None, True, _SCALAR, "Total retweets from TPN"),
    ("promoted_tweet_tpn_url_clicks", _F.TPN, None, True, _SCALAR, ""),
)

METRIC_CATALOG: Mapping[str, MetricCatalogEntry] = MappingProxyType(
    {
        name: MetricCatalogEntry(name, family, segmentation, shape, promoted_accounts, description)
        for name, family, segmentation, promoted_accounts, shape, description in _METRICS
    }
)


def metrics_in_family(family: StatisticsMetricFamily) -> Tuple[MetricCatalogEntry, ...]:
    return tuple(entry for entry in METRIC_CATALOG.values() if entry.family is family)


# Snapshot values


@dataclass(frozen=True)
class ScalarMetric:
    """One number per time bucket."""

    name: str
    values: Tuple[Number, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def sum(self) -> Number:
        return sum(self.values)


@dataclass(frozen=True)
class BreakdownMetric:
    """Named component series, one number per time bucket each.

    Components missing from the payload are missing here too; they are
    not filled with zeros.
    """

    name: str
    components: Mapping[str, Tuple[Number, ...]]

    def get(self, component: str) -> Optional[Tuple[Number, ...]]:
        return self.components.get(component)

    def __contains__(self, component: str) -> bool:
        return component in self.components

    @property
    def post_view(self) -> Optional[Tuple[Number, ...]]:
        return self.components.get("post_view")

    @property
    def post_engagement(self) -> Optional[Tuple[Number, ...]]:
        return self.components.get("post_engagement")

    @property
    def assisted(self) -> Optional[Tuple[Number, ...]]:
        return self.components.get("assisted")

    @property
    def total(self) -> Optional[Tuple[Number, ...]]:
        """The ``total`` series if the payload carried one."""
        return self.components.get("total")

    def implied_total(self) -> Tuple[Number, ...]:
        """Bucket-wise sum of the components that are present.

        :return: Sums over ``post_view``, ``post_engagement`` and
            ``assisted``; absent components contribute nothing
        :rtype: Tuple[Number, ...]
        """
        series = [self.components[key] for key in BREAKDOWN_COMPONENTS if key in self.components]
        if not series:
            return ()
        length = max(len(values) for values in series)
        return tuple(
            sum(values[index] for values in series if index < len(values))
            for index in range(length)
        )


MetricSnapshotValue = Union[ScalarMetric, BreakdownMetric]


@dataclass(frozen=True)
class StatisticsSegment:
    segmentation_type: Optional[StatisticsSegmentationType] = None
    segmentation_value: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Metrics for one entity over one time window and optional segment.

    :param id: Entity id the statistics belong to
    :param granularity: Bucket size of every metric series
    :param start_time: Start of the window (naive UTC)
    :param end_time: End of the window (naive UTC)
    :param segment: Segment the metrics were restricted to, if any
    :param metrics: Decoded values keyed by metric name
    """

    id: Optional[str] = None
    granularity: Optional[StatisticsGranularity] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    segment: Optional[StatisticsSegment] = None
    metrics: Mapping[str, MetricSnapshotValue] = field(default_factory=lambda: MappingProxyType({}))

    def has_metrics(self, *names: str) -> bool:
        return all(name in self.metrics for name in names)

    def get_metric(self, name: str) -> Optional[MetricSnapshotValue]:
        return self.metrics.get(name)

    def __getitem__(self, name: str) -> MetricSnapshotValue:
        return self.metrics[name]

    @property
    def metric_names(self) -> Tuple[str, ...]:
        return tuple(self.metrics)

    def as_dict(self) -> Dict[str, object]:
        """Plain representation, for logging and JSON export."""
        metrics: Dict[str, object] = {}
        for name, value in self.metrics.items():
            if isinstance(value, ScalarMetric):
                metrics[name] = list(value.values)
            else:
                metrics[name] = {key: list(series) for key, series in value.components.items()}
        return {
            "id": self.id,
            "granularity": self.granularity.value if self.granularity else None,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "segment": None
            if self.segment is None
            else {
                "segmentation_type": self.segment.segmentation_type.value
                if self.segment.segmentation_type
                else None,
                "segmentation_value": self.segment.segmentation_value,
                "name": self.segment.name,
            },
            "metrics": metrics,
        }
