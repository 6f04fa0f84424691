"""Statistics of accounts and the entities below them.

Every call answers with a list of :class:`StatisticsSnapshot`, one per
entity and segment, in response order. The query selects the metrics,
time window, granularity and segmentation::

    query = CampaignStatisticsQuery(granularity=StatisticsGranularity.DAY)
    query.with_metrics("billed_engagements", "billed_charge_local_micro")
    query.active_between(datetime(2015, 5, 1), datetime(2015, 5, 8))
    snapshots = await client.statistics.get_campaign_stats("hkk5", "8wku2", query)
"""

import logging
from typing import List, Optional

from ..decoding.metrics import MetricValueDecoder
from ..models.statistics import StatisticsSnapshot
from ..queries import (
    AccountStatisticsQuery,
    CampaignStatisticsQuery,
    FundingInstrumentStatisticsQuery,
    LineItemStatisticsQuery,
    PromotedAccountStatisticsQuery,
    PromotedTweetStatisticsQuery,
    StatisticsQuery,
)
from ..utils.http_client import AdsTransport
from .base import AdsOperations, query_string

logger = logging.getLogger(__name__)


def stats_path(account_id: str, *segments: str) -> str:
    return "/".join(("stats", "accounts", account_id) + segments)


class StatisticsOperations(AdsOperations):
    """Statistics endpoints under ``stats/accounts/:account_id``.

    :param transport: Shared transport
    :type transport: AdsTransport
    :param decoder: Metric decoder; defaults to one over the built-in catalogue
    :type decoder: Optional[MetricValueDecoder]
    """

    def __init__(self, transport: AdsTransport, decoder: Optional[MetricValueDecoder] = None):
        super().__init__(transport)
        self.decoder = decoder or MetricValueDecoder()

    async def _stats(self, path: str, query: Optional[StatisticsQuery]) -> List[StatisticsSnapshot]:
        body = await self.transport.get(path, query_string(query))
        return self.decoder.decode_stats(body)

    async def get_account_stats(
        self, account_id: str, query: Optional[AccountStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id), query)

    async def get_campaigns_stats(
        self, account_id: str, query: Optional[CampaignStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "campaigns"), query)

    async def get_campaign_stats(
        self, account_id: str, campaign_id: str, query: Optional[CampaignStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "campaigns", campaign_id), query)

    async def get_funding_instruments_stats(
        self, account_id: str, query: Optional[FundingInstrumentStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "funding_instruments"), query)

    async def get_funding_instrument_stats(
        self,
        account_id: str,
        funding_instrument_id: str,
        query: Optional[FundingInstrumentStatisticsQuery] = None,
    ) -> List[StatisticsSnapshot]:
        return await self._stats(
            stats_path(account_id, "funding_instruments", funding_instrument_id), query
        )

    async def get_line_items_stats(
        self, account_id: str, query: Optional[LineItemStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "line_items"), query)

    async def get_line_item_stats(
        self, account_id: str, line_item_id: str, query: Optional[LineItemStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "line_items", line_item_id), query)

    async def get_promoted_accounts_stats(
        self, account_id: str, query: Optional[PromotedAccountStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "promoted_accounts"), query)

    async def get_promoted_account_stats(
        self,
        account_id: str,
        promoted_account_id: str,
        query: Optional[PromotedAccountStatisticsQuery] = None,
    ) -> List[StatisticsSnapshot]:
        return await self._stats(
            stats_path(account_id, "promoted_accounts", promoted_account_id), query
        )

    async def get_promoted_tweets_stats(
        self, account_id: str, query: Optional[PromotedTweetStatisticsQuery] = None
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "promoted_tweets"), query)

    async def get_promoted_tweet_stats(
        self,
        account_id: str,
        promoted_tweet_id: str,
        query: Optional[PromotedTweetStatisticsQuery] = None,
    ) -> List[StatisticsSnapshot]:
        return await self._stats(stats_path(account_id, "promoted_tweets", promoted_tweet_id), query)
