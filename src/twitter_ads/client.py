"""Entry point of the Twitter Ads client.

Examples:
    >>> async with TwitterAdsClient(access_token="...") as client:
    ...     accounts = await client.accounts.get_accounts()
    ...     campaigns = await client.collect_all(
    ...         functools.partial(client.campaigns.get_campaigns, accounts[0].id),
    ...         CampaignQuery(),
    ...     )
"""

import logging
from typing import Any, AsyncIterator, Callable, List, Optional

import httpx

from .config.settings import Settings
from .config.settings import settings as default_settings
from .decoding.cursor import CursorEnvelope
from .exceptions import ConfigurationError
from .operations import (
    AccountOperations,
    CampaignOperations,
    LineItemOperations,
    PromotionOperations,
    StatisticsOperations,
    TailoredAudienceOperations,
    TargetingOperations,
    collect_all,
    iter_pages,
)
from .queries import PagedQuery
from .utils.http_client import AdsTransport

logger = logging.getLogger(__name__)


class TwitterAdsClient:
    """Async client exposing one façade per resource family.

    :param access_token: Bearer token; falls back to ``TWITTER_ADS_ACCESS_TOKEN``
    :type access_token: Optional[str]
    :param config: Settings to use instead of the environment-loaded ones
    :type config: Optional[Settings]
    :param transport: Optional httpx transport, mainly for tests
    :type transport: Optional[httpx.AsyncBaseTransport]
    :raises ConfigurationError: If no access token is available
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or default_settings
        token = access_token or self.config.access_token
        if not token:
            raise ConfigurationError(
                "No access token configured; pass access_token or set TWITTER_ADS_ACCESS_TOKEN",
                setting="access_token",
            )
        self.transport = AdsTransport(access_token=token, config=self.config, transport=transport)

        self.accounts = AccountOperations(self.transport)
        self.campaigns = CampaignOperations(self.transport)
        self.line_items = LineItemOperations(self.transport)
        self.targeting = TargetingOperations(self.transport)
        self.tailored_audiences = TailoredAudienceOperations(self.transport)
        self.promotions = PromotionOperations(self.transport)
        self.statistics = StatisticsOperations(self.transport)
        logger.debug("Twitter Ads client ready for %s", self.transport.api_root)

    def iter_pages(
        self, fetch: Callable[[PagedQuery], Any], query: PagedQuery
    ) -> AsyncIterator[CursorEnvelope]:
        """Iterate over every page of a listing, using the configured page size."""
        return iter_pages(fetch, query, self.config.page_size)

    async def collect_all(self, fetch: Callable[[PagedQuery], Any], query: PagedQuery) -> List[Any]:
        return await collect_all(fetch, query, self.config.page_size)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "TwitterAdsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
