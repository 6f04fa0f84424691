"""Campaigns and the funding instruments that pay for them."""

import logging
from typing import Optional

from ..decoding.cursor import CursorEnvelope
from ..forms import CampaignForm
from ..models.entities import Campaign, FundingInstrument
from ..queries import CampaignQuery, FundingInstrumentQuery
from .base import WITH_DELETED, AdsOperations, account_path

logger = logging.getLogger(__name__)


class CampaignOperations(AdsOperations):
    """Campaign CRUD and funding instrument lookups.

    Example::

        form = CampaignForm(name="Launch", funding_instrument_id="hw6ie")
        form.with_budget(total="500.00", daily="25.00").active_between(start)
        campaign = await client.campaigns.create_campaign("hkk5", form)
    """

    async def get_campaigns(
        self, account_id: str, query: Optional[CampaignQuery] = None
    ) -> CursorEnvelope[Campaign]:
        return await self._get_page(account_path(account_id, "campaigns"), Campaign.from_wire, query)

    async def get_campaign(self, account_id: str, campaign_id: str) -> Campaign:
        """Fetch one campaign, including a deleted one.

        :param account_id: Account id
        :type account_id: str
        :param campaign_id: Campaign id
        :type campaign_id: str
        :return: The campaign
        :rtype: Campaign
        """
        return await self._get_one(
            account_path(account_id, "campaigns", campaign_id),
            Campaign.from_wire,
            fixed=WITH_DELETED,
        )

    async def create_campaign(self, account_id: str, form: CampaignForm) -> Campaign:
        campaign = await self._post_one(
            account_path(account_id, "campaigns"), form, Campaign.from_wire
        )
        logger.info("Created campaign %s on account %s", campaign.id, account_id)
        return campaign

    async def update_campaign(self, account_id: str, campaign_id: str, form: CampaignForm) -> Campaign:
        """Change the attributes set on ``form``; everything else is left as is."""
        return await self._put_one(
            account_path(account_id, "campaigns", campaign_id), form, Campaign.from_wire
        )

    async def delete_campaign(self, account_id: str, campaign_id: str) -> Campaign:
        campaign = await self._delete_one(
            account_path(account_id, "campaigns", campaign_id), Campaign.from_wire
        )
        logger.info("Deleted campaign %s on account %s", campaign_id, account_id)
        return campaign

    async def get_funding_instruments(
        self, account_id: str, query: Optional[FundingInstrumentQuery] = None
    ) -> CursorEnvelope[FundingInstrument]:
        return await self._get_page(
            account_path(account_id, "funding_instruments"), FundingInstrument.from_wire, query
        )

    async def get_funding_instrument(
        self, account_id: str, funding_instrument_id: str
    ) -> FundingInstrument:
        return await self._get_one(
            account_path(account_id, "funding_instruments", funding_instrument_id),
            FundingInstrument.from_wire,
        )
