"""Tailored audiences, their membership changes and the global opt-out list."""

import logging
from typing import Optional

from ..decoding.cursor import CursorEnvelope
from ..forms import GlobalOptOutForm, TailoredAudienceChangeForm, TailoredAudienceForm
from ..models.entities import GlobalOptOut, TailoredAudience, TailoredAudienceChange
from ..queries import TailoredAudienceChangeQuery, TailoredAudienceQuery
from .base import WITH_DELETED, AdsOperations, account_path

logger = logging.getLogger(__name__)


class TailoredAudienceOperations(AdsOperations):
    async def get_tailored_audiences(
        self, account_id: str, query: Optional[TailoredAudienceQuery] = None
    ) -> CursorEnvelope[TailoredAudience]:
        return await self._get_page(
            account_path(account_id, "tailored_audiences"), TailoredAudience.from_wire, query
        )

    async def get_tailored_audience(self, account_id: str, audience_id: str) -> TailoredAudience:
        return await self._get_one(
            account_path(account_id, "tailored_audiences", audience_id),
            TailoredAudience.from_wire,
            fixed=WITH_DELETED,
        )

    async def create_tailored_audience(
        self, account_id: str, form: TailoredAudienceForm
    ) -> TailoredAudience:
        audience = await self._post_one(
            account_path(account_id, "tailored_audiences"), form, TailoredAudience.from_wire
        )
        logger.info("Created tailored audience %s on account %s", audience.id, account_id)
        return audience

    async def delete_tailored_audience(self, account_id: str, audience_id: str) -> TailoredAudience:
        return await self._delete_one(
            account_path(account_id, "tailored_audiences", audience_id), TailoredAudience.from_wire
        )

    async def get_tailored_audience_changes(
        self, account_id: str, query: Optional[TailoredAudienceChangeQuery] = None
    ) -> CursorEnvelope[TailoredAudienceChange]:
        return await self._get_page(
            account_path(account_id, "tailored_audience_changes"),
            TailoredAudienceChange.from_wire,
            query,
        )

    async def get_tailored_audience_change(
        self, account_id: str, change_id: str
    ) -> TailoredAudienceChange:
        return await self._get_one(
            account_path(account_id, "tailored_audience_changes", change_id),
            TailoredAudienceChange.from_wire,
        )

    async def create_tailored_audience_change(
        self, account_id: str, form: TailoredAudienceChangeForm
    ) -> TailoredAudienceChange:
        """Add, remove or replace audience members from an uploaded file.

        The change is processed asynchronously by the API; poll
        :meth:`get_tailored_audience_change` for its ``state``.

        :param account_id: Account id
        :type account_id: str
        :param form: Audience id, uploaded file path and operation
        :type form: TailoredAudienceChangeForm
        :return: The pending change
        :rtype: TailoredAudienceChange
        """
        return await self._post_one(
            account_path(account_id, "tailored_audience_changes"),
            form,
            TailoredAudienceChange.from_wire,
        )

    async def update_global_opt_out(self, account_id: str, form: GlobalOptOutForm) -> GlobalOptOut:
        return await self._put_one(
            account_path(account_id, "tailored_audiences", "global_opt_out"),
            form,
            GlobalOptOut.from_wire,
        )
