"""Line items: the bidding and placement units inside a campaign."""

import logging
from typing import Optional

from ..decoding.cursor import CursorEnvelope
from ..forms import LineItemForm
from ..models.entities import LineItem, LineItemPlacements
from ..queries import LineItemPlacementsQuery, LineItemQuery
from .base import WITH_DELETED, AdsOperations, account_path

logger = logging.getLogger(__name__)


class LineItemOperations(AdsOperations):
    async def get_line_items(
        self, account_id: str, query: Optional[LineItemQuery] = None
    ) -> CursorEnvelope[LineItem]:
        """List line items.

        Deleted line items are only included when the query sets
        ``with_deleted=True``.

        :param account_id: Account id
        :type account_id: str
        :param query: Optional filters
        :type query: Optional[LineItemQuery]
        :return: One page of line items
        :rtype: CursorEnvelope[LineItem]
        """
        return await self._get_page(account_path(account_id, "line_items"), LineItem.from_wire, query)

    async def get_line_item(self, account_id: str, line_item_id: str) -> LineItem:
        return await self._get_one(
            account_path(account_id, "line_items", line_item_id),
            LineItem.from_wire,
            fixed=WITH_DELETED,
        )

    async def create_line_item(self, account_id: str, form: LineItemForm) -> LineItem:
        line_item = await self._post_one(
            account_path(account_id, "line_items"), form, LineItem.from_wire
        )
        logger.info("Created line item %s on account %s", line_item.id, account_id)
        return line_item

    async def update_line_item(
        self, account_id: str, line_item_id: str, form: LineItemForm
    ) -> LineItem:
        return await self._put_one(
            account_path(account_id, "line_items", line_item_id), form, LineItem.from_wire
        )

    async def delete_line_item(self, account_id: str, line_item_id: str) -> LineItem:
        line_item = await self._delete_one(
            account_path(account_id, "line_items", line_item_id), LineItem.from_wire
        )
        logger.info("Deleted line item %s on account %s", line_item_id, account_id)
        return line_item

    async def get_placements(
        self, query: Optional[LineItemPlacementsQuery] = None
    ) -> CursorEnvelope[LineItemPlacements]:
        """List the placements valid for each product type."""
        return await self._get_page("line_items/placements", LineItemPlacements.from_wire, query)
