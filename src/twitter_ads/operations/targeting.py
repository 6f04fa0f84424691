"""Targeting criteria of line items, and discovery of targetable values."""

import logging
from typing import List, Optional

from ..decoding.cursor import CursorEnvelope
from ..forms import TargetingCriteriaForm, TargetingCriterionForm
from ..models.entities import (
    Behavior,
    BehaviorTaxonomy,
    PlatformVersion,
    TargetingCriterion,
    TargetingEvent,
    TargetingSuggestion,
    TvMarket,
    TvShow,
)
from ..queries import (
    AppStoreCategoriesQuery,
    BehaviorsQuery,
    BehaviorTaxonomiesQuery,
    DiscoveryQuery,
    EventsQuery,
    InterestsQuery,
    LocationsQuery,
    NetworkOperatorsQuery,
    PlatformsQuery,
    TargetingCriteriaQuery,
    TvShowsQuery,
)
from .base import AdsOperations, account_path

logger = logging.getLogger(__name__)

DISCOVERY_ROOT = "targeting_criteria"


class TargetingOperations(AdsOperations):
    """Targeting criteria CRUD plus the discovery endpoints.

    Discovery endpoints are not tied to an account; they list the values
    a targeting criterion may take, e.g. location keys or interest ids.
    """

    async def get_targeting_criteria(
        self, account_id: str, query: Optional[TargetingCriteriaQuery] = None
    ) -> CursorEnvelope[TargetingCriterion]:
        return await self._get_page(
            account_path(account_id, "targeting_criteria"), TargetingCriterion.from_wire, query
        )

    async def get_targeting_criterion(self, account_id: str, criterion_id: str) -> TargetingCriterion:
        return await self._get_one(
            account_path(account_id, "targeting_criteria", criterion_id),
            TargetingCriterion.from_wire,
        )

    async def create_targeting_criterion(
        self, account_id: str, form: TargetingCriterionForm
    ) -> TargetingCriterion:
        return await self._post_one(
            account_path(account_id, "targeting_criteria"), form, TargetingCriterion.from_wire
        )

    async def set_targeting_criteria(
        self, account_id: str, form: TargetingCriteriaForm
    ) -> List[TargetingCriterion]:
        """Replace the targeting of one line item in a single request.

        :param account_id: Account id
        :type account_id: str
        :param form: The complete targeting, with ``line_item_id`` set
        :type form: TargetingCriteriaForm
        :return: The criteria now in effect
        :rtype: List[TargetingCriterion]
        """
        page = await self._put_page(
            account_path(account_id, "targeting_criteria"), form, TargetingCriterion.from_wire
        )
        logger.info(
            "Set %d targeting criteria on line item %s", len(page), form.line_item_id or "?"
        )
        return list(page.items)

    async def delete_targeting_criterion(self, account_id: str, criterion_id: str) -> TargetingCriterion:
        return await self._delete_one(
            account_path(account_id, "targeting_criteria", criterion_id),
            TargetingCriterion.from_wire,
        )

    # Discovery

    async def _discover(self, name: str, decode_one, query) -> CursorEnvelope:
        return await self._get_page(f"{DISCOVERY_ROOT}/{name}", decode_one, query)

    async def get_app_store_categories(
        self, query: Optional[AppStoreCategoriesQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("app_store_categories", TargetingSuggestion.from_wire, query)

    async def get_behavior_taxonomies(
        self, query: Optional[BehaviorTaxonomiesQuery] = None
    ) -> CursorEnvelope[BehaviorTaxonomy]:
        return await self._discover("behavior_taxonomies", BehaviorTaxonomy.from_wire, query)

    async def get_behaviors(self, query: Optional[BehaviorsQuery] = None) -> CursorEnvelope[Behavior]:
        return await self._discover("behaviors", Behavior.from_wire, query)

    async def get_devices(
        self, query: Optional[DiscoveryQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("devices", TargetingSuggestion.from_wire, query)

    async def get_events(self, query: Optional[EventsQuery] = None) -> CursorEnvelope[TargetingEvent]:
        return await self._discover("events", TargetingEvent.from_wire, query)

    async def get_interests(
        self, query: Optional[InterestsQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("interests", TargetingSuggestion.from_wire, query)

    async def get_languages(
        self, query: Optional[DiscoveryQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("languages", TargetingSuggestion.from_wire, query)

    async def get_locations(
        self, query: Optional[LocationsQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("locations", TargetingSuggestion.from_wire, query)

    async def get_network_operators(
        self, query: Optional[NetworkOperatorsQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("network_operators", TargetingSuggestion.from_wire, query)

    async def get_platform_versions(
        self, query: Optional[DiscoveryQuery] = None
    ) -> CursorEnvelope[PlatformVersion]:
        return await self._discover("platform_versions", PlatformVersion.from_wire, query)

    async def get_platforms(
        self, query: Optional[PlatformsQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("platforms", TargetingSuggestion.from_wire, query)

    async def get_tv_channels(
        self, query: Optional[DiscoveryQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("tv_channels", TargetingSuggestion.from_wire, query)

    async def get_tv_genres(
        self, query: Optional[DiscoveryQuery] = None
    ) -> CursorEnvelope[TargetingSuggestion]:
        return await self._discover("tv_genres", TargetingSuggestion.from_wire, query)

    async def get_tv_markets(self, query: Optional[DiscoveryQuery] = None) -> CursorEnvelope[TvMarket]:
        return await self._discover("tv_markets", TvMarket.from_wire, query)

    async def get_tv_shows(self, query: Optional[TvShowsQuery] = None) -> CursorEnvelope[TvShow]:
        return await self._discover("tv_shows", TvShow.from_wire, query)
