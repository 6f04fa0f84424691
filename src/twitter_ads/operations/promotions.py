"""Promotable users, sponsored tweets and promoted content references."""

import logging
from typing import List, Optional

from ..decoding.cursor import CursorEnvelope
from ..forms import PromotedTweetReferenceForm, PromotedUserReferenceForm, SponsoredTweetForm
from ..models.entities import PromotableUser, PromotedTweetReference, PromotedUserReference, Tweet
from ..queries import (
    PromotableUserQuery,
    PromotedTweetReferenceQuery,
    PromotedUserReferenceQuery,
    SponsoredTweetQuery,
)
from .base import SCOPED_TO_NONE, AdsOperations, account_path

logger = logging.getLogger(__name__)


class PromotionOperations(AdsOperations):
    async def get_promotable_users(
        self, account_id: str, query: Optional[PromotableUserQuery] = None
    ) -> CursorEnvelope[PromotableUser]:
        return await self._get_page(
            account_path(account_id, "promotable_users"), PromotableUser.from_wire, query
        )

    async def get_scoped_timeline(
        self, account_id: str, query: Optional[SponsoredTweetQuery] = None
    ) -> CursorEnvelope[Tweet]:
        """List promoted-only tweets of the account.

        The request always carries ``scoped_to=none``.

        :param account_id: Account id
        :type account_id: str
        :param query: Optional filters
        :type query: Optional[SponsoredTweetQuery]
        :return: One page of tweets
        :rtype: CursorEnvelope[Tweet]
        """
        return await self._get_page(
            account_path(account_id, "scoped_timeline"), Tweet.from_wire, query, fixed=SCOPED_TO_NONE
        )

    async def create_sponsored_tweet(self, account_id: str, form: SponsoredTweetForm) -> Tweet:
        tweet = await self._post_one(account_path(account_id, "tweet"), form, Tweet.from_wire)
        logger.info("Created promoted-only tweet %s on account %s", tweet.id, account_id)
        return tweet

    # Promoted tweets

    async def get_promoted_tweet_references(
        self, account_id: str, query: Optional[PromotedTweetReferenceQuery] = None
    ) -> CursorEnvelope[PromotedTweetReference]:
        return await self._get_page(
            account_path(account_id, "promoted_tweets"), PromotedTweetReference.from_wire, query
        )

    async def get_promoted_tweet_reference(
        self, account_id: str, reference_id: str
    ) -> PromotedTweetReference:
        return await self._get_one(
            account_path(account_id, "promoted_tweets", reference_id),
            PromotedTweetReference.from_wire,
        )

    async def create_promoted_tweet_reference(
        self, account_id: str, form: PromotedTweetReferenceForm
    ) -> List[PromotedTweetReference]:
        """Promote tweets on a line item; one reference is created per tweet."""
        page = await self._post_page(
            account_path(account_id, "promoted_tweets"), form, PromotedTweetReference.from_wire
        )
        return list(page.items)

    async def delete_promoted_tweet_reference(
        self, account_id: str, reference_id: str
    ) -> PromotedTweetReference:
        return await self._delete_one(
            account_path(account_id, "promoted_tweets", reference_id),
            PromotedTweetReference.from_wire,
        )

    # Promoted accounts

    async def get_promoted_user_references(
        self, account_id: str, query: Optional[PromotedUserReferenceQuery] = None
    ) -> CursorEnvelope[PromotedUserReference]:
        return await self._get_page(
            account_path(account_id, "promoted_accounts"), PromotedUserReference.from_wire, query
        )

    async def get_promoted_user_reference(
        self, account_id: str, reference_id: str
    ) -> PromotedUserReference:
        return await self._get_one(
            account_path(account_id, "promoted_accounts", reference_id),
            PromotedUserReference.from_wire,
        )

    async def create_promoted_user_reference(
        self, account_id: str, form: PromotedUserReferenceForm
    ) -> PromotedUserReference:
        return await self._post_one(
            account_path(account_id, "promoted_accounts"), form, PromotedUserReference.from_wire
        )

    async def delete_promoted_user_reference(
        self, account_id: str, reference_id: str
    ) -> PromotedUserReference:
        return await self._delete_one(
            account_path(account_id, "promoted_accounts", reference_id),
            PromotedUserReference.from_wire,
        )
