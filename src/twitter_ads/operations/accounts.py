"""Advertising accounts and what the authenticated user may do with them."""

from typing import List, Optional

from ..decoding.cursor import CursorEnvelope
from ..encoding.codec import decode_enum
from ..models.entities import Account, AccountPermissions
from ..models.enums import FeatureKey
from ..queries import AccountFeatureQuery, AccountQuery
from .base import AdsOperations, account_path


def _feature_key(raw) -> FeatureKey:
    return decode_enum(raw, FeatureKey, "data")


class AccountOperations(AdsOperations):
    async def get_accounts(self, query: Optional[AccountQuery] = None) -> CursorEnvelope[Account]:
        """List the accounts the token can access.

        :param query: Optional filters
        :type query: Optional[AccountQuery]
        :return: One page of accounts
        :rtype: CursorEnvelope[Account]
        """
        return await self._get_page("accounts", Account.from_wire, query)

    async def get_account(self, account_id: str) -> Account:
        return await self._get_one(account_path(account_id), Account.from_wire)

    async def get_account_features(
        self, account_id: str, query: Optional[AccountFeatureQuery] = None
    ) -> List[FeatureKey]:
        """List the features enabled on an account.

        :param account_id: Account id
        :type account_id: str
        :param query: Optionally restrict the answer to some feature keys
        :type query: Optional[AccountFeatureQuery]
        :return: Enabled features in response order
        :rtype: List[FeatureKey]
        :raises PartialDecodeFailure: If the API reports a feature key this
            client does not know
        """
        page = await self._get_page(account_path(account_id, "features"), _feature_key, query)
        return list(page.items)

    async def get_authenticated_user_access(self, account_id: str) -> AccountPermissions:
        return await self._get_one(
            account_path(account_id, "authenticated_user_access"), AccountPermissions.from_wire
        )
