"""Entity models returned by the Ads API.

Models accept the API's JSON objects directly. Timestamps, micro-unit
money amounts and enum tokens are decoded with the same codec used to
encode requests, so a malformed value surfaces as
:class:`~twitter_ads.exceptions.MalformedValue` or
:class:`~twitter_ads.exceptions.UnrecognizedEnumValue` naming the field.
Unknown attributes are kept as extras.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationInfo

from ..encoding.codec import decode_enum, decode_money, decode_timestamp
from .enums import (
    AdvertisingObjective,
    AdvertisingPermission,
    AdvertisingPlacement,
    AdvertisingProductType,
    AdvertisingSentiment,
    ApprovalStatus,
    BidUnit,
    EventType,
    FundingInstrumentType,
    LineItemOptimization,
    PromotableUserType,
    ReasonNotServable,
    TailoredAudienceChangeOperation,
    TailoredAudienceChangeState,
    TailoredAudienceListType,
    TailoredAudienceType,
    TargetingCriterionType,
)


def _timestamp(value: Any, info: ValidationInfo) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return decode_timestamp(value, info.field_name)


def _money(value: Any, info: ValidationInfo) -> Optional[Decimal]:
    if value is None or isinstance(value, Decimal):
        return value
    return decode_money(value, info.field_name)


def _enum(enum_type: Type[Enum]) -> Callable[[Any, ValidationInfo], Any]:
    def validate(value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return None
        return decode_enum(value, enum_type, info.field_name)

    return validate


def _enum_list(enum_type: Type[Enum]) -> Callable[[Any, ValidationInfo], Any]:
    def validate(value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]
        return [decode_enum(item, enum_type, info.field_name) for item in value]

    return validate


Timestamp = Annotated[Optional[datetime], BeforeValidator(_timestamp)]
Money = Annotated[Optional[Decimal], BeforeValidator(_money)]


def EnumField(enum_type):
    return Annotated[Optional[enum_type], BeforeValidator(_enum(enum_type))]


def EnumList(enum_type):
    return Annotated[List[enum_type], BeforeValidator(_enum_list(enum_type))]


class AdsModel(BaseModel):
    """Base for all decoded API objects."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @classmethod
    def from_wire(cls, raw: Dict[str, Any]):
        """Decode one JSON object from a response envelope.

        :param raw: Parsed JSON object
        :type raw: Dict[str, Any]
        :return: The decoded model
        """
        return cls.model_validate(raw)


class TwitterObject(AdsModel):
    """Attributes shared by every persisted Ads API object."""

    id: Optional[str] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    deleted: Optional[bool] = None


# Accounts


class Account(TwitterObject):
    """An advertising account.

    :param timezone_switch_at: When the account last changed timezone
    :type timezone_switch_at: Optional[datetime]
    :param approval_status: Review state of the account
    :type approval_status: Optional[ApprovalStatus]
    """

    name: Optional[str] = None
    salt: Optional[str] = None
    timezone: Optional[str] = None
    timezone_switch_at: Timestamp = None
    approval_status: EnumField(ApprovalStatus) = None


class AccountPermissions(AdsModel):
    user_id: Optional[str] = None
    permissions: EnumList(AdvertisingPermission) = Field(default_factory=list)


class PromotableUser(TwitterObject):
    account_id: Optional[str] = None
    user_id: Optional[str] = None
    promotable_user_type: EnumField(PromotableUserType) = None


# Campaigns and funding


class Campaign(TwitterObject):
    """An advertising campaign.

    Budgets are exposed in currency units; the API transmits them as
    micro-units under the ``*_local_micro`` keys.
    """

    name: Optional[str] = None
    account_id: Optional[str] = None
    currency: Optional[str] = None
    funding_instrument_id: Optional[str] = None
    total_budget_amount: Money = Field(None, alias="total_budget_amount_local_micro")
    daily_budget_amount: Money = Field(None, alias="daily_budget_amount_local_micro")
    start_time: Timestamp = None
    end_time: Timestamp = None
    reasons_not_servable: EnumList(ReasonNotServable) = Field(default_factory=list)
    standard_delivery: Optional[bool] = None
    paused: Optional[bool] = None


class FundingInstrument(TwitterObject):
    """A funding source (credit card, credit line, insertion order)."""

    account_id: Optional[str] = None
    instrument_type: EnumField(FundingInstrumentType) = Field(None, alias="type")
    currency: Optional[str] = None
    description: Optional[str] = None
    cancelled: Optional[bool] = None
    credit_limit: Money = Field(None, alias="credit_limit_local_micro")
    credit_remaining: Money = Field(None, alias="credit_remaining_local_micro")
    funded_amount: Money = Field(None, alias="funded_amount_local_micro")
    start_time: Timestamp = None
    end_time: Timestamp = None


# Line items


class LineItem(TwitterObject):
    """A line item: the bidding and placement unit of a campaign."""

    account_id: Optional[str] = None
    campaign_id: Optional[str] = None
    name: Optional[str] = None
    currency: Optional[str] = None
    bid_unit: EnumField(BidUnit) = None
    optimization: EnumField(LineItemOptimization) = None
    objective: EnumField(AdvertisingObjective) = None
    include_sentiment: EnumField(AdvertisingSentiment) = None
    product_type: EnumField(AdvertisingProductType) = None
    placements: EnumList(AdvertisingPlacement) = Field(default_factory=list)
    total_budget_amount: Money = Field(None, alias="total_budget_amount_local_micro")
    bid_amount: Money = Field(None, alias="bid_amount_local_micro")
    automatically_select_bid: Optional[bool] = None
    paused: Optional[bool] = None


class LineItemPlacements(AdsModel):
    """Placement combinations allowed for one product type."""

    product_type: EnumField(AdvertisingProductType) = None
    placements: List[EnumList(AdvertisingPlacement)] = Field(default_factory=list)


# Promoted content


class PromotedTweetReference(TwitterObject):
    line_item_id: Optional[str] = None
    tweet_id: Optional[str] = None
    paused: Optional[bool] = None
    approval_status: EnumField(ApprovalStatus) = None


class PromotedUserReference(TwitterObject):
    line_item_id: Optional[str] = None
    user_id: Optional[str] = None
    paused: Optional[bool] = None
    approval_status: EnumField(ApprovalStatus) = None


class Tweet(AdsModel):
    """A (possibly sponsored) tweet.

    ``created_at`` is kept as sent; tweets use the classic
    ``Wed Aug 27 13:08:45 +0000 2008`` format rather than ISO-8601.
    """

    id: Optional[str] = Field(None, alias="id_str")
    text: Optional[str] = None
    created_at: Optional[str] = None
    user: Optional[Dict[str, Any]] = None


# Tailored audiences


class TailoredAudience(TwitterObject):
    name: Optional[str] = None
    list_type: EnumField(TailoredAudienceListType) = None
    audience_type: EnumField(TailoredAudienceType) = None
    audience_size: Optional[int] = None
    partner_source: Optional[str] = None
    targetable: Optional[bool] = None
    reasons_not_targetable: List[str] = Field(default_factory=list)
    targetable_types: List[str] = Field(default_factory=list)


class TailoredAudienceChange(AdsModel):
    id: Optional[str] = None
    tailored_audience_id: Optional[str] = None
    input_file_path: Optional[str] = None
    operation: EnumField(TailoredAudienceChangeOperation) = None
    state: EnumField(TailoredAudienceChangeState) = None


class GlobalOptOut(AdsModel):
    input_file_path: Optional[str] = None
    list_type: EnumField(TailoredAudienceListType) = None


# Targeting


class TargetingCriterion(TwitterObject):
    account_id: Optional[str] = None
    line_item_id: Optional[str] = None
    name: Optional[str] = None
    targeting_type: EnumField(TargetingCriterionType) = None
    targeting_value: Optional[str] = None
    tailored_audience_expansion: Optional[bool] = None
    tailored_audience_type: EnumField(TailoredAudienceType) = None


class TargetingSuggestion(AdsModel):
    """A discovery result usable as a targeting value.

    Returned by most ``targeting_criteria/<kind>`` discovery endpoints.
    """

    name: Optional[str] = None
    targeting_type: Optional[str] = None
    targeting_value: Optional[str] = None


class PlatformVersion(TargetingSuggestion):
    number: Optional[str] = None
    platform: Optional[str] = None


class Behavior(AdsModel):
    id: Optional[str] = None
    name: Optional[str] = None
    audience_size: Optional[int] = None
    behavior_taxonomy_id: Optional[str] = None
    partner_source: Optional[str] = None
    targetable_types: List[str] = Field(default_factory=list)


class BehaviorTaxonomy(AdsModel):
    id: Optional[str] = None
    name: Optional[str] = None
    parent_id: Optional[str] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class TvMarket(AdsModel):
    id: Optional[str] = None
    name: Optional[str] = None
    country_code: Optional[str] = None
    locale: Optional[str] = None


class TvShow(AdsModel):
    id: Optional[str] = None
    name: Optional[str] = None
    genre: Optional[str] = None
    estimated_users: Optional[int] = None


class TargetingEvent(AdsModel):
    """A calendar event available for event targeting."""

    id: Optional[str] = None
    name: Optional[str] = None
    event_type: EnumField(EventType) = None
    country_code: Optional[str] = None
    is_global: Optional[bool] = None
    start_time: Timestamp = None
    end_time: Timestamp = None
    reach: Dict[str, int] = Field(default_factory=dict)
    top_hashtags: List[str] = Field(default_factory=list)
    top_tweets: List[str] = Field(default_factory=list)
    top_users: List[str] = Field(default_factory=list)
    country_breakdown_percentage: Dict[str, float] = Field(default_factory=dict)
    device_breakdown_percentage: Dict[str, float] = Field(default_factory=dict)
    gender_breakdown_percentage: Dict[str, float] = Field(default_factory=dict)
