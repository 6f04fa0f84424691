"""Form declarations for the Ads API mutation endpoints.

A form only carries the attributes the caller assigned, so the same class
serves creation and partial updates::

    form = CampaignForm(name="Spring launch", paused=False)
    form.with_budget(total="1000.00", daily="50.00")
    build_form_body(form)
    # 'name=Spring+launch&total_budget_amount_local_micro=1000000000&'
    # 'daily_budget_amount_local_micro=50000000&paused=false'

Money is given in currency units (``Decimal``, ``int`` or numeric ``str``)
and sent as micro-units under the ``*_local_micro`` keys.
"""

from typing import Any, Dict, Optional, Union

from .encoding.codec import ValueKind
from .encoding.fields import ActiveWindowMixin, Param, ParameterSet
from .exceptions import ConflictingParameters
from .models.enums import (
    AdvertisingObjective,
    AdvertisingPlacement,
    AdvertisingProductType,
    AdvertisingSentiment,
    BidUnit,
    LineItemOptimization,
    ReasonNotServable,
    RetargetingEngagementType,
    TailoredAudienceChangeOperation,
    TailoredAudienceListType,
    TailoredAudienceType,
    TargetingCriterionAgeBucket,
    TargetingCriterionGender,
    TargetingCriterionType,
)


# Campaigns


class CampaignForm(ActiveWindowMixin, ParameterSet):
    name = Param()
    currency = Param()
    funding_instrument_id = Param()
    total_budget = Param("total_budget_amount_local_micro", kind=ValueKind.MONEY)
    daily_budget = Param("daily_budget_amount_local_micro", kind=ValueKind.MONEY)
    active_window = Param(kind=ValueKind.TIMESTAMP_RANGE)
    reasons_not_servable = Param(kind=ValueKind.ENUM_LIST, enum_type=ReasonNotServable)
    standard_delivery = Param(kind=ValueKind.BOOLEAN)
    paused = Param(kind=ValueKind.BOOLEAN)
    deleted = Param(kind=ValueKind.BOOLEAN)

    def with_budget(self, total: Any = None, daily: Any = None):
        """Set the total and daily budget; ``None`` unsets that budget."""
        self.total_budget = total
        self.daily_budget = daily
        return self


# Line items


class LineItemForm(ParameterSet):
    """Line item attributes.

    Bidding is either manual or automatic. A form holding ``bid_amount``
    is always sent with ``automatically_select_bid=false``. Holding
    ``bid_amount`` together with ``automatically_select_bid=True`` is
    rejected when the form is encoded, whichever was assigned first.
    """

    campaign_id = Param()
    name = Param()
    objective = Param(kind=ValueKind.ENUM, enum_type=AdvertisingObjective)
    include_sentiment = Param(kind=ValueKind.ENUM, enum_type=AdvertisingSentiment)
    optimization = Param(kind=ValueKind.ENUM, enum_type=LineItemOptimization)
    bid_unit = Param(kind=ValueKind.ENUM, enum_type=BidUnit)
    product_type = Param(kind=ValueKind.ENUM, enum_type=AdvertisingProductType)
    placements = Param(kind=ValueKind.ENUM_LIST, enum_type=AdvertisingPlacement)
    automatically_select_bid = Param(kind=ValueKind.BOOLEAN)
    paused = Param(kind=ValueKind.BOOLEAN)
    deleted = Param(kind=ValueKind.BOOLEAN)
    total_budget = Param("total_budget_amount_local_micro", kind=ValueKind.MONEY)
    bid_amount = Param("bid_amount_local_micro", kind=ValueKind.MONEY)

    def _wire_values(self) -> Dict[str, Any]:
        if "bid_amount" not in self._values:
            return self._values
        if self._values.get("automatically_select_bid") is True:
            raise ConflictingParameters(
                ("automatically_select_bid", "bid_amount"),
                "a bid amount cannot be sent with automatic bidding",
            )
        return dict(self._values, automatically_select_bid=False)

    def with_automatic_bid(self):
        """Switch to automatic bidding, dropping any bid amount."""
        self.bid_amount = None
        self.automatically_select_bid = True
        return self

    def with_bid(self, amount: Any):
        """Bid a fixed amount, turning automatic bidding off."""
        self.automatically_select_bid = False
        self.bid_amount = amount
        return self


# Targeting


class TargetingCriterionForm(ParameterSet):
    line_item_id = Param()
    name = Param()
    targeting_type = Param(kind=ValueKind.ENUM, enum_type=TargetingCriterionType)
    targeting_value = Param()
    deleted = Param(kind=ValueKind.BOOLEAN)
    tailored_audience_expansion = Param(kind=ValueKind.BOOLEAN)
    tailored_audience_type = Param(kind=ValueKind.ENUM, enum_type=TailoredAudienceType)

    def targeting(
        self, targeting_type: Union[str, TargetingCriterionType], targeting_value: str
    ):
        """Set the criterion type and value together.

        :param targeting_type: Criterion type, as member or wire token
        :type targeting_type: Union[str, TargetingCriterionType]
        :param targeting_value: Value the criterion matches
        :type targeting_value: str
        :raises ValueError: If a string type names no criterion type
        """
        self.targeting_type = TargetingCriterionType(targeting_type)
        self.targeting_value = targeting_value
        return self


class TargetingCriteriaForm(ParameterSet):
    """Full targeting of one line item, replaced in a single request.

    List parameters set to ``[]`` are sent with an empty value, which
    clears that criterion group on the line item.
    """

    line_item_id = Param()
    broad_keywords = Param(kind=ValueKind.STRING_LIST)
    exact_keywords = Param(kind=ValueKind.STRING_LIST)
    unordered_keywords = Param(kind=ValueKind.STRING_LIST)
    phrase_keywords = Param(kind=ValueKind.STRING_LIST)
    negative_exact_keywords = Param(kind=ValueKind.STRING_LIST)
    negative_unordered_keywords = Param(kind=ValueKind.STRING_LIST)
    negative_phrase_keywords = Param(kind=ValueKind.STRING_LIST)
    locations = Param(kind=ValueKind.STRING_LIST)
    interests = Param(kind=ValueKind.STRING_LIST)
    gender = Param(kind=ValueKind.ENUM, enum_type=TargetingCriterionGender)
    age_buckets = Param(kind=ValueKind.ENUM_LIST, enum_type=TargetingCriterionAgeBucket)
    followers_of_users = Param(kind=ValueKind.INTEGER_LIST)
    similar_to_followers_of_users = Param(kind=ValueKind.INTEGER_LIST)
    platforms = Param(kind=ValueKind.STRING_LIST)
    platform_versions = Param(kind=ValueKind.STRING_LIST)
    devices = Param(kind=ValueKind.STRING_LIST)
    wifi_only = Param(kind=ValueKind.BINARY_FLAG)
    tv_channels = Param(kind=ValueKind.STRING_LIST)
    tv_genres = Param(kind=ValueKind.STRING_LIST)
    tv_shows = Param(kind=ValueKind.STRING_LIST)
    tailored_audiences = Param(kind=ValueKind.STRING_LIST)
    tailored_audiences_expanded = Param(kind=ValueKind.STRING_LIST)
    tailored_audiences_excluded = Param(kind=ValueKind.STRING_LIST)
    behaviors = Param(kind=ValueKind.STRING_LIST)
    behaviors_expanded = Param(kind=ValueKind.STRING_LIST)
    negative_behaviors = Param(kind=ValueKind.STRING_LIST)
    languages = Param(kind=ValueKind.STRING_LIST)
    event = Param()
    network_operators = Param(kind=ValueKind.STRING_LIST)
    network_activation_duration_lt = Param(kind=ValueKind.INTEGER)
    network_activation_duration_gte = Param(kind=ValueKind.INTEGER)
    app_store_categories = Param(kind=ValueKind.STRING_LIST)
    app_store_categories_lookalike = Param(kind=ValueKind.STRING_LIST)
    campaign_engagement = Param()
    user_engagement = Param(kind=ValueKind.INTEGER)
    engagement_type = Param(kind=ValueKind.ENUM, enum_type=RetargetingEngagementType)

    def retarget(
        self,
        engagement_type: RetargetingEngagementType,
        campaign_id: Optional[str] = None,
        promoted_user_reference_id: Optional[int] = None,
    ):
        """Retarget users who engaged with a campaign or a promoted account."""
        self.engagement_type = engagement_type
        self.campaign_engagement = campaign_id
        self.user_engagement = promoted_user_reference_id
        return self


# Tailored audiences


class TailoredAudienceForm(ParameterSet):
    name = Param()
    list_type = Param(kind=ValueKind.ENUM, enum_type=TailoredAudienceListType)


class TailoredAudienceChangeForm(ParameterSet):
    tailored_audience_id = Param()
    input_file_path = Param()
    operation = Param(kind=ValueKind.ENUM, enum_type=TailoredAudienceChangeOperation)


class GlobalOptOutForm(ParameterSet):
    input_file_path = Param()
    list_type = Param(kind=ValueKind.ENUM, enum_type=TailoredAudienceListType)


# Promoted content


class PromotedTweetReferenceForm(ParameterSet):
    line_item_id = Param()
    tweet_ids = Param(kind=ValueKind.INTEGER_LIST)


class PromotedUserReferenceForm(ParameterSet):
    line_item_id = Param()
    user_id = Param()


class SponsoredTweetForm(ParameterSet):
    status = Param()
    as_user_id = Param(kind=ValueKind.INTEGER)
    trim_user = Param(kind=ValueKind.BOOLEAN)
    media_ids = Param(kind=ValueKind.INTEGER_LIST)
