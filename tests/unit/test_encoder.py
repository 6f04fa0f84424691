"""Unit tests for parameter tables and the query string / form encoders."""

from datetime import datetime
from decimal import Decimal

import pytest

from twitter_ads.encoding import UNSET, build_form_body, build_query_string
from twitter_ads.encoding.encoder import encode_pairs
from twitter_ads.exceptions import ConflictingParameters, UnknownMetric, UnsupportedValueKind
from twitter_ads.forms import (
    CampaignForm,
    LineItemForm,
    PromotedTweetReferenceForm,
    TargetingCriteriaForm,
    TargetingCriterionForm,
)
from twitter_ads.models.enums import (
    PromotedUserReferenceSorting,
    SortDirection,
    StatisticsGranularity,
    StatisticsSegmentationType,
    TargetingCriterionGender,
    TargetingCriterionType,
)
from twitter_ads.queries import (
    CampaignQuery,
    CampaignStatisticsQuery,
    LineItemQuery,
    PromotedUserReferenceQuery,
)

START = datetime(2015, 5, 1, 7, 0)
END = datetime(2015, 5, 31, 7, 0)


@pytest.mark.unit
class TestParameterSet:
    def test_unset_fields_read_as_unset(self):
        form = LineItemForm()
        assert form.name is UNSET
        assert not form.is_set("name")

    def test_false_is_a_value(self):
        form = LineItemForm(paused=False)
        assert form.is_set("paused")
        assert form.paused is False
        assert build_form_body(form) == "paused=false"

    def test_none_unsets(self):
        form = LineItemForm(paused=True)
        form.paused = None
        assert not form.is_set("paused")
        assert build_form_body(form) == ""

    def test_unknown_parameter(self):
        with pytest.raises(TypeError):
            CampaignQuery(campaign_id="8wku2")

    def test_copy_leaves_original_untouched(self):
        query = CampaignQuery(count=5)
        page_two = query.copy(cursor="c-2")
        assert page_two.cursor == "c-2"
        assert query.cursor is UNSET
        assert page_two.count == 5

    def test_equality_follows_values(self):
        assert CampaignForm(name="a", paused=True) == CampaignForm(paused=True, name="a")
        assert CampaignForm(name="a") != CampaignForm(name="b")

    def test_wire_order_of_campaign_form(self):
        wire_names = [name for param in CampaignForm.fields for name in param.wire_names]
        assert wire_names == [
            "name",
            "currency",
            "funding_instrument_id",
            "total_budget_amount_local_micro",
            "daily_budget_amount_local_micro",
            "start_time",
            "end_time",
            "reasons_not_servable",
            "standard_delivery",
            "paused",
            "deleted",
        ]

    def test_inherited_parameter_position_is_per_class(self):
        names = [param.name for param in CampaignQuery.fields]
        assert names.index("with_deleted") == 2
        assert [param.name for param in LineItemQuery.fields].index("with_deleted") == 5
        assert not hasattr(CampaignQuery.with_deleted, "order")

    def test_subclass_fields_come_first(self):
        names = [param.name for param in CampaignQuery.fields]
        assert names == [
            "campaign_ids",
            "funding_instrument_ids",
            "with_deleted",
            "q",
            "cursor",
            "count",
            "sort_by",
        ]


@pytest.mark.unit
class TestQueryString:
    def test_empty_query(self):
        assert build_query_string(CampaignQuery()) == ""

    def test_campaign_query(self):
        query = CampaignQuery(campaign_ids=["8wku2", "8wku3"], with_deleted=True)
        query.sort("updated_at", SortDirection.DESC)
        assert (
            build_query_string(query)
            == "?campaign_ids=8wku2%2C8wku3&with_deleted=true&sort_by=updated_at-desc"
        )

    def test_sort_defaults_to_ascending(self):
        assert build_query_string(CampaignQuery().sort("name")) == "?sort_by=name-asc"

    def test_line_item_query_order(self):
        query = LineItemQuery(with_deleted=False, count=10, campaign_ids=["a"])
        query.active_from(datetime(2015, 5, 1))
        assert (
            build_query_string(query)
            == "?campaign_ids=a&count=10&with_deleted=false&start_time=2015-05-01T00%3A00%3A00Z"
        )

    def test_percent_encoding(self):
        assert build_query_string(CampaignQuery(q="café & bar")) == "?q=caf%C3%A9+%26+bar"

    def test_statistics_query(self):
        query = CampaignStatisticsQuery(
            campaign_ids=["8wku2"], granularity=StatisticsGranularity.DAY
        )
        query.with_metrics("billed_engagements").active_between(START, datetime(2015, 5, 2, 7))
        assert build_query_string(query) == (
            "?campaign_ids=8wku2&granularity=DAY&metrics=billed_engagements"
            "&start_time=2015-05-01T07%3A00%3A00Z&end_time=2015-05-02T07%3A00%3A00Z"
        )

    def test_statistics_metrics_key_is_plural_for_many(self):
        query = CampaignStatisticsQuery().with_metrics("billed_follows", "billed_engagements")
        assert build_query_string(query) == "?metrics=billed_follows%2Cbilled_engagements"

    def test_statistics_segmentation(self):
        query = CampaignStatisticsQuery(
            segmentation_type=StatisticsSegmentationType.PLATFORM_VERSIONS, platform="0"
        )
        assert build_query_string(query) == "?segmentation_type=PLATFORM_VERSIONS&platform=0"

    def test_unknown_metric_is_rejected(self):
        with pytest.raises(UnknownMetric):
            CampaignStatisticsQuery().with_metrics("billed_engagements", "likes")

    def test_promoted_user_reference_sort(self):
        query = PromotedUserReferenceQuery(line_item_id="69ob")
        query.sort_references(PromotedUserReferenceSorting.CREATED_AT)
        assert build_query_string(query) == "?line_item_id=69ob&sort=created_at"
        query.sort_references(PromotedUserReferenceSorting.ID, SortDirection.DESC)
        assert build_query_string(query) == "?line_item_id=69ob&sort=id-desc"


@pytest.mark.unit
class TestFormBody:
    def test_campaign_form(self):
        form = CampaignForm(
            deleted=False,
            paused=False,
            standard_delivery=True,
            reasons_not_servable=[],
            funding_instrument_id="hw6ie",
            currency="USD",
            name="Spring launch",
        )
        form.with_budget(total=Decimal("1000.00"), daily=Decimal("50.00"))
        form.active_between(START, END)
        assert build_form_body(form) == (
            "name=Spring+launch&currency=USD&funding_instrument_id=hw6ie"
            "&total_budget_amount_local_micro=1000000000"
            "&daily_budget_amount_local_micro=50000000"
            "&start_time=2015-05-01T07%3A00%3A00Z&end_time=2015-05-31T07%3A00%3A00Z"
            "&reasons_not_servable=&standard_delivery=true&paused=false&deleted=false"
        )

    def test_with_budget_none_unsets(self):
        form = CampaignForm(name="X").with_budget(total=Decimal("10"), daily=Decimal("1"))
        form.with_budget(total=Decimal("20"))
        assert build_form_body(form) == "name=X&total_budget_amount_local_micro=20000000"

    def test_campaign_creation_scenario(self):
        form = CampaignForm(
            name="X",
            currency="USD",
            funding_instrument_id="F1",
            standard_delivery=False,
            paused=True,
            deleted=False,
        )
        form.with_budget(total="10.00", daily="1.00")
        form.active_between(datetime(2015, 5, 1), datetime(2015, 5, 2))
        assert build_form_body(form) == (
            "name=X&currency=USD&funding_instrument_id=F1"
            "&total_budget_amount_local_micro=10000000"
            "&daily_budget_amount_local_micro=1000000"
            "&start_time=2015-05-01T00%3A00%3A00Z&end_time=2015-05-02T00%3A00%3A00Z"
            "&standard_delivery=false&paused=true&deleted=false"
        )

    def test_same_fields_same_body(self):
        first = CampaignForm(name="x", paused=True, total_budget="5")
        second = CampaignForm(total_budget="5", paused=True, name="x")
        assert build_form_body(first) == build_form_body(second)

    def test_partial_update_sends_only_changes(self):
        assert build_form_body(CampaignForm(paused=True)) == "paused=true"

    def test_float_budget_is_rejected(self):
        with pytest.raises(UnsupportedValueKind):
            build_form_body(CampaignForm(total_budget=10.5))

    def test_bid_amount_disables_automatic_bid(self):
        form = LineItemForm(bid_amount=Decimal("1.50"))
        assert form.automatically_select_bid is UNSET
        assert (
            build_form_body(form)
            == "automatically_select_bid=false&bid_amount_local_micro=1500000"
        )

    def test_bid_coupling_ignores_assignment_order(self):
        first = LineItemForm(campaign_id="8wku2", bid_amount=Decimal("1.50"), paused=True)
        second = LineItemForm(paused=True, bid_amount=Decimal("1.50"), campaign_id="8wku2")
        assert build_form_body(first) == build_form_body(second)

    @pytest.mark.parametrize(
        "values",
        [
            {"bid_amount": Decimal("1.50"), "automatically_select_bid": True},
            {"automatically_select_bid": True, "bid_amount": Decimal("1.50")},
        ],
    )
    def test_bid_amount_with_automatic_bid_is_rejected(self, values):
        with pytest.raises(ConflictingParameters) as exc_info:
            build_form_body(LineItemForm(**values))
        assert exc_info.value.names == ("automatically_select_bid", "bid_amount")

    def test_automatic_bid_clears_bid_amount(self):
        form = LineItemForm(bid_amount=Decimal("2"))
        form.with_automatic_bid()
        assert form.bid_amount is UNSET
        assert build_form_body(form) == "automatically_select_bid=true"

    def test_with_bid_replaces_automatic_bid(self):
        form = LineItemForm().with_automatic_bid().with_bid(Decimal("2"))
        assert build_form_body(form) == (
            "automatically_select_bid=false&bid_amount_local_micro=2000000"
        )

    def test_explicit_manual_bid(self):
        form = LineItemForm(automatically_select_bid=False, bid_amount=Decimal("2"))
        assert form.bid_amount == Decimal("2")
        assert build_form_body(form) == (
            "automatically_select_bid=false&bid_amount_local_micro=2000000"
        )

    def test_targeting_criteria_gender_both_is_omitted(self):
        form = TargetingCriteriaForm(
            line_item_id="69ob",
            gender=TargetingCriterionGender.BOTH,
            wifi_only=True,
            locations=[],
        )
        assert build_form_body(form) == "line_item_id=69ob&locations=&wifi_only=1"

    def test_targeting_criteria_gender(self):
        form = TargetingCriteriaForm(gender=TargetingCriterionGender.FEMALE, followers_of_users=[12, 13])
        assert encode_pairs(form) == [("gender", "2"), ("followers_of_users", "12,13")]

    def test_targeting_criterion_accepts_type_token(self):
        form = TargetingCriterionForm(line_item_id="69ob").targeting("LOCATION", "00a8b25e420adc94")
        assert form.targeting_type is TargetingCriterionType.LOCATION
        assert build_form_body(form) == (
            "line_item_id=69ob&targeting_type=LOCATION&targeting_value=00a8b25e420adc94"
        )

    def test_promoted_tweet_ids(self):
        form = PromotedTweetReferenceForm(line_item_id="69ob", tweet_ids=[596773612934668288])
        assert build_form_body(form) == "line_item_id=69ob&tweet_ids=596773612934668288"
