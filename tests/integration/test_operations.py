"""Façade tests against a mocked Ads API."""

import functools
import json
from datetime import datetime
from decimal import Decimal

import httpx
import pytest
import pytest_asyncio

from twitter_ads import TwitterAdsClient
from twitter_ads.config.settings import Settings
from twitter_ads.exceptions import APIError, ConfigurationError, PartialDecodeFailure
from twitter_ads.forms import (
    CampaignForm,
    GlobalOptOutForm,
    LineItemForm,
    PromotedTweetReferenceForm,
    TargetingCriteriaForm,
)
from twitter_ads.models.enums import (
    FeatureKey,
    StatisticsGranularity,
    TailoredAudienceListType,
)
from twitter_ads.queries import (
    CampaignQuery,
    CampaignStatisticsQuery,
    EventsQuery,
    LineItemQuery,
    SponsoredTweetQuery,
)

API = "https://ads-api.twitter.com/0"


def envelope(data, **extra):
    return httpx.Response(200, text=json.dumps(dict({"data": data}, **extra)))


@pytest_asyncio.fixture
async def make_client(recording_handler):
    """Build clients wired to a recording mock transport."""
    clients = []

    def factory(*responses, config=None):
        handler = recording_handler(*responses)
        client = TwitterAdsClient(
            config=config or Settings(), transport=httpx.MockTransport(handler)
        )
        clients.append(client)
        return client, handler

    yield factory
    for client in clients:
        await client.aclose()


@pytest.mark.unit
def test_missing_token(monkeypatch):
    monkeypatch.delenv("TWITTER_ADS_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("TWITTER_BEARER_TOKEN", raising=False)
    with pytest.raises(ConfigurationError) as exc_info:
        TwitterAdsClient(config=Settings())
    assert exc_info.value.setting == "access_token"


@pytest.mark.integration
@pytest.mark.asyncio
class TestAccounts:
    async def test_get_accounts(self, make_client):
        client, handler = make_client(
            envelope([{"id": "hkk5", "name": "Ads", "approval_status": "ACCEPTED"}], next_cursor=None)
        )
        page = await client.accounts.get_accounts()
        assert page.items[0].id == "hkk5"
        assert str(handler.last.url) == f"{API}/accounts"
        assert handler.last.method == "GET"

    async def test_get_account_features(self, make_client):
        client, handler = make_client(envelope(["AGE_TARGETING", "tv_targeting"]))
        features = await client.accounts.get_account_features("hkk5")
        assert features == [FeatureKey.AGE_TARGETING, FeatureKey.TV_TARGETING]
        assert str(handler.last.url) == f"{API}/accounts/hkk5/features"

    async def test_authenticated_user_access(self, make_client):
        client, handler = make_client(envelope({"user_id": "1", "permissions": ["ANALYST"]}))
        access = await client.accounts.get_authenticated_user_access("hkk5")
        assert access.user_id == "1"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/authenticated_user_access"


@pytest.mark.integration
@pytest.mark.asyncio
class TestCampaigns:
    async def test_get_campaign_includes_deleted(self, make_client, sample_campaign):
        client, handler = make_client(envelope(sample_campaign))
        campaign = await client.campaigns.get_campaign("hkk5", "8wku2")
        assert campaign.id == "8wku2"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/campaigns/8wku2?with_deleted=true"

    async def test_get_campaigns_with_query(self, make_client, sample_campaign):
        client, handler = make_client(envelope([sample_campaign], next_cursor="c-2", total_count=2))
        page = await client.campaigns.get_campaigns("hkk5", CampaignQuery(count=1))
        assert page.next_cursor == "c-2"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/campaigns?count=1"

    async def test_create_campaign(self, make_client, sample_campaign):
        client, handler = make_client(envelope(sample_campaign))
        form = CampaignForm(name="Spring launch", funding_instrument_id="hw6ie", paused=True)
        form.with_budget(total=Decimal("1000"))
        campaign = await client.campaigns.create_campaign("hkk5", form)

        assert campaign.total_budget_amount == Decimal("1000")
        assert handler.last.method == "POST"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/campaigns"
        assert handler.last.headers["content-type"] == "application/x-www-form-urlencoded"
        assert handler.last.content == (
            b"name=Spring+launch&funding_instrument_id=hw6ie"
            b"&total_budget_amount_local_micro=1000000000&paused=true"
        )

    async def test_update_campaign_sends_only_changes(self, make_client, sample_campaign):
        client, handler = make_client(envelope(sample_campaign))
        await client.campaigns.update_campaign("hkk5", "8wku2", CampaignForm(paused=False))
        assert handler.last.method == "PUT"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/campaigns/8wku2"
        assert handler.last.content == b"paused=false"

    async def test_delete_campaign(self, make_client, sample_campaign):
        client, handler = make_client(envelope(dict(sample_campaign, deleted=True)))
        campaign = await client.campaigns.delete_campaign("hkk5", "8wku2")
        assert campaign.deleted is True
        assert handler.last.method == "DELETE"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/campaigns/8wku2"

    async def test_funding_instrument(self, make_client):
        client, handler = make_client(envelope({"id": "hw6ie", "type": "CREDIT_LINE"}))
        await client.campaigns.get_funding_instrument("hkk5", "hw6ie")
        assert str(handler.last.url) == f"{API}/accounts/hkk5/funding_instruments/hw6ie"

    async def test_not_found(self, make_client):
        client, _ = make_client(
            httpx.Response(
                404,
                json={"errors": [{"code": "NOT_FOUND", "message": "Campaign not found"}]},
            )
        )
        with pytest.raises(APIError) as exc_info:
            await client.campaigns.get_campaign("hkk5", "nope")
        assert exc_info.value.status_code == 404
        assert exc_info.value.errors[0]["code"] == "NOT_FOUND"

    async def test_bad_element_rejects_page(self, make_client, sample_campaign):
        client, _ = make_client(envelope([sample_campaign, dict(sample_campaign, start_time="soon")]))
        with pytest.raises(PartialDecodeFailure) as exc_info:
            await client.campaigns.get_campaigns("hkk5")
        assert exc_info.value.index == 1


@pytest.mark.integration
@pytest.mark.asyncio
class TestPagination:
    async def test_collect_all_follows_cursor(self, make_client, sample_campaign):
        client, handler = make_client(
            envelope([sample_campaign], next_cursor="c-2"),
            envelope([dict(sample_campaign, id="8wku3")], next_cursor=None),
        )
        query = CampaignQuery(count=1)
        campaigns = await client.collect_all(
            functools.partial(client.campaigns.get_campaigns, "hkk5"), query
        )

        assert [campaign.id for campaign in campaigns] == ["8wku2", "8wku3"]
        assert [str(request.url) for request in handler.requests] == [
            f"{API}/accounts/hkk5/campaigns?count=1",
            f"{API}/accounts/hkk5/campaigns?cursor=c-2&count=1",
        ]
        assert not query.is_set("cursor")

    async def test_iter_pages_applies_configured_page_size(self, make_client, sample_campaign):
        client, handler = make_client(
            envelope([sample_campaign], next_cursor=None), config=Settings(page_size=50)
        )
        pages = [
            page
            async for page in client.iter_pages(
                functools.partial(client.campaigns.get_campaigns, "hkk5"), CampaignQuery()
            )
        ]
        assert len(pages) == 1
        assert str(handler.last.url) == f"{API}/accounts/hkk5/campaigns?count=50"


@pytest.mark.integration
@pytest.mark.asyncio
class TestLineItems:
    async def test_get_line_item_includes_deleted(self, make_client):
        client, handler = make_client(envelope({"id": "69ob", "campaign_id": "8wku2"}))
        await client.line_items.get_line_item("hkk5", "69ob")
        assert str(handler.last.url) == f"{API}/accounts/hkk5/line_items/69ob?with_deleted=true"

    async def test_get_line_items_does_not_add_with_deleted(self, make_client):
        client, handler = make_client(envelope([]))
        await client.line_items.get_line_items("hkk5", LineItemQuery(campaign_ids=["8wku2"]))
        assert str(handler.last.url) == f"{API}/accounts/hkk5/line_items?campaign_ids=8wku2"

    async def test_create_line_item_with_bid(self, make_client):
        client, handler = make_client(envelope({"id": "69ob", "bid_amount_local_micro": 1500000}))
        form = LineItemForm(campaign_id="8wku2", bid_amount=Decimal("1.5"))
        line_item = await client.line_items.create_line_item("hkk5", form)
        assert line_item.bid_amount == Decimal("1.5")
        assert handler.last.content == (
            b"campaign_id=8wku2&automatically_select_bid=false&bid_amount_local_micro=1500000"
        )

    async def test_placements(self, make_client):
        client, handler = make_client(
            envelope([{"product_type": "PROMOTED_ACCOUNT", "placements": [["TWITTER_TIMELINE"]]}])
        )
        page = await client.line_items.get_placements()
        assert len(page.items[0].placements) == 1
        assert str(handler.last.url) == f"{API}/line_items/placements"


@pytest.mark.integration
@pytest.mark.asyncio
class TestTargeting:
    async def test_set_targeting_criteria(self, make_client):
        client, handler = make_client(
            envelope(
                [
                    {"id": "dpl3a6", "line_item_id": "69ob", "targeting_type": "LOCATION"},
                    {"id": "dpl3a7", "line_item_id": "69ob", "targeting_type": "GENDER"},
                ]
            )
        )
        form = TargetingCriteriaForm(line_item_id="69ob", locations=["00a8b25e420adc94"])
        criteria = await client.targeting.set_targeting_criteria("hkk5", form)

        assert [criterion.id for criterion in criteria] == ["dpl3a6", "dpl3a7"]
        assert handler.last.method == "PUT"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/targeting_criteria"
        assert handler.last.content == b"line_item_id=69ob&locations=00a8b25e420adc94"

    async def test_discovery_endpoint(self, make_client):
        client, handler = make_client(envelope([{"id": "1", "name": "Super Bowl"}]))
        events = await client.targeting.get_events(EventsQuery(country_codes=["US"]))
        assert events.items[0].name == "Super Bowl"
        assert str(handler.last.url) == f"{API}/targeting_criteria/events?country_codes=US"

    async def test_tv_markets(self, make_client):
        client, handler = make_client(envelope([{"name": "USA", "locale": "en-US"}]))
        page = await client.targeting.get_tv_markets()
        assert page.items[0].locale == "en-US"
        assert str(handler.last.url) == f"{API}/targeting_criteria/tv_markets"


@pytest.mark.integration
@pytest.mark.asyncio
class TestTailoredAudiencesAndPromotions:
    async def test_get_tailored_audience_includes_deleted(self, make_client):
        client, handler = make_client(envelope({"id": "abc", "list_type": "EMAIL"}))
        audience = await client.tailored_audiences.get_tailored_audience("hkk5", "abc")
        assert audience.list_type is TailoredAudienceListType.EMAIL
        assert str(handler.last.url) == f"{API}/accounts/hkk5/tailored_audiences/abc?with_deleted=true"

    async def test_global_opt_out(self, make_client):
        client, handler = make_client(envelope({"input_file_path": "/ta/opt_out.txt", "list_type": "EMAIL"}))
        form = GlobalOptOutForm(input_file_path="/ta/opt_out.txt", list_type=TailoredAudienceListType.EMAIL)
        await client.tailored_audiences.update_global_opt_out("hkk5", form)
        assert handler.last.method == "PUT"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/tailored_audiences/global_opt_out"
        assert handler.last.content == b"input_file_path=%2Fta%2Fopt_out.txt&list_type=EMAIL"

    async def test_scoped_timeline(self, make_client):
        client, handler = make_client(envelope([{"id_str": "596773612934668288", "text": "hi"}]))
        page = await client.promotions.get_scoped_timeline("hkk5", SponsoredTweetQuery(trim_user=True))
        assert page.items[0].id == "596773612934668288"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/scoped_timeline?scoped_to=none&trim_user=true"

    async def test_create_promoted_tweet_reference(self, make_client):
        client, handler = make_client(envelope([{"id": "1efwlo", "line_item_id": "69ob", "tweet_id": "5967"}]))
        form = PromotedTweetReferenceForm(line_item_id="69ob", tweet_ids=[5967])
        references = await client.promotions.create_promoted_tweet_reference("hkk5", form)
        assert references[0].tweet_id == "5967"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/promoted_tweets"

    async def test_delete_promoted_user_reference(self, make_client):
        client, handler = make_client(envelope({"id": "19pl2", "deleted": True}))
        await client.promotions.delete_promoted_user_reference("hkk5", "19pl2")
        assert handler.last.method == "DELETE"
        assert str(handler.last.url) == f"{API}/accounts/hkk5/promoted_accounts/19pl2"


@pytest.mark.integration
@pytest.mark.asyncio
class TestStatistics:
    async def test_campaign_stats(self, make_client):
        client, handler = make_client(
            envelope(
                [
                    {
                        "id": "8wku2",
                        "granularity": "TOTAL",
                        "start_time": "2015-05-01T07:00:00Z",
                        "end_time": "2015-05-02T07:00:00Z",
                        "billed_engagements": [12],
                    }
                ]
            )
        )
        query = CampaignStatisticsQuery(granularity=StatisticsGranularity.TOTAL)
        query.with_metrics("billed_engagements")
        snapshots = await client.statistics.get_campaign_stats("hkk5", "8wku2", query)

        assert snapshots[0]["billed_engagements"].values == (12,)
        assert snapshots[0].start_time == datetime(2015, 5, 1, 7, 0)
        assert str(handler.last.url) == (
            f"{API}/stats/accounts/hkk5/campaigns/8wku2?granularity=TOTAL&metrics=billed_engagements"
        )

    async def test_account_stats_without_query(self, make_client):
        client, handler = make_client(envelope({"id": "hkk5", "billed_follows": None}))
        snapshots = await client.statistics.get_account_stats("hkk5")
        assert snapshots[0]["billed_follows"].values == ()
        assert str(handler.last.url) == f"{API}/stats/accounts/hkk5"
