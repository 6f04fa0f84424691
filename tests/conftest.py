import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as exercising a façade end to end"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the environment variables the Settings class reads.

    Values are explicit so a developer's own ``.env`` or shell never leaks
    into a test run.
    """
    monkeypatch.setenv("TWITTER_ADS_ACCESS_TOKEN", "test-token")
    monkeypatch.setenv("TWITTER_ADS_API_BASE_URL", "https://ads-api.twitter.com")
    monkeypatch.setenv("TWITTER_ADS_API_VERSION", "0")
    monkeypatch.delenv("TWITTER_ADS_PAGE_SIZE", raising=False)

    # Logging
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    yield


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses.

    ``responses`` are returned in order; the last one repeats.
    """

    def __init__(self, *responses):
        self.responses = list(responses) or [httpx.Response(200, json={"data": []})]
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests) - 1, len(self.responses) - 1)
        return self.responses[index]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recording_handler():
    return RecordingHandler


@pytest.fixture
def sample_campaign():
    """Campaign object as the API returns it."""
    return {
        "id": "8wku2",
        "account_id": "hkk5",
        "name": "Spring launch",
        "currency": "USD",
        "funding_instrument_id": "hw6ie",
        "total_budget_amount_local_micro": 1000000000,
        "daily_budget_amount_local_micro": 50000000,
        "start_time": "2015-05-01T07:00:00Z",
        "end_time": None,
        "reasons_not_servable": ["PAUSED_BY_ADVERTISER"],
        "standard_delivery": True,
        "paused": True,
        "deleted": False,
        "created_at": "2015-04-28T18:31:30Z",
        "updated_at": "2015-04-29T09:00:00Z",
    }
