import pytest

from boxoffice.config import KobisConfig
from boxoffice.kobis import KobisClient
from boxoffice.state import RankingStore
from payloads import make_entry, make_payload


@pytest.fixture
def kobis_config():
    return KobisConfig(
        api_key="test-api-key",
        base_url="http://kobis.test/rest",
        request_timeout=5,
    )


@pytest.fixture
def client(kobis_config):
    return KobisClient(kobis_config)


@pytest.fixture
def store():
    return RankingStore("20240314")


@pytest.fixture
def daily_payload():
    return make_payload([
        make_entry(1, "파묘", "12345", "2024-02-22"),
        make_entry(2, "듄: 파트2", "8021", "2024-02-28"),
        make_entry(3, "웡카", "950", "2024-01-31"),
    ])
