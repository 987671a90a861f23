import os

import pytest

from helpers import BASE_URL, FakeTransport, load_json
from wikibase_rest.client import Client
from wikibase_rest.config import configure_logging as setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    setup_logging(os.getenv("TEST_LOG_LEVEL", "INFO"))


@pytest.fixture
def q123_json():
    return load_json("entities/Q123.json")


@pytest.fixture
def q42_legacy_json():
    return load_json("entities/Q42_legacy.json")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def make_client(transport: FakeTransport):
    """Build a client wired to the fake transport"""

    def _make_client(
        user_agent: str = "Bot name",
        wikibase_url: str = BASE_URL,
        bot: bool = False,
        allow_ip_edits: bool = True,
    ) -> Client:
        return Client(
            user_agent=user_agent,
            wikibase_url=wikibase_url,
            bot=bot,
            allow_ip_edits=allow_ip_edits,
            transport=transport,
        )

    return _make_client
