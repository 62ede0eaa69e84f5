import sys
from pathlib import Path
from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from tenacity import wait_none

# Ensure local source package (src/discogskit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from discogskit import AuthContext, Config  # noqa: E402
from discogskit._services import BaseService  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "DISCOGS_TOKEN",
        "DISCOGS_CONSUMER_KEY",
        "DISCOGS_CONSUMER_SECRET",
        "DISCOGS_OAUTH_TOKEN",
        "DISCOGS_OAUTH_TOKEN_SECRET",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    """Retry connection failures immediately."""
    monkeypatch.setattr(BaseService, "RETRY_WAIT", wait_none())


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def config() -> Config:
    return Config(app_name="DiscogsKitTests", app_version="1.0.0")


@pytest.fixture
def base_url(config: Config) -> str:
    return config.api_base_url


@pytest.fixture
def user_agent(config: Config) -> str:
    return config.user_agent


@pytest.fixture
def personal_token() -> str:
    return "abc"


@pytest.fixture
def consumer_key() -> str:
    return "consumer-key"


@pytest.fixture
def consumer_secret() -> str:
    return "S"


@pytest.fixture
def token_auth(personal_token: str) -> AuthContext:
    return AuthContext(personal_token=personal_token)


@pytest.fixture
def consumer_auth(consumer_key: str, consumer_secret: str) -> AuthContext:
    return AuthContext(consumer_key=consumer_key, consumer_secret=consumer_secret)

