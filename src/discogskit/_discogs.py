from functools import cached_property
from os import environ as env
from typing import Any, Optional, Type, TypeVar, Union

from dotenv import load_dotenv
from httpx import AsyncClient, Response

from ._auth_context import AuthContext, OAuthState
from ._config import Config
from ._services import ApiClient, OAuthService
from ._utils import Endpoint, HttpMethod, setup_logging
from ._utils.constants import (
    DEFAULT_ABOUT_URL,
    DEFAULT_DOMAIN,
    ENV_CONSUMER_KEY,
    ENV_CONSUMER_SECRET,
    ENV_DISCOGS_TOKEN,
    ENV_OAUTH_TOKEN,
    ENV_OAUTH_TOKEN_SECRET,
)

T = TypeVar("T")

load_dotenv()


class Discogs:
    """An application's access to the Discogs API.

    Discogs requires every application to identify itself, so the client is
    created with the application's name, version and a URL describing it.
    Credentials are either a personal access token or a consumer key and
    secret pair; the latter can be upgraded to user-level access through the
    OAuth flow exposed by :attr:`oauth`.
    """

    def __init__(
        self,
        name: str,
        version: str,
        about_url: str = DEFAULT_ABOUT_URL,
        *,
        consumer_key: Optional[str] = None,
        consumer_secret: Optional[str] = None,
        personal_token: Optional[str] = None,
        oauth_token: Optional[str] = None,
        oauth_token_secret: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
        timeout: Optional[float] = None,
        debug: bool = False,
    ) -> None:
        """
        Initialize the client.

        Credentials default to the environment only when none is passed.

        Args:
            name (str): Name of the application, sent in the User-Agent.
            version (str): Version of the application, sent in the User-Agent.
            about_url (str): URL describing the application, sent in the User-Agent.
            consumer_key (Optional[str]): Consumer key of the registered application.
                Defaults to the `DISCOGS_CONSUMER_KEY` environment variable.
            consumer_secret (Optional[str]): Consumer secret of the registered application.
                Defaults to the `DISCOGS_CONSUMER_SECRET` environment variable.
            personal_token (Optional[str]): Personal access token.
                Defaults to the `DISCOGS_TOKEN` environment variable.
            oauth_token (Optional[str]): Access token from a previous OAuth flow.
                Defaults to the `DISCOGS_OAUTH_TOKEN` environment variable.
            oauth_token_secret (Optional[str]): Access token secret from a previous OAuth flow.
                Defaults to the `DISCOGS_OAUTH_TOKEN_SECRET` environment variable.
            domain (str): Provider domain. Defaults to `discogs.com`.
            timeout (Optional[float]): Request timeout in seconds. Defaults to httpx's.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        self._config = Config(
            app_name=name,
            app_version=version,
            about_url=about_url,
            domain=domain,
            timeout=timeout,
        )
        # Explicit credentials replace the environment as a whole.
        if any(
            (consumer_key, consumer_secret, personal_token, oauth_token, oauth_token_secret)
        ):
            self._auth = AuthContext(
                consumer_key=consumer_key,
                consumer_secret=consumer_secret,
                personal_token=personal_token,
                oauth_token=oauth_token,
                oauth_token_secret=oauth_token_secret,
            )
        else:
            self._auth = AuthContext(
                consumer_key=env.get(ENV_CONSUMER_KEY),
                consumer_secret=env.get(ENV_CONSUMER_SECRET),
                personal_token=env.get(ENV_DISCOGS_TOKEN),
                oauth_token=env.get(ENV_OAUTH_TOKEN),
                oauth_token_secret=env.get(ENV_OAUTH_TOKEN_SECRET),
            )

        setup_logging(debug)

        client_kwargs: dict[str, Any] = {"follow_redirects": True}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = AsyncClient(**client_kwargs)

    async def __aenter__(self) -> "Discogs":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def auth(self) -> AuthContext:
        return self._auth

    @property
    def state(self) -> OAuthState:
        return self._auth.state

    @cached_property
    def api_client(self) -> ApiClient:
        """
        Dispatches calls described by an endpoint from `discogskit.endpoints`.
        """
        return ApiClient(self._config, self._auth, self._client)

    @cached_property
    def oauth(self) -> OAuthService:
        """
        The three-legged OAuth flow: request token, user authorization and
        access token.
        """
        return OAuthService(self._config, self._auth, self._client)

    async def get(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self.api_client.get(endpoint, response_type)  # type: ignore[arg-type]

    async def post(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self.api_client.post(endpoint, response_type)  # type: ignore[arg-type]

    async def put(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self.api_client.put(endpoint, response_type)  # type: ignore[arg-type]

    async def delete(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self.api_client.delete(endpoint, response_type)  # type: ignore[arg-type]

    async def send(
        self,
        endpoint: Endpoint,
        method: Union[HttpMethod, str] = HttpMethod.GET,
    ) -> tuple[bytes, Response]:
        return await self.api_client.send(endpoint, method)
