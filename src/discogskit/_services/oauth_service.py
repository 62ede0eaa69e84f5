from typing import Optional

import httpx
from pydantic import ValidationError

from .._auth_context import OAuthState
from .._utils import Endpoint, HttpMethod
from .._utils._request_builder import OAuthParams
from ..endpoints import Oauths
from ..models.errors import (
    BadMethodError,
    BadResponseError,
    BadURLError,
    MissingStepError,
)
from ..models.oauth import Identity, OAuthToken
from ._base_service import BaseService


class OAuthService(BaseService):
    """Three-legged OAuth 1.0a flow against Discogs.

    The flow moves the client's auth context through
    ``UNAUTHENTICATED -> REQUEST_TOKEN_ISSUED -> USER_AUTHORIZED -> AUTHENTICATED``:

    1. :meth:`request_token` obtains a temporary token pair;
    2. :meth:`authorize` returns the page the user must visit, and
       :meth:`handle_callback` reads the verifier from the redirect;
    3. :meth:`access_token` exchanges the verified token for an access token pair.

    Every request is signed with the PLAINTEXT method. Running two flows
    concurrently on the same client is not supported.

    Examples:
        ```python
        async with Discogs("MyApp", "1.0", consumer_key=key, consumer_secret=secret) as discogs:
            url = await discogs.oauth.authorize("myapp://callback")
            # ... open url in a browser, capture the redirect ...
            await discogs.oauth.handle_callback(redirect_url)
            await discogs.oauth.access_token()
            identity = await discogs.oauth.identity()
        ```
    """

    @property
    def state(self) -> OAuthState:
        return self._auth.state

    async def request_token(self, callback_url: str) -> str:
        """Request a temporary token pair and store its secret.

        Args:
            callback_url: Where Discogs redirects the user once the
                application is authorized.

        Returns:
            str: The raw ``application/x-www-form-urlencoded`` response.

        Raises:
            BadAuthError: If the consumer key or secret is missing.
            BadResponseError: If the call fails or the response holds no token pair.
        """
        endpoint = Oauths.request_token()
        response = await self._send_step(
            endpoint, HttpMethod.POST, OAuthParams(callback=callback_url)
        )

        raw = response.text
        token = OAuthToken.parse(raw)
        await self._auth.set_request_token(
            token.oauth_token, token.oauth_token_secret, raw
        )
        self._logger.debug("OAuth request token issued")
        return raw

    def authorize_url(self) -> httpx.URL:
        """URL of the authorization page for the issued request token.

        Raises:
            MissingStepError: If no request token was issued.
            BadResponseError: If the stored request-token response has no ``oauth_token``.
            BadURLError: If the authorization URL cannot be formed.
        """
        if self.state < OAuthState.REQUEST_TOKEN_ISSUED:
            raise MissingStepError(OAuthState.REQUEST_TOKEN_ISSUED)

        token = OAuthToken.parse(self._auth.request_token_response or "").oauth_token

        authorize = Oauths.authorize(token)
        url = authorize.url_for(self._config.domain)
        if url is None:
            raise BadURLError(authorize.base_url(self._config.domain) + authorize.path)
        return url

    async def authorize(self, callback_url: Optional[str] = None) -> httpx.URL:
        """Return the URL to hand the user to, requesting a token first if needed.

        Raises:
            MissingStepError: If no request token was issued and no ``callback_url`` is given.
        """
        if self.state < OAuthState.REQUEST_TOKEN_ISSUED:
            if callback_url is None:
                raise MissingStepError(OAuthState.REQUEST_TOKEN_ISSUED)
            await self.request_token(callback_url)

        return self.authorize_url()

    async def handle_callback(self, redirect_url: str) -> str:
        """Read the verifier from the URL Discogs redirected the user to.

        Returns:
            str: The ``oauth_verifier`` value.

        Raises:
            MissingStepError: If no request token was issued.
            BadResponseError: If the redirect carries no verifier or another token.
        """
        if self.state < OAuthState.REQUEST_TOKEN_ISSUED:
            raise MissingStepError(OAuthState.REQUEST_TOKEN_ISSUED)

        params = httpx.URL(redirect_url).params
        verifier = params.get("oauth_verifier")
        token = params.get("oauth_token")

        if not verifier:
            raise BadResponseError(
                f"The authorization callback carries no oauth_verifier: {redirect_url}"
            )
        if token and token != self._auth.request_token:
            raise BadResponseError(
                "The authorization callback belongs to another request token."
            )

        await self._auth.set_verifier(verifier)
        return verifier

    async def access_token(
        self,
        oauth_token: Optional[str] = None,
        verifier: Optional[str] = None,
    ) -> bytes:
        """Exchange the authorized request token for an access token pair.

        The pair is stored in the auth context, after which every call of the
        client is signed with it.

        Args:
            oauth_token: The request token. Defaults to the one issued by :meth:`request_token`.
            verifier: The verifier. Defaults to the one read by :meth:`handle_callback`.

        Returns:
            bytes: The raw response, ``oauth_token=...&oauth_token_secret=...``.

        Raises:
            MissingStepError: If no request token secret is stored, or no verifier is known.
            BadResponseError: If the call fails or the response holds no token pair.
        """
        if not self._auth.request_token_secret:
            raise MissingStepError(OAuthState.REQUEST_TOKEN_ISSUED)

        verifier = verifier or self._auth.verifier
        if not verifier:
            raise MissingStepError(OAuthState.USER_AUTHORIZED)

        params = OAuthParams(
            token=oauth_token or self._auth.request_token,
            verifier=verifier,
            token_secret=self._auth.request_token_secret,
        )
        response = await self._send_step(Oauths.access_token(), HttpMethod.POST, params)

        token = OAuthToken.parse(response.text)
        await self._auth.set_access_token(token.oauth_token, token.oauth_token_secret)
        self._logger.debug("OAuth access token obtained")
        return response.content

    async def identity(self) -> Identity:
        """Who the current credentials authenticate as."""
        endpoint = Oauths.identity()
        request = self._builder.build(endpoint.path, HttpMethod.GET, self._auth)
        response = await self.send_request(request)
        try:
            return Identity.model_validate_json(response.content)
        except ValidationError as e:
            raise BadResponseError(
                "Unexpected identity response", response.status_code, response.text
            ) from e

    async def reset(self) -> None:
        """Drop every OAuth token and restart at ``UNAUTHENTICATED``."""
        await self._auth.reset()

    async def _send_step(
        self, endpoint: Endpoint, method: HttpMethod, params: OAuthParams
    ) -> httpx.Response:
        if not endpoint.supports(method):
            raise BadMethodError(method.value, endpoint.path)

        request = self._builder.build(
            endpoint.path,
            method,
            self._auth,
            endpoint.queries,
            oauth=params,
            base_url=endpoint.base_url(self._config.domain),
        )
        return await self.send_request(request)
