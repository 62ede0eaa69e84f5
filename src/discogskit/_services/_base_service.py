from logging import getLogger
from typing import Optional

from httpx import (
    AsyncClient,
    ConnectError,
    ConnectTimeout,
    HTTPError,
    Response,
)
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from .._auth_context import AuthContext
from .._config import Config
from .._utils import RequestSpec
from .._utils._logs import mask_headers
from .._utils._request_builder import RequestBuilder
from ..models.errors import BadResponseError


def is_retryable_exception(exception: BaseException) -> bool:
    # Only failures where the request never reached the server are retried.
    return isinstance(exception, (ConnectError, ConnectTimeout))


def ensure_success(response: Response) -> Response:
    """Validate the status code of ``response``.

    Raises:
        BadResponseError: If the status code is outside of [200, 299]. The
            error carries the status code and the response text.
    """
    if 200 <= response.status_code <= 299:
        return response

    body = response.text
    getLogger("discogskit").error(f"[Error {response.status_code}] {body}")
    raise BadResponseError.from_status(response.status_code, body)


class BaseService:
    """Base class for the Discogs services.

    Holds the shared HTTP client, the request builder and the auth context,
    and implements the transport: sending a built request and validating the
    HTTP status of the reply.
    """

    RETRY_WAIT: wait_base = wait_exponential(multiplier=1, min=1, max=10)

    def __init__(
        self,
        config: Config,
        auth: AuthContext,
        client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger("discogskit")
        self._config = config
        self._auth = auth
        self._builder = RequestBuilder(config)

        self._owns_client = client is None
        if client is None:
            client_kwargs = {"follow_redirects": True}
            if config.timeout is not None:
                client_kwargs["timeout"] = config.timeout
            client = AsyncClient(**client_kwargs)

        self._client = client

        super().__init__()

    async def aclose(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    async def send_request(self, request: RequestSpec) -> Response:
        """Execute ``request`` and return the validated response.

        Connection failures are retried with exponential backoff, up to
        ``Config.max_retries`` times.

        Raises:
            BadResponseError: If the network call fails or the status is not 2xx.
        """
        self._logger.debug(f"Request: {request.method.value} {request.url}")
        self._logger.debug(f"HEADERS: {mask_headers(request.headers)}")

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(is_retryable_exception),
                stop=stop_after_attempt(self._config.max_retries + 1),
                wait=self.RETRY_WAIT,
                reraise=True,
            ):
                with attempt:
                    response = await self._client.send(request.to_httpx(self._client))
        except HTTPError as e:
            raise BadResponseError(f"Request to {request.url} failed: {e!r}") from e

        self._logger.debug(f"Response: {response.status_code} {request.url}")

        return ensure_success(response)
