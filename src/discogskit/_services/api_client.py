from typing import Any, Iterable, Optional, Type, TypeVar, Union, overload

from httpx import Response
from pydantic import TypeAdapter, ValidationError

from .._utils import Endpoint, HttpMethod, QueryItem
from .._utils._request_builder import EMPTY_BODY
from ..models.errors import BadMethodError
from ._base_service import BaseService

T = TypeVar("T")


class ApiClient(BaseService):
    """Dispatches calls to Discogs endpoints.

    Every verb has a typed form, which decodes the response body into
    ``response_type`` and yields ``None`` when the body does not match, and an
    untyped form, which only reports failures. Use :meth:`send` to get the raw
    body together with the HTTP response (status code, headers).

    Examples:
        ```python
        from discogskit import Discogs
        from discogskit.endpoints import Releases
        from discogskit.models import ReleaseStats

        async with Discogs("MyApp", "1.0", personal_token="...") as discogs:
            stats = await discogs.api_client.get(
                Releases.stats(249504), response_type=ReleaseStats
            )
        ```
    """

    async def send(
        self,
        endpoint: Endpoint,
        method: Union[HttpMethod, str] = HttpMethod.GET,
    ) -> tuple[bytes, Response]:
        """Send a request to ``endpoint`` and return the raw body and response.

        Raises:
            BadMethodError: If ``method`` is not supported by the endpoint.
            BadURLError: If the endpoint does not form a valid URL.
            BadAuthError: If the client holds no usable credentials.
            BadResponseError: If the call fails or returns a non-2xx status.
        """
        method = HttpMethod(method.upper())
        if not endpoint.supports(method):
            raise BadMethodError(method.value, endpoint.path)

        body: Any = None
        if method.has_body:
            body = endpoint.body if endpoint.body is not None else EMPTY_BODY

        request = self._builder.build(
            endpoint.path,
            method,
            self._auth,
            endpoint.queries,
            body,
            base_url=endpoint.base_url(self._config.domain),
        )
        response = await self.send_request(request)
        return response.content, response

    async def send_path(
        self,
        path: str = "/",
        method: Union[HttpMethod, str] = HttpMethod.GET,
        queries: Iterable[QueryItem] = (),
        body: Any = None,
    ) -> tuple[bytes, Response]:
        """Send a request to a raw API path, bypassing the endpoint catalog."""
        method = HttpMethod(method.upper())
        request = self._builder.build(path, method, self._auth, queries, body)
        response = await self.send_request(request)
        return response.content, response

    @overload
    async def get(self, endpoint: Endpoint) -> None: ...

    @overload
    async def get(self, endpoint: Endpoint, response_type: Type[T]) -> Optional[T]: ...

    async def get(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self._dispatch(endpoint, HttpMethod.GET, response_type)

    @overload
    async def post(self, endpoint: Endpoint) -> None: ...

    @overload
    async def post(self, endpoint: Endpoint, response_type: Type[T]) -> Optional[T]: ...

    async def post(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self._dispatch(endpoint, HttpMethod.POST, response_type)

    @overload
    async def put(self, endpoint: Endpoint) -> None: ...

    @overload
    async def put(self, endpoint: Endpoint, response_type: Type[T]) -> Optional[T]: ...

    async def put(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self._dispatch(endpoint, HttpMethod.PUT, response_type)

    @overload
    async def delete(self, endpoint: Endpoint) -> None: ...

    @overload
    async def delete(
        self, endpoint: Endpoint, response_type: Type[T]
    ) -> Optional[T]: ...

    async def delete(
        self, endpoint: Endpoint, response_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self._dispatch(endpoint, HttpMethod.DELETE, response_type)

    async def _dispatch(
        self,
        endpoint: Endpoint,
        method: HttpMethod,
        response_type: Optional[Type[T]],
    ) -> Optional[T]:
        content, _ = await self.send(endpoint, method)
        if response_type is None:
            return None
        return self._decode(content, response_type)

    def _decode(self, content: bytes, response_type: Type[T]) -> Optional[T]:
        # A body that does not match response_type is not an error here;
        # send() gives access to the raw bytes.
        try:
            return TypeAdapter(response_type).validate_json(content)
        except ValidationError as e:
            self._logger.debug(
                f"Could not decode response as {getattr(response_type, '__name__', response_type)}: {e}"
            )
            return None
