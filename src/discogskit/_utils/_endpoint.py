from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

import httpx

from ..models.errors import BadURLError
from .constants import DEFAULT_DOMAIN

QueryItem = Tuple[str, Optional[str]]


class HttpMethod(str, Enum):
    """HTTP methods understood by the Discogs API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        """True for POST and PUT, the methods that carry a request body."""
        return self in (HttpMethod.POST, HttpMethod.PUT)


def query_value(value: Any) -> Optional[str]:
    """Render a query parameter value, keeping ``None`` as absent."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_items(*pairs: Tuple[str, Any]) -> tuple[QueryItem, ...]:
    return tuple((name, query_value(value)) for name, value in pairs)


def compose_url(
    base_url: str, path: str, queries: Iterable[QueryItem] = ()
) -> httpx.URL:
    """Join ``base_url`` and ``path`` and append the query items.

    Items whose value is ``None`` are omitted entirely.

    Raises:
        BadURLError: If the path does not start with ``/`` or the result is not a valid URL.
    """
    if not path.startswith("/"):
        raise BadURLError(path, f"Endpoint path must start with '/': {path!r}")

    params = [(name, value) for name, value in queries if value is not None]
    raw = f"{base_url.rstrip('/')}{path}"

    try:
        url = httpx.URL(raw)
        if params:
            url = url.copy_merge_params(params)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise BadURLError(raw) from e

    if not url.is_absolute_url or not url.host:
        raise BadURLError(raw)

    return url


def _coerce_methods(
    methods: Iterable[Union[HttpMethod, str]],
) -> frozenset[HttpMethod]:
    return frozenset(
        m if isinstance(m, HttpMethod) else HttpMethod(m.upper()) for m in methods
    )


@dataclass(frozen=True)
class Endpoint:
    """Declarative description of one Discogs API call.

    Attributes:
        path: API path appended to the host, always starting with ``/``.
        methods: HTTP methods the endpoint accepts. Empty only for endpoints
            that are used as a redirect target (e.g. the authorize page).
        queries: Ordered query items; ``None`` values are dropped when the URL is built.
        body: Optional request body (a pydantic model or a JSON-compatible value).
        subdomain: Host prefix, ``api`` for API calls and ``www`` for user-facing pages.
    """

    path: str
    methods: frozenset[HttpMethod] = field(default_factory=frozenset)
    queries: tuple[QueryItem, ...] = ()
    body: Any = None
    subdomain: str = "api"

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", _coerce_methods(self.methods))
        object.__setattr__(self, "queries", tuple(self.queries))

    def supports(self, method: Union[HttpMethod, str]) -> bool:
        return HttpMethod(method.upper()) in self.methods

    def base_url(self, domain: str = DEFAULT_DOMAIN) -> str:
        return f"https://{self.subdomain}.{domain}"

    def url_for(self, domain: str = DEFAULT_DOMAIN) -> Optional[httpx.URL]:
        try:
            return compose_url(self.base_url(domain), self.path, self.queries)
        except BadURLError:
            return None

    @property
    def url(self) -> Optional[httpx.URL]:
        """Full URL of the endpoint on the default domain, or None if malformed."""
        return self.url_for()


def endpoint(
    path: str,
    methods: Sequence[Union[HttpMethod, str]],
    *queries: Tuple[str, Any],
    body: Any = None,
) -> Endpoint:
    """Shorthand used by the endpoint catalog."""
    return Endpoint(
        path=path,
        methods=frozenset(HttpMethod(m) for m in methods),
        queries=query_items(*queries),
        body=body,
    )
