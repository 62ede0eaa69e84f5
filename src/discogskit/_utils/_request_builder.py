import json
import time
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from pydantic import BaseModel

from .._auth_context import AuthContext
from .._config import Config
from ..models.errors import BadAuthError
from ._endpoint import HttpMethod, QueryItem, compose_url
from ._request_spec import RequestSpec
from .constants import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    OAUTH_SIGNATURE_METHOD,
    OAUTH_VERSION,
)

EMPTY_BODY: dict[str, Any] = {}


@dataclass(frozen=True)
class OAuthParams:
    """Extra OAuth fields for the request-token and access-token steps.

    ``token_secret`` is the secret half of the pair obtained at the previous
    step and only takes part in the PLAINTEXT signature.
    """

    callback: Optional[str] = None
    token: Optional[str] = None
    verifier: Optional[str] = None
    token_secret: Optional[str] = None


def plaintext_signature(consumer_secret: str, token_secret: Optional[str] = None) -> str:
    return f"{consumer_secret}&{token_secret or ''}"


def oauth_header(
    consumer_key: str,
    consumer_secret: str,
    params: OAuthParams,
    *,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> str:
    """Build an ``OAuth ...`` Authorization value signed with PLAINTEXT."""
    if timestamp is None:
        timestamp = int(time.time())

    fields = [
        ("oauth_consumer_key", consumer_key),
        ("oauth_nonce", nonce or str(uuid.uuid4())),
        ("oauth_signature_method", OAUTH_SIGNATURE_METHOD),
        ("oauth_timestamp", str(timestamp)),
        ("oauth_version", OAUTH_VERSION),
    ]
    if params.callback is not None:
        fields.append(("oauth_callback", params.callback))
    if params.token is not None:
        fields.append(("oauth_token", params.token))
    if params.verifier is not None:
        fields.append(("oauth_verifier", params.verifier))
    fields.append(
        ("oauth_signature", plaintext_signature(consumer_secret, params.token_secret))
    )

    return "OAuth " + ",".join(f'{name}="{value}"' for name, value in fields)


def encode_body(body: Any) -> bytes:
    if isinstance(body, BaseModel):
        payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        payload = body
    return json.dumps(payload).encode("utf-8")


class RequestBuilder:
    """Turns a path, method, query items and body into a signed request.

    The builder only reads the auth context; it never mutates it.
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    def authorization(
        self, auth: AuthContext, oauth: Optional[OAuthParams] = None
    ) -> str:
        """Resolve the Authorization header for the current credentials.

        Resolution order:
        - an explicit OAuth flow step (``oauth``) signs with the consumer pair;
        - a personal access token yields ``Discogs token=<token>``;
        - an access token pair obtained through OAuth signs every call;
        - a bare consumer pair yields ``Discogs key=<key>, secret=<secret>``.

        Raises:
            BadAuthError: If no usable credential set is available.
        """
        if oauth is not None:
            if not auth.has_consumer:
                raise BadAuthError(
                    "The OAuth flow requires a consumer key and consumer secret."
                )
            return oauth_header(auth.consumer_key, auth.consumer_secret, oauth)  # type: ignore[arg-type]

        if auth.personal_token:
            return f"Discogs token={auth.personal_token}"

        if auth.has_consumer and auth.has_access_token:
            return oauth_header(
                auth.consumer_key,  # type: ignore[arg-type]
                auth.consumer_secret,  # type: ignore[arg-type]
                OAuthParams(token=auth.oauth_token, token_secret=auth.oauth_token_secret),
            )

        if auth.has_consumer:
            return f"Discogs key={auth.consumer_key}, secret={auth.consumer_secret}"

        raise BadAuthError()

    def build(
        self,
        path: str,
        method: HttpMethod,
        auth: AuthContext,
        queries: Iterable[QueryItem] = (),
        body: Any = None,
        *,
        oauth: Optional[OAuthParams] = None,
        base_url: Optional[str] = None,
    ) -> RequestSpec:
        """Build a request for ``path``.

        Args:
            path: API path starting with ``/``.
            method: HTTP method to use.
            auth: Credentials of the client.
            queries: Ordered query items; items without a value are omitted.
            body: Payload for POST and PUT. Ignored for GET and DELETE.
            oauth: Fields of an OAuth flow step, if this request is one.
            base_url: Override for the API base URL.

        Raises:
            BadURLError: If the path and query items do not form a valid URL.
            BadAuthError: If no usable credential set is available.
        """
        url = compose_url(base_url or self._config.api_base_url, path, queries)

        headers = {
            HEADER_USER_AGENT: self._config.user_agent,
            HEADER_AUTHORIZATION: self.authorization(auth, oauth),
        }

        content: Optional[bytes] = None
        if method.has_body:
            if oauth is not None and body is None:
                content = b""
                headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_FORM
            else:
                content = encode_body(EMPTY_BODY if body is None else body)
                headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

        return RequestSpec(method=method, url=url, headers=headers, content=content)
