from typing import Optional
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import BadResponseError


class OAuthToken(BaseModel):
    """A token pair returned by the request-token or access-token endpoint.

    Both endpoints answer with ``application/x-www-form-urlencoded`` text, e.g.
    ``oauth_token=abc&oauth_token_secret=xyz&oauth_callback_confirmed=true``.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    oauth_token: str
    oauth_token_secret: str
    oauth_callback_confirmed: Optional[bool] = None

    @classmethod
    def parse(cls, content: bytes | str) -> "OAuthToken":
        if isinstance(content, bytes):
            try:
                text = content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise BadResponseError(
                    "The OAuth token response is not valid UTF-8.",
                    body=content.decode("utf-8", errors="replace"),
                ) from e
        else:
            text = content
        fields = dict(parse_qsl(text.strip().lstrip("?")))
        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise BadResponseError(
                f"Could not read an OAuth token pair from the response: {text!r}",
                body=text,
            ) from e


class Identity(BaseModel):
    """The account the current OAuth credentials belong to."""

    model_config = ConfigDict(extra="allow")

    id: int
    username: str
    resource_url: Optional[str] = None
    consumer_name: Optional[str] = None
