from typing import TYPE_CHECKING, Optional

from pydantic import ValidationError

from .responses import DiscogsResponseError

if TYPE_CHECKING:
    from .._auth_context import OAuthState


class DiscogsError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BadURLError(DiscogsError):
    """The path and query items cannot form a valid URL."""

    def __init__(self, url: str, message: Optional[str] = None) -> None:
        self.url = url
        super().__init__(message or f"Malformed URL: {url!r}")


class BadMethodError(DiscogsError):
    """The HTTP method is not supported by the target endpoint.

    Raised before any network I/O takes place.
    """

    def __init__(self, method: str, path: str) -> None:
        self.method = method
        self.path = path
        super().__init__(f"{method} is not supported by endpoint {path}")


class BadResponseError(DiscogsError):
    """The HTTP call failed or returned a status outside of 200-299.

    The status code and the response text are kept for diagnostics when the
    server produced a reply.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @staticmethod
    def from_status(status_code: int, body: str) -> "BadResponseError":
        """Create a BadResponseError for a non-2xx reply.

        Discogs documents a single error shape, ``{"message": "..."}``; when
        the body matches it the message is surfaced directly.
        """
        detail: Optional[str]
        try:
            detail = DiscogsResponseError.model_validate_json(body).message
        except ValidationError:
            detail = None

        message = f"[Error {status_code}] {detail or body or 'No response body'}"
        return BadResponseError(message, status_code=status_code, body=body)


class BadAuthError(DiscogsError):
    def __init__(
        self,
        message="No credentials available. Provide a personal token or a consumer key and consumer secret pair.",
    ):
        super().__init__(message)


class MissingStepError(DiscogsError):
    """An OAuth step was invoked before the step it depends on."""

    def __init__(self, required: "OAuthState", message: Optional[str] = None) -> None:
        self.required = required
        super().__init__(
            message
            or f"OAuth flow step out of order: state {required.name} is required first."
        )
