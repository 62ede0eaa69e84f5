from typing import Optional

from .._utils._endpoint import Endpoint, HttpMethod, endpoint, query_items


class Oauths:
    """Endpoints under ``/oauth/``."""

    @staticmethod
    def request_token() -> Endpoint:
        """Generate a request token (first leg of the OAuth flow)."""
        return endpoint("/oauth/request_token", [HttpMethod.GET, HttpMethod.POST])

    @staticmethod
    def access_token() -> Endpoint:
        """Exchange an authorized request token for an access token."""
        return endpoint("/oauth/access_token", [HttpMethod.POST])

    @staticmethod
    def identity() -> Endpoint:
        """Basic information about the authenticated user."""
        return endpoint("/oauth/identity", [HttpMethod.GET])

    @staticmethod
    def authorize(oauth_token: Optional[str] = None) -> Endpoint:
        """The user-facing authorization page on ``www``.

        It accepts no API method: it is only opened in a browser.
        """
        return Endpoint(
            path="/oauth/authorize",
            queries=query_items(("oauth_token", oauth_token)),
            subdomain="www",
        )
