from ._auth_context import AuthContext, OAuthState
from ._config import Config
from ._discogs import Discogs
from ._utils import Endpoint, HttpMethod
from .models.errors import (
    BadAuthError,
    BadMethodError,
    BadResponseError,
    BadURLError,
    DiscogsError,
    MissingStepError,
)

__all__ = [
    "AuthContext",
    "BadAuthError",
    "BadMethodError",
    "BadResponseError",
    "BadURLError",
    "Config",
    "Discogs",
    "DiscogsError",
    "Endpoint",
    "HttpMethod",
    "MissingStepError",
    "OAuthState",
]
