from ._base_service import BaseService, ensure_success
from .api_client import ApiClient
from .oauth_service import OAuthService

__all__ = [
    "ApiClient",
    "BaseService",
    "OAuthService",
    "ensure_success",
]
