from ._endpoint import Endpoint, HttpMethod, QueryItem, compose_url, query_items
from ._logs import setup_logging
from ._request_spec import RequestSpec

__all__ = [
    "Endpoint",
    "HttpMethod",
    "QueryItem",
    "RequestSpec",
    "compose_url",
    "query_items",
    "setup_logging",
]
