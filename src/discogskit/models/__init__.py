from .bodies import (
    FieldValueBody,
    FolderBody,
    ListingBody,
    OrderEditBody,
    OrderMessageBody,
    ProfileBody,
    RatingBody,
)
from .enums import (
    ArtistReleasesSort,
    CollectionSort,
    Condition,
    ContributionsSort,
    Currency,
    InventorySort,
    ListingStatus,
    MasterVersionsSort,
    Order,
    OrdersSort,
    OrderStatus,
    SearchType,
)
from .errors import (
    BadAuthError,
    BadMethodError,
    BadResponseError,
    BadURLError,
    DiscogsError,
    MissingStepError,
)
from .oauth import Identity, OAuthToken
from .responses import (
    CommunityRating,
    CommunityReleaseRating,
    DiscogsResponseError,
    Pagination,
    ReleaseRating,
    ReleaseStats,
)

__all__ = [
    "ArtistReleasesSort",
    "BadAuthError",
    "BadMethodError",
    "BadResponseError",
    "BadURLError",
    "CollectionSort",
    "CommunityRating",
    "CommunityReleaseRating",
    "Condition",
    "ContributionsSort",
    "Currency",
    "DiscogsError",
    "DiscogsResponseError",
    "FieldValueBody",
    "FolderBody",
    "Identity",
    "InventorySort",
    "ListingBody",
    "ListingStatus",
    "MasterVersionsSort",
    "MissingStepError",
    "OAuthToken",
    "Order",
    "OrderEditBody",
    "OrderMessageBody",
    "OrderStatus",
    "OrdersSort",
    "Pagination",
    "ProfileBody",
    "RatingBody",
    "ReleaseRating",
    "ReleaseStats",
    "SearchType",
]
