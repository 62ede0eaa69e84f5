from .artists import Artists
from .collections import UserCollections
from .database import Database
from .labels import Labels
from .marketplace import Marketplace
from .masters import Masters
from .oauths import Oauths
from .releases import Releases
from .users import Users

__all__ = [
    "Artists",
    "Database",
    "Labels",
    "Marketplace",
    "Masters",
    "Oauths",
    "Releases",
    "UserCollections",
    "Users",
]
