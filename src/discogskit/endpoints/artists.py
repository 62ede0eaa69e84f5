from typing import Optional

from .._utils._endpoint import Endpoint, HttpMethod, endpoint
from ..models.enums import ArtistReleasesSort, Order


class Artists:
    @staticmethod
    def get(artist_id: int) -> Endpoint:
        return endpoint(f"/artists/{artist_id}", [HttpMethod.GET])

    @staticmethod
    def releases(
        artist_id: int,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        sort: Optional[ArtistReleasesSort] = None,
        order: Optional[Order] = None,
    ) -> Endpoint:
        return endpoint(
            f"/artists/{artist_id}/releases",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
            ("sort", sort),
            ("sort_order", order),
        )
