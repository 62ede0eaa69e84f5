from typing import Optional

from .._utils._endpoint import Endpoint, HttpMethod, endpoint
from ..models.enums import MasterVersionsSort, Order


class Masters:
    @staticmethod
    def get(master_id: int) -> Endpoint:
        return endpoint(f"/masters/{master_id}", [HttpMethod.GET])

    @staticmethod
    def versions(
        master_id: int,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        format: Optional[str] = None,
        label: Optional[str] = None,
        released: Optional[int] = None,
        country: Optional[str] = None,
        sort: Optional[MasterVersionsSort] = None,
        order: Optional[Order] = None,
    ) -> Endpoint:
        """All releases that are versions of this master."""
        return endpoint(
            f"/masters/{master_id}/versions",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
            ("format", format),
            ("label", label),
            ("released", released),
            ("country", country),
            ("sort", sort),
            ("sort_order", order),
        )
