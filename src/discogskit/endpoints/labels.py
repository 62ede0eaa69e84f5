from typing import Optional

from .._utils._endpoint import Endpoint, HttpMethod, endpoint


class Labels:
    @staticmethod
    def get(label_id: int) -> Endpoint:
        return endpoint(f"/labels/{label_id}", [HttpMethod.GET])

    @staticmethod
    def releases(
        label_id: int,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> Endpoint:
        return endpoint(
            f"/labels/{label_id}/releases",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
        )
