from typing import Optional

from .._utils._endpoint import Endpoint, HttpMethod, endpoint
from ..models.bodies import ProfileBody
from ..models.enums import ContributionsSort, InventorySort, Order


class Users:
    """Endpoints under ``/users/{username}``."""

    @staticmethod
    def get(username: str) -> Endpoint:
        return endpoint(f"/users/{username}", [HttpMethod.GET])

    @staticmethod
    def edit(
        username: str,
        *,
        name: Optional[str] = None,
        home_page: Optional[str] = None,
        location: Optional[str] = None,
        profile: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> Endpoint:
        """Edit a user's profile. Requires authentication as the user."""
        return endpoint(
            f"/users/{username}",
            [HttpMethod.POST],
            body=ProfileBody(
                username=username,
                name=name,
                home_page=home_page,
                location=location,
                profile=profile,
                curr_abbr=currency,
            ),
        )

    @staticmethod
    def submissions(
        username: str, *, page: Optional[int] = None, per_page: Optional[int] = None
    ) -> Endpoint:
        return endpoint(
            f"/users/{username}/submissions",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
        )

    @staticmethod
    def contributions(
        username: str,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        sort: Optional[ContributionsSort] = None,
        order: Optional[Order] = None,
    ) -> Endpoint:
        return endpoint(
            f"/users/{username}/contributions",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
            ("sort", sort),
            ("sort_order", order),
        )

    @staticmethod
    def lists(username: str) -> Endpoint:
        return endpoint(f"/users/{username}/lists", [HttpMethod.GET])

    @staticmethod
    def inventory(
        username: str,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        status: Optional[str] = None,
        sort: Optional[InventorySort] = None,
        order: Optional[Order] = None,
    ) -> Endpoint:
        """Listings in a seller's inventory."""
        return endpoint(
            f"/users/{username}/inventory",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
            ("status", status),
            ("sort", sort),
            ("sort_order", order),
        )

    @staticmethod
    def wants(
        username: str, *, page: Optional[int] = None, per_page: Optional[int] = None
    ) -> Endpoint:
        return endpoint(
            f"/users/{username}/wants",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
        )

    @staticmethod
    def add_want(
        username: str,
        release_id: int,
        *,
        notes: Optional[str] = None,
        rating: Optional[int] = None,
    ) -> Endpoint:
        """Add a release to the wantlist. Requires authentication as the owner."""
        return endpoint(
            f"/users/{username}/wants/{release_id}",
            [HttpMethod.PUT],
            ("notes", notes),
            ("rating", rating),
        )

    @staticmethod
    def edit_want(
        username: str,
        release_id: int,
        *,
        notes: Optional[str] = None,
        rating: Optional[int] = None,
    ) -> Endpoint:
        return endpoint(
            f"/users/{username}/wants/{release_id}",
            [HttpMethod.POST],
            ("notes", notes),
            ("rating", rating),
        )

    @staticmethod
    def delete_want(username: str, release_id: int) -> Endpoint:
        return endpoint(f"/users/{username}/wants/{release_id}", [HttpMethod.DELETE])
