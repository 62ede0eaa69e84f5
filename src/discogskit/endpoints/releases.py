from .._utils._endpoint import Endpoint, HttpMethod, endpoint
from ..models.bodies import RatingBody


class Releases:
    """Endpoints under ``/releases/``."""

    @staticmethod
    def get(release_id: int) -> Endpoint:
        return endpoint(
            f"/releases/{release_id}", [HttpMethod.GET, HttpMethod.DELETE]
        )

    @staticmethod
    def rating(release_id: int, username: str) -> Endpoint:
        """Retrieve or delete the rating of a release for a given user."""
        return endpoint(
            f"/releases/{release_id}/rating/{username}",
            [HttpMethod.GET, HttpMethod.DELETE],
        )

    @staticmethod
    def set_rating(release_id: int, username: str, rating: int) -> Endpoint:
        """Update the rating of a release for a given user.

        ``rating`` is clamped into [0, 5]. Requires authentication as the user.
        """
        return endpoint(
            f"/releases/{release_id}/rating/{username}",
            [HttpMethod.PUT],
            body=RatingBody(rating=rating),
        )

    @staticmethod
    def community_rating(release_id: int) -> Endpoint:
        return endpoint(f"/releases/{release_id}/rating", [HttpMethod.GET])

    @staticmethod
    def stats(release_id: int) -> Endpoint:
        """Community "have" and "want" counts of a release."""
        return endpoint(f"/releases/{release_id}/stats", [HttpMethod.GET])
