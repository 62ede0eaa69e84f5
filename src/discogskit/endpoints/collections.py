from typing import Optional

from .._utils._endpoint import Endpoint, HttpMethod, endpoint
from ..models.bodies import FieldValueBody, FolderBody, RatingBody
from ..models.enums import CollectionSort, Order


class UserCollections:
    """Endpoints under ``/users/{username}/collection``.

    Folder ``0`` holds every release of the collection; folder ``1`` is the
    "Uncategorized" folder.
    """

    @staticmethod
    def folders(username: str) -> Endpoint:
        return endpoint(f"/users/{username}/collection/folders", [HttpMethod.GET])

    @staticmethod
    def create_folder(username: str, name: str) -> Endpoint:
        return endpoint(
            f"/users/{username}/collection/folders",
            [HttpMethod.POST],
            body=FolderBody(name=name),
        )

    @staticmethod
    def folder(username: str, folder_id: int) -> Endpoint:
        return endpoint(
            f"/users/{username}/collection/folders/{folder_id}", [HttpMethod.GET]
        )

    @staticmethod
    def edit_folder(username: str, folder_id: int, name: Optional[str] = None) -> Endpoint:
        """Rename (POST) or delete (DELETE) a folder. Only empty folders can be deleted."""
        return endpoint(
            f"/users/{username}/collection/folders/{folder_id}",
            [HttpMethod.POST, HttpMethod.DELETE],
            body=FolderBody(name=name) if name is not None else None,
        )

    @staticmethod
    def release_instances(username: str, release_id: int) -> Endpoint:
        """Folders containing a release, with its instance ids."""
        return endpoint(
            f"/users/{username}/collection/releases/{release_id}", [HttpMethod.GET]
        )

    @staticmethod
    def releases(
        username: str,
        folder_id: int,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        sort: Optional[CollectionSort] = None,
        order: Optional[Order] = None,
    ) -> Endpoint:
        return endpoint(
            f"/users/{username}/collection/folders/{folder_id}/releases",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
            ("sort", sort),
            ("sort_order", order),
        )

    @staticmethod
    def add_release(username: str, folder_id: int, release_id: int) -> Endpoint:
        return endpoint(
            f"/users/{username}/collection/folders/{folder_id}/releases/{release_id}",
            [HttpMethod.POST],
        )

    @staticmethod
    def rate_release(
        username: str,
        folder_id: int,
        release_id: int,
        instance_id: int,
        rating: int = 0,
    ) -> Endpoint:
        return endpoint(
            f"/users/{username}/collection/folders/{folder_id}"
            f"/releases/{release_id}/instances/{instance_id}",
            [HttpMethod.POST],
            body=RatingBody(rating=rating),
        )

    @staticmethod
    def delete_instance(
        username: str, folder_id: int, release_id: int, instance_id: int
    ) -> Endpoint:
        return endpoint(
            f"/users/{username}/collection/folders/{folder_id}"
            f"/releases/{release_id}/instances/{instance_id}",
            [HttpMethod.DELETE],
        )

    @staticmethod
    def fields(username: str) -> Endpoint:
        return endpoint(f"/users/{username}/collection/fields", [HttpMethod.GET])

    @staticmethod
    def edit_field(
        username: str,
        value: str,
        folder_id: int,
        release_id: int,
        instance_id: int,
        field_id: int,
    ) -> Endpoint:
        """Change the value of a notes field on a collection instance."""
        return endpoint(
            f"/users/{username}/collection/folders/{folder_id}"
            f"/releases/{release_id}/instances/{instance_id}/fields/{field_id}",
            [HttpMethod.POST],
            body=FieldValueBody(value=value),
        )

    @staticmethod
    def value(username: str) -> Endpoint:
        """Minimum, median and maximum value of the collection."""
        return endpoint(f"/users/{username}/collection/value", [HttpMethod.GET])
