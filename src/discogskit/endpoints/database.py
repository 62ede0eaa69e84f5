from typing import Optional, Union

from .._utils._endpoint import Endpoint, HttpMethod, endpoint
from ..models.enums import SearchType


class Database:
    """Endpoints under ``/database/``."""

    @staticmethod
    def search(
        query: Optional[str] = None,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        type: Optional[Union[SearchType, str]] = None,
        title: Optional[str] = None,
        release_title: Optional[str] = None,
        credit: Optional[str] = None,
        artist: Optional[str] = None,
        anv: Optional[str] = None,
        label: Optional[str] = None,
        genre: Optional[str] = None,
        style: Optional[str] = None,
        country: Optional[str] = None,
        year: Optional[int] = None,
        format: Optional[str] = None,
        catno: Optional[str] = None,
        barcode: Optional[str] = None,
        track: Optional[str] = None,
        submitter: Optional[str] = None,
        contributor: Optional[str] = None,
    ) -> Endpoint:
        """Search the Discogs database. Requires authentication as any user."""
        return endpoint(
            "/database/search",
            [HttpMethod.GET],
            ("q", query),
            ("page", page),
            ("per_page", per_page),
            ("type", type),
            ("title", title),
            ("release_title", release_title),
            ("credit", credit),
            ("artist", artist),
            ("anv", anv),
            ("label", label),
            ("genre", genre),
            ("style", style),
            ("country", country),
            ("year", year),
            ("format", format),
            ("catno", catno),
            ("barcode", barcode),
            ("track", track),
            ("submitter", submitter),
            ("contributor", contributor),
        )
