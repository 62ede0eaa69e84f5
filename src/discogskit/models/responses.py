from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DiscogsResponseError(BaseModel):
    """Common Discogs API error body: ``{"message": "..."}``."""

    message: str


class Pagination(BaseModel):
    model_config = ConfigDict(extra="allow")

    page: int
    pages: int
    per_page: int
    items: int
    urls: dict[str, str] = Field(default_factory=dict)


class ReleaseRating(BaseModel):
    model_config = ConfigDict(extra="allow")

    username: str
    release_id: int
    rating: int


class CommunityRating(BaseModel):
    model_config = ConfigDict(extra="allow")

    count: int
    average: float


class CommunityReleaseRating(BaseModel):
    model_config = ConfigDict(extra="allow")

    release_id: int
    rating: CommunityRating


class ReleaseStats(BaseModel):
    model_config = ConfigDict(extra="allow")

    num_have: Optional[int] = None
    num_want: Optional[int] = None
    is_offensive: Optional[bool] = None
