"""Request bodies sent along with POST and PUT calls."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Condition, ListingStatus, OrderStatus


def _clamp_rating(value: int) -> int:
    return max(min(value, 5), 0)


class RatingBody(BaseModel):
    """A rating between 0 (unrated) and 5. Out-of-range values are clamped."""

    rating: int

    @field_validator("rating")
    @classmethod
    def clamp(cls, value: int) -> int:
        return _clamp_rating(value)


class FolderBody(BaseModel):
    name: str


class FieldValueBody(BaseModel):
    value: str


class ProfileBody(BaseModel):
    username: str
    name: Optional[str] = None
    home_page: Optional[str] = None
    location: Optional[str] = None
    profile: Optional[str] = None
    curr_abbr: Optional[str] = None


class ListingBody(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    release_id: int
    condition: Condition
    sleeve_condition: Optional[Condition] = None
    price: float
    comments: Optional[str] = None
    allow_offers: Optional[bool] = None
    status: ListingStatus
    external_id: Optional[str] = None
    location: Optional[str] = None
    weight: Optional[int] = Field(default=None, ge=0)
    format_quantity: Optional[int] = Field(default=None, ge=0)


class OrderEditBody(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: Optional[OrderStatus] = None
    shipping: Optional[float] = None


class OrderMessageBody(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    message: Optional[str] = None
    status: Optional[OrderStatus] = None
