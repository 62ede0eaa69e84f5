from datetime import datetime
from typing import Optional

from .._utils._endpoint import Endpoint, HttpMethod, endpoint
from ..models.bodies import ListingBody, OrderEditBody, OrderMessageBody
from ..models.enums import (
    Condition,
    Currency,
    ListingStatus,
    Order,
    OrderStatus,
    OrdersSort,
)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class Marketplace:
    """Endpoints under ``/marketplace/``."""

    @staticmethod
    def listing(listing_id: int) -> Endpoint:
        """View (GET) or permanently remove (DELETE) a listing."""
        return endpoint(
            f"/marketplace/listings/{listing_id}", [HttpMethod.GET, HttpMethod.DELETE]
        )

    @staticmethod
    def edit_listing(
        listing_id: int,
        release_id: int,
        condition: Condition,
        price: float,
        status: ListingStatus,
        *,
        sleeve_condition: Optional[Condition] = None,
        comments: Optional[str] = None,
        allow_offers: Optional[bool] = None,
        external_id: Optional[str] = None,
        location: Optional[str] = None,
        weight: Optional[int] = None,
        format_quantity: Optional[int] = None,
    ) -> Endpoint:
        return endpoint(
            f"/marketplace/listings/{listing_id}",
            [HttpMethod.POST],
            body=ListingBody(
                release_id=release_id,
                condition=condition,
                sleeve_condition=sleeve_condition,
                price=price,
                comments=comments,
                allow_offers=allow_offers,
                status=status,
                external_id=external_id,
                location=location,
                weight=weight,
                format_quantity=format_quantity,
            ),
        )

    @staticmethod
    def new_listing(
        release_id: int,
        condition: Condition,
        price: float,
        status: ListingStatus,
        *,
        sleeve_condition: Optional[Condition] = None,
        comments: Optional[str] = None,
        allow_offers: Optional[bool] = None,
        external_id: Optional[str] = None,
        location: Optional[str] = None,
        weight: Optional[int] = None,
        format_quantity: Optional[int] = None,
    ) -> Endpoint:
        return endpoint(
            "/marketplace/listings",
            [HttpMethod.POST],
            body=ListingBody(
                release_id=release_id,
                condition=condition,
                sleeve_condition=sleeve_condition,
                price=price,
                comments=comments,
                allow_offers=allow_offers,
                status=status,
                external_id=external_id,
                location=location,
                weight=weight,
                format_quantity=format_quantity,
            ),
        )

    @staticmethod
    def order(order_id: str) -> Endpoint:
        return endpoint(f"/marketplace/orders/{order_id}", [HttpMethod.GET])

    @staticmethod
    def edit_order(
        order_id: str,
        *,
        status: Optional[OrderStatus] = None,
        shipping: Optional[float] = None,
    ) -> Endpoint:
        return endpoint(
            f"/marketplace/orders/{order_id}",
            [HttpMethod.POST],
            body=OrderEditBody(status=status, shipping=shipping),
        )

    @staticmethod
    def orders(
        *,
        status: Optional[OrderStatus] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        created_after: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        archived: Optional[bool] = None,
        sort: Optional[OrdersSort] = None,
        order: Optional[Order] = None,
    ) -> Endpoint:
        """Orders of the authenticated seller."""
        return endpoint(
            "/marketplace/orders",
            [HttpMethod.GET],
            ("status", status),
            ("page", page),
            ("per_page", per_page),
            ("created_after", _iso(created_after)),
            ("created_before", _iso(created_before)),
            ("archived", archived),
            ("sort", sort),
            ("sort_order", order),
        )

    @staticmethod
    def order_messages(
        order_id: str, *, page: Optional[int] = None, per_page: Optional[int] = None
    ) -> Endpoint:
        return endpoint(
            f"/marketplace/orders/{order_id}/messages",
            [HttpMethod.GET],
            ("page", page),
            ("per_page", per_page),
        )

    @staticmethod
    def add_message(
        order_id: str,
        *,
        message: Optional[str] = None,
        status: Optional[OrderStatus] = None,
    ) -> Endpoint:
        return endpoint(
            f"/marketplace/orders/{order_id}/messages",
            [HttpMethod.POST],
            body=OrderMessageBody(message=message, status=status),
        )

    @staticmethod
    def fee(price: Optional[float] = None, currency: Optional[Currency] = None) -> Endpoint:
        """Fee for selling an item at ``price``, in ``currency`` (USD by default)."""
        if price is None:
            path = "/marketplace/fee"
        elif currency is None:
            path = f"/marketplace/fee/{price}"
        else:
            path = f"/marketplace/fee/{price}/{Currency(currency).value}"
        return endpoint(path, [HttpMethod.GET])

    @staticmethod
    def price_suggestions(release_id: int) -> Endpoint:
        return endpoint(f"/marketplace/price_suggestions/{release_id}", [HttpMethod.GET])

    @staticmethod
    def stats(release_id: int, currency: Optional[Currency] = None) -> Endpoint:
        return endpoint(
            f"/marketplace/stats/{release_id}",
            [HttpMethod.GET],
            ("curr_abbr", currency),
        )
