from enum import Enum


class Order(str, Enum):
    """Sort direction, sent as the ``sort_order`` query parameter."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class SearchType(str, Enum):
    RELEASE = "release"
    MASTER = "master"
    ARTIST = "artist"
    LABEL = "label"


class Condition(str, Enum):
    """Grade of a record or of its sleeve."""

    MINT = "Mint (M)"
    NEAR_MINT = "Near Mint (NM or M-)"
    VERY_GOOD_PLUS = "Very Good Plus (VG+)"
    VERY_GOOD = "Very Good (VG)"
    GOOD_PLUS = "Good Plus (G+)"
    GOOD = "Good (G)"
    FAIR = "Fair (F)"
    POOR = "Poor (P)"

    GENERIC = "Generic"
    NOT_GRADED = "Not Graded"
    NO_COVER = "No Cover"

    @property
    def rank(self) -> int:
        """Position on the grading scale, best first. -1 for sleeve-only values."""
        graded = list(Condition)[:8]
        return graded.index(self) if self in graded else -1


class ListingStatus(str, Enum):
    DRAFT = "Draft"
    FOR_SALE = "For Sale"


class OrderStatus(str, Enum):
    ALL = "All"
    NEW_ORDER = "New Order"
    BUYER_CONTACTED = "Buyer Contacted"
    INVOICE_SENT = "Invoice Sent"
    PAYMENT_PENDING = "Payment Pending"
    PAYMENT_RECEIVED = "Payment Received"
    IN_PROGRESS = "In Progress"
    SHIPPED = "Shipped"
    REFUND_SENT = "Refund Sent"
    CANCELLED_NON_PAYING_BUYER = "Cancelled (Non-Paying Buyer)"
    CANCELLED_ITEM_UNAVAILABLE = "Cancelled (Item Unavailable)"
    CANCELLED_PER_BUYER_REQUEST = "Cancelled (Per Buyer's Request)"
    CANCELLED_REFUND_RECEIVED = "Cancelled (Refund Received)"


class Currency(str, Enum):
    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAD = "CAD"
    AUD = "AUD"
    JPY = "JPY"
    CHF = "CHF"
    MXN = "MXN"
    BRL = "BRL"
    NZD = "NZD"
    SEK = "SEK"
    ZAR = "ZAR"


class ArtistReleasesSort(str, Enum):
    YEAR = "year"
    TITLE = "title"
    FORMAT = "format"


class MasterVersionsSort(str, Enum):
    RELEASED = "released"
    TITLE = "title"
    FORMAT = "format"
    LABEL = "label"
    CATNO = "catno"
    COUNTRY = "country"


class CollectionSort(str, Enum):
    LABEL = "label"
    ARTIST = "artist"
    TITLE = "title"
    CATNO = "catno"
    FORMAT = "format"
    RATING = "rating"
    ADDED = "added"
    YEAR = "year"


class ContributionsSort(str, Enum):
    LABEL = "label"
    ARTIST = "artist"
    TITLE = "title"
    CATNO = "catno"
    FORMAT = "format"
    RATING = "rating"
    YEAR = "year"
    ADDED = "added"


class InventorySort(str, Enum):
    LISTED = "listed"
    PRICE = "price"
    ITEM = "item"
    ARTIST = "artist"
    LABEL = "label"
    CATNO = "catno"
    AUDIO = "audio"
    STATUS = "status"
    LOCATION = "location"


class OrdersSort(str, Enum):
    ID = "id"
    BUYER = "buyer"
    CREATED = "created"
    STATUS = "status"
    LAST_ACTIVITY = "last_activity"
