"""Data model of a YML product catalogue and offer validation."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime

from ymlfeed.countries import is_known_country

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M"
MAX_DELIVERY_DAYS = 255
MAX_CATEGORY_ID = 999_999_999_999_999_999

_AGE_VALUES = {
    "year": frozenset({"0", "6", "12", "16", "18"}),
    "month": frozenset(str(month) for month in range(13)),
}


class OfferType(str, enum.Enum):
    """Kinds of offer that change the set of required fields."""

    VENDOR_MODEL = "vendor.model"


class ValidationError(ValueError):
    """Raised when an offer breaks a rule of the format."""


@dataclass
class Currency:
    id: str
    rate: str
    plus: float = 0.0


@dataclass
class Category:
    id: int
    name: str
    parent_id: int = 0


@dataclass
class DeliveryOption:
    cost: int
    days: str
    order_before: int = 0


@dataclass
class Param:
    name: str
    value: str
    unit: str = ""


@dataclass
class Age:
    unit: str
    value: str


def delivery_days(days_from: int, days_to: int) -> str:
    """Format a delivery period as ``"N"`` or ``"N-M"``, capped at 255 days."""
    days_from = min(days_from, MAX_DELIVERY_DAYS)
    days_to = min(days_to, MAX_DELIVERY_DAYS)
    days_to = max(days_to, days_from)
    if days_from == days_to or days_to == 0:
        return str(days_from)
    return f"{days_from}-{days_to}"


def make_delivery_option(
    cost: int, days_from: int, days_to: int, order_before: int
) -> DeliveryOption:
    """Build a delivery option; a cost of 0 means free delivery."""
    return DeliveryOption(
        cost=cost, days=delivery_days(days_from, days_to), order_before=order_before
    )


@dataclass
class Offer:
    """A single product offer.

    ``available`` True means delivery within two days; False means
    delivery from three days to two months.
    """

    id: str = ""
    bid: int = 0
    cbid: int = 0
    type: OfferType | None = None
    available: bool = False
    url: str = ""
    price: float = 0.0
    old_price: float = 0.0
    currency_id: str = ""
    category_id: int = 0
    market_category: str = ""
    pictures: list[str] = field(default_factory=list)
    store: bool = False
    pickup: bool = False
    delivery: bool = False
    delivery_options: list[DeliveryOption] | None = None
    name: str = ""
    type_prefix: str = ""
    vendor: str = ""
    vendor_code: str = ""
    model: str = ""
    description: str = ""
    sales_notes: str = ""
    manufacturer_warranty: bool = False
    country_of_origin: str = ""
    downloadable: bool = False
    adult: bool = False
    age: Age | None = None
    barcodes: list[str] = field(default_factory=list)
    cpa: int = 0
    rec: str = ""
    expiry: str = ""
    weight: float = 0.0
    dimensions: str = ""
    params: list[Param] = field(default_factory=list)
    count: int = 0
    min_quantity: int = 0

    def add_picture(self, picture: str) -> None:
        self.pictures.append(picture)

    def add_delivery_option(
        self, cost: int, days_from: int, days_to: int, order_before: int
    ) -> None:
        if self.delivery_options is None:
            self.delivery_options = []
        self.delivery_options.append(
            make_delivery_option(cost, days_from, days_to, order_before)
        )

    def add_barcode(self, barcode: str) -> None:
        self.barcodes.append(barcode)

    def add_age(self, unit: str, value: str) -> None:
        """Set the age restriction unless one is already set."""
        if self.age is None:
            self.age = Age(unit=unit, value=value)

    def add_param(self, name: str, unit: str, value: str) -> None:
        self.params.append(Param(name=name, unit=unit, value=value))

    def validate(self) -> None:
        """Check the offer against the format's rules; raise ValidationError."""
        if len(self.id) > 20:
            raise ValidationError("Id more than 20 chars")
        if self.type == OfferType.VENDOR_MODEL and (not self.vendor or not self.model):
            raise ValidationError("Vendor or Model is empty")
        if self.price == 0:
            raise ValidationError("Price is zero")
        if self.old_price > 0 and self.old_price <= self.price:
            raise ValidationError("OldPrice less than Price")
        if len(self.currency_id) != 3:
            raise ValidationError("CurrencyId is not 3 chars")
        if self.category_id > MAX_CATEGORY_ID:
            raise ValidationError("CategoryId more than 18 chars")
        if any(len(picture) > 512 for picture in self.pictures):
            raise ValidationError("Picture more than 512 chars")
        description = self.description.replace(",", "").replace(".", "")
        if len(description) > 175:
            raise ValidationError("Description more than 175 chars")
        if len(self.sales_notes) > 50:
            logger.warning("sales notes too long: %s", self.sales_notes)
            raise ValidationError("SalesNotes more than 50 chars")
        if self.country_of_origin and not is_known_country(self.country_of_origin):
            raise ValidationError("CountryOfOrigin not valid")
        if self.age is not None and self.age.unit:
            allowed = _AGE_VALUES.get(self.age.unit)
            if allowed is None:
                raise ValidationError("Age.Unit is incorrect")
            if self.age.value not in allowed:
                raise ValidationError("Age.Value is incorrect")


@dataclass
class Shop:
    name: str = ""
    company: str = ""
    url: str = ""
    platform: str = ""
    version: str = ""
    agency: str = ""
    email: str = ""
    currencies: list[Currency] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    delivery_options: list[DeliveryOption] | None = None
    cpa: int = 0
    offers: list[Offer] = field(default_factory=list)


@dataclass
class Catalog:
    """The root of a YML document: a shop and the catalogue date."""

    shop: Shop = field(default_factory=Shop)
    date: str = ""

    def set_date(self, when: datetime) -> None:
        self.date = when.strftime(DATE_FORMAT)

    def add_currency(self, currency_id: str, rate: str, plus: float) -> None:
        self.shop.currencies.append(Currency(id=currency_id, rate=rate, plus=plus))

    def add_category(self, category_id: int, parent_id: int, name: str) -> None:
        self.shop.categories.append(
            Category(id=category_id, parent_id=parent_id, name=name)
        )

    def add_delivery_option(
        self, cost: int, days_from: int, days_to: int, order_before: int
    ) -> None:
        if self.shop.delivery_options is None:
            self.shop.delivery_options = []
        self.shop.delivery_options.append(
            make_delivery_option(cost, days_from, days_to, order_before)
        )

    def add_offer(self, offer: Offer) -> None:
        self.shop.offers.append(offer)


def new_yml(name: str, company: str, url: str) -> Catalog:
    """Create a catalogue for a shop, dated now."""
    catalog = Catalog(shop=Shop(name=name, company=company, url=url))
    catalog.set_date(datetime.now())
    return catalog