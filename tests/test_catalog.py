from datetime import datetime

import pytest

from ymlfeed.catalog import (
    Age,
    Catalog,
    DeliveryOption,
    Offer,
    OfferType,
    Param,
    ValidationError,
    delivery_days,
    make_delivery_option,
    new_yml,
)


def valid_offer(**overrides):
    values = dict(id="A1", price=100.0, currency_id="RUR", category_id=1)
    values.update(overrides)
    return Offer(**values)


def test_delivery_days_range():
    assert delivery_days(1, 3) == "1-3"


@pytest.mark.parametrize("days_from,days_to", [(2, 2), (5, 0), (5, 2), (0, 0)])
def test_delivery_days_single(days_from, days_to):
    assert delivery_days(days_from, days_to) == str(days_from)


def test_delivery_days_capped():
    assert delivery_days(300, 400) == "255"
    assert delivery_days(1, 400).endswith("-255")


def test_make_delivery_option():
    option = make_delivery_option(0, 2, 2, 14)
    assert option == DeliveryOption(cost=0, days="2", order_before=14)


def test_set_date_format():
    catalog = Catalog()
    catalog.set_date(datetime(2020, 1, 2, 3, 4, 59))
    assert catalog.date == "2020-01-02 03:04"


def test_new_yml_fills_shop_and_date():
    catalog = new_yml("Shop", "Company", "http://shop.example.com")
    assert catalog.shop.name == "Shop"
    assert catalog.shop.company == "Company"
    assert catalog.shop.url == "http://shop.example.com"
    parsed = datetime.strptime(catalog.date, "%Y-%m-%d %H:%M")
    assert abs((datetime.now() - parsed).total_seconds()) < 120


def test_catalog_builders():
    catalog = Catalog()
    catalog.add_currency("RUR", "1", 0)
    catalog.add_category(2, 1, "Phones")
    assert catalog.shop.delivery_options is None
    catalog.add_delivery_option(300, 1, 3, 0)
    offer = valid_offer()
    catalog.add_offer(offer)
    assert catalog.shop.currencies[0].id == "RUR"
    assert catalog.shop.currencies[0].rate == "1"
    assert catalog.shop.categories[0].parent_id == 1
    assert catalog.shop.categories[0].name == "Phones"
    assert catalog.shop.delivery_options == [make_delivery_option(300, 1, 3, 0)]
    assert catalog.shop.offers == [offer]


def test_offer_builders():
    offer = valid_offer()
    offer.add_picture("http://img.example.com/1.jpg")
    offer.add_barcode("0000000000000")
    offer.add_param("Color", "", "red")
    offer.add_delivery_option(0, 1, 1, 0)
    assert offer.pictures == ["http://img.example.com/1.jpg"]
    assert offer.barcodes == ["0000000000000"]
    assert offer.params == [Param(name="Color", unit="", value="red")]
    assert offer.delivery_options == [make_delivery_option(0, 1, 1, 0)]


def test_add_age_keeps_first():
    offer = valid_offer()
    offer.add_age("year", "6")
    offer.add_age("month", "3")
    assert offer.age == Age(unit="year", value="6")


def test_valid_offer_passes():
    offer = valid_offer(country_of_origin="Россия", old_price=150.0)
    offer.add_age("month", "12")
    assert offer.validate() is None
    assert offer.age.value == "12"


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"id": "x" * 21}, "Id"),
        ({"type": OfferType.VENDOR_MODEL, "vendor": "V"}, "Vendor or Model"),
        ({"price": 0.0}, "Price is zero"),
        ({"old_price": 100.0}, "OldPrice"),
        ({"currency_id": "RU"}, "CurrencyId"),
        ({"category_id": 10**18}, "CategoryId"),
        ({"pictures": ["p" * 513]}, "Picture"),
        ({"description": "d" * 176}, "Description"),
        ({"sales_notes": "s" * 51}, "SalesNotes"),
        ({"country_of_origin": "Atlantis"}, "CountryOfOrigin"),
        ({"age": Age(unit="year", value="7")}, "Age.Value"),
        ({"age": Age(unit="month", value="13")}, "Age.Value"),
        ({"age": Age(unit="week", value="1")}, "Age.Unit"),
    ],
)
def test_validate_errors(overrides, message):
    with pytest.raises(ValidationError, match=message):
        valid_offer(**overrides).validate()


def test_description_ignores_commas_and_periods():
    offer = valid_offer(description="d" * 175 + ",.,.")
    assert offer.validate() is None
    assert len(offer.description) > 175


def test_vendor_model_complete_is_valid():
    offer = valid_offer(type=OfferType.VENDOR_MODEL, vendor="V", model="M")
    assert offer.validate() is None
    assert offer.type.value == "vendor.model"