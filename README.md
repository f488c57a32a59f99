# ymlfeed

Build product catalogs in the Yandex Market Language (YML) format, check
offers against the format's limits, and write the catalog out as XML.
It uses only the standard library.

## Installation

```
pip install ymlfeed
```

## Usage

```python
from ymlfeed.catalog import Offer, new_yml
from ymlfeed.export import export_to_file, to_xml

catalog = new_yml("My Shop", "My Shop Ltd", "https://shop.example.com")
catalog.add_currency("RUR", "1", 0)
catalog.add_category(1, 0, "Books")
catalog.add_delivery_option(300, 1, 3, 14)

offer = Offer(id="1001", available=True, price=450.0,
              currency_id="RUR", category_id=1, name="A novel")
offer.add_picture("https://shop.example.com/img/1001.jpg")
offer.add_param("Pages", "", "320")
offer.add_age("year", "16")
offer.validate()          # raises ValidationError on bad data

catalog.add_offer(offer)

print(to_xml(catalog, pretty=True))
export_to_file(catalog, "catalog.xml", pretty=True)
```

## `ymlfeed.catalog`

Dataclasses for the document: `Catalog`, `Shop`, `Offer`, `Currency`,
`Category`, `DeliveryOption`, `Param` and `Age`, plus the `OfferType` enum
(`OfferType.VENDOR_MODEL`, value `"vendor.model"`).

- `new_yml(name, company, url)` creates a `Catalog` for the shop, dated now.
- `Catalog.set_date(when)` sets the date from a `datetime` as `YYYY-MM-DD HH:MM`.
- `Catalog.add_currency(currency_id, rate, plus)`,
  `Catalog.add_category(category_id, parent_id, name)`,
  `Catalog.add_delivery_option(cost, days_from, days_to, order_before)` and
  `Catalog.add_offer(offer)` fill in the shop.
- `Offer.add_picture`, `Offer.add_barcode`, `Offer.add_param(name, unit, value)`
  and `Offer.add_delivery_option(...)` append to the offer.
  `Offer.add_age(unit, value)` sets the age rating only if none is set yet.

### Delivery periods

`delivery_days(days_from, days_to)` caps both ends at 255 and raises the
upper end to the lower one if it is smaller. It returns a single number when
both ends are equal or the upper end is 0, otherwise `"from-to"`:

```python
delivery_days(1, 3)      # "1-3"
delivery_days(5, 0)      # "5"
delivery_days(300, 400)  # "255"
```

`make_delivery_option(cost, days_from, days_to, order_before)` builds a
`DeliveryOption` with that period; a cost of 0 means free delivery.

### Validation

`Offer.validate()` raises `ValidationError` (a `ValueError`) at the first rule
broken:

- the id is longer than 20 characters;
- a `VENDOR_MODEL` offer lacks a vendor or a model;
- the price is zero;
- an old price is set but not above the price;
- the currency id is not exactly 3 characters;
- the category id exceeds 999999999999999999;
- a picture URL is longer than 512 characters;
- the description, with commas and full stops removed, is longer than 175 characters;
- the sales notes are longer than 50 characters (also logged as a warning);
- the country of origin is set but not in the allowed list;
- an age unit is set but is not `year` (values 0, 6, 12, 16, 18) or
  `month` (values 0 to 12).

## `ymlfeed.countries`

`COUNTRIES` is the set of allowed country names (in Russian), and
`is_known_country(name)` tells whether a name is in it, by exact match.

## `ymlfeed.export`

- `to_element(catalog)` gives an `xml.etree.ElementTree.Element` tree.
- `to_xml(catalog, pretty=False)` gives the full document text, starting
  with the XML declaration and the `shops.dtd` doctype (`HEADER`); with
  `pretty` the elements are indented with tabs.
- `export_to_writer(catalog, stream, pretty=False)` writes the document to an
  open stream: as text to a text stream, UTF-8 encoded to a binary one.
- `export_to_file(catalog, filename, pretty=False)` creates or truncates the
  file and writes the document to it.

Empty optional fields are left out of the output; floats are written in
their shortest form (`450.0` becomes `450`).

## What it does not do

`ymlfeed` is a library only: it has no command-line tool, and it writes YML
documents but does not read or parse them.