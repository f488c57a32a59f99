"""Serialisation of a catalogue to a YML (XML) document."""

from __future__ import annotations

import enum
import io
import math
import xml.etree.ElementTree as ET
from decimal import Decimal
from os import PathLike
from typing import IO

from ymlfeed.catalog import Catalog, DeliveryOption, Offer, Shop

HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE yml_catalog SYSTEM "shops.dtd">\n'
)

_INDENT = "\t"

_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _format_float(value: float) -> str:
    """Format a float in shortest form, switching to exponent form like ``%g``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    count = len(text)
    point = count + exponent
    power = point - 1
    prefix = "-" if sign else ""
    if power < -4 or power >= 6:
        mantissa = text[0] + ("." + text[1:] if count > 1 else "")
        exp_sign = "+" if power >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(power):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= count:
        return f"{prefix}{text}{'0' * (point - count)}"
    return f"{prefix}{text[:point]}.{text[point:]}"


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, enum.Enum):
        return value.value == ""
    return not value


def _text(parent: ET.Element, tag: str, value: object) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = _format_value(value)
    return element


def _optional(parent: ET.Element, tag: str, value: object) -> None:
    if not _is_empty(value):
        _text(parent, tag, value)


def _attributes(*pairs: tuple[str, object, bool]) -> dict[str, str]:
    """Build attributes from (name, value, omit_if_empty) triples, in order."""
    return {
        name: _format_value(value)
        for name, value, omit_empty in pairs
        if not (omit_empty and _is_empty(value))
    }


def _delivery_options(options: list[DeliveryOption]) -> ET.Element:
    element = ET.Element("delivery-options")
    for option in options:
        ET.SubElement(
            element,
            "option",
            _attributes(
                ("cost", option.cost, False),
                ("days", option.days, False),
                ("order-before", option.order_before, True),
            ),
        )
    return element


def _offer_element(offer: Offer) -> ET.Element:
    element = ET.Element(
        "offer",
        _attributes(
            ("id", offer.id, False),
            ("bid", offer.bid, True),
            ("cid", offer.cbid, True),
            ("type", offer.type, True),
            ("available", offer.available, False),
        ),
    )
    _optional(element, "url", offer.url)
    _text(element, "price", float(offer.price))
    _optional(element, "oldprice", float(offer.old_price))
    _text(element, "currencyId", offer.currency_id)
    _text(element, "categoryId", offer.category_id)
    _optional(element, "market_category", offer.market_category)
    for picture in offer.pictures:
        _text(element, "picture", picture)
    _optional(element, "store", offer.store)
    _optional(element, "pickup", offer.pickup)
    _optional(element, "delivery", offer.delivery)
    if offer.delivery_options is not None:
        element.append(_delivery_options(offer.delivery_options))
    for tag, value in (
        ("name", offer.name),
        ("typePrefix", offer.type_prefix),
        ("vendor", offer.vendor),
        ("vendorCode", offer.vendor_code),
        ("model", offer.model),
        ("description", offer.description),
        ("sales_notes", offer.sales_notes),
        ("manufacturer_warranty", offer.manufacturer_warranty),
        ("country_of_origin", offer.country_of_origin),
        ("downloadable", offer.downloadable),
        ("adult", offer.adult),
    ):
        _optional(element, tag, value)
    if offer.age is not None:
        age = ET.SubElement(element, "age", {"unit": offer.age.unit})
        age.text = offer.age.value
    for barcode in offer.barcodes:
        _text(element, "barcode", barcode)
    _optional(element, "cpa", offer.cpa)
    _optional(element, "rec", offer.rec)
    _optional(element, "expiry", offer.expiry)
    _optional(element, "weight", float(offer.weight))
    _optional(element, "dimensions", offer.dimensions)
    for param in offer.params:
        node = ET.SubElement(
            element,
            "param",
            _attributes(("name", param.name, False), ("unit", param.unit, True)),
        )
        node.text = param.value
    _optional(element, "count", offer.count)
    _optional(element, "min-quantity", offer.min_quantity)
    return element


def _shop_element(shop: Shop) -> ET.Element:
    element = ET.Element("shop")
    _text(element, "name", shop.name)
    _text(element, "company", shop.company)
    _text(element, "url", shop.url)
    _optional(element, "platform", shop.platform)
    _optional(element, "version", shop.version)
    _optional(element, "agency", shop.agency)
    _optional(element, "email", shop.email)
    currencies = ET.SubElement(element, "currencies")
    for currency in shop.currencies:
        ET.SubElement(
            currencies,
            "currency",
            _attributes(
                ("id", currency.id, False),
                ("rate", currency.rate, False),
                ("plus", float(currency.plus), False),
            ),
        )
    categories = ET.SubElement(element, "categories")
    for category in shop.categories:
        node = ET.SubElement(
            categories,
            "category",
            _attributes(
                ("id", category.id, False),
                ("parentId", category.parent_id, True),
            ),
        )
        node.text = category.name
    if shop.delivery_options is not None:
        element.append(_delivery_options(shop.delivery_options))
    _optional(element, "cpa", shop.cpa)
    offers = ET.SubElement(element, "offers")
    for offer in shop.offers:
        offers.append(_offer_element(offer))
    return element


def to_element(catalog: Catalog) -> ET.Element:
    """Build the XML element tree of a catalogue."""
    root = ET.Element("yml_catalog", {"date": catalog.date})
    root.append(_shop_element(catalog.shop))
    return root


def _is_xml_char(ch: str) -> bool:
    code = ord(ch)
    return (
        code in (0x09, 0x0A, 0x0D)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or 0x10000 <= code <= 0x10FFFF
    )


def _escape(text: str) -> str:
    return "".join(
        _ESCAPES.get(ch) or (ch if _is_xml_char(ch) else "\ufffd") for ch in text
    )


def _serialise(element: ET.Element, depth: int, pretty: bool, out: list[str]) -> None:
    if pretty and depth > 0:
        out.append("\n" + _INDENT * depth)
    attributes = "".join(
        f' {name}="{_escape(value)}"' for name, value in element.attrib.items()
    )
    out.append(f"<{element.tag}{attributes}>")
    if element.text:
        out.append(_escape(element.text))
    children = list(element)
    for child in children:
        _serialise(child, depth + 1, pretty, out)
    if pretty and children:
        out.append("\n" + _INDENT * depth)
    out.append(f"</{element.tag}>")


def to_xml(catalog: Catalog, pretty: bool = False) -> str:
    """Render the whole document, header included; tab-indented if ``pretty``."""
    parts = [HEADER]
    _serialise(to_element(catalog), 0, pretty, parts)
    return "".join(parts)


def export_to_writer(catalog: Catalog, stream: IO, pretty: bool = False) -> None:
    """Write the document to a text or binary stream (UTF-8 for binary)."""
    document = to_xml(catalog, pretty)
    if isinstance(stream, io.TextIOBase):
        stream.write(document)
    else:
        stream.write(document.encode("utf-8"))


def export_to_file(
    catalog: Catalog, filename: str | PathLike[str], pretty: bool = False
) -> None:
    """Create (or truncate) ``filename`` and write the document to it."""
    with open(filename, "wb") as handle:
        export_to_writer(catalog, handle, pretty)