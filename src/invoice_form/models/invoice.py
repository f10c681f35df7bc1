"""
Invoice domain models.

This module defines the invoice data structures that mirror the JSON shape
kept in local storage and packed into share links. The hierarchy is:

    InvoiceData
    ├── InvoiceNumber (label, value)
    ├── Seller / Buyer (name, address, tax number, visibility flags)
    ├── InvoiceItem[] (quantity, net price, VAT, derived amounts)
    └── CustomColumn[] (extra item columns shown on the PDF)

VAT is a tagged variant: a numeric rate (VatRate) or an exemption code such
as "NP" or "zw" (VatExemption). Derived item amounts are stored as-is; use
invoice_form.utils.calculations to recompute them.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from invoice_form.lib import objects
from invoice_form.models.common import JsonModel, json_field

# Numeric prefix accepted by the VAT input, e.g. "23", "8.5", "23 %"
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_number(value: float) -> int | float:
    """Return integral floats as int so they serialize without a fraction."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_number(text: str | None) -> int | float | None:
    """
    Parse the leading number of a form input.

    Args:
        text: Raw input text.

    Returns:
        The parsed number, or None when the text does not start with one.
    """
    if not text:
        return None
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return None
    return to_number(float(match.group(0)))


def as_number(value: Any, default: int | float = 0) -> int | float:
    """
    Read a stored numeric field.

    Numbers are kept, numeric text is parsed and anything else becomes
    default, so a hand-edited link cannot break the arithmetic.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        parsed = parse_number(value)
        return default if parsed is None else parsed
    return default


def _mappings(value: Any) -> list[Mapping[str, Any]]:
    """Return the object entries of a stored list; other shapes hold none."""
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, Mapping)]


@dataclass(frozen=True, slots=True)
class VatRate:
    """A percentage VAT rate."""

    rate: int | float

    def amount_of(self, net_amount: float) -> float:
        """Return the VAT due on a net amount."""
        return net_amount * self.rate / 100

    def to_value(self) -> int | float:
        return self.rate

    def __str__(self) -> str:
        return f"{self.rate}%"


@dataclass(frozen=True, slots=True)
class VatExemption:
    """A non-numeric VAT code; no VAT is charged."""

    code: str

    def amount_of(self, net_amount: float) -> float:
        """Return the VAT due on a net amount (always zero)."""
        return 0

    def to_value(self) -> str:
        return self.code

    def __str__(self) -> str:
        return self.code


Vat = VatRate | VatExemption


def vat_from_value(value: Any) -> Vat:
    """
    Convert a stored VAT value into its variant.

    Stored numbers become rates; anything else is kept verbatim as an
    exemption code, even when the text looks numeric.
    """
    if isinstance(value, (VatRate, VatExemption)):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return VatRate(value)
    return VatExemption("" if value is None else str(value))


def parse_vat(text: str) -> Vat:
    """
    Convert the VAT form input into its variant.

    Input starting with a number is a rate; any other text is an exemption
    code.
    """
    rate = parse_number(text)
    if rate is None:
        return VatExemption(text)
    return VatRate(rate)


@dataclass(slots=True)
class InvoiceNumber(JsonModel):
    """Invoice number with its printed label."""

    label: str = "Invoice"
    value: str = ""
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(slots=True)
class CustomColumn(JsonModel):
    """An additional item column defined by the user."""

    id: str = ""
    header: str = ""
    visible: bool = True
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


_ITEM_NUMBER_DEFAULTS = {
    "amount": 1,
    "net_price": 0,
    "net_amount": 0,
    "vat_amount": 0,
    "pre_tax_amount": 0,
}


@dataclass(slots=True)
class InvoiceItem(JsonModel):
    """
    Represents a single invoice line.

    net_amount, vat_amount and pre_tax_amount are derived from amount,
    net_price and vat; they are kept as loaded so a shared invoice shows
    exactly what its author saw.
    """

    invoice_item_number_is_visible: bool = True
    name: str = ""
    name_field_is_visible: bool = True
    type_of_gtu: str = json_field("", key="typeOfGTU")
    type_of_gtu_field_is_visible: bool = json_field(
        True, key="typeOfGTUFieldIsVisible"
    )
    amount: int | float = 1
    amount_field_is_visible: bool = True
    unit: str = "pcs"
    unit_field_is_visible: bool = True
    net_price: int | float = 0
    net_price_field_is_visible: bool = True
    vat: Vat = VatRate(23)
    vat_field_is_visible: bool = True
    net_amount: int | float = 0
    net_amount_field_is_visible: bool = True
    vat_amount: int | float = 0
    vat_amount_field_is_visible: bool = True
    pre_tax_amount: int | float = 0
    pre_tax_amount_field_is_visible: bool = True
    item_notes: str | None = json_field(optional=True)
    item_notes_field_is_visible: bool | None = json_field(optional=True)
    custom_fields: dict[str, str] | None = json_field(optional=True)
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _load_field(cls, name: str, value: Any) -> Any:
        if name == "vat":
            return vat_from_value(value)
        if name in _ITEM_NUMBER_DEFAULTS:
            return as_number(value, _ITEM_NUMBER_DEFAULTS[name])
        if name == "custom_fields":
            return dict(value) if isinstance(value, Mapping) else None
        return value


@dataclass(slots=True)
class Party(JsonModel):
    """Fields shared by the seller and the buyer."""

    id: str | None = json_field(optional=True)
    name: str = ""
    address: str = ""
    vat_no: str | None = json_field(optional=True)
    vat_no_label_text: str = "VAT no"
    vat_no_field_is_visible: bool = True
    email: str = ""
    notes: str | None = json_field(optional=True)
    notes_field_is_visible: bool = True
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(slots=True)
class Buyer(Party):
    """The invoiced party."""


@dataclass(slots=True)
class Seller(Party):
    """The issuing party, with the bank details printed for payment."""

    account_number: str | None = json_field(optional=True)
    account_number_field_is_visible: bool = True
    swift_bic: str | None = json_field(optional=True)
    swift_bic_field_is_visible: bool = True


@dataclass(slots=True)
class SavedSeller(Seller):
    """A seller profile kept in the local profile list; id is mandatory."""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("SavedSeller requires an id")

    @classmethod
    def from_seller(cls, seller: Seller, profile_id: str | None = None) -> "SavedSeller":
        """Create a profile from form data, generating an id when needed."""
        data = seller.to_dict()
        data["id"] = profile_id or seller.id or objects.generate_id()
        return cls.from_dict(data)


@dataclass(slots=True)
class SavedBuyer(Buyer):
    """A buyer profile kept in the local profile list; id is mandatory."""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("SavedBuyer requires an id")

    @classmethod
    def from_buyer(cls, buyer: Buyer, profile_id: str | None = None) -> "SavedBuyer":
        """Create a profile from form data, generating an id when needed."""
        data = buyer.to_dict()
        data["id"] = profile_id or buyer.id or objects.generate_id()
        return cls.from_dict(data)


@dataclass(slots=True)
class InvoiceData(JsonModel):
    """
    Complete state of the invoice form.

    This is the object persisted locally and packed into share links.
    """

    language: str = "en"
    date_format: str = "YYYY-MM-DD"
    currency: str = "EUR"
    template: str = "default"
    logo: str | None = json_field(optional=True)
    invoice_number_object: InvoiceNumber | None = json_field(optional=True)
    tax_label_text: str = "VAT"
    date_of_issue: str = ""
    date_of_service: str = ""
    invoice_type: str | None = json_field(optional=True)
    invoice_type_field_is_visible: bool = True
    seller: Seller = json_field(default_factory=Seller)
    buyer: Buyer = json_field(default_factory=Buyer)
    items: list[InvoiceItem] = json_field(default_factory=list)
    total: int | float = 0
    vat_table_summary_is_visible: bool = True
    payment_method: str | None = json_field(optional=True)
    payment_method_field_is_visible: bool = True
    payment_due: str = ""
    stripe_pay_online_url: str | None = json_field(optional=True)
    notes: str | None = json_field(optional=True)
    notes_field_is_visible: bool = True
    person_authorized_to_receive_field_is_visible: bool = True
    person_authorized_to_issue_field_is_visible: bool = True
    custom_columns: list[CustomColumn] | None = json_field(optional=True)
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def has_embedded_logo(self) -> bool:
        """Return True when the logo is an inline data: URI image."""
        return bool(self.logo) and self.logo.startswith("data:")

    @classmethod
    def _load_field(cls, name: str, value: Any) -> Any:
        if name == "seller":
            return Seller.from_dict(value)
        if name == "buyer":
            return Buyer.from_dict(value)
        if name == "items":
            return [InvoiceItem.from_dict(item) for item in _mappings(value)]
        if name == "invoice_number_object":
            return InvoiceNumber.from_dict(value) if isinstance(value, Mapping) else None
        if name == "custom_columns":
            if not isinstance(value, list):
                return None
            return [CustomColumn.from_dict(column) for column in _mappings(value)]
        if name == "total":
            return as_number(value)
        return value
