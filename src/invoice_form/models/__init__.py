"""
Data models for the Invoice Form.

This package provides:
- Invoice domain models (InvoiceData, InvoiceItem, Seller, Buyer, etc.)
- The VAT variant (VatRate, VatExemption)
- Closed vocabularies offered by the form selectors
- JSON serialization through to_dict/from_dict

All models use Python dataclasses for type safety and IDE support.
"""

from invoice_form.models.common import (
    CURRENCY_SYMBOLS,
    CURRENCY_TO_LABEL,
    LANGUAGE_TO_LABEL,
    SUPPORTED_CURRENCIES,
    SUPPORTED_DATE_FORMATS,
    SUPPORTED_LANGUAGES,
    SUPPORTED_TEMPLATES,
    TEMPLATE_TO_LABEL,
    AccordionState,
    JsonModel,
)
from invoice_form.models.invoice import (
    Buyer,
    CustomColumn,
    InvoiceData,
    InvoiceItem,
    InvoiceNumber,
    Party,
    SavedBuyer,
    SavedSeller,
    Seller,
    Vat,
    VatExemption,
    VatRate,
    as_number,
    parse_number,
    parse_vat,
    to_number,
    vat_from_value,
)

__all__ = [
    "AccordionState",
    "Buyer",
    "CURRENCY_SYMBOLS",
    "CURRENCY_TO_LABEL",
    "CustomColumn",
    "InvoiceData",
    "InvoiceItem",
    "InvoiceNumber",
    "JsonModel",
    "LANGUAGE_TO_LABEL",
    "Party",
    "SUPPORTED_CURRENCIES",
    "SUPPORTED_DATE_FORMATS",
    "SUPPORTED_LANGUAGES",
    "SUPPORTED_TEMPLATES",
    "SavedBuyer",
    "SavedSeller",
    "Seller",
    "TEMPLATE_TO_LABEL",
    "Vat",
    "VatExemption",
    "VatRate",
    "as_number",
    "parse_number",
    "parse_vat",
    "to_number",
    "vat_from_value",
]
