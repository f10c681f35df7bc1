"""Utility functions shared across the invoice form package."""

from invoice_form.utils.calculations import (
    ItemAmounts,
    calculate_item_amounts,
    calculate_total,
    recalculate_invoice,
    recalculate_item,
)
from invoice_form.utils.dates import (
    add_days,
    default_service_date,
    end_of_month,
    format_date,
    parse_iso_date,
    today,
)
from invoice_form.utils.formatting import format_currency, format_number

__all__ = [
    "ItemAmounts",
    "add_days",
    "calculate_item_amounts",
    "calculate_total",
    "default_service_date",
    "end_of_month",
    "format_currency",
    "format_date",
    "format_number",
    "parse_iso_date",
    "recalculate_invoice",
    "recalculate_item",
    "today",
]
