"""
Reflex-compatible models for the Invoice Form.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components. Numbers are carried as display strings.
"""

import reflex as rx

from invoice_form.models.invoice import InvoiceItem
from invoice_form.utils.formatting import format_number


class ItemRowModel(rx.Base):
    """One editable line of the items table."""

    name: str = ""
    amount: str = "1"
    unit: str = "pcs"
    net_price: str = "0"
    vat: str = "23"
    net_amount: str = "0.00"
    vat_amount: str = "0.00"
    pre_tax_amount: str = "0.00"


def item_to_row_model(item: InvoiceItem) -> ItemRowModel:
    """
    Convert an invoice item into its table row.

    Args:
        item: InvoiceItem to display.

    Returns:
        ItemRowModel instance.
    """
    return ItemRowModel(
        name=item.name,
        amount=str(item.amount),
        unit=item.unit,
        net_price=str(item.net_price),
        vat=str(item.vat.to_value()),
        net_amount=format_number(item.net_amount),
        vat_amount=format_number(item.vat_amount),
        pre_tax_amount=format_number(item.pre_tax_amount),
    )
