"""
Invoice form components for Reflex.

Builds the parties, line items and totals sections bound to
InvoiceFormState.
"""

import reflex as rx

from invoice_form.models.common import SUPPORTED_CURRENCIES
from invoice_form.models.reflex_models import ItemRowModel
from invoice_form.state import InvoiceFormState


def invoice_form() -> rx.Component:
    """
    Build the editable invoice form.

    Returns:
        The form card component.
    """
    return rx.box(
        _general_section(),
        rx.box(class_name="divider"),
        _parties_section(),
        rx.box(class_name="divider"),
        _items_section(),
        rx.box(class_name="divider"),
        _totals(),
        class_name="card form-card",
    )


def _general_section() -> rx.Component:
    return rx.box(
        rx.text("Currency", class_name="label"),
        rx.select(
            list(SUPPORTED_CURRENCIES),
            value=InvoiceFormState.currency,
            on_change=InvoiceFormState.change_currency,
        ),
        class_name="form-section",
    )


def _parties_section() -> rx.Component:
    """Return the seller and buyer name inputs."""
    return rx.box(
        _text_input("Seller", InvoiceFormState.seller_name, InvoiceFormState.change_seller_name),
        _text_input("Buyer", InvoiceFormState.buyer_name, InvoiceFormState.change_buyer_name),
        class_name="party-grid",
    )


def _text_input(label: str, value, on_change) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        rx.input(value=value, on_change=on_change, debounce=300),
        class_name="form-field",
    )


def _items_section() -> rx.Component:
    """Return the line items table with its add button."""
    return rx.box(
        rx.foreach(InvoiceFormState.items, _item_row),
        rx.button(
            rx.icon("plus", size=16),
            "Add item",
            on_click=InvoiceFormState.add_item,
            class_name="button ghost",
        ),
        class_name="line-items",
    )


def _item_row(item: ItemRowModel, index: int) -> rx.Component:
    return rx.box(
        _item_input(item.name, index, "name", "Name"),
        _item_input(item.amount, index, "amount", "Amount"),
        _item_input(item.unit, index, "unit", "Unit"),
        _item_input(item.net_price, index, "net_price", "Net price"),
        _item_input(item.vat, index, "vat", "VAT"),
        rx.text(item.net_amount, class_name="amount"),
        rx.text(item.vat_amount, class_name="amount"),
        rx.text(item.pre_tax_amount, class_name="amount strong"),
        rx.button(
            rx.icon("trash-2", size=16),
            on_click=InvoiceFormState.remove_item(index),
            class_name="button ghost danger",
            title="Remove item",
        ),
        class_name="line-item",
    )


def _item_input(value, index: int, field: str, placeholder: str) -> rx.Component:
    return rx.input(
        value=value,
        placeholder=placeholder,
        on_change=lambda text: InvoiceFormState.set_item_field(index, field, text),
        debounce=300,
    )


def _totals() -> rx.Component:
    return rx.box(
        rx.text("Total", class_name="muted"),
        rx.heading(InvoiceFormState.total_display, size="5", as_="h3"),
        class_name="totals",
    )
