"""
Reflex state management for the Invoice Form.

This module contains the application state class that loads the invoice
through the form service, applies edits, autosaves them and builds share
links.
"""

import json
from dataclasses import replace
from typing import Any

import reflex as rx

from invoice_form.lib import logs
from invoice_form.models.invoice import InvoiceData, InvoiceItem, parse_number, parse_vat
from invoice_form.models.reflex_models import ItemRowModel, item_to_row_model
from invoice_form.services import get_form_service
from invoice_form.sharing.links import ShareError
from invoice_form.utils.calculations import recalculate_invoice
from invoice_form.utils.formatting import format_currency

LOG = logs.logger(__file__)

APP_TITLE = "Invoice Form"
APP_SUBTITLE = "Fill in the invoice, download it as PDF or share it as a link."

_NUMERIC_ITEM_FIELDS = {"amount": "amount", "net_price": "net_price"}


class InvoiceFormState(rx.State):
    """
    Main application state for the Invoice Form.

    The full invoice is kept as its dictionary form; the remaining vars are
    display projections refreshed after every change.
    """

    invoice: dict[str, Any] = {}
    items: list[ItemRowModel] = []
    seller_name: str = ""
    buyer_name: str = ""
    currency: str = "EUR"
    total_display: str = ""
    source: str = ""
    share_url: str = ""
    is_loading: bool = True

    @rx.event
    def on_load(self):
        """Event handler for page load: run the URL -> storage -> defaults chain."""
        self.is_loading = True
        try:
            loaded = get_form_service().load(self._page_url())
            self.source = loaded.source
            self._show(loaded.data)
        finally:
            self.is_loading = False

    @rx.event
    def change_seller_name(self, value: str):
        data = self._current()
        data.seller.name = value
        self._commit(data)

    @rx.event
    def change_buyer_name(self, value: str):
        data = self._current()
        data.buyer.name = value
        self._commit(data)

    @rx.event
    def change_currency(self, value: str):
        self._commit(replace(self._current(), currency=value))

    @rx.event
    def set_item_field(self, index: int, field: str, value: str):
        """
        Apply an edit to one cell of the items table.

        Args:
            index: Item position.
            field: One of name, unit, amount, net_price, vat.
            value: Raw input text.
        """
        data = self._current()
        if not 0 <= index < len(data.items):
            LOG.warning("Ignoring edit of missing item - index:%s", index)
            return
        item = data.items[index]
        if field in _NUMERIC_ITEM_FIELDS:
            item = replace(item, **{_NUMERIC_ITEM_FIELDS[field]: parse_number(value) or 0})
        elif field == "vat":
            item = replace(item, vat=parse_vat(value))
        elif field in ("name", "unit"):
            item = replace(item, **{field: value})
        else:
            LOG.warning("Ignoring edit of unknown item field - field:%s", field)
            return
        data.items[index] = item
        self._commit(data)

    @rx.event
    def add_item(self):
        data = self._current()
        data.items.append(InvoiceItem())
        self._commit(data)

    @rx.event
    def remove_item(self, index: int):
        data = self._current()
        if 0 <= index < len(data.items):
            del data.items[index]
            self._commit(data)

    @rx.event
    def share(self):
        """Build a share link, copy it and put it in the address bar."""
        try:
            url = get_form_service().share(self._current(), self._page_url())
        except ShareError as exc:
            LOG.info("Share rejected: %s", exc)
            return rx.toast.error(str(exc))
        self.share_url = url
        return [
            rx.set_clipboard(url),
            rx.call_script(f"window.history.replaceState(null, '', {json.dumps(url)})"),
            rx.toast.success("Invoice link copied to clipboard!"),
        ]

    @rx.event
    def clear(self):
        """Forget stored data and start over from the defaults."""
        service = get_form_service()
        service.clear()
        loaded = service.load(None)
        self.source = loaded.source
        self.share_url = ""
        self._show(loaded.data)

    def _page_url(self) -> str:
        return self.router.page.full_raw_path

    def _current(self) -> InvoiceData:
        return InvoiceData.from_dict(self.invoice)

    def _commit(self, data: InvoiceData) -> None:
        """Recompute derived amounts, autosave and refresh the view."""
        data = recalculate_invoice(data)
        get_form_service().save(data)
        self._show(data)

    def _show(self, data: InvoiceData) -> None:
        self.invoice = data.to_dict()
        self.items = [item_to_row_model(item) for item in data.items]
        self.seller_name = data.seller.name
        self.buyer_name = data.buyer.name
        self.currency = data.currency
        self.total_display = format_currency(data.total, data.currency)
