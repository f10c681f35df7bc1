"""
Line item and total arithmetic.

    net_amount     = amount * net_price
    vat_amount     = net_amount * rate / 100   (0 for an exemption code)
    pre_tax_amount = net_amount + vat_amount
    total          = sum of pre_tax_amount over all items

Values are not rounded; rounding happens when amounts are displayed.
"""

from dataclasses import dataclass, replace
from typing import Iterable

from invoice_form.models.invoice import InvoiceData, InvoiceItem, Vat, to_number


@dataclass(frozen=True, slots=True)
class ItemAmounts:
    """The derived amounts of one invoice line."""

    net_amount: int | float
    vat_amount: int | float
    pre_tax_amount: int | float


def calculate_item_amounts(amount: float, net_price: float, vat: Vat) -> ItemAmounts:
    """
    Compute the derived amounts of an invoice line.

    Args:
        amount: Quantity.
        net_price: Unit price before tax.
        vat: VAT rate or exemption code.

    Returns:
        ItemAmounts with net, VAT and gross amounts.
    """
    net_amount = amount * net_price
    vat_amount = vat.amount_of(net_amount)
    return ItemAmounts(
        net_amount=to_number(net_amount),
        vat_amount=to_number(vat_amount),
        pre_tax_amount=to_number(net_amount + vat_amount),
    )


def recalculate_item(item: InvoiceItem) -> InvoiceItem:
    """Return a copy of item with its derived amounts recomputed."""
    amounts = calculate_item_amounts(item.amount, item.net_price, item.vat)
    return replace(
        item,
        net_amount=amounts.net_amount,
        vat_amount=amounts.vat_amount,
        pre_tax_amount=amounts.pre_tax_amount,
    )


def calculate_total(items: Iterable[InvoiceItem]) -> int | float:
    """Sum the gross amount of every item as stored."""
    return to_number(sum((item.pre_tax_amount for item in items), 0))


def recalculate_invoice(data: InvoiceData) -> InvoiceData:
    """Return a copy of data with every item and the total recomputed."""
    items = [recalculate_item(item) for item in data.items]
    return replace(data, items=items, total=calculate_total(items))
