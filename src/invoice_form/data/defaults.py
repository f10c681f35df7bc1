"""Hard-coded default invoice, the last tier of the load chain."""

from datetime import date

from invoice_form.models.invoice import (
    Buyer,
    InvoiceData,
    InvoiceItem,
    InvoiceNumber,
    Seller,
    VatRate,
)
from invoice_form.utils.dates import add_days, default_service_date, today

DEFAULT_PAYMENT_TERM_DAYS = 14


def default_invoice_data(now: date | None = None) -> InvoiceData:
    """
    Build a fresh invoice with the form defaults.

    Args:
        now: Date treated as today; defaults to the current date.

    Returns:
        InvoiceData with one empty line item and dates relative to now.
    """
    issued = today(now)
    return InvoiceData(
        language="en",
        date_format="YYYY-MM-DD",
        currency="EUR",
        template="default",
        tax_label_text="VAT",
        invoice_number_object=InvoiceNumber(
            label="Invoice", value=f"1/{(now or date.today()).year}"
        ),
        date_of_issue=issued,
        date_of_service=default_service_date(now),
        payment_due=add_days(issued, DEFAULT_PAYMENT_TERM_DAYS),
        invoice_type="",
        seller=Seller(vat_no="", account_number="", swift_bic="", notes=""),
        buyer=Buyer(vat_no="", notes=""),
        items=[InvoiceItem(amount=1, unit="pcs", net_price=0, vat=VatRate(23))],
        total=0,
        payment_method="Bank Transfer",
        notes="",
    )
