"""Unit tests for the Reflex display models."""

from invoice_form.models.invoice import InvoiceItem, VatExemption, VatRate
from invoice_form.models.reflex_models import item_to_row_model


def test_item_row_shows_inputs_and_formatted_amounts() -> None:
    item = InvoiceItem(
        name="Consulting",
        amount=10,
        unit="h",
        net_price=150,
        vat=VatRate(23),
        net_amount=1500,
        vat_amount=345,
        pre_tax_amount=1845,
    )

    row = item_to_row_model(item)

    assert row.name == "Consulting"
    assert row.amount == "10"
    assert row.net_price == "150"
    assert row.vat == "23"
    assert row.net_amount == "1 500.00"
    assert row.pre_tax_amount == "1 845.00"


def test_item_row_shows_exemption_code() -> None:
    row = item_to_row_model(InvoiceItem(vat=VatExemption("NP")))

    assert row.vat == "NP"
    assert row.vat_amount == "0.00"
