"""
Shared pytest fixtures.

``invoice_dict`` is a complete invoice in its JSON form, with every key the
models write, so model round trips can be compared for exact equality.
"""

import copy

import pytest

from invoice_form import services
from invoice_form.services.invoice_form_service import InvoiceFormService
from invoice_form.services.storage_memory import MemoryInvoiceStorage

_ITEM = {
    "invoiceItemNumberIsVisible": True,
    "name": "Consulting",
    "nameFieldIsVisible": True,
    "typeOfGTU": "",
    "typeOfGTUFieldIsVisible": True,
    "amount": 10,
    "amountFieldIsVisible": True,
    "unit": "h",
    "unitFieldIsVisible": True,
    "netPrice": 150,
    "netPriceFieldIsVisible": True,
    "vat": 23,
    "vatFieldIsVisible": True,
    "netAmount": 1500,
    "netAmountFieldIsVisible": True,
    "vatAmount": 345,
    "vatAmountFieldIsVisible": True,
    "preTaxAmount": 1845,
    "preTaxAmountFieldIsVisible": True,
}

_EXEMPT_ITEM = {
    **_ITEM,
    "name": "Training (exempt)",
    "typeOfGTU": "GTU_12",
    "amount": 2,
    "netPrice": 400,
    "vat": "NP",
    "netAmount": 800,
    "vatAmount": 0,
    "preTaxAmount": 800,
    "itemNotes": "Exempt under art. 113",
    "itemNotesFieldIsVisible": False,
    "customFields": {"col-po": "PO-7781", "col-site": "Kraków"},
}

INVOICE = {
    "language": "pl",
    "dateFormat": "DD.MM.YYYY",
    "currency": "PLN",
    "template": "stripe",
    "invoiceNumberObject": {"label": "Faktura", "value": "7/2024"},
    "taxLabelText": "VAT",
    "dateOfIssue": "2024-05-10",
    "dateOfService": "2024-04-30",
    "invoiceType": "Reverse charge",
    "invoiceTypeFieldIsVisible": False,
    "seller": {
        "name": "Acme Corp",
        "address": "1 Main St\nSpringfield",
        "vatNo": "PL1234567890",
        "vatNoLabelText": "NIP",
        "vatNoFieldIsVisible": True,
        "email": "billing@acme.example",
        "notes": "",
        "notesFieldIsVisible": False,
        "accountNumber": "PL61 1090 1014 0000 0712 1981 2874",
        "accountNumberFieldIsVisible": True,
        "swiftBic": "WBKPPLPP",
        "swiftBicFieldIsVisible": True,
    },
    "buyer": {
        "id": "lx2k9f0abc1234",
        "name": "Zażółć Gęślą Sp. z o.o.",
        "address": "ul. Długa 5, Gdańsk",
        "vatNo": "",
        "vatNoLabelText": "VAT no",
        "vatNoFieldIsVisible": False,
        "email": "",
        "notesFieldIsVisible": True,
    },
    "items": [_ITEM, _EXEMPT_ITEM],
    "total": 2645,
    "vatTableSummaryIsVisible": True,
    "paymentMethod": "Bank Transfer",
    "paymentMethodFieldIsVisible": True,
    "paymentDue": "2024-05-24",
    "stripePayOnlineUrl": "https://pay.example.com/inv/7?x=1&y=2",
    "notes": "Thank you!",
    "notesFieldIsVisible": True,
    "personAuthorizedToReceiveFieldIsVisible": False,
    "personAuthorizedToIssueFieldIsVisible": True,
    "customColumns": [
        {"id": "col-po", "header": "PO number", "visible": True},
        {"id": "col-site", "header": "Site", "visible": False},
    ],
}


@pytest.fixture
def invoice_dict() -> dict:
    return copy.deepcopy(INVOICE)


@pytest.fixture
def storage() -> MemoryInvoiceStorage:
    return MemoryInvoiceStorage()


@pytest.fixture
def form_service(storage: MemoryInvoiceStorage) -> InvoiceFormService:
    return InvoiceFormService(storage)


@pytest.fixture(autouse=True)
def _reset_service_cache():
    services.get_storage.cache_clear()
    yield
    services.get_storage.cache_clear()
