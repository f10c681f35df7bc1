"""Unit tests for the key compression map."""

import json
from typing import Any

import pytest

from invoice_form.data.defaults import default_invoice_data
from invoice_form.models.invoice import CustomColumn, InvoiceNumber, SavedSeller
from invoice_form.sharing import key_map
from invoice_form.sharing.key_map import (
    INVOICE_KEY_COMPRESSION_MAP,
    REVERSE_KEY_MAP,
    invert_key_map,
    key_map_json,
    write_key_map,
)

# Every token already handed out in shared links; none may ever change.
_PUBLISHED_TOKENS = {
    "language": "a",
    "dateFormat": "b",
    "currency": "c",
    "template": "d",
    "logo": "e",
    "invoiceNumberObject": "f",
    "dateOfIssue": "g",
    "dateOfService": "h",
    "invoiceType": "i",
    "invoiceTypeFieldIsVisible": "j",
    "seller": "k",
    "buyer": "l",
    "items": "m",
    "total": "n",
    "vatTableSummaryIsVisible": "o",
    "paymentMethod": "p",
    "paymentMethodFieldIsVisible": "q",
    "paymentDue": "r",
    "stripePayOnlineUrl": "s",
    "notes": "t",
    "notesFieldIsVisible": "u",
    "personAuthorizedToReceiveFieldIsVisible": "v",
    "personAuthorizedToIssueFieldIsVisible": "w",
    "taxLabelText": "1",
    "label": "x",
    "value": "y",
    "id": "z",
    "name": "A",
    "address": "B",
    "vatNo": "C",
    "vatNoFieldIsVisible": "D",
    "email": "E",
    "accountNumber": "F",
    "accountNumberFieldIsVisible": "G",
    "swiftBic": "H",
    "swiftBicFieldIsVisible": "I",
    "vatNoLabelText": "2",
    "invoiceItemNumberIsVisible": "J",
    "nameFieldIsVisible": "K",
    "typeOfGTU": "L",
    "typeOfGTUFieldIsVisible": "M",
    "amount": "N",
    "amountFieldIsVisible": "O",
    "unit": "P",
    "unitFieldIsVisible": "Q",
    "netPrice": "R",
    "netPriceFieldIsVisible": "S",
    "vat": "T",
    "vatFieldIsVisible": "U",
    "netAmount": "V",
    "netAmountFieldIsVisible": "W",
    "vatAmount": "X",
    "vatAmountFieldIsVisible": "Y",
    "preTaxAmount": "Z",
    "preTaxAmountFieldIsVisible": "0",
    "itemNotes": "3",
    "itemNotesFieldIsVisible": "4",
    "customColumns": "5",
    "header": "6",
    "visible": "7",
    "customFields": "8",
}


def _collect_keys(value: Any, keys: set[str]) -> set[str]:
    if isinstance(value, dict):
        for key, item in value.items():
            keys.add(key)
            if key != "customFields":
                _collect_keys(item, keys)
    elif isinstance(value, list):
        for item in value:
            _collect_keys(item, keys)
    return keys


def test_tokens_are_unique() -> None:
    tokens = list(INVOICE_KEY_COMPRESSION_MAP.values())

    assert len(tokens) == len(set(tokens))
    assert len(REVERSE_KEY_MAP) == len(INVOICE_KEY_COMPRESSION_MAP)


def test_reverse_map_inverts_forward_map() -> None:
    for original, token in INVOICE_KEY_COMPRESSION_MAP.items():
        assert REVERSE_KEY_MAP[token] == original


def test_published_tokens_are_stable() -> None:
    for original, token in _PUBLISHED_TOKENS.items():
        assert INVOICE_KEY_COMPRESSION_MAP[original] == token


def test_new_fields_never_reuse_published_tokens() -> None:
    published = set(_PUBLISHED_TOKENS.values())
    added = {
        original: token
        for original, token in INVOICE_KEY_COMPRESSION_MAP.items()
        if original not in _PUBLISHED_TOKENS
    }

    assert not published & set(added.values())


def test_no_token_collides_with_a_field_name() -> None:
    assert not set(INVOICE_KEY_COMPRESSION_MAP) & set(REVERSE_KEY_MAP)


def test_invert_rejects_shared_tokens() -> None:
    with pytest.raises(ValueError, match="'a'"):
        invert_key_map({"language": "a", "logo": "a"})


def test_maps_are_read_only() -> None:
    with pytest.raises(TypeError):
        INVOICE_KEY_COMPRESSION_MAP["newField"] = "9"  # type: ignore[index]
    with pytest.raises(TypeError):
        REVERSE_KEY_MAP["9"] = "newField"  # type: ignore[index]


def test_every_model_field_has_a_token(invoice_dict: dict) -> None:
    data = default_invoice_data()
    data.logo = "https://example.com/logo.png"
    data.invoice_number_object = InvoiceNumber(label="Invoice", value="1/2024")
    data.stripe_pay_online_url = "https://pay.example.com"
    data.custom_columns = [CustomColumn(id="c1", header="PO", visible=True)]
    data.items[0].item_notes = "note"
    data.items[0].item_notes_field_is_visible = True
    data.items[0].custom_fields = {"c1": "x"}
    profile = SavedSeller.from_seller(data.seller, profile_id="p1")

    keys = _collect_keys(data.to_dict(), set())
    keys |= _collect_keys(profile.to_dict(), set())
    keys |= _collect_keys(invoice_dict, set())

    assert keys <= set(INVOICE_KEY_COMPRESSION_MAP)


def test_key_map_json_publishes_the_table() -> None:
    document = json.loads(key_map_json())

    assert document["version"] == key_map.KEY_MAP_VERSION
    assert document["param"] == "data"
    assert document["keys"] == dict(INVOICE_KEY_COMPRESSION_MAP)


def test_write_key_map_creates_parent_dirs(tmp_path) -> None:
    target = write_key_map(tmp_path / "public" / "key-map.json")

    assert target.exists()
    assert json.loads(target.read_text(encoding="utf-8"))["keys"]["items"] == "m"
