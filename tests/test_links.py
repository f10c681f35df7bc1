"""Unit tests for share URL generation and parsing."""

from urllib.parse import urlsplit

import pytest
from lzstring import LZString

from invoice_form.models.invoice import InvoiceData, InvoiceItem, Seller, VatExemption, VatRate
from invoice_form.sharing.links import (
    LogoNotShareableError,
    decode_payload,
    encode_payload,
    ensure_shareable,
    generate_share_url,
    get_query_param,
    load_from_url,
    set_query_param,
)

BASE_URL = "https://invoices.example.com/app/new"


def _consulting_invoice() -> InvoiceData:
    return InvoiceData(
        seller=Seller(name="Acme Corp"),
        items=[
            InvoiceItem(
                name="Consulting",
                amount=10,
                net_price=150,
                vat=VatRate(23),
                net_amount=1500,
                vat_amount=345,
                pre_tax_amount=1845,
            )
        ],
        total=1845,
    )


def test_shared_invoice_opens_unchanged() -> None:
    original = _consulting_invoice()

    url = generate_share_url(original, BASE_URL)
    loaded = load_from_url(url)

    assert loaded is not None
    restored = InvoiceData.from_dict(loaded)
    assert restored.seller.name == "Acme Corp"
    assert restored.items == original.items
    assert restored.total == 1845
    assert restored == original


def test_exemption_code_survives_verbatim() -> None:
    data = {
        "items": [
            {"name": "Export", "amount": 1, "netPrice": 100, "vat": "NP",
             "netAmount": 100, "vatAmount": 7, "preTaxAmount": 107},
        ],
        "total": 107,
    }

    loaded = load_from_url(generate_share_url(data, BASE_URL))

    assert loaded == data
    item = InvoiceData.from_dict(loaded).items[0]
    assert item.vat == VatExemption("NP")
    assert item.vat_amount == 7


def test_full_invoice_round_trips(invoice_dict: dict) -> None:
    assert load_from_url(generate_share_url(invoice_dict, BASE_URL)) == invoice_dict


def test_existing_query_and_fragment_are_preserved() -> None:
    url = "https://example.com/tools/invoice/?lang=pl&ref=a%20b&flag#preview"

    shared = generate_share_url({"total": 1}, url)

    parts = urlsplit(shared)
    assert parts.path == "/tools/invoice/"
    assert parts.fragment == "preview"
    assert parts.query.startswith("lang=pl&ref=a%20b&flag&data=")
    assert shared.startswith("https://example.com/tools/invoice/?lang=pl&ref=a%20b&flag&data=")


def test_existing_data_param_is_replaced_in_place() -> None:
    url = "https://example.com/?a=1&data=stale&b=2&data=older"

    shared = generate_share_url({"total": 1}, url)

    segments = urlsplit(shared).query.split("&")
    assert segments[0] == "a=1"
    assert segments[1].startswith("data=")
    assert segments[2] == "b=2"
    assert len(segments) == 3
    assert load_from_url(shared) == {"total": 1}


def test_share_url_is_deterministic(invoice_dict: dict) -> None:
    assert generate_share_url(invoice_dict, BASE_URL) == generate_share_url(
        invoice_dict, BASE_URL
    )


def test_data_value_is_percent_encoded() -> None:
    value = get_query_param(set_query_param(BASE_URL, "data", "a+b$c-d"), "data")
    raw = urlsplit(set_query_param(BASE_URL, "data", "a+b$c-d")).query

    assert raw == "data=a%2Bb%24c-d"
    assert value == "a+b$c-d"


def test_unencoded_payload_is_accepted(invoice_dict: dict) -> None:
    encoded = encode_payload(invoice_dict)

    assert load_from_url(f"{BASE_URL}?data={encoded}") == invoice_dict


def test_url_without_data_returns_none() -> None:
    assert load_from_url(BASE_URL) is None
    assert load_from_url(f"{BASE_URL}?lang=en#data=x") is None
    assert load_from_url("") is None
    assert load_from_url(None) is None


def test_empty_data_returns_none() -> None:
    assert load_from_url(f"{BASE_URL}?data=") is None
    assert load_from_url(f"{BASE_URL}?data") is None


@pytest.mark.parametrize(
    "garbage",
    ["!!!not*valid!!!", "abc", "%E2%9C%93%E2%9C%93", "N4Ig", "~~~", "0000000000"],
)
def test_garbage_data_returns_none(garbage: str) -> None:
    assert load_from_url(f"{BASE_URL}?data={garbage}") is None


def test_truncated_payload_returns_none(invoice_dict: dict) -> None:
    encoded = encode_payload(invoice_dict)

    assert decode_payload(encoded[: len(encoded) // 2]) is None


def test_non_object_json_returns_none() -> None:
    lz = LZString()

    assert decode_payload(lz.compressToEncodedURIComponent("[1, 2]")) is None
    assert decode_payload(lz.compressToEncodedURIComponent("42")) is None
    assert decode_payload(lz.compressToEncodedURIComponent("not json")) is None


def test_embedded_logo_is_not_shareable() -> None:
    with pytest.raises(LogoNotShareableError, match="Remove the logo"):
        ensure_shareable({"logo": "data:image/png;base64,iVBORw0KGgo="})
    with pytest.raises(LogoNotShareableError):
        ensure_shareable(InvoiceData(logo="data:image/svg+xml;utf8,<svg/>"))


def test_linked_logo_is_shareable() -> None:
    ensure_shareable({"logo": "https://example.com/logo.png"})
    ensure_shareable({})
    ensure_shareable(InvoiceData())


# {"c":"PLN"} compressed by the browser client's lz-string.
_BROWSER_PAYLOAD = "N4IgxiBcIAoDIDkQF8g"


def test_browser_link_decodes() -> None:
    assert LZString().decompressFromEncodedURIComponent(_BROWSER_PAYLOAD) == '{"c":"PLN"}'
    assert load_from_url(f"{BASE_URL}?data={_BROWSER_PAYLOAD}") == {"currency": "PLN"}


def test_encoding_matches_browser_client() -> None:
    assert encode_payload({"currency": "PLN"}) == _BROWSER_PAYLOAD


def test_text_outside_the_bmp_round_trips() -> None:
    data = {"notes": "ok 😀 𝔘", "seller": {"name": "Café 🚀"}, "items": []}

    assert load_from_url(generate_share_url(data, BASE_URL)) == data


def test_text_outside_the_bmp_is_compressed_as_utf16_units() -> None:
    encoded = encode_payload({"notes": "😀"})

    assert LZString().decompressFromEncodedURIComponent(encoded) == '{"t":"\ud83d\ude00"}'


def test_unpaired_surrogate_returns_none() -> None:
    encoded = LZString().compressToEncodedURIComponent('{"t":"\ud83d"}')

    assert decode_payload(encoded) is None
