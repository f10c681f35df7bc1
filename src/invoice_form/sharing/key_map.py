"""
Key compression map for share links.

Every field name that can appear in a shared invoice is mapped to a short
token. The table is append-only: tokens already handed out are never
reassigned, even after the field they stood for is removed, or previously
shared links would decode into the wrong fields. New fields take a token
that has never been used and KEY_MAP_VERSION is bumped.

The reverse map is derived from the forward table at import time and the
import fails if two fields share a token.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from invoice_form.lib import objects

KEY_MAP_VERSION = 1

INVOICE_KEY_COMPRESSION_MAP: Mapping[str, str] = MappingProxyType(
    {
        # InvoiceData
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
        # invoiceNumberObject
        "label": "x",
        "value": "y",
        # seller / buyer
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
        # items
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
        # custom columns
        "customColumns": "5",
        "header": "6",
        "visible": "7",
        "customFields": "8",
    }
)


def invert_key_map(key_map: Mapping[str, str]) -> Mapping[str, str]:
    """
    Build the token -> field name map.

    Args:
        key_map: Field name -> token map.

    Returns:
        Read-only token -> field name map.

    Raises:
        ValueError: If a token is assigned to more than one field.
    """
    reverse: dict[str, str] = {}
    for original, token in key_map.items():
        if token in reverse:
            raise ValueError(
                f"Token {token!r} assigned to both {reverse[token]!r} and {original!r}"
            )
        reverse[token] = original
    return MappingProxyType(reverse)


REVERSE_KEY_MAP: Mapping[str, str] = invert_key_map(INVOICE_KEY_COMPRESSION_MAP)


def key_map_document() -> dict:
    """Return the compression map in its published form."""
    return {
        "version": KEY_MAP_VERSION,
        "param": "data",
        "keys": dict(INVOICE_KEY_COMPRESSION_MAP),
    }


def key_map_json(indent: int | None = 2) -> str:
    """Return the published compression map as a JSON string."""
    return objects.to_json(key_map_document(), indent=indent)


def write_key_map(path: str | Path) -> Path:
    """
    Write the published compression map to a file.

    Args:
        path: Destination file; parent directories are created.

    Returns:
        The written path.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(key_map_json() + "\n", encoding="utf-8")
    return target
