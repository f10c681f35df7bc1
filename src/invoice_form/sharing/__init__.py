"""
Invoice sharing through URLs.

Modules:
- key_map: The append-only field name -> token table and its reverse
- keys: Recursive key compression and restoration
- links: Share URL generation and parsing
"""

from invoice_form.sharing.key_map import (
    INVOICE_KEY_COMPRESSION_MAP,
    KEY_MAP_VERSION,
    REVERSE_KEY_MAP,
    key_map_json,
    write_key_map,
)
from invoice_form.sharing.keys import compress_keys, restore_keys
from invoice_form.sharing.links import (
    DATA_PARAM,
    LogoNotShareableError,
    ShareError,
    decode_payload,
    encode_payload,
    ensure_shareable,
    generate_share_url,
    load_from_url,
)

__all__ = [
    "DATA_PARAM",
    "INVOICE_KEY_COMPRESSION_MAP",
    "KEY_MAP_VERSION",
    "LogoNotShareableError",
    "REVERSE_KEY_MAP",
    "ShareError",
    "compress_keys",
    "decode_payload",
    "encode_payload",
    "ensure_shareable",
    "generate_share_url",
    "key_map_json",
    "load_from_url",
    "restore_keys",
    "write_key_map",
]
