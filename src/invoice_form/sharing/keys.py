"""Recursive key remapping between full field names and share-link tokens."""

from typing import Any, Mapping

from invoice_form.sharing.key_map import INVOICE_KEY_COMPRESSION_MAP, REVERSE_KEY_MAP


def compress_keys(value: Any) -> Any:
    """
    Replace every known field name with its token.

    Lists and tuples are traversed element by element, mappings get new keys
    with their values remapped recursively, and all other values pass through
    untouched. Keys missing from the map are kept as they are. The input is
    not modified.
    """
    return _remap(value, INVOICE_KEY_COMPRESSION_MAP)


def restore_keys(value: Any) -> Any:
    """Inverse of compress_keys: replace every known token with its field name."""
    return _remap(value, REVERSE_KEY_MAP)


def _remap(value: Any, key_map: Mapping[str, str]) -> Any:
    if isinstance(value, Mapping):
        return {
            key_map.get(key, key): _remap(item, key_map) for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_remap(item, key_map) for item in value]
    return value
