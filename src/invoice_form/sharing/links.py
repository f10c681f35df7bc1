"""
Share-link transport.

Packs a complete invoice into the ``data`` query parameter of a URL and
unpacks it again:

    invoice -> compress keys -> compact JSON -> lz-string -> ?data=...
    ?data=... -> lz-string -> JSON -> restore keys -> invoice

The string stage is lz-string's URI-safe variant, so links stay compatible
with every client that uses the same key map. A missing, truncated or
hand-edited parameter is treated as "no shared invoice" and never raises.
"""

from typing import Any, Mapping
from urllib.parse import quote, unquote_plus, urlsplit, urlunsplit

from lzstring import LZString

from invoice_form.lib import logs, objects
from invoice_form.sharing.keys import compress_keys, restore_keys

LOG = logs.logger(__file__)

DATA_PARAM = "data"

_LZ = LZString()


class ShareError(Exception):
    """Base class for errors raised while sharing an invoice."""


class LogoNotShareableError(ShareError):
    """Raised when an invoice embeds its logo as a data: URI."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "Unable to share invoice with logo. Remove the logo first."
        )


def ensure_shareable(data: Any) -> None:
    """
    Check that an invoice can be packed into a link.

    An embedded logo image runs to hundreds of kilobytes and would produce a
    URL no browser or server accepts.

    Raises:
        LogoNotShareableError: If the logo is a data: URI.
    """
    logo = _as_mapping(data).get("logo")
    if isinstance(logo, str) and logo.startswith("data:"):
        raise LogoNotShareableError()


def encode_payload(data: Any) -> str:
    """
    Encode an invoice into the URI-safe share string.

    Args:
        data: InvoiceData model or its dictionary form.

    Returns:
        The lz-string encoded, key-compressed JSON.
    """
    compressed = compress_keys(_as_mapping(data))
    text = objects.to_json(compressed, compact=True)
    return _LZ.compressToEncodedURIComponent(_to_code_units(text))


def decode_payload(encoded: str | None) -> dict | None:
    """
    Decode a share string back into the invoice dictionary.

    Args:
        encoded: Value of the data parameter.

    Returns:
        The invoice dictionary with full field names, or None when the
        value is empty, not decompressible or not a JSON object.
    """
    if not encoded:
        return None
    # a raw "+" in a query string reads back as a space
    encoded = encoded.replace(" ", "+")
    try:
        units = _LZ.decompressFromEncodedURIComponent(encoded)
    except Exception:
        # lzstring raises KeyError, TypeError or IndexError on foreign or truncated input
        LOG.warning("Share payload could not be decompressed", exc_info=True)
        return None
    if not units:
        LOG.warning("Share payload decompressed to nothing (length:%s)", len(encoded))
        return None
    try:
        text = _from_code_units(units)
    except UnicodeDecodeError:
        LOG.warning("Share payload holds an unpaired surrogate (length:%s)", len(units))
        return None
    try:
        payload = objects.from_json(text)
    except ValueError:
        LOG.warning("Share payload is not valid JSON (length:%s)", len(text))
        return None
    if not isinstance(payload, dict):
        LOG.warning("Share payload is not an object: %s", type(payload).__name__)
        return None
    return restore_keys(payload)


def generate_share_url(data: Any, current_url: str) -> str:
    """
    Return current_url with the invoice packed into its data parameter.

    The parameter is added, or replaced in place when already present. The
    path, the fragment and every other query parameter are kept verbatim.

    Args:
        data: InvoiceData model or its dictionary form.
        current_url: URL of the page doing the sharing.

    Returns:
        The share URL.
    """
    encoded = encode_payload(data)
    url = set_query_param(current_url, DATA_PARAM, encoded)
    LOG.info("Generated share url - payload_length:%s url_length:%s", len(encoded), len(url))
    return url


def load_from_url(url: str | None) -> dict | None:
    """
    Return the invoice packed into a URL's data parameter.

    Args:
        url: Full URL of the page being opened.

    Returns:
        The invoice dictionary, or None when the URL carries no data
        parameter or the parameter cannot be decoded.
    """
    if not url:
        return None
    encoded = get_query_param(url, DATA_PARAM)
    if encoded is None:
        return None
    return decode_payload(encoded)


def get_query_param(url: str, name: str) -> str | None:
    """Return the decoded value of the first query parameter called name."""
    for segment in urlsplit(url).query.split("&"):
        key, _, value = segment.partition("=")
        if unquote_plus(key) == name:
            return unquote_plus(value)
    return None


def set_query_param(url: str, name: str, value: str) -> str:
    """
    Set a query parameter, leaving the rest of the URL untouched.

    The first occurrence of the parameter is replaced and any later
    duplicates are dropped; if absent it is appended. The value is
    percent-encoded the way a browser's URLSearchParams would.
    """
    parts = urlsplit(url)
    encoded = f"{quote(name, safe='')}={quote(value, safe='')}"
    segments: list[str] = []
    replaced = False
    for segment in parts.query.split("&") if parts.query else []:
        if unquote_plus(segment.partition("=")[0]) != name:
            segments.append(segment)
        elif not replaced:
            segments.append(encoded)
            replaced = True
    if not replaced:
        segments.append(encoded)
    return urlunsplit(parts._replace(query="&".join(segments)))


def _to_code_units(text: str) -> str:
    """
    Split text into UTF-16 code units, one character each.

    lz-string works on UTF-16 units while the Python port works on code
    points; characters outside the BMP become surrogate pairs here so the
    compressed form matches what a browser produces.
    """
    raw = text.encode("utf-16-le", "surrogatepass")
    return "".join(
        chr(int.from_bytes(raw[index : index + 2], "little"))
        for index in range(0, len(raw), 2)
    )


def _from_code_units(units: str) -> str:
    """Join UTF-16 code units back into text, pairing surrogates."""
    return units.encode("utf-16-le", "surrogatepass").decode("utf-16-le")


def _as_mapping(data: Any) -> Mapping[str, Any]:
    if hasattr(data, "to_dict"):
        return data.to_dict()
    return data
