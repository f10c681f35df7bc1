"""
Shared model plumbing and closed vocabularies for the Invoice Form.

This module defines:

- JsonModel: mixin giving dataclasses camelCase to_dict/from_dict methods
  that keep unknown keys, so data written by a newer client survives a
  round trip through an older one
- The closed vocabularies offered by the form selectors (languages,
  currencies, date formats, templates)
- AccordionState: which form sections are expanded, persisted locally only
"""

from dataclasses import Field, dataclass, field, fields
from typing import Any, Literal, Mapping

SUPPORTED_LANGUAGES = ("en", "pl", "de", "es", "pt", "ru", "uk", "fr", "it", "nl")
SupportedLanguage = Literal["en", "pl", "de", "es", "pt", "ru", "uk", "fr", "it", "nl"]

LANGUAGE_TO_LABEL: dict[str, str] = {
    "en": "English",
    "pl": "Polish",
    "de": "German",
    "es": "Spanish",
    "pt": "Portuguese",
    "ru": "Russian",
    "uk": "Ukrainian",
    "fr": "French",
    "it": "Italian",
    "nl": "Dutch",
}

# code -> (symbol, label)
_CURRENCIES: dict[str, tuple[str, str]] = {
    "EUR": ("€", "Euro"),
    "USD": ("$", "United States Dollar"),
    "PLN": ("zł", "Polish Złoty"),
    "GBP": ("£", "British Pound Sterling"),
    "JPY": ("¥", "Japanese Yen"),
    "AUD": ("$", "Australian Dollar"),
    "CAD": ("$", "Canadian Dollar"),
    "CHF": ("Fr", "Swiss Franc"),
    "CNY": ("¥", "Chinese Yuan Renminbi"),
    "HKD": ("HK$", "Hong Kong Dollar"),
    "SGD": ("S$", "Singapore Dollar"),
    "SEK": ("kr", "Swedish Krona"),
    "NOK": ("kr", "Norwegian Krone"),
    "DKK": ("kr", "Danish Krone"),
    "NZD": ("NZ$", "New Zealand Dollar"),
    "INR": ("₹", "Indian Rupee"),
    "KRW": ("₩", "South Korean Won"),
    "MXN": ("$", "Mexican Peso"),
    "BRL": ("R$", "Brazilian Real"),
    "ZAR": ("R", "South African Rand"),
    "TRY": ("₺", "Turkish Lira"),
    "RUB": ("₽", "Russian Ruble"),
    "THB": ("฿", "Thai Baht"),
    "MYR": ("RM", "Malaysian Ringgit"),
    "IDR": ("Rp", "Indonesian Rupiah"),
    "PHP": ("₱", "Philippine Peso"),
    "VND": ("₫", "Vietnamese Dong"),
    "AED": ("AED", "UAE Dirham"),
    "SAR": ("SAR", "Saudi Riyal"),
    "ILS": ("₪", "Israeli New Shekel"),
    "QAR": ("QR", "Qatari Riyal"),
    "KWD": ("KWD", "Kuwaiti Dinar"),
    "BHD": ("BHD", "Bahraini Dinar"),
    "OMR": ("OMR", "Omani Rial"),
    "JOD": ("JOD", "Jordanian Dinar"),
    "EGP": ("EGP", "Egyptian Pound"),
    "LBP": ("LBP", "Lebanese Pound"),
    "IQD": ("IQD", "Iraqi Dinar"),
    "CZK": ("Kč", "Czech Koruna"),
    "HUF": ("Ft", "Hungarian Forint"),
    "RON": ("lei", "Romanian Leu"),
    "BGN": ("лв", "Bulgarian Lev"),
    "HRK": ("kn", "Croatian Kuna"),
    "RSD": ("дін", "Serbian Dinar"),
    "UAH": ("₴", "Ukrainian Hryvnia"),
    "BYN": ("Br", "Belarusian Ruble"),
    "MDL": ("L", "Moldovan Leu"),
    "GEL": ("₾", "Georgian Lari"),
    "KZT": ("₸", "Kazakhstani Tenge"),
    "ARS": ("$", "Argentine Peso"),
    "CLP": ("$", "Chilean Peso"),
    "COP": ("$", "Colombian Peso"),
    "PEN": ("S/", "Peruvian Sol"),
    "UYU": ("$", "Uruguayan Peso"),
    "BOB": ("Bs", "Bolivian Boliviano"),
    "PKR": ("₨", "Pakistani Rupee"),
    "BDT": ("৳", "Bangladeshi Taka"),
    "LKR": ("Rs", "Sri Lankan Rupee"),
    "NPR": ("Rs", "Nepalese Rupee"),
    "NGN": ("₦", "Nigerian Naira"),
    "KES": ("KSh", "Kenyan Shilling"),
    "GHS": ("₵", "Ghanaian Cedi"),
    "ETB": ("Br", "Ethiopian Birr"),
    "MAD": ("MAD", "Moroccan Dirham"),
    "TND": ("TND", "Tunisian Dinar"),
    "ISK": ("kr", "Icelandic Króna"),
    "TWD": ("NT$", "New Taiwan Dollar"),
}

SUPPORTED_CURRENCIES = tuple(_CURRENCIES)
CURRENCY_SYMBOLS: dict[str, str] = {code: v[0] for code, v in _CURRENCIES.items()}
CURRENCY_TO_LABEL: dict[str, str] = {code: v[1] for code, v in _CURRENCIES.items()}

SUPPORTED_DATE_FORMATS = (
    "YYYY-MM-DD",
    "DD/MM/YYYY",
    "MM/DD/YYYY",
    "D MMMM YYYY",
    "MMMM D, YYYY",
    "DD.MM.YYYY",
    "DD-MM-YYYY",
    "YYYY.MM.DD",
)

SUPPORTED_TEMPLATES = ("default", "stripe")
TEMPLATE_TO_LABEL: dict[str, str] = {
    "default": "Default Template",
    "stripe": "Stripe Template",
}

_EXTRA = "extra"


def json_field(default: Any = None, *, key: str | None = None, optional: bool = False, **kwargs: Any) -> Any:
    """
    Declare a dataclass field with JSON metadata.

    Args:
        default: Default value (ignored when default_factory is given).
        key: JSON key when it is not the camelCase form of the attribute.
        optional: Omit the key from to_dict() while the value is None.
    """
    metadata = {"json_key": key, "optional": optional}
    if "default_factory" in kwargs:
        return field(metadata=metadata, **kwargs)
    return field(default=default, metadata=metadata, **kwargs)


def json_key(model_field: Field) -> str:
    """Return the JSON key of a dataclass field."""
    explicit = model_field.metadata.get("json_key")
    if explicit:
        return explicit
    head, *rest = model_field.name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class JsonModel:
    """
    Mixin for dataclasses stored as camelCase JSON objects.

    Keys without a matching field are kept in the ``extra`` field and written
    back by to_dict(), so unknown fields are never lost.
    """

    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        data: dict[str, Any] = {}
        for model_field in fields(self):
            if model_field.name == _EXTRA:
                continue
            value = getattr(self, model_field.name)
            if value is None and model_field.metadata.get("optional"):
                continue
            data[json_key(model_field)] = _dump(value)
        data.update(getattr(self, _EXTRA))
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None):
        """
        Deserialize from a dictionary, defaulting missing keys.

        Anything that is not a mapping is treated as empty.
        """
        if not isinstance(data, Mapping) or not data:
            return cls()
        known = {json_key(f): f for f in fields(cls) if f.name != _EXTRA}
        kwargs: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            model_field = known.get(key)
            if model_field is None:
                extra[key] = value
            else:
                kwargs[model_field.name] = cls._load_field(model_field.name, value)
        return cls(**kwargs, extra=extra)

    @classmethod
    def _load_field(cls, name: str, value: Any) -> Any:
        """Convert a raw JSON value for the named field. Overridden for nested types."""
        return value


def _dump(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if hasattr(value, "to_value"):
        return value.to_value()
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


@dataclass(slots=True)
class AccordionState(JsonModel):
    """
    Tracks which form sections are expanded.

    Attributes:
        general: General settings section.
        seller: Seller details section.
        buyer: Buyer details section.
        invoice_items: Line items section.
    """

    general: bool = True
    seller: bool = True
    buyer: bool = True
    invoice_items: bool = True
    extra: dict[str, Any] = field(default_factory=dict, repr=False)
