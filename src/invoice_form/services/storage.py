"""
Abstract base class defining the local storage contract.

Storage is the fallback tier of the load chain: a key-value store holding
the invoice as plain JSON with full field names, plus the saved seller and
buyer profiles, the accordion state and the uploaded logo. Share links use
the compressed form instead; the two representations are independent.

Implementations only provide the raw get/set/remove primitives:
- DiskInvoiceStorage: diskcache directory that survives restarts
- MemoryInvoiceStorage: per-process dictionary for tests and demos
"""

from abc import ABC, abstractmethod
from typing import Any

from invoice_form.lib import logs, objects
from invoice_form.models.common import AccordionState
from invoice_form.models.invoice import InvoiceData, SavedBuyer, SavedSeller

LOG = logs.logger(__file__)

INVOICE_DATA_KEY = "INVOICE_FORM_DATA"
SELLERS_KEY = "INVOICE_FORM_SELLERS"
BUYERS_KEY = "INVOICE_FORM_BUYERS"
ACCORDION_STATE_KEY = "INVOICE_FORM_ACCORDION_STATE"
LOGO_KEY = "INVOICE_FORM_LOGO"

ALL_KEYS = (INVOICE_DATA_KEY, SELLERS_KEY, BUYERS_KEY, ACCORDION_STATE_KEY, LOGO_KEY)


class InvoiceStorage(ABC):
    """
    Abstract base class for local persistence.

    Subclasses implement the string primitives; the typed accessors below
    handle JSON encoding and treat unreadable entries as absent.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored string for key, or None."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a string under key."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key if present."""

    def save_invoice_data(self, data: InvoiceData | dict) -> None:
        """Persist the invoice in its readable JSON form."""
        self.set_item(INVOICE_DATA_KEY, objects.to_json(data))

    def load_invoice_data(self) -> dict | None:
        """Return the persisted invoice dictionary, or None."""
        data = self._load_json(INVOICE_DATA_KEY)
        if data is not None and not isinstance(data, dict):
            LOG.warning("Ignoring stored invoice of type %s", type(data).__name__)
            return None
        return data

    def save_sellers(self, sellers: list[SavedSeller]) -> None:
        self.set_item(SELLERS_KEY, objects.to_json(sellers))

    def load_sellers(self) -> list[SavedSeller]:
        return self._load_profiles(SELLERS_KEY, SavedSeller)

    def save_buyers(self, buyers: list[SavedBuyer]) -> None:
        self.set_item(BUYERS_KEY, objects.to_json(buyers))

    def load_buyers(self) -> list[SavedBuyer]:
        return self._load_profiles(BUYERS_KEY, SavedBuyer)

    def save_accordion_state(self, state: AccordionState) -> None:
        self.set_item(ACCORDION_STATE_KEY, objects.to_json(state))

    def load_accordion_state(self) -> AccordionState | None:
        data = self._load_json(ACCORDION_STATE_KEY)
        if not isinstance(data, dict):
            return None
        return AccordionState.from_dict(data)

    def save_logo(self, data_uri: str) -> None:
        self.set_item(LOGO_KEY, data_uri)

    def load_logo(self) -> str | None:
        return self.get_item(LOGO_KEY)

    def remove_logo(self) -> None:
        self.remove_item(LOGO_KEY)

    def clear_all(self) -> None:
        """Remove everything the form has stored."""
        for key in ALL_KEYS:
            self.remove_item(key)

    def _load_json(self, key: str) -> Any:
        raw = self.get_item(key)
        if raw is None:
            return None
        try:
            return objects.from_json(raw)
        except ValueError:
            LOG.warning("Ignoring unreadable storage entry - key:%s", key)
            return None

    def _load_profiles(self, key: str, profile_cls: type) -> list:
        data = self._load_json(key)
        if not isinstance(data, list):
            return []
        profiles = []
        for entry in data:
            try:
                profiles.append(profile_cls.from_dict(entry))
            except (TypeError, ValueError, AttributeError):
                LOG.warning("Skipping invalid %s entry", profile_cls.__name__)
        return profiles
