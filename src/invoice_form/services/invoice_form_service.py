"""
Form service tying the share codec, local storage and defaults together.

The form loads its invoice from the first tier that has one:

    1. the ``data`` parameter of the page URL (a share link)
    2. local storage (the last autosaved state)
    3. the hard-coded defaults

Shared and stored invoices are used verbatim; derived amounts are not
recomputed on load, so a shared link shows exactly what its author saw.
Parts of a hand-edited invoice that have the wrong shape load as their
defaults instead of failing.
"""

from dataclasses import dataclass
from datetime import date
from typing import Literal

from invoice_form.data.defaults import default_invoice_data
from invoice_form.lib import logs
from invoice_form.models.invoice import (
    Buyer,
    InvoiceData,
    SavedBuyer,
    SavedSeller,
    Seller,
)
from invoice_form.services.storage import InvoiceStorage
from invoice_form.sharing.links import ensure_shareable, generate_share_url, load_from_url

LOG = logs.logger(__file__)

InvoiceSource = Literal["url", "storage", "defaults"]


@dataclass(slots=True)
class LoadedInvoice:
    """
    Result of the load chain.

    Attributes:
        data: The invoice to show in the form.
        source: Which tier provided it.
    """

    data: InvoiceData
    source: InvoiceSource


class InvoiceFormService:
    """
    Loads, saves and shares the invoice edited in the form.

    Attributes:
        storage: Local storage used for autosave and profiles.
    """

    def __init__(self, storage: InvoiceStorage) -> None:
        self.storage = storage

    def load(self, url: str | None = None, now: date | None = None) -> LoadedInvoice:
        """
        Return the invoice to show when the form opens.

        Args:
            url: Full URL of the page, possibly carrying a share link.
            now: Date treated as today when defaults are built.

        Returns:
            LoadedInvoice naming the tier the data came from.
        """
        shared = load_from_url(url)
        if shared is not None:
            LOG.info("Loaded invoice from share link")
            return LoadedInvoice(InvoiceData.from_dict(shared), "url")

        stored = self.storage.load_invoice_data()
        if stored is not None:
            LOG.info("Loaded invoice from local storage")
            return LoadedInvoice(InvoiceData.from_dict(stored), "storage")

        LOG.info("Using default invoice")
        return LoadedInvoice(default_invoice_data(now), "defaults")

    def save(self, data: InvoiceData) -> None:
        """Autosave the invoice to local storage."""
        self.storage.save_invoice_data(data)

    def share(self, data: InvoiceData, current_url: str) -> str:
        """
        Return a share URL for the invoice.

        Args:
            data: Invoice to share.
            current_url: URL of the form page.

        Raises:
            LogoNotShareableError: If the invoice embeds its logo image.
        """
        ensure_shareable(data)
        return generate_share_url(data, current_url)

    def clear(self) -> None:
        """Forget everything stored locally."""
        LOG.info("Clearing local storage")
        self.storage.clear_all()

    def save_seller_profile(self, seller: Seller) -> SavedSeller:
        """
        Add or update a saved seller.

        A seller with an id replaces the profile with the same id; otherwise
        a new profile with a fresh id is appended.
        """
        profile = SavedSeller.from_seller(seller)
        sellers = _upsert(self.storage.load_sellers(), profile)
        self.storage.save_sellers(sellers)
        return profile

    def delete_seller_profile(self, profile_id: str) -> bool:
        """Remove a saved seller; return False when no profile matched."""
        sellers = self.storage.load_sellers()
        kept = [seller for seller in sellers if seller.id != profile_id]
        self.storage.save_sellers(kept)
        return len(kept) != len(sellers)

    def save_buyer_profile(self, buyer: Buyer) -> SavedBuyer:
        """Add or update a saved buyer; see save_seller_profile."""
        profile = SavedBuyer.from_buyer(buyer)
        buyers = _upsert(self.storage.load_buyers(), profile)
        self.storage.save_buyers(buyers)
        return profile

    def delete_buyer_profile(self, profile_id: str) -> bool:
        """Remove a saved buyer; return False when no profile matched."""
        buyers = self.storage.load_buyers()
        kept = [buyer for buyer in buyers if buyer.id != profile_id]
        self.storage.save_buyers(kept)
        return len(kept) != len(buyers)


def _upsert(profiles: list, profile) -> list:
    for index, existing in enumerate(profiles):
        if existing.id == profile.id:
            return profiles[:index] + [profile] + profiles[index + 1 :]
    return profiles + [profile]
