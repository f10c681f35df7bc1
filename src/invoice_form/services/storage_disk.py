"""
Disk-backed implementation of InvoiceStorage.

Stores entries in a diskcache directory, so the form state survives
restarts. The directory defaults to ``<tempdir>/invoice_form`` and can be
moved with the INVOICE_FORM_STORAGE_DIR environment variable.
"""

import os
import tempfile
from pathlib import Path

from invoice_form.lib import logs
from invoice_form.lib.caches import DiskCache
from invoice_form.services.storage import InvoiceStorage

LOG = logs.logger(__file__)


def default_storage_dir() -> Path:
    """Return the configured storage directory."""
    configured = os.getenv("INVOICE_FORM_STORAGE_DIR")
    if configured:
        return Path(configured)
    return Path(tempfile.gettempdir()) / "invoice_form"


class DiskInvoiceStorage(InvoiceStorage):
    """
    Storage kept in a diskcache directory.

    Attributes:
        storage_dir: Directory holding the cache files.
    """

    def __init__(self, storage_dir: str | Path | None = None) -> None:
        """
        Open (or create) the storage directory.

        Args:
            storage_dir: Directory path, or None for default_storage_dir().
        """
        self.storage_dir = Path(storage_dir) if storage_dir else default_storage_dir()
        LOG.info("Opening disk storage - storage_dir:%s", self.storage_dir)
        self._cache = DiskCache(self.storage_dir)

    def get_item(self, key: str) -> str | None:
        entry = self._cache.get(key)
        return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        self._cache.set(key, value)

    def remove_item(self, key: str) -> None:
        self._cache.delete(key)

    def close(self) -> None:
        """Release the underlying cache."""
        self._cache.close()
