"""
In-memory implementation of InvoiceStorage.

Useful for tests, demos and deployments that should not write to disk.
Contents are lost when the process exits.
"""

from invoice_form.services.storage import InvoiceStorage


class MemoryInvoiceStorage(InvoiceStorage):
    """Dictionary-backed storage."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        """
        Initialize with optional starting contents.

        Args:
            items: Raw key -> string entries to start from.
        """
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
