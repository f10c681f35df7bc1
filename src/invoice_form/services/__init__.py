"""
Service factory for the Invoice Form.

This module provides get_storage() and get_form_service(), which return the
storage implementation selected by configuration and the form service built
on it.

Available storage kinds:
- disk: diskcache directory (default)
- memory: per-process dictionary

Instances are cached at the module level, so the same one is reused across
all requests. Configure via the INVOICE_FORM_STORAGE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_form.lib import logs
from invoice_form.services.invoice_form_service import InvoiceFormService, LoadedInvoice
from invoice_form.services.storage import InvoiceStorage
from invoice_form.services.storage_disk import DiskInvoiceStorage
from invoice_form.services.storage_memory import MemoryInvoiceStorage

LOG = logs.logger(__file__)

_STORAGE_REGISTRY: Dict[str, Callable[[], InvoiceStorage]] = {
    "disk": lambda: DiskInvoiceStorage(),
    "memory": lambda: MemoryInvoiceStorage(),
}


@cache
def get_storage(kind: str | None = None) -> InvoiceStorage:
    """Return the configured storage implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_FORM_STORAGE", "disk")).lower()
    LOG.info("get_storage - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _STORAGE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown storage kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


def get_form_service(kind: str | None = None) -> InvoiceFormService:
    """Return a form service over the configured storage."""
    return InvoiceFormService(get_storage(kind))


__all__ = [
    "DiskInvoiceStorage",
    "InvoiceFormService",
    "InvoiceStorage",
    "LoadedInvoice",
    "MemoryInvoiceStorage",
    "get_form_service",
    "get_storage",
]
