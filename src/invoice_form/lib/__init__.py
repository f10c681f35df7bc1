"""
Local library modules shared across the Invoice Form.

Modules:
    logs: Logging utilities
    objects: JSON serialization and identifier generation
    caches: Disk-backed key-value storage
"""

from invoice_form.lib import caches, logs, objects

__all__ = ["caches", "logs", "objects"]
