"""
Reflex UI components for the Invoice Form.

- invoice_form: Editable parties, line items and totals
- share_panel: Share and clear buttons with the last share link
"""

from invoice_form.components.invoice_form import invoice_form
from invoice_form.components.share_panel import share_panel

__all__ = ["invoice_form", "share_panel"]
