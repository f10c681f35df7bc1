"""Reflex configuration for the Invoice Form application."""

import reflex as rx

config = rx.Config(
    app_name="invoice_form",
    # Use the src directory structure
    app_module_import="invoice_form.app",
)
