"""
Reflex application entry point for the Invoice Form.

Registers the single form page. Loading runs on page load, so a share link
opened in a new tab is decoded before the form renders.
"""

import os

import reflex as rx

from invoice_form.components import invoice_form, share_panel
from invoice_form.lib import logs
from invoice_form.state import APP_SUBTITLE, APP_TITLE, InvoiceFormState

LOG = logs.logger(__file__)

APP_PORT = int(os.getenv("INVOICE_FORM_PORT", "8000"))
LOG.info("INVOICE_FORM_STORAGE: %s", os.getenv("INVOICE_FORM_STORAGE", "disk"))

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"

_SOURCE_LABELS = {
    "url": "Opened from a share link",
    "storage": "Restored from your last session",
    "defaults": "New invoice",
}


def source_badge() -> rx.Component:
    """Show where the current invoice was loaded from."""
    return rx.match(
        InvoiceFormState.source,
        *[(source, rx.badge(label, variant="soft")) for source, label in _SOURCE_LABELS.items()],
        rx.fragment(),
    )


def form_header() -> rx.Component:
    return rx.hstack(
        rx.vstack(
            rx.heading(APP_TITLE, size="6", as_="h1"),
            rx.text(APP_SUBTITLE, class_name="muted"),
            spacing="1",
        ),
        rx.spacer(),
        source_badge(),
        align="center",
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the form page.

    Returns:
        Header, share panel and the form, or a spinner while loading.
    """
    return rx.container(
        form_header(),
        share_panel(),
        rx.cond(
            InvoiceFormState.is_loading,
            rx.center(rx.spinner(size="3"), class_name="card loading-state"),
            invoice_form(),
        ),
        size="3",
        class_name="app-container",
    )


app = rx.App(
    theme=rx.theme(appearance="light", accent_color="indigo", radius="medium"),
    stylesheets=[_FONT_URL],
)

app.add_page(index, route="/", title=APP_TITLE, on_load=InvoiceFormState.on_load)


def main() -> None:
    """Entrypoint used by the invoice-form script."""
    import subprocess
    import sys

    LOG.info("Starting Reflex - port:%s", APP_PORT)
    subprocess.run([sys.executable, "-m", "reflex", "run", "--frontend-port", str(APP_PORT)], check=False)


if __name__ == "__main__":
    main()
