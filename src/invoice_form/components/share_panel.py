"""
Share panel component for the Invoice Form.

Provides the share button and shows the last generated link.
"""

import reflex as rx

from invoice_form.state import InvoiceFormState


def share_panel() -> rx.Component:
    """
    Build the share panel.

    Returns:
        The share panel component.
    """
    return rx.box(
        rx.button(
            rx.icon("link", size=16),
            "Share invoice link",
            on_click=InvoiceFormState.share,
            class_name="button primary gap",
            custom_attrs={"data-testid": "share-invoice-link-button"},
        ),
        rx.button(
            "Clear",
            on_click=InvoiceFormState.clear,
            class_name="button ghost",
        ),
        rx.cond(
            InvoiceFormState.share_url != "",
            rx.text(InvoiceFormState.share_url, class_name="share-url muted"),
        ),
        class_name="card share-card",
    )
