"""Display formatting for amounts."""

from invoice_form.models.common import CURRENCY_SYMBOLS


def format_number(value: float, decimals: int = 2) -> str:
    """Format a number with space-separated thousands, e.g. '1 845.00'."""
    return f"{value:,.{decimals}f}".replace(",", " ")


def format_currency(value: float, currency: str) -> str:
    """
    Format a currency amount with the currency symbol.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'EUR', 'PLN').

    Returns:
        Formatted string like '1 234.56 €'; unknown codes print the code.
    """
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    return f"{format_number(value)} {symbol}"
