"""Currency display formatting."""

from .reference import CURRENCY_SYMBOLS


def format_currency(amount: float | None, currency: str = "INR") -> str:
    """
    Format an amount with its currency symbol and two decimals.

    Unknown currencies fall back to the upper-case code as prefix.
    Missing amounts render as zero.

    Example:
        format_currency(124500, "INR")  ->  "₹124,500.00"
    """
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code, code)
    if amount is None:
        amount = 0.0
    return f"{symbol}{amount:,.2f}"
