"""Display helpers for console lines."""

CURRENCY_SYMBOL = "₹"


def format_rupees(amount: float) -> str:
    """
    Render an amount with the currency symbol, e.g. ``₹3500.0``.

    Floats keep their full repr so ``3500`` prints as ``3500.0``.
    """
    return f"{CURRENCY_SYMBOL}{float(amount)!r}"
