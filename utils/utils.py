from decimal import Decimal, InvalidOperation


def format_amount(value: str | Decimal) -> str:
    """Display form of an exact decimal amount, thousands separated."""
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return str(value)

    if amount == 0:
        return "0"

    if amount < Decimal("0.000001"):
        return "&lt;0.000001"

    if amount >= 1:
        return f"{amount:,.4f}".rstrip("0").rstrip(".")

    return f"{amount:.6f}".rstrip("0").rstrip(".")
