def parse_non_negative(raw: str | None, field: str) -> float:
    """Parse a user-typed number (comma or dot decimals). Raises ValueError for bad or negative input."""
    text = (raw or "").strip().replace(" ", "").replace(",", ".")
    message = f"The value of '{field}' is invalid. Make sure that you input a positive number."
    try:
        value = float(text)
    except ValueError:
        raise ValueError(message) from None
    if not value >= 0 or value == float("inf"):
        raise ValueError(message)
    return value


def format_money(amount: float) -> str:
    return f"{amount:,.2f} kr"
