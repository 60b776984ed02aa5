"""Display formatting for currency and percentages (en-US)."""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def format_currency(amount: Decimal) -> str:
    """Format as US dollars: ``Decimal("-1234.5")`` -> ``"-$1,234.50"``."""
    quantized = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if quantized < 0:
        return f"-${-quantized:,.2f}"
    return f"${abs(quantized):,.2f}"


def format_percentage(fraction: Decimal) -> str:
    """Format a fraction as a percentage: ``Decimal("0.15")`` -> ``"15.00%"``."""
    quantized = (fraction * 100).quantize(CENTS, rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return f"{quantized:,.2f}%"


def format_discount_percentage(percentage: Decimal) -> str:
    """Format a percentage-point value compactly: 15 -> ``"15%"``, 12.5 -> ``"12.5%"``."""
    text = f"{percentage.quantize(CENTS, rounding=ROUND_HALF_UP):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return f"{text}%"
