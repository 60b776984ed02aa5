"""Boundary validation for calculation inputs.

The engines assume well-formed inputs; callers run these checks first and
report the messages per field.
"""

from decimal import Decimal

from esppcalc.config import DEFAULT_DISCOUNT_PERCENTAGE
from esppcalc.exceptions import InputValidationError
from esppcalc.models.inputs import PurchaseInfo, SaleInfo, TaxRates

_POSITIVE_MESSAGES: dict[str, str] = {
    "purchase_price": "Purchase price must be greater than 0",
    "fair_market_value_at_purchase": "Fair market value must be greater than 0",
    "fair_market_value_at_offering": "Fair market value must be greater than 0",
    "sale_price": "Sale price must be greater than 0",
    "shares_sold": "Shares sold must be greater than 0",
}

_RATE_EXAMPLES: dict[str, str] = {
    "federal_income_tax_rate": "0.24 for 24%",
    "state_income_tax_rate": "0.05 for 5%",
    "long_term_capital_gains_rate": "0.15 for 15%",
    "short_term_capital_gains_rate": "0.24 for 24%",
}


def validate_inputs(purchase: PurchaseInfo, sale: SaleInfo, rates: TaxRates) -> dict[str, str]:
    """Validate inputs. Returns a mapping of field name to error message (empty if valid).

    The discount percentage is deliberately unchecked: it goes negative when
    the price paid exceeds the FMV.
    """
    errors: dict[str, str] = {}

    amounts = {
        "purchase_price": purchase.purchase_price,
        "fair_market_value_at_purchase": purchase.fair_market_value_at_purchase,
        "fair_market_value_at_offering": purchase.fair_market_value_at_offering,
        "sale_price": sale.sale_price,
        "shares_sold": sale.shares_sold,
    }
    for field, value in amounts.items():
        if value <= 0:
            errors[field] = _POSITIVE_MESSAGES[field]

    for field, example in _RATE_EXAMPLES.items():
        rate = getattr(rates, field)
        if rate < 0 or rate >= 1:
            errors[field] = f"Tax rate must be between 0 and 1 (e.g., {example})"

    return errors


def ensure_valid(purchase: PurchaseInfo, sale: SaleInfo, rates: TaxRates) -> None:
    """Raise InputValidationError if any input fails validation."""
    errors = validate_inputs(purchase, sale, rates)
    if errors:
        raise InputValidationError(errors)


def derive_discount_percentage(fmv_at_offering: Decimal, purchase_price: Decimal) -> Decimal:
    """Infer the plan discount from the offering FMV and price paid.

    Falls back to the default plan discount when either value is not positive.
    """
    if fmv_at_offering > 0 and purchase_price > 0:
        return (fmv_at_offering - purchase_price) / fmv_at_offering * Decimal("100")
    return DEFAULT_DISCOUNT_PERCENTAGE
