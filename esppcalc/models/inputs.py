"""Calculation input records (purchase, sale, tax rates)."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class PurchaseInfo(BaseModel):
    """ESPP purchase record, mirroring Form 3922 boxes 1-5."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    offering_date: date  # Box 1
    purchase_date: date  # Box 2
    fair_market_value_at_offering: Decimal  # Box 3
    fair_market_value_at_purchase: Decimal  # Box 4
    purchase_price: Decimal  # Box 5
    discount_percentage: Decimal  # plan discount, e.g. 15 for 15%


class SaleInfo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    sale_date: date
    sale_price: Decimal
    shares_sold: Decimal


class TaxRates(BaseModel):
    """Flat marginal rates expressed as fractions (0.24 for 24%)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    federal_income_tax_rate: Decimal
    state_income_tax_rate: Decimal
    long_term_capital_gains_rate: Decimal
    short_term_capital_gains_rate: Decimal

    @property
    def combined_income_tax_rate(self) -> Decimal:
        return self.federal_income_tax_rate + self.state_income_tax_rate


class Form3922Import(BaseModel):
    """Structured record produced by the Form 3922 line parser.

    Form 3922 carries no sale data, so only the share count is filled on the
    sale side. Tax rates stay with the caller.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    purchase_info: PurchaseInfo
    shares_sold: Decimal
