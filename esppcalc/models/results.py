"""Pipeline stage outputs and the final calculation result."""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, field_serializer

from esppcalc.models.enums import CapitalGainTerm, DispositionType

CENTS = Decimal("0.01")
RATE_PRECISION = Decimal("0.0001")


class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_qualifying: bool
    holding_period_days: int
    capital_gain_term: CapitalGainTerm


class LookbackPricing(BaseModel):
    model_config = ConfigDict(frozen=True)

    actual_purchase_price: Decimal
    reference_fmv: Decimal


class IncomeSplit(BaseModel):
    model_config = ConfigDict(frozen=True)

    ordinary_income: Decimal
    capital_gain: Decimal
    discount: Decimal
    discount_amount: Decimal
    total_proceeds_from_sale: Decimal
    total_cost_basis: Decimal


class TaxLiability(BaseModel):
    model_config = ConfigDict(frozen=True)

    ordinary_income_tax: Decimal
    capital_gains_tax: Decimal
    total_tax_liability: Decimal
    incorrect_capital_gain: Decimal
    incorrect_tax_liability: Decimal
    tax_savings: Decimal
    adjusted_cost_basis: Decimal


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Disposition
    is_qualifying_disposition: bool
    holding_period_days: int
    # Discount and basis
    discount: Decimal
    discount_amount: Decimal
    total_proceeds_from_sale: Decimal
    total_cost_basis: Decimal
    adjusted_cost_basis: Decimal
    # Income split
    ordinary_income: Decimal
    capital_gain: Decimal
    capital_gain_term: CapitalGainTerm
    # Tax
    ordinary_income_tax: Decimal
    capital_gains_tax: Decimal
    total_tax_liability: Decimal
    # Comparison against treating the whole gain as capital gain
    incorrect_capital_gain: Decimal
    incorrect_tax_liability: Decimal
    tax_savings: Decimal

    # JSON output rounds money to cents and the discount fraction to basis
    # points; the in-memory values stay exact.
    @field_serializer(
        "discount_amount",
        "total_proceeds_from_sale",
        "total_cost_basis",
        "adjusted_cost_basis",
        "ordinary_income",
        "capital_gain",
        "ordinary_income_tax",
        "capital_gains_tax",
        "total_tax_liability",
        "incorrect_capital_gain",
        "incorrect_tax_liability",
        "tax_savings",
        when_used="json",
    )
    def serialize_money(self, value: Decimal) -> str:
        return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))

    @field_serializer("discount", when_used="json")
    def serialize_discount(self, value: Decimal) -> str:
        return str(value.quantize(RATE_PRECISION, rounding=ROUND_HALF_UP))

    @property
    def disposition_type(self) -> DispositionType:
        if self.is_qualifying_disposition:
            return DispositionType.QUALIFYING
        return DispositionType.DISQUALIFYING

    @property
    def gross_gain(self) -> Decimal:
        return self.total_proceeds_from_sale - self.total_cost_basis

    @property
    def net_gain(self) -> Decimal:
        return self.gross_gain - self.total_tax_liability
