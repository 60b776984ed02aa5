"""Flat-rate tax liability for an ESPP sale."""

from decimal import Decimal

from esppcalc.models.enums import CapitalGainTerm
from esppcalc.models.inputs import TaxRates
from esppcalc.models.results import IncomeSplit, TaxLiability


class TaxLiabilityCalculator:
    """Applies flat rates to the income split and compares against the naive method."""

    def compute_tax(
        self, split: IncomeSplit, rates: TaxRates, capital_gain_term: CapitalGainTerm
    ) -> TaxLiability:
        """Compute tax on the split and the all-capital-gain comparison.

        Capital losses produce zero capital-gains tax, never a credit.
        ``tax_savings`` is left unclamped: a negative value means the naive
        method would have produced the lower tax.
        """
        ordinary_income_tax = split.ordinary_income * rates.combined_income_tax_rate
        capital_gains_rate = self.capital_gains_rate(rates, capital_gain_term)
        capital_gains_tax = max(Decimal("0"), split.capital_gain * capital_gains_rate)
        total_tax = ordinary_income_tax + capital_gains_tax

        # Common filing error: reporting the whole gain as capital gain
        incorrect_capital_gain = split.total_proceeds_from_sale - split.total_cost_basis
        incorrect_tax = max(Decimal("0"), incorrect_capital_gain * capital_gains_rate)

        return TaxLiability(
            ordinary_income_tax=ordinary_income_tax,
            capital_gains_tax=capital_gains_tax,
            total_tax_liability=total_tax,
            incorrect_capital_gain=incorrect_capital_gain,
            incorrect_tax_liability=incorrect_tax,
            tax_savings=incorrect_tax - total_tax,
            adjusted_cost_basis=split.total_cost_basis + split.ordinary_income,
        )

    @staticmethod
    def capital_gains_rate(rates: TaxRates, term: CapitalGainTerm) -> Decimal:
        if term == CapitalGainTerm.LONG_TERM:
            return rates.long_term_capital_gains_rate
        return rates.short_term_capital_gains_rate
