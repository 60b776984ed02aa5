"""ESPP tax calculation pipeline.

Chains the four engines for a single purchase/sale lot:
classify -> lookback price -> income/gain split -> tax.
Every stage is stateless, so one calculator may serve concurrent callers.
"""

import logging

from esppcalc.engines.disposition import DispositionClassifier
from esppcalc.engines.lookback import LookbackPricingEngine
from esppcalc.engines.split import IncomeGainSplitter
from esppcalc.engines.tax import TaxLiabilityCalculator
from esppcalc.models.inputs import PurchaseInfo, SaleInfo, TaxRates
from esppcalc.models.results import CalculationResult

logger = logging.getLogger(__name__)


class ESPPCalculator:
    """Computes adjusted cost basis and tax liability for an ESPP sale."""

    def __init__(
        self,
        classifier: DispositionClassifier | None = None,
        pricing: LookbackPricingEngine | None = None,
        splitter: IncomeGainSplitter | None = None,
        tax: TaxLiabilityCalculator | None = None,
    ) -> None:
        self.classifier = classifier or DispositionClassifier()
        self.pricing = pricing or LookbackPricingEngine()
        self.splitter = splitter or IncomeGainSplitter()
        self.tax = tax or TaxLiabilityCalculator()

    def calculate(
        self, purchase: PurchaseInfo, sale: SaleInfo, rates: TaxRates
    ) -> CalculationResult:
        """Run the full pipeline.

        Inputs are assumed to be validated already (see
        :func:`esppcalc.validation.validate_inputs`).

        Args:
            purchase: The ESPP purchase record.
            sale: The sale of shares from that purchase.
            rates: Flat tax rates to apply.

        Returns:
            CalculationResult aggregating every stage's output.
        """
        classification = self.classifier.classify(purchase, sale)
        pricing = self.pricing.resolve_effective_price(purchase)
        split = self.splitter.split(purchase, sale, classification, pricing)
        liability = self.tax.compute_tax(split, rates, classification.capital_gain_term)

        logger.debug(
            "ESPP sale of %s shares: ordinary income %s, capital gain %s, total tax %s",
            sale.shares_sold, split.ordinary_income, split.capital_gain,
            liability.total_tax_liability,
        )
        return CalculationResult(
            is_qualifying_disposition=classification.is_qualifying,
            holding_period_days=classification.holding_period_days,
            discount=split.discount,
            discount_amount=split.discount_amount,
            total_proceeds_from_sale=split.total_proceeds_from_sale,
            total_cost_basis=split.total_cost_basis,
            adjusted_cost_basis=liability.adjusted_cost_basis,
            ordinary_income=split.ordinary_income,
            capital_gain=split.capital_gain,
            capital_gain_term=classification.capital_gain_term,
            ordinary_income_tax=liability.ordinary_income_tax,
            capital_gains_tax=liability.capital_gains_tax,
            total_tax_liability=liability.total_tax_liability,
            incorrect_capital_gain=liability.incorrect_capital_gain,
            incorrect_tax_liability=liability.incorrect_tax_liability,
            tax_savings=liability.tax_savings,
        )


_default_calculator = ESPPCalculator()


def calculate(purchase: PurchaseInfo, sale: SaleInfo, rates: TaxRates) -> CalculationResult:
    """Module-level shortcut for :meth:`ESPPCalculator.calculate`."""
    return _default_calculator.calculate(purchase, sale, rates)
