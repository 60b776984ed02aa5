"""ESPP tax computation engines."""

from esppcalc.engines.disposition import DispositionClassifier
from esppcalc.engines.espp import ESPPCalculator, calculate
from esppcalc.engines.lookback import LookbackPricingEngine
from esppcalc.engines.split import IncomeGainSplitter
from esppcalc.engines.tax import TaxLiabilityCalculator

__all__ = [
    "DispositionClassifier",
    "ESPPCalculator",
    "IncomeGainSplitter",
    "LookbackPricingEngine",
    "TaxLiabilityCalculator",
    "calculate",
]
