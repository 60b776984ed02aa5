"""ESPP tax calculator: adjusted cost basis and tax for Section 423 share sales."""

from esppcalc.engines.espp import ESPPCalculator, calculate
from esppcalc.models import (
    CalculationResult,
    CapitalGainTerm,
    DispositionType,
    PurchaseInfo,
    SaleInfo,
    TaxRates,
)

__all__ = [
    "CalculationResult",
    "CapitalGainTerm",
    "DispositionType",
    "ESPPCalculator",
    "PurchaseInfo",
    "SaleInfo",
    "TaxRates",
    "calculate",
]
