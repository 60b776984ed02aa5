"""Data models for the ESPP tax calculator."""

from esppcalc.models.enums import CapitalGainTerm, DispositionType
from esppcalc.models.inputs import Form3922Import, PurchaseInfo, SaleInfo, TaxRates
from esppcalc.models.results import (
    CalculationResult,
    Classification,
    IncomeSplit,
    LookbackPricing,
    TaxLiability,
)

__all__ = [
    "CalculationResult",
    "CapitalGainTerm",
    "Classification",
    "DispositionType",
    "Form3922Import",
    "IncomeSplit",
    "LookbackPricing",
    "PurchaseInfo",
    "SaleInfo",
    "TaxLiability",
    "TaxRates",
]
