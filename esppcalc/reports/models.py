"""Report input model."""

from pydantic import BaseModel, ConfigDict

from esppcalc.models.inputs import PurchaseInfo, SaleInfo, TaxRates
from esppcalc.models.results import CalculationResult


class ESPPReport(BaseModel):
    """Inputs and result of one calculation, as exported to a report."""

    model_config = ConfigDict(frozen=True)

    purchase: PurchaseInfo
    sale: SaleInfo
    rates: TaxRates
    result: CalculationResult
