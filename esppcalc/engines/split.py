"""Ordinary income / capital gain split.

Per IRS Pub. 525 and the Form 3922 instructions:
  Qualifying: ordinary income is the lesser of the offering-date discount
    actually received and 15% of the offering-date FMV.
  Disqualifying: ordinary income is the spread at the purchase date.
Whatever remains of the gross gain is capital gain (or loss).
"""

from decimal import Decimal

from esppcalc.config import STATUTORY_DISCOUNT_CAP
from esppcalc.models.inputs import PurchaseInfo, SaleInfo
from esppcalc.models.results import Classification, IncomeSplit, LookbackPricing


class IncomeGainSplitter:
    """Partitions the gross gain into ordinary income and capital gain."""

    def split(
        self,
        purchase: PurchaseInfo,
        sale: SaleInfo,
        classification: Classification,
        pricing: LookbackPricing,
    ) -> IncomeSplit:
        """Compute ordinary income, capital gain, and discount figures.

        Ordinary income is not floored at zero; a negative value is passed
        through as computed.
        """
        shares = sale.shares_sold
        actual_price = pricing.actual_purchase_price
        reference_fmv = pricing.reference_fmv

        if reference_fmv > 0:
            discount = (reference_fmv - actual_price) / reference_fmv
        else:
            discount = Decimal("0")
        discount_amount = (reference_fmv - actual_price) * shares

        total_proceeds = sale.sale_price * shares
        total_cost_basis = actual_price * shares

        if classification.is_qualifying:
            fmv_offering = purchase.fair_market_value_at_offering
            ordinary_income = min(
                (fmv_offering - actual_price) * shares,
                fmv_offering * STATUTORY_DISCOUNT_CAP * shares,
            )
        else:
            ordinary_income = (purchase.fair_market_value_at_purchase - actual_price) * shares

        capital_gain = total_proceeds - total_cost_basis - ordinary_income

        return IncomeSplit(
            ordinary_income=ordinary_income,
            capital_gain=capital_gain,
            discount=discount,
            discount_amount=discount_amount,
            total_proceeds_from_sale=total_proceeds,
            total_cost_basis=total_cost_basis,
        )
