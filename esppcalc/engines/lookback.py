"""Lookback pricing engine.

Section 423 plans with a lookback provision apply the discount to whichever
of the offering-date and purchase-date FMV is lower.
"""

import logging
from decimal import Decimal

from esppcalc.models.inputs import PurchaseInfo
from esppcalc.models.results import LookbackPricing

logger = logging.getLogger(__name__)


class LookbackPricingEngine:
    """Resolves the effective discounted purchase price."""

    def resolve_effective_price(self, purchase: PurchaseInfo) -> LookbackPricing:
        """Re-derive the purchase price from FMVs and the plan discount.

        The ``purchase_price`` on the record is not used. Ties between the
        two discounted prices resolve to the offering-date FMV.
        """
        multiplier = Decimal("1") - purchase.discount_percentage / Decimal("100")
        offering_discount_price = purchase.fair_market_value_at_offering * multiplier
        purchase_discount_price = purchase.fair_market_value_at_purchase * multiplier

        if offering_discount_price <= purchase_discount_price:
            actual_price = offering_discount_price
            reference_fmv = purchase.fair_market_value_at_offering
        else:
            actual_price = purchase_discount_price
            reference_fmv = purchase.fair_market_value_at_purchase

        if actual_price != purchase.purchase_price:
            logger.debug(
                "Lookback price %s differs from recorded purchase price %s",
                actual_price, purchase.purchase_price,
            )
        return LookbackPricing(actual_purchase_price=actual_price, reference_fmv=reference_fmv)
