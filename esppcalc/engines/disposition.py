"""ESPP disposition classifier.

Implements the Section 423 holding-period test per IRS Pub. 525
("Employee Stock Purchase Plans"): a sale is a qualifying disposition only
when it happens at least 2 years after the offering (grant) date AND at
least 1 year after the purchase (exercise) date. Thresholds are calendar
years, not fixed day counts.
"""

import logging
from datetime import date

from esppcalc.config import (
    LONG_TERM_YEARS,
    QUALIFYING_YEARS_FROM_OFFERING,
    QUALIFYING_YEARS_FROM_PURCHASE,
)
from esppcalc.models.enums import CapitalGainTerm
from esppcalc.models.inputs import PurchaseInfo, SaleInfo
from esppcalc.models.results import Classification

logger = logging.getLogger(__name__)


def add_years(d: date, years: int) -> date:
    """Add calendar years; Feb 29 maps to Feb 28 in a non-leap target year."""
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        # JavaScript's setFullYear rolls Feb 29 over to Mar 1 instead, which
        # makes a 2024-02-29 to 2025-02-28 holding short-term there.
        return d.replace(year=d.year + years, day=28)


def held_at_least(start: date, end: date, years: int) -> bool:
    """True if ``end`` falls on or after ``start`` plus ``years`` calendar years."""
    return end >= add_years(start, years)


def holding_period_days(purchase_date: date, sale_date: date) -> int:
    return abs((sale_date - purchase_date).days)


class DispositionClassifier:
    """Classifies a sale as qualifying or disqualifying."""

    def classify(self, purchase: PurchaseInfo, sale: SaleInfo) -> Classification:
        """Classify a disposition and measure its holding period.

        Args:
            purchase: The ESPP purchase (offering and purchase dates are used).
            sale: The sale (only the sale date is used).

        Returns:
            Classification with qualifying flag, holding days, and capital gain term.
        """
        held_from_purchase = held_at_least(
            purchase.purchase_date, sale.sale_date, QUALIFYING_YEARS_FROM_PURCHASE
        )
        held_from_offering = held_at_least(
            purchase.offering_date, sale.sale_date, QUALIFYING_YEARS_FROM_OFFERING
        )
        is_qualifying = held_from_purchase and held_from_offering

        if held_at_least(purchase.purchase_date, sale.sale_date, LONG_TERM_YEARS):
            term = CapitalGainTerm.LONG_TERM
        else:
            term = CapitalGainTerm.SHORT_TERM

        days = holding_period_days(purchase.purchase_date, sale.sale_date)
        logger.debug(
            "Classified sale on %s: qualifying=%s (purchase leg=%s, offering leg=%s), %d days, %s",
            sale.sale_date, is_qualifying, held_from_purchase, held_from_offering, days, term,
        )
        return Classification(
            is_qualifying=is_qualifying,
            holding_period_days=days,
            capital_gain_term=term,
        )
