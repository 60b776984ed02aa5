"""Calculator defaults and statutory constants.

Defaults here are what a caller (CLI, Form 3922 importer) supplies when the
user gives no value. The engines never fall back to them implicitly; every
rate and percentage reaches the core as an explicit input.

Sources:
  - Holding periods: IRC Section 423(a)(1), IRS Pub. 525
  - 15% discount cap: IRC Section 423(b)(6), Treas. Reg. 1.423-2(k)
"""

from decimal import Decimal

from esppcalc.models.inputs import TaxRates

# ---------------------------------------------------------------------------
# Holding-period thresholds (calendar years)
# ---------------------------------------------------------------------------
QUALIFYING_YEARS_FROM_OFFERING = 2
QUALIFYING_YEARS_FROM_PURCHASE = 1
LONG_TERM_YEARS = 1

# Ordinary income on a qualifying disposition is capped at this fraction of
# the offering-date FMV, regardless of the plan's actual discount.
STATUTORY_DISCOUNT_CAP = Decimal("0.15")

# ---------------------------------------------------------------------------
# Caller-side defaults
# ---------------------------------------------------------------------------
DEFAULT_DISCOUNT_PERCENTAGE = Decimal("15")

DEFAULT_TAX_RATES = TaxRates(
    federal_income_tax_rate=Decimal("0.24"),
    state_income_tax_rate=Decimal("0.05"),
    long_term_capital_gains_rate=Decimal("0.15"),
    short_term_capital_gains_rate=Decimal("0.24"),
)

DEFAULT_PDF_FILENAME = "espp-tax-calculation.pdf"
DEFAULT_REPORT_FILENAME = "espp-tax-calculation.txt"
