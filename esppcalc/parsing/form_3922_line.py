"""Form 3922 pasted-line parser.

Brokerage statements list Form 3922 data as one row per purchase:

    [ACCOUNT] MM/DD/YYYY MM/DD/YYYY $FMV_GRANT $FMV_PURCHASE $PRICE SHARES

Box 1: date option granted (offering date)
Box 2: date option exercised (purchase date)
Box 3: FMV per share on grant date
Box 4: FMV per share on exercise date
Box 5: exercise price paid per share
Box 6: number of shares transferred
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from esppcalc.models.inputs import Form3922Import, PurchaseInfo
from esppcalc.validation import derive_discount_percentage

logger = logging.getLogger(__name__)


class Form3922LineParser:
    """Parses a single pasted Form 3922 row into calculator inputs."""

    LINE_PATTERN = re.compile(
        r"^(?:\d+\s+)?"
        r"(\d{2}/\d{2}/\d{4})\s+"  # Box 1
        r"(\d{2}/\d{2}/\d{4})\s+"  # Box 2
        r"\$(\d+(?:\.\d*)?)\s+"  # Box 3
        r"\$(\d+(?:\.\d*)?)\s+"  # Box 4
        r"\$(\d+(?:\.\d*)?)\s+"  # Box 5
        r"([\d,]+(?:\.\d*)?)$"  # Box 6
    )

    def parse(self, text: str) -> Form3922Import | None:
        """Parse the first non-blank line of ``text``.

        Returns None when the line does not match the expected layout, so a
        bad paste leaves the caller's state untouched.
        """
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if not lines:
            return None

        match = self.LINE_PATTERN.match(lines[0])
        if not match:
            logger.debug("Form 3922 line did not match expected layout: %r", lines[0])
            return None

        offering_raw, purchase_raw, fmv_offering_raw, fmv_purchase_raw, price_raw, shares_raw = (
            match.groups()
        )
        offering_date = self._parse_date(offering_raw)
        purchase_date = self._parse_date(purchase_raw)
        fmv_offering = self._parse_decimal(fmv_offering_raw)
        fmv_purchase = self._parse_decimal(fmv_purchase_raw)
        price = self._parse_decimal(price_raw)
        shares = self._parse_decimal(shares_raw)

        parsed = (offering_date, purchase_date, fmv_offering, fmv_purchase, price, shares)
        if any(value is None for value in parsed):
            logger.debug("Form 3922 line has unparseable fields: %r", lines[0])
            return None

        purchase_info = PurchaseInfo(
            offering_date=offering_date,
            purchase_date=purchase_date,
            fair_market_value_at_offering=fmv_offering,
            fair_market_value_at_purchase=fmv_purchase,
            purchase_price=price,
            discount_percentage=derive_discount_percentage(fmv_offering, price),
        )
        return Form3922Import(purchase_info=purchase_info, shares_sold=shares)

    @staticmethod
    def _parse_date(value: str) -> date | None:
        try:
            return datetime.strptime(value, "%m/%d/%Y").date()
        except ValueError:
            return None

    @staticmethod
    def _parse_decimal(value: str) -> Decimal | None:
        cleaned = value.replace(",", "")
        if not cleaned:
            return None
        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return None


def parse_form3922_line(text: str) -> Form3922Import | None:
    """Parse a pasted Form 3922 row. See :class:`Form3922LineParser`."""
    return Form3922LineParser().parse(text)
