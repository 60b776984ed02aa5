"""Tests for calculation input and result models."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from esppcalc import calculate
from esppcalc.models.enums import CapitalGainTerm, DispositionType
from esppcalc.models.inputs import PurchaseInfo, SaleInfo, TaxRates


class TestPurchaseInfo:
    def test_coerces_strings(self):
        purchase = PurchaseInfo(
            offering_date="2024-01-01",
            purchase_date="2024-06-30",
            fair_market_value_at_offering="140.00",
            fair_market_value_at_purchase="150.00",
            purchase_price="119.00",
            discount_percentage="15",
        )
        assert purchase.offering_date == date(2024, 1, 1)
        assert purchase.fair_market_value_at_offering == Decimal("140.00")

    def test_frozen(self, qualifying_purchase: PurchaseInfo):
        with pytest.raises(ValidationError):
            qualifying_purchase.purchase_price = Decimal("1")

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            SaleInfo(
                sale_date=date(2025, 1, 1),
                sale_price=Decimal("1"),
                shares_sold=Decimal("1"),
                wash_sale=True,
            )

    def test_missing_date_rejected(self):
        with pytest.raises(ValidationError):
            SaleInfo(sale_price=Decimal("1"), shares_sold=Decimal("1"))


class TestTaxRates:
    def test_combined_income_tax_rate(self, tax_rates: TaxRates):
        assert tax_rates.combined_income_tax_rate == Decimal("0.29")


class TestCalculationResult:
    def test_derived_properties(
        self, disqualifying_purchase: PurchaseInfo, disqualifying_sale: SaleInfo, tax_rates: TaxRates
    ):
        result = calculate(disqualifying_purchase, disqualifying_sale, tax_rates)
        assert result.disposition_type == DispositionType.DISQUALIFYING
        assert result.gross_gain == Decimal("750")
        assert result.net_gain == Decimal("537.50")

    def test_term_serializes_to_label(
        self, qualifying_purchase: PurchaseInfo, qualifying_sale: SaleInfo, tax_rates: TaxRates
    ):
        result = calculate(qualifying_purchase, qualifying_sale, tax_rates)
        assert result.model_dump(mode="json")["capital_gain_term"] == "long-term"
        assert CapitalGainTerm.SHORT_TERM == "short-term"
