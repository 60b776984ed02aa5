"""Shared test fixtures for the ESPP tax calculator."""

from datetime import date
from decimal import Decimal

import pytest

from esppcalc.models.inputs import PurchaseInfo, SaleInfo, TaxRates


@pytest.fixture
def tax_rates() -> TaxRates:
    return TaxRates(
        federal_income_tax_rate=Decimal("0.24"),
        state_income_tax_rate=Decimal("0.05"),
        long_term_capital_gains_rate=Decimal("0.15"),
        short_term_capital_gains_rate=Decimal("0.24"),
    )


@pytest.fixture
def qualifying_purchase() -> PurchaseInfo:
    return PurchaseInfo(
        offering_date=date(2021, 1, 1),
        purchase_date=date(2021, 7, 1),
        fair_market_value_at_offering=Decimal("10"),
        fair_market_value_at_purchase=Decimal("15"),
        purchase_price=Decimal("8.50"),
        discount_percentage=Decimal("15"),
    )


@pytest.fixture
def qualifying_sale() -> SaleInfo:
    return SaleInfo(
        sale_date=date(2023, 8, 1),
        sale_price=Decimal("20"),
        shares_sold=Decimal("100"),
    )


@pytest.fixture
def disqualifying_purchase() -> PurchaseInfo:
    return PurchaseInfo(
        offering_date=date(2022, 7, 1),
        purchase_date=date(2023, 1, 1),
        fair_market_value_at_offering=Decimal("10"),
        fair_market_value_at_purchase=Decimal("15"),
        purchase_price=Decimal("8.50"),
        discount_percentage=Decimal("15"),
    )


@pytest.fixture
def disqualifying_sale() -> SaleInfo:
    return SaleInfo(
        sale_date=date(2023, 6, 1),
        sale_price=Decimal("16"),
        shares_sold=Decimal("100"),
    )
