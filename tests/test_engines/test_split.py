"""Tests for the ordinary income / capital gain splitter."""

from datetime import date
from decimal import Decimal

from esppcalc.engines.lookback import LookbackPricingEngine
from esppcalc.engines.split import IncomeGainSplitter
from esppcalc.models.enums import CapitalGainTerm
from esppcalc.models.inputs import PurchaseInfo, SaleInfo
from esppcalc.models.results import Classification, LookbackPricing

QUALIFYING = Classification(
    is_qualifying=True, holding_period_days=761, capital_gain_term=CapitalGainTerm.LONG_TERM
)
DISQUALIFYING = Classification(
    is_qualifying=False, holding_period_days=151, capital_gain_term=CapitalGainTerm.SHORT_TERM
)


def _purchase(fmv_offering: str, fmv_purchase: str, discount: str = "15") -> PurchaseInfo:
    return PurchaseInfo(
        offering_date=date(2021, 1, 1),
        purchase_date=date(2021, 7, 1),
        fair_market_value_at_offering=Decimal(fmv_offering),
        fair_market_value_at_purchase=Decimal(fmv_purchase),
        purchase_price=Decimal("8.50"),
        discount_percentage=Decimal(discount),
    )


def _sale(price: str, shares: str = "100") -> SaleInfo:
    return SaleInfo(sale_date=date(2023, 8, 1), sale_price=Decimal(price), shares_sold=Decimal(shares))


class TestIncomeGainSplitter:
    def setup_method(self):
        self.splitter = IncomeGainSplitter()
        self.pricing_engine = LookbackPricingEngine()

    def _split(self, purchase: PurchaseInfo, sale: SaleInfo, classification: Classification):
        pricing = self.pricing_engine.resolve_effective_price(purchase)
        return self.splitter.split(purchase, sale, classification, pricing)

    def test_qualifying_scenario(self):
        split = self._split(_purchase("10", "15"), _sale("20"), QUALIFYING)
        # min((10 - 8.50) * 100, 10 * 0.15 * 100) = min(150, 150)
        assert split.ordinary_income == Decimal("150")
        assert split.total_proceeds_from_sale == Decimal("2000")
        assert split.total_cost_basis == Decimal("850")
        assert split.capital_gain == Decimal("1000")
        assert split.discount == Decimal("0.15")
        assert split.discount_amount == Decimal("150")

    def test_qualifying_statutory_cap_binds(self):
        # 20% plan discount: actual price 8.00, offering discount 2.00/share,
        # but ordinary income is capped at 15% of the offering FMV (1.50/share)
        split = self._split(_purchase("10", "15", discount="20"), _sale("20"), QUALIFYING)
        assert split.ordinary_income == Decimal("150")
        assert split.capital_gain == Decimal("2000") - Decimal("800") - Decimal("150")

    def test_qualifying_with_purchase_fmv_lower(self):
        # actual price 12 * 0.85 = 10.20; min((20 - 10.20) * 10, 20 * 0.15 * 10) = 30
        split = self._split(_purchase("20", "12"), _sale("25", shares="10"), QUALIFYING)
        assert split.ordinary_income == Decimal("30")
        assert split.capital_gain == Decimal("250") - Decimal("102") - Decimal("30")

    def test_disqualifying_uses_purchase_spread_only(self):
        split = self._split(_purchase("10", "15"), _sale("16"), DISQUALIFYING)
        # (15 - 8.50) * 100
        assert split.ordinary_income == Decimal("650")
        assert split.capital_gain == Decimal("100")

    def test_disqualifying_ignores_offering_fmv(self):
        low = self._split(_purchase("10", "15"), _sale("16"), DISQUALIFYING)
        pricing = LookbackPricing(actual_purchase_price=Decimal("8.50"), reference_fmv=Decimal("10"))
        high = self.splitter.split(_purchase("50", "15"), _sale("16"), DISQUALIFYING, pricing)
        assert low.ordinary_income == high.ordinary_income

    def test_capital_loss(self):
        split = self._split(_purchase("10", "15"), _sale("5"), DISQUALIFYING)
        assert split.capital_gain == Decimal("-1000")

    def test_negative_ordinary_income_passes_through(self):
        # Negative discount: price paid above the offering FMV
        split = self._split(_purchase("10", "12", discount="-10"), _sale("20"), QUALIFYING)
        assert split.ordinary_income == Decimal("-100")
        assert split.capital_gain == Decimal("2000") - Decimal("1100") + Decimal("100")

    def test_zero_reference_fmv_guard(self):
        pricing = LookbackPricing(actual_purchase_price=Decimal("0"), reference_fmv=Decimal("0"))
        split = self.splitter.split(_purchase("0", "5"), _sale("20"), DISQUALIFYING, pricing)
        assert split.discount == Decimal("0")
        assert split.discount_amount == Decimal("0")

    def test_gain_is_partitioned(self):
        for classification in (QUALIFYING, DISQUALIFYING):
            for price in ("5", "9", "20", "100"):
                split = self._split(_purchase("10", "15"), _sale(price), classification)
                gross = split.total_proceeds_from_sale - split.total_cost_basis
                assert gross == split.ordinary_income + split.capital_gain
