"""Tests for the ESPP text report and PDF export."""

from pathlib import Path

import pdfplumber
import pytest

from esppcalc import calculate
from esppcalc.exceptions import ReportExportError
from esppcalc.models.inputs import PurchaseInfo, SaleInfo, TaxRates
from esppcalc.reports import ESPPPdfExporter, ESPPReport, ESPPReportGenerator


@pytest.fixture
def qualifying_report(
    qualifying_purchase: PurchaseInfo, qualifying_sale: SaleInfo, tax_rates: TaxRates
) -> ESPPReport:
    result = calculate(qualifying_purchase, qualifying_sale, tax_rates)
    return ESPPReport(purchase=qualifying_purchase, sale=qualifying_sale, rates=tax_rates, result=result)


@pytest.fixture
def disqualifying_report(
    disqualifying_purchase: PurchaseInfo, disqualifying_sale: SaleInfo, tax_rates: TaxRates
) -> ESPPReport:
    result = calculate(disqualifying_purchase, disqualifying_sale, tax_rates)
    return ESPPReport(
        purchase=disqualifying_purchase, sale=disqualifying_sale, rates=tax_rates, result=result
    )


class TestESPPReportGenerator:
    def test_render_qualifying(self, qualifying_report: ESPPReport):
        text = ESPPReportGenerator().render(qualifying_report)
        assert "ESPP Tax Calculation Results" in text
        assert "Purchase Date:   2021-07-01" in text
        assert "Discount:        15%" in text
        assert "Disposition Type:    Qualifying" in text
        assert "Holding Period:      761 days" in text
        assert "Adjusted Cost Basis: $1,000.00 (Report this value)" in text
        assert "Gross Gain:          $1,150.00" in text
        assert "Net Gain:            $956.50" in text
        assert "Capital Gain:        $1,000.00 (long-term)" in text
        assert "Tax Savings:         -$21.00" in text
        assert "does not constitute tax advice" in text

    def test_render_disqualifying(self, disqualifying_report: ESPPReport):
        text = ESPPReportGenerator().render(disqualifying_report)
        assert "Disposition Type:    Disqualifying" in text
        assert "Ordinary Income:     $650.00" in text
        assert "(short-term)" in text

    def test_write(self, qualifying_report: ESPPReport, tmp_path: Path):
        out = ESPPReportGenerator().write(qualifying_report, tmp_path / "nested" / "report.txt")
        assert out.exists()
        assert "Report this value" in out.read_text()

    def test_write_failure(self, qualifying_report: ESPPReport, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with pytest.raises(ReportExportError):
            ESPPReportGenerator().write(qualifying_report, blocker / "report.txt")


class TestESPPPdfExporter:
    def test_export_round_trip_text(self, qualifying_report: ESPPReport, tmp_path: Path):
        out = ESPPPdfExporter().export(qualifying_report, tmp_path / "espp.pdf")
        with pdfplumber.open(out) as pdf:
            assert len(pdf.pages) == 1
            text = (pdf.pages[0].extract_text() or "").replace(" ", "")
        assert "ESPPTaxCalculationResults" in text
        assert "DispositionType:Qualifying" in text
        assert "AdjustedCostBasis:$1,000.00(Reportthisvalue)" in text
        assert "NetGain:$956.50" in text
        assert "(long-term)" in text

    def test_export_failure(self, qualifying_report: ESPPReport, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with pytest.raises(ReportExportError):
            ESPPPdfExporter().export(qualifying_report, blocker / "espp.pdf")
