"""One-page PDF export of an ESPP tax calculation."""

from pathlib import Path

from fpdf import FPDF

from esppcalc.exceptions import ReportExportError
from esppcalc.reports.formatting import format_currency, format_discount_percentage
from esppcalc.reports.models import ESPPReport

# (fill RGB, text RGB) for the highlighted result bands
ADJUSTED_BASIS_COLORS = ((230, 255, 230), (0, 100, 0))
GROSS_GAIN_COLORS = ((245, 230, 255), (100, 0, 100))
NET_GAIN_COLORS = ((230, 230, 255), (0, 0, 100))

DISCLAIMER = "This calculation is for informational purposes only and does not constitute tax advice."


class ESPPPdfExporter:
    """Writes the calculation inputs and key results to a PDF."""

    def build(self, report: ESPPReport) -> FPDF:
        purchase, sale, result = report.purchase, report.sale, report.result
        pdf = FPDF()
        pdf.add_page()

        pdf.set_font("Helvetica", size=20)
        pdf.text(20, 20, "ESPP Tax Calculation Results")

        pdf.set_font("Helvetica", size=12)
        pdf.text(20, 35, "Input Summary:")
        inputs = [
            f"Purchase Date: {purchase.purchase_date.isoformat()}",
            f"Purchase Price: {format_currency(purchase.purchase_price)}",
            f"FMV at Purchase: {format_currency(purchase.fair_market_value_at_purchase)}",
            f"Offering Date: {purchase.offering_date.isoformat()}",
            f"FMV at Offering: {format_currency(purchase.fair_market_value_at_offering)}",
            f"Discount: {format_discount_percentage(purchase.discount_percentage)}",
            f"Sale Date: {sale.sale_date.isoformat()}",
            f"Sale Price: {format_currency(sale.sale_price)}",
            f"Shares Sold: {sale.shares_sold}",
        ]
        for i, line in enumerate(inputs):
            pdf.text(25, 45 + 7 * i, line)

        disposition = "Qualifying" if result.is_qualifying_disposition else "Disqualifying"
        pdf.text(20, 116, "Calculation Results:")
        pdf.text(25, 126, f"Disposition Type: {disposition}")
        pdf.text(25, 133, f"Holding Period: {result.holding_period_days} days")

        self._highlight(
            pdf, 140,
            f"Adjusted Cost Basis: {format_currency(result.adjusted_cost_basis)} (Report this value)",
            ADJUSTED_BASIS_COLORS,
        )
        self._highlight(pdf, 152, f"Gross Gain: {format_currency(result.gross_gain)}", GROSS_GAIN_COLORS)
        self._highlight(pdf, 164, f"Net Gain: {format_currency(result.net_gain)}", NET_GAIN_COLORS)

        details = [
            f"Ordinary Income: {format_currency(result.ordinary_income)}",
            f"Capital Gain: {format_currency(result.capital_gain)} ({result.capital_gain_term})",
            f"Tax Liability: {format_currency(result.total_tax_liability)}",
            f"Tax Savings: {format_currency(result.tax_savings)}",
        ]
        for i, line in enumerate(details):
            pdf.text(25, 182 + 7 * i, line)

        pdf.set_font("Helvetica", size=10)
        pdf.text(20, 280, DISCLAIMER)
        return pdf

    def export(self, report: ESPPReport, path: Path) -> Path:
        """Build the PDF and write it to ``path``."""
        pdf = self.build(report)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            pdf.output(str(path))
        except OSError as exc:
            raise ReportExportError(str(path), str(exc)) from exc
        return path

    @staticmethod
    def _highlight(
        pdf: FPDF,
        top: float,
        text: str,
        colors: tuple[tuple[int, int, int], tuple[int, int, int]],
    ) -> None:
        fill, ink = colors
        pdf.set_fill_color(*fill)
        pdf.rect(20, top, 170, 12, style="F")
        pdf.set_text_color(*ink)
        pdf.text(25, top + 7, text)
        pdf.set_text_color(0, 0, 0)
