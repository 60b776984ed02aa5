"""ESPP tax calculation text report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from esppcalc.exceptions import ReportExportError
from esppcalc.reports.formatting import (
    format_currency,
    format_discount_percentage,
    format_percentage,
)
from esppcalc.reports.models import ESPPReport

TEMPLATE_DIR = Path(__file__).parent / "templates"


class ESPPReportGenerator:
    """Generates the plain-text ESPP tax report."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), keep_trailing_newline=True)
        self.env.filters["currency"] = format_currency
        self.env.filters["percentage"] = format_percentage
        self.env.filters["discount"] = format_discount_percentage

    def render(self, report: ESPPReport) -> str:
        """Render the ESPP tax report."""
        template = self.env.get_template("espp_report.txt")
        return template.render(
            purchase=report.purchase,
            sale=report.sale,
            rates=report.rates,
            result=report.result,
        )

    def write(self, report: ESPPReport, path: Path) -> Path:
        """Render the report and write it to ``path``."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.render(report))
        except OSError as exc:
            raise ReportExportError(str(path), str(exc)) from exc
        return path
