"""Report generation for the ESPP tax calculator."""

from esppcalc.reports.espp_report import ESPPReportGenerator
from esppcalc.reports.models import ESPPReport
from esppcalc.reports.pdf_export import ESPPPdfExporter

__all__ = [
    "ESPPPdfExporter",
    "ESPPReport",
    "ESPPReportGenerator",
]
