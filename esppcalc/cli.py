"""Typer CLI interface for the ESPP tax calculator."""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from esppcalc.config import DEFAULT_PDF_FILENAME, DEFAULT_REPORT_FILENAME, DEFAULT_TAX_RATES
from esppcalc.engines.espp import calculate as run_calculation
from esppcalc.exceptions import ESPPCalculationError, InputValidationError
from esppcalc.models.inputs import PurchaseInfo, SaleInfo, TaxRates
from esppcalc.models.results import CalculationResult
from esppcalc.parsing.form_3922_line import parse_form3922_line
from esppcalc.reports.formatting import (
    format_currency,
    format_discount_percentage,
    format_percentage,
)
from esppcalc.reports.models import ESPPReport
from esppcalc.validation import derive_discount_percentage, ensure_valid

app = typer.Typer(
    name="esppcalc",
    help="ESPP tax calculator: adjusted cost basis and tax for Section 423 share sales.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ESPP tax calculator: adjusted cost basis and tax for Section 423 share sales."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Option parsing helpers
# ---------------------------------------------------------------------------


def _parse_decimal(name: str, raw: str) -> Decimal:
    """Parse a CLI value into Decimal, accepting $ and thousands separators."""
    cleaned = raw.strip().replace("$", "").replace(",", "")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        typer.echo(f"Error: Invalid number for {name}: {raw!r}", err=True)
        raise typer.Exit(1)
    if not value.is_finite():
        typer.echo(f"Error: Invalid number for {name}: {raw!r}", err=True)
        raise typer.Exit(1)
    return value


def _parse_date(name: str, raw: str) -> date:
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        typer.echo(f"Error: Invalid date for {name}: {raw!r} (expected YYYY-MM-DD)", err=True)
        raise typer.Exit(1)


def _build_rates(federal: str, state: str, long_term: str, short_term: str) -> TaxRates:
    return TaxRates(
        federal_income_tax_rate=_parse_decimal("--federal-rate", federal),
        state_income_tax_rate=_parse_decimal("--state-rate", state),
        long_term_capital_gains_rate=_parse_decimal("--ltcg-rate", long_term),
        short_term_capital_gains_rate=_parse_decimal("--stcg-rate", short_term),
    )


def _rate_option(default: Decimal, flag: str, envvar: str, label: str):
    return typer.Option(str(default), flag, envvar=envvar, help=f"{label} rate as a fraction")


def _output_path(path: Path, default_name: str) -> Path:
    """Resolve an export target; a directory gets the default file name."""
    if path.is_dir():
        return path / default_name
    return path


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _result_table(result: CalculationResult) -> Table:
    tbl = Table(title="ESPP Tax Calculation Results", show_header=True)
    tbl.add_column("Item")
    tbl.add_column("Value", justify="right")

    disposition = "Qualifying" if result.is_qualifying_disposition else "Disqualifying"
    tbl.add_row("Disposition Type", disposition)
    tbl.add_row("Holding Period", f"{result.holding_period_days} days")
    tbl.add_row("Effective Discount", format_percentage(result.discount))
    tbl.add_row("Discount Amount", format_currency(result.discount_amount))
    tbl.add_row("Total Proceeds", format_currency(result.total_proceeds_from_sale))
    tbl.add_row("Cost Basis", format_currency(result.total_cost_basis))
    tbl.add_row("[bold green]Adjusted Cost Basis[/bold green]", format_currency(result.adjusted_cost_basis))
    tbl.add_row("Ordinary Income", format_currency(result.ordinary_income))
    tbl.add_row(f"Capital Gain ({result.capital_gain_term})", format_currency(result.capital_gain))
    tbl.add_row("Ordinary Income Tax", format_currency(result.ordinary_income_tax))
    tbl.add_row("Capital Gains Tax", format_currency(result.capital_gains_tax))
    tbl.add_row("[bold]Total Tax Liability[/bold]", format_currency(result.total_tax_liability))
    tbl.add_row("Tax If All Capital Gain", format_currency(result.incorrect_tax_liability))
    tbl.add_row("Tax Savings", format_currency(result.tax_savings))
    return tbl


def _purchase_table(purchase: PurchaseInfo, shares: Decimal) -> Table:
    tbl = Table(title="Form 3922 Purchase", show_header=False, padding=(0, 1))
    tbl.add_column("Field")
    tbl.add_column("Value", justify="right")
    tbl.add_row("Offering Date", purchase.offering_date.isoformat())
    tbl.add_row("Purchase Date", purchase.purchase_date.isoformat())
    tbl.add_row("FMV at Offering", format_currency(purchase.fair_market_value_at_offering))
    tbl.add_row("FMV at Purchase", format_currency(purchase.fair_market_value_at_purchase))
    tbl.add_row("Purchase Price", format_currency(purchase.purchase_price))
    tbl.add_row("Discount", format_discount_percentage(purchase.discount_percentage))
    tbl.add_row("Shares", str(shares))
    return tbl


def _run_and_emit(
    purchase: PurchaseInfo,
    sale: SaleInfo,
    rates: TaxRates,
    as_json: bool,
    report_path: Path | None,
    pdf_path: Path | None,
) -> None:
    """Validate, calculate, print, and export. Exits 1 on any calculator error."""
    try:
        ensure_valid(purchase, sale, rates)
    except InputValidationError as exc:
        for field, message in exc.errors.items():
            typer.echo(f"Error: {field}: {message}", err=True)
        raise typer.Exit(1)

    result = run_calculation(purchase, sale, rates)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        Console().print(_result_table(result))

    report = ESPPReport(purchase=purchase, sale=sale, rates=rates, result=result)
    try:
        if report_path is not None:
            from esppcalc.reports.espp_report import ESPPReportGenerator

            written = ESPPReportGenerator().write(report, _output_path(report_path, DEFAULT_REPORT_FILENAME))
            typer.echo(f"Report written to {written}", err=True)
        if pdf_path is not None:
            from esppcalc.reports.pdf_export import ESPPPdfExporter

            written = ESPPPdfExporter().export(report, _output_path(pdf_path, DEFAULT_PDF_FILENAME))
            typer.echo(f"PDF written to {written}", err=True)
    except ESPPCalculationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command(name="calculate")
def calculate_cmd(
    offering_date: str = typer.Option(..., "--offering-date", help="Offering (grant) date, YYYY-MM-DD"),
    purchase_date: str = typer.Option(..., "--purchase-date", help="Purchase (exercise) date, YYYY-MM-DD"),
    sale_date: str = typer.Option(..., "--sale-date", help="Sale date, YYYY-MM-DD"),
    fmv_offering: str = typer.Option(..., "--fmv-offering", help="FMV per share on the offering date"),
    fmv_purchase: str = typer.Option(..., "--fmv-purchase", help="FMV per share on the purchase date"),
    purchase_price: str = typer.Option(..., "--purchase-price", help="Price paid per share"),
    sale_price: str = typer.Option(..., "--sale-price", help="Sale price per share"),
    shares: str = typer.Option(..., "--shares", help="Number of shares sold"),
    discount: str | None = typer.Option(
        None,
        "--discount",
        help="Plan discount percentage (default: derived from FMV at offering and purchase price)",
    ),
    federal_rate: str = _rate_option(
        DEFAULT_TAX_RATES.federal_income_tax_rate, "--federal-rate", "ESPPCALC_FEDERAL_RATE", "Federal income tax"
    ),
    state_rate: str = _rate_option(
        DEFAULT_TAX_RATES.state_income_tax_rate, "--state-rate", "ESPPCALC_STATE_RATE", "State income tax"
    ),
    ltcg_rate: str = _rate_option(
        DEFAULT_TAX_RATES.long_term_capital_gains_rate, "--ltcg-rate", "ESPPCALC_LTCG_RATE", "Long-term capital gains"
    ),
    stcg_rate: str = _rate_option(
        DEFAULT_TAX_RATES.short_term_capital_gains_rate, "--stcg-rate", "ESPPCALC_STCG_RATE", "Short-term capital gains"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    report: Path | None = typer.Option(
        None, "--report", help=f"Write a text report to this path (a directory gets {DEFAULT_REPORT_FILENAME})"
    ),
    pdf: Path | None = typer.Option(
        None, "--pdf", help=f"Write a PDF report to this path (a directory gets {DEFAULT_PDF_FILENAME})"
    ),
) -> None:
    """Calculate adjusted cost basis and tax for an ESPP sale."""
    fmv_offering_value = _parse_decimal("--fmv-offering", fmv_offering)
    price_value = _parse_decimal("--purchase-price", purchase_price)
    if discount is None:
        discount_value = derive_discount_percentage(fmv_offering_value, price_value)
    else:
        discount_value = _parse_decimal("--discount", discount)

    purchase = PurchaseInfo(
        offering_date=_parse_date("--offering-date", offering_date),
        purchase_date=_parse_date("--purchase-date", purchase_date),
        fair_market_value_at_offering=fmv_offering_value,
        fair_market_value_at_purchase=_parse_decimal("--fmv-purchase", fmv_purchase),
        purchase_price=price_value,
        discount_percentage=discount_value,
    )
    sale = SaleInfo(
        sale_date=_parse_date("--sale-date", sale_date),
        sale_price=_parse_decimal("--sale-price", sale_price),
        shares_sold=_parse_decimal("--shares", shares),
    )
    rates = _build_rates(federal_rate, state_rate, ltcg_rate, stcg_rate)
    _run_and_emit(purchase, sale, rates, as_json, report, pdf)


@app.command(name="import-3922")
def import_3922(
    line: str = typer.Argument(..., help="Pasted Form 3922 row (dates MM/DD/YYYY, $-prefixed prices)"),
    sale_date: str | None = typer.Option(None, "--sale-date", help="Sale date, YYYY-MM-DD"),
    sale_price: str | None = typer.Option(None, "--sale-price", help="Sale price per share"),
    federal_rate: str = _rate_option(
        DEFAULT_TAX_RATES.federal_income_tax_rate, "--federal-rate", "ESPPCALC_FEDERAL_RATE", "Federal income tax"
    ),
    state_rate: str = _rate_option(
        DEFAULT_TAX_RATES.state_income_tax_rate, "--state-rate", "ESPPCALC_STATE_RATE", "State income tax"
    ),
    ltcg_rate: str = _rate_option(
        DEFAULT_TAX_RATES.long_term_capital_gains_rate, "--ltcg-rate", "ESPPCALC_LTCG_RATE", "Long-term capital gains"
    ),
    stcg_rate: str = _rate_option(
        DEFAULT_TAX_RATES.short_term_capital_gains_rate, "--stcg-rate", "ESPPCALC_STCG_RATE", "Short-term capital gains"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    report: Path | None = typer.Option(
        None, "--report", help=f"Write a text report to this path (a directory gets {DEFAULT_REPORT_FILENAME})"
    ),
    pdf: Path | None = typer.Option(
        None, "--pdf", help=f"Write a PDF report to this path (a directory gets {DEFAULT_PDF_FILENAME})"
    ),
) -> None:
    """Import a pasted Form 3922 row; calculate when a sale date and price are given."""
    imported = parse_form3922_line(line)
    if imported is None:
        typer.echo("Input does not match the Form 3922 row format; nothing imported.", err=True)
        raise typer.Exit(1)

    if sale_date is None or sale_price is None:
        if as_json:
            typer.echo(imported.model_dump_json(indent=2))
        else:
            Console().print(_purchase_table(imported.purchase_info, imported.shares_sold))
            typer.echo("Pass --sale-date and --sale-price to calculate tax for this purchase.")
        return

    sale = SaleInfo(
        sale_date=_parse_date("--sale-date", sale_date),
        sale_price=_parse_decimal("--sale-price", sale_price),
        shares_sold=imported.shares_sold,
    )
    rates = _build_rates(federal_rate, state_rate, ltcg_rate, stcg_rate)
    _run_and_emit(imported.purchase_info, sale, rates, as_json, report, pdf)


if __name__ == "__main__":
    app()
