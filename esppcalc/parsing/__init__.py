"""Bulk-import parsing for Form 3922 data."""

from esppcalc.parsing.form_3922_line import Form3922LineParser, parse_form3922_line

__all__ = ["Form3922LineParser", "parse_form3922_line"]
