"""Enumerations for the ESPP tax calculator."""

from enum import StrEnum


class DispositionType(StrEnum):
    QUALIFYING = "QUALIFYING"
    DISQUALIFYING = "DISQUALIFYING"


class CapitalGainTerm(StrEnum):
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"
