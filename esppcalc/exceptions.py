"""Custom exceptions for the ESPP tax calculator."""


class ESPPCalculationError(Exception):
    """Base exception for ESPP calculator errors."""


class InputValidationError(ESPPCalculationError):
    """Raised when calculation inputs fail boundary validation.

    ``errors`` maps each offending field name to a user-facing message.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Invalid calculation inputs: {details}")


class ReportExportError(ESPPCalculationError):
    """Raised when a report cannot be written to disk."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Report export failed for {path}: {message}")
