"""Domain-specific exceptions for the expense ledger core."""

class ValidationError(ValueError):
    """Raised when a candidate expense does not meet validation requirements."""


class InvalidRangeError(ValueError):
    """Raised when a date range filter has a bound that cannot be parsed."""
