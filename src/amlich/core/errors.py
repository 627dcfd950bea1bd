class AmlichError(Exception):
    """Base error."""

class InvalidDateError(AmlichError, ValueError):
    """Raised when a civil or lunar date label does not exist."""
