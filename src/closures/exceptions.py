class ClosureError(Exception):
    """Base class for errors raised by this package."""


class ValidationError(ClosureError):
    """Raised when provided inputs or settings are invalid."""


class PocketError(ClosureError):
    """Base class for pocket trade errors."""


class InsufficientFundsError(PocketError):
    """Raised when a trinket cannot be bought because the pocket is short on coins."""


class OutOfStockError(PocketError):
    """Raised when selling a trinket from a pocket that holds none."""
