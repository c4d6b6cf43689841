"""Errors raised by the bill splitting engine"""


class BillSplitterError(Exception):
    """Base class for all bill splitter errors."""


class InvalidPrice(BillSplitterError, ValueError):
    """Raised when a menu item is created with a negative or non-numeric price."""


class NotFound(BillSplitterError, LookupError):
    """Raised when an item or diner cannot be found on the bill."""


class InvalidDinerCount(BillSplitterError, ValueError):
    """Raised when shared costs are allocated across zero diners."""


class ItemAlreadyAssigned(BillSplitterError):
    """Raised when a personal item is assigned a second time."""


class InvalidPercentage(BillSplitterError, ValueError):
    """Raised when a tip or service charge percentage is not a finite number."""
