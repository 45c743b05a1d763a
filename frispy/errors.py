"""Exception types raised by the POS store, checkout and order workflow."""

from __future__ import annotations


class FrispyError(Exception):
    """Base class for all POS errors surfaced to callers."""


class MalformedRecordError(FrispyError, ValueError):
    """A stored or incoming record cannot be parsed into a model."""


class StoreError(FrispyError):
    """The persistent store could not be read or written."""


class UnknownRecordError(FrispyError, KeyError):
    """An update or delete referenced an id that is not in the collection."""

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class InvalidTransitionError(FrispyError):
    """An order status change is not allowed from the current status."""


class EmptyCartError(FrispyError):
    """Checkout was attempted with nothing in the cart."""


class UnknownMenuItemError(FrispyError, KeyError):
    """A cart entry references a menu item id that does not exist."""

    def __str__(self) -> str:
        return self.args[0] if self.args else ""
