from __future__ import annotations


class VendingError(Exception):
    pass


class InvalidAmountError(VendingError, ValueError):
    pass


class SessionStateError(VendingError):
    pass


class CatalogError(VendingError):
    pass
