"""
Error types raised by baaskit.

Both errors are caller mistakes: nothing inside the package retries or
recovers from them.
"""


class BaasError(Exception):
    """Base class for every error raised by baaskit."""


class InvalidFilterState(BaasError, ValueError):
    """
    Raised by QueryFilter.compile() when a filter has paging but no order.
    Fix the filter (set an order or clear the paging) and compile again.
    """


class InvalidScope(BaasError, KeyError):
    """Raised when a scope lookup is given something that is not a Scope."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


__all__ = ["BaasError", "InvalidFilterState", "InvalidScope"]
