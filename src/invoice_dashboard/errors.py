"""
Exception taxonomy for the invoice dashboard data layer.

Lower-level failures (ReadError, ParseError, NotFoundError) are raised by
the record store and data stores. Public query functions wrap any of them
in a DataAccessError carrying a fixed, user-facing message; the original
error stays reachable through ``__cause__`` and the logs.
"""

import functools
from typing import Callable, TypeVar

from invoice_dashboard.lib import logs

LOG = logs.logger(__file__)

F = TypeVar("F", bound=Callable)


class DataError(Exception):
    """Base class for every error raised by the data layer."""


class ReadError(DataError, OSError):
    """A backing document could not be read."""


class ParseError(DataError, ValueError):
    """A backing document or record is not well-formed."""


class NotFoundError(DataError, LookupError):
    """An expected join partner is missing."""


class DataAccessError(DataError):
    """Raised at each public boundary in place of any lower-level failure."""


def data_access(message: str) -> Callable[[F], F]:
    """
    Wrap a public query so any failure surfaces as a DataAccessError.

    The original exception is logged with its traceback and chained as
    the cause of the raised DataAccessError.

    Args:
        message: Fixed user-facing message for the wrapped operation.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                LOG.error("Database Error: %s - %s", func.__name__, exc, exc_info=True)
                raise DataAccessError(message) from exc

        return wrapper  # type: ignore[return-value]

    return decorator
