"""
GenexMart Backend: Exception Hierarchy
=========================================

What:  Application exceptions raised by services and mapped to HTTP
       responses by the handlers registered in main.py.
How:   Each exception carries a message (returned to the client as
       {"error": message}) and an optional context dict (logged only).

Exception Hierarchy:
    GenexmartError (base)
    ├── NotFoundError   → 404 Not Found
    └── DatabaseError   → 500 Internal Server Error (raw store message)

There is no validation error: fields go to the store as-is and come back,
if at all, as a DatabaseError.
"""

from typing import Any, Dict, Optional


def _driver_message(orig: BaseException) -> str:
    """
    The text a DBAPI exception reports.

    PyMySQL (under aiomysql) raises with args (errno, message), and its str()
    is the tuple repr. Only the message part is kept.
    """
    args = getattr(orig, "args", ())
    if len(args) == 2 and isinstance(args[0], int) and isinstance(args[1], str):
        return args[1]
    return str(orig)


class GenexmartError(Exception):
    """
    Base exception for all GenexMart application errors.

    Attributes:
        message:  Text placed in the response body's "error" field
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(GenexmartError):
    """
    Raised when a requested record does not exist.

    When:    GET /api/penjualan/{id} for an order id with no header row.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: Optional[str] = None,
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(GenexmartError):
    """
    Raised when a store operation fails.

    What:    A query, insert, update or delete was rejected by the driver
             (connection lost, constraint violation, bad value, ...).
    HTTP:    500 Internal Server Error

    The message is the driver's own text, passed through unchanged.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        prefix: str = "",
        context: Optional[Dict[str, Any]] = None,
    ) -> "DatabaseError":
        """
        Wrap a SQLAlchemy/DBAPI exception, keeping the driver's message.

        SQLAlchemy's DBAPIError keeps the driver exception on `.orig`, so the
        message carries no statement dump or documentation link.
        """
        orig = getattr(exc, "orig", None)
        message = _driver_message(orig) if orig is not None else str(exc)
        ctx = context or {}
        ctx["error_type"] = type(orig if orig is not None else exc).__name__
        return cls(message=f"{prefix}{message}", context=ctx)
