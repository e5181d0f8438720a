"""
Employee Service: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the failure modes of the service.
How:   Each exception class carries a message and optional context dict.
       The employee route converts ValidationFailedError to a bare 400; the
       readiness probe converts any store failure to 503; global handlers
       (registered in main.py) turn everything else into a generic 500.
Who:   Raised by the validation service and the data access provider.

Exception Hierarchy:
    EmployeeAppError (base)
    ├── ValidationFailedError        → 400 Bad Request (empty body)
    └── DatabaseError                → 500 Internal Server Error
        ├── StorageUnavailableError  → connection / query / write failure
        └── ConstraintViolationError → store rejected the write (integrity)

    Clients only ever see "500" for the DatabaseError family; the subtype is
    logged server-side.
"""

from typing import Any, Dict, List, Optional


class EmployeeAppError(Exception):
    """
    Base exception for all Employee Service errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, never returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationFailedError(EmployeeAppError):
    """
    Raised when a create payload fails validation.

    When:    Body is not a JSON object, `name` is missing, blank or not a
             string, or `id` is present with a non-integer value.
    HTTP:    400 Bad Request, no body detail.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if errors:
            ctx["errors"] = list(errors)
        super().__init__(message=message, context=ctx)
        self.errors = list(errors or [])


class DatabaseError(EmployeeAppError):
    """
    Base for failures reported by the persistence gateway.

    HTTP:    500 Internal Server Error (generic, no structured body).
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageUnavailableError(DatabaseError):
    """
    Raised when the store cannot be reached or a query/write fails.

    When:    Connection refused, authentication failure, lost connection,
             malformed SQL, missing table.
    """

    def __init__(
        self,
        message: str = "The employee store is unavailable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConstraintViolationError(DatabaseError):
    """
    Raised when the store rejects a write for integrity reasons.

    The only declared constraint is the primary key, which the store assigns
    itself, so in practice this only appears when the table has been altered
    out-of-band.
    """

    def __init__(
        self,
        message: str = "The employee record violates a store constraint",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
