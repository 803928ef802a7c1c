# invoicebook/errors.py
"""
Error taxonomy shared by the domain, persistence and API layers.

Every error carries a kind and the HTTP status the API answers with, so the
routers never have to guess how to surface a failure.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    INVALID_REFERENCE = "invalid_reference"
    INVALID_STATUS = "invalid_status"
    INVALID_DATE_FORMAT = "invalid_date_format"
    NOT_FOUND = "not_found"
    CONSTRAINT_VIOLATION = "constraint_violation"
    STORAGE_FAILURE = "storage_failure"


class InvoicebookError(Exception):
    kind: ErrorKind = ErrorKind.STORAGE_FAILURE
    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


# ---- Validation (400) ----

class ValidationError(InvoicebookError):
    kind = ErrorKind.VALIDATION
    http_status = 400


class InvalidReference(ValidationError):
    """An identifier string is not a valid UUID."""

    kind = ErrorKind.INVALID_REFERENCE


class InvalidStatus(ValidationError):
    kind = ErrorKind.INVALID_STATUS

    def __init__(self, value: str):
        super().__init__(f"invalid invoice status: {value!r}")
        self.value = value


class InvalidDateFormat(ValidationError):
    kind = ErrorKind.INVALID_DATE_FORMAT


class PasswordTooLong(ValidationError):
    """bcrypt only looks at the first 72 bytes; longer inputs are refused."""

    def __init__(self, max_bytes: int):
        super().__init__(f"password must be at most {max_bytes} bytes")
        self.max_bytes = max_bytes


# ---- Lookup / storage ----

class NotFound(InvoicebookError):
    kind = ErrorKind.NOT_FOUND
    http_status = 404

    def __init__(self, resource: str, resource_id):
        super().__init__(f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class ConstraintViolation(InvoicebookError):
    """Unique or foreign-key constraint rejected a write."""

    kind = ErrorKind.CONSTRAINT_VIOLATION
    http_status = 409


class TransientStorageFailure(InvoicebookError):
    kind = ErrorKind.STORAGE_FAILURE
    http_status = 500
