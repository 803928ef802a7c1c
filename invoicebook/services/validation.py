# invoicebook/services/validation.py

import re
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from invoicebook.errors import InvalidDateFormat, InvalidReference, InvalidStatus

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_REFERENCE_RE = re.compile(
    r"(?:[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
    r"|[0-9a-fA-F]{32})"
)


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"

    @classmethod
    def parse(cls, value: str) -> "InvoiceStatus":
        """
        Exact, case-sensitive match: "PAID" and " paid " are both rejected.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatus(value)


def parse_reference(value: str, label: str) -> UUID:
    """
    Parse an identifier string, e.g. parse_reference(raw, "sender id").

    Only the hyphenated 8-4-4-4-12 layout or 32 bare hex digits are accepted.
    """
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str) or not _REFERENCE_RE.fullmatch(value):
        raise InvalidReference(f"invalid {label}")
    return UUID(value)


def parse_date(value: str, label: str) -> date:
    """
    Parse a YYYY-MM-DD calendar date with two-digit month and day.
    """
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise InvalidDateFormat(f"{label} has invalid date format")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(f"{label} has invalid date format")
