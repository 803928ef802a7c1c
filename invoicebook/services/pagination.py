# invoicebook/services/pagination.py

from dataclasses import dataclass
from typing import Optional

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1

# Query values are 32-bit integers; anything wider counts as unparseable
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _to_int(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    if not INT32_MIN <= value <= INT32_MAX:
        return default
    return value


@dataclass(frozen=True)
class Pagination:
    """
    1-indexed page of `limit` rows.

    Values are clamped on construction through from_query: limit and page are
    at least 1, and limit never exceeds max_limit.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(
        cls,
        limit: Optional[str] = None,
        page: Optional[str] = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: Optional[int] = None,
    ) -> "Pagination":
        """
        Build from raw query-string values. Absent, non-numeric or out of int32
        range values fall back to the defaults (limit=10, page=1), so offset
        always fits in a 64-bit integer.
        """
        limit_value = max(_to_int(limit, default_limit), 1)
        if max_limit is not None:
            limit_value = min(limit_value, max_limit)
        page_value = max(_to_int(page, DEFAULT_PAGE), 1)
        return cls(page=page_value, limit=limit_value)
