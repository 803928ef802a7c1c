# invoicebook/api/dependencies.py

from typing import Optional

from fastapi import Query

from invoicebook.config import get_settings
from invoicebook.services.pagination import Pagination


def get_pagination(
    limit: Optional[str] = Query(default=None, description="Rows per page (default 10)"),
    page: Optional[str] = Query(default=None, description="1-indexed page (default 1)"),
) -> Pagination:
    """
    Query params are taken as raw strings: anything non-numeric falls back to
    the default instead of failing the request.
    """
    settings = get_settings()
    return Pagination.from_query(
        limit,
        page,
        default_limit=settings.pagination_default_limit,
        max_limit=settings.pagination_max_limit,
    )
