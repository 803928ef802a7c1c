# invoicebook/api/activities.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from invoicebook.api.dependencies import get_pagination
from invoicebook.db.engine import get_engine
from invoicebook.models.invoices import RecentActivityOut
from invoicebook.services import invoices as invoices_service
from invoicebook.services.pagination import Pagination

router = APIRouter(prefix="/v1/activities", tags=["activities"])


@router.get("/recent/{user_id}", response_model=List[RecentActivityOut])
def get_recent_activities(
    user_id: str,
    pagination: Pagination = Depends(get_pagination),
    engine: Engine = Depends(get_engine),
) -> List[RecentActivityOut]:
    """
    User's activity feed, newest first.
    """
    return invoices_service.get_recent_activities(engine, user_id, pagination)
