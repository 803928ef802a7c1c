# invoicebook/api/invoices.py

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.engine import Engine

from invoicebook.api.dependencies import get_pagination
from invoicebook.db.engine import get_engine
from invoicebook.models.invoices import (
    ActivityCreatedOut,
    AddInvoiceActivityRequest,
    CreateInvoiceRequest,
    InvoiceActivityOut,
    InvoiceCreatedOut,
    InvoiceDetailsOut,
    InvoiceOut,
    TotalByStatusOut,
)
from invoicebook.services import invoices as invoices_service
from invoicebook.services.pagination import Pagination

router = APIRouter(prefix="/v1/invoices", tags=["invoices"])


@router.post("", response_model=InvoiceCreatedOut, status_code=201)
def create_invoice(
    body: CreateInvoiceRequest, engine: Engine = Depends(get_engine)
) -> InvoiceCreatedOut:
    """
    Create an invoice, its items, payment information and creation activity
    atomically.
    """
    invoice_id = invoices_service.create_invoice(engine, body)
    return InvoiceCreatedOut(invoice_id=invoice_id)


@router.post("/activity", response_model=ActivityCreatedOut, status_code=201)
def add_invoice_activity(
    body: AddInvoiceActivityRequest, engine: Engine = Depends(get_engine)
) -> ActivityCreatedOut:
    activity_id = invoices_service.add_invoice_activity(engine, body)
    return ActivityCreatedOut(activity_id=activity_id)


# Literal segments are registered before /{invoice_id} so they win the match

@router.get("/total/{status}", response_model=TotalByStatusOut)
def get_total_by_status(
    status: str = Path(..., description="draft | pending | paid | overdue"),
    engine: Engine = Depends(get_engine),
) -> TotalByStatusOut:
    """
    Count and sum of final_amount for invoices with the given status.
    """
    total_amount, count = invoices_service.get_total_by_status(engine, status)
    return TotalByStatusOut(status=status, total_amount=total_amount, count=count)


@router.get("/recent/{sender_id}", response_model=List[InvoiceOut])
def get_recent_invoices(
    sender_id: str,
    pagination: Pagination = Depends(get_pagination),
    engine: Engine = Depends(get_engine),
) -> List[InvoiceOut]:
    """
    Sender's invoices, newest first.
    """
    return invoices_service.get_recent_invoices(engine, sender_id, pagination)


@router.get("/{invoice_id}", response_model=InvoiceDetailsOut)
def get_invoice_details(
    invoice_id: str, engine: Engine = Depends(get_engine)
) -> InvoiceDetailsOut:
    return invoices_service.get_invoice_details(engine, invoice_id)


@router.get("/{invoice_id}/activities/{user_id}", response_model=List[InvoiceActivityOut])
def get_invoice_activities(
    invoice_id: str,
    user_id: str,
    pagination: Pagination = Depends(get_pagination),
    engine: Engine = Depends(get_engine),
) -> List[InvoiceActivityOut]:
    """
    Activities a user recorded on one invoice, newest first.
    """
    return invoices_service.get_invoice_activities(engine, user_id, invoice_id, pagination)
