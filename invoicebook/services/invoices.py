# invoicebook/services/invoices.py
"""
Invoice lifecycle: creation, details, totals, listings and activity log.

Callers pass raw identifier strings; each operation validates them before it
touches the database.
"""

import logging
from decimal import Decimal
from typing import List, Tuple, Union
from uuid import UUID, uuid4

from sqlalchemy.engine import Engine

from invoicebook.db import invoices as invoices_db
from invoicebook.db.engine import storage_errors
from invoicebook.db.schema import utcnow
from invoicebook.errors import NotFound
from invoicebook.models.invoices import (
    AddInvoiceActivityRequest,
    CreateInvoiceRequest,
    InvoiceActivityOut,
    InvoiceDetailsOut,
    InvoiceItemOut,
    InvoiceOut,
    PaymentMethodOut,
    RecentActivityOut,
)
from invoicebook.services.numbering import generate_invoice_number
from invoicebook.services.pagination import Pagination
from invoicebook.services.validation import (
    InvoiceStatus,
    parse_date,
    parse_reference,
)

logger = logging.getLogger(__name__)

INVOICE_CREATION_TITLE = "Invoice Creation"

IdLike = Union[str, UUID]


def create_invoice(engine: Engine, data: CreateInvoiceRequest) -> UUID:
    """
    Persist an invoice with its items, payment information and creation
    activity in one transaction, and return the new invoice id.

    Validation order (first failure wins): sender id, customer id, status,
    issue date, due date, payment method id. Amounts are stored exactly as
    the client computed them.
    """
    info = data.invoice
    sender_id = parse_reference(info.sender_id, "sender id")
    customer_id = parse_reference(data.customer_id, "customer id")
    status = InvoiceStatus.parse(info.status)
    issue_date = parse_date(info.issue_date, "issue date")
    due_date = parse_date(info.due_date, "due date")
    payment_method_id = parse_reference(data.payment_method_id, "payment method id")

    invoice_id = uuid4()
    invoice_number = generate_invoice_number()

    invoice_row = {
        "invoice_id": invoice_id,
        "invoice_number": invoice_number,
        "sender_id": sender_id,
        "customer_id": customer_id,
        "issue_date": issue_date,
        "due_date": due_date,
        "total_amount": info.total_amount,
        "discount_percentage": info.discount_percentage,
        "discounted_amount": info.discounted_amount,
        "final_amount": info.final_amount,
        "status": status.value,
        "currency": info.currency,
        "notes": info.notes,
    }

    item_rows = [
        {
            "item_id": uuid4(),
            "invoice_id": invoice_id,
            "name": item.name,
            "description": item.description,
            "quantity": item.quantity,
            "unit_price": item.unit_price,
            "total_price": item.total_price,
        }
        for item in data.invoice_items
    ]

    payment_info_row = {
        "payment_info_id": uuid4(),
        "invoice_id": invoice_id,
        "payment_method_id": payment_method_id,
    }

    # The feed entry shares the activity's id
    activity_row = {
        "activity_id": uuid4(),
        "invoice_id": invoice_id,
        "user_id": sender_id,
        "title": INVOICE_CREATION_TITLE,
        "description": f"Created invoice {invoice_number}",
        "created_at": utcnow(),
    }
    recent_row = {k: v for k, v in activity_row.items() if k != "invoice_id"}

    with storage_errors("create invoice"), engine.begin() as conn:
        invoices_db.insert_invoice(conn, invoice_row)
        invoices_db.insert_invoice_items(conn, item_rows)
        invoices_db.insert_payment_information(conn, payment_info_row)
        invoices_db.insert_invoice_activity(conn, activity_row)
        invoices_db.insert_recent_activity(conn, recent_row)

    logger.info(
        "Created invoice %s (number %s, %d items) for sender %s",
        invoice_id, invoice_number, len(item_rows), sender_id,
        extra={"invoice_id": invoice_id, "user_id": sender_id},
    )
    return invoice_id


def get_invoice_details(engine: Engine, invoice_id: IdLike) -> InvoiceDetailsOut:
    invoice_uuid = parse_reference(invoice_id, "invoice id")

    with storage_errors("get invoice details"), engine.connect() as conn:
        row = invoices_db.select_invoice_details(conn, invoice_uuid)
        if row is None:
            raise NotFound("invoice", invoice_uuid)
        items = invoices_db.select_invoice_items(conn, invoice_uuid)
        activities = invoices_db.select_invoice_activities(conn, invoice_uuid)

    return InvoiceDetailsOut(
        invoice=InvoiceOut(**row),
        sender_name=row["sender_name"],
        sender_email=row["sender_email"],
        sender_phone_number=row["sender_phone_number"],
        sender_address=row["sender_address"],
        customer_name=row["customer_name"],
        customer_email=row["customer_email"],
        customer_phone_number=row["customer_phone_number"],
        payment_information=PaymentMethodOut(
            payment_method_id=row["payment_method_id"],
            user_id=row["payment_user_id"],
            account_name=row["account_name"],
            account_number=row["account_number"],
            bank_name=row["bank_name"],
            bank_address=row["bank_address"],
            swift_code=row["swift_code"],
        ),
        items=[InvoiceItemOut(**item) for item in items],
        activities=[InvoiceActivityOut(**activity) for activity in activities],
    )


def get_total_by_status(engine: Engine, status: str) -> Tuple[Decimal, int]:
    """
    Sum of final_amount and number of invoices with the given status.
    No matching invoices gives (0, 0).
    """
    parsed = InvoiceStatus.parse(status)

    with storage_errors("total by status"), engine.connect() as conn:
        return invoices_db.select_total_by_status(conn, parsed.value)


def get_recent_invoices(
    engine: Engine, sender_id: IdLike, pagination: Pagination
) -> List[InvoiceOut]:
    sender_uuid = parse_reference(sender_id, "sender id")

    with storage_errors("recent invoices"), engine.connect() as conn:
        rows = invoices_db.select_recent_invoices(
            conn, sender_uuid, pagination.limit, pagination.offset
        )

    return [InvoiceOut(**row) for row in rows]


def get_recent_activities(
    engine: Engine, user_id: IdLike, pagination: Pagination
) -> List[RecentActivityOut]:
    user_uuid = parse_reference(user_id, "user id")

    with storage_errors("recent activities"), engine.connect() as conn:
        rows = invoices_db.select_recent_activities(
            conn, user_uuid, pagination.limit, pagination.offset
        )

    return [RecentActivityOut(**row) for row in rows]


def get_invoice_activities(
    engine: Engine, user_id: IdLike, invoice_id: IdLike, pagination: Pagination
) -> List[InvoiceActivityOut]:
    user_uuid = parse_reference(user_id, "user id")
    invoice_uuid = parse_reference(invoice_id, "invoice id")

    with storage_errors("invoice activities"), engine.connect() as conn:
        rows = invoices_db.select_user_invoice_activities(
            conn, user_uuid, invoice_uuid, pagination.limit, pagination.offset
        )

    return [InvoiceActivityOut(**row) for row in rows]


def add_invoice_activity(engine: Engine, data: AddInvoiceActivityRequest) -> UUID:
    """
    Append an activity to an existing invoice.

    Unlike invoice creation this does not write a recent_activities row.
    """
    invoice_id = parse_reference(data.invoice_id, "invoice id")
    user_id = parse_reference(data.user_id, "user id")

    activity_row = {
        "activity_id": uuid4(),
        "invoice_id": invoice_id,
        "user_id": user_id,
        "title": data.title,
        "description": data.description,
        "created_at": utcnow(),
    }

    with storage_errors("add invoice activity"), engine.begin() as conn:
        activity_id = invoices_db.insert_invoice_activity(conn, activity_row)

    logger.info(
        "Added activity %s to invoice %s", activity_id, invoice_id,
        extra={"invoice_id": invoice_id, "user_id": user_id},
    )
    return activity_id
