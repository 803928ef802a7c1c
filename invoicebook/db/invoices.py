# invoicebook/db/invoices.py

from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.engine import Connection, RowMapping

from invoicebook.db.schema import (
    customers,
    invoice_activities,
    invoice_items,
    invoices,
    payment_information,
    recent_activities,
    user_payment_methods,
    users,
)

INVOICE_COLUMNS = (
    invoices.c.invoice_id,
    invoices.c.invoice_number,
    invoices.c.sender_id,
    invoices.c.customer_id,
    invoices.c.issue_date,
    invoices.c.due_date,
    invoices.c.total_amount,
    invoices.c.discount_percentage,
    invoices.c.discounted_amount,
    invoices.c.final_amount,
    invoices.c.status,
    invoices.c.currency,
    invoices.c.notes,
    invoices.c.created_at,
    invoices.c.updated_at,
)


# ---- Writes ----

def insert_invoice(conn: Connection, invoice_row: dict) -> UUID:
    conn.execute(invoices.insert().values(**invoice_row))
    return invoice_row["invoice_id"]


def insert_invoice_items(conn: Connection, item_rows: List[dict]) -> None:
    if not item_rows:
        return
    conn.execute(invoice_items.insert(), item_rows)


def insert_payment_information(conn: Connection, payment_info_row: dict) -> UUID:
    conn.execute(payment_information.insert().values(**payment_info_row))
    return payment_info_row["payment_info_id"]


def insert_invoice_activity(conn: Connection, activity_row: dict) -> UUID:
    conn.execute(invoice_activities.insert().values(**activity_row))
    return activity_row["activity_id"]


def insert_recent_activity(conn: Connection, activity_row: dict) -> UUID:
    conn.execute(recent_activities.insert().values(**activity_row))
    return activity_row["activity_id"]


# ---- Reads ----

def select_invoice_details(conn: Connection, invoice_id: UUID) -> Optional[RowMapping]:
    """
    One row: the invoice, its sender and customer, and its payment method
    (payment columns are NULL when the invoice has no payment information).
    """
    stmt = (
        select(
            *INVOICE_COLUMNS,
            (users.c.first_name + " " + users.c.last_name).label("sender_name"),
            users.c.email.label("sender_email"),
            users.c.phone_number.label("sender_phone_number"),
            users.c.address.label("sender_address"),
            customers.c.name.label("customer_name"),
            customers.c.email.label("customer_email"),
            customers.c.phone_number.label("customer_phone_number"),
            user_payment_methods.c.payment_method_id,
            user_payment_methods.c.user_id.label("payment_user_id"),
            user_payment_methods.c.account_name,
            user_payment_methods.c.account_number,
            user_payment_methods.c.bank_name,
            user_payment_methods.c.bank_address,
            user_payment_methods.c.swift_code,
        )
        .select_from(
            invoices.join(users, invoices.c.sender_id == users.c.user_id)
            .join(customers, invoices.c.customer_id == customers.c.customer_id)
            .outerjoin(
                payment_information,
                invoices.c.invoice_id == payment_information.c.invoice_id,
            )
            .outerjoin(
                user_payment_methods,
                payment_information.c.payment_method_id
                == user_payment_methods.c.payment_method_id,
            )
        )
        .where(invoices.c.invoice_id == invoice_id)
    )
    return conn.execute(stmt).mappings().first()


def select_invoice_items(conn: Connection, invoice_id: UUID) -> List[RowMapping]:
    stmt = (
        select(
            invoice_items.c.item_id,
            invoice_items.c.invoice_id,
            invoice_items.c.name,
            invoice_items.c.description,
            invoice_items.c.quantity,
            invoice_items.c.unit_price,
            invoice_items.c.total_price,
        )
        .where(invoice_items.c.invoice_id == invoice_id)
        .order_by(invoice_items.c.created_at)
    )
    return list(conn.execute(stmt).mappings().all())


def select_invoice_activities(conn: Connection, invoice_id: UUID) -> List[RowMapping]:
    """All activities of an invoice, oldest first."""
    stmt = (
        select(invoice_activities)
        .where(invoice_activities.c.invoice_id == invoice_id)
        .order_by(invoice_activities.c.created_at)
    )
    return list(conn.execute(stmt).mappings().all())


def select_total_by_status(conn: Connection, status: str) -> Tuple[Decimal, int]:
    stmt = (
        select(
            func.count().label("count"),
            func.coalesce(func.sum(invoices.c.final_amount), 0).label("total_amount"),
        )
        .select_from(invoices)
        .where(invoices.c.status == status)
    )
    row = conn.execute(stmt).first()

    total = row.total_amount if row.total_amount is not None else Decimal("0")
    return Decimal(total), row.count or 0


def select_recent_invoices(
    conn: Connection, sender_id: UUID, limit: int, offset: int
) -> List[RowMapping]:
    stmt = (
        select(*INVOICE_COLUMNS)
        .where(invoices.c.sender_id == sender_id)
        .order_by(invoices.c.created_at.desc())
        .limit(limit)
        .offset(offset)
    )
    return list(conn.execute(stmt).mappings().all())


def select_recent_activities(
    conn: Connection, user_id: UUID, limit: int, offset: int
) -> List[RowMapping]:
    stmt = (
        select(recent_activities)
        .where(recent_activities.c.user_id == user_id)
        .order_by(recent_activities.c.created_at.desc())
        .limit(limit)
        .offset(offset)
    )
    return list(conn.execute(stmt).mappings().all())


def select_user_invoice_activities(
    conn: Connection, user_id: UUID, invoice_id: UUID, limit: int, offset: int
) -> List[RowMapping]:
    stmt = (
        select(invoice_activities)
        .where(
            invoice_activities.c.user_id == user_id,
            invoice_activities.c.invoice_id == invoice_id,
        )
        .order_by(invoice_activities.c.created_at.desc())
        .limit(limit)
        .offset(offset)
    )
    return list(conn.execute(stmt).mappings().all())
