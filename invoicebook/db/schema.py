# invoicebook/db/schema.py

from datetime import datetime, timezone

from sqlalchemy import (
    MetaData, Table, Column, Integer, String, Boolean, false,
    Numeric, Date, DateTime, ForeignKey, CheckConstraint, Index, Text, Uuid,
    func,
)

metadata = MetaData()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _timestamps():
    return [
        Column("created_at", DateTime(timezone=True), nullable=False, default=utcnow,
               server_default=func.now()),
        Column("updated_at", DateTime(timezone=True), nullable=False, default=utcnow,
               server_default=func.now(), onupdate=utcnow),
    ]


users = Table(
    "users",
    metadata,
    Column("user_id", Uuid, primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(100), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
    Column("first_name", String(50), nullable=False),
    Column("last_name", String(50), nullable=False),
    Column("profile_picture_url", String(255)),
    Column("phone_number", String(20)),
    Column("address", Text),
    *_timestamps(),
)

customers = Table(
    "customers",
    metadata,
    Column("customer_id", Uuid, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(100), nullable=False),
    Column("phone_number", String(20)),
    Column("address", Text),
    *_timestamps(),
)

invoices = Table(
    "invoices",
    metadata,
    Column("invoice_id", Uuid, primary_key=True),
    Column("invoice_number", String(20), unique=True, nullable=False),
    Column("sender_id", Uuid, ForeignKey("users.user_id"), nullable=False),
    Column("customer_id", Uuid, ForeignKey("customers.customer_id"), nullable=False),
    Column("issue_date", Date, nullable=False),
    Column("due_date", Date, nullable=False),
    Column("total_amount", Numeric(10, 2), nullable=False),
    Column("discount_percentage", Numeric(5, 2), server_default="0"),
    Column("discounted_amount", Numeric(10, 2)),
    Column("final_amount", Numeric(10, 2), nullable=False),
    Column("status", String(10), nullable=False),
    Column("currency", String(3), nullable=False),
    Column("notes", Text),
    *_timestamps(),
    CheckConstraint(
        "status IN ('draft', 'pending', 'paid', 'overdue')",
        name="ck_invoices_status",
    ),
    Index("idx_invoices_sender_id", "sender_id"),
    Index("idx_invoices_customer_id", "customer_id"),
    Index("idx_invoices_status", "status"),
)

invoice_items = Table(
    "invoice_items",
    metadata,
    Column("item_id", Uuid, primary_key=True),
    Column("invoice_id", Uuid, ForeignKey("invoices.invoice_id"), nullable=False),
    Column("name", String(100), nullable=False),
    Column("description", String(255), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("unit_price", Numeric(10, 2), nullable=False),
    Column("total_price", Numeric(10, 2), nullable=False),
    *_timestamps(),
    Index("idx_invoice_items_invoice_id", "invoice_id"),
)

user_payment_methods = Table(
    "user_payment_methods",
    metadata,
    Column("payment_method_id", Uuid, primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.user_id"), nullable=False),
    Column("account_name", String(100), nullable=False),
    Column("account_number", String(50), nullable=False),
    Column("bank_name", String(100), nullable=False),
    Column("bank_address", Text),
    Column("swift_code", String(20)),
    Column("is_default", Boolean, server_default=false()),
    *_timestamps(),
    Index("idx_user_payment_methods_user_id", "user_id"),
)

payment_information = Table(
    "payment_information",
    metadata,
    Column("payment_info_id", Uuid, primary_key=True),
    Column("invoice_id", Uuid, ForeignKey("invoices.invoice_id"), nullable=False),
    Column(
        "payment_method_id",
        Uuid,
        ForeignKey("user_payment_methods.payment_method_id"),
        nullable=False,
    ),
    *_timestamps(),
    Index("idx_payment_information_invoice_id", "invoice_id"),
    Index("idx_payment_information_payment_method_id", "payment_method_id"),
)

invoice_activities = Table(
    "invoice_activities",
    metadata,
    Column("activity_id", Uuid, primary_key=True),
    Column("invoice_id", Uuid, ForeignKey("invoices.invoice_id"), nullable=False),
    Column("user_id", Uuid, ForeignKey("users.user_id"), nullable=False),
    Column("title", String(100), nullable=False),
    Column("description", Text),
    Column("created_at", DateTime(timezone=True), nullable=False, default=utcnow,
           server_default=func.now()),
    Index("idx_invoice_activities_invoice_id", "invoice_id"),
    Index("idx_invoice_activities_user_id", "user_id"),
)

# Per-user feed; mirrors invoice_activities without the invoice link
recent_activities = Table(
    "recent_activities",
    metadata,
    Column("activity_id", Uuid, primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.user_id"), nullable=False),
    Column("title", String(100), nullable=False),
    Column("description", Text),
    Column("created_at", DateTime(timezone=True), nullable=False, default=utcnow,
           server_default=func.now()),
    Index("idx_recent_activities_user_id", "user_id"),
)
