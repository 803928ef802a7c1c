"""Initial schema: users, customers, invoices, items, payments, activities.

Revision ID: 0001_init_schema
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_init_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Uuid, primary_key=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("email", sa.String(100), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("profile_picture_url", sa.String(255), nullable=True),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "invoices",
        sa.Column("invoice_id", sa.Uuid, primary_key=True),
        sa.Column("invoice_number", sa.String(20), nullable=False, unique=True),
        sa.Column("sender_id", sa.Uuid, sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("customer_id", sa.Uuid, sa.ForeignKey("customers.customer_id"), nullable=False),
        sa.Column("issue_date", sa.Date, nullable=False),
        sa.Column("due_date", sa.Date, nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("discount_percentage", sa.Numeric(5, 2), server_default="0"),
        sa.Column("discounted_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("final_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", sa.String(10), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('draft', 'pending', 'paid', 'overdue')",
            name="ck_invoices_status",
        ),
    )

    op.create_table(
        "invoice_items",
        sa.Column("item_id", sa.Uuid, primary_key=True),
        sa.Column("invoice_id", sa.Uuid, sa.ForeignKey("invoices.invoice_id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "user_payment_methods",
        sa.Column("payment_method_id", sa.Uuid, primary_key=True),
        sa.Column("user_id", sa.Uuid, sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("account_name", sa.String(100), nullable=False),
        sa.Column("account_number", sa.String(50), nullable=False),
        sa.Column("bank_name", sa.String(100), nullable=False),
        sa.Column("bank_address", sa.Text, nullable=True),
        sa.Column("swift_code", sa.String(20), nullable=True),
        sa.Column("is_default", sa.Boolean, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "payment_information",
        sa.Column("payment_info_id", sa.Uuid, primary_key=True),
        sa.Column("invoice_id", sa.Uuid, sa.ForeignKey("invoices.invoice_id"), nullable=False),
        sa.Column(
            "payment_method_id",
            sa.Uuid,
            sa.ForeignKey("user_payment_methods.payment_method_id"),
            nullable=False,
        ),
        *_timestamps(),
    )

    op.create_table(
        "invoice_activities",
        sa.Column("activity_id", sa.Uuid, primary_key=True),
        sa.Column("invoice_id", sa.Uuid, sa.ForeignKey("invoices.invoice_id"), nullable=False),
        sa.Column("user_id", sa.Uuid, sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "recent_activities",
        sa.Column("activity_id", sa.Uuid, primary_key=True),
        sa.Column("user_id", sa.Uuid, sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_index("idx_invoices_sender_id", "invoices", ["sender_id"])
    op.create_index("idx_invoices_customer_id", "invoices", ["customer_id"])
    op.create_index("idx_invoices_status", "invoices", ["status"])
    op.create_index("idx_invoice_items_invoice_id", "invoice_items", ["invoice_id"])
    op.create_index("idx_invoice_activities_invoice_id", "invoice_activities", ["invoice_id"])
    op.create_index("idx_invoice_activities_user_id", "invoice_activities", ["user_id"])
    op.create_index("idx_recent_activities_user_id", "recent_activities", ["user_id"])
    op.create_index("idx_user_payment_methods_user_id", "user_payment_methods", ["user_id"])
    op.create_index("idx_payment_information_invoice_id", "payment_information", ["invoice_id"])
    op.create_index(
        "idx_payment_information_payment_method_id",
        "payment_information",
        ["payment_method_id"],
    )


def downgrade() -> None:
    for table in (
        "recent_activities",
        "invoice_activities",
        "payment_information",
        "user_payment_methods",
        "invoice_items",
        "invoices",
        "customers",
        "users",
    ):
        op.drop_table(table)
