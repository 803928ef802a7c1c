# invoicebook/models/invoices.py

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


# ---- Requests ----

class InvoiceInfo(BaseModel):
    """
    Invoice header as sent by the client.

    Identifiers, status and dates stay strings here; the service validates
    them in a fixed order and reports the first failure.
    """

    sender_id: str = Field(min_length=1)
    issue_date: str = Field(min_length=1)
    due_date: str = Field(min_length=1)
    total_amount: Decimal
    discount_percentage: Decimal = Decimal("0")
    discounted_amount: Decimal
    final_amount: Decimal
    status: str = Field(min_length=1)
    currency: str = Field(min_length=1, max_length=3)
    notes: str = Field(min_length=1)


class InvoiceItemIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=255)
    # invoice_items.quantity is a 32-bit INTEGER
    quantity: int = Field(ge=-(2**31), le=2**31 - 1)
    unit_price: Decimal
    total_price: Decimal


class CreateInvoiceRequest(BaseModel):
    invoice: InvoiceInfo
    customer_id: str = Field(min_length=1)
    payment_method_id: str = Field(min_length=1)
    invoice_items: List[InvoiceItemIn]


class AddInvoiceActivityRequest(BaseModel):
    invoice_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)


# ---- Responses ----

class InvoiceOut(BaseModel):
    invoice_id: UUID
    invoice_number: str
    sender_id: UUID
    customer_id: UUID
    issue_date: date
    due_date: date
    total_amount: Decimal
    discount_percentage: Optional[Decimal] = None
    discounted_amount: Optional[Decimal] = None
    final_amount: Decimal
    status: str
    currency: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InvoiceItemOut(BaseModel):
    item_id: UUID
    invoice_id: UUID
    name: str
    description: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal


class InvoiceActivityOut(BaseModel):
    activity_id: UUID
    invoice_id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    created_at: datetime


class RecentActivityOut(BaseModel):
    activity_id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    created_at: datetime


class PaymentMethodOut(BaseModel):
    # every field is None when the invoice has no payment information
    payment_method_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    account_name: Optional[str] = None
    account_number: Optional[str] = None
    bank_name: Optional[str] = None
    bank_address: Optional[str] = None
    swift_code: Optional[str] = None


class InvoiceDetailsOut(BaseModel):
    invoice: InvoiceOut
    sender_name: str
    sender_email: str
    sender_phone_number: Optional[str] = None
    sender_address: Optional[str] = None
    customer_name: str
    customer_email: str
    customer_phone_number: Optional[str] = None
    payment_information: PaymentMethodOut
    items: List[InvoiceItemOut]
    activities: List[InvoiceActivityOut]


class TotalByStatusOut(BaseModel):
    status: str
    total_amount: Decimal
    count: int


class InvoiceCreatedOut(BaseModel):
    invoice_id: UUID


class ActivityCreatedOut(BaseModel):
    activity_id: UUID
