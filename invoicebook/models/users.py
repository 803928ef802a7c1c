# invoicebook/models/users.py

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class CreateUserRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(min_length=1)
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    profile_picture_url: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None


class AddCustomerRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone_number: str = Field(min_length=1, max_length=20)
    address: str = Field(min_length=1)


class AddPaymentMethodRequest(BaseModel):
    # parsed as a UUID by the service so a bad id is reported as such
    user_id: str = Field(min_length=1)
    account_name: str = Field(min_length=1, max_length=100)
    account_number: str = Field(min_length=1, max_length=50)
    bank_name: str = Field(min_length=1, max_length=100)
    bank_address: str = Field(min_length=1)
    swift_code: str = Field(min_length=1, max_length=20)


class UserCreatedOut(BaseModel):
    user_id: UUID


class CustomerCreatedOut(BaseModel):
    customer_id: UUID


class PaymentMethodCreatedOut(BaseModel):
    payment_method_id: UUID
