# invoicebook/api/users.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.engine import Engine

from invoicebook.db.engine import get_engine
from invoicebook.models.users import (
    AddCustomerRequest,
    AddPaymentMethodRequest,
    CreateUserRequest,
    CustomerCreatedOut,
    PaymentMethodCreatedOut,
    UserCreatedOut,
)
from invoicebook.services import users as users_service

router = APIRouter(prefix="/v1", tags=["users"])


@router.post("/user", response_model=UserCreatedOut, status_code=status.HTTP_201_CREATED)
def create_user(
    body: CreateUserRequest, engine: Engine = Depends(get_engine)
) -> UserCreatedOut:
    """
    Register an invoice sender. The password is stored as a bcrypt hash.
    """
    user_id = users_service.create_user(engine, body)
    return UserCreatedOut(user_id=user_id)


@router.post(
    "/customer", response_model=CustomerCreatedOut, status_code=status.HTTP_201_CREATED
)
def add_customer(
    body: AddCustomerRequest, engine: Engine = Depends(get_engine)
) -> CustomerCreatedOut:
    customer_id = users_service.add_customer(engine, body)
    return CustomerCreatedOut(customer_id=customer_id)


@router.post(
    "/payment", response_model=PaymentMethodCreatedOut, status_code=status.HTTP_201_CREATED
)
def add_payment_method(
    body: AddPaymentMethodRequest, engine: Engine = Depends(get_engine)
) -> PaymentMethodCreatedOut:
    """
    Attach a bank account to an existing user.
    """
    payment_method_id = users_service.add_payment_method(engine, body)
    return PaymentMethodCreatedOut(payment_method_id=payment_method_id)
