# invoicebook/services/users.py

import logging
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy.engine import Engine

from invoicebook.config import get_settings
from invoicebook.db import users as users_db
from invoicebook.db.engine import storage_errors
from invoicebook.models.users import (
    AddCustomerRequest,
    AddPaymentMethodRequest,
    CreateUserRequest,
)
from invoicebook.services.passwords import hash_password
from invoicebook.services.validation import parse_reference

logger = logging.getLogger(__name__)


def create_user(
    engine: Engine, data: CreateUserRequest, rounds: Optional[int] = None
) -> UUID:
    """
    Register an invoice sender. The password is bcrypt-hashed before it
    reaches the database; rounds defaults to the configured work factor.
    """
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    hashed = hash_password(data.password, rounds=rounds)

    user_row = {
        "user_id": uuid4(),
        "username": data.username,
        "email": data.email,
        "password": hashed,
        "first_name": data.first_name,
        "last_name": data.last_name,
        "profile_picture_url": data.profile_picture_url,
        "phone_number": data.phone_number,
        "address": data.address,
    }

    with storage_errors("create user"), engine.begin() as conn:
        user_id = users_db.insert_user(conn, user_row)

    logger.info("Created user %s", user_id, extra={"user_id": user_id})
    return user_id


def add_customer(engine: Engine, data: AddCustomerRequest) -> UUID:
    customer_row = {
        "customer_id": uuid4(),
        "name": data.name,
        "email": data.email,
        "phone_number": data.phone_number,
        "address": data.address,
    }

    with storage_errors("add customer"), engine.begin() as conn:
        customer_id = users_db.insert_customer(conn, customer_row)

    logger.info("Added customer %s", customer_id)
    return customer_id


def add_payment_method(engine: Engine, data: AddPaymentMethodRequest) -> UUID:
    user_id = parse_reference(data.user_id, "user id")

    payment_method_row = {
        "payment_method_id": uuid4(),
        "user_id": user_id,
        "account_name": data.account_name,
        "account_number": data.account_number,
        "bank_name": data.bank_name,
        "bank_address": data.bank_address,
        "swift_code": data.swift_code,
    }

    with storage_errors("add payment method"), engine.begin() as conn:
        payment_method_id = users_db.insert_payment_method(conn, payment_method_row)

    logger.info(
        "Added payment method %s for user %s", payment_method_id, user_id,
        extra={"user_id": user_id},
    )
    return payment_method_id
