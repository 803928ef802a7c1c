"""Shared fixtures: in-memory database, API client and seeded records."""

import os

# Settings are cached on first use, so the environment is set before any import
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from invoicebook.db.engine import build_engine, get_engine
from invoicebook.db.schema import metadata
from invoicebook.main import app
from invoicebook.models.invoices import CreateInvoiceRequest
from invoicebook.models.users import (
    AddCustomerRequest,
    AddPaymentMethodRequest,
    CreateUserRequest,
)
from invoicebook.services import users as users_service


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    """API client whose get_engine dependency points at the test database."""
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sender(engine):
    user_id = users_service.create_user(
        engine,
        CreateUserRequest(
            username="ada",
            email="ada@example.com",
            password="correct horse battery staple",
            first_name="Ada",
            last_name="Lovelace",
            phone_number="+44 20 7946 0000",
            address="12 St James's Square, London",
        ),
    )
    return user_id


@pytest.fixture
def customer(engine):
    return users_service.add_customer(
        engine,
        AddCustomerRequest(
            name="Analytical Engines Ltd",
            email="billing@engines.example.com",
            phone_number="+44 20 7946 0001",
            address="1 Babbage Row, London",
        ),
    )


@pytest.fixture
def payment_method(engine, sender):
    return users_service.add_payment_method(
        engine,
        AddPaymentMethodRequest(
            user_id=str(sender),
            account_name="Ada Lovelace",
            account_number="00112233",
            bank_name="Bank of London",
            bank_address="1 Threadneedle St, London",
            swift_code="BOLGB2L",
        ),
    )


@pytest.fixture
def invoice_payload(sender, customer, payment_method):
    """
    Build a create-invoice JSON body for the seeded sender/customer/payment
    method; keyword overrides replace top-level or invoice-header keys.
    """

    def build(items=None, **overrides):
        invoice = {
            "sender_id": str(sender),
            "issue_date": "2024-03-01",
            "due_date": "2024-03-31",
            "total_amount": 10000,
            "discount_percentage": 10,
            "discounted_amount": 1000,
            "final_amount": 9000,
            "status": "pending",
            "currency": "USD",
            "notes": "Thank you for your business",
        }
        payload = {
            "invoice": invoice,
            "customer_id": str(customer),
            "payment_method_id": str(payment_method),
            "invoice_items": items if items is not None else [
                {
                    "name": "Consulting",
                    "description": "Difference engine review",
                    "quantity": 10,
                    "unit_price": 1000,
                    "total_price": 10000,
                },
            ],
        }
        for key, value in overrides.items():
            if key in invoice:
                invoice[key] = value
            else:
                payload[key] = value
        return payload

    return build


@pytest.fixture
def make_invoice_request(invoice_payload):
    def build(**overrides):
        return CreateInvoiceRequest.model_validate(invoice_payload(**overrides))

    return build
