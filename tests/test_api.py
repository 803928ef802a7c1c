"""HTTP contract: routes, status codes and the {"error": ...} body."""

from decimal import Decimal
from uuid import UUID, uuid4


def _create_user(client, **overrides):
    body = {
        "username": "grace",
        "email": "grace@example.com",
        "password": "hopper-1906",
        "first_name": "Grace",
        "last_name": "Hopper",
    }
    body.update(overrides)
    return client.post("/v1/user", json=body)


def _create_customer(client):
    return client.post(
        "/v1/customer",
        json={
            "name": "Navy Computing",
            "email": "ap@navy.example.com",
            "phone_number": "+1 202 555 0100",
            "address": "Washington Navy Yard",
        },
    )


def _create_payment_method(client, user_id):
    return client.post(
        "/v1/payment",
        json={
            "user_id": user_id,
            "account_name": "Grace Hopper",
            "account_number": "99887766",
            "bank_name": "First Federal",
            "bank_address": "1 Main St, Arlington",
            "swift_code": "FFEDUS33",
        },
    )


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/health/ready").json() == {"status": "ready"}


def test_hello_world(client):
    res = client.get("/v1/hello-world")
    assert res.status_code == 200
    assert res.text == "Hello from Invoicebook"


def test_full_invoice_scenario(client):
    user_res = _create_user(client)
    assert user_res.status_code == 201
    user_id = user_res.json()["user_id"]

    customer_res = _create_customer(client)
    assert customer_res.status_code == 201
    customer_id = customer_res.json()["customer_id"]

    payment_res = _create_payment_method(client, user_id)
    assert payment_res.status_code == 201
    payment_method_id = payment_res.json()["payment_method_id"]

    invoice_res = client.post(
        "/v1/invoices",
        json={
            "invoice": {
                "sender_id": user_id,
                "issue_date": "2024-05-01",
                "due_date": "2024-05-15",
                "total_amount": 10000,
                "discount_percentage": 10,
                "discounted_amount": 1000,
                "final_amount": 9000,
                "status": "draft",
                "currency": "NGN",
                "notes": "First invoice",
            },
            "customer_id": customer_id,
            "payment_method_id": payment_method_id,
            "invoice_items": [
                {
                    "name": "COBOL training",
                    "description": "Two-day workshop",
                    "quantity": 2,
                    "unit_price": 5000,
                    "total_price": 10000,
                }
            ],
        },
    )
    assert invoice_res.status_code == 201
    invoice_id = invoice_res.json()["invoice_id"]
    UUID(invoice_id)

    details_res = client.get(f"/v1/invoices/{invoice_id}")
    assert details_res.status_code == 200
    details = details_res.json()
    assert details["invoice"]["sender_id"] == user_id
    assert details["invoice"]["customer_id"] == customer_id
    assert Decimal(details["invoice"]["final_amount"]) == Decimal("9000")
    assert details["invoice"]["issue_date"] == "2024-05-01"
    assert details["sender_name"] == "Grace Hopper"
    assert details["sender_email"] == "grace@example.com"
    assert details["customer_name"] == "Navy Computing"
    assert details["customer_email"] == "ap@navy.example.com"
    assert details["payment_information"]["payment_method_id"] == payment_method_id
    assert len(details["items"]) == 1
    assert any(a["title"] == "Invoice Creation" for a in details["activities"])

    total_res = client.get("/v1/invoices/total/draft")
    assert total_res.status_code == 200
    total = total_res.json()
    assert total["count"] == 1
    assert Decimal(total["total_amount"]) == Decimal("9000")

    recent_res = client.get(f"/v1/invoices/recent/{user_id}")
    assert recent_res.status_code == 200
    assert [i["invoice_id"] for i in recent_res.json()] == [invoice_id]

    activity_res = client.post(
        "/v1/invoices/activity",
        json={
            "invoice_id": invoice_id,
            "user_id": user_id,
            "title": "Invoice sent",
            "description": "Emailed to ap@navy.example.com",
        },
    )
    assert activity_res.status_code == 201
    assert "activity_id" in activity_res.json()

    feed_res = client.get(f"/v1/activities/recent/{user_id}")
    assert feed_res.status_code == 200
    assert [a["title"] for a in feed_res.json()] == ["Invoice Creation"]

    per_invoice_res = client.get(f"/v1/invoices/{invoice_id}/activities/{user_id}?limit=1&page=1")
    assert per_invoice_res.status_code == 200
    assert [a["title"] for a in per_invoice_res.json()] == ["Invoice sent"]


def test_pagination_query_params(client, invoice_payload, sender):
    for _ in range(3):
        assert client.post("/v1/invoices", json=invoice_payload()).status_code == 201

    assert len(client.get(f"/v1/invoices/recent/{sender}?limit=2").json()) == 2
    assert len(client.get(f"/v1/invoices/recent/{sender}?limit=2&page=2").json()) == 1
    # non-numeric values fall back to limit=10, page=1
    assert len(client.get(f"/v1/invoices/recent/{sender}?limit=abc&page=xyz").json()) == 3
    # non-positive values are clamped to 1
    assert len(client.get(f"/v1/invoices/recent/{sender}?limit=0&page=-4").json()) == 1


def test_password_is_stored_hashed(client, engine):
    from sqlalchemy import select

    from invoicebook.db.schema import users
    from invoicebook.services.passwords import check_password

    user_id = _create_user(client).json()["user_id"]

    with engine.connect() as conn:
        stored = conn.execute(
            select(users.c.password).where(users.c.user_id == UUID(user_id))
        ).scalar_one()
    assert stored != "hopper-1906"
    assert check_password("hopper-1906", stored)


# ---- Errors ----

def test_missing_required_field_is_400(client):
    res = client.post("/v1/customer", json={"name": "No Email"})
    assert res.status_code == 400
    assert "email" in res.json()["error"]


def test_empty_required_string_is_400(client):
    res = _create_user(client, username="")
    assert res.status_code == 400
    assert "username" in res.json()["error"]


def test_overlong_password_is_400(client):
    res = _create_user(client, password="x" * 73)
    assert res.status_code == 400
    assert "72 bytes" in res.json()["error"]


def test_duplicate_username_is_409(client):
    assert _create_user(client).status_code == 201

    res = _create_user(client, email="other@example.com")
    assert res.status_code == 409
    assert "error" in res.json()


def test_payment_method_with_bad_user_id(client):
    res = _create_payment_method(client, "not-a-uuid")
    assert res.status_code == 400
    assert res.json() == {"error": "invalid user id"}


def test_payment_method_for_unknown_user_is_409(client):
    res = _create_payment_method(client, str(uuid4()))
    assert res.status_code == 409


def test_invalid_status_on_create_names_value(client, invoice_payload):
    res = client.post("/v1/invoices", json=invoice_payload(status=" paid "))
    assert res.status_code == 400
    assert res.json() == {"error": "invalid invoice status: ' paid '"}


def test_invalid_date_on_create(client, invoice_payload):
    res = client.post("/v1/invoices", json=invoice_payload(due_date="31/03/2024"))
    assert res.status_code == 400
    assert res.json() == {"error": "due date has invalid date format"}


def test_invalid_status_on_total(client):
    res = client.get("/v1/invoices/total/PAID")
    assert res.status_code == 400
    assert "'PAID'" in res.json()["error"]


def test_total_on_empty_table(client):
    res = client.get("/v1/invoices/total/overdue")
    assert res.status_code == 200
    body = res.json()
    assert body["count"] == 0
    assert Decimal(body["total_amount"]) == 0


def test_invoice_details_bad_id(client):
    res = client.get("/v1/invoices/not-a-uuid")
    assert res.status_code == 400
    assert res.json() == {"error": "invalid invoice id"}


def test_invoice_details_not_found(client):
    res = client.get(f"/v1/invoices/{uuid4()}")
    assert res.status_code == 404
    assert "not found" in res.json()["error"]


def test_invoice_activities_bad_user_id(client):
    res = client.get(f"/v1/invoices/{uuid4()}/activities/nope")
    assert res.status_code == 400
    assert res.json() == {"error": "invalid user id"}


def test_recent_activities_bad_user_id(client):
    res = client.get("/v1/activities/recent/nope")
    assert res.status_code == 400


def test_unknown_route_uses_error_body(client):
    res = client.get("/v1/nothing-here")
    assert res.status_code == 404
    assert "error" in res.json()


def test_oversized_page_falls_back_to_first_page(client, invoice_payload, sender):
    assert client.post("/v1/invoices", json=invoice_payload()).status_code == 201

    res = client.get(f"/v1/invoices/recent/{sender}?page=10000000000000000000")
    assert res.status_code == 200
    assert len(res.json()) == 1

    res = client.get(f"/v1/activities/recent/{sender}?limit=99999999999999999999")
    assert res.status_code == 200
    assert len(res.json()) == 1


def test_item_quantity_outside_int32_is_400(client, invoice_payload):
    items = [
        {
            "name": "Bulk order",
            "description": "Too many units",
            "quantity": 2**63,
            "unit_price": 1,
            "total_price": 1,
        }
    ]
    res = client.post("/v1/invoices", json=invoice_payload(items=items))
    assert res.status_code == 400
    assert "quantity" in res.json()["error"]
