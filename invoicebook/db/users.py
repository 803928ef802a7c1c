# invoicebook/db/users.py

from uuid import UUID

from sqlalchemy.engine import Connection

from invoicebook.db.schema import customers, user_payment_methods, users


def insert_user(conn: Connection, user_row: dict) -> UUID:
    """
    user_row carries the generated user_id and an already-hashed password.
    """
    conn.execute(users.insert().values(**user_row))
    return user_row["user_id"]


def insert_customer(conn: Connection, customer_row: dict) -> UUID:
    conn.execute(customers.insert().values(**customer_row))
    return customer_row["customer_id"]


def insert_payment_method(conn: Connection, payment_method_row: dict) -> UUID:
    conn.execute(user_payment_methods.insert().values(**payment_method_row))
    return payment_method_row["payment_method_id"]
