# invoicebook/services/numbering.py

import random

INVOICE_NUMBER_MIN = 1_000_000_000
INVOICE_NUMBER_MAX = 9_999_999_999

_rng = random.SystemRandom()


def generate_invoice_number() -> str:
    """
    Random 10-digit invoice number. Uniqueness is left to the database's
    unique constraint on invoices.invoice_number.
    """
    return str(_rng.randint(INVOICE_NUMBER_MIN, INVOICE_NUMBER_MAX))
