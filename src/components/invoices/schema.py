"""
Invoice form schemas.

Field names match the dashboard form inputs, so error keys can be rendered
next to the inputs they belong to.
"""

from __future__ import annotations

from src.domain.entities import INVOICE_STATUSES
from src.domain.validation import Check, Schema, enum_field, number_field, string_field

CUSTOMER_MESSAGE = "Please Select A Customer."
AMOUNT_INVALID_MESSAGE = "Please Enter A Valid Amount."
AMOUNT_POSITIVE_MESSAGE = "Please Enter An Amount Greater Than $0"
STATUS_MESSAGE = "Please Select An Invoice Status."


def to_cents(amount: float) -> int:
    """Convert a decimal amount to integer cents (45.1 -> 4510)."""
    return int(round(amount * 100))


# Checked on the stored value, so sub-cent amounts like 0.004 are rejected too.
POSITIVE_CENTS = Check(predicate=lambda v: to_cents(v) > 0, message=AMOUNT_POSITIVE_MESSAGE)

InvoiceForm = Schema(
    {
        "id": string_field("Invalid invoice id."),
        "customerId": string_field(CUSTOMER_MESSAGE, allow_blank=False),
        "amount": number_field(AMOUNT_INVALID_MESSAGE, POSITIVE_CENTS),
        "status": enum_field(INVOICE_STATUSES, STATUS_MESSAGE),
        "date": string_field("Invalid invoice date."),
    }
)

# id and date are assigned by the system, never taken from the form.
CreateInvoice = InvoiceForm.omit("id", "date")
UpdateInvoice = InvoiceForm.omit("id", "date")
