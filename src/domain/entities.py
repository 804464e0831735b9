from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
InvoiceStatus = Literal["pending", "paid"]
INVOICE_STATUSES: tuple[InvoiceStatus, ...] = ("pending", "paid")

# --- Customers & Invoices ---


class Customer(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    email: str
    image_url: str = ""


class Invoice(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    customer_id: str
    amount: int  # cents
    status: InvoiceStatus = "pending"
    date: str  # YYYY-MM-DD


# --- Users ---


class User(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    email: str
    password_hash: str
