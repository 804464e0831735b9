"""
Invoices component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.domain.entities import InvoiceStatus


@dataclass(frozen=True)
class InvoiceActionConfig:
    """Invoice action configuration from rules."""

    listing_path: str = "/dashboard/invoices"


DEFAULT_CONFIG = InvoiceActionConfig()


@dataclass
class FormState:
    """
    Result handed back to the form after an action attempt.

    ``errors`` is only set when validation failed.
    """

    message: str | None = None
    errors: dict[str, list[str]] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"message": self.message}
        if self.errors is not None:
            data["errors"] = {name: list(msgs) for name, msgs in self.errors.items()}
        return data


@dataclass(frozen=True)
class CreateInvoiceInput:
    """Input for creating an invoice from raw form data."""

    form_data: Mapping[str, Any]
    prev_state: FormState | None = None


@dataclass(frozen=True)
class UpdateInvoiceInput:
    """Input for replacing an invoice's customer, amount and status."""

    invoice_id: str
    form_data: Mapping[str, Any]
    prev_state: FormState | None = None


@dataclass(frozen=True)
class DeleteInvoiceInput:
    """Input for deleting an invoice."""

    invoice_id: str


@dataclass(frozen=True)
class InvoiceDraft:
    """Validated, storage-ready invoice fields."""

    customer_id: str
    amount_cents: int
    status: InvoiceStatus
