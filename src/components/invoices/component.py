"""
Invoices component - create, update and delete invoice records.

Each action validates, runs exactly one parameterized statement, then
revalidates the listing page. Create and update finish by redirecting to the
listing; delete reports back to the listing it was called from.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, cast

from src.domain.entities import InvoiceStatus
from src.domain.validation import Schema

from .models import (
    DEFAULT_CONFIG,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    FormState,
    InvoiceActionConfig,
    InvoiceDraft,
    UpdateInvoiceInput,
)
from .ports import RedirectPort, RevalidationPort, SqlGatewayPort, TimePort
from .schema import CreateInvoice, UpdateInvoice, to_cents

logger = logging.getLogger(__name__)

INSERT_INVOICE = "INSERT INTO invoices (customer_id, amount, status, date) VALUES (?, ?, ?, ?)"
UPDATE_INVOICE = "UPDATE invoices SET customer_id = ?, amount = ?, status = ? WHERE id = ?"
DELETE_INVOICE = "DELETE FROM invoices WHERE id = ?"


# --- Helpers ---


def _form_fields(form_data: Mapping[str, Any], schema: Schema) -> dict[str, Any]:
    return {name: form_data.get(name) for name in schema.field_names}


def _to_draft(data: dict[str, Any]) -> InvoiceDraft:
    return InvoiceDraft(
        customer_id=data["customerId"],
        amount_cents=to_cents(data["amount"]),
        status=cast(InvoiceStatus, data["status"]),
    )


# --- Actions ---


def run_create(
    inp: CreateInvoiceInput,
    gateway: SqlGatewayPort,
    revalidator: RevalidationPort,
    redirector: RedirectPort,
    time: TimePort,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> FormState:
    parsed = CreateInvoice.safe_parse(_form_fields(inp.form_data, CreateInvoice))
    if not parsed.success or parsed.data is None:
        logger.warning("Create invoice rejected, invalid fields: %s", sorted(parsed.field_errors))
        return FormState(
            errors=parsed.field_errors,
            message="Missing Fields. Failed to Create Invoice.",
        )

    draft = _to_draft(parsed.data)
    date = time.now_utc().date().isoformat()

    try:
        gateway.execute(
            INSERT_INVOICE,
            (draft.customer_id, draft.amount_cents, draft.status, date),
        )
    except Exception:
        logger.exception("Failed to create invoice for customer %s", draft.customer_id)
        return FormState(message="Database Error: Failed to Create Invoice.")

    logger.info(
        "Created invoice for customer %s (%d cents, %s)",
        draft.customer_id,
        draft.amount_cents,
        draft.status,
    )
    revalidator.revalidate_path(config.listing_path)
    redirector.redirect(config.listing_path)


def run_update(
    inp: UpdateInvoiceInput,
    gateway: SqlGatewayPort,
    revalidator: RevalidationPort,
    redirector: RedirectPort,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> FormState:
    parsed = UpdateInvoice.safe_parse(_form_fields(inp.form_data, UpdateInvoice))
    if not parsed.success or parsed.data is None:
        logger.warning(
            "Update of invoice %s rejected, invalid fields: %s",
            inp.invoice_id,
            sorted(parsed.field_errors),
        )
        return FormState(
            errors=parsed.field_errors,
            message="Missing Fields. Failed to Update Invoice.",
        )

    draft = _to_draft(parsed.data)

    # The id is trusted: callers authorize access before invoking the action.
    try:
        gateway.execute(
            UPDATE_INVOICE,
            (draft.customer_id, draft.amount_cents, draft.status, inp.invoice_id),
        )
    except Exception:
        logger.exception("Failed to update invoice %s", inp.invoice_id)
        return FormState(message="Database Error: Failed to Update Invoice.")

    logger.info("Updated invoice %s", inp.invoice_id)
    revalidator.revalidate_path(config.listing_path)
    redirector.redirect(config.listing_path)


def run_delete(
    inp: DeleteInvoiceInput,
    gateway: SqlGatewayPort,
    revalidator: RevalidationPort,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> FormState:
    try:
        gateway.execute(DELETE_INVOICE, (inp.invoice_id,))
    except Exception:
        logger.exception("Failed to delete invoice %s", inp.invoice_id)
        return FormState(message="Database Error: Failed to Delete Invoice")

    logger.info("Deleted invoice %s", inp.invoice_id)
    revalidator.revalidate_path(config.listing_path)
    return FormState(message="Deleted Invoice")


def run(
    inp: CreateInvoiceInput | UpdateInvoiceInput | DeleteInvoiceInput,
    *,
    gateway: SqlGatewayPort,
    revalidator: RevalidationPort,
    redirector: RedirectPort | None = None,
    time: TimePort | None = None,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> FormState:
    if isinstance(inp, CreateInvoiceInput):
        assert redirector and time
        return run_create(inp, gateway, revalidator, redirector, time, config)

    elif isinstance(inp, UpdateInvoiceInput):
        assert redirector
        return run_update(inp, gateway, revalidator, redirector, config)

    elif isinstance(inp, DeleteInvoiceInput):
        return run_delete(inp, gateway, revalidator, config)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
