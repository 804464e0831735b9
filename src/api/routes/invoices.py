"""
Invoice form endpoints.

Create and update answer with a 303 to the listing on success (raised by the
redirect capability and handled in src.api.main); every other outcome is the
FormState as JSON so the form can re-render it.
"""

from __future__ import annotations

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, Response

from src.adapters.clock import SystemClock
from src.adapters.navigation import RaisingRedirector
from src.adapters.revalidation import InMemoryPageCache
from src.adapters.sqlite.repos import SQLiteInvoiceRepo
from src.adapters.sqlite_db import SQLiteGateway
from src.api.deps import (
    get_clock,
    get_gateway,
    get_invoice_config,
    get_invoice_repo,
    get_page_cache,
    get_redirector,
)
from src.components.invoices import (
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceActionConfig,
    UpdateInvoiceInput,
    run_create,
    run_delete,
    run_update,
)

router = APIRouter()

OptionalFormField = Annotated[str | None, Form()]


def _invoice_form(
    customer_id: str | None, amount: str | None, status: str | None
) -> dict[str, Any]:
    return {"customerId": customer_id, "amount": amount, "status": status}


@router.get("")
def list_invoices(
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
    config: InvoiceActionConfig = Depends(get_invoice_config),
) -> Response:
    """Invoice listing, served from the page cache until revalidated."""
    body = cache.get(config.listing_path)
    if body is not None:
        return Response(content=body, media_type="application/json", headers={"X-Cache": "HIT"})

    generation = cache.generation(config.listing_path)
    invoices = [invoice.model_dump() for invoice in repo.list_all()]
    body = json.dumps({"invoices": invoices, "count": len(invoices)})
    cache.put(config.listing_path, body, generation)
    return Response(content=body, media_type="application/json", headers={"X-Cache": "MISS"})


@router.post("")
def create_invoice(
    customer_id: Annotated[str | None, Form(alias="customerId")] = None,
    amount: OptionalFormField = None,
    status: OptionalFormField = None,
    gateway: SQLiteGateway = Depends(get_gateway),
    cache: InMemoryPageCache = Depends(get_page_cache),
    redirector: RaisingRedirector = Depends(get_redirector),
    clock: SystemClock = Depends(get_clock),
    config: InvoiceActionConfig = Depends(get_invoice_config),
) -> dict[str, Any]:
    state = run_create(
        CreateInvoiceInput(form_data=_invoice_form(customer_id, amount, status)),
        gateway,
        cache,
        redirector,
        clock,
        config,
    )
    return state.to_dict()


@router.post("/{invoice_id}/edit")
def update_invoice(
    invoice_id: str,
    customer_id: Annotated[str | None, Form(alias="customerId")] = None,
    amount: OptionalFormField = None,
    status: OptionalFormField = None,
    gateway: SQLiteGateway = Depends(get_gateway),
    cache: InMemoryPageCache = Depends(get_page_cache),
    redirector: RaisingRedirector = Depends(get_redirector),
    config: InvoiceActionConfig = Depends(get_invoice_config),
) -> dict[str, Any]:
    state = run_update(
        UpdateInvoiceInput(
            invoice_id=invoice_id,
            form_data=_invoice_form(customer_id, amount, status),
        ),
        gateway,
        cache,
        redirector,
        config,
    )
    return state.to_dict()


@router.post("/{invoice_id}/delete")
def delete_invoice(
    invoice_id: str,
    gateway: SQLiteGateway = Depends(get_gateway),
    cache: InMemoryPageCache = Depends(get_page_cache),
    config: InvoiceActionConfig = Depends(get_invoice_config),
) -> dict[str, Any]:
    state = run_delete(DeleteInvoiceInput(invoice_id=invoice_id), gateway, cache, config)
    return state.to_dict()
