"""
Invoices component - invoice form actions.

Handles create, update and delete of invoice records with form validation
and listing-page revalidation.
"""

from .component import (
    DELETE_INVOICE,
    INSERT_INVOICE,
    UPDATE_INVOICE,
    run,
    run_create,
    run_delete,
    run_update,
)
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
from .schema import CreateInvoice, InvoiceForm, UpdateInvoice, to_cents

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_delete",
    "run_update",
    "to_cents",
    # Statements
    "DELETE_INVOICE",
    "INSERT_INVOICE",
    "UPDATE_INVOICE",
    # Models
    "DEFAULT_CONFIG",
    "CreateInvoiceInput",
    "DeleteInvoiceInput",
    "FormState",
    "InvoiceActionConfig",
    "InvoiceDraft",
    "UpdateInvoiceInput",
    # Schemas
    "CreateInvoice",
    "InvoiceForm",
    "UpdateInvoice",
    # Ports
    "RedirectPort",
    "RevalidationPort",
    "SqlGatewayPort",
    "TimePort",
]
