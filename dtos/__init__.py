from .config import AppConfig, FakturoidCredentials, SubjectRegistry, InvoicingPolicy
from .models import (
    Invoice,
    InvoiceLine,
    ExistingInvoice,
    LinePayload,
    InvoicePayload,
    GeneratedInvoice,
)

__all__ = [
    "AppConfig",
    "FakturoidCredentials",
    "SubjectRegistry",
    "InvoicingPolicy",
    "Invoice",
    "InvoiceLine",
    "ExistingInvoice",
    "LinePayload",
    "InvoicePayload",
    "GeneratedInvoice",
]
