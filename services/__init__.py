from .billing_period import BillingPeriod
from .fakturoid_client import FakturoidClient, InvoiceApi
from .invoice_storage import InvoiceStorage
from .pricing_service import PricingService
from .subject_service import SubjectService

__all__ = [
    "BillingPeriod",
    "FakturoidClient",
    "InvoiceApi",
    "InvoiceStorage",
    "PricingService",
    "SubjectService",
]
