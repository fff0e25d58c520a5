import logging
import time
from datetime import datetime
from decimal import Decimal
from typing import Callable

from dtos import (
    AppConfig,
    ExistingInvoice,
    GeneratedInvoice,
    Invoice,
    InvoicePayload,
    LinePayload,
)
from services import (
    BillingPeriod,
    InvoiceApi,
    InvoiceStorage,
    PricingService,
    SubjectService,
)
from services.billing_period import Clock
from utils.exceptions import RemoteServiceError

# Fakturoid renders the PDF asynchronously after a create/update
PDF_RENDER_DELAY = 3

logger = logging.getLogger(__name__)


class GenerateInvoiceUseCase:
    def __init__(
        self,
        config: AppConfig,
        client: InvoiceApi,
        storage: InvoiceStorage,
        clock: Clock = datetime.now,
        sleep: Callable[[float], None] | None = None,
        pdf_delay: float = PDF_RENDER_DELAY,
    ):
        self.client = client
        self.storage = storage
        self.clock = clock
        self.sleep = sleep or time.sleep
        self.pdf_delay = pdf_delay
        self.subjects = SubjectService(config.subjects)
        self.pricing = PricingService(config.invoicing)

    def generate(self, subject: str, raw_price: str) -> GeneratedInvoice:
        # both inputs are validated before Fakturoid is contacted
        subject_id = self.subjects.resolve(subject)
        unit_price = self.pricing.unit_price(self.pricing.parse_price(raw_price))

        period = BillingPeriod.current(self.clock)
        existing = self.find_existing_invoice(subject_id, period.line_name)

        payload = self.build_payload(subject_id, period, unit_price, existing)
        invoice = self.submit(payload, existing)
        if not invoice.variable_symbol:
            raise RemoteServiceError(
                f"Fakturoid returned invoice {invoice.id} without a variable symbol"
            )
        logger.info(f"Invoice saved in Fakturoid: {invoice.id}")

        self.sleep(self.pdf_delay)
        content = self.client.get_invoice_pdf(invoice.id)
        path = self.storage.save(period.month_key, subject, invoice.variable_symbol, content)
        logger.info(f"Invoice PDF generated: {path}")

        return GeneratedInvoice(
            invoice_id=invoice.id,
            variable_symbol=invoice.variable_symbol,
            pdf_path=str(path),
            updated=existing is not None,
        )

    def find_existing_invoice(self, subject_id: int, line_name: str) -> ExistingInvoice | None:
        """Invoice of this month for the subject, if an earlier run created one.

        Fakturoid search is full text over any invoice field, so the subject
        has to be checked again on every hit.
        """
        for invoice in self.client.search_invoices(line_name):
            if invoice.subject_id == subject_id:
                line_id = invoice.lines[0].id if invoice.lines else None
                return ExistingInvoice(invoice_id=invoice.id, line_id=line_id)
        return None

    def build_payload(
        self,
        subject_id: int,
        period: BillingPeriod,
        unit_price: Decimal,
        existing: ExistingInvoice | None,
    ) -> InvoicePayload:
        line = LinePayload(
            id=existing.line_id if existing else None,
            name=period.line_name,
            vat_rate=self.pricing.vat_rate,
            unit_price=format(unit_price, "f"),
        )
        return InvoicePayload(
            subject_id=subject_id,
            issued_on=period.issued_on,
            due=period.due,
            lines=[line],
        )

    def submit(self, payload: InvoicePayload, existing: ExistingInvoice | None) -> Invoice:
        if existing is None:
            logger.info("No invoice for this month yet, creating a new one")
            return self.client.create_invoice(payload)

        logger.info(f"Updating invoice {existing.invoice_id} of this month")
        return self.client.update_invoice(existing.invoice_id, payload)
