from .generate_invoice_use_case import GenerateInvoiceUseCase, PDF_RENDER_DELAY

__all__ = ["GenerateInvoiceUseCase", "PDF_RENDER_DELAY"]
