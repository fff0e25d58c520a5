class InvoiceGeneratorError(Exception):
    """Base error for every failure that aborts an invoice run."""


class InvalidSubject(InvoiceGeneratorError):
    pass


class InvalidPrice(InvoiceGeneratorError):
    pass


class ConfigurationError(InvoiceGeneratorError):
    pass


class RemoteServiceError(InvoiceGeneratorError):
    """Search, create, update or PDF download failed on the Fakturoid side."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FilesystemError(InvoiceGeneratorError):
    pass
