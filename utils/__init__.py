from .core import setup_logging
from .config import load_config
from .exceptions import (
    InvoiceGeneratorError,
    InvalidSubject,
    InvalidPrice,
    ConfigurationError,
    RemoteServiceError,
    FilesystemError,
)

__all__ = [
    "setup_logging",
    "load_config",
    "InvoiceGeneratorError",
    "InvalidSubject",
    "InvalidPrice",
    "ConfigurationError",
    "RemoteServiceError",
    "FilesystemError",
]
