import logging
from typing import Protocol

import requests
from pydantic import ValidationError

from dtos import FakturoidCredentials, Invoice, InvoicePayload
from utils.exceptions import RemoteServiceError

logger = logging.getLogger(__name__)


class InvoiceApi(Protocol):
    def search_invoices(self, query: str) -> list[Invoice]: ...

    def create_invoice(self, payload: InvoicePayload) -> Invoice: ...

    def update_invoice(self, invoice_id: int, payload: InvoicePayload) -> Invoice: ...

    def get_invoice_pdf(self, invoice_id: int) -> bytes: ...


class FakturoidClient:
    """Thin wrapper around the Fakturoid v2 REST API."""

    def __init__(
        self,
        credentials: FakturoidCredentials,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.credentials = credentials
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (credentials.email, credentials.api_key)
        self.session.headers.update(
            {
                "User-Agent": credentials.user_agent,
                "Accept": "application/json",
            }
        )
        self._account_url = (
            f"{credentials.base_url.rstrip('/')}/accounts/{credentials.slug}"
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.session.close()

    def search_invoices(self, query: str) -> list[Invoice]:
        response = self._request("GET", "/invoices/search.json", params={"query": query})
        return [self._to_invoice(item) for item in self._json(response)]

    def create_invoice(self, payload: InvoicePayload) -> Invoice:
        response = self._request("POST", "/invoices.json", json=payload.to_request())
        return self._to_invoice(self._json(response))

    def update_invoice(self, invoice_id: int, payload: InvoicePayload) -> Invoice:
        response = self._request(
            "PATCH", f"/invoices/{invoice_id}.json", json=payload.to_request()
        )
        return self._to_invoice(self._json(response))

    def get_invoice_pdf(self, invoice_id: int) -> bytes:
        response = self._request("GET", f"/invoices/{invoice_id}/download.pdf")
        # 204 means the PDF is still being rendered
        if response.status_code == 204 or not response.content:
            raise RemoteServiceError(
                f"PDF of invoice {invoice_id} is not ready yet",
                status_code=response.status_code,
            )
        return response.content

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self._account_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise RemoteServiceError(f"{method} {url} failed: {e}") from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise RemoteServiceError(
                f"{method} {url} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            ) from e
        return response

    @staticmethod
    def _json(response: requests.Response):
        try:
            return response.json()
        except ValueError as e:
            raise RemoteServiceError(
                f"Invalid JSON from {response.url}: {e}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _to_invoice(data) -> Invoice:
        try:
            return Invoice.model_validate(data)
        except ValidationError as e:
            raise RemoteServiceError(f"Unexpected invoice data from Fakturoid: {e}") from e
