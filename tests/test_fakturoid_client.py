import json
from datetime import date

import pytest
import requests

from dtos import FakturoidCredentials, InvoicePayload, LinePayload
from services import FakturoidClient
from utils import RemoteServiceError

ACCOUNT_URL = "https://app.fakturoid.cz/api/v2/accounts/acme"
CREDENTIALS = FakturoidCredentials(
    slug="acme", email="me@example.com", api_key="secret", user_agent="Tests"
)
PAYLOAD = InvoicePayload(
    subject_id=222,
    issued_on=date(2024, 3, 31),
    due=15,
    lines=[LinePayload(id=42, name="Services", vat_rate=21, unit_price="100")],
)


def make_response(status_code=200, body=b"", url=ACCOUNT_URL):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.url = url
    return response


def json_response(data, status_code=200):
    return make_response(status_code, json.dumps(data).encode())


class FakeSession(requests.Session):
    def __init__(self, responses):
        super().__init__()
        self.responses = list(responses)
        self.requests = []

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def test_session_setup():
    session = FakeSession([])
    FakturoidClient(CREDENTIALS, session=session)

    assert session.auth == ("me@example.com", "secret")
    assert session.headers["User-Agent"] == "Tests"


def test_search_invoices():
    session = FakeSession(
        [
            json_response(
                [
                    {
                        "id": 1,
                        "subject_id": 222,
                        "variable_symbol": 2024030001,
                        "number": "2024-0001",
                        "lines": [{"id": 42, "name": "Services", "unit_price": "100.0"}],
                    }
                ]
            )
        ]
    )
    client = FakturoidClient(CREDENTIALS, session=session)

    invoices = client.search_invoices("Services according to agreement in month March 2024")

    method, url, kwargs = session.requests[0]
    assert method == "GET"
    assert url == f"{ACCOUNT_URL}/invoices/search.json"
    assert kwargs["params"] == {"query": "Services according to agreement in month March 2024"}
    assert invoices[0].variable_symbol == "2024030001"
    assert invoices[0].lines[0].id == 42


def test_create_invoice():
    session = FakeSession([json_response({"id": 9, "subject_id": 222, "variable_symbol": "2024030009"}, 201)])
    client = FakturoidClient(CREDENTIALS, session=session)

    invoice = client.create_invoice(PAYLOAD)

    method, url, kwargs = session.requests[0]
    assert method == "POST"
    assert url == f"{ACCOUNT_URL}/invoices.json"
    assert kwargs["json"]["issued_on"] == "2024-03-31"
    assert kwargs["json"]["lines"][0]["id"] == 42
    assert invoice.id == 9


def test_update_invoice():
    session = FakeSession([json_response({"id": 9, "subject_id": 222, "variable_symbol": "2024030009"})])
    client = FakturoidClient(CREDENTIALS, session=session)

    client.update_invoice(9, PAYLOAD)

    method, url, _ = session.requests[0]
    assert method == "PATCH"
    assert url == f"{ACCOUNT_URL}/invoices/9.json"


def test_get_invoice_pdf():
    session = FakeSession([make_response(200, b"%PDF-1.4 data")])
    client = FakturoidClient(CREDENTIALS, session=session)

    assert client.get_invoice_pdf(9) == b"%PDF-1.4 data"
    assert session.requests[0][1] == f"{ACCOUNT_URL}/invoices/9/download.pdf"


def test_pdf_not_ready():
    session = FakeSession([make_response(204)])
    client = FakturoidClient(CREDENTIALS, session=session)

    with pytest.raises(RemoteServiceError) as exc_info:
        client.get_invoice_pdf(9)
    assert exc_info.value.status_code == 204


def test_http_error_is_wrapped():
    session = FakeSession([make_response(401, b'{"error": "unauthorized"}')])
    client = FakturoidClient(CREDENTIALS, session=session)

    with pytest.raises(RemoteServiceError) as exc_info:
        client.search_invoices("anything")
    assert exc_info.value.status_code == 401
    assert "unauthorized" in str(exc_info.value)


def test_validation_error_is_wrapped():
    session = FakeSession([make_response(422, b'{"errors": {"subject_id": ["invalid"]}}')])
    client = FakturoidClient(CREDENTIALS, session=session)

    with pytest.raises(RemoteServiceError) as exc_info:
        client.create_invoice(PAYLOAD)
    assert exc_info.value.status_code == 422


def test_connection_error_is_wrapped():
    session = FakeSession([requests.ConnectionError("connection refused")])
    client = FakturoidClient(CREDENTIALS, session=session)

    with pytest.raises(RemoteServiceError) as exc_info:
        client.get_invoice_pdf(9)
    assert "connection refused" in str(exc_info.value)


def test_invalid_json_is_wrapped():
    session = FakeSession([make_response(200, b"<html>maintenance</html>")])
    client = FakturoidClient(CREDENTIALS, session=session)

    with pytest.raises(RemoteServiceError):
        client.search_invoices("anything")
