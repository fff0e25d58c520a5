from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class InvoiceLine(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: int
    name: str = ""
    vat_rate: float | None = None
    unit_price: str | None = None


class Invoice(BaseModel):
    """Invoice record as returned by Fakturoid; unknown fields are ignored."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: int
    subject_id: int
    variable_symbol: str = ""
    lines: list[InvoiceLine] = Field(default_factory=list)


class ExistingInvoice(BaseModel):
    invoice_id: int
    line_id: int | None = None


class LinePayload(BaseModel):
    # set only when updating, so Fakturoid rewrites the line instead of appending
    id: int | None = None
    name: str
    vat_rate: int
    unit_price: str


class InvoicePayload(BaseModel):
    subject_id: int
    issued_on: date
    due: int
    lines: list[LinePayload]

    def to_request(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class GeneratedInvoice(BaseModel):
    invoice_id: int
    variable_symbol: str
    pdf_path: str
    updated: bool = Field(default=False)
