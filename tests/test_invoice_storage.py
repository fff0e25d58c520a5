import pytest

from services import InvoiceStorage
from utils import FilesystemError


def test_path_for(tmp_path):
    storage = InvoiceStorage(tmp_path)
    path = storage.path_for("2024-03", "be", "2024030001")
    assert path == tmp_path / "2024-03" / "be_2024030001.pdf"


def test_save_creates_month_directory(tmp_path):
    storage = InvoiceStorage(tmp_path / "invoices")
    path = storage.save("2024-03", "fcs", "2024030002", b"%PDF-1.4 first")

    assert path.read_bytes() == b"%PDF-1.4 first"
    assert path.parent == tmp_path / "invoices" / "2024-03"


def test_save_overwrites_same_variable_symbol(tmp_path):
    storage = InvoiceStorage(tmp_path)
    first = storage.save("2024-03", "be", "2024030001", b"old")
    second = storage.save("2024-03", "be", "2024030001", b"new")
    other = storage.save("2024-03", "be", "2024030005", b"other")

    assert first == second
    assert second.read_bytes() == b"new"
    assert other != second
    assert other.read_bytes() == b"other"


def test_save_fails_when_base_is_a_file(tmp_path):
    base = tmp_path / "invoices"
    base.write_text("not a directory")
    storage = InvoiceStorage(base)

    with pytest.raises(FilesystemError):
        storage.save("2024-03", "be", "2024030001", b"pdf")
