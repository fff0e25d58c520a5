import logging
from pathlib import Path

from utils.exceptions import FilesystemError

logger = logging.getLogger(__name__)


class InvoiceStorage:
    def __init__(self, base_dir: str | Path):
        self.base_dir = Path(base_dir)

    def path_for(self, month_key: str, subject: str, variable_symbol: str) -> Path:
        return self.base_dir / month_key / f"{subject}_{variable_symbol}.pdf"

    def save(self, month_key: str, subject: str, variable_symbol: str, content: bytes) -> Path:
        """Write the PDF, replacing a file from an earlier run in the same month."""
        path = self.path_for(month_key, subject, variable_symbol)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise FilesystemError(f"Cannot write invoice PDF to {path}: {e}") from e
        logger.debug(f"Wrote {len(content)} bytes to {path}")
        return path
