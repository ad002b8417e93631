"""Base class for file readers."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ..core.exceptions import ReaderError
from ..models.sheet_data import WorkbookData

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    """Reads a source file into sheets of cells."""

    file_format: str = ""

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def read(self) -> WorkbookData:
        """Read all sheets from the file.

        Raises:
            ReaderError: If the file is missing or cannot be parsed
        """
        if not self.file_path.exists():
            raise ReaderError(f"File not found: {self.file_path}")

        workbook = self._read()
        logger.info(f"Read {workbook.sheet_count} sheets from {self.file_path.name}")
        return workbook

    @abstractmethod
    def _read(self) -> WorkbookData:
        """Format-specific reading."""
