"""CSV reader: one file is one sheet."""

import csv

from ..core.exceptions import ReaderError
from ..models.sheet_data import SheetData, WorkbookData
from .base_reader import BaseReader


class CSVReader(BaseReader):
    """Reads a CSV file as a single sheet named after the file stem."""

    file_format = "csv"

    def __init__(self, file_path, encoding: str = "utf-8-sig", delimiter: str = ","):
        super().__init__(file_path)
        self.encoding = encoding
        self.delimiter = delimiter

    def _read(self) -> WorkbookData:
        try:
            with self.file_path.open(newline="", encoding=self.encoding) as f:
                rows = list(csv.reader(f, delimiter=self.delimiter))
        except (UnicodeDecodeError, csv.Error) as e:
            raise ReaderError(f"Could not parse {self.file_path.name}: {e}") from e

        sheet = SheetData.from_rows(self.file_path.stem, rows)
        return WorkbookData(name=self.file_path.stem, sheets=[sheet], file_format=self.file_format)
