"""Excel reader backed by openpyxl."""

import zipfile
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from ..core.exceptions import ReaderError
from ..models.sheet_data import SheetData, WorkbookData
from .base_reader import BaseReader

_PLAIN_TYPES = (str, int, float, bool, datetime, date, time, Decimal)


def _cell_value(value: Any) -> Any:
    # Anything outside the cell model's types (durations, errors) is kept as text
    if value is None or isinstance(value, _PLAIN_TYPES):
        return value
    return str(value)


class ExcelReader(BaseReader):
    """Reads every worksheet of an .xlsx/.xlsm workbook, using cached formula values."""

    file_format = "xlsx"

    def _read(self) -> WorkbookData:
        try:
            workbook = openpyxl.load_workbook(self.file_path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError) as e:
            raise ReaderError(f"Could not open workbook {self.file_path.name}: {e}") from e

        try:
            sheets = []
            for worksheet in workbook.worksheets:
                rows = [
                    [_cell_value(v) for v in row] for row in worksheet.iter_rows(values_only=True)
                ]
                sheets.append(SheetData.from_rows(worksheet.title, rows))
        finally:
            workbook.close()

        return WorkbookData(name=self.file_path.stem, sheets=sheets, file_format=self.file_format)
