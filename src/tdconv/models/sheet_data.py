"""Data models for representing sheet content."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from ..utils.excel_utils import cell_address

CellValue = str | int | float | bool | datetime | date | time | Decimal | None


@runtime_checkable
class Grid(Protocol):
    """Anything the parser can read cells from.

    ``cell_text`` must return ``""`` for coordinates outside the grid.
    """

    def cell_text(self, row: int, column: int) -> str: ...


def value_to_text(value: Any) -> str:
    """Coerce a raw cell value to the text the parser compares against."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime | date | time):
        return value.isoformat()
    return str(value)


class CellData(BaseModel):
    """Represents a single cell with its value."""

    model_config = ConfigDict(strict=True)

    value: CellValue = Field(None, description="Cell value")
    row: int = Field(..., ge=0, description="Row index (0-based)")
    column: int = Field(..., ge=0, description="Column index (0-based)")

    @property
    def text(self) -> str:
        """Cell value as text."""
        return value_to_text(self.value)

    @property
    def is_empty(self) -> bool:
        """Check if cell is effectively empty."""
        return self.value is None or (isinstance(self.value, str) and not self.value.strip())

    @property
    def excel_address(self) -> str:
        """Get Excel-style address (e.g., 'A1')."""
        return cell_address(self.row, self.column)


class SheetData(BaseModel):
    """A rectangular grid of cells, one table definition per sheet."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Sheet name")
    cells: dict[tuple[int, int], CellData] = Field(
        default_factory=dict, description="Cells indexed by (row, column)"
    )
    max_row: int = Field(-1, ge=-1, description="Maximum row index with data, -1 when empty")
    max_column: int = Field(-1, ge=-1, description="Maximum column index with data, -1 when empty")

    @classmethod
    def from_rows(cls, name: str, rows: list[list[Any]]) -> "SheetData":
        """Build a sheet from a list of (possibly ragged) rows."""
        sheet = cls(name=name)
        for row_idx, row in enumerate(rows):
            for col_idx, value in enumerate(row):
                if value is None:
                    continue
                sheet.set_cell(row_idx, col_idx, CellData(value=value, row=row_idx, column=col_idx))
        # Trailing empty rows still count toward the extent
        sheet.max_row = max(sheet.max_row, len(rows) - 1)
        return sheet

    def get_cell(self, row: int, column: int) -> CellData | None:
        """Get cell data by row and column indices."""
        return self.cells.get((row, column))

    def set_cell(self, row: int, column: int, cell_data: CellData) -> None:
        """Set cell data at specific position."""
        cell_data.row = row
        cell_data.column = column
        self.cells[(row, column)] = cell_data

        self.max_row = max(self.max_row, row)
        self.max_column = max(self.max_column, column)

    def cell_text(self, row: int, column: int) -> str:
        """Cell content as text, empty for missing cells."""
        cell = self.get_cell(row, column)
        return cell.text if cell else ""

    def get_row_values(self, row: int) -> list[CellValue]:
        """Get all values in a specific row."""
        return [
            cell.value if (cell := self.get_cell(row, col)) else None
            for col in range(self.max_column + 1)
        ]

    def has_data(self) -> bool:
        """Whether any cell is non-empty."""
        return any(not cell.is_empty for cell in self.cells.values())

    def get_dimensions(self) -> tuple[int, int]:
        """Get sheet dimensions as (rows, columns)."""
        return (self.max_row + 1, self.max_column + 1)


class WorkbookData(BaseModel):
    """All sheets read from one source file."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Workbook name (usually the file stem)")
    sheets: list[SheetData] = Field(default_factory=list, description="Sheets in file order")
    file_format: str = Field(..., description="File format (xlsx, csv, ...)")

    def get_sheet_by_name(self, name: str) -> SheetData | None:
        """Get sheet by name."""
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        return None

    def get_sheet_names(self) -> list[str]:
        """Get list of all sheet names."""
        return [sheet.name for sheet in self.sheets]

    @property
    def sheet_count(self) -> int:
        """Number of sheets in file."""
        return len(self.sheets)
