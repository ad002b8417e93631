"""Data models for tdconv."""

from .sheet_data import CellData, Grid, SheetData, WorkbookData
from .table import Column, Key, Table, TableSet

__all__ = [
    "CellData",
    "Grid",
    "SheetData",
    "WorkbookData",
    "Column",
    "Key",
    "Table",
    "TableSet",
]
