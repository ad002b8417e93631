"""File readers producing sheets for the parser."""

from ..core.exceptions import ReaderError, UnsupportedFileError
from .base_reader import BaseReader
from .csv_reader import CSVReader
from .excel_reader import ExcelReader
from .factory import ReaderFactory, create_reader, get_factory, register_custom_reader

__all__ = [
    "BaseReader",
    "CSVReader",
    "ExcelReader",
    "ReaderFactory",
    "create_reader",
    "get_factory",
    "register_custom_reader",
    "ReaderError",
    "UnsupportedFileError",
]
