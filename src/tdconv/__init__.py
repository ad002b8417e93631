"""tdconv - Convert spreadsheet table definitions into SQL and Go."""

__version__ = "0.1.0"

from tdconv.config import Config
from tdconv.core.exceptions import (
    ConfigurationError,
    ErrorKind,
    TableDefinitionError,
    TdconvError,
    ValidationError,
)
from tdconv.formatters import GoFormatter, SQLFormatter
from tdconv.models import Column, Key, SheetData, Table, TableSet
from tdconv.parser import Parser, bool_string, key_name_func, start_row, table_name_pos
from tdconv.tdconv import TdConv

__all__ = [
    "TdConv",
    "Config",
    "Parser",
    "table_name_pos",
    "start_row",
    "bool_string",
    "key_name_func",
    "Column",
    "Key",
    "Table",
    "TableSet",
    "SheetData",
    "SQLFormatter",
    "GoFormatter",
    "ErrorKind",
    "TdconvError",
    "TableDefinitionError",
    "ConfigurationError",
    "ValidationError",
]
