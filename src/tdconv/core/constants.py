"""Centralized constants for tdconv.

Grid layout positions, parser defaults and formatter defaults live here so
the parser and formatters agree on a single definition.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class GridLayout:
    """Zero-based column positions of a table definition row."""

    NO: Final[int] = 1
    NAME: Final[int] = 2
    TYPE: Final[int] = 3
    PKEY: Final[int] = 4
    NOT_NULL: Final[int] = 5
    UNIQUE: Final[int] = 6
    INDEX: Final[int] = 7
    OPTION: Final[int] = 8
    COMMENT: Final[int] = 9


@dataclass(frozen=True)
class ParserDefaults:
    """Default parser configuration."""

    TABLE_NAME_ROW: Final[int] = 1
    TABLE_NAME_COLUMN: Final[str] = "B"
    START_ROW: Final[int] = 4
    BOOL_STRING: Final[str] = "yes"
    KEY_NAME_SUFFIX: Final[str] = "_key"


@dataclass(frozen=True)
class FormatterDefaults:
    """Default texts emitted by the formatters."""

    PROJECT_URL: Final[str] = "https://github.com/takuoki/tdconv"
    SQL_HEADER: Final[str] = (
        "# SQL generated by tdconv. DO NOT EDIT.\n"
        "# See more details at https://github.com/takuoki/tdconv\n"
    )
    GO_HEADER: Final[str] = (
        "// This file generated by tdconv. DO NOT EDIT.\n"
        "// See more details at https://github.com/takuoki/tdconv.\n"
        "package main\n"
        "\n"
        "import (\n"
        '\t"time"\n'
        ")\n"
        "\n"
    )
    GO_UNKNOWN_TYPE: Final[str] = "UNKNOWN"


# Go type for each leading SQL type keyword
GO_TYPE_MAP: Final[dict[str, str]] = {
    "INT": "*int",
    "TINYINT": "*int",
    "BIGINT": "*int",
    "DOUBLE": "*float32",
    "CHAR": "*string",
    "VARCHAR": "*string",
    "TEXT": "*string",
    "ENUM": "*string",
    "BOOLEAN": "*bool",
    "TIMESTAMP": "*time.Time",
    "DATE": "*time.Time",
    "TIME": "*time.Time",
}


GRID_LAYOUT = GridLayout()
PARSER_DEFAULTS = ParserDefaults()
FORMATTER_DEFAULTS = FormatterDefaults()
