"""Render table definitions as Go struct declarations."""

import re
from typing import TextIO

from ..core.constants import FORMATTER_DEFAULTS, GO_TYPE_MAP
from ..models.table import Table, TableSet
from ..utils.naming import to_go_name
from .base import BaseFormatter

# Leading type keyword, e.g. "VARCHAR" in "VARCHAR(32)" or "INT" in "INT UNSIGNED"
_TYPE_KEYWORD = re.compile(r"^([a-zA-Z]+)[ (]")


def go_type(sql_type: str) -> str:
    """Map a raw column type to a nullable Go type, ``UNKNOWN`` when unmapped."""
    match = _TYPE_KEYWORD.match(sql_type)
    keyword = match.group(1) if match else sql_type
    return GO_TYPE_MAP.get(keyword.upper(), FORMATTER_DEFAULTS.GO_UNKNOWN_TYPE)


class GoFormatter(BaseFormatter):
    """Writes one struct per table with a pointer field per column."""

    extension = "go"

    def default_header(self, stream: TextIO, table_set: TableSet) -> None:
        stream.write(FORMATTER_DEFAULTS.GO_HEADER)

    def default_table_footer(self, stream: TextIO, table: Table) -> None:
        stream.write("\n")

    def write_table(self, stream: TextIO, table: Table) -> None:
        stream.write(f"type {to_go_name(table.name, exported=False)} struct {{\n")
        for column in table.columns:
            stream.write(f"\t{to_go_name(column.name)} {go_type(column.type)}\n")
        stream.write("}\n")
