"""Render table definitions as MySQL-flavoured DDL."""

from typing import TextIO

from ..core.constants import FORMATTER_DEFAULTS
from ..models.table import Column, Key, Table
from .base import BaseFormatter


class SQLFormatter(BaseFormatter):
    """Writes ``DROP TABLE IF EXISTS`` + ``CREATE TABLE`` for each table.

    Both composite unique keys and index keys are written as
    ``UNIQUE KEY`` clauses, which is what existing generated schemas
    expect.
    """

    extension = "sql"

    def default_table_header(self, stream: TextIO, table: Table) -> None:
        stream.write(FORMATTER_DEFAULTS.SQL_HEADER)

    def default_table_footer(self, stream: TextIO, table: Table) -> None:
        stream.write("\n\n")

    def write_table(self, stream: TextIO, table: Table) -> None:
        lines = [self._column_line(c) for c in table.columns]
        if table.pkey_columns:
            lines.append(f"    PRIMARY KEY ({', '.join(table.pkey_columns)})")
        lines.extend(self._key_line(k) for k in table.unique_keys)
        lines.extend(self._key_line(k) for k in table.index_keys)

        stream.write(f"DROP TABLE IF EXISTS {table.name};\n")
        stream.write(f"CREATE TABLE `{table.name}` (\n")
        stream.write(",\n".join(lines))
        stream.write("\n);")

    def _column_line(self, column: Column) -> str:
        parts = [f"    `{column.name}`", column.type]
        if column.not_null:
            parts.append("NOT NULL")
        if column.option:
            parts.append(column.option)
        if column.unique:
            parts.append("UNIQUE")
        if column.comment:
            parts.append("COMMENT '" + column.comment.replace("'", "''") + "'")
        return " ".join(parts)

    def _key_line(self, key: Key) -> str:
        return f"    UNIQUE KEY `{key.name}` ({', '.join(key.columns)})"
