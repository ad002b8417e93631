"""Base class for table definition formatters."""

import io
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TextIO

from ..models.table import Table, TableSet
from ..utils.logging_context import OperationContext, TableContext

logger = logging.getLogger(__name__)

TableSetHook = Callable[[TextIO, TableSet], None]
TableHook = Callable[[TextIO, Table], None]

_UNSET = object()


class BaseFormatter(ABC):
    """Renders tables as text.

    Output for a table set is built from four hooks around each table::

        header(stream, table_set)
        for each table: table_header(stream, table), write(stream, table),
                        table_footer(stream, table)
        footer(stream, table_set)

    Subclasses provide defaults by overriding the ``default_*`` methods.
    Each hook can be replaced through the constructor or the ``set_*``
    methods; passing ``None`` makes the hook write nothing.
    """

    extension: str = ""

    def __init__(
        self,
        *,
        header: TableSetHook | None = _UNSET,  # type: ignore[assignment]
        table_header: TableHook | None = _UNSET,  # type: ignore[assignment]
        table_footer: TableHook | None = _UNSET,  # type: ignore[assignment]
        footer: TableSetHook | None = _UNSET,  # type: ignore[assignment]
    ):
        self._header: TableSetHook | None = self.default_header
        self._table_header: TableHook | None = self.default_table_header
        self._table_footer: TableHook | None = self.default_table_footer
        self._footer: TableSetHook | None = self.default_footer

        if header is not _UNSET:
            self.set_header(header)
        if table_header is not _UNSET:
            self.set_table_header(table_header)
        if table_footer is not _UNSET:
            self.set_table_footer(table_footer)
        if footer is not _UNSET:
            self.set_footer(footer)

    def set_header(self, hook: TableSetHook | None) -> None:
        self._header = hook

    def set_table_header(self, hook: TableHook | None) -> None:
        self._table_header = hook

    def set_table_footer(self, hook: TableHook | None) -> None:
        self._table_footer = hook

    def set_footer(self, hook: TableSetHook | None) -> None:
        self._footer = hook

    def default_header(self, stream: TextIO, table_set: TableSet) -> None:
        pass

    def default_table_header(self, stream: TextIO, table: Table) -> None:
        pass

    def default_table_footer(self, stream: TextIO, table: Table) -> None:
        pass

    def default_footer(self, stream: TextIO, table_set: TableSet) -> None:
        pass

    def write(self, stream: TextIO, table: Table | None) -> None:
        """Write one table definition; ``None`` writes nothing."""
        if table is None:
            return
        self.write_table(stream, table)

    @abstractmethod
    def write_table(self, stream: TextIO, table: Table) -> None:
        """Write the body of one table definition."""

    def write_table_set(self, stream: TextIO, table_set: TableSet | None) -> None:
        """Write every table of the set between the header and footer hooks."""
        if table_set is None:
            return

        with OperationContext(f"format_{self.extension}"):
            if self._header:
                self._header(stream, table_set)
            for table in table_set.tables:
                with TableContext(table.name):
                    if self._table_header:
                        self._table_header(stream, table)
                    self.write(stream, table)
                    if self._table_footer:
                        self._table_footer(stream, table)
            if self._footer:
                self._footer(stream, table_set)

        logger.debug(f"Rendered {len(table_set.tables)} tables as {self.extension}")

    def to_string(self, table_set: TableSet) -> str:
        """Render a table set to a string."""
        buffer = io.StringIO()
        self.write_table_set(buffer, table_set)
        return buffer.getvalue()


def render(formatter: BaseFormatter | None, stream: TextIO, table: Table | None) -> None:
    """Write ``table`` with ``formatter``; a missing formatter or table is a no-op."""
    if formatter is None:
        return
    formatter.write(stream, table)


def render_table_set(
    formatter: BaseFormatter | None, stream: TextIO, table_set: TableSet | None
) -> None:
    """Write ``table_set`` with ``formatter``; a missing formatter or set is a no-op."""
    if formatter is None:
        return
    formatter.write_table_set(stream, table_set)
