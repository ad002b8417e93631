"""Parse table definition sheets into Table models.

A sheet holds one table definition: the table name sits in a single
configured cell, and column definitions are listed one per row from the
configured start row down. Each column row is laid out as described by
``GRID_LAYOUT`` ("No", name, type, PK, NOT NULL, UNIQUE, INDEX, option,
comment). Scanning stops at the first row whose "No" cell is empty; rows
with a "No" but no type are treated as spacer/comment rows and skipped.

A :class:`Parser` is configured once by applying option callables in order.
Every option validates against the settings held at the moment it is
applied, so the same final values can fail differently depending on order::

    Parser(table_name_pos(3, "C"), start_row(2))  # InvalidStartRow
    Parser(start_row(2), table_name_pos(3, "C"))  # InvalidTableNamePosition
"""

from collections.abc import Callable
from itertools import count
from typing import TYPE_CHECKING

from .core.constants import GRID_LAYOUT, PARSER_DEFAULTS
from .core.exceptions import ConfigurationError, ErrorKind, ValidationError
from .models.table import Column, Key, Table
from .utils.excel_utils import column_index_from_letter
from .utils.logging_context import OperationContext, TableContext, get_contextual_logger

if TYPE_CHECKING:
    from .config import Config
    from .models.sheet_data import Grid

logger = get_contextual_logger(__name__)

KeyNameFunc = Callable[[str], str]
ParseOption = Callable[["ParserSettings"], None]


def default_key_name(column_name: str) -> str:
    """Name a single-column key after its column ('bar' -> 'bar_key')."""
    return column_name + PARSER_DEFAULTS.KEY_NAME_SUFFIX


class ParserSettings:
    """Sheet layout rules, validated eagerly as each one is changed."""

    def __init__(self):
        self._table_name_row = PARSER_DEFAULTS.TABLE_NAME_ROW
        self._table_name_column = column_index_from_letter(PARSER_DEFAULTS.TABLE_NAME_COLUMN)
        self._start_row = PARSER_DEFAULTS.START_ROW
        self._bool_string = PARSER_DEFAULTS.BOOL_STRING
        self._key_name_func: KeyNameFunc = default_key_name

    @property
    def table_name_row(self) -> int:
        return self._table_name_row

    @property
    def table_name_column(self) -> int:
        return self._table_name_column

    @property
    def start_row(self) -> int:
        return self._start_row

    @property
    def bool_string(self) -> str:
        return self._bool_string

    @property
    def key_name_func(self) -> KeyNameFunc:
        return self._key_name_func

    def set_table_name_pos(self, row: int, column: str) -> None:
        """Move the table name cell; the row must stay above the current start row."""
        if row < 0:
            raise ConfigurationError(
                ErrorKind.INVALID_TABLE_NAME_POSITION, f"row must not be negative, got {row}"
            )
        if row >= self._start_row:
            raise ConfigurationError(
                ErrorKind.INVALID_TABLE_NAME_POSITION, f"row={row}, start_row={self._start_row}"
            )
        try:
            column_index = column_index_from_letter(column)
        except ValueError as e:
            raise ConfigurationError(ErrorKind.INVALID_COLUMN_ADDRESS, str(e)) from e

        self._table_name_row = row
        self._table_name_column = column_index

    def set_start_row(self, row: int) -> None:
        """Move the first scanned row; it must stay below the current table name row."""
        if row <= self._table_name_row:
            raise ConfigurationError(
                ErrorKind.INVALID_START_ROW, f"row={row}, table_name_row={self._table_name_row}"
            )
        self._start_row = row

    def set_bool_string(self, token: str) -> None:
        self._bool_string = token

    def set_key_name_func(self, func: KeyNameFunc | None) -> None:
        if func is None or not callable(func):
            raise ConfigurationError(ErrorKind.INVALID_KEY_NAMING_FUNCTION)
        self._key_name_func = func


def table_name_pos(row: int, column: str) -> ParseOption:
    """Option: read the table name from ``(row, column)``, e.g. ``(1, "B")``."""

    def apply(settings: ParserSettings) -> None:
        settings.set_table_name_pos(row, column)

    return apply


def start_row(row: int) -> ParseOption:
    """Option: start scanning column rows at ``row``."""

    def apply(settings: ParserSettings) -> None:
        settings.set_start_row(row)

    return apply


def bool_string(token: str) -> ParseOption:
    """Option: the exact cell text that marks a flag as true."""

    def apply(settings: ParserSettings) -> None:
        settings.set_bool_string(token)

    return apply


def key_name_func(func: KeyNameFunc | None) -> ParseOption:
    """Option: derive key names from column names with ``func``."""

    def apply(settings: ParserSettings) -> None:
        settings.set_key_name_func(func)

    return apply


class Parser:
    """Turns table definition sheets into validated :class:`Table` models.

    The parser is read-only once built, apart from the common columns which
    may be registered exactly once. Registration is not synchronized: call
    :meth:`set_common_columns` before sharing the parser between threads.
    """

    def __init__(self, *options: ParseOption):
        """Initialize the parser.

        Args:
            *options: Option callables (``table_name_pos``, ``start_row``,
                ``bool_string``, ``key_name_func``) applied in order

        Raises:
            ConfigurationError: If an option is invalid given the settings
                applied before it
        """
        self._settings = ParserSettings()
        for option in options:
            option(self._settings)
        self._common_columns: list[Column] | None = None

    @classmethod
    def from_config(cls, config: "Config") -> "Parser":
        """Build a parser from a :class:`~tdconv.config.Config`.

        The start row is applied first when the configured table name row
        would otherwise collide with the default start row.
        """
        suffix = config.key_name_suffix
        name_pos = table_name_pos(config.table_name_row, config.table_name_column)
        first_row = start_row(config.start_row)
        if config.table_name_row >= PARSER_DEFAULTS.START_ROW:
            layout = [first_row, name_pos]
        else:
            layout = [name_pos, first_row]

        return cls(
            *layout,
            bool_string(config.bool_string),
            key_name_func(lambda name: name + suffix),
        )

    @property
    def table_name_row(self) -> int:
        return self._settings.table_name_row

    @property
    def table_name_column(self) -> int:
        return self._settings.table_name_column

    @property
    def start_row(self) -> int:
        return self._settings.start_row

    @property
    def bool_string(self) -> str:
        return self._settings.bool_string

    @property
    def key_name_func(self) -> KeyNameFunc:
        return self._settings.key_name_func

    @property
    def has_common_columns(self) -> bool:
        """Whether common columns were registered, even an empty set."""
        return self._common_columns is not None

    @property
    def common_columns(self) -> tuple[Column, ...]:
        """Registered common columns, empty until set."""
        return tuple(self._common_columns or ())

    def set_common_columns(self, grid: "Grid | None") -> None:
        """Register the columns appended to every table parsed afterwards.

        The grid is scanned like a table sheet, without a table name.

        Raises:
            ConfigurationError: If common columns were already registered
            ValidationError: If a common column is a primary key or has an index
        """
        if grid is None:
            return
        if self._common_columns is not None:
            raise ConfigurationError(ErrorKind.COMMON_COLUMNS_ALREADY_SET)

        with OperationContext("set_common_columns"):
            columns = self._scan_columns(grid)
            for column in columns:
                if column.pkey:
                    raise ValidationError(
                        ErrorKind.COMMON_COLUMN_MUST_NOT_BE_PRIMARY_KEY, f"column={column.name}"
                    )
                if column.index:
                    raise ValidationError(
                        ErrorKind.COMMON_COLUMN_MUST_NOT_HAVE_INDEX, f"column={column.name}"
                    )

            self._common_columns = [c.model_copy(update={"is_common": True}) for c in columns]
            logger.info(f"Registered {len(self._common_columns)} common columns")

    def parse(self, grid: "Grid | None") -> Table | None:
        """Parse one table definition sheet.

        Args:
            grid: Sheet to read; ``None`` parses to ``None``

        Returns:
            The validated table, own columns first, then common columns

        Raises:
            ValidationError: If the table name is missing or no column rows exist
        """
        if grid is None:
            return None

        name = grid.cell_text(self.table_name_row, self.table_name_column).strip()
        if not name:
            raise ValidationError(ErrorKind.TABLE_NAME_REQUIRED)

        with TableContext(name), OperationContext("parse"):
            columns = self._scan_columns(grid)
            if not columns:
                raise ValidationError(ErrorKind.NO_COLUMNS, f"table={name}")

            table = Table(
                name=name,
                columns=columns,
                pkey_columns=[c.name for c in columns if c.pkey],
                unique_keys=self.build_unique_keys(columns),
                index_keys=self.build_index_keys(columns),
            )
            # Common columns go last and take no part in key derivation
            table.columns.extend(c.model_copy() for c in self.common_columns)

            logger.info(
                f"Parsed table with {len(columns)} columns "
                f"(+{len(self.common_columns)} common), {len(table.index_keys)} index keys"
            )
            return table

    def build_index_keys(self, columns: list[Column]) -> list[Key]:
        """One single-column key per indexed column, in column order."""
        keys = []
        for column in columns:
            if column.index:
                key = Key(name=self.key_name_func(column.name), columns=[column.name])
                logger.debug(f"Index key {key.name} on {column.name}")
                keys.append(key)
        return keys

    def build_unique_keys(self, columns: list[Column]) -> list[Key]:
        """Composite unique keys for the table.

        A single UNIQUE flag stays on its column and yields no key here.
        The sheet layout has no syntax for grouping columns into a composite
        unique key, so this returns an empty list; subclasses that define
        such a grouping override this method.
        """
        return []

    def _scan_columns(self, grid: "Grid") -> list[Column]:
        """Read column rows from the start row until the end sentinel."""
        columns = []
        for row in count(self.start_row):
            if grid.cell_text(row, GRID_LAYOUT.NO) == "":
                logger.debug(f"Empty No cell at row {row}, end of columns")
                break
            if grid.cell_text(row, GRID_LAYOUT.TYPE) == "":
                logger.debug(f"Row {row} has no type, skipped")
                continue
            columns.append(self._parse_column(grid, row))
        return columns

    def _parse_column(self, grid: "Grid", row: int) -> Column:
        def text(col: int) -> str:
            return grid.cell_text(row, col)

        def flag(col: int) -> bool:
            return text(col) == self.bool_string

        return Column(
            name=text(GRID_LAYOUT.NAME),
            type=text(GRID_LAYOUT.TYPE),
            pkey=flag(GRID_LAYOUT.PKEY),
            not_null=flag(GRID_LAYOUT.NOT_NULL),
            unique=flag(GRID_LAYOUT.UNIQUE),
            index=flag(GRID_LAYOUT.INDEX),
            option=text(GRID_LAYOUT.OPTION),
            comment=text(GRID_LAYOUT.COMMENT),
            is_common=False,
        )


def parse(parser: Parser | None, grid: "Grid | None") -> Table | None:
    """Parse ``grid`` with ``parser``; a missing parser or grid yields ``None``."""
    if parser is None:
        return None
    return parser.parse(grid)


def set_common_columns(parser: Parser | None, grid: "Grid | None") -> None:
    """Register common columns on ``parser``; a missing parser or grid is a no-op."""
    if parser is None:
        return
    parser.set_common_columns(grid)
