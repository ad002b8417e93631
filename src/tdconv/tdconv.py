"""Main TdConv class."""

import io
import logging
from pathlib import Path
from typing import TextIO

from .config import Config
from .core.exceptions import TableDefinitionError
from .formatters import BaseFormatter, create_formatter
from .models.sheet_data import WorkbookData
from .models.table import TableSet
from .parser import Parser
from .readers import create_reader
from .utils.logging_context import SheetContext, setup_logging

logger = logging.getLogger(__name__)


class TdConv:
    """Converts table definition workbooks into SQL or Go source."""

    def __init__(
        self,
        config: Config | None = None,
        parser: Parser | None = None,
        formatter: BaseFormatter | None = None,
        **kwargs,
    ):
        """Initialize TdConv.

        Args:
            config: Configuration object. If None, loads from environment.
            parser: Pre-built parser; built from the config when omitted
            formatter: Formatter to render with; picked from
                ``config.output_format`` when omitted
            **kwargs: Config overrides (e.g. ``output_format="go"``)
        """
        if config is None:
            config = Config.from_env()

        if kwargs:
            unknown = sorted(k for k in kwargs if k not in Config.model_fields)
            if unknown:
                raise TypeError(f"Unknown config options: {', '.join(unknown)}")
            config = config.model_copy(update=kwargs)

        self.config = config
        setup_logging(config.log_level, str(config.log_file) if config.log_file else None)

        self.parser = parser if parser is not None else Parser.from_config(config)
        self.formatter = (
            formatter if formatter is not None else create_formatter(config.output_format)
        )

        logger.info(f"TdConv initialized with config: {config}")

    def build_table_set(self, workbook: WorkbookData) -> TableSet:
        """Parse every table sheet of a workbook.

        The sheet named ``config.common_sheet`` is registered as common
        columns first (if the parser has none yet) and is not parsed as a
        table. Invalid sheets are logged and skipped unless ``config.strict``;
        a skipped common sheet leaves the tables without common columns.
        """
        common_name = self.config.common_sheet
        common_sheet = workbook.get_sheet_by_name(common_name) if common_name else None
        if common_sheet is not None and not self.parser.has_common_columns:
            with SheetContext(common_sheet.name):
                try:
                    self.parser.set_common_columns(common_sheet)
                except TableDefinitionError as e:
                    if self.config.strict:
                        raise
                    logger.warning(f"Skipping common sheet {common_sheet.name}: {e}")

        tables = []
        for sheet in workbook.sheets:
            if sheet is common_sheet:
                continue
            with SheetContext(sheet.name):
                try:
                    table = self.parser.parse(sheet)
                except TableDefinitionError as e:
                    if self.config.strict:
                        raise
                    logger.warning(f"Skipping sheet {sheet.name}: {e}")
                    continue
            tables.append(table)

        logger.info(f"Parsed {len(tables)} of {workbook.sheet_count} sheets from {workbook.name}")
        return TableSet(name=workbook.name, tables=tables)

    def read_table_set(self, file_path: str | Path) -> TableSet:
        """Read a workbook file and parse it into a table set."""
        workbook = create_reader(file_path).read()
        return self.build_table_set(workbook)

    def convert(self, file_path: str | Path, stream: TextIO) -> TableSet:
        """Read ``file_path`` and write the rendered tables to ``stream``."""
        table_set = self.read_table_set(file_path)
        self.formatter.write_table_set(stream, table_set)
        return table_set

    def convert_to_string(self, file_path: str | Path) -> str:
        """Read ``file_path`` and return the rendered tables."""
        buffer = io.StringIO()
        self.convert(file_path, buffer)
        return buffer.getvalue()

    def output_path(self, file_path: str | Path) -> Path:
        """Default output path next to the source, e.g. 'schema.xlsx' -> 'schema.sql'."""
        return Path(file_path).with_suffix(f".{self.formatter.extension}")
