"""Context-aware logging utilities for tdconv."""

import contextvars
import logging
from collections.abc import Mapping
from typing import Any

# Context variables for tracking what is being converted right now
current_sheet = contextvars.ContextVar[str | None]("current_sheet", default=None)
current_table = contextvars.ContextVar[str | None]("current_table", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with the current sheet/table/operation."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        sheet_name = current_sheet.get()
        table_name = current_table.get()
        operation = current_operation.get()

        extra = dict(kwargs.get("extra", {}))
        context_parts = []
        if sheet_name:
            extra["sheet"] = sheet_name
            context_parts.append(f"sheet={sheet_name}")
        if table_name:
            extra["table"] = table_name
            context_parts.append(f"table={table_name}")
        if operation:
            extra["operation"] = operation
            context_parts.append(f"op={operation}")

        kwargs = {**kwargs, "extra": extra}
        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class _VarContext:
    """Sets a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str | None):
        self.value = value
        self.token = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)
            self.token = None


class SheetContext(_VarContext):
    """Context manager for tracking the sheet being converted."""

    var = current_sheet


class TableContext(_VarContext):
    """Context manager for tracking the table being parsed or rendered."""

    var = current_table


class OperationContext(_VarContext):
    """Context manager for tracking the current operation."""

    var = current_operation


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging once at application startup."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file,
    )
