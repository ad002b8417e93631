"""Formatters rendering parsed tables as text."""

from .base import BaseFormatter, render, render_table_set
from .go_formatter import GoFormatter, go_type
from .sql_formatter import SQLFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    SQLFormatter.extension: SQLFormatter,
    GoFormatter.extension: GoFormatter,
}


def create_formatter(output_format: str, **hooks) -> BaseFormatter:
    """Create the formatter registered for ``output_format`` ('sql' or 'go')."""
    try:
        formatter_cls = FORMATTERS[output_format.lower()]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}") from None
    return formatter_cls(**hooks)


__all__ = [
    "BaseFormatter",
    "GoFormatter",
    "SQLFormatter",
    "FORMATTERS",
    "create_formatter",
    "go_type",
    "render",
    "render_table_set",
]
