"""Utility functions for tdconv."""

from .excel_utils import cell_address, column_index_from_letter, get_column_letter
from .logging_context import get_contextual_logger, setup_logging
from .naming import to_camel, to_go_name, to_lower_camel

__all__ = [
    "cell_address",
    "column_index_from_letter",
    "get_column_letter",
    "get_contextual_logger",
    "setup_logging",
    "to_camel",
    "to_go_name",
    "to_lower_camel",
]
