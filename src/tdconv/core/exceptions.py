"""Custom exceptions for tdconv."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of table definition errors, each with a stable lead message."""

    INVALID_TABLE_NAME_POSITION = "Table name row must be smaller than the start row"
    INVALID_COLUMN_ADDRESS = "Unable to convert column string"
    INVALID_START_ROW = "Start row must be greater than the table name row"
    INVALID_KEY_NAMING_FUNCTION = "Key name function must not be None"
    COMMON_COLUMNS_ALREADY_SET = "The common columns are already set"
    COMMON_COLUMN_MUST_NOT_BE_PRIMARY_KEY = "The common column must not be PK"
    COMMON_COLUMN_MUST_NOT_HAVE_INDEX = "The common column must not have index"
    TABLE_NAME_REQUIRED = "Table name is required"
    NO_COLUMNS = "The length of table columns must not be zero"

    @property
    def message(self) -> str:
        return self.value


class TdconvError(Exception):
    """Base exception for all tdconv errors."""

    pass


class TableDefinitionError(TdconvError):
    """An error identified by an ErrorKind.

    ``str(error)`` is the kind's lead message, followed by ``": detail"``
    when a detail is given. Callers should match on ``kind`` or on the lead
    message only.
    """

    def __init__(self, kind: ErrorKind, detail: str | None = None):
        self.kind = kind
        self.detail = detail
        message = kind.message if not detail else f"{kind.message}: {detail}"
        super().__init__(message)


class ConfigurationError(TableDefinitionError):
    """Raised when parser configuration is invalid."""

    pass


class ValidationError(TableDefinitionError):
    """Raised when a grid does not hold a valid table definition."""

    pass


class ReaderError(TdconvError):
    """Raised when a source file cannot be read into sheets."""

    pass


class UnsupportedFileError(ReaderError):
    """Raised when no reader handles the given file type."""

    pass
