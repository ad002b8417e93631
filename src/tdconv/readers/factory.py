"""Pick a reader by file extension."""

from pathlib import Path

from ..core.exceptions import UnsupportedFileError
from .base_reader import BaseReader
from .csv_reader import CSVReader
from .excel_reader import ExcelReader


class ReaderFactory:
    """Maps file extensions to reader classes."""

    def __init__(self):
        self._readers: dict[str, type[BaseReader]] = {
            ".xlsx": ExcelReader,
            ".xlsm": ExcelReader,
            ".csv": CSVReader,
        }

    def register(self, extension: str, reader_cls: type[BaseReader]) -> None:
        """Register (or replace) the reader for an extension such as '.tsv'."""
        if not extension.startswith("."):
            extension = "." + extension
        self._readers[extension.lower()] = reader_cls

    def supported_extensions(self) -> list[str]:
        return sorted(self._readers)

    def create_reader(self, file_path: str | Path) -> BaseReader:
        path = Path(file_path)
        reader_cls = self._readers.get(path.suffix.lower())
        if reader_cls is None:
            raise UnsupportedFileError(
                f"Unsupported file type '{path.suffix}' "
                f"(supported: {', '.join(self.supported_extensions())})"
            )
        return reader_cls(path)


_factory = ReaderFactory()


def get_factory() -> ReaderFactory:
    """Get the process-wide reader factory."""
    return _factory


def create_reader(file_path: str | Path) -> BaseReader:
    """Create a reader for ``file_path`` using the default factory."""
    return _factory.create_reader(file_path)


def register_custom_reader(extension: str, reader_cls: type[BaseReader]) -> None:
    """Register a reader class on the default factory."""
    _factory.register(extension, reader_cls)
