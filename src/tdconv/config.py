"""Configuration model for tdconv."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .core.constants import PARSER_DEFAULTS


class Config(BaseModel):
    """Configuration for tdconv."""

    # Sheet layout
    table_name_row: int = Field(
        PARSER_DEFAULTS.TABLE_NAME_ROW, ge=0, description="Row (0-based) holding the table name"
    )
    table_name_column: str = Field(
        PARSER_DEFAULTS.TABLE_NAME_COLUMN, description="Column letter holding the table name"
    )
    start_row: int = Field(
        PARSER_DEFAULTS.START_ROW, ge=1, description="First row (0-based) scanned for columns"
    )
    bool_string: str = Field(
        PARSER_DEFAULTS.BOOL_STRING, description="Exact cell text treated as a true flag"
    )
    key_name_suffix: str = Field(
        PARSER_DEFAULTS.KEY_NAME_SUFFIX, description="Suffix appended to a column name for its key"
    )

    # Workbook handling
    common_sheet: str | None = Field(
        "common", description="Sheet holding the common columns (None to disable)"
    )
    strict: bool = Field(
        False, description="Raise on the first invalid sheet instead of logging and skipping it"
    )

    # Output
    output_format: Literal["sql", "go"] = Field("sql", description="Formatter to render with")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        log_file = os.getenv("TDCONV_LOG_FILE")
        common_sheet = os.getenv("TDCONV_COMMON_SHEET", "common")

        return cls(
            table_name_row=int(
                os.getenv("TDCONV_TABLE_NAME_ROW", str(PARSER_DEFAULTS.TABLE_NAME_ROW))
            ),
            table_name_column=os.getenv(
                "TDCONV_TABLE_NAME_COLUMN", PARSER_DEFAULTS.TABLE_NAME_COLUMN
            ),
            start_row=int(os.getenv("TDCONV_START_ROW", str(PARSER_DEFAULTS.START_ROW))),
            bool_string=os.getenv("TDCONV_BOOL_STRING", PARSER_DEFAULTS.BOOL_STRING),
            key_name_suffix=os.getenv("TDCONV_KEY_NAME_SUFFIX", PARSER_DEFAULTS.KEY_NAME_SUFFIX),
            common_sheet=common_sheet or None,
            strict=os.getenv("TDCONV_STRICT", "false").lower() == "true",
            output_format=os.getenv("TDCONV_OUTPUT_FORMAT", "sql").lower(),
            log_level=os.getenv("TDCONV_LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
        )
