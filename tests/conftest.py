"""Pytest configuration and shared fixtures."""

import pytest
from sheet_helpers import COMMON_ROWS, SAMPLE_ROWS, sheet

from tdconv.config import Config
from tdconv.models.sheet_data import SheetData, WorkbookData
from tdconv.models.table import Column, Key, Table, TableSet
from tdconv.parser import Parser


@pytest.fixture
def parser() -> Parser:
    """Parser with default settings."""
    return Parser()


@pytest.fixture
def sample_sheet(parser: Parser) -> SheetData:
    """Three-column table definition laid out for the default parser."""
    return sheet(parser, "sample_table", *SAMPLE_ROWS, name="sample")


@pytest.fixture
def common_sheet(parser: Parser) -> SheetData:
    """Audit timestamp columns shared by every table."""
    return sheet(parser, "", *COMMON_ROWS, name="common")


@pytest.fixture
def sample_table() -> Table:
    """Parsed form of ``sample_sheet`` plus the common columns."""
    return Table(
        name="sample_table",
        columns=[
            Column(
                name="id",
                type="INT UNSIGNED",
                pkey=True,
                not_null=True,
                option="AUTO_INCREMENT",
                comment="this is id!",
            ),
            Column(name="foo", type="VARCHAR(32)", not_null=True, unique=True),
            Column(name="bar", type="VARCHAR(32)", index=True),
            Column(
                name="created_at",
                type="TIMESTAMP NULL",
                option="DEFAULT CURRENT_TIMESTAMP",
                is_common=True,
            ),
        ],
        pkey_columns=["id"],
        index_keys=[Key(name="bar_key", columns=["bar"])],
    )


@pytest.fixture
def sample_table_set(sample_table: Table) -> TableSet:
    return TableSet(name="schema", tables=[sample_table])


@pytest.fixture
def base_config() -> Config:
    """Config that does not depend on the environment."""
    return Config(log_level="WARNING", common_sheet="common")


@pytest.fixture
def sample_workbook(parser: Parser) -> WorkbookData:
    """Workbook with a common sheet, two valid tables and one without a name."""
    users = sheet(
        parser,
        "users",
        ["", "1", "id", "BIGINT", "yes", "yes", "no", "no", "AUTO_INCREMENT", ""],
        ["", "2", "email", "VARCHAR(255)", "no", "yes", "yes", "yes", "", "login"],
        name="users",
    )
    broken = sheet(parser, "", *SAMPLE_ROWS, name="broken")
    return WorkbookData(
        name="schema",
        sheets=[
            sheet(parser, "", *COMMON_ROWS, name="common"),
            users,
            broken,
            sheet(parser, "sample_table", *SAMPLE_ROWS, name="sample"),
        ],
        file_format="xlsx",
    )
