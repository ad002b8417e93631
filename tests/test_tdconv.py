"""Tests for the TdConv facade."""

import io
import logging

import openpyxl
import pytest
from sheet_helpers import COMMON_ROWS, SAMPLE_ROWS, row, sheet

from tdconv import TdConv
from tdconv.core.exceptions import ErrorKind, ValidationError
from tdconv.formatters import GoFormatter, SQLFormatter
from tdconv.models.sheet_data import WorkbookData
from tdconv.parser import Parser, start_row


@pytest.fixture
def workbook_file(tmp_path):
    """An xlsx file holding a common sheet and two table sheets."""
    header = [[], ["", "users"], [], []]
    workbook = openpyxl.Workbook()
    workbook.remove(workbook.active)
    for title, rows in {
        "users": header + SAMPLE_ROWS,
        "common": [[], [], [], [], *COMMON_ROWS],
        "orders": [[], ["", "orders"], [], [], ["", 1, "order_id", "BIGINT", "yes", "yes"]],
    }.items():
        worksheet = workbook.create_sheet(title)
        for values in rows:
            worksheet.append(values)
    path = tmp_path / "schema.xlsx"
    workbook.save(path)
    return path


@pytest.fixture
def invalid_common_workbook(parser):
    """Workbook whose common sheet flags a column as primary key."""
    return WorkbookData(
        name="schema",
        file_format="xlsx",
        sheets=[
            sheet(parser, "", row("1", "tenant_id", "BIGINT", pk="yes"), name="common"),
            sheet(
                parser,
                "users",
                row("1", "id", "BIGINT", pk="yes"),
                row("2", "email", "VARCHAR(255)"),
                name="users",
            ),
        ],
    )


class TestTdConvInit:
    """Test TdConv construction."""

    def test_defaults_from_config(self, base_config):
        converter = TdConv(base_config)
        assert isinstance(converter.formatter, SQLFormatter)
        assert converter.parser.start_row == base_config.start_row

    def test_overrides(self, base_config):
        converter = TdConv(base_config, output_format="go", bool_string="OK")
        assert isinstance(converter.formatter, GoFormatter)
        assert converter.parser.bool_string == "OK"
        assert base_config.output_format == "sql"

    def test_unknown_override(self, base_config):
        with pytest.raises(TypeError, match="Unknown config options: nope"):
            TdConv(base_config, nope=1)

    def test_explicit_parser_and_formatter(self, base_config):
        parser = Parser(start_row(6))
        formatter = GoFormatter()
        converter = TdConv(base_config, parser=parser, formatter=formatter)
        assert converter.parser is parser
        assert converter.formatter is formatter

    def test_loads_env_without_config(self, monkeypatch):
        monkeypatch.setenv("TDCONV_OUTPUT_FORMAT", "go")
        monkeypatch.setenv("TDCONV_LOG_LEVEL", "WARNING")
        assert isinstance(TdConv().formatter, GoFormatter)


class TestBuildTableSet:
    """Test parsing a whole workbook."""

    def test_skips_invalid_sheets(self, base_config, sample_workbook, caplog):
        converter = TdConv(base_config)
        with caplog.at_level(logging.WARNING, logger="tdconv.tdconv"):
            table_set = converter.build_table_set(sample_workbook)

        assert table_set.name == "schema"
        assert table_set.get_table_names() == ["users", "sample_table"]
        assert "Skipping sheet broken" in caplog.text
        assert "Table name is required" in caplog.text

    def test_common_columns_appended(self, base_config, sample_workbook):
        table_set = TdConv(base_config).build_table_set(sample_workbook)
        users = table_set.get_table("users")

        assert [c.name for c in users.columns] == [
            "id",
            "email",
            "created_at",
            "updated_at",
            "deleted_at",
        ]
        assert [c.is_common for c in users.columns] == [False, False, True, True, True]
        assert [k.name for k in users.index_keys] == ["email_key"]

    def test_strict_mode(self, base_config, sample_workbook):
        converter = TdConv(base_config, strict=True)
        with pytest.raises(ValidationError) as exc_info:
            converter.build_table_set(sample_workbook)
        assert exc_info.value.kind is ErrorKind.TABLE_NAME_REQUIRED

    def test_without_common_sheet(self, base_config, sample_workbook):
        converter = TdConv(base_config, common_sheet=None, strict=False)
        table_set = converter.build_table_set(sample_workbook)
        # The common sheet has no table name, so it is skipped like any invalid sheet
        assert table_set.get_table_names() == ["users", "sample_table"]
        assert len(table_set.get_table("users").columns) == 2

    def test_invalid_common_sheet_skipped(self, base_config, invalid_common_workbook, caplog):
        """Test a common sheet failing validation is skipped like any other sheet."""
        converter = TdConv(base_config)
        with caplog.at_level(logging.WARNING, logger="tdconv.tdconv"):
            table_set = converter.build_table_set(invalid_common_workbook)

        assert table_set.get_table_names() == ["users"]
        assert [c.name for c in table_set.get_table("users").columns] == ["id", "email"]
        assert not converter.parser.has_common_columns
        assert "Skipping common sheet common: The common column must not be PK" in caplog.text

    def test_invalid_common_sheet_strict(self, base_config, invalid_common_workbook):
        converter = TdConv(base_config, strict=True)
        with pytest.raises(ValidationError) as exc_info:
            converter.build_table_set(invalid_common_workbook)
        assert exc_info.value.kind is ErrorKind.COMMON_COLUMN_MUST_NOT_BE_PRIMARY_KEY

    def test_reused_converter_keeps_common_columns(self, base_config, sample_workbook):
        converter = TdConv(base_config)
        first = converter.build_table_set(sample_workbook)
        second = converter.build_table_set(sample_workbook)
        assert first == second


class TestConvert:
    """Test end-to-end conversion from a workbook file."""

    def test_convert_sql(self, base_config, workbook_file):
        output = TdConv(base_config).convert_to_string(workbook_file)

        assert output.count("# SQL generated by tdconv. DO NOT EDIT.") == 2
        assert "CREATE TABLE `users` (" in output
        assert "CREATE TABLE `orders` (" in output
        assert "CREATE TABLE `common`" not in output
        assert "    `updated_at` TIMESTAMP NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE" in output
        assert "    PRIMARY KEY (order_id)" in output
        assert output.index("`users`") < output.index("`orders`")

    def test_convert_go(self, base_config, workbook_file):
        stream = io.StringIO()
        table_set = TdConv(base_config, output_format="go").convert(workbook_file, stream)

        assert table_set.get_table_names() == ["users", "orders"]
        assert "type orders struct {\n\tOrderID *int\n\tCreatedAt *time.Time\n" in stream.getvalue()

    def test_output_path(self, base_config, workbook_file):
        converter = TdConv(base_config, output_format="go")
        assert converter.output_path(workbook_file) == workbook_file.with_suffix(".go")
