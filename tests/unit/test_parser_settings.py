"""Tests for parser construction and option validation."""

import pytest

from tdconv.config import Config
from tdconv.core.exceptions import ConfigurationError, ErrorKind
from tdconv.parser import (
    Parser,
    ParserSettings,
    bool_string,
    default_key_name,
    key_name_func,
    start_row,
    table_name_pos,
)


def lead(error: Exception) -> str:
    """Message up to the detail separator."""
    return str(error).split(":", 1)[0]


class TestDefaults:
    """Test the default parser settings."""

    def test_default_parser(self):
        """Test that a parser without options uses the defaults."""
        parser = Parser()
        assert parser.table_name_row == 1
        assert parser.table_name_column == 1
        assert parser.start_row == 4
        assert parser.bool_string == "yes"
        assert parser.key_name_func("bar") == "bar_key"
        assert parser.common_columns == ()
        assert not parser.has_common_columns

    def test_default_key_name(self):
        assert default_key_name("user_id") == "user_id_key"

    def test_name_row_above_start_row(self):
        settings = ParserSettings()
        assert settings.table_name_row < settings.start_row


class TestOptions:
    """Test each option on its own."""

    def test_table_name_pos(self):
        parser = Parser(table_name_pos(0, "C"))
        assert parser.table_name_row == 0
        assert parser.table_name_column == 2

    def test_table_name_pos_lower_case_column(self):
        assert Parser(table_name_pos(0, "aa")).table_name_column == 26

    def test_start_row(self):
        assert Parser(start_row(5)).start_row == 5

    def test_bool_string(self):
        assert Parser(bool_string("OK")).bool_string == "OK"

    def test_key_name_func(self):
        parser = Parser(key_name_func(lambda s: "key_" + s))
        assert parser.key_name_func("bar") == "key_bar"


class TestOptionFailures:
    """Test that invalid options fail at the moment they are applied."""

    @pytest.mark.parametrize(
        "options, kind",
        [
            ([table_name_pos(5, "C")], ErrorKind.INVALID_TABLE_NAME_POSITION),
            ([table_name_pos(-1, "C")], ErrorKind.INVALID_TABLE_NAME_POSITION),
            ([table_name_pos(1, "!")], ErrorKind.INVALID_COLUMN_ADDRESS),
            ([table_name_pos(1, "")], ErrorKind.INVALID_COLUMN_ADDRESS),
            ([start_row(0)], ErrorKind.INVALID_START_ROW),
            ([start_row(1)], ErrorKind.INVALID_START_ROW),
            ([key_name_func(None)], ErrorKind.INVALID_KEY_NAMING_FUNCTION),
            ([key_name_func("not callable")], ErrorKind.INVALID_KEY_NAMING_FUNCTION),
        ],
    )
    def test_invalid_option(self, options, kind):
        with pytest.raises(ConfigurationError) as exc_info:
            Parser(*options)
        assert exc_info.value.kind is kind
        assert lead(exc_info.value) == kind.message

    def test_messages(self):
        """Test the stable lead messages callers match on."""
        with pytest.raises(
            ConfigurationError, match="^Table name row must be smaller than the start row"
        ):
            Parser(table_name_pos(5, "C"))
        with pytest.raises(ConfigurationError, match="^Unable to convert column string"):
            Parser(table_name_pos(1, "!"))
        with pytest.raises(
            ConfigurationError, match="^Start row must be greater than the table name row"
        ):
            Parser(start_row(0))
        with pytest.raises(ConfigurationError, match="^Key name function must not be None"):
            Parser(key_name_func(None))

    def test_name_pos_then_start_row(self):
        """Moving the name row down first makes the start row the failing option."""
        with pytest.raises(ConfigurationError) as exc_info:
            Parser(table_name_pos(3, "C"), start_row(2))
        assert exc_info.value.kind is ErrorKind.INVALID_START_ROW

    def test_start_row_then_name_pos(self):
        """Moving the start row up first makes the name position the failing option."""
        with pytest.raises(ConfigurationError) as exc_info:
            Parser(start_row(2), table_name_pos(3, "C"))
        assert exc_info.value.kind is ErrorKind.INVALID_TABLE_NAME_POSITION

    def test_failed_option_leaves_settings_unchanged(self):
        settings = ParserSettings()
        with pytest.raises(ConfigurationError):
            settings.set_table_name_pos(0, "!")
        assert settings.table_name_row == 1
        assert settings.table_name_column == 1

    def test_order_matters_for_valid_moves(self):
        """Moving both rows down works when the start row moves first."""
        parser = Parser(start_row(10), table_name_pos(8, "A"))
        assert (parser.table_name_row, parser.start_row) == (8, 10)

        with pytest.raises(ConfigurationError):
            Parser(table_name_pos(8, "A"), start_row(10))

    def test_column_error_chains_value_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Parser(table_name_pos(0, "1A"))
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.detail


class TestFromConfig:
    """Test building a parser from Config."""

    def test_defaults(self):
        parser = Parser.from_config(Config())
        assert parser.table_name_row == 1
        assert parser.start_row == 4
        assert parser.key_name_func("bar") == "bar_key"

    def test_moves_both_rows_down(self):
        config = Config(table_name_row=6, table_name_column="D", start_row=8)
        parser = Parser.from_config(config)
        assert (parser.table_name_row, parser.table_name_column, parser.start_row) == (6, 3, 8)

    def test_moves_both_rows_up(self):
        parser = Parser.from_config(Config(table_name_row=0, start_row=2))
        assert (parser.table_name_row, parser.start_row) == (0, 2)

    def test_custom_flag_and_suffix(self):
        parser = Parser.from_config(Config(bool_string="x", key_name_suffix="_idx"))
        assert parser.bool_string == "x"
        assert parser.key_name_func("bar") == "bar_idx"

    def test_invalid_combination(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Parser.from_config(Config(table_name_row=3, start_row=2))
        assert exc_info.value.kind is ErrorKind.INVALID_START_ROW
