"""Basic usage example for tdconv."""

import sys
from pathlib import Path

from tdconv import (
    Config,
    GoFormatter,
    Parser,
    SQLFormatter,
    TdConv,
    bool_string,
    start_row,
    table_name_pos,
)


def convert_example(file_path: Path):
    """Convert a workbook with the default layout to SQL."""
    converter = TdConv(Config(output_format="sql"))
    output_path = converter.output_path(file_path)

    with output_path.open("w", encoding="utf-8") as f:
        table_set = converter.convert(file_path, f)

    print(f"Wrote {len(table_set.tables)} tables to {output_path}")
    for table in table_set.tables:
        own = len(table.own_columns)
        print(f"  {table.name}: {own} columns (+{len(table.columns) - own} common)")
        if table.pkey_columns:
            print(f"    PK: {', '.join(table.pkey_columns)}")


def custom_layout_example(file_path: Path):
    """Read sheets with a custom layout and render Go structs."""
    # The start row moves first so the table name can sit below the default start row
    parser = Parser(start_row(8), table_name_pos(5, "C"), bool_string("○"))
    converter = TdConv(parser=parser, formatter=GoFormatter(header=None))

    print(converter.convert_to_string(file_path))


def single_table_example(file_path: Path):
    """Parse sheets one by one and render each table."""
    converter = TdConv(log_level="WARNING")
    table_set = converter.read_table_set(file_path)

    formatter = SQLFormatter(table_header=None)
    for table in table_set.tables:
        print(f"-- {table.name}")
        formatter.write(sys.stdout, table)
        print()


def main():
    file_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("examples/data/schema.xlsx")
    if not file_path.exists():
        print(f"Please add a table definition workbook at: {file_path}")
        return

    print("=== SQL conversion ===")
    convert_example(file_path)

    print("\n=== Custom layout ===")
    custom_layout_example(file_path)

    print("\n=== Single tables ===")
    single_table_example(file_path)


if __name__ == "__main__":
    main()
