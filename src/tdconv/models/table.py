"""Table definition models."""

from pydantic import BaseModel, ConfigDict, Field


class Column(BaseModel):
    """One column of a table definition."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Column name")
    type: str = Field("", description="Raw column type, passed through untouched")
    pkey: bool = Field(False, description="Part of the primary key")
    not_null: bool = Field(False, description="NOT NULL constraint")
    unique: bool = Field(False, description="Single-column UNIQUE constraint")
    index: bool = Field(False, description="Column gets its own key")
    option: str = Field("", description="Free-text DDL fragment (default, auto increment, ...)")
    comment: str = Field("", description="Column comment")
    is_common: bool = Field(False, description="Contributed by the shared common columns")


class Key(BaseModel):
    """A named group of columns backing a UNIQUE or INDEX clause."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Key name")
    columns: list[str] = Field(..., min_length=1, description="Column names in key order")


class Table(BaseModel):
    """One parsed table definition."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., min_length=1, description="Table name")
    columns: list[Column] = Field(
        default_factory=list, description="Own columns followed by common columns"
    )
    pkey_columns: list[str] = Field(
        default_factory=list, description="Primary key column names in column order"
    )
    unique_keys: list[Key] = Field(default_factory=list, description="Composite unique keys")
    index_keys: list[Key] = Field(default_factory=list, description="Index keys")

    def get_column(self, name: str) -> Column | None:
        """Get the first column with the given name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    @property
    def own_columns(self) -> list[Column]:
        """Columns defined by the table itself."""
        return [c for c in self.columns if not c.is_common]


class TableSet(BaseModel):
    """A group of tables rendered into one output."""

    model_config = ConfigDict(strict=True)

    name: str = Field("", description="Name of the set (usually the source file stem)")
    tables: list[Table] = Field(default_factory=list, description="Tables in source order")

    def get_table(self, name: str) -> Table | None:
        """Get table by name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    def get_table_names(self) -> list[str]:
        """Get list of all table names."""
        return [table.name for table in self.tables]
