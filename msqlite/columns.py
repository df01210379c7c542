"""Column definitions: types, attributes and the column descriptor itself."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

__all__ = [
    "ColumnType",
    "Attribute",
    "Ordering",
    "Column",
    "AssignedField",
    "qualified",
    "cast",
]


class ColumnType(enum.Enum):
    """Storage class of a column."""

    INTEGER = "INTEGER"
    REAL = "REAL"
    TEXT = "TEXT"
    BLOB = "BLOB"

    def sql_type(self) -> str:
        """Return the SQL type name used in a column definition."""
        if self is ColumnType.BLOB:
            raise TypeError("BLOB columns have no SQL type for table definitions")
        return self.value

    @property
    def python_type(self) -> type:
        """Python type that values of this column are read as."""
        return _PYTHON_TYPES[self]


_PYTHON_TYPES = {
    ColumnType.INTEGER: int,
    ColumnType.REAL: float,
    ColumnType.TEXT: str,
    ColumnType.BLOB: bytes,
}


class Attribute(enum.IntFlag):
    """Column constraints that can be combined with ``|``."""

    NONE = 0x00
    PRIMARY_KEY = 0x01
    NOT_NULL = 0x02
    UNIQUE = 0x04
    AUTOINCREMENT = 0x08


class Ordering(enum.Enum):
    """Sort direction of an ORDER BY clause."""

    ASC = "ASC"
    DESC = "DESC"


_NO_DEFAULT: Any = object()

_ATTRIBUTE_SQL = (
    (Attribute.PRIMARY_KEY, " PRIMARY KEY"),
    (Attribute.AUTOINCREMENT, " AUTOINCREMENT"),
    (Attribute.NOT_NULL, " NOT NULL"),
    (Attribute.UNIQUE, " UNIQUE"),
)


class Column:
    """A named, typed table column with optional default value and attributes."""

    def __init__(
        self,
        name: str = "",
        column_type: ColumnType = ColumnType.INTEGER,
        default: Any = _NO_DEFAULT,
        attributes: Attribute | int = Attribute.NONE,
    ) -> None:
        self.name = name
        self.column_type = ColumnType(column_type)
        self._has_default = default is not _NO_DEFAULT
        self.default = default if self._has_default else None
        self.attributes = Attribute(attributes)

    def has_default(self) -> bool:
        """Whether a default value was given for the column."""
        return self._has_default

    def sql_type(self) -> str:
        """SQL type name of the column."""
        return self.column_type.sql_type()

    def sql_attributes(self) -> str:
        """SQL constraint text for the column's attributes, each with a leading space."""
        return "".join(text for flag, text in _ATTRIBUTE_SQL if self.attributes & flag)

    def primary_key(self) -> Column:
        """Mark the column as primary key and return it."""
        self.attributes |= Attribute.PRIMARY_KEY
        return self

    def not_null(self) -> Column:
        """Mark the column as NOT NULL and return it."""
        self.attributes |= Attribute.NOT_NULL
        return self

    def unique(self) -> Column:
        """Mark the column as UNIQUE and return it."""
        self.attributes |= Attribute.UNIQUE
        return self

    def autoincrement(self) -> Column:
        """Mark the column as AUTOINCREMENT and return it."""
        self.attributes |= Attribute.AUTOINCREMENT
        return self

    def assign(self, value: Any) -> AssignedField:
        """Pair the column with a value."""
        return AssignedField(self, value)

    def to_string(self) -> str:
        """The column name as used in SQL text."""
        return self.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        parts = [repr(self.name), self.column_type.name]
        if self._has_default:
            parts.append(f"default={self.default!r}")
        if self.attributes:
            parts.append(f"attributes={self.attributes!r}")
        return f"Column({', '.join(parts)})"


@dataclass(frozen=True)
class AssignedField:
    """A column together with the value assigned to it."""

    field: Column
    value: Any


def qualified(column: Column, *args: str) -> Column:
    """Return a column whose name is prefixed with ``table`` or ``schema, table``.

    The result keeps the column type but no default or attributes.
    """
    if len(args) not in (1, 2):
        raise TypeError("qualified() takes a table name, or a schema and a table name")
    return Column(".".join((*args, column.name)), column.column_type)


def cast(column: Column, column_type: ColumnType) -> Column:
    """Return a column with the same name but a different type."""
    return Column(column.name, column_type)