"""The CREATE TABLE statement and the table constraints it can carry."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Any

from msqlite.columns import Column
from msqlite.formatters import to_string, unpack_field_definitions, unpack_field_names
from msqlite.statements import StatementFormatter

__all__ = [
    "OnConflict",
    "ForeignKeyAction",
    "ForeignKey",
    "UniqueConstraint",
    "PrimaryKeyConstraint",
    "CreateTable",
]


def _field_list(args: tuple[Any, ...]) -> list[Any]:
    """Fields given either one by one or as a single list or tuple."""
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return list(args[0])
    return list(args)


def _as_fields(fields: Any) -> list[Any]:
    if isinstance(fields, (Column, str)):
        return [fields]
    return list(fields)


def _key_statement(name: str, keyword: str, args: tuple[Any, ...]) -> str:
    return f"CONSTRAINT {name} {keyword} ({unpack_field_names(_field_list(args))})"


class OnConflict(enum.Enum):
    """Conflict clause appended to a UNIQUE or PRIMARY KEY table constraint."""

    ROLLBACK = " ON CONFLICT ROLLBACK"
    ABORT = " ON CONFLICT ABORT"
    FAIL = " ON CONFLICT FAIL"
    IGNORE = " ON CONFLICT IGNORE"
    REPLACE = " ON CONFLICT REPLACE"

    def to_string(self) -> str:
        """The clause text, with a leading space."""
        return self.value


class ForeignKeyAction(enum.Enum):
    """Action taken on the referencing rows when a referenced row changes."""

    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"
    CASCADE = "CASCADE"
    RESTRICT = "RESTRICT"
    NO_ACTION = "NO ACTION"


class ForeignKey:
    """A named FOREIGN KEY table constraint."""

    def __init__(
        self, name: str, fields: Iterable[Any], ref_table: str, ref_fields: Iterable[Any]
    ) -> None:
        self._statement = (
            f"CONSTRAINT {name} FOREIGN KEY({unpack_field_names(_as_fields(fields))})"
            f" REFERENCES {ref_table}({unpack_field_names(_as_fields(ref_fields))})"
        )
        self._actions = ""

    def on_delete(self, action: ForeignKeyAction) -> ForeignKey:
        """Append an ON DELETE action and return the constraint."""
        self._actions += f" ON DELETE {ForeignKeyAction(action).value}"
        return self

    def on_update(self, action: ForeignKeyAction) -> ForeignKey:
        """Append an ON UPDATE action and return the constraint."""
        self._actions += f" ON UPDATE {ForeignKeyAction(action).value}"
        return self

    def to_string(self) -> str:
        """The constraint's SQL text."""
        return self._statement + self._actions

    def __str__(self) -> str:
        return self.to_string()


class UniqueConstraint:
    """A named UNIQUE table constraint over one or more fields."""

    def __init__(self, name: str, *args: Any) -> None:
        self._statement = _key_statement(name, "UNIQUE", args)
        self._conflict = ""

    def on_conflict(self, action: OnConflict) -> UniqueConstraint:
        """Set the conflict clause, replacing any earlier one, and return the constraint."""
        self._conflict = OnConflict(action).value
        return self

    def to_string(self) -> str:
        """The constraint's SQL text."""
        return self._statement + self._conflict

    def __str__(self) -> str:
        return self.to_string()


class PrimaryKeyConstraint:
    """A named PRIMARY KEY table constraint over one or more fields."""

    def __init__(self, name: str, *args: Any) -> None:
        self._statement = _key_statement(name, "PRIMARY KEY", args)
        self._conflict = ""

    def on_conflict(self, action: OnConflict) -> PrimaryKeyConstraint:
        """Set the conflict clause, replacing any earlier one, and return the constraint."""
        self._conflict = OnConflict(action).value
        return self

    def to_string(self) -> str:
        """The constraint's SQL text."""
        return self._statement + self._conflict

    def __str__(self) -> str:
        return self.to_string()


class CreateTable(StatementFormatter):
    """A CREATE TABLE statement with an optional table constraint."""

    def __init__(self, table: str, *args: Column) -> None:
        self.table = table
        self._definitions = unpack_field_definitions(_field_list(args))
        self._constraint = ""

    def set_constraint(self, constraint: Any) -> CreateTable:
        """Set the table constraint, replacing any earlier one, and return the statement."""
        self._constraint = ", " + to_string(constraint)
        return self

    def string(self) -> str:
        return f"CREATE TABLE {self.table} ({self._definitions}{self._constraint})"