"""Formatters producing the text of SELECT, INSERT, UPDATE, DELETE and CREATE INDEX."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from msqlite.columns import Column, Ordering
from msqlite.formatters import (
    unpack_field_names,
    unpack_field_placeholders,
    unpack_fields_and_placeholders,
    unpack_fields_and_placeholders_opt,
)

__all__ = [
    "StatementFormatter",
    "Select",
    "CreateIndex",
    "Insert",
    "Delete",
    "UpdateOrAction",
    "Update",
]


def _fields(args: tuple[Any, ...]) -> list[Any]:
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return list(args[0])
    return list(args)


def _where_clause(condition: str) -> str:
    return f" WHERE {condition}" if condition else ""


class StatementFormatter(ABC):
    """Something that renders as an SQL statement."""

    @abstractmethod
    def string(self) -> str:
        """The SQL text of the statement."""

    def __str__(self) -> str:
        return self.string()


class Select(StatementFormatter):
    """A SELECT statement over one table."""

    def __init__(self, table: str, *args: Any) -> None:
        self._op = "SELECT "
        self._base = f"{unpack_field_names(_fields(args))} FROM {table}"
        self._where = ""
        self._group_by = ""
        self._order_by = ""

    def distinct(self) -> Select:
        self._op = "SELECT DISTINCT "
        return self

    def group_by(self, *args: Any) -> Select:
        self._group_by = " GROUP BY " + unpack_field_names(_fields(args))
        return self

    def order_by(self, *args: Any) -> Select:
        """Set the ORDER BY fields; with no fields the clause is removed."""
        fields = _fields(args)
        self._order_by = " ORDER BY " + unpack_field_names(fields) if fields else ""
        return self

    def ordered(self, ordering: Ordering) -> Select:
        """Append a sort direction to the ORDER BY clause."""
        if not self._order_by:
            raise RuntimeError("ordering given for an empty ORDER BY clause")
        self._order_by += " " + Ordering(ordering).value
        return self

    def where(self, condition: str) -> Select:
        self._where = _where_clause(condition)
        return self

    def join(self, table: str, field1: Column, field2: Column) -> Select:
        self._base += f" JOIN {table} ON {field1.name} = {field2.name}"
        return self

    def string(self) -> str:
        return self._op + self._base + self._where + self._group_by + self._order_by


class CreateIndex(StatementFormatter):
    """A CREATE [UNIQUE] INDEX statement."""

    def __init__(self, name: str, table: str, *args: Any, unique: bool = False) -> None:
        self.action = "CREATE UNIQUE INDEX" if unique else "CREATE INDEX"
        self.name = name
        self.table = table
        self._fields = unpack_field_names(_fields(args))

    def string(self) -> str:
        return f"{self.action} {self.name} ON {self.table}({self._fields})"


class Insert(StatementFormatter):
    """An INSERT statement with numbered placeholders for every field."""

    def __init__(self, table: str, *args: Any) -> None:
        fields = _fields(args)
        self._action = "INSERT "
        self._body = (
            f"INTO {table}({unpack_field_names(fields)}) "
            f"VALUES({unpack_field_placeholders(fields)})"
        )

    def do_replace(self) -> Insert:
        self._action = "INSERT OR REPLACE "
        return self

    def do_ignore_on_conflict(self) -> Insert:
        self._action = "INSERT OR IGNORE "
        return self

    def string(self) -> str:
        return self._action + self._body


class Delete(StatementFormatter):
    """A DELETE statement."""

    def __init__(self, table: str) -> None:
        self._action = f"DELETE FROM {table}"
        self._where = ""

    def where(self, condition: str) -> Delete:
        self._where = _where_clause(condition)
        return self

    def string(self) -> str:
        return self._action + self._where


class UpdateOrAction(enum.Enum):
    """Conflict resolution of an UPDATE statement."""

    ROLLBACK = "ROLLBACK"
    ABORT = "ABORT"
    REPLACE = "REPLACE"
    FAIL = "FAIL"
    IGNORE = "IGNORE"


class Update(StatementFormatter):
    """An UPDATE statement; with ``values`` only fields whose value is set are assigned."""

    def __init__(
        self, table: str, fields: Sequence[Any], values: Sequence[Any] | None = None
    ) -> None:
        if values is None:
            assignments = unpack_fields_and_placeholders(fields)
        else:
            assignments = unpack_fields_and_placeholders_opt(fields, values)
        self._action = "UPDATE "
        self._definition = f"{table} SET {assignments}"
        self._where = ""

    def where(self, condition: str) -> Update:
        self._where = _where_clause(condition)
        return self

    def or_action(self, action: UpdateOrAction) -> Update:
        self._action = f"UPDATE OR {UpdateOrAction(action).value} "
        return self

    def string(self) -> str:
        return self._action + self._definition + self._where