"""Builders for the field lists, placeholders and conditions of SQL statements."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from msqlite.columns import Column

__all__ = [
    "to_string",
    "unpack_field_names",
    "unpack_field_names_opt",
    "unpack_field_placeholders",
    "unpack_field_placeholders_opt",
    "unpack_fields_and_placeholders",
    "unpack_fields_and_placeholders_opt",
    "unpack_field_definitions",
    "WhereStatement",
    "where_eq",
]


def to_string(item: Any) -> str:
    """Return the SQL text of a string, a column or an object with ``to_string()``."""
    if isinstance(item, str):
        return item
    if isinstance(item, Column):
        return item.name
    method = getattr(item, "to_string", None)
    if callable(method):
        return method()
    raise TypeError(f"cannot format {type(item).__name__!r} as SQL text")


def _paired(fields: Iterable[Any], values: Iterable[Any]) -> list[tuple[int, Any]]:
    """Numbered fields whose value is set, numbering from 1 over all fields."""
    return [
        (number, field)
        for number, (field, value) in enumerate(zip(fields, values, strict=True), start=1)
        if value is not None
    ]


def unpack_field_names(fields: Iterable[Any]) -> str:
    """Comma-separated names of the fields."""
    return ",".join(to_string(field) for field in fields)


def unpack_field_names_opt(fields: Iterable[Any], values: Iterable[Any]) -> str:
    """Comma-separated names of the fields whose value is not None."""
    return ",".join(to_string(field) for _, field in _paired(fields, values))


def unpack_field_placeholders(fields: Iterable[Any]) -> str:
    """Numbered placeholders ``?1,?2,...``, one for each field."""
    return ",".join(f"?{number}" for number, _ in enumerate(fields, start=1))


def unpack_field_placeholders_opt(fields: Iterable[Any], values: Iterable[Any]) -> str:
    """Numbered placeholders for the fields whose value is not None.

    Each placeholder keeps the number of its field's position.
    """
    return ",".join(f"?{number}" for number, _ in _paired(fields, values))


def unpack_fields_and_placeholders(fields: Iterable[Any]) -> str:
    """Assignments ``name = ?N`` for each field, comma separated."""
    return ",".join(
        f"{to_string(field)} = ?{number}" for number, field in enumerate(fields, start=1)
    )


def unpack_fields_and_placeholders_opt(fields: Iterable[Any], values: Iterable[Any]) -> str:
    """Assignments ``name = ?N`` for the fields whose value is not None."""
    return ",".join(
        f"{to_string(field)} = ?{number}" for number, field in _paired(fields, values)
    )


def unpack_field_definitions(fields: Iterable[Column]) -> str:
    """Column definitions as used in a CREATE TABLE statement."""
    return ", ".join(
        f"{to_string(column)} {column.sql_type()}{column.sql_attributes()}" for column in fields
    )


@dataclass(frozen=True)
class WhereStatement:
    """The text of a WHERE condition using named parameters."""

    text: str

    @classmethod
    def compare(cls, lhs: Any, op: str, rhs: str) -> WhereStatement:
        """Condition comparing ``lhs`` with the named parameter ``rhs``."""
        return cls(f"{to_string(lhs)} {op} :{rhs}")

    def __and__(self, other: WhereStatement) -> WhereStatement:
        if not isinstance(other, WhereStatement):
            return NotImplemented
        return WhereStatement(f"{self.text} AND {other.text}")

    def __str__(self) -> str:
        return self.text


def where_eq(column: Any, name: str) -> WhereStatement:
    """Condition that the column equals the named parameter ``name``."""
    return WhereStatement.compare(column, "=", name)