"""Aggregate functions and comparison snippets for building SQL conditions."""

from __future__ import annotations

from typing import Any

from msqlite.columns import Column
from msqlite.formatters import to_string

__all__ = [
    "count",
    "sum_",
    "avg",
    "min_",
    "max_",
    "eq",
    "ne",
    "lt",
    "gt",
    "le",
    "ge",
    "between",
    "like",
    "and_",
    "or_",
    "not_",
    "distinct",
    "Eq",
    "make_eq",
]


def _wrapped(function: str, column: Column) -> Column:
    return Column(f"{function}({column.name})", column.column_type)


def count(column: Column) -> Column:
    """Column expression ``COUNT(name)``."""
    return _wrapped("COUNT", column)


def sum_(column: Column) -> Column:
    """Column expression ``SUM(name)``."""
    return _wrapped("SUM", column)


def avg(column: Column) -> Column:
    """Column expression ``AVG(name)``."""
    return _wrapped("AVG", column)


def min_(column: Column) -> Column:
    """Column expression ``MIN(name)``."""
    return _wrapped("MIN", column)


def max_(column: Column) -> Column:
    """Column expression ``MAX(name)``."""
    return _wrapped("MAX", column)


def _compare(column: Column, op: str) -> str:
    return f"{column.name} {op} ?"


def eq(column: Column) -> str:
    """Condition ``name = ?``."""
    return _compare(column, "=")


def ne(column: Column) -> str:
    """Condition ``name <> ?``."""
    return _compare(column, "<>")


def lt(column: Column) -> str:
    """Condition ``name < ?``."""
    return _compare(column, "<")


def gt(column: Column) -> str:
    """Condition ``name > ?``."""
    return _compare(column, ">")


def le(column: Column) -> str:
    """Condition ``name <= ?``."""
    return _compare(column, "<=")


def ge(column: Column) -> str:
    """Condition ``name >= ?``."""
    return _compare(column, ">=")


def between(column: Column) -> str:
    """Condition ``name BETWEEN ?``."""
    return _compare(column, "BETWEEN")


def like(column: Column) -> str:
    """Condition ``name LIKE ?``."""
    return _compare(column, "LIKE")


def _joined(separator: str, items: tuple[Any, ...]) -> str:
    return "(" + separator.join(to_string(item) for item in items) + ")"


def and_(*args: Any) -> str:
    """Parenthesised conjunction of the given conditions."""
    return _joined(" AND ", args)


def or_(*args: Any) -> str:
    """Parenthesised disjunction of the given conditions."""
    return _joined(" OR ", args)


def not_(op: str) -> str:
    """Negation of a condition."""
    return "NOT " + op


def distinct(column: Column) -> Column:
    """Column expression ``DISTINCT name``."""
    return Column("DISTINCT " + column.name, column.column_type)


class Eq:
    """Equality condition with a numbered placeholder."""

    def __init__(self, column: Column) -> None:
        self.column = column

    def __call__(self, index: int = 0) -> str:
        return f"{self.column.name} = ?{index + 1}"


def make_eq(column: Column) -> Eq:
    """Build a numbered equality condition for the column."""
    return Eq(column)