"""Comparison operators with numbered placeholders, their combinations and optional WHERE clauses."""

from __future__ import annotations

from typing import Any, Protocol

from msqlite.formatters import to_string

__all__ = [
    "UnaryOp",
    "And",
    "Or",
    "make_oper",
    "ne",
    "eq",
    "lt",
    "le",
    "gt",
    "ge",
    "and_",
    "or_",
    "WhereOpt",
    "make_where_opt",
]


class _Condition(Protocol):
    def __call__(self, index: int = 0) -> str: ...

    def format(self, index: int, *args: Any) -> str: ...


class UnaryOp:
    """Comparison of a column with one numbered placeholder, e.g. ``name = ?1``."""

    def __init__(self, column: Any, operator: str) -> None:
        self.column = column
        self.operator = operator

    def __call__(self, index: int = 0) -> str:
        """The condition text, with the placeholder numbered ``index + 1``."""
        return f"{to_string(self.column)} {self.operator} ?{index + 1}"

    def format(self, index: int, value: Any) -> str:
        """The condition text if ``value`` is set, otherwise an empty string."""
        if value is None:
            return ""
        return self(index)


def _join_all(separator: str, operands: tuple[Any, ...], index: int) -> str:
    return separator.join(
        operand(position + index) for position, operand in enumerate(operands)
    )


def _join_set(separator: str, operands: tuple[Any, ...], index: int, values: tuple[Any, ...]) -> str:
    return separator.join(
        operand(position + index)
        for position, (operand, value) in enumerate(zip(operands, values, strict=True))
        if value is not None
    )


class And:
    """Conjunction of conditions."""

    def __init__(self, *args: Any) -> None:
        self.operands = tuple(args)

    def __call__(self, index: int = 0) -> str:
        """All operands joined, the n-th operand numbered from ``index + n``."""
        return _join_all(" AND ", self.operands, index)

    def format(self, index: int, *args: Any) -> str:
        """Only the operands whose value is set, each keeping its own placeholder number."""
        return _join_set(" AND ", self.operands, index, args)


class Or:
    """Disjunction of conditions."""

    def __init__(self, *args: Any) -> None:
        self.operands = tuple(args)

    def __call__(self, index: int = 0) -> str:
        """All operands joined, the n-th operand numbered from ``index + n``."""
        return _join_all(" OR ", self.operands, index)

    def format(self, index: int, *args: Any) -> str:
        """Only the operands whose value is set, each keeping its own placeholder number."""
        return _join_set(" OR ", self.operands, index, args)


def make_oper(column: Any, operator: str) -> UnaryOp:
    """Comparison of ``column`` with a placeholder using ``operator``."""
    return UnaryOp(column, operator)


def ne(column: Any) -> UnaryOp:
    """Condition ``name <> ?N``."""
    return make_oper(column, "<>")


def eq(column: Any) -> UnaryOp:
    """Condition ``name = ?N``."""
    return make_oper(column, "=")


def lt(column: Any) -> UnaryOp:
    """Condition ``name < ?N``."""
    return make_oper(column, "<")


def le(column: Any) -> UnaryOp:
    """Condition ``name <= ?N``."""
    return make_oper(column, "<=")


def gt(column: Any) -> UnaryOp:
    """Condition ``name > ?N``."""
    return make_oper(column, ">")


def ge(column: Any) -> UnaryOp:
    """Condition ``name >= ?N``."""
    return make_oper(column, ">=")


def and_(*args: Any) -> And:
    """Conjunction of the given conditions."""
    return And(*args)


def or_(*args: Any) -> Or:
    """Disjunction of the given conditions."""
    return Or(*args)


class WhereOpt:
    """A WHERE condition whose parts appear only for the values that are set."""

    def __init__(self, condition: _Condition) -> None:
        self.condition = condition
        self.bind_offset = 0

    def set_bind_offset(self, offset: int) -> None:
        """Number placeholders starting after ``offset`` already bound parameters."""
        self.bind_offset = offset

    def format(self, *args: Any) -> str:
        """The condition text for the given values; ``1`` when no part is left."""
        text = self.condition.format(self.bind_offset, *args)
        return text or "1"


def make_where_opt(op: _Condition) -> WhereOpt:
    """Wrap a condition as an optional WHERE clause."""
    return WhereOpt(op)