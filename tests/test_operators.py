import pytest

from msqlite.columns import Column, ColumnType, qualified
from msqlite.operators import (
    And,
    Or,
    UnaryOp,
    and_,
    eq,
    ge,
    gt,
    le,
    lt,
    make_oper,
    make_where_opt,
    ne,
    or_,
)

ID = Column("id", ColumnType.INTEGER)
NAME = Column("name", ColumnType.TEXT)
VALUE = Column("value", ColumnType.REAL)


def test_eq_default_index():
    assert eq(ID)() == "id = ?1"


def test_and_pinned():
    assert and_(eq(ID), gt(NAME))() == "id = ?1 AND name > ?2"


@pytest.mark.parametrize(
    "factory, symbol",
    [(ne, "<>"), (eq, "="), (lt, "<"), (le, "<="), (gt, ">"), (ge, ">=")],
)
def test_factories_match_make_oper(factory, symbol):
    op = factory(NAME)
    assert isinstance(op, UnaryOp)
    assert op(3) == make_oper(NAME, symbol)(3)
    assert op.operator == symbol


@pytest.mark.parametrize("index", [0, 1, 4, 10])
def test_placeholder_follows_index(index):
    assert eq(ID)(index).endswith(f"?{index + 1}")
    assert eq(ID)(index).startswith("id = ?")


def test_qualified_column_name_used():
    assert lt(qualified(ID, "t"))().startswith("t.id < ")


def test_unary_format_skips_none():
    op = ge(VALUE)
    assert op.format(2, None) == ""
    assert op.format(2, 7.5) == op(2)


def test_and_numbers_operands_consecutively():
    a, b, c = eq(ID), lt(NAME), ne(VALUE)
    text = and_(a, b, c)(2)
    assert text.split(" AND ") == [a(2), b(3), c(4)]


def test_or_numbers_operands_consecutively():
    a, b = eq(ID), gt(VALUE)
    combined = or_(a, b)
    assert isinstance(combined, Or)
    assert combined(0).split(" OR ") == [a(0), b(1)]


def test_and_format_keeps_original_numbers():
    a, b, c = eq(ID), lt(NAME), ne(VALUE)
    combined = And(a, b, c)
    assert combined.format(0, 1, None, 3).split(" AND ") == [a(0), c(2)]


def test_or_format_first_skipped_has_no_separator():
    a, b = eq(ID), eq(NAME)
    assert or_(a, b).format(0, None, "x") == b(1)


def test_format_all_none_is_empty():
    assert and_(eq(ID), eq(NAME)).format(0, None, None) == ""
    assert or_(eq(ID)).format(5, None) == ""


def test_format_value_count_mismatch():
    with pytest.raises(ValueError):
        and_(eq(ID), eq(NAME)).format(0, 1)


def test_where_opt_empty_gives_true():
    where = make_where_opt(and_(eq(ID), eq(NAME)))
    assert where.format(None, None) == "1"


def test_where_opt_bind_offset():
    op = eq(ID)
    where = make_where_opt(op)
    where.set_bind_offset(2)
    assert where.format(5) == op(2)


def test_where_opt_with_junction():
    a, b = eq(ID), le(VALUE)
    where = make_where_opt(and_(a, b))
    where.set_bind_offset(1)
    assert where.format(None, 3.0) == b(2)
    assert where.format(1, 3.0).split(" AND ") == [a(1), b(2)]