import pytest

from msqlite.columns import (
    AssignedField,
    Attribute,
    Column,
    ColumnType,
    Ordering,
    cast,
    qualified,
)


@pytest.mark.parametrize(
    "column_type, expected",
    [
        (ColumnType.INTEGER, "INTEGER"),
        (ColumnType.REAL, "REAL"),
        (ColumnType.TEXT, "TEXT"),
    ],
)
def test_sql_type(column_type, expected):
    assert column_type.sql_type() == expected
    assert Column("c", column_type).sql_type() == expected


def test_blob_has_no_sql_type():
    with pytest.raises(TypeError):
        Column("data", ColumnType.BLOB).sql_type()


@pytest.mark.parametrize(
    "column_type, expected",
    [
        (ColumnType.INTEGER, int),
        (ColumnType.REAL, float),
        (ColumnType.TEXT, str),
        (ColumnType.BLOB, bytes),
    ],
)
def test_python_types(column_type, expected):
    col = Column("c", column_type)
    assert col.column_type.python_type is expected


@pytest.mark.parametrize(
    "raw, flag, sql",
    [
        (0x01, Attribute.PRIMARY_KEY, " PRIMARY KEY"),
        (0x02, Attribute.NOT_NULL, " NOT NULL"),
        (0x04, Attribute.UNIQUE, " UNIQUE"),
        (0x08, Attribute.AUTOINCREMENT, " AUTOINCREMENT"),
    ],
)
def test_attribute_flags_values(raw, flag, sql):
    by_int = Column("c", ColumnType.INTEGER, attributes=raw)
    by_flag = Column("c", ColumnType.INTEGER, attributes=flag)
    assert by_int.attributes == flag
    assert by_int.sql_attributes() == sql
    assert by_flag.sql_attributes() == sql


def test_no_attributes_gives_empty_sql():
    assert Column("id").sql_attributes() == ""


def test_all_attributes_in_fixed_order():
    col = Column("id", ColumnType.INTEGER).unique().not_null().autoincrement().primary_key()
    assert col.sql_attributes() == " PRIMARY KEY AUTOINCREMENT NOT NULL UNIQUE"


def test_attributes_from_constructor_match_chained():
    combined = Attribute.PRIMARY_KEY | Attribute.NOT_NULL
    by_ctor = Column("id", ColumnType.INTEGER, attributes=combined)
    by_chain = Column("id", ColumnType.INTEGER).primary_key().not_null()
    assert by_ctor.sql_attributes() == by_chain.sql_attributes()
    assert by_ctor.attributes == by_chain.attributes


def test_integer_attributes_accepted():
    col = Column("id", ColumnType.INTEGER, attributes=0x04)
    assert col.sql_attributes() == " UNIQUE"


def test_chain_returns_same_column():
    col = Column("id")
    assert col.primary_key() is col
    assert col.not_null() is col
    assert col.unique() is col
    assert col.autoincrement() is col


def test_default_value():
    col = Column("name", ColumnType.TEXT, "anon")
    assert col.has_default() is True
    assert col.default == "anon"


def test_no_default_value():
    col = Column("name", ColumnType.TEXT)
    assert col.has_default() is False
    assert col.default is None


def test_explicit_none_default_counts():
    col = Column("name", ColumnType.TEXT, None)
    assert col.has_default() is True


def test_to_string_is_name():
    col = Column("value", ColumnType.REAL)
    assert col.to_string() == "value"
    assert str(col) == "value"


def test_assign():
    col = Column("key", ColumnType.TEXT)
    assigned = col.assign("abc")
    assert isinstance(assigned, AssignedField)
    assert assigned.field is col
    assert assigned.value == "abc"


def test_qualified_with_table():
    col = Column("id", ColumnType.INTEGER).primary_key()
    q = qualified(col, "t")
    assert q.name == "t.id"
    assert q.column_type is ColumnType.INTEGER
    assert q.sql_attributes() == ""


def test_qualified_with_schema_and_table():
    col = Column("id", ColumnType.TEXT)
    q = qualified(col, "main", "t")
    assert q.name == "main.t.id"
    assert q.column_type is ColumnType.TEXT


@pytest.mark.parametrize("prefixes", [(), ("a", "b", "c")])
def test_qualified_wrong_arity(prefixes):
    with pytest.raises(TypeError):
        qualified(Column("id"), *prefixes)


def test_cast_keeps_name_changes_type():
    col = Column("amount", ColumnType.INTEGER, 3).not_null()
    converted = cast(col, ColumnType.REAL)
    assert converted.name == col.name
    assert converted.column_type is ColumnType.REAL
    assert converted.has_default() is False
    assert col.column_type is ColumnType.INTEGER


def test_ordering_members():
    assert Ordering("ASC") is Ordering.ASC
    assert Ordering("DESC") is Ordering.DESC
    assert Ordering["DESC"].value == "DESC"
    with pytest.raises(ValueError):
        Ordering("UP")