# msqlite

msqlite is a small package with no dependencies that builds SQLite SQL text. You
describe your columns once. From them you build `CREATE TABLE`, `CREATE INDEX`,
`SELECT`, `INSERT`, `UPDATE` and `DELETE` statements, `WHERE` conditions and table
constraints. Every builder returns a plain string. To run that string, use the
standard `sqlite3` module.

## Installation

From a checkout of the package:

```
pip install .
```

## Columns (`msqlite.columns`)

```python
from msqlite.columns import Column, ColumnType, Attribute, qualified, cast

id_ = Column("id", ColumnType.INTEGER).primary_key().autoincrement()
name = Column("name", ColumnType.TEXT).not_null()
score = Column("score", ColumnType.REAL, default=0.0)

id_.sql_type()         # "INTEGER"
id_.sql_attributes()   # " PRIMARY KEY AUTOINCREMENT"
score.has_default()    # True

Column("code", ColumnType.TEXT, attributes=Attribute.NOT_NULL | Attribute.UNIQUE)
```

- `ColumnType` has the members `INTEGER`, `REAL`, `TEXT` and `BLOB`. Calling `sql_type()` on a `BLOB` column raises `TypeError`.
- `Attribute` is an `IntFlag` with the members `NONE`, `PRIMARY_KEY`, `NOT_NULL`, `UNIQUE` and `AUTOINCREMENT`.
- `column.assign(value)` returns an `AssignedField`, which holds `field` and `value`.
- `qualified(column, "table")` returns a column named `table.name`. `qualified(column, "schema", "table")` returns one named `schema.table.name`.
- `cast(column, ColumnType.TEXT)` returns a column with the same name and a different type.

## Statements

```python
from msqlite.columns import Ordering
from msqlite.create_table import CreateTable, UniqueConstraint, OnConflict
from msqlite.statements import Select, Insert, Update, Delete, CreateIndex, UpdateOrAction

create = CreateTable("people", id_, name, score)
create.set_constraint(UniqueConstraint("uq_name", name).on_conflict(OnConflict.REPLACE))
create.string()
# "CREATE TABLE people (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL,
#  score REAL, CONSTRAINT uq_name UNIQUE (name) ON CONFLICT REPLACE)"

Insert("people", name, score).string()
# "INSERT INTO people(name,score) VALUES(?1,?2)"
Insert("people", name).do_replace().string()
# "INSERT OR REPLACE INTO people(name) VALUES(?1)"

Select("people", id_, name).where("score > ?1").order_by(name).ordered(Ordering.DESC).string()
# "SELECT id,name FROM people WHERE score > ?1 ORDER BY name DESC"

Update("people", (name, score)).or_action(UpdateOrAction.REPLACE).where("id = ?3").string()
# "UPDATE OR REPLACE people SET name = ?1,score = ?2 WHERE id = ?3"
Update("people", (name, score), ("bob", None)).string()
# "UPDATE people SET name = ?1"   (fields whose value is None are left out)

Delete("people").where("id = ?1").string()
# "DELETE FROM people WHERE id = ?1"

CreateIndex("idx_name", "people", name, unique=True).string()
# "CREATE UNIQUE INDEX idx_name ON people(name)"
```

More on the statement builders:

- `Select` also has `distinct()`, `group_by(...)` and `join(table, field1, field2)`.
- Calling `order_by()` with no fields removes the ORDER BY clause.
- Calling `ordered()` when there is no ORDER BY clause raises `RuntimeError`.
- Passing an empty condition to `where` removes the WHERE clause.
- Every statement class subclasses `StatementFormatter`, so `str(statement)` gives the same text as `statement.string()`.

`msqlite.create_table` also builds foreign keys and primary-key constraints:

```python
from msqlite.create_table import ForeignKey, ForeignKeyAction, PrimaryKeyConstraint

owner = Column("owner", ColumnType.INTEGER)
ForeignKey("fk_owner", [owner], "people", [id_]).on_delete(ForeignKeyAction.CASCADE).to_string()
# "CONSTRAINT fk_owner FOREIGN KEY(owner) REFERENCES people(id) ON DELETE CASCADE"

PrimaryKeyConstraint("pk", id_, name).to_string()
# "CONSTRAINT pk PRIMARY KEY (id,name)"
```

## Conditions

`msqlite.fieldsop` gives conditions with plain `?` placeholders, aggregates and `DISTINCT`:

```python
from msqlite import fieldsop

fieldsop.and_(fieldsop.eq(name), fieldsop.gt(score))   # "(name = ? AND score > ?)"
fieldsop.not_(fieldsop.like(name))                      # "NOT name LIKE ?"
fieldsop.count(id_).name                                # "COUNT(id)"
fieldsop.make_eq(name)(2)                               # "name = ?3"
```

`msqlite.operators` gives conditions with numbered placeholders:

```python
from msqlite import operators

cond = operators.and_(operators.eq(name), operators.ge(score))
cond(0)              # "name = ?1 AND score >= ?2"
cond.format(0, None, 3.0)   # "score >= ?2"  (parts whose value is None are left out)

where = operators.make_where_opt(cond)
where.set_bind_offset(2)
where.format(None, 3.0)     # "score >= ?4"
where.format(None, None)    # "1"
```

`msqlite.formatters` gives conditions with named parameters, plus the helpers that build
field lists and placeholder lists:

```python
from msqlite.formatters import where_eq, unpack_field_placeholders_opt

(where_eq(name, "n") & where_eq(score, "s")).text   # "name = :n AND score = :s"
unpack_field_placeholders_opt([name, score], [None, 1.0])   # "?2"
```

## What it does not do

msqlite only builds SQL text. It does not open databases, bind values or run
statements. It does not manage transactions or read results. Pass the strings it
produces to `sqlite3` or to another SQLite driver.

## Running the tests

```
pip install -e .[test]
pytest
```