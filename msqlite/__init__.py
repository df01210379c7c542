"""Builders for SQLite SQL text: columns, statements, conditions and table constraints."""

__version__ = "1.99.8"

__all__ = [
    "columns",
    "create_table",
    "fieldsop",
    "formatters",
    "operators",
    "statements",
]