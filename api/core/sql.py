"""
Small helpers for building parameterized SQL.

Only values are ever parameterized. Column and table names always come from
literals in the repository modules, never from request data.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

# Bounds of Postgres integer (int4, SERIAL) and bigint columns.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1
INT8_MAX = 2**63 - 1


class Params:
    """
    Positional argument accumulator.

    `add()` appends a value and returns its placeholder ($1, $2, ...), so
    optional filters can be appended in any order without renumbering.
    """

    def __init__(self) -> None:
        self.values: list[Any] = []

    def add(self, value: Any) -> str:
        self.values.append(value)
        return f"${len(self.values)}"

    def __len__(self) -> int:
        return len(self.values)


class FieldDiff:
    """
    Ordered (column, value) pairs for a partial update.
    """

    def __init__(self, pairs: Iterable[tuple[str, Any]] = ()) -> None:
        self.pairs: list[tuple[str, Any]] = list(pairs)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], columns: Iterable[str]) -> FieldDiff:
        """
        Keep the keys of `fields` that appear in `columns`, in `columns` order.

        A key present with value None is kept (it sets the column to NULL);
        a missing key is not part of the diff.
        """
        return cls((column, fields[column]) for column in columns if column in fields)

    def __bool__(self) -> bool:
        return bool(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


def build_update(
    table: str,
    diff: FieldDiff,
    *,
    key_column: str,
    key_value: Any,
    returning: str,
    touch_column: str | None = "updated_at",
) -> tuple[str, list[Any]]:
    if not diff:
        raise ValueError("build_update called with an empty field diff.")

    params = Params()
    assignments = [f"{column} = {params.add(value)}" for column, value in diff.pairs]
    if touch_column:
        assignments.append(f"{touch_column} = now()")
    key_placeholder = params.add(key_value)

    sql = (
        f"UPDATE {table}\n"
        f"SET {', '.join(assignments)}\n"
        f"WHERE {key_column} = {key_placeholder}\n"
        f"RETURNING {returning}"
    )
    return sql, params.values


def like_pattern(text: str) -> str:
    """
    Substring pattern for ILIKE with the LIKE wildcards escaped.
    """
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def insert_values(row: Mapping[str, Any], columns: Iterable[str]) -> tuple[str, str, list[Any]]:
    """
    Column list, placeholder list and args for an INSERT of `columns`.

    Missing keys are inserted as NULL.
    """
    params = Params()
    names: list[str] = []
    placeholders: list[str] = []
    for column in columns:
        names.append(column)
        placeholders.append(params.add(row.get(column)))
    return ", ".join(names), ", ".join(placeholders), params.values
