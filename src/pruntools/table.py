"""Server-side sortable, filterable tables.

Sort state travels in the query string as a comma-separated list of column
keys, a leading '-' marking descending order: ``sort=category_name,-ticker``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Column:
    """One table column, read from rows by attribute (or dict key)."""

    key: str
    header: str
    sortable: bool = True
    searchable: bool = True


@dataclass(frozen=True)
class SortKey:
    key: str
    descending: bool = False

    def __str__(self) -> str:
        return f"-{self.key}" if self.descending else self.key


def cell_value(row: Any, key: str) -> Any:
    if isinstance(row, dict):
        return row.get(key)
    return getattr(row, key, None)


def parse_sort(raw: str | None, columns: Sequence[Column]) -> list[SortKey]:
    """Parse a sort param, dropping unknown, unsortable and repeated keys."""
    if not raw:
        return []
    sortable = {c.key for c in columns if c.sortable}
    sorting: list[SortKey] = []
    seen: set[str] = set()
    for part in raw.split(","):
        part = part.strip()
        descending = part.startswith("-")
        key = part.lstrip("-")
        if key not in sortable or key in seen:
            continue
        seen.add(key)
        sorting.append(SortKey(key, descending))
    return sorting


def format_sort(sorting: Iterable[SortKey]) -> str:
    return ",".join(str(s) for s in sorting)


def toggle_sort(
    sorting: Sequence[SortKey], key: str, *, multi: bool = False,
) -> list[SortKey]:
    """Apply a header click: ascending flips to descending, anything else to ascending.

    A plain click sorts by the clicked column alone. A multi (shift) click
    keeps the other columns and updates or appends the clicked one.
    """
    current = next((s for s in sorting if s.key == key), None)
    descending = current is not None and not current.descending
    clicked = SortKey(key, descending)
    if not multi:
        return [clicked]
    if current is None:
        return [*sorting, clicked]
    return [clicked if s.key == key else s for s in sorting]


def _matches(row: Any, columns: Sequence[Column], needle: str) -> bool:
    for column in columns:
        if not column.searchable:
            continue
        value = cell_value(row, column.key)
        if value is None:
            continue
        if needle in str(value).casefold():
            return True
    return False


def apply_filter(rows: Iterable[Any], columns: Sequence[Column], query: str | None) -> list[Any]:
    """Keep rows where any searchable cell contains the query, ignoring case."""
    needle = (query or "").strip().casefold()
    if not needle:
        return list(rows)
    return [row for row in rows if _matches(row, columns, needle)]


_DIGITS_RE = re.compile(r"([0-9]+)")


def _sort_value(value: Any) -> Any:
    """Strings sort naturally and ignore case: 'A2' before 'a10'."""
    if isinstance(value, str):
        parts = _DIGITS_RE.split(value.casefold())
        # Text at even indexes, numbers at odd ones.
        return [int(p) if i % 2 else p for i, p in enumerate(parts)]
    return value


def apply_sorting(rows: Iterable[Any], sorting: Sequence[SortKey]) -> list[Any]:
    """Stable multi-key sort; the first SortKey is the primary one.

    Missing values always sort last, whichever the direction.
    """
    result = list(rows)
    # Sort by the least significant key first and rely on stability.
    for sort_key in reversed(sorting):
        present = [r for r in result if cell_value(r, sort_key.key) is not None]
        missing = [r for r in result if cell_value(r, sort_key.key) is None]
        present.sort(
            key=lambda r: _sort_value(cell_value(r, sort_key.key)),
            reverse=sort_key.descending,
        )
        result = present + missing
    return result


@dataclass
class DataTable:
    """A filtered and sorted view of some rows, ready for the template."""

    columns: list[Column]
    rows: list[Any]
    sorting: list[SortKey] = field(default_factory=list)
    query: str = ""
    total: int = 0

    @classmethod
    def build(
        cls,
        rows: Iterable[Any],
        columns: Sequence[Column],
        *,
        sort: str | None = None,
        query: str | None = None,
        sort_by: str | None = None,
        multi: bool = False,
    ) -> DataTable:
        """Filter and sort rows.

        ``sort_by`` is a header click applied on top of ``sort``.
        """
        all_rows = list(rows)
        sorting = parse_sort(sort, columns)
        if sort_by and any(c.key == sort_by and c.sortable for c in columns):
            sorting = toggle_sort(sorting, sort_by, multi=multi)
        visible = apply_sorting(apply_filter(all_rows, columns, query), sorting)
        return cls(
            columns=list(columns),
            rows=visible,
            sorting=sorting,
            query=(query or "").strip(),
            total=len(all_rows),
        )

    @property
    def sort_param(self) -> str:
        return format_sort(self.sorting)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def direction(self, key: str) -> str | None:
        """'asc', 'desc' or None for a column's current sort direction."""
        for s in self.sorting:
            if s.key == key:
                return "desc" if s.descending else "asc"
        return None

    def value(self, row: Any, key: str) -> Any:
        return cell_value(row, key)
