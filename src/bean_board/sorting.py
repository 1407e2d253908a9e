"""Sort engine and column descriptors for the bean table."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

from bean_board.schema import Bean
from bean_board.values import parse_date, parse_number

SortOrder = Literal["asc", "desc"]

DATE_FIELDS = frozenset({"roast_date"})
NUMERIC_FIELDS = frozenset({"rating", "price", "weight"})
MISSING_DATE = datetime(1900, 1, 1)


@dataclass(frozen=True)
class ColumnDescriptor:
    key: str
    field: str
    label: str
    sortable: bool = True


COLUMNS: tuple[ColumnDescriptor, ...] = (
    ColumnDescriptor("beanName", "bean_name", "Coffee Bean"),
    ColumnDescriptor("caffeine", "caffeine", "Caffeine"),
    ColumnDescriptor("roastLevel", "roast_level", "Roast Level"),
    ColumnDescriptor("roastDate", "roast_date", "Roasted On"),
    ColumnDescriptor("roaster", "roaster", "Roaster"),
    ColumnDescriptor("roasterCountry", "roaster_country", "Roaster Location"),
    ColumnDescriptor("rating", "rating", "User Rating"),
    ColumnDescriptor("price", "price", "Price Paid"),
    ColumnDescriptor("weight", "weight", "Bag Size"),
)

DEFAULT_SORT: tuple[str, SortOrder] = ("roast_date", "desc")


def resolve_field(sort_by: str) -> str:
    """Map a Python attribute name or camelCase key to a Bean attribute."""
    fields = Bean.model_fields
    if sort_by in fields and sort_by != "id":
        return sort_by
    for name, info in fields.items():
        if info.alias == sort_by and name != "id":
            return name
    raise ValueError(f"Unsupported sort key: {sort_by}")


def sort_beans(
    beans: Iterable[Bean],
    sort_by: str,
    order: SortOrder = "asc",
) -> list[Bean]:
    """Return a new list ordered by one column; the input is left untouched."""
    if order not in ("asc", "desc"):
        raise ValueError(f"Unsupported sort order: {order}")
    field_name = resolve_field(sort_by)
    key = _sort_key(field_name)
    return sorted(beans, key=lambda bean: key(getattr(bean, field_name)), reverse=order == "desc")


def _sort_key(field_name: str) -> Callable[[str], Any]:
    if field_name in DATE_FIELDS:
        return lambda value: parse_date(value) or MISSING_DATE
    if field_name in NUMERIC_FIELDS:
        return lambda value: parse_number(value) or 0.0
    return _text_key


def _text_key(value: str) -> tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", value)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, value.lower()
