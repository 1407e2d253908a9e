"""Map tokenized spreadsheet rows to Bean records."""

from __future__ import annotations

import re
from collections.abc import Iterable

from bean_board.schema import Bean
from bean_board.tokenizer import tokenize

# Column position in the export -> Bean attribute. Position 0 is the form
# timestamp and is ignored. The export is trusted by position, not by header.
COLUMN_FIELDS: dict[int, str] = {
    1: "bean_name",  # Bean/blend name
    2: "origin",
    3: "caffeine",
    4: "roast_level",
    5: "roast_date",
    6: "roaster",
    7: "roaster_city",
    8: "roaster_country",
    9: "weight",  # Product weight (grams)
    10: "currency",
    11: "price",  # Price paid
    12: "cost_per_100g",
    13: "cost_per_pound",
    14: "tasting_notes",
    15: "rating",
    16: "product_url",
    17: "time_rested",  # days
    18: "dose",  # grams
    19: "shot_yield",  # grams
    20: "brew_ratio",
    21: "shot_time",  # seconds
    22: "espresso_machine",
    23: "grinder",
    24: "grind_setting",
    25: "water_temperature",  # °C
    26: "basket_specs",
    27: "profile",
    28: "additional_workflow",
    29: "reddit_username",
}

COLUMN_COUNT = max(COLUMN_FIELDS) + 1

_SURROUNDING_QUOTES = re.compile(r"^[\"']|[\"']\Z")


def clean_cell(cell: str) -> str:
    """Strip one surrounding quote character at each end and trim."""
    if not cell:
        return ""
    return _SURROUNDING_QUOTES.sub("", cell).strip()


def map_rows(rows: Iterable[list[str]]) -> list[Bean]:
    """Convert tokenized rows (header first) into Bean records.

    Rows without a bean name are dropped; ids are assigned 1-based over the
    rows that are kept.
    """
    beans: list[Bean] = []
    iterator = iter(rows)
    next(iterator, None)

    for row in iterator:
        padded = list(row) + [""] * (COLUMN_COUNT - len(row))
        values = {name: clean_cell(padded[index]) for index, name in COLUMN_FIELDS.items()}
        if not values["bean_name"]:
            continue
        beans.append(Bean(id=len(beans) + 1, **values))

    return beans


def parse_beans(text: str) -> list[Bean]:
    """Parse a full CSV export body into Bean records."""
    return map_rows(tokenize(text))
