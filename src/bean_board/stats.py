"""Aggregate views for the statistics page."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bean_board.schema import Bean
from bean_board.values import parse_date, parse_number

TOP_ROASTERS = 10
TOP_CATEGORY = 8
MONTHLY_WINDOW = 12

# (label, inclusive lower bound), checked top-down.
RATING_BUCKETS: tuple[tuple[str, float | None], ...] = (
    ("9-10", 9.0),
    ("8-9", 8.0),
    ("7-8", 7.0),
    ("6-7", 6.0),
    ("5-6", 5.0),
    ("Below 5", None),
)


class _StatsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class CategoryCount(_StatsModel):
    name: str
    count: int


class RatingBucket(_StatsModel):
    range: str
    count: int


class MonthlyCount(_StatsModel):
    month: str
    count: int


class RoastLevelCount(_StatsModel):
    level: str
    count: int


class BeanStats(_StatsModel):
    """Summary numbers and grouped counts derived from one record snapshot."""

    total_beans: int = 0
    average_rating: float = 0.0
    unique_roasters: int = 0
    unique_origins: int = 0
    top_roasters: list[CategoryCount] = Field(default_factory=list)
    top_origins: list[CategoryCount] = Field(default_factory=list)
    top_machines: list[CategoryCount] = Field(default_factory=list)
    top_grinders: list[CategoryCount] = Field(default_factory=list)
    rating_distribution: list[RatingBucket] = Field(default_factory=list)
    monthly_trends: list[MonthlyCount] = Field(default_factory=list)
    roast_level_distribution: list[RoastLevelCount] = Field(default_factory=list)


def compute_stats(beans: Sequence[Bean]) -> BeanStats:
    ratings = [r for r in (parse_number(bean.rating) for bean in beans) if r is not None]

    return BeanStats(
        total_beans=len(beans),
        average_rating=sum(ratings) / len(ratings) if ratings else 0.0,
        unique_roasters=len({bean.roaster for bean in beans if bean.roaster}),
        unique_origins=len({bean.origin for bean in beans if bean.origin}),
        top_roasters=top_counts((bean.roaster for bean in beans), TOP_ROASTERS),
        top_origins=top_counts((bean.origin for bean in beans), TOP_CATEGORY),
        top_machines=top_counts((bean.espresso_machine for bean in beans), TOP_CATEGORY),
        top_grinders=top_counts((bean.grinder for bean in beans), TOP_CATEGORY),
        rating_distribution=rating_distribution(ratings),
        monthly_trends=monthly_trends(beans),
        roast_level_distribution=roast_level_distribution(beans),
    )


def top_counts(values: Iterable[str], limit: int) -> list[CategoryCount]:
    """Count non-empty values; most frequent first, ties in first-seen order."""
    counts = Counter(value for value in values if value)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CategoryCount(name=name, count=count) for name, count in ranked[:limit]]


def rating_bucket(rating: float) -> str:
    for label, lower in RATING_BUCKETS:
        if lower is None or rating >= lower:
            return label
    return RATING_BUCKETS[-1][0]


def rating_distribution(ratings: Sequence[float]) -> list[RatingBucket]:
    counts = Counter(rating_bucket(rating) for rating in ratings)
    return [RatingBucket(range=label, count=counts.get(label, 0)) for label, _ in RATING_BUCKETS]


def monthly_trends(beans: Sequence[Bean], window: int = MONTHLY_WINDOW) -> list[MonthlyCount]:
    counts: Counter[str] = Counter()
    for bean in beans:
        roasted = parse_date(bean.roast_date)
        if roasted is not None:
            counts[f"{roasted.year:04d}-{roasted.month:02d}"] += 1
    months = sorted(counts)[-window:]
    return [MonthlyCount(month=month, count=counts[month]) for month in months]


def roast_level_distribution(beans: Sequence[Bean]) -> list[RoastLevelCount]:
    counts = Counter(bean.roast_level for bean in beans if bean.roast_level)
    return [RoastLevelCount(level=level, count=counts[level]) for level in sorted(counts)]
