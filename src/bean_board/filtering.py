"""Filter engine for the bean table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from bean_board.schema import Bean
from bean_board.values import parse_number


@dataclass(frozen=True)
class BeanFilter:
    search_term: str = ""
    origin: str | None = None
    roaster: str | None = None
    min_rating: float | None = None

    @property
    def is_active(self) -> bool:
        return bool(
            self.search_term.strip()
            or self.origin
            or self.roaster
            or self.min_rating is not None
        )


@dataclass(frozen=True)
class FilterOptions:
    origins: list[str] = field(default_factory=list)
    roasters: list[str] = field(default_factory=list)


def apply_filters(beans: Iterable[Bean], criteria: BeanFilter) -> list[Bean]:
    """Return the beans matching every active criterion, in input order."""
    term = criteria.search_term.lower()
    return [
        bean
        for bean in beans
        if (not term.strip() or _matches_search(bean, term))
        and (not criteria.origin or bean.origin == criteria.origin)
        and (not criteria.roaster or bean.roaster == criteria.roaster)
        and (criteria.min_rating is None or _meets_rating(bean, criteria.min_rating))
    ]


def filter_options(beans: Sequence[Bean]) -> FilterOptions:
    """Distinct non-empty origins and roasters, sorted, for facet dropdowns."""
    return FilterOptions(
        origins=sorted({bean.origin for bean in beans if bean.origin}),
        roasters=sorted({bean.roaster for bean in beans if bean.roaster}),
    )


def _matches_search(bean: Bean, term: str) -> bool:
    return any(
        term in value.lower()
        for value in (bean.bean_name, bean.origin, bean.roaster, bean.tasting_notes)
    )


def _meets_rating(bean: Bean, min_rating: float) -> bool:
    rating = parse_number(bean.rating)
    return rating is not None and rating >= min_rating
