"""Name standardization for roaster and origin values."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from functools import lru_cache

from bean_board.normalization.repository import TableRepository
from bean_board.normalization.types import Domain
from bean_board.schema import Bean


@dataclass(frozen=True)
class StandardizationConfig:
    dictionary_version: str = "v1"
    standardize_origins: bool = True
    memo_size: int = 4


class NameStandardizer:
    """Table-driven canonicalization of free-text names."""

    def __init__(self, config: StandardizationConfig | None = None):
        self.config = config or StandardizationConfig()
        self.repo = TableRepository(version=self.config.dictionary_version)
        self._memo: OrderedDict[Hashable, tuple[Bean, ...]] = OrderedDict()

    def standardize_value(self, domain: Domain, value: str) -> str:
        if not value:
            return value
        return self.repo.table(domain).lookup(value) or value

    def standardize_roaster(self, name: str) -> str:
        return self.standardize_value("roaster", name)

    def standardize_origin(self, name: str) -> str:
        return self.standardize_value("origin", name)

    def standardize(
        self,
        beans: Sequence[Bean],
        *,
        cache_key: Hashable | None = None,
    ) -> tuple[Bean, ...]:
        """Return records with canonical roaster (and origin) names.

        Input records are never modified. When nothing would change the input
        is returned as-is. A ``cache_key`` (e.g. a snapshot version) memoizes
        the result for repeated calls with the same key; a memo hit whose length
        differs from the input is recomputed.
        """
        if cache_key is not None and cache_key in self._memo:
            cached = self._memo[cache_key]
            if len(cached) == len(beans):
                self._memo.move_to_end(cache_key)
                return cached

        result = self._standardize(beans)

        if cache_key is not None:
            self._memo[cache_key] = result
            while len(self._memo) > self.config.memo_size:
                self._memo.popitem(last=False)
        return result

    def _standardize(self, beans: Sequence[Bean]) -> tuple[Bean, ...]:
        if not any(self._updates_for(bean) for bean in beans):
            return beans if isinstance(beans, tuple) else tuple(beans)

        standardized: list[Bean] = []
        for bean in beans:
            updates = self._updates_for(bean)
            standardized.append(bean.model_copy(update=updates) if updates else bean)
        return tuple(standardized)

    def _updates_for(self, bean: Bean) -> dict[str, str]:
        updates: dict[str, str] = {}
        roaster = self.standardize_roaster(bean.roaster)
        if roaster != bean.roaster:
            updates["roaster"] = roaster
        if self.config.standardize_origins:
            origin = self.standardize_origin(bean.origin)
            if origin != bean.origin:
                updates["origin"] = origin
        return updates


@lru_cache(maxsize=4)
def _default_standardizer(dictionary_version: str = "v1") -> NameStandardizer:
    return NameStandardizer(StandardizationConfig(dictionary_version=dictionary_version))


def standardize_roaster_name(name: str, *, dictionary_version: str = "v1") -> str:
    """Return the canonical spelling of a roaster name, or the input unchanged."""
    return _default_standardizer(dictionary_version).standardize_roaster(name)


def standardize_origin_name(name: str, *, dictionary_version: str = "v1") -> str:
    """Return the canonical spelling of an origin name, or the input unchanged."""
    return _default_standardizer(dictionary_version).standardize_origin(name)


def standardize_names(
    beans: Sequence[Bean],
    *,
    dictionary_version: str = "v1",
) -> tuple[Bean, ...]:
    """Standardize roaster and origin names across a record set."""
    return _default_standardizer(dictionary_version).standardize(beans)
