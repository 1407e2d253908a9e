"""In-memory snapshot store for the bean data set.

The store owns the fetched records and hands out read-only views. A fetch is
skipped while the current snapshot is younger than the staleness window, and
concurrent fetch calls share one in-flight request. A failed fetch keeps the
previous snapshot and records an error message instead of raising.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from bean_board.config import BoardConfig
from bean_board.core import build_source
from bean_board.exceptions import BeanBoardError
from bean_board.normalization import NameStandardizer, StandardizationConfig
from bean_board.records import parse_beans
from bean_board.schema import Bean
from bean_board.sources.base import BaseSource
from bean_board.stats import BeanStats, compute_stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BeanSnapshot:
    raw: tuple[Bean, ...]
    standardized: tuple[Bean, ...]
    fetched_at: float
    version: int


class BeanStore:
    """Owns the cached raw and standardized record sets."""

    def __init__(
        self,
        config: BoardConfig | None = None,
        *,
        source: BaseSource | None = None,
        standardizer: NameStandardizer | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config or BoardConfig()
        self.source = source
        self.standardizer = standardizer or NameStandardizer(
            StandardizationConfig(dictionary_version=self.config.dictionary_version)
        )
        self._clock = clock
        # Scopes standardizer memo entries to this store.
        self._memo_token = object()
        self._snapshot: BeanSnapshot | None = None
        self._error: str | None = None
        self._invalidated = False
        self._inflight: asyncio.Task[BeanSnapshot | None] | None = None
        self._version = 0
        self._stats: tuple[int, BeanStats] | None = None

    @property
    def snapshot(self) -> BeanSnapshot | None:
        return self._snapshot

    @property
    def beans(self) -> tuple[Bean, ...]:
        return self._snapshot.standardized if self._snapshot else ()

    @property
    def raw_beans(self) -> tuple[Bean, ...]:
        return self._snapshot.raw if self._snapshot else ()

    @property
    def loading(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    @property
    def error(self) -> str | None:
        return self._error

    def clear_error(self) -> None:
        self._error = None

    @property
    def is_stale(self) -> bool:
        if self._snapshot is None or self._invalidated:
            return True
        return self._clock() - self._snapshot.fetched_at >= self.config.cache_ttl_sec

    def invalidate(self) -> None:
        """Make the next fetch ignore the staleness window."""
        self._invalidated = True

    async def fetch(self) -> BeanSnapshot | None:
        """Return a fresh snapshot, fetching only when the cache is stale."""
        if not self.is_stale:
            return self._snapshot

        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.ensure_future(self._refresh())
        return await asyncio.shield(self._inflight)

    async def refetch(self) -> BeanSnapshot | None:
        self.invalidate()
        return await self.fetch()

    def get_bean(self, bean_id: int) -> Bean | None:
        for bean in self.beans:
            if bean.id == bean_id:
                return bean
        return None

    def stats(self) -> BeanStats:
        """Aggregates for the current snapshot, computed once per snapshot."""
        snapshot = self._snapshot
        version = snapshot.version if snapshot else 0
        if self._stats is None or self._stats[0] != version:
            self._stats = (version, compute_stats(snapshot.standardized if snapshot else ()))
        return self._stats[1]

    async def _refresh(self) -> BeanSnapshot | None:
        version = self._version + 1
        try:
            source = self.source or build_source(self.config)
            logger.info("fetching bean data from %s", source.describe())
            raw, standardized = await asyncio.to_thread(self._load, source, version)
        except BeanBoardError as exc:
            logger.warning("failed to fetch coffee beans: %s", exc)
            self._error = str(exc) or "Failed to fetch coffee beans"
            return self._snapshot
        except Exception as exc:
            logger.exception("unexpected error while fetching coffee beans")
            self._error = str(exc) or "Failed to fetch coffee beans"
            return self._snapshot

        self._version = version
        self._snapshot = BeanSnapshot(
            raw=raw,
            standardized=standardized,
            fetched_at=self._clock(),
            version=version,
        )
        self._error = None
        self._invalidated = False
        logger.debug("published snapshot v%d with %d beans", version, len(standardized))
        return self._snapshot

    def _load(self, source: BaseSource, version: int) -> tuple[tuple[Bean, ...], tuple[Bean, ...]]:
        raw = tuple(parse_beans(source.read_text()))
        return raw, self.standardizer.standardize(raw, cache_key=(self._memo_token, version))
