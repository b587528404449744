"""Session-level pipeline: fetch the catalog, aggregate it, cache the result."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..analysis.type_stats import build_statistics
from ..config import Settings
from ..clients import PokeAPIClient
from ..models import Creature, DerivedStatistics, TypeRecord
from .catalog_fetcher import CatalogFetcher


@dataclass(frozen=True, slots=True)
class DashboardSnapshot:
    creatures: Tuple[Creature, ...]
    types: Tuple[TypeRecord, ...]
    statistics: DerivedStatistics
    fetched_at: float


class DashboardService:
    """Coordinates the catalog fetch with the aggregation engine.

    A snapshot is reused until it is older than ``cache_ttl`` seconds or
    :meth:`refresh` is called. A failed rebuild leaves the previous snapshot
    in place and propagates the :class:`CatalogFetchError`. Rebuilds are
    serialised, so concurrent callers of an expired snapshot share one fetch.
    """

    def __init__(
        self,
        fetcher: Optional[CatalogFetcher] = None,
        *,
        cache_ttl: int = 600,
        clock: Callable[[], float] = time.time,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.fetcher = fetcher or CatalogFetcher(debug_logger=debug_logger)
        self.cache_ttl = cache_ttl
        self._clock = clock
        self._debug_logger = debug_logger
        self._snapshot: Optional[DashboardSnapshot] = None
        self._rebuild_lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> "DashboardService":
        client = PokeAPIClient(
            base_url=settings.base_url,
            cache_ttl=settings.cache_ttl,
            timeout=settings.timeout,
        )
        fetcher = CatalogFetcher(
            client,
            creature_count=settings.creature_count,
            type_count=settings.type_count,
            max_workers=settings.max_workers,
            debug_logger=debug_logger,
        )
        return cls(fetcher, cache_ttl=settings.cache_ttl, debug_logger=debug_logger)

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def snapshot(self) -> DashboardSnapshot:
        cached = self._fresh_snapshot()
        if cached:
            return cached
        with self._rebuild_lock:
            # another caller may have rebuilt while we waited
            cached = self._fresh_snapshot()
            if cached:
                return cached
            if self._snapshot:
                self._debug("Dashboard snapshot expired; rebuilding")
            return self._rebuild()

    def refresh(self) -> DashboardSnapshot:
        self._debug("Manual refresh requested")
        client = getattr(self.fetcher, "client", None)
        if isinstance(client, PokeAPIClient):
            client.clear_cache()
        with self._rebuild_lock:
            return self._rebuild()

    def _fresh_snapshot(self) -> Optional[DashboardSnapshot]:
        cached = self._snapshot
        if cached and self._clock() - cached.fetched_at < self.cache_ttl:
            return cached
        return None

    def _rebuild(self) -> DashboardSnapshot:
        creatures = tuple(self.fetcher.fetch_creatures())
        types = tuple(self.fetcher.fetch_types())
        self._debug(f"Aggregating {len(creatures)} creatures across {len(types)} types")
        snapshot = DashboardSnapshot(
            creatures=creatures,
            types=types,
            statistics=build_statistics(creatures, types),
            fetched_at=self._clock(),
        )
        self._snapshot = snapshot
        return snapshot
