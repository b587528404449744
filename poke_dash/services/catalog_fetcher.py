"""Best-effort concurrent fetch of the creature and type catalogs."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..clients import PokeAPIClient, PokeAPIClientError
from ..config import FIRST_GENERATION_COUNT, TYPE_COUNT
from ..models import Creature, TypeRecord
from ..parsers import PayloadError, parse_creature, parse_type_record

T = TypeVar("T")


class CatalogFetchError(RuntimeError):
    """Raised when every request of a catalog batch failed."""


class CatalogFetcher:
    """Fetches records 1..N in parallel, dropping the ones that fail."""

    def __init__(
        self,
        client: Optional[PokeAPIClient] = None,
        *,
        creature_count: int = FIRST_GENERATION_COUNT,
        type_count: int = TYPE_COUNT,
        max_workers: int = 16,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.client = client or PokeAPIClient()
        self.creature_count = creature_count
        self.type_count = type_count
        self.max_workers = max_workers
        self._debug_logger = debug_logger

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def fetch_creatures(self) -> List[Creature]:
        creatures = self._fetch_batch(
            "pokemon",
            self.creature_count,
            lambda record_id: parse_creature(self.client.get_pokemon(record_id)),
        )
        return sorted(creatures, key=lambda creature: creature.id)

    def fetch_types(self) -> List[TypeRecord]:
        types = self._fetch_batch(
            "type",
            self.type_count,
            lambda record_id: parse_type_record(self.client.get_type(record_id)),
        )
        return sorted(types, key=lambda record: (record.id, record.name))

    def _fetch_batch(self, kind: str, count: int, load: Callable[[int], T]) -> List[T]:
        if count <= 0:
            raise CatalogFetchError(f"No {kind} records requested")

        results: List[T] = []
        failures: Dict[int, str] = {}
        workers = max(1, min(self.max_workers, count))
        self._debug(f"Fetching {count} {kind} records with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            future_to_id = {
                executor.submit(load, record_id): record_id
                for record_id in range(1, count + 1)
            }
            for future in as_completed(future_to_id):
                record_id = future_to_id[future]
                try:
                    results.append(future.result())
                except (PokeAPIClientError, PayloadError) as exc:
                    failures[record_id] = str(exc)
                    self._debug(f"Dropping {kind} {record_id}: {exc}")

        if not results:
            raise CatalogFetchError(
                f"All {count} {kind} requests failed; last error: "
                f"{_last_failure(failures)}"
            )
        if failures:
            self._debug(
                f"Fetched {len(results)}/{count} {kind} records "
                f"({len(failures)} dropped: {sorted(failures)})"
            )
        else:
            self._debug(f"Fetched all {count} {kind} records")
        return results


def _last_failure(failures: Dict[int, Any]) -> str:
    if not failures:
        return "unknown"
    return str(failures[max(failures)])
