"""Value objects produced by the type aggregation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple


@dataclass(frozen=True, slots=True)
class TypeShare:
    """How many creatures carry a type, and what share of the catalog that is."""

    type: str
    count: int
    percentage: float


@dataclass(frozen=True, slots=True)
class TypeCombination:
    combination_key: str
    count: int


@dataclass(frozen=True, slots=True)
class TypeRanking:
    type: str
    offensive_score: int
    defensive_score: int
    super_effective_count: int
    weak_to_count: int


@dataclass(frozen=True, slots=True)
class TypeRankings:
    """Per-type scores plus the two orderings the dashboard shows.

    ``records`` keeps the canonical type order (id ascending). Both views are
    stable re-sorts of ``records`` so ties fall back to that order.
    """

    records: Tuple[TypeRanking, ...] = ()
    by_offense: Tuple[TypeRanking, ...] = ()
    by_vulnerability: Tuple[TypeRanking, ...] = ()


@dataclass(frozen=True, slots=True)
class EffectivenessMatrix:
    """Attacking type (rows) vs defending type (columns) multipliers."""

    type_names: Tuple[str, ...] = ()
    cells: Mapping[Tuple[str, str], float] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def multiplier(self, attacker: str, defender: str) -> float:
        return self.cells[(attacker, defender)]

    def row(self, attacker: str) -> Tuple[float, ...]:
        return tuple(self.cells[(attacker, defender)] for defender in self.type_names)

    def rows(self) -> Iterator[Tuple[str, Tuple[float, ...]]]:
        for attacker in self.type_names:
            yield attacker, self.row(attacker)

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True, slots=True)
class SummaryStats:
    total_creatures: int = 0
    total_types: int = 0
    combination_count: int = 0
    average_base_experience: int = 0


@dataclass(frozen=True, slots=True)
class DerivedStatistics:
    """Everything the dashboard renders, built from one catalog snapshot."""

    type_distribution: Tuple[TypeShare, ...] = ()
    type_combinations: Tuple[TypeCombination, ...] = ()
    effectiveness_matrix: EffectivenessMatrix = field(default_factory=EffectivenessMatrix)
    type_rankings: TypeRankings = field(default_factory=TypeRankings)
    summary: SummaryStats = field(default_factory=SummaryStats)
