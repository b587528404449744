"""Type distribution, combination and effectiveness aggregation.

Every function here is a pure fold over the catalog snapshot it is given and
returns freshly built, immutable results. Nothing performs I/O and nothing
raises for well-formed input: empty catalogs give empty or zero outputs.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models import (
    Creature,
    DerivedStatistics,
    EffectivenessMatrix,
    SummaryStats,
    TypeCombination,
    TypeRanking,
    TypeRankings,
    TypeRecord,
    TypeShare,
)

COMBINATION_LIMIT = 10
COMBINATION_SEPARATOR = "/"

SUPER_EFFECTIVE = 2.0
NOT_VERY_EFFECTIVE = 0.5
NO_EFFECT = 0.0
NORMAL_DAMAGE = 1.0

MULTIPLIERS = (NO_EFFECT, NOT_VERY_EFFECTIVE, NORMAL_DAMAGE, SUPER_EFFECTIVE)


def compute_type_distribution(creatures: Sequence[Creature]) -> List[TypeShare]:
    """Count creatures per type, most common first.

    A creature counts once per distinct type it carries, so a dual-type
    creature lands in two buckets. An empty catalog yields an empty list,
    which means no percentage is ever computed against a zero total.
    """

    total = len(creatures)
    if total == 0:
        return []

    counts: Dict[str, int] = {}
    for creature in creatures:
        for type_name in set(creature.types):
            counts[type_name] = counts.get(type_name, 0) + 1

    shares = [
        TypeShare(type=type_name, count=count, percentage=count / total * 100)
        for type_name, count in counts.items()
    ]
    shares.sort(key=lambda share: (-share.count, share.type))
    return shares


def combination_key(types: Iterable[str]) -> Optional[str]:
    """Canonical ``a/b`` key for a multi-type creature, None otherwise."""

    distinct = sorted(set(types))
    if len(distinct) < 2:
        return None
    return COMBINATION_SEPARATOR.join(distinct)


def compute_type_combinations(
    creatures: Sequence[Creature], limit: int = COMBINATION_LIMIT
) -> List[TypeCombination]:
    """Most frequent type combinations, capped at ``limit`` entries."""

    counts: Dict[str, int] = {}
    for creature in creatures:
        key = combination_key(creature.types)
        if key is None:
            continue
        counts[key] = counts.get(key, 0) + 1

    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))[: max(limit, 0)]
    return [TypeCombination(combination_key=key, count=count) for key, count in ranked]


def canonical_types(types: Iterable[TypeRecord]) -> List[TypeRecord]:
    """Order type records by id then name, keeping the first record per name."""

    ordered = sorted(types, key=lambda record: (record.id, record.name))
    seen = set()
    unique: List[TypeRecord] = []
    for record in ordered:
        if record.name in seen:
            continue
        seen.add(record.name)
        unique.append(record)
    return unique


def attack_multiplier(attacker: TypeRecord, defender_name: str) -> float:
    """Single-hit multiplier of ``attacker`` against a defending type name.

    Relations are checked double, then half, then no damage; the first match
    wins even when the upstream data lists the defender in more than one set.
    """

    relations = attacker.damage_relations
    if defender_name in relations.double_damage_to:
        return SUPER_EFFECTIVE
    if defender_name in relations.half_damage_to:
        return NOT_VERY_EFFECTIVE
    if defender_name in relations.no_damage_to:
        return NO_EFFECT
    return NORMAL_DAMAGE


def build_effectiveness_matrix(types: Sequence[TypeRecord]) -> EffectivenessMatrix:
    """Full attacker x defender grid over the given types.

    Relation entries naming types outside ``types`` are never looked at, since
    only names from ``types`` are used as defenders.
    """

    records = canonical_types(types)
    names = tuple(record.name for record in records)
    cells: Dict[Tuple[str, str], float] = {}
    for attacker in records:
        for defender in names:
            cells[(attacker.name, defender)] = attack_multiplier(attacker, defender)
    return EffectivenessMatrix(type_names=names, cells=MappingProxyType(cells))


def rank_type(record: TypeRecord) -> TypeRanking:
    relations = record.damage_relations
    return TypeRanking(
        type=record.name,
        offensive_score=len(relations.double_damage_to)
        - len(relations.half_damage_to)
        - len(relations.no_damage_to),
        defensive_score=len(relations.half_damage_from)
        + len(relations.no_damage_from)
        - len(relations.double_damage_from),
        super_effective_count=len(relations.double_damage_to),
        weak_to_count=len(relations.double_damage_from),
    )


def compute_type_rankings(types: Sequence[TypeRecord]) -> TypeRankings:
    """Offensive and defensive scores per type plus both sorted views."""

    records = tuple(rank_type(record) for record in canonical_types(types))
    # sorted() is stable, so ties keep the canonical id order
    by_offense = tuple(sorted(records, key=lambda r: r.offensive_score, reverse=True))
    by_vulnerability = tuple(sorted(records, key=lambda r: r.weak_to_count, reverse=True))
    return TypeRankings(
        records=records,
        by_offense=by_offense,
        by_vulnerability=by_vulnerability,
    )


def compute_summary(
    creatures: Sequence[Creature],
    types: Sequence[TypeRecord],
    combinations: Optional[Sequence[TypeCombination]] = None,
) -> SummaryStats:
    if combinations is None:
        combinations = compute_type_combinations(creatures)
    average = 0
    if creatures:
        mean = sum(creature.base_experience for creature in creatures) / len(creatures)
        average = int(math.floor(mean + 0.5))
    return SummaryStats(
        total_creatures=len(creatures),
        total_types=len(types),
        combination_count=len(combinations),
        average_base_experience=average,
    )


def build_statistics(
    creatures: Sequence[Creature], types: Sequence[TypeRecord]
) -> DerivedStatistics:
    """Run every aggregation over one catalog snapshot."""

    combinations = compute_type_combinations(creatures)
    return DerivedStatistics(
        type_distribution=tuple(compute_type_distribution(creatures)),
        type_combinations=tuple(combinations),
        effectiveness_matrix=build_effectiveness_matrix(types),
        type_rankings=compute_type_rankings(types),
        summary=compute_summary(creatures, types, combinations),
    )
