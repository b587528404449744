"""Shared dataclasses for the Pokemon type dashboard."""

from .catalog import PLACEHOLDER_SPRITE, Creature, DamageRelations, TypeRecord
from .stats import (
    DerivedStatistics,
    EffectivenessMatrix,
    SummaryStats,
    TypeCombination,
    TypeRanking,
    TypeRankings,
    TypeShare,
)

__all__ = [
    "PLACEHOLDER_SPRITE",
    "Creature",
    "DamageRelations",
    "TypeRecord",
    "DerivedStatistics",
    "EffectivenessMatrix",
    "SummaryStats",
    "TypeCombination",
    "TypeRanking",
    "TypeRankings",
    "TypeShare",
]
