"""Catalog records fetched from PokéAPI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

PLACEHOLDER_SPRITE = "/placeholder.svg?height=96&width=96&query=pokemon"


@dataclass(frozen=True, slots=True)
class Creature:
    """A single Pokemon entry in the catalog."""

    id: int
    name: str
    types: Tuple[str, ...] = ()
    height: int = 0
    weight: int = 0
    base_experience: int = 0
    sprite: str = PLACEHOLDER_SPRITE

    @property
    def height_m(self) -> float:
        return self.height / 10

    @property
    def weight_kg(self) -> float:
        return self.weight / 10


@dataclass(frozen=True, slots=True)
class DamageRelations:
    """Type names this type hits or is hit by for 2x, 0.5x and 0x."""

    double_damage_to: FrozenSet[str] = frozenset()
    double_damage_from: FrozenSet[str] = frozenset()
    half_damage_to: FrozenSet[str] = frozenset()
    half_damage_from: FrozenSet[str] = frozenset()
    no_damage_to: FrozenSet[str] = frozenset()
    no_damage_from: FrozenSet[str] = frozenset()


@dataclass(frozen=True, slots=True)
class TypeRecord:
    """A type together with its full damage-relation profile."""

    id: int
    name: str
    damage_relations: DamageRelations = field(default_factory=DamageRelations)
