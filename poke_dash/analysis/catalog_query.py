"""Search, sort and paginate the raw creature catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..models import Creature

SORTABLE_FIELDS = ("id", "name", "height", "weight", "base_experience")
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True, slots=True)
class CreaturePage:
    items: Tuple[Creature, ...]
    total: int
    page: int
    page_size: int
    page_count: int


def query_creatures(
    creatures: Sequence[Creature],
    *,
    search: str = "",
    sort_by: str = "id",
    descending: bool = False,
    page: int = 0,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> CreaturePage:
    """Return one page of creatures matching ``search``.

    ``search`` is a case-insensitive substring matched against every
    displayed column. ``page`` is zero-based; pages past the end are empty.
    """

    if sort_by not in SORTABLE_FIELDS:
        raise ValueError(
            f"Cannot sort by {sort_by!r}; expected one of {', '.join(SORTABLE_FIELDS)}"
        )
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    if page < 0:
        raise ValueError("page must not be negative")

    needle = search.strip().lower()
    matches = [c for c in creatures if not needle or needle in _searchable_text(c)]
    # two stable passes so ties stay in ascending id order either way
    matches.sort(key=lambda c: c.id)
    matches.sort(key=lambda c: getattr(c, sort_by), reverse=descending)

    total = len(matches)
    page_count = (total + page_size - 1) // page_size
    start = page * page_size
    return CreaturePage(
        items=tuple(matches[start : start + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        page_count=page_count,
    )


def _searchable_text(creature: Creature) -> str:
    fields = [
        str(creature.id),
        creature.name,
        *creature.types,
        f"{creature.height_m:.1f}",
        f"{creature.weight_kg:.1f}",
        str(creature.base_experience),
    ]
    return " ".join(fields).lower()
