"""Turn raw PokéAPI payloads into catalog records.

Defaults for optional upstream fields are applied here and only here, so the
aggregation code never sees a missing value.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Tuple

from ..models import PLACEHOLDER_SPRITE, Creature, DamageRelations, TypeRecord

RELATION_KEYS = (
    "double_damage_to",
    "double_damage_from",
    "half_damage_to",
    "half_damage_from",
    "no_damage_to",
    "no_damage_from",
)


class PayloadError(ValueError):
    """Raised when a payload lacks a field the catalog cannot do without."""


def parse_creature(payload: Mapping[str, Any]) -> Creature:
    """Build a Creature from a ``GET /pokemon/{id}`` payload."""

    creature_id, name = _identity(payload, "pokemon")
    slots = [slot for slot in _sequence(payload, "types") if isinstance(slot, Mapping)]
    slots.sort(key=lambda slot: _as_int(slot.get("slot")))
    types = tuple(
        _resource_name(slot.get("type"))
        for slot in slots
        if _resource_name(slot.get("type"))
    )
    front_default = _mapping(payload, "sprites").get("front_default")
    return Creature(
        id=creature_id,
        name=name,
        types=types,
        height=_as_int(payload.get("height")),
        weight=_as_int(payload.get("weight")),
        base_experience=_as_int(payload.get("base_experience")),
        sprite=front_default if isinstance(front_default, str) and front_default else PLACEHOLDER_SPRITE,
    )


def parse_type_record(payload: Mapping[str, Any]) -> TypeRecord:
    """Build a TypeRecord from a ``GET /type/{id}`` payload."""

    type_id, name = _identity(payload, "type")
    return TypeRecord(
        id=type_id,
        name=name,
        damage_relations=parse_damage_relations(_mapping(payload, "damage_relations")),
    )


def parse_damage_relations(raw: Mapping[str, Any]) -> DamageRelations:
    values: Dict[str, FrozenSet[str]] = {
        key: _name_set(_sequence(raw, key)) for key in RELATION_KEYS
    }
    return DamageRelations(**values)


def _identity(payload: Mapping[str, Any], kind: str) -> Tuple[int, str]:
    if not isinstance(payload, Mapping):
        raise PayloadError(f"{kind} payload is not an object")
    raw_id = payload.get("id")
    name = payload.get("name")
    if raw_id is None or isinstance(raw_id, bool):
        raise PayloadError(f"{kind} payload is missing 'id'")
    try:
        record_id = int(raw_id)
    except (TypeError, ValueError) as exc:
        raise PayloadError(f"{kind} payload has invalid id {raw_id!r}") from exc
    if not isinstance(name, str) or not name.strip():
        raise PayloadError(f"{kind} {record_id} payload is missing 'name'")
    return record_id, name.strip()


def _mapping(container: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = container.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise PayloadError(f"{key!r} should be an object, got {type(value).__name__}")
    return value


def _sequence(container: Mapping[str, Any], key: str) -> List[Any]:
    value = container.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise PayloadError(f"{key!r} should be a list, got {type(value).__name__}")
    return list(value)


def _resource_name(resource: Any) -> str:
    if isinstance(resource, Mapping):
        name = resource.get("name")
        return name if isinstance(name, str) else ""
    if isinstance(resource, str):
        return resource
    return ""


def _name_set(resources: Iterable[Any]) -> FrozenSet[str]:
    return frozenset(name for name in (_resource_name(r) for r in resources) if name)


def _as_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
