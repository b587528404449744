"""Tests for the PokéAPI payload parsers."""

import pytest

from poke_dash.models import PLACEHOLDER_SPRITE
from poke_dash.parsers import PayloadError, parse_creature, parse_type_record

BULBASAUR = {
    "id": 1,
    "name": "bulbasaur",
    "height": 7,
    "weight": 69,
    "base_experience": 64,
    "types": [
        {"slot": 2, "type": {"name": "poison", "url": "https://pokeapi.co/api/v2/type/4/"}},
        {"slot": 1, "type": {"name": "grass", "url": "https://pokeapi.co/api/v2/type/12/"}},
    ],
    "sprites": {"front_default": "https://img.example/1.png"},
}

GHOST = {
    "id": 8,
    "name": "ghost",
    "damage_relations": {
        "double_damage_to": [{"name": "ghost", "url": ""}, {"name": "psychic", "url": ""}],
        "half_damage_to": [{"name": "dark", "url": ""}],
        "no_damage_to": [{"name": "normal", "url": ""}],
        "double_damage_from": [{"name": "ghost", "url": ""}, {"name": "dark", "url": ""}],
        "half_damage_from": [{"name": "poison", "url": ""}, {"name": "bug", "url": ""}],
        "no_damage_from": [{"name": "normal", "url": ""}, {"name": "fighting", "url": ""}],
    },
    "pokemon": [{"slot": 1, "pokemon": {"name": "gastly", "url": ""}}],
}


def test_parse_creature_reads_fields_in_slot_order() -> None:
    creature = parse_creature(BULBASAUR)

    assert creature.id == 1
    assert creature.name == "bulbasaur"
    assert creature.types == ("grass", "poison")
    assert creature.height == 7
    assert creature.weight_kg == pytest.approx(6.9)
    assert creature.base_experience == 64
    assert creature.sprite == "https://img.example/1.png"


def test_parse_creature_defaults_optional_fields() -> None:
    payload = {"id": 10, "name": "caterpie", "types": [], "sprites": {"front_default": None}}

    creature = parse_creature(payload)

    assert creature.base_experience == 0
    assert creature.sprite == PLACEHOLDER_SPRITE
    assert creature.types == ()
    assert creature.height == 0


@pytest.mark.parametrize(
    "payload",
    [{"name": "missingno"}, {"id": 3}, {"id": "abc", "name": "x"}, {"id": 4, "name": "  "}],
)
def test_parse_creature_rejects_payload_without_identity(payload) -> None:
    with pytest.raises(PayloadError):
        parse_creature(payload)


def test_parse_type_record_collects_relation_names() -> None:
    record = parse_type_record(GHOST)

    relations = record.damage_relations
    assert record.id == 8
    assert record.name == "ghost"
    assert relations.double_damage_to == frozenset({"ghost", "psychic"})
    assert relations.no_damage_to == frozenset({"normal"})
    assert relations.no_damage_from == frozenset({"normal", "fighting"})


def test_parse_type_record_treats_missing_relations_as_empty() -> None:
    record = parse_type_record({"id": 19, "name": "stellar", "damage_relations": {"half_damage_to": None}})

    relations = record.damage_relations
    assert relations.half_damage_to == frozenset()
    assert relations.double_damage_from == frozenset()


@pytest.mark.parametrize(
    "overrides",
    [{"sprites": ["x"]}, {"types": "grass"}, {"types": 7}],
)
def test_parse_creature_rejects_wrong_nested_shapes(overrides) -> None:
    with pytest.raises(PayloadError):
        parse_creature({**BULBASAUR, **overrides})


@pytest.mark.parametrize(
    "damage_relations",
    [{"double_damage_to": 5}, {"no_damage_from": {"name": "normal"}}, ["fire"]],
)
def test_parse_type_record_rejects_wrong_relation_shapes(damage_relations) -> None:
    with pytest.raises(PayloadError):
        parse_type_record({"id": 2, "name": "fighting", "damage_relations": damage_relations})


def test_parse_creature_ignores_non_string_sprite() -> None:
    creature = parse_creature({**BULBASAUR, "sprites": {"front_default": 12}})

    assert creature.sprite == PLACEHOLDER_SPRITE


def test_parse_type_record_keeps_only_relations() -> None:
    record = parse_type_record(GHOST)

    assert not hasattr(record, "pokemon")
