"""Tests for the best-effort catalog fetcher."""

from __future__ import annotations

import pytest

from poke_dash.clients import PokeAPIClientError
from poke_dash.services import CatalogFetcher, CatalogFetchError


class FakePokeAPI:
    def __init__(self, *, failing_ids=(), broken_ids=()) -> None:
        self.failing_ids = set(failing_ids)
        self.broken_ids = set(broken_ids)
        self.requested: list[tuple[str, int]] = []

    def get_pokemon(self, pokemon_id: int):
        self.requested.append(("pokemon", pokemon_id))
        if pokemon_id in self.failing_ids:
            raise PokeAPIClientError(f"pokemon/{pokemon_id}: 500 Server Error")
        if pokemon_id in self.broken_ids:
            return {"id": pokemon_id}
        return {
            "id": pokemon_id,
            "name": f"mon-{pokemon_id}",
            "types": [{"slot": 1, "type": {"name": "normal"}}],
            "height": 10,
            "weight": 100,
        }

    def get_type(self, type_id: int):
        self.requested.append(("type", type_id))
        if type_id in self.failing_ids:
            raise PokeAPIClientError(f"type/{type_id}: timed out")
        return {"id": type_id, "name": f"type-{type_id}", "damage_relations": {}}


def test_fetch_creatures_drops_failed_records() -> None:
    messages: list[str] = []
    client = FakePokeAPI(failing_ids={2}, broken_ids={4})
    fetcher = CatalogFetcher(client, creature_count=5, max_workers=3, debug_logger=messages.append)

    creatures = fetcher.fetch_creatures()

    assert [c.id for c in creatures] == [1, 3, 5]
    assert sorted(i for kind, i in client.requested if kind == "pokemon") == [1, 2, 3, 4, 5]
    assert any("Dropping pokemon 2" in msg for msg in messages)
    assert any("3/5" in msg for msg in messages)


def test_fetch_types_returns_records_in_id_order() -> None:
    fetcher = CatalogFetcher(FakePokeAPI(failing_ids={7}), type_count=8)

    types = fetcher.fetch_types()

    assert [t.id for t in types] == [1, 2, 3, 4, 5, 6, 8]
    assert types[0].name == "type-1"


def test_fetch_raises_when_every_request_fails() -> None:
    fetcher = CatalogFetcher(FakePokeAPI(failing_ids={1, 2, 3}), creature_count=3, type_count=3)

    with pytest.raises(CatalogFetchError):
        fetcher.fetch_creatures()
    with pytest.raises(CatalogFetchError):
        fetcher.fetch_types()


def test_fetch_with_empty_batch_is_a_failure() -> None:
    fetcher = CatalogFetcher(FakePokeAPI(), creature_count=0)

    with pytest.raises(CatalogFetchError):
        fetcher.fetch_creatures()


class OddPayloadAPI(FakePokeAPI):
    """Returns well-formed JSON with the wrong shape for record 2."""

    def get_pokemon(self, pokemon_id: int):
        payload = super().get_pokemon(pokemon_id)
        if pokemon_id == 2:
            payload["sprites"] = ["x"]
        return payload

    def get_type(self, type_id: int):
        payload = super().get_type(type_id)
        if type_id == 2:
            payload["damage_relations"] = {"double_damage_to": 5}
        return payload


def test_fetch_drops_records_with_unexpected_shapes() -> None:
    messages: list[str] = []
    fetcher = CatalogFetcher(
        OddPayloadAPI(), creature_count=3, type_count=3, debug_logger=messages.append
    )

    assert [c.id for c in fetcher.fetch_creatures()] == [1, 3]
    assert [t.id for t in fetcher.fetch_types()] == [1, 3]
    assert any("Dropping pokemon 2" in msg for msg in messages)
    assert any("Dropping type 2" in msg for msg in messages)
