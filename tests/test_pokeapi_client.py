"""Tests for the PokéAPI client cache and error handling."""

from __future__ import annotations

import pytest
import requests

from poke_dash.clients import PokeAPIClient, PokeAPIClientError


class FakeResponse:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, responses) -> None:
        self.responses = responses
        self.urls: list[str] = []

    def get(self, url, timeout=None, headers=None):
        self.urls.append(url)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


def test_get_pokemon_builds_url_and_caches_payload() -> None:
    session = FakeSession(
        {"http://api.test/v2/pokemon/25": FakeResponse(200, {"id": 25, "name": "pikachu"})}
    )
    client = PokeAPIClient(session=session, base_url="http://api.test/v2/")

    first = client.get_pokemon(25)
    second = client.get_pokemon(25)

    assert first == {"id": 25, "name": "pikachu"}
    assert second is first
    assert session.urls == ["http://api.test/v2/pokemon/25"]


def test_clear_cache_forces_new_request() -> None:
    session = FakeSession({"http://api.test/v2/type/1": FakeResponse(200, {"id": 1, "name": "normal"})})
    client = PokeAPIClient(session=session, base_url="http://api.test/v2")

    client.get_type(1)
    client.clear_cache()
    client.get_type(1)

    assert len(session.urls) == 2


@pytest.mark.parametrize(
    "response",
    [FakeResponse(404), requests.ConnectionError("connection refused")],
)
def test_failures_are_wrapped(response) -> None:
    session = FakeSession({"http://api.test/v2/pokemon/999": response})
    client = PokeAPIClient(session=session, base_url="http://api.test/v2")

    with pytest.raises(PokeAPIClientError):
        client.get_pokemon(999)
