"""External data clients used by the Pokemon dashboard."""

from .pokeapi import PokeAPIClient, PokeAPIClientError

__all__ = [
    "PokeAPIClient",
    "PokeAPIClientError",
]
