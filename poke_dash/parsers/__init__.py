"""Parsers that turn raw API payloads into catalog records."""

from .pokeapi import PayloadError, parse_creature, parse_damage_relations, parse_type_record

__all__ = [
    "PayloadError",
    "parse_creature",
    "parse_damage_relations",
    "parse_type_record",
]
