"""Environment-driven settings for the dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"
FIRST_GENERATION_COUNT = 151
TYPE_COUNT = 18


@dataclass(frozen=True, slots=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    creature_count: int = FIRST_GENERATION_COUNT
    type_count: int = TYPE_COUNT
    cache_ttl: int = 600
    timeout: int = 10
    max_workers: int = 16

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from ``environ`` (defaults to the process environment).

        When reading the real environment, ``.env`` is loaded first and
        ``.env.local`` is overlaid so user-specific values win.
        """

        if environ is None:
            load_dotenv()
            load_dotenv(".env.local", override=True)
            environ = os.environ
        return cls(
            base_url=environ.get("POKE_DASH_BASE_URL") or DEFAULT_BASE_URL,
            creature_count=_env_int(environ, "POKE_DASH_CREATURE_COUNT", FIRST_GENERATION_COUNT),
            type_count=_env_int(environ, "POKE_DASH_TYPE_COUNT", TYPE_COUNT),
            cache_ttl=_env_int(environ, "POKE_DASH_CACHE_TTL", 600),
            timeout=_env_int(environ, "POKE_DASH_TIMEOUT", 10),
            max_workers=_env_int(environ, "POKE_DASH_MAX_WORKERS", 16),
        )


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{key} must not be negative, got {value}")
    return value
