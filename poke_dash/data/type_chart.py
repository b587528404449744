"""Display metadata for types and effectiveness multipliers."""

from __future__ import annotations

from typing import Dict

TYPE_COLORS: Dict[str, str] = {
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "electric": "#F8D030",
    "grass": "#78C850",
    "ice": "#98D8D8",
    "fighting": "#C03028",
    "poison": "#A040A0",
    "ground": "#E0C068",
    "flying": "#A890F0",
    "psychic": "#F85888",
    "bug": "#A8B820",
    "rock": "#B8A038",
    "ghost": "#705898",
    "dragon": "#7038F8",
    "dark": "#705848",
    "steel": "#B8B8D0",
    "fairy": "#EE99AC",
}
DEFAULT_TYPE_COLOR = "#68A090"

EFFECTIVENESS_DISPLAY: Dict[float, Dict[str, str]] = {
    2.0: {"symbol": "2×", "label": "Super Effective", "color": "#4caf50"},
    1.0: {"symbol": "1×", "label": "Normal Damage", "color": "#9e9e9e"},
    0.5: {"symbol": "½×", "label": "Not Very Effective", "color": "#ff9800"},
    0.0: {"symbol": "0×", "label": "No Effect", "color": "#f44336"},
}


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name.strip().lower(), DEFAULT_TYPE_COLOR)


def _display(multiplier: float) -> Dict[str, str]:
    return EFFECTIVENESS_DISPLAY.get(float(multiplier), EFFECTIVENESS_DISPLAY[1.0])


def effectiveness_symbol(multiplier: float) -> str:
    return _display(multiplier)["symbol"]


def effectiveness_label(multiplier: float) -> str:
    return _display(multiplier)["label"]


def effectiveness_color(multiplier: float) -> str:
    return _display(multiplier)["color"]
