"""JSON-ready views of dashboard snapshots shared by the CLI and web server."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

from .analysis.catalog_query import CreaturePage
from .data.type_chart import (
    effectiveness_color,
    effectiveness_label,
    effectiveness_symbol,
    type_color,
)
from .models import Creature, DerivedStatistics, EffectivenessMatrix, TypeRankings


def creature_payload(creature: Creature) -> Dict[str, Any]:
    payload = asdict(creature)
    payload["types"] = list(creature.types)
    payload["height_m"] = round(creature.height_m, 1)
    payload["weight_kg"] = round(creature.weight_kg, 1)
    payload["type_colors"] = [type_color(t) for t in creature.types]
    return payload


def page_payload(page: CreaturePage) -> Dict[str, Any]:
    return {
        "items": [creature_payload(c) for c in page.items],
        "total": page.total,
        "page": page.page,
        "page_size": page.page_size,
        "page_count": page.page_count,
    }


def matrix_payload(matrix: EffectivenessMatrix) -> Dict[str, Any]:
    rows: List[Dict[str, Any]] = []
    for attacker, values in matrix.rows():
        rows.append(
            {
                "attacker": attacker,
                "cells": [
                    {
                        "defender": defender,
                        "multiplier": value,
                        "symbol": effectiveness_symbol(value),
                        "label": effectiveness_label(value),
                        "color": effectiveness_color(value),
                    }
                    for defender, value in zip(matrix.type_names, values)
                ],
            }
        )
    return {"types": list(matrix.type_names), "rows": rows}


def rankings_payload(rankings: TypeRankings) -> Dict[str, Any]:
    return {
        "records": [asdict(r) for r in rankings.records],
        "by_offense": [asdict(r) for r in rankings.by_offense],
        "by_vulnerability": [asdict(r) for r in rankings.by_vulnerability],
    }


def statistics_payload(stats: DerivedStatistics) -> Dict[str, Any]:
    return {
        "type_distribution": [asdict(s) for s in stats.type_distribution],
        "type_combinations": [asdict(c) for c in stats.type_combinations],
        "type_rankings": rankings_payload(stats.type_rankings),
        "effectiveness_matrix": matrix_payload(stats.effectiveness_matrix),
        "summary": asdict(stats.summary),
    }
