"""Aggregation and query utilities over the Pokemon catalog."""

from .catalog_query import CreaturePage, query_creatures
from .type_stats import (
    build_effectiveness_matrix,
    build_statistics,
    compute_summary,
    compute_type_combinations,
    compute_type_distribution,
    compute_type_rankings,
)

__all__ = [
    "CreaturePage",
    "query_creatures",
    "build_effectiveness_matrix",
    "build_statistics",
    "compute_summary",
    "compute_type_combinations",
    "compute_type_distribution",
    "compute_type_rankings",
]
