"""Pokemon catalog type analytics dashboard."""

from .analysis.type_stats import build_statistics
from .services import CatalogFetcher, CatalogFetchError, DashboardService

__all__ = [
    "CatalogFetcher",
    "CatalogFetchError",
    "DashboardService",
    "build_statistics",
]
