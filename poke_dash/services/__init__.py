"""Services wiring the catalog fetch to the aggregation engine."""

from .catalog_fetcher import CatalogFetcher, CatalogFetchError
from .dashboard import DashboardService, DashboardSnapshot

__all__ = [
    "CatalogFetcher",
    "CatalogFetchError",
    "DashboardService",
    "DashboardSnapshot",
]
