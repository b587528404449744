"""FastAPI web server exposing the Pokemon type dashboard via REST API."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .analysis import query_creatures
from .config import Settings
from .presentation import matrix_payload, page_payload, rankings_payload
from .services import CatalogFetchError, DashboardService, DashboardSnapshot

LOAD_ERROR_MESSAGE = "Error loading Pokemon data. Please try again later."

app = FastAPI(
    title="Poke-Dash Web API",
    description="REST API for Pokemon type analytics",
    version="0.1.0",
)

# Shared service; nothing is fetched until the first request
_dashboard = DashboardService.from_settings(Settings.from_env())


class CreaturePageResponse(BaseModel):
    """Response model for one page of the creature explorer."""

    result: Dict[str, Any]


class DistributionResponse(BaseModel):
    result: List[Dict[str, Any]]


class CombinationsResponse(BaseModel):
    result: List[Dict[str, Any]]


class RankingsResponse(BaseModel):
    result: Dict[str, Any]


class MatrixResponse(BaseModel):
    """Response model for the attacker x defender grid."""

    result: Dict[str, Any]


class SummaryResponse(BaseModel):
    result: Dict[str, Any]


def _snapshot(refresh: bool = False) -> DashboardSnapshot:
    try:
        return _dashboard.refresh() if refresh else _dashboard.snapshot()
    except CatalogFetchError as exc:
        raise HTTPException(status_code=503, detail=LOAD_ERROR_MESSAGE) from exc


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve a minimal landing page listing the API endpoints."""
    endpoints = [
        "/api/creatures",
        "/api/types/distribution",
        "/api/types/combinations",
        "/api/types/rankings",
        "/api/types/matrix",
        "/api/summary",
    ]
    links = "".join(f'<li><a href="{path}">{path}</a></li>' for path in endpoints)
    return f"<html><body><h1>Poke-Dash Web API</h1><ul>{links}</ul></body></html>"


@app.get("/api/creatures", response_model=CreaturePageResponse)
def list_creatures(
    search: str = Query("", description="Case-insensitive filter over all columns"),
    sort_by: str = Query("id", description="id, name, height, weight or base_experience"),
    descending: bool = Query(False),
    page: int = Query(0, description="Zero-based page index"),
    page_size: int = Query(10),
) -> CreaturePageResponse:
    """Search, sort and paginate the creature catalog."""
    snapshot = _snapshot()
    try:
        result = query_creatures(
            snapshot.creatures,
            search=search,
            sort_by=sort_by,
            descending=descending,
            page=page,
            page_size=page_size,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return CreaturePageResponse(result=page_payload(result))


@app.get("/api/types/distribution", response_model=DistributionResponse)
def type_distribution() -> DistributionResponse:
    stats = _snapshot().statistics
    return DistributionResponse(
        result=[asdict(s) for s in stats.type_distribution]
    )


@app.get("/api/types/combinations", response_model=CombinationsResponse)
def type_combinations() -> CombinationsResponse:
    stats = _snapshot().statistics
    return CombinationsResponse(
        result=[asdict(c) for c in stats.type_combinations]
    )


@app.get("/api/types/rankings", response_model=RankingsResponse)
def type_rankings() -> RankingsResponse:
    return RankingsResponse(result=rankings_payload(_snapshot().statistics.type_rankings))


@app.get("/api/types/matrix", response_model=MatrixResponse)
def effectiveness_matrix() -> MatrixResponse:
    return MatrixResponse(result=matrix_payload(_snapshot().statistics.effectiveness_matrix))


@app.get("/api/summary", response_model=SummaryResponse)
def summary() -> SummaryResponse:
    return SummaryResponse(result=asdict(_snapshot().statistics.summary))


@app.post("/api/refresh", response_model=SummaryResponse)
def refresh() -> SummaryResponse:
    """Drop the cached snapshot and fetch the catalog again."""
    return SummaryResponse(result=asdict(_snapshot(refresh=True).statistics.summary))


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Entry point for running the web server."""
    import uvicorn

    print(f"[poke-dash-web] Starting web server at http://{host}:{port}")
    print("[poke-dash-web] Press Ctrl+C to stop.")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
