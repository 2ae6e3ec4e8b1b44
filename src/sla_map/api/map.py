"""POST /api/v1/sla-map — Render-Zyklus der SLA-Weltkarte."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, Query

from sla_map.api.schemas import CountryEntry, SlaMapRequest, SlaMapResponse
from sla_map.config import Settings
from sla_map.domain.errors import SlaMapError
from sla_map.domain.models import AggregatedResult, Style, ThresholdConfig, ViewState
from sla_map.domain.style import style_for
from sla_map.domain.view_state import (
    EMPTY_STATE_HEADING,
    EMPTY_STATE_HINT,
    ERROR_STATE_HEADING,
    EXAMPLE_QUERY,
    resolve_view_state,
)
from sla_map.infrastructure.adapters.nerdgraph_adapter import NerdGraphAdapter
from sla_map.use_cases.sla_map import QueryExecutor, build_sla_map

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Map"])


def get_settings() -> Settings:
    return Settings()


def get_query_executor(settings: Settings = Depends(get_settings)) -> QueryExecutor:
    """QueryExecutor aus Settings (in Tests per dependency_overrides ersetzt)."""
    return NerdGraphAdapter(
        api_key=settings.nerdgraph_api_key,
        url=settings.nerdgraph_url,
        timeout=settings.query_timeout,
    )


def _countries(
    results: list[AggregatedResult], color: str, thresholds: ThresholdConfig
) -> list[CountryEntry]:
    return [
        CountryEntry(
            country=r.country,
            value=r.value,
            style=style_for(float(r.value), color, thresholds),
        )
        for r in results
    ]


@router.post("/sla-map", response_model=SlaMapResponse)
async def render_sla_map(
    request: SlaMapRequest,
    settings: Settings = Depends(get_settings),
    executor: QueryExecutor = Depends(get_query_executor),
) -> SlaMapResponse:
    """
    SLA-Karte: alle NRQL-Abfragen parallel ausfuehren und pro Land kombinieren.

    Gibt den sichtbaren Zustand zurueck:
    - empty: Account oder Abfrage fehlt (mit Beispiel-Abfrage)
    - error: Konfigurations- oder Ausfuehrungsfehler (Meldung unveraendert)
    - loading: noch keine Laenderdaten
    - ready: Werte und Styles pro Land
    """
    response = SlaMapResponse(
        state=ViewState.EMPTY,
        title=request.title,
        color=settings.nominal_color,
        value_suffix=settings.value_suffix,
    )
    state = resolve_view_state(request.account_id, request.nrql_queries)
    if state is ViewState.EMPTY:
        response.message = EMPTY_STATE_HEADING
        response.hint = EMPTY_STATE_HINT
        response.example_query = EXAMPLE_QUERY
        return response

    t0 = time.monotonic()
    error: Exception | None = None
    results: list[AggregatedResult] = []
    try:
        results = await build_sla_map(
            executor,
            request.account_id,
            request.nrql_queries,
            combine_method=request.combine_method,
            decimal_places=request.decimal_places,
        )
    except SlaMapError as exc:
        logger.exception("SLA map fehlgeschlagen: %s: %s", type(exc).__name__, exc)
        error = exc
    except Exception as exc:
        logger.exception("SLA map: unerwartete Datenform")
        error = exc

    response.query_time_ms = int((time.monotonic() - t0) * 1000)
    response.state = resolve_view_state(
        request.account_id, request.nrql_queries, error=error, results=results,
    )
    if error is not None:
        response.message = str(error)
        response.hint = ERROR_STATE_HEADING
        return response

    response.data = results
    response.countries = _countries(results, settings.nominal_color, request.thresholds)
    return response


@router.get("/style", response_model=Style)
async def country_style(
    value: float = Query(..., description="Aggregierter Wert eines Landes"),
    warning: float = Query(0.0, description="Warning-Schwellwert"),
    critical: float = Query(0.0, description="Critical-Schwellwert"),
    color: str | None = Query(None, description="Nominal-Farbe (Default aus Settings)"),
    settings: Settings = Depends(get_settings),
) -> Style:
    """Style fuer einen einzelnen Wert berechnen."""
    thresholds = ThresholdConfig(warning=warning, critical=critical)
    return style_for(value, color or settings.nominal_color, thresholds)
