"""GET-Endpoints fuer Health und Metadata."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from fastapi import APIRouter

from sla_map.config import Settings
from sla_map.domain.aggregation import DEFAULT_COMBINE_METHOD, DEFAULT_DECIMAL_PLACES
from sla_map.domain.models import CombineMethod
from sla_map.domain.view_state import EXAMPLE_QUERY

router = APIRouter(tags=["Data"])


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Service Health Check mit NerdGraph-Status."""
    settings = Settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "data_sources": {
            "nerdgraph_api": "configured"
            if settings.nerdgraph_configured
            else "not_configured",
            "nerdgraph_url": settings.nerdgraph_url,
        },
    }


@router.get("/api/v1/data/metadata")
async def data_metadata() -> dict[str, Any]:
    """Metadaten fuer die Konfigurationsoberflaeche."""
    settings = Settings()
    return {
        "nerdgraph_configured": settings.nerdgraph_configured,
        "combine_methods": [m.value for m in CombineMethod],
        "default_combine_method": DEFAULT_COMBINE_METHOD.value,
        "default_decimal_places": DEFAULT_DECIMAL_PLACES,
        "nominal_color": settings.nominal_color,
        "value_suffix": settings.value_suffix,
        "example_query": EXAMPLE_QUERY,
    }
