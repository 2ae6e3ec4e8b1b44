"""Pydantic Request/Response Models fuer die API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sla_map.domain.models import (
    AggregatedResult,
    Style,
    ViewState,
    VisualizationConfig,
)

# --- Request ---

class SlaMapRequest(VisualizationConfig):
    """Anfrage fuer einen Render-Zyklus der SLA-Karte (Widget-Konfiguration)."""


# --- Response ---

class CountryEntry(BaseModel):
    """Ein Land auf der Karte: aggregierter Wert plus berechneter Style."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    country: str
    value: str
    style: Style


class SlaMapResponse(BaseModel):
    """Antwort mit Zustand, Daten und Render-Metadaten."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    state: ViewState
    title: str = ""
    color: str = "green"
    value_suffix: str = "%"
    message: str = ""
    hint: str = ""
    example_query: str = ""
    data: list[AggregatedResult] = []
    countries: list[CountryEntry] = []
    query_time_ms: int = 0
