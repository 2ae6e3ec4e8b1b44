"""Domain-Modelle fuer die SLA-Weltkarte.

Zentrale Datenstrukturen der Domain-Schicht. Diese Modelle sind
framework-unabhaengig definiert (nur Pydantic fuer Serialisierung)
und haben keine Abhaengigkeiten zu aeusseren Schichten (API, Infrastructure).

Feldnamen sind snake_case; serialisiert wird in camelCase, damit die
Render-Schicht (react-svg-worldmap) die Werte direkt uebernehmen kann.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Konfiguration ---

class CombineMethod(str, Enum):
    """Regel zum Kombinieren mehrerer Beobachtungen pro Land."""

    AVERAGE = "average"
    MULTIPLY = "multiply"


class QuerySpec(_CamelModel):
    """Eine NRQL-Abfrage mit FACET-Klausel (eine Serie pro Land)."""

    query: str = ""


class ThresholdConfig(_CamelModel):
    """Schwellwerte fuer die drei Darstellungsbereiche (gleiche Skala wie die Werte)."""

    warning: float = 0.0
    critical: float = 0.0


# --- Rohdaten (QueryExecutor) ---

class SeriesPoint(_CamelModel):
    """Datenpunkt einer Serie. Nur ``y`` wird ausgewertet."""

    model_config = ConfigDict(extra="allow")

    y: float


class SeriesMetadata(_CamelModel):
    """Metadaten einer Serie; ``name`` ist der FACET-Wert (Laendercode)."""

    model_config = ConfigDict(extra="allow")

    name: str


class RawSeries(_CamelModel):
    """Eine Serie pro FACET-Wert, wie vom QueryExecutor geliefert."""

    metadata: SeriesMetadata
    data: list[SeriesPoint] = []


# --- Ergebnis ---

class AggregatedResult(_CamelModel):
    """Aggregierter Wert pro Land, als String mit fester Nachkommastellenzahl."""

    country: str
    value: str


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    NOMINAL = "nominal"


class Style(_CamelModel):
    """Darstellung eines Landes auf der Karte (immer abgeleitet, nie persistiert)."""

    fill: str
    fill_opacity: float
    stroke: str
    stroke_opacity: float = 0.1
    stroke_width: int = 4
    stroke_opacity_border: float = 0.1
    cursor: str = "pointer"
    severity: Severity = Severity.NOMINAL


class ViewState(str, Enum):
    """Sichtbarer Zustand der Visualisierung."""

    EMPTY = "empty"
    ERROR = "error"
    LOADING = "loading"
    READY = "ready"


class VisualizationConfig(_CamelModel):
    """Konfiguration einer Karte, wie sie das Widget liefert (camelCase oder snake_case)."""

    title: str = ""
    account_id: int | None = None
    nrql_queries: list[QuerySpec] | None = None
    combine_method: str | None = None
    decimal_places: int | None = Field(None, ge=0, le=20)
    warning: float = 0.0
    critical: float = 0.0

    @property
    def thresholds(self) -> ThresholdConfig:
        return ThresholdConfig(warning=self.warning, critical=self.critical)
