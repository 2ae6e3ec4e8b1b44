"""Fehlerarten eines Render-Zyklus."""

from __future__ import annotations


class SlaMapError(Exception):
    """Basisklasse: Zyklus abgebrochen, Meldung wird unveraendert angezeigt."""


class ConfigurationError(SlaMapError):
    """Konfiguration unvollstaendig oder fehlerhaft (vom Nutzer behebbar)."""


class ExecutionError(SlaMapError):
    """Eine Abfrage ist beim QueryExecutor fehlgeschlagen."""
