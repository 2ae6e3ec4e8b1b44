"""NerdGraph (New Relic GraphQL API) Adapter fuer NRQL-Abfragen."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from sla_map.domain.models import RawSeries, SeriesMetadata, SeriesPoint

logger = logging.getLogger(__name__)

_NRQL_QUERY = """
query ($accountId: Int!, $nrql: Nrql!) {
  actor {
    account(id: $accountId) {
      nrql(query: $nrql) {
        results
        metadata { facets }
      }
    }
  }
}
"""


class NerdGraphError(Exception):
    """NerdGraph hat die Abfrage mit GraphQL-Fehlern beantwortet."""


def _facet_name(row: dict[str, Any]) -> str:
    """FACET-Wert einer Zeile; Multi-Facets werden mit Komma verbunden."""
    facet = row.get("facet")
    if isinstance(facet, list):
        return ", ".join(str(f) for f in facet)
    return str(facet)


def _first_value(row: dict[str, Any], facet_keys: set[str]) -> float | None:
    """Erster numerischer Ergebniswert einer Zeile (FACET-Spalten ausgenommen)."""
    for key, value in row.items():
        if key in facet_keys:
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    return None


def rows_to_series(
    rows: list[dict[str, Any]], facets: list[str] | None = None
) -> list[RawSeries]:
    """NRQL-Ergebniszeilen (eine pro FACET-Wert) in Serien umwandeln.

    Zeilen ohne FACET-Wert oder ohne numerischen Wert werden uebersprungen.
    """
    facet_keys = {"facet", *(facets or [])}
    series: list[RawSeries] = []
    for row in rows:
        if "facet" not in row:
            logger.warning("NRQL-Zeile ohne FACET uebersprungen: %s", row)
            continue
        value = _first_value(row, facet_keys)
        if value is None:
            logger.warning("NRQL-Zeile ohne numerischen Wert uebersprungen: %s", row)
            continue
        series.append(RawSeries(
            metadata=SeriesMetadata(name=_facet_name(row)),
            data=[SeriesPoint(y=value)],
        ))
    return series


class NerdGraphAdapter:
    """Async-Adapter fuer NRQL-Abfragen ueber die NerdGraph API."""

    BASE_URL = "https://api.newrelic.com/graphql"
    TIMEOUT = 30.0

    def __init__(
        self, api_key: str = "", url: str = BASE_URL, timeout: float = TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout = timeout

    async def execute(self, account_id: int, query: str) -> list[RawSeries]:
        """NRQL-Abfrage ausfuehren. HTTP- und GraphQL-Fehler werden weitergereicht."""
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["API-Key"] = self._api_key
        body = {
            "query": _NRQL_QUERY,
            "variables": {"accountId": account_id, "nrql": query},
        }

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            t0 = time.monotonic()
            resp = await client.post(self._url, json=body, headers=headers)
            elapsed_ms = int((time.monotonic() - t0) * 1000)
            logger.info(
                "NerdGraph account=%d -> %d (%dms)",
                account_id, resp.status_code, elapsed_ms,
            )
            resp.raise_for_status()
            payload: dict[str, Any] = resp.json()

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(e.get("message", e)) for e in errors)
            raise NerdGraphError(messages)

        nrql = payload["data"]["actor"]["account"]["nrql"]
        facets = (nrql.get("metadata") or {}).get("facets")
        return rows_to_series(nrql.get("results") or [], facets)
