"""SLA-Weltkarte: Abfragen ausfuehren, pro Land zusammenfuehren, aggregieren."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from typing import Protocol, cast

from sla_map.domain.aggregation import aggregate
from sla_map.domain.errors import ConfigurationError, ExecutionError
from sla_map.domain.models import AggregatedResult, CombineMethod, QuerySpec, RawSeries
from sla_map.domain.reshape import ObservationMap, reshape_results

logger = logging.getLogger(__name__)

FACET_KEYWORD = "facet"


class QueryExecutor(Protocol):
    """Fuehrt eine NRQL-Abfrage fuer einen Account aus (eine Serie pro FACET-Wert)."""

    async def execute(self, account_id: int, query: str) -> list[RawSeries]: ...


def validate_queries(
    account_id: int | None, queries: Sequence[QuerySpec] | None
) -> list[str]:
    """Konfiguration vollstaendig pruefen, bevor irgendeine Abfrage startet.

    Die FACET-Pruefung ist ein einfacher Substring-Test (ohne NRQL-Parser).

    Returns:
        Die Abfragetexte in Konfigurationsreihenfolge.

    Raises:
        ConfigurationError: beim ersten Konfigurationsfehler.
    """
    if not queries:
        raise ConfigurationError("No queries defined")
    if account_id is None:
        raise ConfigurationError("No accountId selected")

    texts: list[str] = []
    for i, spec in enumerate(queries, start=1):
        if not spec.query.strip():
            raise ConfigurationError(f"Query #{i} not defined")
        if FACET_KEYWORD not in spec.query.lower():
            raise ConfigurationError(f"Query #{i} missing FACET clause")
        texts.append(spec.query)
    return texts


async def collect_observations(
    executor: QueryExecutor, account_id: int, queries: Sequence[str]
) -> ObservationMap:
    """Alle Abfragen parallel ausfuehren und die Ergebnisse in Listenreihenfolge falten.

    Alles oder nichts: schlaegt eine Abfrage fehl, werden die uebrigen
    abgebrochen und der Zyklus endet mit ExecutionError.
    """
    tasks = [
        asyncio.ensure_future(executor.execute(account_id, query))
        for query in queries
    ]
    try:
        raw_results = await asyncio.gather(*tasks)
    except Exception as exc:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise ExecutionError(str(exc) or type(exc).__name__) from exc
    return reshape_results(raw_results)


async def build_sla_map(
    executor: QueryExecutor,
    account_id: int | None,
    queries: Sequence[QuerySpec] | None,
    combine_method: CombineMethod | str | None = None,
    decimal_places: int | None = None,
) -> list[AggregatedResult]:
    """Ein kompletter Render-Zyklus: validieren, ausfuehren, umformen, aggregieren.

    Args:
        executor: QueryExecutor (z.B. NerdGraphAdapter)
        account_id: Account, gegen den alle Abfragen laufen
        queries: Abfragen mit FACET-Klausel (ein Laendercode pro Serie)
        combine_method: "average" (Default) oder "multiply"
        decimal_places: Nachkommastellen der Ergebniswerte (Default: 0)

    Returns:
        Ein ``AggregatedResult`` pro Land, Reihenfolge des ersten Auftretens.
    """
    texts = validate_queries(account_id, queries)
    account_id = cast(int, account_id)

    t0 = time.monotonic()
    logger.info("SLA map: %d Abfragen fuer Account %d", len(texts), account_id)
    observations = await collect_observations(executor, account_id, texts)
    results = aggregate(observations, combine_method, decimal_places)

    elapsed_ms = int((time.monotonic() - t0) * 1000)
    logger.info("SLA map: %d Laender aggregiert (%dms)", len(results), elapsed_ms)
    return results
