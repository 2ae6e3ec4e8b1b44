"""Sichtbaren Zustand der Karte bestimmen (empty / error / loading / ready)."""

from __future__ import annotations

from collections.abc import Sequence

from sla_map.domain.models import AggregatedResult, QuerySpec, ViewState

EXAMPLE_QUERY = "SELECT count(*)*1.5 FROM SystemSample FACET cases(WHERE true AS 'us')"
EMPTY_STATE_HEADING = "Please provide an accountId and least one NRQL query with a FACET"
EMPTY_STATE_HINT = "An example NRQL query you can try is:"
ERROR_STATE_HEADING = "Oops! Something went wrong"


def has_query_configured(
    account_id: int | None, queries: Sequence[QuerySpec] | None
) -> bool:
    """True, wenn Account und mindestens die erste Abfrage gesetzt sind."""
    return bool(
        account_id is not None
        and queries
        and queries[0].query.strip()
    )


def resolve_view_state(
    account_id: int | None,
    queries: Sequence[QuerySpec] | None,
    *,
    error: BaseException | None = None,
    results: Sequence[AggregatedResult] | None = None,
) -> ViewState:
    """Zustand in Prioritaet empty > error > loading > ready.

    Eine leere Ergebnisliste gilt wie im Widget als "loading".
    """
    if not has_query_configured(account_id, queries):
        return ViewState.EMPTY
    if error is not None:
        return ViewState.ERROR
    if not results:
        return ViewState.LOADING
    return ViewState.READY
