"""Facettierte Abfrageergebnisse in Beobachtungen pro Land umformen."""

from __future__ import annotations

from collections.abc import Iterable

from sla_map.domain.models import RawSeries

ObservationMap = dict[str, list[float]]


def append_series(series: Iterable[RawSeries], observations: ObservationMap) -> None:
    """Serien eines Abfrageergebnisses in ``observations`` einfuegen.

    Keine Zeitreihe: pro Serie zaehlt nur der erste Datenpunkt.
    Eine Serie ohne Datenpunkt loest einen IndexError aus.
    """
    for item in series:
        observations.setdefault(item.metadata.name, []).append(item.data[0].y)


def reshape_results(raw_results: Iterable[Iterable[RawSeries]]) -> ObservationMap:
    """Alle Abfrageergebnisse (in Listenreihenfolge) zu einer ObservationMap falten."""
    observations: ObservationMap = {}
    for series in raw_results:
        append_series(series, observations)
    return observations
