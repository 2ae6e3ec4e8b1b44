"""Beobachtungen pro Land zu einem Wert kombinieren.

Reine Funktionen ohne IO — testbar, auditierbar, reproduzierbar.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from sla_map.domain.models import AggregatedResult, CombineMethod
from sla_map.domain.reshape import ObservationMap

DEFAULT_COMBINE_METHOD = CombineMethod.AVERAGE
DEFAULT_DECIMAL_PLACES = 0


def combine_values(values: list[float], method: CombineMethod | str) -> float:
    """
    Beobachtungen eines Landes zu einem Skalar kombinieren.

    - average: arithmetisches Mittel.
    - multiply: Werte als Prozent-Wahrscheinlichkeiten unabhaengiger Erfolge;
      100 * prod(v_i / 100). Zwei Mal 90 ergibt 81.

    Jeder andere Methodenname wird wie multiply behandelt.
    """
    if method == CombineMethod.AVERAGE:
        return sum(values) / len(values)
    total = 1.0
    for value in values:
        total *= value / 100
    return total * 100


def format_fixed(value: float, decimal_places: int) -> str:
    """Festkomma-Formatierung inkl. Nullen am Ende, Rundung half-up (weg von Null).

    Nicht-endliche Werte werden wie bei JS toFixed ausgegeben ("Infinity", "NaN").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + decimal_places + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def aggregate(
    observations: ObservationMap,
    method: CombineMethod | str | None = None,
    decimal_places: int | None = None,
) -> list[AggregatedResult]:
    """ObservationMap in ``{country, value}``-Eintraege ueberfuehren.

    Reihenfolge = erstes Auftreten des Landes. ``None`` steht fuer
    "nicht angegeben" und waehlt die Defaults (average, 0 Nachkommastellen).
    """
    if method is None:
        method = DEFAULT_COMBINE_METHOD
    if decimal_places is None:
        decimal_places = DEFAULT_DECIMAL_PLACES

    return [
        AggregatedResult(
            country=country,
            value=format_fixed(combine_values(values, method), decimal_places),
        )
        for country, values in observations.items()
    ]
