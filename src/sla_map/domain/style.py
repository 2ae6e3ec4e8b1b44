"""Darstellung eines Landes aus Wert und Schwellwerten ableiten.

Drei Bereiche mit eigener Deckkraft-Kurve:
- critical (Wert < critical): rot, je niedriger desto deckender
- warning (critical <= Wert < warning): gelb/gold, je naeher an critical desto deckender
- nominal (Wert >= warning): Grundfarbe, je hoeher desto deckender

Die Deckkraft wird in allen Bereichen auf [0, 1] begrenzt. Ein Nenner von 0
(critical = 0, critical = 100, warning = critical) oder ein NaN-Wert
ergibt volle Deckkraft.
"""

from __future__ import annotations

import math

from sla_map.domain.models import Severity, Style, ThresholdConfig

CRITICAL_COLOR = "red"
WARNING_FILL = "yellow"
WARNING_STROKE = "gold"

STROKE_WIDTH = 4
STROKE_OPACITY = 0.1
CURSOR = "pointer"


def _opacity(base: float, slope: float, numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 1.0
    opacity = base + slope * numerator / denominator
    if math.isnan(opacity):
        return 1.0
    return min(max(opacity, 0.0), 1.0)


def classify_severity(country_value: float, thresholds: ThresholdConfig) -> Severity:
    """Bereich eines Wertes bestimmen (critical wird zuerst geprueft)."""
    if country_value < thresholds.critical:
        return Severity.CRITICAL
    if country_value < thresholds.warning:
        return Severity.WARNING
    return Severity.NOMINAL


def style_for(country_value: float, base_color: str, thresholds: ThresholdConfig) -> Style:
    """Style fuer ein Land berechnen (rein, ohne Seiteneffekte)."""
    critical = thresholds.critical
    warning = thresholds.warning
    severity = classify_severity(country_value, thresholds)

    if severity is Severity.CRITICAL:
        fill = stroke = CRITICAL_COLOR
        opacity = _opacity(0.05, 4, critical - country_value, critical)
    elif severity is Severity.WARNING:
        fill, stroke = WARNING_FILL, WARNING_STROKE
        opacity = _opacity(0.1, 0.9, warning - country_value, warning - critical)
    else:
        fill = stroke = base_color
        opacity = _opacity(0.1, 0.9, country_value - critical, 100 - critical)

    return Style(
        fill=fill,
        fill_opacity=opacity,
        stroke=stroke,
        stroke_opacity=STROKE_OPACITY,
        stroke_width=STROKE_WIDTH,
        stroke_opacity_border=STROKE_OPACITY,
        cursor=CURSOR,
        severity=severity,
    )
