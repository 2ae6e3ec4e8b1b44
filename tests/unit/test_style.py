"""Tests fuer die Style-Berechnung (domain/style.py)."""

import math

import pytest

from sla_map.domain.models import Severity, ThresholdConfig
from sla_map.domain.style import classify_severity, style_for

_THRESHOLDS = ThresholdConfig(warning=70, critical=30)


class TestClassifySeverity:
    """Tests fuer die Bereichszuordnung."""

    def test_below_critical(self):
        assert classify_severity(29.9, _THRESHOLDS) is Severity.CRITICAL

    def test_critical_boundary_is_warning(self):
        assert classify_severity(30, _THRESHOLDS) is Severity.WARNING

    def test_warning_boundary_is_nominal(self):
        assert classify_severity(70, _THRESHOLDS) is Severity.NOMINAL

    def test_equal_thresholds_skip_warning(self):
        thresholds = ThresholdConfig(warning=50, critical=50)
        assert classify_severity(50, thresholds) is Severity.NOMINAL
        assert classify_severity(49, thresholds) is Severity.CRITICAL

    def test_inverted_thresholds_check_critical_first(self):
        thresholds = ThresholdConfig(warning=30, critical=70)
        assert classify_severity(50, thresholds) is Severity.CRITICAL


class TestStyleFor:
    """Tests fuer style_for."""

    def test_middle_regime_yellow_gold(self):
        style = style_for(50, "green", _THRESHOLDS)
        assert style.fill == "yellow"
        assert style.stroke == "gold"
        assert style.fill_opacity == pytest.approx(0.1 + 0.9 * 20 / 40)
        assert style.severity is Severity.WARNING

    def test_critical_regime_red_clamped(self):
        style = style_for(10, "green", _THRESHOLDS)
        assert style.fill == "red"
        assert style.stroke == "red"
        assert style.fill_opacity == 1.0

    def test_critical_regime_near_threshold(self):
        style = style_for(29, "green", _THRESHOLDS)
        assert style.fill_opacity == pytest.approx(0.05 + 4 * 1 / 30)

    def test_lower_value_more_opaque_red(self):
        a = style_for(29.5, "green", _THRESHOLDS).fill_opacity
        b = style_for(28.0, "green", _THRESHOLDS).fill_opacity
        assert b > a

    def test_warning_regime_at_critical_full_opacity(self):
        style = style_for(30, "green", _THRESHOLDS)
        assert style.fill_opacity == pytest.approx(1.0)

    def test_nominal_uses_base_color(self):
        style = style_for(85, "blue", _THRESHOLDS)
        assert style.fill == "blue"
        assert style.stroke == "blue"
        assert style.fill_opacity == pytest.approx(0.1 + 0.9 * 55 / 70)
        assert style.severity is Severity.NOMINAL

    def test_nominal_above_100_clamped(self):
        assert style_for(150, "green", _THRESHOLDS).fill_opacity == 1.0

    def test_critical_zero_stays_finite(self):
        style = style_for(-5, "green", ThresholdConfig(warning=0, critical=0))
        assert style.fill == "red"
        assert style.fill_opacity == 1.0

    def test_critical_hundred_stays_finite(self):
        style = style_for(100, "green", ThresholdConfig(warning=100, critical=100))
        assert style.fill == "green"
        assert style.fill_opacity == 1.0

    def test_nan_value_stays_finite(self):
        style = style_for(float("nan"), "green", _THRESHOLDS)
        assert style.fill_opacity == 1.0

    def test_infinite_value_nominal(self):
        style = style_for(float("inf"), "green", _THRESHOLDS)
        assert style.fill == "green"
        assert style.fill_opacity == 1.0

    def test_constants(self):
        style = style_for(50, "green", _THRESHOLDS)
        assert style.stroke_width == 4
        assert style.stroke_opacity == 0.1
        assert style.stroke_opacity_border == 0.1
        assert style.cursor == "pointer"

    def test_opacity_always_in_unit_range(self):
        configs = [
            ThresholdConfig(warning=70, critical=30),
            ThresholdConfig(warning=0, critical=0),
            ThresholdConfig(warning=100, critical=100),
            ThresholdConfig(warning=40, critical=40),
            ThresholdConfig(warning=20, critical=80),
        ]
        for thresholds in configs:
            for value in (-50, 0, 10, 30, 40, 50, 80, 100, 250):
                opacity = style_for(value, "green", thresholds).fill_opacity
                assert math.isfinite(opacity)
                assert 0.0 <= opacity <= 1.0

    def test_serialized_camel_case(self):
        data = style_for(50, "green", _THRESHOLDS).model_dump(by_alias=True, mode="json")
        assert data["fillOpacity"] == pytest.approx(0.55)
        assert data["strokeWidth"] == 4
        assert data["strokeOpacityBorder"] == 0.1
        assert data["severity"] == "warning"
