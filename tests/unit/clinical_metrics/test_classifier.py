"""
Tests for value classification in `clinical_metrics/services/classifier.py`.

Testing philosophy:
- Range boundaries checked for every parsed catalog entry
- Unknown metrics, unparsable ranges and NaN degrade to "unknown"
- Interpretation text falls back to a generic phrase per branch
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st
from structlog.testing import capture_logs

from clinical_metrics.domain.models import ValueStatus
from clinical_metrics.services.classifier import (
    FALLBACK_INTERPRETATIONS,
    assess,
    classify,
    interpret,
)
from clinical_metrics.services.range_parser import build_range_table

PARSED_METRICS = sorted(build_range_table())


def _epsilon(bound: float) -> float:
    return 1e-6 * max(1.0, abs(bound))


class TestRangeBoundaries:
    """Property-based checks over the whole catalog."""

    @given(metric_name=st.sampled_from(PARSED_METRICS))
    def test_bounds_are_inclusive(self, metric_name: str) -> None:
        normal_range = build_range_table()[metric_name]
        assert classify(normal_range.min, metric_name) is ValueStatus.NORMAL
        assert classify(normal_range.max, metric_name) is ValueStatus.NORMAL

    @given(metric_name=st.sampled_from(PARSED_METRICS))
    def test_values_outside_are_below_or_above(self, metric_name: str) -> None:
        normal_range = build_range_table()[metric_name]
        below = normal_range.min - _epsilon(normal_range.min)
        above = normal_range.max + _epsilon(normal_range.max)
        assert classify(below, metric_name) is ValueStatus.BELOW
        assert classify(above, metric_name) is ValueStatus.ABOVE

    @given(
        metric_name=st.sampled_from(PARSED_METRICS),
        value=st.floats(allow_nan=False, allow_infinity=True),
    )
    def test_classification_is_never_unknown_for_parsed_ranges(self, metric_name: str, value: float) -> None:
        assert classify(value, metric_name) is not ValueStatus.UNKNOWN


class TestClassify:
    @pytest.mark.parametrize(
        "value,expected",
        [(72.0, ValueStatus.NORMAL), (55.0, ValueStatus.BELOW), (100.0, ValueStatus.NORMAL), (121.0, ValueStatus.ABOVE)],
    )
    def test_heart_rate(self, value: float, expected: ValueStatus) -> None:
        assert classify(value, "BPM") is expected

    @pytest.mark.parametrize(
        "metric_name,value",
        [
            ("Vascular Tone", 80.0),
            ("Average Movement", 0.05),
            ("Cardiac Efficiency", 85.0),
            ("Stability", 85.0),
            ("Balance", 90.0),
            ("Max Movement", 0.3),
        ],
    )
    def test_accelerometer_and_vascular_metrics(self, metric_name: str, value: float) -> None:
        assert classify(value, metric_name) is ValueStatus.NORMAL

    def test_below_branch_without_guide_text(self) -> None:
        assert classify(20.0, "Stability") is ValueStatus.BELOW
        assert interpret(20.0, "Stability") == FALLBACK_INTERPRETATIONS[ValueStatus.BELOW]

    def test_signed_range(self) -> None:
        assert classify(-0.05, "Hemispheric Balance") is ValueStatus.NORMAL
        assert classify(-0.2, "Hemispheric Balance") is ValueStatus.BELOW

    def test_unknown_metric(self) -> None:
        assert classify(1.0, "Pulse Wave Velocity") is ValueStatus.UNKNOWN

    def test_unparsable_range(self) -> None:
        assert classify(0.0, "L-R Balance") is ValueStatus.UNKNOWN

    def test_nan_value(self) -> None:
        assert classify(math.nan, "BPM") is ValueStatus.UNKNOWN

    def test_unknown_metric_is_logged(self) -> None:
        with capture_logs() as logs:
            classify(1.0, "Pulse Wave Velocity")

        assert {
            "event": "metric_range_unavailable",
            "metric": "Pulse Wave Velocity",
            "in_catalog": False,
            "log_level": "debug",
        } in logs


class TestInterpret:
    def test_uses_guide_text_for_each_branch(self) -> None:
        assert interpret(72.0, "BPM") == "Healthy resting heart rate"
        assert interpret(55.0, "BPM") == "Athletic conditioning or possible bradycardia"
        assert interpret(130.0, "BPM") == "Heart rate raised by stress or activity"

    def test_falls_back_when_branch_has_no_text(self) -> None:
        # The guide's interpretation is a single unbulleted sentence
        assert interpret(55.0, "Heart Rate (BPM)") == FALLBACK_INTERPRETATIONS[ValueStatus.BELOW]
        assert interpret(130.0, "Heart Rate (BPM)") == FALLBACK_INTERPRETATIONS[ValueStatus.ABOVE]
        assert interpret(72.0, "Heart Rate (BPM)").startswith("Basic cardiovascular health indicator")

    def test_guide_without_interpretation_section(self) -> None:
        assert interpret(40.0, "PNN20") == "Within normal range"
        assert interpret(10.0, "PNN20") == "Below normal range"

    def test_unknown_status_has_no_text(self) -> None:
        assert interpret(1.0, "Pulse Wave Velocity") == ""
        assert interpret(math.nan, "BPM") == ""


class TestAssess:
    def test_bundles_status_text_and_range(self) -> None:
        result = assess(55.0, "BPM")

        assert result.metric_name == "BPM"
        assert result.value == 55.0
        assert result.status is ValueStatus.BELOW
        assert result.interpretation == "Athletic conditioning or possible bradycardia"
        assert result.range_text == "• 60-100 BPM: Normal range"

    def test_agrees_with_classify_and_interpret(self) -> None:
        for metric_name in PARSED_METRICS:
            normal_range = build_range_table()[metric_name]
            result = assess(normal_range.max, metric_name)
            assert result.status is classify(normal_range.max, metric_name)
            assert result.interpretation == interpret(normal_range.max, metric_name)

    def test_unknown_metric(self) -> None:
        result = assess(7.1, "Pulse Wave Velocity")

        assert result.status is ValueStatus.UNKNOWN
        assert result.interpretation == ""
        assert result.range_text is None
