"""
Tests for normal-range extraction in `clinical_metrics/services/range_parser.py`.

Covers:
- Bullet-first bound extraction, separators and signed bounds
- Interpretation routing (below/above/normal, first line wins)
- Degradation to None for unknown metrics and unparsable ranges
- The cached typed range table built from the catalog
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clinical_metrics.catalog.index_guides import INDEX_GUIDES, get_guide, metric_names
from clinical_metrics.domain.models import NormalRange
from clinical_metrics.services.range_parser import (
    NOT_SPECIFIED,
    build_range_table,
    extract_range_text,
    get_normal_range,
    lookup_range,
    parse_bounds,
    parse_guide,
    parse_interpretations,
    strip_markup,
)


class TestStripMarkup:
    def test_removes_tags_and_decodes_entities(self) -> None:
        assert strip_markup("<strong>Shaffer &amp; Ginsberg</strong><br/>") == "Shaffer & Ginsberg"

    def test_keeps_line_structure(self) -> None:
        assert strip_markup("a<br/>\nb") == "a\nb"


class TestParseBounds:
    @pytest.mark.parametrize(
        "range_text,expected",
        [
            ("• 50-150 μV²: Normal range for awake adults", (50.0, 150.0)),
            ("• 200-1,200 ms²: Adequate sympathetic activity", (200.0, 1200.0)),
            ("• 1,000-5,000 ms²: Normal total HRV power", (1000.0, 5000.0)),
            ("• -0.1 to 0.1: Balanced hemispheric activity", (-0.1, 0.1)),
            ("• -0.3 to -0.1: Right hemisphere dominance", (-0.3, -0.1)),
            ("1.8 - 2.4", (1.8, 2.4)),
            ("0.18 - 0.22 (normal tension state)", (0.18, 0.22)),
            ("850-1150 μV²", (850.0, 1150.0)),
        ],
    )
    def test_extracts_numeric_bounds(self, range_text: str, expected: tuple[float, float]) -> None:
        assert parse_bounds(range_text) == pytest.approx(expected)

    def test_bullet_range_wins_over_earlier_bare_range(self) -> None:
        assert parse_bounds("see 0.5-0.9 below • 1-2 units: canonical") == (1.0, 2.0)

    def test_tilde_separator_is_not_a_range(self) -> None:
        assert parse_bounds("-0.1 ~ 0.1 (balanced state)") is None

    def test_text_without_numbers_is_not_a_range(self) -> None:
        assert parse_bounds("Not documented") is None

    @given(
        low=st.integers(min_value=-10_000, max_value=10_000),
        high=st.integers(min_value=-10_000, max_value=10_000),
    )
    def test_thousands_separators_round_trip(self, low: int, high: int) -> None:
        """Property: any pair of integers written with separators parses back."""
        bounds = parse_bounds(f"• {low:,}-{high:,} ms: label")
        assert bounds == (float(low), float(high))


class TestExtractRangeText:
    def test_takes_first_line_of_section(self) -> None:
        text = "Normal Range:\n    • 60-100 BPM: Normal range\n    • Below 60 BPM: Bradycardia"
        assert extract_range_text(text) == "• 60-100 BPM: Normal range"

    def test_inline_section(self) -> None:
        assert extract_range_text("Normal Range: 1.8 - 2.4\nInterpretation:") == "1.8 - 2.4"

    def test_missing_section(self) -> None:
        assert extract_range_text("Classification Criteria:\n• 0.0-0.1g: Stationary") is None


class TestParseInterpretations:
    def test_routes_bullets_by_pre_colon_fragment(self) -> None:
        text = (
            "Interpretation:\n"
            "• 200-1,200 ms²: Normal sympathetic activity\n"
            "• Below 200 ms²: Excessive rest\n"
            "• Above 1,200 ms²: Stress or tension\n"
            "Reference: Task Force"
        )
        interpretations = parse_interpretations(text)
        assert interpretations.normal == "Normal sympathetic activity"
        assert interpretations.below == "Excessive rest"
        assert interpretations.above == "Stress or tension"

    def test_first_line_per_branch_wins(self) -> None:
        normal_range = get_normal_range("HRV (ms)")
        assert normal_range is not None
        assert normal_range.interpretations.normal == "Normal variability (young adults)"
        assert normal_range.interpretations.above == "Excellent cardiovascular health and resilience"

    def test_semicolon_separated_single_line(self) -> None:
        info = lookup_range("Cognitive Load")
        assert info is not None
        assert info.interpretations.below == "Low engagement"
        assert info.interpretations.above == "High cognitive load"
        assert info.interpretations.normal == ""

    def test_unbulleted_block_becomes_normal_text(self) -> None:
        info = lookup_range("Heart Rate (BPM)")
        assert info is not None
        assert info.interpretations.normal == (
            "Basic cardiovascular health indicator, affected by exercise, stress and medication"
        )
        assert info.interpretations.below == ""
        assert info.interpretations.above == ""

    def test_colon_less_line_routes_by_keyword(self) -> None:
        text = "Interpretation:\n• 1-2 units: In range\n• Values below one suggest fatigue\n• Above two is rare\n"
        interpretations = parse_interpretations(text)

        assert interpretations.normal == "In range"
        assert interpretations.below == "Values below one suggest fatigue"
        assert interpretations.above == "Above two is rare"

    def test_colon_less_numeric_line_is_not_normal(self) -> None:
        interpretations = parse_interpretations("Interpretation:\n• Typical values 1-2 units\n• Below 1: Fatigue\n")
        assert interpretations.normal == ""
        assert interpretations.below == "Fatigue"

    def test_missing_section_yields_empty_interpretations(self) -> None:
        interpretations = parse_interpretations("Normal Range: 1-2")
        assert (interpretations.normal, interpretations.below, interpretations.above) == ("", "", "")


class TestParseGuide:
    def test_parses_catalog_guide(self) -> None:
        normal_range = get_normal_range("LF")
        assert normal_range == NormalRange(
            min=200.0,
            max=1200.0,
            interpretations=normal_range.interpretations,
            range_text="• 200-1,200 ms²: Adequate sympathetic activity (study mean: 519±291 ms²)",
        )
        assert normal_range.interpretations.below == "Excessive rest"

    def test_signed_bounds(self) -> None:
        normal_range = get_normal_range("Hemispheric Balance")
        assert normal_range is not None
        assert (normal_range.min, normal_range.max) == pytest.approx((-0.1, 0.1))

    def test_bare_range(self) -> None:
        normal_range = get_normal_range("Focus")
        assert normal_range is not None
        assert (normal_range.min, normal_range.max) == pytest.approx((1.8, 2.4))

    @pytest.mark.parametrize(
        "metric_name,expected",
        [
            ("Vascular Tone", (70.0, 90.0)),
            ("Cardiac Efficiency", (70.0, 100.0)),
            ("Movement Intensity", (0.1, 0.5)),
            ("Movement Quality", (0.7, 0.9)),
            ("Stability", (70.0, 100.0)),
            ("Intensity", (0.0, 25.0)),
            ("Balance", (80.0, 100.0)),
            ("Average Movement", (0.0, 0.1)),
            ("Standard Deviation Movement", (0.0, 0.1)),
            ("Max Movement", (0.0, 0.5)),
        ],
    )
    def test_movement_and_cardiac_guides(self, metric_name: str, expected: tuple[float, float]) -> None:
        normal_range = get_normal_range(metric_name)
        assert normal_range is not None
        assert (normal_range.min, normal_range.max) == pytest.approx(expected)

    def test_inverted_range_is_rejected(self) -> None:
        assert parse_guide("Backwards", "<strong>Normal Range:</strong> 10-5<br/>") is None

    def test_unparsable_range_is_absent(self) -> None:
        assert get_normal_range("L-R Balance") is None

    def test_guide_without_range_section_is_absent(self) -> None:
        assert get_normal_range("Activity State") is None

    def test_unknown_metric_is_absent(self) -> None:
        assert get_normal_range("Pulse Wave Velocity") is None


class TestLookupRange:
    def test_returns_range_text_and_interpretations(self) -> None:
        info = lookup_range("BPM")
        assert info is not None
        assert info.name == "BPM"
        assert info.range_text == "• 60-100 BPM: Normal range"
        assert info.interpretations.below == "Athletic conditioning or possible bradycardia"

    def test_unparsable_range_still_has_text(self) -> None:
        info = lookup_range("L-R Balance")
        assert info is not None
        assert info.range_text == "-0.1 ~ 0.1 (balanced state)"
        assert info.interpretations.below == "Creative thinking (right brain dominance)"

    def test_missing_section_reports_not_specified(self) -> None:
        info = lookup_range("Activity State")
        assert info is not None
        assert info.range_text == NOT_SPECIFIED

    def test_unknown_metric(self) -> None:
        assert lookup_range("not-a-metric") is None


class TestRangeTable:
    def test_table_is_cached(self) -> None:
        assert build_range_table() is build_range_table()

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            build_range_table()["BPM"] = NormalRange(min=0, max=1)  # type: ignore[index]

    def test_table_matches_per_call_parsing(self) -> None:
        table = build_range_table()
        for metric_name in metric_names():
            assert table.get(metric_name) == get_normal_range(metric_name)

    def test_every_parsed_range_is_ordered(self) -> None:
        for normal_range in build_range_table().values():
            assert normal_range.min <= normal_range.max

    def test_catalog_guides_are_exposed_as_models(self) -> None:
        guide = get_guide("SDNN")
        assert guide is not None
        assert guide.raw_text == INDEX_GUIDES["SDNN"]
        assert get_guide("nope") is None
