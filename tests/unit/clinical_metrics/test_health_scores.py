"""
Tests for composite health scores in `clinical_metrics/services/health_scores.py`.

Covers:
- Anchor points and monotonicity of the stress curve
- The discontinuous autonomic balance curve
- Weighted HRV score
- Rounding (half-up, overall from unrounded subscores) and tiering
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clinical_metrics.domain.models import BalanceLevel, HRVSummary, WellnessLevel
from clinical_metrics.services.health_scores import (
    autonomic_balance_score,
    balance_level,
    compute_health_scores,
    hrv_score,
    stress_score,
    wellness_level,
)

finite = st.floats(min_value=-1_000.0, max_value=1_000.0, allow_nan=False)
any_float = st.floats()


class TestStressScore:
    @pytest.mark.parametrize(
        "stress_index,expected",
        [(0.0, 100.0), (30.0, 100.0), (40.0, 90.0), (50.0, 80.0), (60.0, 40.0), (70.0, 0.0), (95.0, 0.0)],
    )
    def test_anchor_points(self, stress_index: float, expected: float) -> None:
        assert stress_score(stress_index) == pytest.approx(expected)

    @given(a=st.floats(min_value=0.0, max_value=120.0), b=st.floats(min_value=0.0, max_value=120.0))
    def test_non_increasing(self, a: float, b: float) -> None:
        low, high = sorted((a, b))
        assert stress_score(low) >= stress_score(high)


class TestAutonomicBalanceScore:
    @pytest.mark.parametrize(
        "ratio,expected",
        [(1.0, 100.0), (0.5, 75.0), (1.5, 75.0), (2.0, 50.0), (0.4, 38.0), (2.1, 28.0), (0.0, 30.0), (5.0, 0.0)],
    )
    def test_piecewise_values(self, ratio: float, expected: float) -> None:
        assert autonomic_balance_score(ratio) == pytest.approx(expected)

    def test_branches_do_not_meet_at_the_boundary(self) -> None:
        assert autonomic_balance_score(2.0) - autonomic_balance_score(2.0001) > 20
        assert autonomic_balance_score(0.5) - autonomic_balance_score(0.4999) > 30

    @given(ratio=finite)
    def test_never_negative(self, ratio: float) -> None:
        assert autonomic_balance_score(ratio) >= 0.0


class TestHrvScore:
    @pytest.mark.parametrize(
        "rmssd,sdnn,expected",
        [(20.0, 30.0, 50.0), (80.0, 100.0, 100.0), (90.0, 120.0, 100.0), (0.0, 0.0, 0.0), (35.0, 47.5, 62.5)],
    )
    def test_weighted_components(self, rmssd: float, sdnn: float, expected: float) -> None:
        assert hrv_score(rmssd, sdnn) == pytest.approx(expected)

    def test_rmssd_dominates(self) -> None:
        assert hrv_score(80.0, 0.0) == pytest.approx(70.0)
        assert hrv_score(0.0, 100.0) == pytest.approx(30.0)


class TestLevels:
    @pytest.mark.parametrize(
        "score,expected",
        [(100.0, WellnessLevel.EXCELLENT), (80.0, WellnessLevel.EXCELLENT), (79.9, WellnessLevel.GOOD),
         (60.0, WellnessLevel.GOOD), (40.0, WellnessLevel.FAIR), (39.9, WellnessLevel.POOR), (0.0, WellnessLevel.POOR)],
    )
    def test_wellness_tiers(self, score: float, expected: WellnessLevel) -> None:
        assert wellness_level(score) is expected

    @pytest.mark.parametrize(
        "score,expected",
        [(85.0, BalanceLevel.BALANCED), (65.0, BalanceLevel.SLIGHTLY_IMBALANCED),
         (45.0, BalanceLevel.IMBALANCED), (10.0, BalanceLevel.SEVERELY_IMBALANCED)],
    )
    def test_balance_tiers(self, score: float, expected: BalanceLevel) -> None:
        assert balance_level(score) is expected


class TestComputeHealthScores:
    def test_reference_example(self) -> None:
        scores = compute_health_scores(HRVSummary(stress_index=50.0, lf_hf_ratio=1.0, rmssd=20.0, sdnn=30.0))

        assert scores.stress.score == 80
        assert scores.stress.level is WellnessLevel.EXCELLENT
        assert scores.autonomic.score == 100
        assert scores.autonomic.level is BalanceLevel.BALANCED
        assert scores.hrv.score == 50
        assert scores.hrv.level is WellnessLevel.FAIR
        assert scores.overall == 77

    def test_raw_values_are_carried(self) -> None:
        scores = compute_health_scores(HRVSummary(stress_index=42.0, lf_hf_ratio=1.6, rmssd=38.0, sdnn=61.0))

        assert scores.stress.raw_value == 42.0
        assert scores.autonomic.raw_value == 1.6
        assert scores.hrv.raw_value == 38.0

    def test_accepts_plain_mapping(self) -> None:
        scores = compute_health_scores({"stress_index": 50.0, "lf_hf_ratio": 1.0, "rmssd": 20.0, "sdnn": 30.0})
        assert scores.overall == 77

    def test_missing_field_in_mapping_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            compute_health_scores({"stress_index": 50.0, "lf_hf_ratio": 1.0, "rmssd": 20.0})

    def test_rounds_half_up_and_averages_unrounded_subscores(self) -> None:
        # Subscores 100, 87.5 and 62.5: displayed as 100, 88 and 63
        scores = compute_health_scores(HRVSummary(stress_index=30.0, lf_hf_ratio=1.25, rmssd=35.0, sdnn=47.5))

        assert (scores.stress.score, scores.autonomic.score, scores.hrv.score) == (100, 88, 63)
        # 250 / 3 rounds to 83; averaging the displayed scores would give 84
        assert scores.overall == 83

    def test_level_uses_unrounded_score(self) -> None:
        # 79.6 displays as 80 but stays in the "good" tier
        scores = compute_health_scores(HRVSummary(stress_index=50.1, lf_hf_ratio=1.0, rmssd=20.0, sdnn=30.0))

        assert scores.stress.score == 80
        assert scores.stress.level is WellnessLevel.GOOD

    def test_nan_stress_index_scores_poor(self) -> None:
        scores = compute_health_scores(HRVSummary(stress_index=math.nan, lf_hf_ratio=1.0, rmssd=20.0, sdnn=30.0))

        assert scores.stress.score == 0
        assert scores.stress.level is WellnessLevel.POOR
        assert scores.overall == 50  # (0 + 100 + 50) / 3

    @pytest.mark.parametrize("rmssd,sdnn", [(math.nan, 30.0), (20.0, math.nan)])
    def test_nan_hrv_input_scores_poor(self, rmssd: float, sdnn: float) -> None:
        scores = compute_health_scores(HRVSummary(stress_index=50.0, lf_hf_ratio=1.0, rmssd=rmssd, sdnn=sdnn))

        assert scores.hrv.score == 0
        assert scores.hrv.level is WellnessLevel.POOR
        assert scores.overall == 60  # (80 + 100 + 0) / 3

    def test_nan_ratio_is_severely_imbalanced(self) -> None:
        scores = compute_health_scores(HRVSummary(stress_index=50.0, lf_hf_ratio=math.nan, rmssd=20.0, sdnn=30.0))

        assert scores.autonomic.score == 0
        assert scores.autonomic.level is BalanceLevel.SEVERELY_IMBALANCED

    @given(stress_index=any_float, lf_hf_ratio=any_float, rmssd=any_float, sdnn=any_float)
    def test_scores_stay_in_bounds(self, stress_index: float, lf_hf_ratio: float, rmssd: float, sdnn: float) -> None:
        """Property-based test: any inputs, NaN and infinities included, give scores in [0, 100]."""
        scores = compute_health_scores(
            HRVSummary(stress_index=stress_index, lf_hf_ratio=lf_hf_ratio, rmssd=rmssd, sdnn=sdnn)
        )

        for score in (scores.stress.score, scores.autonomic.score, scores.hrv.score, scores.overall):
            assert 0 <= score <= 100
