"""
Composite 0-100 health scores from HRV summary statistics.

Each dimension is a piecewise-linear map with an optimum and two flanking
slopes. Subscores are rounded independently for display, while the overall
score averages the unrounded subscores and rounds once. A NaN input scores 0
in its dimension.
"""

import math
from collections.abc import Mapping
from typing import Any

from clinical_metrics.domain.models import (
    BalanceLevel,
    HealthScore,
    HealthScores,
    HRVSummary,
    WellnessLevel,
)

# Tier cutoffs shared by every dimension, highest first
TIER_CUTOFFS = (80.0, 60.0, 40.0)

WELLNESS_TIERS = (WellnessLevel.EXCELLENT, WellnessLevel.GOOD, WellnessLevel.FAIR, WellnessLevel.POOR)
BALANCE_TIERS = (
    BalanceLevel.BALANCED,
    BalanceLevel.SLIGHTLY_IMBALANCED,
    BalanceLevel.IMBALANCED,
    BalanceLevel.SEVERELY_IMBALANCED,
)

OPTIMAL_LF_HF_RATIO = 1.0
HRV_RMSSD_WEIGHT = 0.7  # RMSSD is the more reliable statistic over short recordings
HRV_SDNN_WEIGHT = 0.3


def _clamp(score: float) -> float:
    # NaN scores land in the lowest tier
    if math.isnan(score):
        return 0.0
    return max(0.0, min(100.0, score))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def stress_score(stress_index: float) -> float:
    """
    Stress health score: 100 up to an index of 30, easing to 80 at 50, then
    falling steeply to 0 at 70.
    """
    if stress_index <= 30:
        return 100.0
    if stress_index >= 70:
        return 0.0
    if stress_index <= 50:
        return 100.0 - ((stress_index - 30.0) / 20.0) * 20.0
    return 80.0 - ((stress_index - 50.0) / 20.0) * 80.0


def autonomic_balance_score(lf_hf_ratio: float) -> float:
    """
    Autonomic balance score around an optimal LF/HF ratio of 1.0.

    Inside [0.5, 2.0] the score loses 50 points per unit of deviation;
    outside it starts from 50 and loses 20 per unit. The two branches do not
    meet at the boundary.
    """
    deviation = abs(lf_hf_ratio - OPTIMAL_LF_HF_RATIO)
    if lf_hf_ratio < 0.5 or lf_hf_ratio > 2.0:
        return max(0.0, 50.0 - deviation * 20.0)
    return max(0.0, 100.0 - deviation * 50.0)


def _rmssd_component(rmssd: float) -> float:
    if rmssd > 80:
        return 100.0
    if rmssd >= 20:
        return 50.0 + (rmssd - 20.0) / 60.0 * 50.0
    return rmssd / 20.0 * 50.0


def _sdnn_component(sdnn: float) -> float:
    if sdnn > 100:
        return 100.0
    if sdnn >= 30:
        return 50.0 + (sdnn - 30.0) / 70.0 * 50.0
    return sdnn / 30.0 * 50.0


def hrv_score(rmssd: float, sdnn: float) -> float:
    """Weighted HRV score: 70% RMSSD component (normal 20-80 ms), 30% SDNN (normal 30-100 ms)."""
    return HRV_RMSSD_WEIGHT * _rmssd_component(rmssd) + HRV_SDNN_WEIGHT * _sdnn_component(sdnn)


def _tier(score: float, tiers: tuple[Any, Any, Any, Any]) -> Any:
    for cutoff, level in zip(TIER_CUTOFFS, tiers):
        if score >= cutoff:
            return level
    return tiers[-1]


def wellness_level(score: float) -> WellnessLevel:
    return _tier(score, WELLNESS_TIERS)


def balance_level(score: float) -> BalanceLevel:
    return _tier(score, BALANCE_TIERS)


def compute_health_scores(summary: HRVSummary | Mapping[str, float]) -> HealthScores:
    """
    Score the stress, autonomic and HRV dimensions and their composite.

    Accepts an HRVSummary or any mapping with ``stress_index``,
    ``lf_hf_ratio``, ``rmssd`` and ``sdnn`` keys.
    """
    if not isinstance(summary, HRVSummary):
        summary = HRVSummary.model_validate(dict(summary))

    stress = _clamp(stress_score(summary.stress_index))
    autonomic = _clamp(autonomic_balance_score(summary.lf_hf_ratio))
    hrv = _clamp(hrv_score(summary.rmssd, summary.sdnn))

    return HealthScores(
        stress=HealthScore(
            score=_round_half_up(stress),
            level=wellness_level(stress),
            raw_value=summary.stress_index,
        ),
        autonomic=HealthScore(
            score=_round_half_up(autonomic),
            level=balance_level(autonomic),
            raw_value=summary.lf_hf_ratio,
        ),
        hrv=HealthScore(
            score=_round_half_up(hrv),
            level=wellness_level(hrv),
            raw_value=summary.rmssd,
        ),
        overall=_round_half_up((stress + autonomic + hrv) / 3.0),
    )
