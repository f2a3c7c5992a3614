"""
Engine services.

This package contains the range parser and classifier, the health score
calculator and the RR-interval analyzer.
"""

from .beat_intervals import (
    build_histogram,
    compute_poincare,
    prepare_time_series,
    synthesize_rr_intervals,
)
from .classifier import assess, classify, interpret
from .health_scores import (
    autonomic_balance_score,
    compute_health_scores,
    hrv_score,
    stress_score,
)
from .range_parser import build_range_table, get_normal_range, lookup_range
from .rr_report import build_rr_analysis

__all__ = [
    "assess",
    "autonomic_balance_score",
    "build_histogram",
    "build_range_table",
    "build_rr_analysis",
    "classify",
    "compute_health_scores",
    "compute_poincare",
    "get_normal_range",
    "hrv_score",
    "interpret",
    "lookup_range",
    "prepare_time_series",
    "stress_score",
    "synthesize_rr_intervals",
]
