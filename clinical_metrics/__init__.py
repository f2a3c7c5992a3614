"""Clinical metrics engine.

Pure functions that classify physiological values against documented normal
ranges and derive heart-rate-variability scores and chart geometry. The
package holds no I/O and no shared mutable state.
"""

from .domain.models import IntervalSource, RRIntervalSeries, ValueStatus
from .services import (
    assess,
    autonomic_balance_score,
    build_histogram,
    build_range_table,
    build_rr_analysis,
    classify,
    compute_health_scores,
    compute_poincare,
    get_normal_range,
    hrv_score,
    interpret,
    lookup_range,
    prepare_time_series,
    stress_score,
    synthesize_rr_intervals,
)

__all__ = [
    "IntervalSource",
    "RRIntervalSeries",
    "ValueStatus",
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
