"""
Assembles every RR chart dataset for one recording.

Measured intervals are used when there are any. Otherwise, if a mean heart
rate is known, a synthetic series is generated from it and tagged as such so
the presentation layer can label it.
"""

import structlog

from clinical_metrics.config import AnalyzerConfig, get_config
from clinical_metrics.domain.models import IntervalSource, RRAnalysis, RRIntervalSeries
from clinical_metrics.services.beat_intervals import (
    RRInput,
    build_histogram,
    compute_poincare,
    prepare_time_series,
    synthesize_rr_intervals,
)

logger = structlog.get_logger(__name__)


def select_rr_series(
    rr_intervals: RRInput | None = None,
    heart_rate_bpm: float | None = None,
    rmssd: float | None = None,
    sdnn: float | None = None,
    config: AnalyzerConfig | None = None,
) -> RRIntervalSeries:
    """Prefer measured intervals; fall back to a synthetic series, then to an empty one."""
    if isinstance(rr_intervals, RRIntervalSeries):
        if len(rr_intervals):
            return rr_intervals
    elif rr_intervals:
        return RRIntervalSeries(intervals=list(rr_intervals), source=IntervalSource.MEASURED)

    config = config or get_config().analyzer
    if heart_rate_bpm is not None and heart_rate_bpm > 0:
        return synthesize_rr_intervals(
            heart_rate_bpm,
            rmssd=rmssd or config.default_rmssd_ms,
            sdnn=sdnn or config.default_sdnn_ms,
            count=config.synthetic_sample_count,
        )

    logger.debug("rr_series_unavailable", heart_rate_bpm=heart_rate_bpm)
    return RRIntervalSeries(intervals=[], source=IntervalSource.MEASURED)


def build_rr_analysis(
    rr_intervals: RRInput | None = None,
    heart_rate_bpm: float | None = None,
    rmssd: float | None = None,
    sdnn: float | None = None,
    config: AnalyzerConfig | None = None,
) -> RRAnalysis:
    """Poincaré plot, time series and histogram for the best available RR series."""
    config = config or get_config().analyzer
    series = select_rr_series(rr_intervals, heart_rate_bpm, rmssd, sdnn, config)

    return RRAnalysis(
        series=series,
        poincare=compute_poincare(series),
        time_series=prepare_time_series(series),
        histogram=build_histogram(
            series,
            bin_ms=config.histogram_bin_ms,
            lower=config.histogram_lower_ms,
            upper=config.histogram_upper_ms,
        ),
    )
