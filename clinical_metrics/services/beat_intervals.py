"""
RR-interval analysis: Poincaré geometry, histogram binning, time-series
projection and deterministic synthesis of RR series from summary statistics.

Every function is stateless and total. Degenerate input (too few samples,
non-positive heart rate) produces an empty or zeroed result rather than an
exception, so chart consumers always get something renderable. Non-finite
intervals are dropped before any analysis.
"""

import math
from collections.abc import Sequence

import structlog

from clinical_metrics.domain.models import (
    Ellipse,
    HistogramBin,
    IntervalSource,
    PoincarePlot,
    PoincarePoint,
    RRIntervalSeries,
    TimeSeriesPoint,
)

logger = structlog.get_logger(__name__)

MS_PER_MINUTE = 60_000.0
POINCARE_ELLIPSE_ANGLE = 45.0

# Physiological clamp for synthesized intervals (ms)
MIN_SYNTHETIC_RR_MS = 400.0
MAX_SYNTHETIC_RR_MS = 1200.0
DEFAULT_RMSSD_MS = 35.0
DEFAULT_SDNN_MS = 65.0
DEFAULT_SYNTHETIC_COUNT = 100

DEFAULT_BIN_MS = 10.0
DEFAULT_HISTOGRAM_LOWER_MS = 550.0
DEFAULT_HISTOGRAM_UPPER_MS = 1250.0

RRInput = Sequence[float] | RRIntervalSeries


def _intervals(rr: RRInput) -> list[float]:
    values = rr.intervals if isinstance(rr, RRIntervalSeries) else [float(value) for value in rr]
    intervals = [value for value in values if math.isfinite(value)]
    if len(intervals) != len(values):
        logger.debug("rr_non_finite_dropped", dropped=len(values) - len(intervals))
    return intervals


def compute_poincare(rr: RRInput) -> PoincarePlot:
    """
    Poincaré plot of RR(i) against RR(i+1).

    SD1 is the dispersion across the identity line (short-term variability),
    SD2 the dispersion along it (long-term variability). The ellipse is
    centred on the mean RR with radii 2*SD2 and 2*SD1 and a fixed 45 degree
    orientation.
    """
    intervals = _intervals(rr)
    n = len(intervals)
    if n < 2:
        return PoincarePlot()

    pairs = list(zip(intervals[:-1], intervals[1:]))
    mean_rr = sum(intervals) / n

    sd1_sum = sum(((following - current) / math.sqrt(2)) ** 2 for current, following in pairs)
    sd2_sum = sum(((following + current) / 2 - mean_rr) ** 2 for current, following in pairs)
    sd1 = math.sqrt(sd1_sum / (n - 1))
    sd2 = math.sqrt(sd2_sum / (n - 1)) * math.sqrt(2)

    return PoincarePlot(
        points=[PoincarePoint(x=current, y=following) for current, following in pairs],
        sd1=sd1,
        sd2=sd2,
        mean_rr=mean_rr,
        ellipse=Ellipse(
            cx=mean_rr,
            cy=mean_rr,
            rx=sd2 * 2,
            ry=sd1 * 2,
            angle=POINCARE_ELLIPSE_ANGLE,
        ),
    )


def _seeded_random(seed: int, index: int) -> float:
    # Sine hash: cheap and reproducible, not suitable for anything statistical
    x = math.sin((seed + index) * 12.9898) * 43758.5453
    return x - math.floor(x)


def synthesize_rr_intervals(
    heart_rate_bpm: float,
    rmssd: float | None = None,
    sdnn: float | None = None,
    count: int = DEFAULT_SYNTHETIC_COUNT,
) -> RRIntervalSeries:
    """
    Generate a plausible RR series around 60000 / heart_rate_bpm.

    Three components are summed onto the mean interval: short-term jitter
    scaled by RMSSD, a slow sinusoid (period ~63 samples) scaled by SDNN / 4,
    and a respiratory sinusoid (period ~31 samples) scaled by RMSSD / 3.
    The jitter is seeded from the heart rate, so identical inputs always give
    identical series. Missing or zero RMSSD/SDNN fall back to 35/65 ms.

    The result is tagged synthetic and must never be presented as measured.
    """
    if not heart_rate_bpm or not math.isfinite(heart_rate_bpm) or heart_rate_bpm <= 0:
        logger.debug("rr_synthesis_skipped", heart_rate_bpm=heart_rate_bpm)
        return RRIntervalSeries(intervals=[], source=IntervalSource.SYNTHETIC)

    mean_rr = MS_PER_MINUTE / heart_rate_bpm
    seed = math.floor(heart_rate_bpm * 1000) % 1000
    rmssd_value = rmssd or DEFAULT_RMSSD_MS
    sdnn_value = sdnn or DEFAULT_SDNN_MS

    intervals: list[float] = []
    for i in range(max(0, count)):
        short_term = (_seeded_random(seed, i * 2) - 0.5) * rmssd_value
        long_term = math.sin(i / 10) * (sdnn_value / 4)
        respiratory = math.sin(i / 5) * (rmssd_value / 3)
        rr_interval = mean_rr + short_term + long_term + respiratory
        intervals.append(max(MIN_SYNTHETIC_RR_MS, min(MAX_SYNTHETIC_RR_MS, rr_interval)))

    logger.debug(
        "rr_series_synthesized",
        heart_rate_bpm=heart_rate_bpm,
        count=len(intervals),
        rmssd_ms=rmssd_value,
        sdnn_ms=sdnn_value,
    )
    return RRIntervalSeries(intervals=intervals, source=IntervalSource.SYNTHETIC)


def prepare_time_series(rr: RRInput) -> list[TimeSeriesPoint]:
    """Project RR intervals onto a cumulative time axis (seconds) with instantaneous heart rate."""
    points: list[TimeSeriesPoint] = []
    elapsed_ms = 0.0
    for rr_interval in _intervals(rr):
        heart_rate = MS_PER_MINUTE / rr_interval if rr_interval > 0 else 0.0
        points.append(
            TimeSeriesPoint(
                time_seconds=elapsed_ms / 1000.0,
                rr_interval_ms=rr_interval,
                heart_rate_bpm=heart_rate,
            )
        )
        elapsed_ms += rr_interval
    return points


def build_histogram(
    rr: RRInput,
    bin_ms: float = DEFAULT_BIN_MS,
    lower: float = DEFAULT_HISTOGRAM_LOWER_MS,
    upper: float = DEFAULT_HISTOGRAM_UPPER_MS,
) -> list[HistogramBin]:
    """
    Fixed-axis RR histogram.

    One bin per `bin_ms` step from `lower` to `upper` inclusive, empty bins
    included so chart axes stay stable. Samples outside [lower, upper] are
    not counted, but percentages are still taken over the full input length,
    so they need not sum to 100.
    """
    intervals = _intervals(rr)
    bin_count = int(math.floor((upper - lower) / bin_ms)) + 1
    counts = [0] * bin_count

    for rr_interval in intervals:
        if lower <= rr_interval <= upper:
            index = min(int(math.floor((rr_interval - lower) / bin_ms)), bin_count - 1)
            counts[index] += 1

    total = len(intervals)
    return [
        HistogramBin(
            interval_ms=lower + index * bin_ms,
            count=count,
            percentage=(count / total) * 100.0 if total else 0.0,
        )
        for index, count in enumerate(counts)
    ]
