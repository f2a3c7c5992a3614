"""
Classification of measured values against catalog normal ranges.

Both `classify` and `interpret` are total: an unknown metric, a guide without
a numeric range, or a NaN value all come back as `ValueStatus.UNKNOWN`
(and an empty interpretation) instead of raising.
"""

import math

import structlog

from clinical_metrics.catalog.index_guides import INDEX_GUIDES
from clinical_metrics.domain.models import MetricAssessment, NormalRange, ValueStatus
from clinical_metrics.services.range_parser import build_range_table

logger = structlog.get_logger(__name__)

# Used when the guide has no bullet text for the branch the value fell into
FALLBACK_INTERPRETATIONS: dict[ValueStatus, str] = {
    ValueStatus.NORMAL: "Within normal range",
    ValueStatus.BELOW: "Below normal range",
    ValueStatus.ABOVE: "Above normal range",
}


def _range_for(metric_name: str) -> NormalRange | None:
    normal_range = build_range_table().get(metric_name)
    if normal_range is None:
        logger.debug(
            "metric_range_unavailable",
            metric=metric_name,
            in_catalog=metric_name in INDEX_GUIDES,
        )
    return normal_range


def _status(value: float, normal_range: NormalRange | None) -> ValueStatus:
    if normal_range is None or math.isnan(value):
        return ValueStatus.UNKNOWN
    if value < normal_range.min:
        return ValueStatus.BELOW
    if value > normal_range.max:
        return ValueStatus.ABOVE
    return ValueStatus.NORMAL


def _interpretation(status: ValueStatus, normal_range: NormalRange | None) -> str:
    if normal_range is None or status is ValueStatus.UNKNOWN:
        return ""
    text = getattr(normal_range.interpretations, status.value)
    return text or FALLBACK_INTERPRETATIONS[status]


def classify(value: float, metric_name: str) -> ValueStatus:
    """Classify `value` as below, within or above the metric's normal range."""
    return _status(value, _range_for(metric_name))


def interpret(value: float, metric_name: str) -> str:
    """Clinical interpretation text for `value`; empty when the status is unknown."""
    normal_range = _range_for(metric_name)
    return _interpretation(_status(value, normal_range), normal_range)


def assess(value: float, metric_name: str) -> MetricAssessment:
    """Status, interpretation and range text for one value in a single lookup."""
    normal_range = _range_for(metric_name)
    status = _status(value, normal_range)
    return MetricAssessment(
        metric_name=metric_name,
        value=value,
        status=status,
        interpretation=_interpretation(status, normal_range),
        range_text=normal_range.range_text if normal_range is not None else None,
    )
