"""
Normal-range extraction from the embedded clinical guides.

A guide states its canonical range on the first line of its "Normal Range:"
section, usually as a bullet such as ``• 200-1,200 ms²: ...``. Later bullets
restate sub-ranges (age groups, severity tiers) and must never win over the
canonical one, so only that first line is searched, bullet form first.

Parsing never raises: an unknown metric or a guide without a numeric range
yields None, which callers treat as an unknown classification.
"""

import html
import re
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

import structlog

from clinical_metrics.catalog.index_guides import INDEX_GUIDES, get_guide
from clinical_metrics.domain.models import Interpretations, NormalRange, RangeInfo

logger = structlog.get_logger(__name__)

# Signed number with optional thousands separators: "-0.1", "1,200", "4,000.5"
_NUMBER = r"(-?[0-9][0-9,]*(?:\.[0-9]+)?)"
_SEPARATOR = r"\s*(?:-|to)\s*"

# "• 200-1,200 ms²: ..." -- bullet, bounds, optional unit, then the colon
BULLET_RANGE_PATTERN = re.compile(r"•\s*" + _NUMBER + _SEPARATOR + _NUMBER + r"(?:\s*[^0-9:]+)?:")
# "1.8 - 2.4", "-0.1 to 0.1", "850-1150 μV²"
BARE_RANGE_PATTERN = re.compile(_NUMBER + _SEPARATOR + _NUMBER)

_TAG_PATTERN = re.compile(r"<[^>]*>")
_RANGE_LINE_PATTERN = re.compile(r"Normal Range:\s*([^\n]*)")
_INTERPRETATION_PATTERN = re.compile(r"Interpretation:\s*(.*?)(?=Reference:|$)", re.DOTALL)
_LINE_SPLIT_PATTERN = re.compile(r"[•\n;]")

NOT_SPECIFIED = "Not specified"


def strip_markup(text: str) -> str:
    """Remove markup tags and decode entities, keeping line structure."""
    return html.unescape(_TAG_PATTERN.sub("", text))


def _collapse(text: str) -> str:
    return " ".join(text.split())


def extract_range_text(plain_text: str) -> str | None:
    """First line of the Normal Range section, or None if the guide has none."""
    match = _RANGE_LINE_PATTERN.search(plain_text)
    if not match:
        return None
    return match.group(1).strip()


def _to_float(token: str) -> float:
    return float(token.replace(",", ""))


def parse_bounds(range_text: str) -> tuple[float, float] | None:
    """
    Extract (min, max) from a range line.

    The bulleted form is tried first; a bare ``<num>-<num>`` anywhere in the
    line is the fallback.
    """
    match = BULLET_RANGE_PATTERN.search(range_text) or BARE_RANGE_PATTERN.search(range_text)
    if not match:
        return None
    try:
        return _to_float(match.group(1)), _to_float(match.group(2))
    except ValueError:
        return None


def parse_interpretations(plain_text: str) -> Interpretations:
    """
    Split the Interpretation section into below/normal/above strings.

    Each bullet line is routed by the fragment before its colon: "below" and
    "above" win outright, otherwise a numeric range marks the normal branch.
    A line without a colon is routed only by "below"/"above" and keeps its
    whole text. The first line routed to a branch is kept. When nothing can
    be routed the whole section becomes the normal interpretation.
    """
    match = _INTERPRETATION_PATTERN.search(plain_text)
    if not match:
        return Interpretations()

    block = match.group(1)
    routed: dict[str, str] = {}

    for raw_line in _LINE_SPLIT_PATTERN.split(block):
        line = _collapse(raw_line)
        if not line:
            continue
        has_colon = ":" in line
        if has_colon:
            fragment, _, text = line.partition(":")
            text = text.strip()
        else:
            fragment, text = line, line
        fragment = fragment.lower()

        if "below" in fragment:
            branch = "below"
        elif "above" in fragment:
            branch = "above"
        elif has_colon and BARE_RANGE_PATTERN.search(fragment):
            branch = "normal"
        else:
            continue
        routed.setdefault(branch, text)

    if not routed:
        return Interpretations(normal=_collapse(block))
    return Interpretations(**routed)


def parse_guide(metric_name: str, guide_text: str) -> NormalRange | None:
    """Parse one guide into a NormalRange, or None if it states no usable numeric range."""
    plain_text = strip_markup(guide_text)
    range_text = extract_range_text(plain_text)

    bounds = parse_bounds(range_text) if range_text is not None else None
    if bounds is None:
        logger.debug("range_unparsable", metric=metric_name, range_text=range_text)
        return None

    minimum, maximum = bounds
    if minimum > maximum:
        logger.debug("range_inverted", metric=metric_name, min=minimum, max=maximum)
        return None

    return NormalRange(
        min=minimum,
        max=maximum,
        interpretations=parse_interpretations(plain_text),
        range_text=range_text or "",
    )


def get_normal_range(metric_name: str) -> NormalRange | None:
    """Parse the catalog guide for `metric_name` afresh."""
    guide = get_guide(metric_name)
    if guide is None:
        logger.debug("range_lookup_miss", metric=metric_name)
        return None
    return parse_guide(guide.metric_name, guide.raw_text)


def lookup_range(metric_name: str) -> RangeInfo | None:
    """
    Textual range summary for a catalog metric.

    Returns None only for metrics the catalog does not know; a guide without a
    Normal Range section reports its range as "Not specified".
    """
    guide = get_guide(metric_name)
    if guide is None:
        logger.debug("range_lookup_miss", metric=metric_name)
        return None

    plain_text = strip_markup(guide.raw_text)
    return RangeInfo(
        name=metric_name,
        range_text=extract_range_text(plain_text) or NOT_SPECIFIED,
        interpretations=parse_interpretations(plain_text),
    )


@lru_cache
def build_range_table() -> Mapping[str, NormalRange]:
    """Typed metric -> NormalRange table, built once from the catalog."""
    table: dict[str, NormalRange] = {}
    for metric_name, guide_text in INDEX_GUIDES.items():
        normal_range = parse_guide(metric_name, guide_text)
        if normal_range is not None:
            table[metric_name] = normal_range
    return MappingProxyType(table)
