"""
Domain models for the clinical metrics engine.

These models represent the engine's value objects and are framework-agnostic.
They use Pydantic for validation; everything the engine returns is frozen so
consumers can cache and share results freely.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValueStatus(str, Enum):
    """Where a measured value sits relative to its documented normal range."""

    NORMAL = "normal"
    BELOW = "below"
    ABOVE = "above"
    UNKNOWN = "unknown"


class WellnessLevel(str, Enum):
    """Qualitative tiers shared by the stress and HRV dimensions."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class BalanceLevel(str, Enum):
    """Qualitative tiers for the autonomic balance dimension."""

    BALANCED = "balanced"
    SLIGHTLY_IMBALANCED = "slightly_imbalanced"
    IMBALANCED = "imbalanced"
    SEVERELY_IMBALANCED = "severely_imbalanced"


class IntervalSource(str, Enum):
    """Provenance of an RR-interval series."""

    MEASURED = "measured"
    SYNTHETIC = "synthetic"


class MetricGuide(BaseModel):
    """Free-text clinical guide for one named metric."""

    model_config = ConfigDict(frozen=True)

    metric_name: str
    raw_text: str


class Interpretations(BaseModel):
    """Interpretation text for each side of a normal range (may be empty)."""

    model_config = ConfigDict(frozen=True)

    normal: str = ""
    below: str = ""
    above: str = ""


class NormalRange(BaseModel):
    """Numeric bounds parsed from a guide, with their interpretation strings."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    interpretations: Interpretations = Field(default_factory=Interpretations)
    range_text: str = Field(default="", description="First line of the guide's Normal Range section")

    @model_validator(mode="after")
    def min_not_above_max(self) -> "NormalRange":
        if self.min > self.max:
            raise ValueError(f"min {self.min} must not exceed max {self.max}")
        return self


class RangeInfo(BaseModel):
    """Textual range summary for a catalog metric."""

    model_config = ConfigDict(frozen=True)

    name: str
    range_text: str
    interpretations: Interpretations


class MetricAssessment(BaseModel):
    """Classification of one value, bundled for presentation consumers."""

    model_config = ConfigDict(frozen=True)

    metric_name: str
    value: float
    status: ValueStatus
    interpretation: str
    range_text: str | None = None


class HRVSummary(BaseModel):
    """Summary statistics the health scores are computed from."""

    model_config = ConfigDict(frozen=True)

    stress_index: float
    lf_hf_ratio: float = Field(description="LF/HF spectral power ratio")
    rmssd: float = Field(description="RMSSD in milliseconds")
    sdnn: float = Field(description="SDNN in milliseconds")


class HealthScore(BaseModel):
    """One scored dimension: display score, tier and the raw input it came from."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    level: WellnessLevel | BalanceLevel
    raw_value: float


class HealthScores(BaseModel):
    """The three scored dimensions plus their composite."""

    model_config = ConfigDict(frozen=True)

    stress: HealthScore
    autonomic: HealthScore
    hrv: HealthScore
    overall: int = Field(ge=0, le=100)


class RRIntervalSeries(BaseModel):
    """Ordered RR intervals in milliseconds, tagged with where they came from."""

    model_config = ConfigDict(frozen=True)

    intervals: list[float] = Field(default_factory=list)
    source: IntervalSource = IntervalSource.MEASURED

    @property
    def is_synthetic(self) -> bool:
        return self.source is IntervalSource.SYNTHETIC

    def __len__(self) -> int:
        return len(self.intervals)


class PoincarePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float  # RR(i)
    y: float  # RR(i+1)


class Ellipse(BaseModel):
    model_config = ConfigDict(frozen=True)

    cx: float = 0.0
    cy: float = 0.0
    rx: float = Field(default=0.0, ge=0.0)
    ry: float = Field(default=0.0, ge=0.0)
    angle: float = 45.0


class PoincarePlot(BaseModel):
    """Poincaré scatter with its SD1/SD2 descriptors and fitted ellipse."""

    model_config = ConfigDict(frozen=True)

    points: list[PoincarePoint] = Field(default_factory=list)
    sd1: float = Field(default=0.0, ge=0.0)
    sd2: float = Field(default=0.0, ge=0.0)
    mean_rr: float = 0.0
    ellipse: Ellipse = Field(default_factory=Ellipse)


class TimeSeriesPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    time_seconds: float
    rr_interval_ms: float
    heart_rate_bpm: float


class HistogramBin(BaseModel):
    model_config = ConfigDict(frozen=True)

    interval_ms: float = Field(description="Lower edge of the bin")
    count: int = Field(ge=0)
    percentage: float = Field(ge=0.0, le=100.0)


class RRAnalysis(BaseModel):
    """Every chart dataset derived from one RR series."""

    model_config = ConfigDict(frozen=True)

    series: RRIntervalSeries
    poincare: PoincarePlot
    time_series: list[TimeSeriesPoint]
    histogram: list[HistogramBin]
