"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
- The range catalog is embedded reference data and is never configured here
"""

import os
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator


class AnalyzerConfig(BaseModel):
    """Defaults for RR-interval analysis and synthesis."""

    histogram_bin_ms: float = Field(default=10.0, gt=0.0, description="Histogram bin width")
    histogram_lower_ms: float = Field(default=550.0, ge=0.0, description="Lower edge of the histogram scan")
    histogram_upper_ms: float = Field(default=1250.0, gt=0.0, description="Upper edge of the histogram scan")

    synthetic_sample_count: int = Field(
        default=100, ge=0, description="Number of RR intervals to synthesize"
    )
    default_rmssd_ms: float = Field(
        default=35.0, gt=0.0, description="RMSSD used for synthesis when none was measured"
    )
    default_sdnn_ms: float = Field(
        default=65.0, gt=0.0, description="SDNN used for synthesis when none was measured"
    )

    @model_validator(mode="after")
    def histogram_window_ordered(self) -> "AnalyzerConfig":
        if self.histogram_lower_ms >= self.histogram_upper_ms:
            raise ValueError("histogram_lower_ms must be below histogram_upper_ms")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class EngineConfig(BaseModel):
    """Main configuration combining all subsystems."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "EngineConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> EngineConfig:
    """Load configuration from environment variables with validation."""
    # Load environment variables from .env file
    load_dotenv()

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        v = val.strip().upper()
        return cast(
            Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO",
        )

    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    analyzer_config = AnalyzerConfig(
        histogram_bin_ms=float(os.getenv("HISTOGRAM_BIN_MS", "10")),
        histogram_lower_ms=float(os.getenv("HISTOGRAM_LOWER_MS", "550")),
        histogram_upper_ms=float(os.getenv("HISTOGRAM_UPPER_MS", "1250")),
        synthetic_sample_count=int(os.getenv("SYNTHETIC_SAMPLE_COUNT", "100")),
        default_rmssd_ms=float(os.getenv("DEFAULT_RMSSD_MS", "35")),
        default_sdnn_ms=float(os.getenv("DEFAULT_SDNN_MS", "65")),
    )

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return EngineConfig(
        environment=environment,
        debug=debug,
        analyzer=analyzer_config,
        logging=logging_config,
    )


@lru_cache
def get_config() -> EngineConfig:
    """Get cached engine configuration."""
    return load_config_from_env()


def print_config_summary() -> None:
    """Print configuration summary for debugging."""
    config = get_config()

    print("\nCONFIGURATION SUMMARY")
    print(f"Environment: {config.environment}")
    print(f"Debug Mode: {config.debug}")
    print(f"Log Level: {config.logging.level}")

    print("\nRR ANALYSIS")
    print(
        f"Histogram: {config.analyzer.histogram_lower_ms:g}-{config.analyzer.histogram_upper_ms:g} ms"
        f" in {config.analyzer.histogram_bin_ms:g} ms bins"
    )
    print(f"Synthetic Samples: {config.analyzer.synthetic_sample_count}")
    print(
        f"Synthesis Defaults: RMSSD {config.analyzer.default_rmssd_ms:g} ms,"
        f" SDNN {config.analyzer.default_sdnn_ms:g} ms"
    )


if __name__ == "__main__":
    print_config_summary()
