"""
End-to-end walkthrough of the clinical metrics engine.

This script shows:
1. Configuration loading
2. Range classification of a sample measurement set
3. Composite health scores
4. RR analysis from measured and from synthesized intervals

Run with: uv run python demo_engine.py
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from clinical_metrics import assess, build_rr_analysis, compute_health_scores
from clinical_metrics.config import get_config, print_config_summary
from clinical_metrics.domain.models import HRVSummary, RRAnalysis, ValueStatus
from clinical_metrics.observability import configure_logging

console = Console()

SAMPLE_MEASUREMENTS = {
    "BPM": 72.0,
    "RMSSD": 18.5,
    "SDNN": 54.0,
    "LF/HF": 3.4,
    "SpO2": 97.0,
    "Hemispheric Balance": -0.05,
    "Focus": 2.7,
    "L-R Balance": 0.02,
    "Pulse Wave Velocity": 7.1,
}

MEASURED_RR = [812.0, 845.0, 790.0, 860.0, 835.0, 801.0, 828.0, 877.0, 819.0, 806.0, 1310.0]

STATUS_STYLES = {
    ValueStatus.NORMAL: "green",
    ValueStatus.BELOW: "yellow",
    ValueStatus.ABOVE: "red",
    ValueStatus.UNKNOWN: "dim",
}


def show_classifications() -> None:
    table = Table(title="Range classification")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Normal range")
    table.add_column("Status")
    table.add_column("Interpretation")

    for metric_name, value in SAMPLE_MEASUREMENTS.items():
        result = assess(value, metric_name)
        style = STATUS_STYLES[result.status]
        table.add_row(
            metric_name,
            f"{value:g}",
            result.range_text or "-",
            f"[{style}]{result.status.value}[/{style}]",
            result.interpretation,
        )

    console.print(table)


def show_health_scores() -> None:
    scores = compute_health_scores(
        HRVSummary(stress_index=42.0, lf_hf_ratio=1.6, rmssd=38.0, sdnn=61.0)
    )

    table = Table(title="Health scores")
    table.add_column("Dimension")
    table.add_column("Raw value", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Level")
    for name, score in (("Stress", scores.stress), ("Autonomic", scores.autonomic), ("HRV", scores.hrv)):
        table.add_row(name, f"{score.raw_value:g}", str(score.score), score.level.value)

    console.print(table)
    console.print(Panel(f"Overall score: [bold]{scores.overall}[/bold]", expand=False))


def show_rr_analysis(title: str, analysis: RRAnalysis) -> None:
    series = analysis.series
    poincare = analysis.poincare
    occupied = [b for b in analysis.histogram if b.count]

    lines = [
        f"Source: [bold]{series.source.value}[/bold] ({len(series)} intervals)",
        f"Mean RR: {poincare.mean_rr:.1f} ms",
        f"SD1: {poincare.sd1:.1f} ms  SD2: {poincare.sd2:.1f} ms",
        f"Histogram: {len(analysis.histogram)} bins, {len(occupied)} occupied,"
        f" {sum(b.percentage for b in analysis.histogram):.1f}% of samples in range",
    ]
    if analysis.time_series:
        last = analysis.time_series[-1]
        lines.append(f"Duration: {last.time_seconds + last.rr_interval_ms / 1000:.1f} s")

    border = "yellow" if series.is_synthetic else "green"
    console.print(Panel("\n".join(lines), title=title, border_style=border, expand=False))


def main() -> None:
    config = get_config()
    configure_logging(config.logging)
    print_config_summary()

    console.print(Panel.fit("Clinical metrics engine demo", style="bold blue"))

    show_classifications()
    show_health_scores()
    show_rr_analysis("Measured RR", build_rr_analysis(rr_intervals=MEASURED_RR))
    show_rr_analysis(
        "Synthetic RR",
        build_rr_analysis(heart_rate_bpm=68.0, rmssd=38.0, sdnn=61.0),
    )


if __name__ == "__main__":
    main()
