"""
Benchmark Report Generation

Produces JSON and Markdown reports from BenchmarkSummary objects.
"""
from __future__ import annotations

import json
from pathlib import Path

from .models import BenchmarkSummary


class ReportGenerator:
    """Generates JSON and Markdown benchmark reports."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def save_json(self, summary: BenchmarkSummary) -> Path:
        """Write full results as JSON."""
        path = self.output_dir / "benchmark_results.json"
        with open(path, "w") as f:
            json.dump(summary.to_dict(), f, indent=2)
        return path

    def generate_markdown(self, summary: BenchmarkSummary) -> Path:
        """Generate a Markdown report with comparison, profile and memory tables."""
        path = self.output_dir / "benchmark_report.md"

        lines = [
            "# Fibonacci Benchmark Report",
            "",
            f"**Timestamp:** {summary.timestamp}",
            f"**Duration:** {summary.duration:.1f}s",
            f"**Samples:** {summary.total_samples}",
        ]

        # ── A/B comparison ────────────────────────────────────────
        if summary.aggregates:
            lines.extend([
                "",
                "## Batch Comparison (SIMD vs Scalar)",
                "",
                "Both variants run the same routine; the ratio shows run-to-run variance.",
                "",
                "| Scenario | Runs | SIMD (ms) | Scalar (ms) | Speedup | Min | Max |",
                "|----------|------|-----------|-------------|---------|-----|-----|",
            ])
            for a in summary.aggregates:
                lines.append(
                    f"| {a.scenario} | {a.num_runs} | "
                    f"{a.avg_variant_a_ms:.3f} ± {a.std_variant_a_ms:.3f} | "
                    f"{a.avg_variant_b_ms:.3f} ± {a.std_variant_b_ms:.3f} | "
                    f"{a.avg_speedup:.2f}x | {a.min_speedup:.2f}x | {a.max_speedup:.2f}x |"
                )

        # ── Method profile ────────────────────────────────────────
        if summary.profile:
            lines.extend([
                "",
                "## Method Profile",
                "",
                "| Method | n | Iterations | Mean (ns) |",
                "|--------|---|------------|-----------|",
            ])
            for p in summary.profile:
                lines.append(f"| {p.method} | {p.n} | {p.iterations} | {p.mean_ns:,.0f} |")

        # ── Memory ────────────────────────────────────────────────
        if summary.memory:
            lines.extend([
                "",
                "## Memory Analysis",
                "",
                "| Method | n | Peak (bytes) | Peak (KiB) |",
                "|--------|---|--------------|------------|",
            ])
            for m in summary.memory:
                lines.append(f"| {m.method} | {m.n} | {m.peak_bytes:,} | {m.peak_kib:.1f} |")

        # ── Scaling ───────────────────────────────────────────────
        if summary.scaling:
            lines.extend([
                "",
                "## Scaling Analysis (Iterative vs Matrix)",
                "",
                "| n | Iterative (ns) | Matrix (ns) | Speedup |",
                "|---|----------------|-------------|---------|",
            ])
            for r in summary.scaling:
                lines.append(
                    f"| {r.n} | {r.iterative_ns:,.0f} | {r.matrix_ns:,.0f} | {r.speedup:.2f}x |"
                )

        with open(path, "w") as f:
            f.write("\n".join(lines) + "\n")

        return path
