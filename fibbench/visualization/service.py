"""
Report Viewer Service

Orchestrates the report pipeline:
    load_datasets       → three CSV files read concurrently
    ChartGenerator      → one line chart per dataset
    metrics             → one summary line per dataset
    DashboardGenerator  → a single tabbed HTML page

A dataset that fails to load becomes a placeholder panel; the other panels
are built as usual.
"""
import asyncio
import logging
from html import escape
from pathlib import Path
from typing import Dict, Optional, Union

from fibbench.data import DATASETS, DatasetResult, load_datasets
from fibbench.demo import DemoViewState
from fibbench.metrics import convergence_error, count_exact_values, largest_exact_index

from .charts import ChartGenerator
from .dashboard import DashboardGenerator
from .models import PanelData, ReportViewState
from .static_charts import StaticChartGenerator

PLACEHOLDER_MESSAGE = "Data file not found. Run bin/generate_data.py first."


def complexity_summary(result: DatasetResult) -> str:
    rows = result.rows
    return (
        f"<strong>Data Points:</strong> {len(rows)} measurements "
        f"from n={escape(rows[0].get('n', '?'))} to n={escape(rows[-1].get('n', '?'))}"
    )


def binet_summary(result: DatasetResult) -> str:
    largest = largest_exact_index(result.rows)
    return (
        f"<strong>Accuracy:</strong> Binet formula is exact for "
        f"{count_exact_values(result.rows)} values "
        f"(n ≤ {largest if largest is not None else '-'})"
    )


def golden_summary(result: DatasetResult) -> str:
    rows = result.rows
    return (
        f"<strong>Convergence:</strong> Error from φ at "
        f"n={escape(rows[-1].get('n', '?'))}: {convergence_error(rows)}"
    )


SUMMARIES = {
    "complexity": complexity_summary,
    "binet": binet_summary,
    "golden": golden_summary,
}


class ReportViewerService:
    """Builds report panels from the dataset directory and renders them."""

    def __init__(
        self,
        data_dir: Union[str, Path],
        chart_generator: Optional[ChartGenerator] = None,
    ):
        self.data_dir = Path(data_dir)
        self.charts = chart_generator or ChartGenerator()
        self.logger = logging.getLogger(__name__)

        self._chart_builders = {
            "complexity": self.charts.complexity_chart,
            "binet": self.charts.binet_chart,
            "golden": self.charts.golden_ratio_chart,
        }

    # ─── Panels ──────────────────────────────────────────────────────────

    def build_panel(self, result: DatasetResult) -> PanelData:
        """Turn one load result into a chart and summary, or a placeholder."""
        spec = DATASETS[result.name]
        if not result.ok:
            self.logger.error("Error loading %s data: %s", result.name, result.error)
            return PanelData(
                key=result.name,
                title=spec.title,
                ok=False,
                summary=PLACEHOLDER_MESSAGE,
                error=result.error,
            )

        rows = result.rows
        if not rows:
            self.logger.warning("%s contains no data rows", spec.filename)
            return PanelData(
                key=result.name,
                title=spec.title,
                ok=True,
                summary=f"No data rows in {spec.filename}.",
            )

        return PanelData(
            key=result.name,
            title=spec.title,
            ok=True,
            summary=SUMMARIES[result.name](result),
            chart_html=self._chart_builders[result.name](rows),
            row_count=len(rows),
        )

    async def collect_async(self) -> Dict[str, PanelData]:
        """Load every dataset concurrently and build its panel."""
        results = await load_datasets(self.data_dir)
        return {name: self.build_panel(results[name]) for name in DATASETS}

    def collect(self) -> Dict[str, PanelData]:
        return asyncio.run(self.collect_async())

    # ─── Rendering ───────────────────────────────────────────────────────

    def render_html(
        self,
        panels: Dict[str, PanelData],
        view_state: Optional[ReportViewState] = None,
    ) -> str:
        """Assemble the tabbed report page."""
        view_state = view_state or ReportViewState()
        dash = DashboardGenerator("Fibonacci Benchmark Report")

        for key, panel in panels.items():
            dash.start_section(panel.title, f"tab-{key}", active=key == view_state.active_tab)
            if panel.chart_html:
                dash.add_charts([panel.chart_html])
            dash.add_note(panel.summary)
            dash.end_section()

        return dash.generate()

    def generate_report(
        self,
        output_file: Union[str, Path] = "output/report.html",
        view_state: Optional[ReportViewState] = None,
    ) -> str:
        """
        Load the datasets, render the report and write it to ``output_file``.

        Returns:
            Path to the generated HTML file.
        """
        self.logger.info("Generating report from %s", self.data_dir)
        panels = self.collect()
        failed = [p.key for p in panels.values() if not p.ok]
        if failed:
            self.logger.warning("Report generated with missing datasets: %s", ", ".join(failed))

        return _write_html(self.render_html(panels, view_state), output_file, self.logger)


def render_demo_html(state: DemoViewState, static: bool = False) -> str:
    """
    Render the demo results table and benchmark panel.

    Hidden panels are omitted. With ``static`` the speedup chart is a
    Matplotlib PNG instead of a Chart.js snippet.
    """
    dash = DashboardGenerator("Fibonacci Demo")

    if state.results_visible:
        dash.start_section("Results", "tab-results", active=True)
        dash.add_table(
            ["n", "F(n)", "Digits"],
            [[row.n, row.display, len(row.digits)] for row in state.results],
            cell_titles=[["", row.digits if row.truncated else "", ""] for row in state.results],
        )
        dash.end_section()

    if state.benchmark_visible:
        sample = state.benchmark
        dash.start_section("Benchmark", "tab-benchmark", active=not state.results_visible)
        dash.add_kpis(
            {
                f"{sample.variant_a_label} (ms)": f"{sample.variant_a_ms:.3f}",
                f"{sample.variant_b_label} (ms)": f"{sample.variant_b_ms:.3f}",
                "Speedup": f"{sample.speedup_ratio:.2f}x",
            },
            {"Speedup": "success"},
        )
        if static:
            chart = StaticChartGenerator().speedup_bars(sample)
        else:
            chart = ChartGenerator().speedup_chart(sample)
        dash.add_charts([chart])
        dash.add_metrics_box(
            {"Indices": len(sample.indices), "Iterations": sample.iterations},
            title="Run",
        )
        dash.end_section()

    return dash.generate()


def write_demo_html(
    state: DemoViewState,
    output_file: Union[str, Path],
    static: bool = False,
) -> str:
    return _write_html(render_demo_html(state, static), output_file, logging.getLogger(__name__))


def _write_html(html: str, output_file: Union[str, Path], logger: logging.Logger) -> str:
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)

    file_size_kb = output_path.stat().st_size / 1024
    logger.info("HTML written: %s (%.0f KB)", output_path, file_size_kb)
    return str(output_path)
