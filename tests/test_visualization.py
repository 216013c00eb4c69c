"""
Unit Tests for fibbench.visualization

Tests for:
    - Chart.js snippet generation
    - Matplotlib PNG charts
    - Dashboard HTML generation and tabs
    - Report viewer panels, placeholders and summaries
    - Demo page rendering
"""

import base64
import json
import re

import pytest

from fibbench.benchmark import BenchmarkSample
from fibbench.data import DATASETS, DatasetResult, parse_csv
from fibbench.demo import DemoViewState, ResultRow
from fibbench.visualization import (
    DEFAULT_THEME,
    PLACEHOLDER_MESSAGE,
    ChartGenerator,
    ChartOutput,
    DashboardGenerator,
    ReportViewerService,
    ReportViewState,
    StaticChartGenerator,
    render_demo_html,
    write_demo_html,
)


def _chart_config(snippet: str) -> dict:
    """Extract the JSON config passed to ``new Chart``."""
    match = re.search(r"new Chart\(ctx, (\{.*\})\);", snippet, re.S)
    assert match, "no Chart.js config in snippet"
    return json.loads(match.group(1))


@pytest.fixture
def sample():
    return BenchmarkSample(variant_a_ms=2.0, variant_b_ms=3.0, indices=[10, 20], iterations=5)


# =============================================================================
# ColorTheme
# =============================================================================

class TestColorTheme:
    def test_dark_palette(self):
        assert DEFAULT_THEME.background == "#0f172a"
        assert DEFAULT_THEME.iterative == "#f59e0b"
        assert DEFAULT_THEME.simd == ["#667eea", "#764ba2"]

    def test_fill(self):
        assert DEFAULT_THEME.fill("#ff0000", 0.5) == "rgba(255, 0, 0, 0.5)"


# =============================================================================
# Chart.js charts
# =============================================================================

class TestChartGenerator:
    @pytest.fixture
    def charts(self):
        return ChartGenerator()

    def test_complexity_chart(self, charts, dataset_texts):
        rows = parse_csv(dataset_texts["complexity_comparison.csv"]).rows
        config = _chart_config(charts.complexity_chart(rows))
        assert config["type"] == "line"
        assert config["data"]["labels"] == ["10", "20", "30"]
        series = config["data"]["datasets"]
        assert [d["label"] for d in series] == ["Iterative (ns)", "Matrix (ns)"]
        assert series[0]["data"] == [120.0, 210.0, 305.0]

    def test_binet_chart_logarithmic(self, charts, dataset_texts):
        rows = parse_csv(dataset_texts["binet_accuracy.csv"]).rows
        config = _chart_config(charts.binet_chart(rows))
        assert config["options"]["scales"]["y"]["type"] == "logarithmic"
        assert config["data"]["datasets"][0]["data"][-1] == 2.0e-15

    def test_golden_chart_phi_line_and_range(self, charts, dataset_texts):
        rows = parse_csv(dataset_texts["golden_ratio_convergence.csv"]).rows
        config = _chart_config(charts.golden_ratio_chart(rows))
        phi_series = config["data"]["datasets"][1]
        assert phi_series["data"] == [1.618033988749895] * 4
        assert phi_series["borderDash"] == [5, 5]
        assert config["options"]["scales"]["y"]["min"] == 1.5
        assert config["options"]["scales"]["y"]["max"] == 2.0

    def test_non_numeric_cells_become_gaps(self, charts):
        rows = parse_csv("n,iterative_ns,matrix_ns\n1,abc,5\n2\n").rows
        series = _chart_config(charts.complexity_chart(rows))["data"]["datasets"]
        assert series[0]["data"] == [None, None]
        assert series[1]["data"] == [5.0, None]

    def test_empty_rows_give_no_chart(self, charts):
        assert charts.complexity_chart([]) is None
        assert charts.binet_chart([]) is None
        assert charts.golden_ratio_chart([]) is None

    def test_unique_canvas_ids(self, charts, dataset_texts):
        rows = parse_csv(dataset_texts["complexity_comparison.csv"]).rows
        ids = {re.search(r'<canvas id="([^"]+)"', charts.complexity_chart(rows)).group(1) for _ in range(3)}
        assert len(ids) == 3

    def test_speedup_chart_tooltip_injected(self, charts, sample):
        snippet = charts.speedup_chart(sample)
        assert "__FUNC_tooltip__" not in snippet
        assert "function(context)" in snippet
        assert "Speedup 1.50x" in snippet
        assert '"SIMD"' in snippet and '"Scalar"' in snippet


# =============================================================================
# Matplotlib charts
# =============================================================================

class TestStaticCharts:
    def test_speedup_bars_png(self, sample):
        chart = StaticChartGenerator().speedup_bars(sample)
        assert isinstance(chart, ChartOutput)
        png = base64.b64decode(chart.png_base64)
        assert png[:8] == b"\x89PNG\r\n\x1a\n"
        assert "2.000 ms" in chart.description

    def test_zero_times(self):
        chart = StaticChartGenerator().speedup_bars(BenchmarkSample(variant_a_ms=0.0, variant_b_ms=0.0))
        assert chart.png_base64

    def test_write_png(self, sample, tmp_path):
        gen = StaticChartGenerator()
        path = gen.write_png(gen.speedup_bars(sample), tmp_path / "charts" / "speedup.png")
        assert path.exists()
        assert path.read_bytes()[:4] == b"\x89PNG"


# =============================================================================
# Dashboard
# =============================================================================

class TestDashboardGenerator:
    def test_generate_contains_sections(self):
        dash = DashboardGenerator("Test Dashboard")
        dash.start_section("First", "first", active=True)
        dash.add_kpis({"Rows": 3}, {"Rows": "success"})
        dash.add_note("<strong>Note:</strong> hello")
        dash.end_section()
        dash.start_section("Second", "second")
        dash.add_table(["a", "b"], [[1, 2]])
        dash.add_metrics_box({"ratio": 1.5}, title="Stats")
        dash.end_section()

        html = dash.generate()
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Test Dashboard</title>" in html
        assert 'class="section tab-content active" id="first"' in html
        assert 'class="section tab-content" id="second"' in html
        assert 'class="tab-btn active" data-tab="first"' in html
        assert 'kpi-card success' in html
        assert "<td>1</td>" in html
        assert "1.5000" in html
        assert "chart.umd.min.js" in html

    def test_add_charts_skips_none(self):
        dash = DashboardGenerator("x")
        dash.add_charts([None])
        assert dash.sections == []

    def test_png_chart_embedded(self):
        dash = DashboardGenerator("x")
        dash.add_charts([ChartOutput(title="T", png_base64="AAAA", description="desc")])
        html = dash.generate()
        assert 'src="data:image/png;base64,AAAA"' in html
        assert "desc" in html

    def test_cell_titles(self):
        dash = DashboardGenerator("x")
        dash.add_table(["v"], [["12...34"]], cell_titles=[["1234"]])
        assert '<td title="1234">12...34</td>' in dash.generate()


# =============================================================================
# Report viewer
# =============================================================================

class TestReportViewState:
    def test_default_tab(self):
        assert ReportViewState().active_tab == "complexity"

    def test_unknown_tab(self):
        with pytest.raises(ValueError):
            ReportViewState(active_tab="nope")


class TestReportViewerService:
    def test_all_panels_ok(self, data_dir):
        panels = ReportViewerService(data_dir).collect()
        assert list(panels) == list(DATASETS)
        assert all(p.ok and p.chart_html for p in panels.values())

    def test_summaries(self, data_dir):
        panels = ReportViewerService(data_dir).collect()
        assert panels["complexity"].summary == (
            "<strong>Data Points:</strong> 3 measurements from n=10 to n=30"
        )
        assert panels["binet"].summary == (
            "<strong>Accuracy:</strong> Binet formula is exact for 3 values (n ≤ 2)"
        )
        assert panels["golden"].summary == (
            "<strong>Convergence:</strong> Error from φ at n=50: 1.2345e-20"
        )

    def test_missing_dataset_placeholder(self, partial_data_dir, caplog):
        panels = ReportViewerService(partial_data_dir).collect()
        golden = panels["golden"]
        assert not golden.ok
        assert golden.chart_html is None
        assert golden.summary == PLACEHOLDER_MESSAGE
        assert "Error loading golden data" in caplog.text
        assert panels["complexity"].ok
        assert panels["binet"].ok

    def test_header_only_dataset(self, data_dir):
        (data_dir / "binet_accuracy.csv").write_text("n,exact,binet,abs_error,rel_error\n")
        panel = ReportViewerService(data_dir).collect()["binet"]
        assert panel.ok
        assert panel.chart_html is None
        assert panel.row_count == 0

    def test_csv_markup_is_escaped(self, data_dir):
        (data_dir / "complexity_comparison.csv").write_text(
            "n,iterative_ns,matrix_ns\n<i>1</i>,5,6\n</script><b>2,7,8\n"
        )
        panel = ReportViewerService(data_dir).collect()["complexity"]
        assert panel.summary == (
            "<strong>Data Points:</strong> 2 measurements "
            "from n=&lt;i&gt;1&lt;/i&gt; to n=&lt;/script&gt;&lt;b&gt;2"
        )
        assert panel.chart_html.count("</script>") == 1
        assert "<\\/script><b>2" in panel.chart_html

    def test_render_html_active_tab(self, data_dir):
        service = ReportViewerService(data_dir)
        html = service.render_html(service.collect(), ReportViewState(active_tab="golden"))
        assert 'id="tab-golden"' in html
        assert 'class="section tab-content active" id="tab-golden"' in html
        assert 'class="section tab-content" id="tab-complexity"' in html
        assert html.count("new Chart(") == 3

    def test_generate_report(self, partial_data_dir, tmp_path):
        output = tmp_path / "out" / "report.html"
        path = ReportViewerService(partial_data_dir).generate_report(output)
        assert path == str(output)
        html = output.read_text(encoding="utf-8")
        assert PLACEHOLDER_MESSAGE in html
        assert html.count("new Chart(") == 2

    def test_empty_directory(self, tmp_path):
        panels = ReportViewerService(tmp_path).collect()
        assert not any(p.ok for p in panels.values())


# =============================================================================
# Demo page
# =============================================================================

class TestDemoPage:
    def test_results_only(self):
        state = DemoViewState(results=(ResultRow(n=10, value=55),))
        html = render_demo_html(state)
        assert 'id="tab-results"' in html
        assert 'id="tab-benchmark"' not in html
        assert "<td>55</td>" in html

    def test_truncated_value_has_full_title(self):
        value = 10 ** 40 + 1
        state = DemoViewState(results=(ResultRow(n=1, value=value),))
        html = render_demo_html(state)
        assert f'title="{value}"' in html

    def test_benchmark_chart(self, sample):
        state = DemoViewState(benchmark=sample)
        html = render_demo_html(state)
        assert 'class="section tab-content active" id="tab-benchmark"' in html
        assert "1.50x" in html
        assert "new Chart(" in html

    def test_static_chart(self, sample, tmp_path):
        path = write_demo_html(DemoViewState(benchmark=sample), tmp_path / "demo.html", static=True)
        html = (tmp_path / "demo.html").read_text(encoding="utf-8")
        assert path.endswith("demo.html")
        assert "data:image/png;base64," in html

    def test_empty_state(self):
        html = render_demo_html(DemoViewState())
        assert "tab-content" not in html.split("<body>")[1].split("<script>")[0]
