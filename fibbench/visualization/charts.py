"""
Chart Generator for the Report and Demo

Generates HTML/JS chart snippets using Chart.js for embedding in dashboards.

    complexity_chart     → iterative vs matrix execution time (line)
    binet_chart          → Binet relative error, logarithmic axis (line)
    golden_ratio_chart   → F(n+1)/F(n) against φ (line)
    speedup_chart        → SIMD vs scalar mean time (bar)
"""
import json
import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from fibbench.benchmark import BenchmarkSample
from fibbench.core import PHI

from .models import ColorTheme, DEFAULT_THEME

logger = logging.getLogger(__name__)


def _to_number(value: Optional[str]) -> Optional[float]:
    """CSV cell to a chart value; None (a gap in the line) when not numeric."""
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class ChartGenerator:
    """
    Generates embeddable HTML chart snippets.

    All charts are rendered as self-contained HTML divs with inline
    Chart.js configuration. No external dependencies beyond Chart.js
    (loaded once in the dashboard template).
    """

    _chart_counter = 0

    def __init__(self, theme: ColorTheme = DEFAULT_THEME):
        self.theme = theme

    def _next_id(self, prefix: str = "chart") -> str:
        """Generate a unique chart ID."""
        ChartGenerator._chart_counter += 1
        return f"{prefix}_{ChartGenerator._chart_counter}"

    # ─── Report charts (line) ────────────────────────────────────────────

    def complexity_chart(
        self,
        rows: Sequence[Mapping[str, str]],
        title: str = "Execution Time vs Input Size",
    ) -> Optional[str]:
        """Iterative and matrix time per n from complexity_comparison.csv."""
        if not rows:
            return None

        datasets = [
            self._line_dataset(
                "Iterative (ns)",
                [_to_number(r.get("iterative_ns")) for r in rows],
                self.theme.iterative,
            ),
            self._line_dataset(
                "Matrix (ns)",
                [_to_number(r.get("matrix_ns")) for r in rows],
                self.theme.matrix,
            ),
        ]
        config = self._line_config(
            [r.get("n") for r in rows], datasets, title, y_label="Time (ns)"
        )
        return self._chart_html(self._next_id("complexity"), config, height=400)

    def binet_chart(
        self,
        rows: Sequence[Mapping[str, str]],
        title: str = "Binet Formula Relative Error",
    ) -> Optional[str]:
        """Relative error per n from binet_accuracy.csv on a log axis."""
        if not rows:
            return None

        # Non-numeric errors plot as zero
        errors = [_to_number(r.get("rel_error")) or 0 for r in rows]
        datasets = [self._line_dataset("Relative Error", errors, self.theme.error)]
        config = self._line_config(
            [r.get("n") for r in rows], datasets, title, y_label="Relative Error"
        )
        config["options"]["scales"]["y"]["type"] = "logarithmic"
        return self._chart_html(self._next_id("binet"), config, height=400)

    def golden_ratio_chart(
        self,
        rows: Sequence[Mapping[str, str]],
        title: str = "Convergence to Golden Ratio",
    ) -> Optional[str]:
        """F(n+1)/F(n) per n from golden_ratio_convergence.csv with a φ reference line."""
        if not rows:
            return None

        phi_line = {
            "label": "φ (Golden Ratio)",
            "data": [PHI] * len(rows),
            "borderColor": self.theme.phi,
            "borderDash": [5, 5],
            "fill": False,
        }
        datasets = [
            self._line_dataset(
                "F(n+1)/F(n)",
                [_to_number(r.get("ratio")) for r in rows],
                self.theme.ratio,
            ),
            phi_line,
        ]
        config = self._line_config(
            [r.get("n") for r in rows], datasets, title, y_label="Ratio"
        )
        config["options"]["scales"]["y"].update({"min": 1.5, "max": 2.0})
        return self._chart_html(self._next_id("golden"), config, height=400)

    # ─── Demo chart (bar) ────────────────────────────────────────────────

    def speedup_chart(
        self,
        sample: BenchmarkSample,
        title: str = "Mean Time per Batch",
    ) -> str:
        """Two bars, one per variant, labelled with their mean time."""
        labels = [sample.variant_a_label, sample.variant_b_label]
        values = [sample.variant_a_ms, sample.variant_b_ms]
        colors = [self.theme.simd[0], self.theme.scalar[0]]

        config = {
            "type": "bar",
            "data": {
                "labels": labels,
                "datasets": [{
                    "label": "ms",
                    "data": values,
                    "backgroundColor": colors,
                    "borderColor": [self.theme.simd[1], self.theme.scalar[1]],
                    "borderWidth": 1,
                }],
            },
            "options": {
                "responsive": True,
                "maintainAspectRatio": False,
                "plugins": {
                    "title": {
                        "display": True,
                        "text": [title, f"Speedup {sample.speedup_ratio:.2f}x"],
                        "color": self.theme.text,
                    },
                    "legend": {"display": False},
                    "tooltip": {"callbacks": {"label": "__FUNC_tooltip__"}},
                },
                "scales": self._scales("", "Time (ms)"),
            },
        }
        config["options"]["scales"]["y"]["beginAtZero"] = True
        tooltip_fn = "function(context) { return context.parsed.y.toFixed(3) + ' ms'; }"
        return self._chart_html(self._next_id("speedup"), config, height=220, tooltip_fn=tooltip_fn)

    # ─── Internal config builders ────────────────────────────────────────

    def _line_dataset(self, label: str, data: List[Any], color: str) -> Dict[str, Any]:
        return {
            "label": label,
            "data": data,
            "borderColor": color,
            "backgroundColor": self.theme.fill(color),
            "fill": True,
            "tension": 0.4,
        }

    def _scales(self, x_label: str, y_label: str) -> Dict[str, Any]:
        def axis(text: str) -> Dict[str, Any]:
            return {
                "title": {"display": bool(text), "text": text, "color": self.theme.muted},
                "ticks": {"color": self.theme.muted},
                "grid": {"color": self.theme.grid},
            }
        return {"x": axis(x_label), "y": axis(y_label)}

    def _line_config(
        self,
        labels: List[Any],
        datasets: List[Dict[str, Any]],
        title: str,
        y_label: str,
    ) -> Dict[str, Any]:
        return {
            "type": "line",
            "data": {"labels": labels, "datasets": datasets},
            "options": {
                "responsive": True,
                "maintainAspectRatio": False,
                "plugins": {
                    "legend": {"labels": {"color": self.theme.text}},
                    "title": {"display": True, "text": title, "color": self.theme.text},
                },
                "scales": self._scales("n", y_label),
            },
        }

    # ─── Internal HTML Generation ────────────────────────────────────────

    def _chart_html(
        self,
        chart_id: str,
        config: Dict,
        height: int = 300,
        tooltip_fn: Optional[str] = None,
    ) -> str:
        """
        Generate the HTML+JS snippet for a Chart.js chart.

        Handles function injection for tooltips, which cannot be expressed
        in JSON.
        """
        config_json = json.dumps(config, indent=2)
        # CSV-derived labels must not close the script element
        config_json = config_json.replace("</", "<\\/")

        if tooltip_fn:
            config_json = config_json.replace('"__FUNC_tooltip__"', tooltip_fn)

        return f"""
        <div class="chart-container" style="height: {height}px; margin-bottom: 20px;">
            <canvas id="{chart_id}"></canvas>
        </div>
        <script>
            (function() {{
                const ctx = document.getElementById('{chart_id}').getContext('2d');
                new Chart(ctx, {config_json});
            }})();
        </script>
        """
