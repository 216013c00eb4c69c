"""
Static Charts

Publication-ready PNG charts (base64 encoded) rendered with Matplotlib, for
contexts where Chart.js is not available: terminal runs that write a file,
or API clients that want an image.
"""
import base64
import io
import logging
from pathlib import Path
from typing import Union

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap

from fibbench.benchmark import BenchmarkSample

from .models import ChartOutput, ColorTheme, DEFAULT_THEME

logger = logging.getLogger(__name__)


class StaticChartGenerator:
    """Renders Matplotlib figures to ``ChartOutput`` objects."""

    def __init__(self, theme: ColorTheme = DEFAULT_THEME):
        self.theme = theme

    def _fig_to_base64(self, fig) -> str:
        """Convert matplotlib figure to base64 string."""
        buf = io.BytesIO()
        fig.savefig(buf, format="png", bbox_inches="tight", dpi=100, facecolor=fig.get_facecolor())
        buf.seek(0)
        img_str = base64.b64encode(buf.read()).decode("utf-8")
        plt.close(fig)
        return img_str

    def _gradient_bar(self, ax, x: float, width: float, height: float, colors) -> None:
        """Fill a bar from ``colors[0]`` at the top to ``colors[1]`` at the base."""
        cmap = LinearSegmentedColormap.from_list("bar", [colors[1], colors[0]])
        ax.imshow(
            [[0.0], [1.0]],
            cmap=cmap,
            aspect="auto",
            origin="lower",
            extent=(x, x + width, 0, height),
            interpolation="bicubic",
            zorder=2,
        )

    def speedup_bars(self, sample: BenchmarkSample, title: str = "SIMD vs Scalar") -> ChartOutput:
        """Two gradient bars scaled to the slower variant, each labelled with its time."""
        times = [sample.variant_a_ms, sample.variant_b_ms]
        labels = [sample.variant_a_label, sample.variant_b_label]
        palettes = [self.theme.simd, self.theme.scalar]
        max_time = max(times) or 1.0

        fig, ax = plt.subplots(figsize=(5, 3))
        fig.patch.set_facecolor(self.theme.background)
        ax.set_facecolor(self.theme.background)

        bar_width, gap = 0.8, 0.6
        for i, (t, palette) in enumerate(zip(times, palettes)):
            x = i * (bar_width + gap)
            height = t / max_time
            if height > 0:
                self._gradient_bar(ax, x, bar_width, height, palette)
            ax.text(
                x + bar_width / 2, height + 0.03, f"{t:.2f}ms",
                ha="center", va="bottom", color=self.theme.text, fontsize=10,
            )

        ax.set_xlim(-0.2, 2 * bar_width + gap + 0.2)
        ax.set_ylim(0, 1.25)
        ax.set_xticks([bar_width / 2, bar_width * 1.5 + gap])
        ax.set_xticklabels(labels, color=self.theme.text)
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)
        ax.set_title(f"{title} ({sample.speedup_ratio:.2f}x)", color=self.theme.text)

        return ChartOutput(
            title=title,
            png_base64=self._fig_to_base64(fig),
            description=(
                f"{sample.variant_a_label} {sample.variant_a_ms:.3f} ms vs "
                f"{sample.variant_b_label} {sample.variant_b_ms:.3f} ms"
            ),
            alt_text=f"Bar chart comparing {labels[0]} and {labels[1]} mean batch time",
            width=500,
            height=300,
        )

    @staticmethod
    def write_png(chart: ChartOutput, path: Union[str, Path]) -> Path:
        """Decode a chart to a PNG file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(base64.b64decode(chart.png_base64))
        logger.info("Wrote chart '%s' to %s", chart.title, path)
        return path
