"""
Visualization Data Models
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fibbench.data import DATASETS


@dataclass
class ChartOutput:
    """Output from static (PNG) chart generation."""
    title: str
    png_base64: str
    description: str = ""
    alt_text: str = ""
    width: int = 600
    height: int = 400


@dataclass
class ColorTheme:
    """Configurable color theme for charts (dark report palette)."""
    # Page / axis colors
    text: str = "#f1f5f9"
    muted: str = "#94a3b8"
    grid: str = "#334155"
    background: str = "#0f172a"
    card: str = "#1e293b"

    # Series colors
    iterative: str = "#f59e0b"
    matrix: str = "#10b981"
    error: str = "#ef4444"
    ratio: str = "#6366f1"
    phi: str = "#10b981"

    # Benchmark bars (gradient start, end)
    simd: List[str] = field(default_factory=lambda: ["#667eea", "#764ba2"])
    scalar: List[str] = field(default_factory=lambda: ["#10b981", "#059669"])

    def fill(self, color: str, alpha: float = 0.1) -> str:
        """rgba() fill for a #rrggbb series color."""
        r, g, b = (int(color[i:i + 2], 16) for i in (1, 3, 5))
        return f"rgba({r}, {g}, {b}, {alpha})"

    def to_series_dict(self) -> Dict[str, str]:
        return {
            "iterative": self.iterative,
            "matrix": self.matrix,
            "error": self.error,
            "ratio": self.ratio,
            "phi": self.phi,
        }


DEFAULT_THEME = ColorTheme()


@dataclass
class PanelData:
    """Everything the report needs to render one dataset tab."""
    key: str
    title: str
    ok: bool
    summary: str = ""
    chart_html: Optional[str] = None
    row_count: int = 0
    error: Optional[str] = None


@dataclass(frozen=True)
class ReportViewState:
    """Which report tab is shown first."""
    active_tab: str = "complexity"

    def __post_init__(self):
        if self.active_tab not in DATASETS:
            raise ValueError(
                f"Unknown tab '{self.active_tab}', expected one of {', '.join(DATASETS)}"
            )
