"""
Dashboard Generator

Assembles sections, KPI cards, tables and chart snippets into one
self-contained HTML page. Sections double as tabs: exactly one is visible
at a time and the tab shown first is chosen by the caller.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .models import ChartOutput


# HTML Template
HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js@4.4.1/dist/chart.umd.min.js"></script>
    <style>
        :root {{
            --bg: #0f172a;
            --card-bg: #1e293b;
            --border: #334155;
            --text: #f1f5f9;
            --text-muted: #94a3b8;
            --accent: #6366f1;
            --success: #10b981;
            --warning: #f59e0b;
            --danger: #ef4444;
        }}

        * {{ box-sizing: border-box; margin: 0; padding: 0; }}

        body {{
            font-family: 'Inter', 'Segoe UI', -apple-system, BlinkMacSystemFont, Roboto, sans-serif;
            background: var(--bg);
            color: var(--text);
            line-height: 1.6;
        }}

        .navbar {{
            position: fixed;
            top: 0;
            left: 0;
            right: 0;
            height: 60px;
            background: linear-gradient(135deg, #1e1b4b, var(--card-bg));
            display: flex;
            align-items: center;
            justify-content: space-between;
            padding: 0 30px;
            z-index: 1000;
            box-shadow: 0 2px 10px rgba(0,0,0,0.4);
        }}

        .navbar-brand {{ font-size: 1.4rem; font-weight: 700; letter-spacing: 0.5px; }}

        .navbar-nav {{ display: flex; gap: 10px; }}

        .tab-btn {{ background: transparent; color: var(--text-muted); border: 1px solid var(--border); border-radius: 6px; padding: 6px 14px; cursor: pointer; font-size: 0.9rem; transition: all 0.2s; }}

        .tab-btn:hover {{ color: var(--text); }}

        .tab-btn.active {{ background: var(--accent); border-color: var(--accent); color: white; }}

        .main-content {{ margin-top: 60px; padding: 30px; max-width: 1200px; margin-left: auto; margin-right: auto; }}

        .section {{ background: var(--card-bg); border-radius: 12px; padding: 25px; margin-bottom: 25px; box-shadow: 0 2px 15px rgba(0,0,0,0.3); }}

        .tab-content {{ display: none; }}

        .tab-content.active {{ display: block; }}

        .section-header {{ margin-bottom: 20px; padding-bottom: 12px; border-bottom: 2px solid var(--accent); }}

        .section-header h2 {{ font-size: 1.4rem; margin: 0; }}

        .kpi-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 20px; margin-bottom: 25px; }}

        .kpi-card {{ background: linear-gradient(135deg, #667eea, #764ba2); padding: 20px; border-radius: 10px; text-align: center; }}

        .kpi-card.success {{ background: linear-gradient(135deg, #10b981, #059669); }}
        .kpi-card.warning {{ background: linear-gradient(135deg, #f59e0b, #d97706); }}
        .kpi-card.danger {{ background: linear-gradient(135deg, #ef4444, #b91c1c); }}

        .kpi-value {{ font-size: 1.8rem; font-weight: 700; margin-bottom: 5px; }}

        .kpi-label {{ font-size: 0.8rem; text-transform: uppercase; letter-spacing: 1px; opacity: 0.9; }}

        .chart-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(400px, 1fr)); gap: 25px; margin-bottom: 20px; }}

        .chart-card {{ border: 1px solid var(--border); border-radius: 10px; padding: 20px; text-align: center; }}

        .chart-card h4 {{ color: var(--text-muted); margin-bottom: 15px; font-size: 1rem; }}

        .chart-card img {{ max-width: 100%; height: auto; border-radius: 8px; }}

        .chart-card .description {{ color: var(--text-muted); font-size: 0.8rem; margin-top: 10px; }}

        .note {{ color: var(--text-muted); padding: 10px 0; }}

        .note strong {{ color: var(--text); }}

        .table-container {{ overflow-x: auto; margin-bottom: 20px; }}

        table {{ width: 100%; border-collapse: collapse; font-size: 0.9rem; }}

        th, td {{ padding: 10px 15px; text-align: left; border-bottom: 1px solid var(--border); font-family: 'Consolas', monospace; }}

        th {{ color: var(--text-muted); text-transform: uppercase; font-size: 0.75rem; letter-spacing: 0.5px; font-family: inherit; }}

        tr:hover {{ background: rgba(99, 102, 241, 0.08); }}

        .metrics-box {{ border-radius: 10px; padding: 20px; margin-bottom: 20px; border: 1px solid var(--border); }}

        .metric-row {{ display: flex; justify-content: space-between; padding: 8px 0; border-bottom: 1px dashed var(--border); }}

        .metric-value {{ font-family: 'Consolas', monospace; font-weight: 600; }}

        .footer {{ text-align: center; color: var(--text-muted); font-size: 0.8rem; padding: 20px; }}
    </style>
</head>
<body>
    <div class="navbar">
        <div class="navbar-brand">{title}</div>
        <div class="navbar-nav">{nav_links}</div>
    </div>
    <div class="main-content">
        {content}
    </div>
    <div class="footer">Generated by fibbench • {timestamp}</div>
    <script>
        document.querySelectorAll('.tab-btn').forEach(function(button) {{
            button.addEventListener('click', function() {{
                document.querySelectorAll('.tab-btn').forEach(function(b) {{ b.classList.remove('active'); }});
                document.querySelectorAll('.tab-content').forEach(function(c) {{ c.classList.remove('active'); }});
                button.classList.add('active');
                document.getElementById(button.dataset.tab).classList.add('active');
            }});
        }});
    </script>
    {scripts}
</body>
</html>
"""


@dataclass
class NavLink:
    """Navigation tab."""
    label: str
    anchor: str
    active: bool = False


class DashboardGenerator:
    """
    Generates responsive HTML dashboards with tabbed sections.
    """

    def __init__(self, title: str):
        self.title = title
        self.sections: List[str] = []
        self.nav_links: List[NavLink] = []
        self.scripts: List[str] = []
        self._current_section_id = ""

    def start_section(self, title: str, anchor_id: str = "", active: bool = False) -> None:
        """Start a new section (tab). Only ``active`` sections are visible on load."""
        self._current_section_id = anchor_id or title.lower().replace(" ", "-")
        self.nav_links.append(NavLink(title, self._current_section_id, active))
        active_class = " active" if active else ""
        self.sections.append(
            f'<div class="section tab-content{active_class}" id="{self._current_section_id}">'
            f'<div class="section-header"><h2>{title}</h2></div>'
        )

    def end_section(self) -> None:
        """End the current section."""
        self.sections.append('</div>')

    def add_kpis(self, kpis: Dict[str, Any], styles: Optional[Dict[str, str]] = None) -> None:
        """Add KPI cards."""
        styles = styles or {}
        html = ['<div class="kpi-grid">']
        for label, value in kpis.items():
            style_class = styles.get(label, "")
            style_attr = f' {style_class}' if style_class else ""
            html.append(
                f'<div class="kpi-card{style_attr}">'
                f'<div class="kpi-value">{value}</div>'
                f'<div class="kpi-label">{label}</div>'
                f'</div>'
            )
        html.append('</div>')
        self.sections.append(''.join(html))

    def add_charts(self, charts: List[Any]) -> None:
        """Add Chart.js HTML snippets or PNG ChartOutput objects."""
        valid_charts = [c for c in charts if c is not None]
        if not valid_charts:
            return
        html = ['<div class="chart-grid">']
        for chart in valid_charts:
            if isinstance(chart, str):
                html.append(f'<div class="chart-card">{chart}</div>')
            elif isinstance(chart, ChartOutput):
                html.append(
                    f'<div class="chart-card">'
                    f'<h4>{chart.title}</h4>'
                    f'<img src="data:image/png;base64,{chart.png_base64}" alt="{chart.alt_text or chart.title}">'
                )
                if chart.description:
                    html.append(f'<div class="description">{chart.description}</div>')
                html.append('</div>')
        html.append('</div>')
        self.sections.append(''.join(html))

    def add_note(self, html_text: str) -> None:
        """Add a one-line note below the charts (summary or placeholder)."""
        self.sections.append(f'<p class="note">{html_text}</p>')

    def add_table(self, headers: List[str], rows: List[List[Any]], title: str = "",
                  cell_titles: Optional[List[List[str]]] = None) -> None:
        """Add a data table. ``cell_titles`` sets hover text per cell, e.g. full values."""
        html = ['<div class="table-container">']
        if title:
            html.append(f'<h4 style="margin-bottom: 10px;">{title}</h4>')
        html.append('<table><thead><tr>')
        for h in headers:
            html.append(f'<th>{h}</th>')
        html.append('</tr></thead><tbody>')
        for i, row in enumerate(rows):
            html.append('<tr>')
            for j, cell in enumerate(row):
                hover = cell_titles[i][j] if cell_titles else ""
                title_attr = f' title="{hover}"' if hover else ""
                html.append(f'<td{title_attr}>{cell}</td>')
            html.append('</tr>')
        html.append('</tbody></table></div>')
        self.sections.append(''.join(html))

    def add_metrics_box(self, metrics: Dict[str, Any], title: str = "Metrics") -> None:
        """Add a metrics display box."""
        html = [f'<div class="metrics-box"><h4>{title}</h4>']
        for name, value in metrics.items():
            val_str = f'{value:.4f}' if isinstance(value, float) else str(value)
            html.append(
                f'<div class="metric-row"><span class="metric-name">{name}</span>'
                f'<span class="metric-value">{val_str}</span></div>'
            )
        html.append('</div>')
        self.sections.append(''.join(html))

    def generate(self) -> str:
        """Generate the complete HTML document."""
        nav_html = ' '.join(
            f'<button class="tab-btn{" active" if n.active else ""}" data-tab="{n.anchor}">{n.label}</button>'
            for n in self.nav_links
        )
        return HTML_TEMPLATE.format(
            title=self.title,
            timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            nav_links=nav_html,
            content=''.join(self.sections),
            scripts=''.join(self.scripts)
        )
