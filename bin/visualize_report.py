#!/usr/bin/env python3
"""
Benchmark Report Viewer

Renders the three report datasets as a tabbed HTML page. Missing datasets
show a placeholder panel; the other tabs render normally.

Usage:
    python bin/visualize_report.py
    python bin/visualize_report.py --data-dir results --output output/report.html
    python bin/visualize_report.py --tab binet --open
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import logging
import webbrowser

from fibbench.cli import Colors, print_error, print_header, print_kv, print_success, print_warning, setup_logging, use_colors
from fibbench.config import load_settings
from fibbench.data import DATASETS
from fibbench.visualization import ReportViewerService, ReportViewState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render the Fibonacci benchmark report",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--data-dir", "-d", metavar="DIR", help="Dataset directory (default: from settings)")
    parser.add_argument("--output", "-o", metavar="FILE", help="HTML file (default: <output_dir>/report.html)")
    parser.add_argument("--tab", choices=list(DATASETS), default="complexity", help="Tab shown first")
    parser.add_argument("--open", action="store_true", help="Open the report in a browser")
    parser.add_argument("--config", type=Path, metavar="FILE", help="YAML settings file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if args.no_color or not use_colors():
        Colors.disable()
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
        data_dir = Path(args.data_dir) if args.data_dir else settings.data_path
        output_file = Path(args.output) if args.output else settings.output_path / "report.html"

        print_header("Fibonacci Benchmark Report")
        print_kv("Data", data_dir)

        service = ReportViewerService(data_dir)
        panels = service.collect()
        for panel in panels.values():
            if panel.ok:
                print_success(f"{panel.title}: {panel.row_count} rows")
            else:
                print_warning(f"{panel.title}: {panel.summary}")

        html = service.render_html(panels, ReportViewState(active_tab=args.tab))
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html, encoding="utf-8")
        print_success(f"Report written to {output_file}")

        if args.open:
            webbrowser.open(output_file.resolve().as_uri())
        return 0

    except (OSError, ValueError) as e:
        print_error(f"Report generation failed: {e}")
        if args.verbose:
            logging.exception("Report generation failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
