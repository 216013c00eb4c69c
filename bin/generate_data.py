#!/usr/bin/env python3
"""
Report Dataset Generator

Writes the three CSV files rendered by the benchmark report:
complexity_comparison.csv, binet_accuracy.csv and
golden_ratio_convergence.csv.

Usage:
    python bin/generate_data.py
    python bin/generate_data.py --output results --iterations 50
    python bin/generate_data.py --quick
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import logging
import time

from fibbench.cli import Colors, print_error, print_header, print_kv, print_success, setup_logging, use_colors
from fibbench.config import load_settings
from fibbench.data import DataGenerator, GenerationConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate the Fibonacci benchmark report datasets",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--output", "-o", metavar="DIR",
                        help="Output directory (default: data_dir from settings)")
    parser.add_argument("--config", type=Path, metavar="FILE", help="YAML settings file")

    gen = parser.add_argument_group("Ranges")
    gen.add_argument("--max-n", type=int, default=1000, help="Largest n of the complexity sweep")
    gen.add_argument("--step", type=int, default=10, help="Step of the complexity sweep")
    gen.add_argument("--iterations", "-i", type=int, default=100, help="Timed calls per point")
    gen.add_argument("--accuracy-max-n", type=int, default=100, help="Largest n of the Binet table")
    gen.add_argument("--golden-max-n", type=int, default=50, help="Largest n of the ratio table")
    gen.add_argument("--quick", action="store_true", help="Small sweep for smoke runs")

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
        config = GenerationConfig(
            complexity_start=args.step,
            complexity_stop=100 if args.quick else args.max_n,
            complexity_step=args.step,
            complexity_iterations=10 if args.quick else args.iterations,
            accuracy_max_n=args.accuracy_max_n,
            golden_max_n=args.golden_max_n,
        )
        output_dir = Path(args.output or settings.data_dir)

        print_header("Fibonacci Report Datasets")
        print_kv("Output", output_dir)
        print_kv("Complexity sweep", f"n={config.complexity_start}..{config.complexity_stop} "
                                     f"step {config.complexity_step}, {config.complexity_iterations} calls")

        t0 = time.time()
        written = DataGenerator(config).write_all(output_dir)
        print()
        for name, path in written.items():
            print_success(f"{name:<11} {path}")
        print(f"\n  Completed in {time.time() - t0:.1f}s\n")
        return 0

    except (OSError, ValueError) as e:
        print_error(f"Generation failed: {e}")
        if args.verbose:
            logging.exception("Generation failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
