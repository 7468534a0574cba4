#!/usr/bin/env python3
"""
Main script for running the statistics calculators on CSV data.
"""

# Pipeline overview:
# 1) Load one or two columns from a CSV file, or take two data-set
#    summaries from the command line.
# 2) Run the calculator matching the data representation (raw sample,
#    discrete table, grouped table, combined sets, or paired scores for
#    rank correlation).
# 3) Log the headline results and export summary tables (and a figure where
#    one applies) to the output directory.

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from mathstats.config import DEFAULT_DECIMALS, DEFAULT_OUTPUT_DIR
from mathstats.correlation import RankCorrelationEngine
from mathstats.data_processing import (
    load_frequency_table_csv,
    load_paired_columns_csv,
    load_sample_csv,
)
from mathstats.dispersion import (
    CombinedSetsStatistics,
    ContinuousFrequencyStatistics,
    DiscreteFrequencyStatistics,
    RawSampleStatistics,
)
from mathstats.errors import StatisticsError
from mathstats.output import (
    combined_summary_frame,
    correlation_summary_frame,
    correlation_table_frame,
    dispersion_summary_frame,
    frequency_summary_frame,
    frequency_table_frame,
    save_frames_to_csv,
)
from mathstats.plotting import plot_dispersion_summary, plot_rank_scatter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Descriptive statistics for CSV data.")
    parser.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR)
    parser.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)
    sub = parser.add_subparsers(dest="command", required=True)

    sample = sub.add_parser("sample", help="Summarize one numeric column.")
    sample.add_argument("csv")
    sample.add_argument("--column", required=True)
    sample.add_argument("--no-plot", action="store_true")

    for name, help_text in (
        ("discrete", "Discrete (value, frequency) table."),
        ("continuous", "Grouped (interval, frequency) table."),
    ):
        table = sub.add_parser(name, help=help_text)
        table.add_argument("csv")
        table.add_argument("--x-column", required=True)
        table.add_argument("--f-column", required=True)

    combined = sub.add_parser("combined", help="Pool two summarized data sets.")
    for suffix in ("1", "2"):
        combined.add_argument(f"--n{suffix}", type=int, required=True)
        combined.add_argument(f"--mean{suffix}", type=float, required=True)
        combined.add_argument(f"--sd{suffix}", type=float, required=True)

    spearman = sub.add_parser("spearman", help="Spearman rank correlation of two columns.")
    spearman.add_argument("csv")
    spearman.add_argument("--column1", required=True)
    spearman.add_argument("--column2", required=True)
    spearman.add_argument("--no-plot", action="store_true")
    return parser


def run_command(args) -> dict:
    """Run the requested calculator and return the exported file paths."""
    dp = args.decimals

    if args.command == "sample":
        result = RawSampleStatistics(load_sample_csv(args.csv, args.column)).run()
        logging.info(
            "n=%d mean=%.*f median=%.*f sd=%.*f",
            result.n, dp, result.mean, dp, result.median, dp, result.standard_deviation,
        )
        if result.mode:
            logging.info("Mode: %s", ", ".join(f"{m:g}" for m in result.mode))
        else:
            logging.info("Mode: none (no value repeats)")
        if result.has_quartiles:
            logging.info(
                "Q1=%.*f Q3=%.*f IQR=%.*f", dp, result.q1, dp, result.q3, dp, result.iqr
            )
        else:
            logging.warning("Quartiles need at least 4 values; n=%d", result.n)
        paths = save_frames_to_csv({"dispersion_summary": dispersion_summary_frame(result)}, args.output_dir)
        if not args.no_plot and result.has_quartiles:
            paths["figure"] = plot_dispersion_summary(result, args.output_dir)
        return paths

    if args.command in ("discrete", "continuous"):
        intervals = args.command == "continuous"
        x, freqs = load_frequency_table_csv(
            args.csv, args.x_column, args.f_column, intervals=intervals
        )
        calculator_cls = ContinuousFrequencyStatistics if intervals else DiscreteFrequencyStatistics
        result = calculator_cls(x, freqs).run()
        logging.info(
            "Σf=%g mean=%.*f variance=%.*f sd=%.*f",
            result.sum_f, dp, result.mean, dp, result.variance, dp, result.standard_deviation,
        )
        return save_frames_to_csv(
            {
                f"{args.command}_table": frequency_table_frame(result),
                f"{args.command}_summary": frequency_summary_frame(result),
            },
            args.output_dir,
        )

    if args.command == "combined":
        result = CombinedSetsStatistics(
            args.n1, args.mean1, args.sd1, args.n2, args.mean2, args.sd2
        ).run()
        logging.info(
            "N=%d mean=%.*f variance=%.*f sd=%.*f",
            result.n, dp, result.mean, dp, result.variance, dp, result.standard_deviation,
        )
        return save_frames_to_csv({"combined_summary": combined_summary_frame(result)}, args.output_dir)

    scores1, scores2 = load_paired_columns_csv(args.csv, args.column1, args.column2)
    if len(scores1) < 2:
        logging.warning("Rank correlation with fewer than 2 pairs is reported as rs = 0")
    result = RankCorrelationEngine(scores1, scores2).run()
    logging.info("Σd²=%g rs=%.*f (%s)", result.sum_squared_differences, dp, result.coefficient, result.label)
    paths = save_frames_to_csv(
        {
            "rank_table": correlation_table_frame(result),
            "correlation_summary": correlation_summary_frame(result),
        },
        args.output_dir,
    )
    if not args.no_plot:
        paths["figure"] = plot_rank_scatter(result, args.output_dir)
    return paths


def main(argv=None):
    """Main execution function."""
    args = build_parser().parse_args(argv)

    start_time = time.time()
    source = getattr(args, "csv", "summary statistics")
    logging.info("Running %s analysis on %s", args.command, source)
    try:
        paths = run_command(args)
    except StatisticsError as exc:
        logging.error("Invalid input (%s): %s", exc.kind.value, exc)
        return 1
    except (KeyError, ValueError) as exc:
        logging.error("Could not load %s: %s", source, exc)
        return 1

    for name, path in paths.items():
        logging.info("  - %s: %s", name, path)
    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
