"""
Command Line Interface for scalar-kalman.

Usage:
    scalar-kalman filter --config CONFIG_PATH --input CSV [--column NAME] [--output CSV] [--trace]
    scalar-kalman simulate --config CONFIG_PATH --output CSV [--n N] [--seed SEED]
"""

import argparse
import sys
from pathlib import Path

from scalar_kalman.utils.io import load_config, params_from_config, ensure_dir
from scalar_kalman.utils.logging import setup_logging, get_logger


def _write_frame(df, output):
    if output is None:
        print(df.to_csv(index_label="t"), end="")
        return
    output = Path(output)
    ensure_dir(output.parent)
    df.to_csv(output, index_label="t")


def cmd_filter(args):
    """Run the filter over a column of observations."""
    from scalar_kalman.filtering import FailedInverse, ScalarKalman, filter_trace, run_batch
    from scalar_kalman.utils.io import read_observations

    logger = get_logger(__name__)
    config = load_config(args.config)
    params = params_from_config(config)

    column = args.column or (config.get("data") or {}).get("column")
    z = read_observations(args.input, column=column)
    logger.info(f"Filtering {len(z)} observations from {args.input}")
    logger.debug(params.summary())

    kf = ScalarKalman.from_params(params)
    try:
        if args.trace:
            df = filter_trace(kf, z).to_frame(index=z.index)
        else:
            df = run_batch(kf, z).to_frame()
    except FailedInverse as exc:
        logger.error(f"Filtering failed: {exc}")
        return 1
    df.insert(0, "z", z.to_numpy())

    _write_frame(df, args.output)
    if args.output is not None:
        logger.info(f"Estimates saved to {args.output}")
    logger.info(f"Final state: x={kf.x:.6f}, P={kf.P:.3e}")
    return 0


def cmd_simulate(args):
    """Generate a synthetic series from the configured model."""
    from scalar_kalman.utils.simulation import simulate_linear_gaussian

    logger = get_logger(__name__)
    config = load_config(args.config)
    params = params_from_config(config)

    logger.info(f"Simulating {args.n} steps (seed={args.seed})...")
    df = simulate_linear_gaussian(params, n=args.n, seed=args.seed)

    _write_frame(df, args.output)
    logger.info(f"Simulated series saved to {args.output}")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="scalar-kalman",
        description="Scalar Kalman filter (no control input)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Filter command
    filt_parser = subparsers.add_parser("filter", help="Filter a series of observations")
    filt_parser.add_argument("--config", "-c", required=True, help="Path to config file")
    filt_parser.add_argument("--input", "-i", required=True, help="CSV file with observations")
    filt_parser.add_argument("--column", help="Observation column (default: config data.column, else z, else first)")
    filt_parser.add_argument("--output", "-o", help="Output CSV (default: stdout)")
    filt_parser.add_argument("--trace", action="store_true", help="Write per-step diagnostics")
    filt_parser.set_defaults(func=cmd_filter)

    # Simulate command
    sim_parser = subparsers.add_parser("simulate", help="Simulate a synthetic series")
    sim_parser.add_argument("--config", "-c", required=True, help="Path to config file")
    sim_parser.add_argument("--output", "-o", required=True, help="Output CSV")
    sim_parser.add_argument("--n", type=int, default=500, help="Number of steps")
    sim_parser.add_argument("--seed", type=int, default=42, help="Random seed")
    sim_parser.set_defaults(func=cmd_simulate)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # Setup logging
    config = load_config(args.config)
    log_config = config.get("logging") or {}
    # Logs go to stderr so CSV written to stdout stays clean
    setup_logging(
        level=log_config.get("level") or "INFO",
        log_file=log_config.get("file"),
        stream=sys.stderr,
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
