#!/usr/bin/env python3
"""Fit an eta-3 spline for a scenario and export the rendered points.

Writes the points as ``x,y`` CSV rows and, optionally, a plot of the curve.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger
from eta3_spline.config import Eta3Config, load_config, validate_config
from eta3_spline.planning import eta_3
from eta3_spline.visualization import export_points_csv, plot_curve


def main():
    """Main function."""
    parser = argparse.ArgumentParser(
        description='Render an eta-3 spline to CSV'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to scenario configuration file (defaults are used if omitted)'
    )
    parser.add_argument(
        '--num-pts',
        type=int,
        default=None,
        help='Number of rendered points (overrides config)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output CSV file (overrides config)'
    )
    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Output image file for a plot of the curve (overrides config)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level'
    )

    args = parser.parse_args()

    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=args.log_level
    )

    if args.config is not None:
        logger.info(f"Loading scenario from {args.config}")
        config = load_config(args.config)
    else:
        logger.info("No scenario given, using default parameters")
        config = Eta3Config()

    if args.num_pts is not None:
        config.num_pts = args.num_pts
    if args.output is not None:
        config.output_path = args.output
    if args.plot is not None:
        config.plot_path = args.plot

    # Overrides bypass load_config, check the final parameters
    validate_config(config)

    start = config.start_state()
    end = config.end_state()
    curve = eta_3(start, end, config.eta_param())

    export_points_csv(curve.render(config.num_pts), config.output_path)

    if config.plot_path:
        plot_curve(curve, config.plot_path, num_pts=config.num_pts, start=start, end=end)

    logger.success("Rendering complete!")


if __name__ == '__main__':
    main()
