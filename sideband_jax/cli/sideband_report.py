import argparse
import logging
import os
import sys
from pathlib import Path

import jax

from sideband_jax.bessel import get_evaluator
from sideband_jax.comparison import ComparisonConfig, curve_label, run_comparison
from sideband_jax.constants import DEFAULT_H_RANGE, DEFAULT_SAMPLES, SUPPORTED_ORDERS
from sideband_jax.errors import ConfigurationError


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )
    return logging.getLogger("sideband-report")


def generate_report(curves, evaluator_name: str) -> str:
    """Text summary of one comparison run: grid, endpoints and per-order deviation."""
    h = curves.h
    lines = []
    lines.append("=" * 60)
    lines.append("Sideband Approximation Report")
    lines.append(f"Bessel evaluator: {evaluator_name}")
    lines.append(f"Grid: h in [{float(h[0]):.4f}, {float(h[-1]):.4f}], {h.shape[0]} samples")
    lines.append("-" * 60)
    lines.append(f"{'order':<6} {'approx':<8} {'J_n(h_max)':>12} {'approx(h_max)':>14} {'max |diff|':>12}")

    deviation = curves.deviation()
    for order in curves.orders:
        lines.append(
            f"{order:<6} {curve_label(order):<8} {float(curves.reference(order)[-1]):>12.6f} "
            f"{float(curves.approximation(order)[-1]):>14.6f} {deviation[order]:>12.3e}"
        )

    lines.append("=" * 60)
    return "\n".join(lines)


def prepare_output_path(path) -> Path:
    """Creates the parent directory of an output file and checks it can be written."""
    path = Path(path)
    if path.is_dir():
        raise IsADirectoryError(f"Output path {path} is a directory.")
    path.parent.mkdir(parents=True, exist_ok=True)
    if not os.access(path.parent, os.W_OK):
        raise PermissionError(f"Cannot write to {path.parent}.")
    return path


def build_parser():
    parser = argparse.ArgumentParser(
        description="Compare closed-form PM sideband coefficients with Bessel functions J_n(h)."
    )
    parser.add_argument("--h-min", type=float, default=DEFAULT_H_RANGE[0], help="Lower end of the h grid (rad).")
    parser.add_argument("--h-max", type=float, default=DEFAULT_H_RANGE[1], help="Upper end of the h grid (rad).")
    parser.add_argument("--samples", "-n", type=int, default=DEFAULT_SAMPLES, help="Number of grid points.")
    parser.add_argument("--orders", type=int, nargs="+", default=list(SUPPORTED_ORDERS),
                        help="Sideband orders to compare (subset of 0 1 2 3).")
    parser.add_argument("--evaluator", choices=["scipy", "jax"], default="scipy", help="Bessel backend.")
    parser.add_argument("--figure", "-f", type=str, help="Optional path to save the two-panel figure.")
    parser.add_argument("--output", "-o", type=str, help="Optional output text file to save the report.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logging(args.verbose)
    jax.config.update("jax_enable_x64", True)

    try:
        config = ComparisonConfig(
            h_range=(args.h_min, args.h_max),
            samples=args.samples,
            orders=tuple(args.orders),
        )
        evaluator = get_evaluator(args.evaluator)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Both outputs are checked before either is written
    try:
        output_path = prepare_output_path(args.output) if args.output else None
        figure_path = prepare_output_path(args.figure) if args.figure else None
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.figure:
        # Headless rendering
        import matplotlib
        matplotlib.use("Agg")

    logger.info(f"Sampling {config.samples} points over [{config.h_min:.4f}, {config.h_max:.4f}]...")
    curves, panels = run_comparison(config, evaluator)

    if figure_path is not None:
        import matplotlib.pyplot as plt
        from sideband_jax.viz import PlotStyle, render_figure, save_figure

        style = PlotStyle()
        fig = render_figure(panels, style)
        save_figure(fig, figure_path, dpi=style.dpi)
        plt.close(fig)

    report = generate_report(curves, evaluator.name)
    print(report)

    if output_path is not None:
        with open(output_path, "w") as f:
            f.write(report)
        logger.info(f"Report saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
