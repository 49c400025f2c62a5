"""Command-line interface.

Usage:
    python -m yieldpoint                  # open the simulator window
    python -m yieldpoint --plot           # static matplotlib chart
    python -m yieldpoint --summary        # log thresholds and boundary stresses
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from yieldpoint.config import CURVE_RESOLUTION
from yieldpoint.logging_config import setup_logging
from yieldpoint.model.errors import YieldPointError

logger = logging.getLogger("yieldpoint.cli")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="yieldpoint", description="Yield point phenomenon simulator.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--plot", action="store_true", help="show the stress-strain curve and exit")
    mode.add_argument("--summary", action="store_true", help="log thresholds and boundary stresses and exit")
    parser.add_argument("--resolution", type=int, default=CURVE_RESOLUTION, help="curve sampling steps")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser.parse_args(argv)


def summary(resolution: int) -> None:
    """Log the threshold model and the stress at every phase boundary."""
    from yieldpoint.model.curve import generate_curve
    from yieldpoint.model.physics import classify_phase, stress_at
    from yieldpoint.model.thresholds import THRESHOLDS

    curve = generate_curve(resolution)
    logger.info(f"Curve: {len(curve)} points, strain 0 .. {curve.max_strain:.4f}")
    for name, strain in zip(
        ("elastic_limit", "upper_yield", "lower_yield_start", "plateau_end", "necking_start", "fracture"),
        THRESHOLDS.as_tuple(),
    ):
        logger.info(
            f"{name:>18}: ε = {strain:.4f}  σ = {stress_at(strain):7.2f} MPa  ({classify_phase(strain).value})"
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        if args.summary:
            summary(args.resolution)
            return 0
        if args.plot:
            from yieldpoint.model.curve import generate_curve
            from yieldpoint.model.playback import query_state

            curve = generate_curve(args.resolution)
            curve.plot(current=query_state(curve, curve.thresholds.necking_start))
            return 0

        from yieldpoint.main import main as run_gui
        return run_gui(resolution=args.resolution, argv=[sys.argv[0]])
    except YieldPointError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
