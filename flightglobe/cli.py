"""
Command-line interface for flightglobe.

Provides CLI commands for:
- Printing the subsolar point for an instant
- Printing flight progress for an animation-clock value
- Rendering a globe snapshot
- Writing an example configuration
"""

import argparse
import logging
import sys
from datetime import datetime, timezone

from flightglobe import __version__
from flightglobe.config.settings import parse_time


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _parse_instant(text):
    """ISO-8601 string -> aware UTC datetime (now if text is None)."""
    if text is None:
        return datetime.now(timezone.utc)
    return parse_time(text)


def _load_config(args: argparse.Namespace):
    """Load the configuration named on the command line (or defaults)."""
    from flightglobe.config import ConfigurationManager, GlobeConfig

    if not args.config:
        return GlobeConfig()

    loaded = ConfigurationManager().load_config(args.config)
    if not loaded.is_valid:
        raise ValueError("Invalid configuration: " + "; ".join(loaded.validation_errors))
    return loaded.config


def run_sun(args: argparse.Namespace) -> int:
    """Print the subsolar point."""
    from flightglobe.solar import sun_state

    instant = _parse_instant(args.time)
    state = sun_state(instant)

    print(f"Subsolar point at {instant.strftime('%Y-%m-%d %H:%M')} UTC:")
    print(f"  Latitude:  {state.latitude:+8.3f} deg")
    print(f"  Longitude: {state.longitude:+8.3f} deg")
    x, y, z = state.direction
    print(f"  Direction: ({x:+.5f}, {y:+.5f}, {z:+.5f})")
    return 0


def run_flight(args: argparse.Namespace) -> int:
    """Print flight progress at an animation-clock value."""
    from flightglobe.core import build_context

    config = _load_config(args)
    context = build_context(config)
    frame = context.tick(args.clock)

    print(f"Flight {config.flight.depart_name} -> {config.flight.arrive_name}")
    print(f"  Animation clock: {frame.clock:.3f}")
    print(f"  Progress:        {frame.progress.ratio * 100:.2f}%")
    print(f"  Position:        {frame.coordinate.latitude:+.3f}, "
          f"{frame.coordinate.longitude:+.3f} deg")
    print(f"  Local time:      {frame.local_time}")
    print(f"  Loop period:     {context.tracker.loop_period:.3f} clock units")
    return 0


def run_render(args: argparse.Namespace) -> int:
    """Render a globe snapshot to an image file."""
    import matplotlib
    matplotlib.use('Agg')

    from flightglobe.core import build_context
    from flightglobe.visualization import render_globe, save_snapshot

    config = _load_config(args)
    if args.resolution:
        config.render.resolution = args.resolution

    context = build_context(config)
    frame = context.tick(args.clock)

    fig = render_globe(context, frame, config)
    output_path = save_snapshot(fig, args.output or config.render.output_path)
    print(f"Snapshot saved to: {output_path}")
    return 0


def run_init_config(args: argparse.Namespace) -> int:
    """Write the example configuration."""
    from flightglobe.config import ConfigurationManager

    ConfigurationManager().save_example_config(args.output)
    print(f"Example configuration written to: {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="flightglobe",
        description="flightglobe: sun position, terminator and looping flight on a globe",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Subsolar point at a given instant
    flightglobe sun --time 2025-06-21T12:00:00Z

    # Flight progress 200 clock units into the animation
    flightglobe --config globe.yaml flight --clock 200

    # Render a snapshot
    flightglobe render --clock 200 --output output/globe.png

    # Write an example configuration
    flightglobe init-config --output globe.yaml
        """,
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"flightglobe {__version__}",
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to JSON or YAML configuration file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    sun = subparsers.add_parser("sun", help="Print the subsolar point")
    sun.add_argument(
        "-t", "--time",
        type=str,
        help="ISO-8601 instant (default: now, UTC)",
    )
    sun.set_defaults(handler=run_sun)

    flight = subparsers.add_parser("flight", help="Print flight progress")
    flight.add_argument(
        "--clock",
        type=float,
        default=0.0,
        help="Animation clock value",
    )
    flight.set_defaults(handler=run_flight)

    render = subparsers.add_parser("render", help="Render a globe snapshot")
    render.add_argument(
        "--clock",
        type=float,
        default=0.0,
        help="Animation clock value",
    )
    render.add_argument(
        "-r", "--resolution",
        type=int,
        help="Shaded image size in pixels",
    )
    render.add_argument(
        "-o", "--output",
        type=str,
        help="Output image path",
    )
    render.set_defaults(handler=run_render)

    init = subparsers.add_parser("init-config", help="Write an example configuration")
    init.add_argument(
        "-o", "--output",
        type=str,
        default="globe.yaml",
        help="Output path (.yaml, .yml or .json)",
    )
    init.set_defaults(handler=run_init_config)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return args.handler(args)
    except Exception as e:
        logging.exception(f"Command '{args.command}' failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
