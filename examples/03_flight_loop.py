#!/usr/bin/env python3
"""
Looping Great-Circle Flight
===========================

This example animates a Shanghai -> Dallas flight without a renderer:
- The animation clock is scaled into simulated flight time
- Progress wraps around so the flight repeats forever
- Each frame reports position, local timezone and local time

Usage:
    python 03_flight_loop.py
    python 03_flight_loop.py --time-scale 7200 --frames 12
    python 03_flight_loop.py --config ../globe.yaml

Output:
    - Console: Frame-by-frame flight log
    - Graph: flight_loop.png (route on a longitude/latitude map)
"""

import argparse
import sys

import numpy as np

# Add parent directory to path for running without installation
sys.path.insert(0, '..')

try:
    from flightglobe.config import ConfigurationManager, GlobeConfig
    from flightglobe.core import build_context
    from flightglobe.geometry import full_path, to_geo_coordinate
except ImportError:
    print("Error: flightglobe package not found.")
    print("Please install it first: pip install -e . (from the project root)")
    sys.exit(1)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Animate a looping great-circle flight",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                         # Default PVG -> DFW flight
  %(prog)s --time-scale 60         # One simulated minute per clock unit
  %(prog)s --loops 2 --frames 30   # Two full loops
        """
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Optional JSON/YAML configuration file"
    )
    parser.add_argument(
        "--time-scale", type=float, default=None,
        help="Simulated milliseconds per clock unit (default: from config, 3600)"
    )
    parser.add_argument(
        "--frames", type=int, default=16,
        help="Frames per loop to print (default: 16)"
    )
    parser.add_argument(
        "--loops", type=int, default=1,
        help="Number of loops to run (default: 1)"
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Disable plotting (text output only)"
    )
    parser.add_argument(
        "--output", type=str, default="flight_loop.png",
        help="Output filename for the plot"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    if args.config:
        loaded = ConfigurationManager().load_config(args.config)
        if not loaded.is_valid:
            print("Invalid configuration:")
            for error in loaded.validation_errors:
                print(f"  - {error}")
            sys.exit(1)
        config = loaded.config
    else:
        config = GlobeConfig()

    if args.time_scale is not None:
        config.flight.time_scale_factor = args.time_scale

    context = build_context(config)
    period = context.tracker.loop_period

    print("=" * 70)
    print(f"FLIGHT LOOP: {config.flight.depart_name} -> {config.flight.arrive_name}")
    print("=" * 70)
    print(f"\nScheduled: {config.flight.depart_time} -> {config.flight.arrive_time}")
    print(f"Flight duration: {context.leg.duration / 3.6e6:.2f} h")
    print(f"Time scale: {context.tracker.time_scale_factor:.0f} ms per clock unit")
    print(f"Loop period: {period:.2f} clock units")

    track = []
    context.add_animation_callback(
        lambda frame: track.append((frame.coordinate.longitude, frame.coordinate.latitude))
    )

    print("\n" + "-" * 70)
    print(f"{'Clock':>10} {'Progress':>9} {'Lat':>8} {'Lon':>9} {'TZ':>4}  {'Local time':<24}")
    print("-" * 70)

    n_frames = args.frames * args.loops
    for clock in np.linspace(0.0, period * args.loops, n_frames, endpoint=False):
        frame = context.tick(clock)
        print(f"{frame.clock:>10.2f} {frame.progress.ratio * 100:>8.1f}% "
              f"{frame.coordinate.latitude:>8.2f} {frame.coordinate.longitude:>9.2f} "
              f"{frame.timezone_label:>4}  {frame.local_time:<24}")

    print("-" * 70)

    route = full_path(context.leg.depart_point, context.leg.arrive_point, segments=128)
    coords = [to_geo_coordinate(p) for p in route]
    northmost = max(coords, key=lambda c: c.latitude)
    lons = np.array([c.longitude for c in coords])
    lats = np.array([c.latitude for c in coords])
    jumps = np.where(np.abs(np.diff(lons)) > 180.0)[0]

    print("\n" + "=" * 70)
    print("KEY INSIGHTS")
    print("=" * 70)
    print(f"\n1. The great circle peaks at {northmost.latitude:.1f} N, "
          f"{northmost.longitude:.1f} deg, far north of both airports")
    if len(jumps):
        print("2. The route crosses the date line, so the timezone label jumps from +12 to -12")
    else:
        print("2. The route stays clear of the date line")
    print(f"3. The loop restarts every {period:.1f} clock units")

    # Plotting
    if not args.no_plot:
        try:
            import matplotlib
            matplotlib.use('Agg')
            import matplotlib.pyplot as plt

            # Break the line where it wraps across the date line
            lons = np.insert(lons, jumps + 1, np.nan)
            lats = np.insert(lats, jumps + 1, np.nan)

            fig, ax = plt.subplots(figsize=(12, 6))
            ax.plot(lons, lats, 'r-', linewidth=2, label='Great-circle route')
            frame_lons, frame_lats = zip(*track)
            ax.scatter(frame_lons, frame_lats, c='orange', s=20, zorder=3, label='Frames')
            ax.set_xlim(-180, 180)
            ax.set_ylim(-90, 90)
            ax.axhline(0.0, color='blue', alpha=0.5, linewidth=0.8)
            ax.axhline(66.5, color='blue', alpha=0.5, linewidth=0.8, linestyle='--')
            ax.set_xlabel('Longitude (deg)')
            ax.set_ylabel('Latitude (deg)')
            ax.set_title(f'{config.flight.depart_name} -> {config.flight.arrive_name}')
            ax.legend()
            ax.grid(True, alpha=0.3)

            plt.tight_layout()
            plt.savefig(args.output, dpi=150, bbox_inches='tight')
            print(f"\nPlot saved to: {args.output}")

        except ImportError:
            print("\nNote: matplotlib not available, skipping plot generation")


if __name__ == "__main__":
    main()
