#!/usr/bin/env python3
"""
Globe Snapshots
===============

This example renders the globe at several points of the flight loop:
- Per-pixel day/night shading with a soft terminator
- Atmosphere glow at the limb with a twilight tint
- Graticule, great-circle route and flight marker

Usage:
    python 04_render_globe.py
    python 04_render_globe.py --frames 6 --resolution 256
    python 04_render_globe.py --time-source fixed

Output:
    - Graph: render_globe.png (grid of snapshots)
"""

import argparse
import sys

import numpy as np

# Add parent directory to path for running without installation
sys.path.insert(0, '..')

try:
    from flightglobe.config import GlobeConfig
    from flightglobe.core import build_context
except ImportError:
    print("Error: flightglobe package not found.")
    print("Please install it first: pip install -e . (from the project root)")
    sys.exit(1)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Render globe snapshots along the flight",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # 4 frames, simulated sun
  %(prog)s --time-source fixed      # Sun pinned over 23.5 N, 90 W
  %(prog)s --resolution 128         # Faster, coarser shading
        """
    )
    parser.add_argument(
        "--frames", type=int, default=4,
        help="Number of snapshots across one loop (default: 4)"
    )
    parser.add_argument(
        "--resolution", type=int, default=256,
        help="Shaded image size in pixels (default: 256)"
    )
    parser.add_argument(
        "--time-source", type=str, default="simulated",
        choices=["simulated", "wall", "fixed"],
        help="What drives the sun position (default: simulated)"
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Disable plotting (text output only)"
    )
    parser.add_argument(
        "--output", type=str, default="render_globe.png",
        help="Output filename for the plot"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    config = GlobeConfig()
    config.render.resolution = args.resolution
    config.solar.time_source = args.time_source

    context = build_context(config)
    clocks = np.linspace(0.0, context.tracker.loop_period, args.frames, endpoint=False)

    print("=" * 70)
    print("GLOBE SNAPSHOTS")
    print("=" * 70)
    print(f"\nSun driven by: {args.time_source}")
    print(f"Frames: {args.frames} at {args.resolution} px")

    frames = [context.tick(clock) for clock in clocks]

    print("\n" + "-" * 70)
    print(f"{'Frame':>6} {'Progress':>9} {'Sun lat':>9} {'Sun lon':>9}  {'Local time':<24}")
    print("-" * 70)
    for i, frame in enumerate(frames):
        print(f"{i:>6d} {frame.progress.ratio * 100:>8.1f}% {frame.sun.latitude:>9.2f} "
              f"{frame.sun.longitude:>9.2f}  {frame.local_time:<24}")
    print("-" * 70)

    if args.no_plot:
        return

    try:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
        from flightglobe.visualization import render_globe, save_snapshot
    except ImportError:
        print("\nNote: matplotlib not available, skipping plot generation")
        return

    cols = min(len(frames), 4)
    rows = int(np.ceil(len(frames) / cols))
    fig, axes = plt.subplots(rows, cols, figsize=(4 * cols, 4 * rows), squeeze=False)

    for ax, frame in zip(axes.flat, frames):
        render_globe(context, frame, config, ax=ax)
    for ax in list(axes.flat)[len(frames):]:
        ax.set_axis_off()

    fig.suptitle(f'{config.flight.depart_name} -> {config.flight.arrive_name}',
                 color='white', fontsize=14, fontweight='bold')
    plt.tight_layout()
    output = save_snapshot(fig, args.output, dpi=120)
    print(f"\nPlot saved to: {output}")


if __name__ == "__main__":
    main()
