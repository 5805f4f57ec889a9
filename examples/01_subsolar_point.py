#!/usr/bin/env python3
"""
Subsolar Point Through the Year
===============================

This example traces the point where the sun is directly overhead:
- Westward drift of 15 deg per hour (one full turn per UTC day)
- Seasonal north/south swing between the tropics

The model is a single-harmonic approximation good to a few degrees,
which is plenty for shading a globe.

Usage:
    python 01_subsolar_point.py
    python 01_subsolar_point.py --year 2026 --hour 6
    python 01_subsolar_point.py --help

Output:
    - Console: Table of subsolar positions by month
    - Graph: subsolar_point.png
"""

import argparse
import sys
from datetime import datetime, timedelta, timezone

import numpy as np

# Add parent directory to path for running without installation
sys.path.insert(0, '..')

try:
    from flightglobe.solar import subsolar_latitude, subsolar_longitude, sun_direction
    from flightglobe.utils import AXIAL_TILT_DEG
except ImportError:
    print("Error: flightglobe package not found.")
    print("Please install it first: pip install -e . (from the project root)")
    sys.exit(1)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Trace the subsolar point through a day and a year",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                    # Year 2025, noon UTC
  %(prog)s --hour 0           # Midnight UTC (sun over the date line)
  %(prog)s --year 2026        # Another year
        """
    )
    parser.add_argument(
        "--year", type=int, default=2025,
        help="Calendar year (default: 2025)"
    )
    parser.add_argument(
        "--hour", type=int, default=12,
        help="UTC hour for the yearly table (default: 12)"
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Disable plotting (text output only)"
    )
    parser.add_argument(
        "--output", type=str, default="subsolar_point.png",
        help="Output filename for the plot"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    print("=" * 70)
    print("SUBSOLAR POINT")
    print("=" * 70)
    print(f"\nYear: {args.year}, time of day: {args.hour:02d}:00 UTC")

    # Monthly table
    print("\n" + "-" * 70)
    print(f"{'Date':>12} {'Latitude':>12} {'Longitude':>12} {'Sun direction (x, y, z)':>30}")
    print("-" * 70)

    for month in range(1, 13):
        instant = datetime(args.year, month, 21, args.hour, 0, tzinfo=timezone.utc)
        lat = subsolar_latitude(instant)
        lon = subsolar_longitude(instant)
        x, y, z = sun_direction(instant)
        print(f"{instant.strftime('%Y-%m-%d'):>12} {lat:>12.2f} {lon:>12.2f} "
              f"{f'({x:+.3f}, {y:+.3f}, {z:+.3f})':>30}")

    print("-" * 70)

    # Daily drift
    day_start = datetime(args.year, 6, 21, tzinfo=timezone.utc)
    hours = np.arange(0, 24.25, 0.25)
    day_longitudes = np.array([
        subsolar_longitude(day_start + timedelta(hours=float(h))) for h in hours
    ])

    year_start = datetime(args.year, 1, 1, args.hour, tzinfo=timezone.utc)
    days = np.arange(0, 365)
    year_latitudes = np.array([
        subsolar_latitude(year_start + timedelta(days=int(d))) for d in days
    ])

    print("\n" + "=" * 70)
    print("KEY INSIGHTS")
    print("=" * 70)
    print(f"\n1. Northernmost subsolar latitude: {year_latitudes.max():+.2f} deg "
          f"(day {days[np.argmax(year_latitudes)] + 1})")
    print(f"2. Southernmost subsolar latitude: {year_latitudes.min():+.2f} deg "
          f"(day {days[np.argmin(year_latitudes)] + 1})")
    print(f"3. Amplitude equals the axial tilt used by the model: {AXIAL_TILT_DEG} deg")
    print(f"4. At 00:00 UTC the sun is over {subsolar_longitude(day_start):.0f} deg, "
          f"at 12:00 UTC over {subsolar_longitude(day_start + timedelta(hours=12)):.0f} deg")

    # Plotting
    if not args.no_plot:
        try:
            import matplotlib
            matplotlib.use('Agg')
            import matplotlib.pyplot as plt

            fig, axes = plt.subplots(1, 2, figsize=(14, 5))
            fig.suptitle(f'Subsolar Point ({args.year})', fontsize=14, fontweight='bold')

            ax1 = axes[0]
            ax1.plot(hours, day_longitudes, 'b.', markersize=3)
            ax1.set_xlabel('UTC hour')
            ax1.set_ylabel('Subsolar longitude (deg)')
            ax1.set_title('Daily westward drift')
            ax1.set_xlim(0, 24)
            ax1.set_ylim(-180, 180)
            ax1.grid(True, alpha=0.3)

            ax2 = axes[1]
            ax2.plot(days + 1, year_latitudes, 'r-', linewidth=2)
            ax2.axhline(AXIAL_TILT_DEG, color='gray', linestyle='--', label='Tropic of Cancer')
            ax2.axhline(-AXIAL_TILT_DEG, color='gray', linestyle=':', label='Tropic of Capricorn')
            ax2.set_xlabel('Day of year')
            ax2.set_ylabel('Subsolar latitude (deg)')
            ax2.set_title('Seasonal declination')
            ax2.legend()
            ax2.grid(True, alpha=0.3)

            plt.tight_layout()
            plt.savefig(args.output, dpi=150, bbox_inches='tight')
            print(f"\nPlot saved to: {args.output}")

        except ImportError:
            print("\nNote: matplotlib not available, skipping plot generation")

    print("\n" + "=" * 70)
    print("PHYSICAL EXPLANATION")
    print("=" * 70)
    print("""
1. ROTATION: The Earth turns 360 deg in 24 hours, so the subsolar point
   moves west by 15 deg per hour. It sits on the prime meridian at
   12:00 UTC and on the date line at 00:00 UTC.

2. DECLINATION: The tilt of the rotation axis makes the subsolar
   latitude swing between the tropics once a year, reaching the
   Tropic of Capricorn around 21 December.

3. APPROXIMATION: There is no equation of time and no leap-year
   correction, so positions can be off by a few degrees.
""")


if __name__ == "__main__":
    main()
