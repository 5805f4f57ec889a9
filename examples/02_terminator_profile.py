#!/usr/bin/env python3
"""
Day/Night Terminator Profile
============================

This example shows how the globe shading blends across the terminator:
- Day strength, a soft step over sun alignment -0.25 to 0.5
- Atmosphere glow, strongest at grazing view angles (fresnel)
- Twilight tint, shifting from orange to blue as the sun rises

Usage:
    python 02_terminator_profile.py
    python 02_terminator_profile.py --view-angle 80
    python 02_terminator_profile.py --help

Output:
    - Console: Blend factors along a great circle through the subsolar point
    - Graph: terminator_profile.png
"""

import argparse
import sys

import numpy as np

# Add parent directory to path for running without installation
sys.path.insert(0, '..')

try:
    from flightglobe.illumination import (
        AtmospherePalette,
        atmosphere_mix,
        atmosphere_tint,
        day_strength,
    )
except ImportError:
    print("Error: flightglobe package not found.")
    print("Please install it first: pip install -e . (from the project root)")
    sys.exit(1)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Plot the terminator and atmosphere blend factors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                       # Default: view angle 70 deg from the normal
  %(prog)s --view-angle 0        # Looking straight down (no limb glow)
  %(prog)s --view-angle 89       # Near the limb (strong glow)
        """
    )
    parser.add_argument(
        "--view-angle", type=float, default=70.0,
        help="Angle between view direction and surface normal in degrees (default: 70)"
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Disable plotting (text output only)"
    )
    parser.add_argument(
        "--output", type=str, default="terminator_profile.png",
        help="Output filename for the plot"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    print("=" * 70)
    print("DAY/NIGHT TERMINATOR PROFILE")
    print("=" * 70)

    fresnel_term = 1.0 - abs(np.cos(np.radians(args.view_angle)))
    print(f"\nView angle: {args.view_angle:.1f} deg (fresnel factor {fresnel_term:.3f})")

    # Angular distance from the subsolar point
    sun_angle = np.linspace(0.0, 180.0, 361)
    alignment = np.cos(np.radians(sun_angle))

    day = day_strength(alignment)
    glow = atmosphere_mix(alignment, fresnel_term)
    palette = AtmospherePalette()
    tint = atmosphere_tint(alignment, palette)

    print("\n" + "-" * 70)
    print(f"{'Sun angle':>10} {'N.S':>8} {'Day':>8} {'Glow':>8} {'Tint (R, G, B)':>24}")
    print("-" * 70)
    for angle in range(0, 181, 15):
        i = angle * 2
        r, g, b = tint[i]
        print(f"{angle:>10d} {alignment[i]:>8.3f} {day[i]:>8.3f} {glow[i]:>8.3f} "
              f"{f'({r:.2f}, {g:.2f}, {b:.2f})':>24}")
    print("-" * 70)

    # Terminator width: where day strength moves from 5% to 95%
    lit = sun_angle[day >= 0.95].max()
    dark = sun_angle[day <= 0.05].min()

    print("\n" + "=" * 70)
    print("KEY INSIGHTS")
    print("=" * 70)
    print(f"\n1. Fully lit out to {lit:.1f} deg from the subsolar point")
    print(f"2. Fully dark beyond {dark:.1f} deg")
    print(f"3. Soft terminator width: {dark - lit:.1f} deg of arc")
    print(f"4. Peak glow at this view angle: {glow.max():.3f}")

    # Plotting
    if not args.no_plot:
        try:
            import matplotlib
            matplotlib.use('Agg')
            import matplotlib.pyplot as plt

            fig, axes = plt.subplots(2, 1, figsize=(10, 8), sharex=True,
                                     gridspec_kw={'height_ratios': [3, 1]})
            fig.suptitle('Terminator and Atmosphere Blend Factors', fontsize=14, fontweight='bold')

            ax1 = axes[0]
            ax1.plot(sun_angle, day, 'b-', linewidth=2, label='Day strength')
            ax1.plot(sun_angle, glow, 'r--', linewidth=2, label='Atmosphere mix')
            ax1.axvline(90.0, color='gray', linestyle=':', label='Geometric terminator')
            ax1.set_ylabel('Blend factor')
            ax1.set_ylim(-0.05, 1.05)
            ax1.legend()
            ax1.grid(True, alpha=0.3)

            ax2 = axes[1]
            ax2.imshow(tint[None, :, :], aspect='auto', extent=(0, 180, 0, 1))
            ax2.set_yticks([])
            ax2.set_xlabel('Angle from subsolar point (deg)')
            ax2.set_title('Atmosphere tint')

            plt.tight_layout()
            plt.savefig(args.output, dpi=150, bbox_inches='tight')
            print(f"\nPlot saved to: {args.output}")

        except ImportError:
            print("\nNote: matplotlib not available, skipping plot generation")

    print("\n" + "=" * 70)
    print("PHYSICAL EXPLANATION")
    print("=" * 70)
    print("""
1. SOFT TERMINATOR: Real twilight spreads over several degrees because
   the atmosphere scatters light past the geometric day/night line.
   A smoothstep reproduces that gradual fade.

2. LIMB GLOW: Light travels through more atmosphere near the edge of
   the disk. The fresnel factor 1 - |V.N| grows toward the limb and
   squares into the glow opacity.

3. TWILIGHT COLOR: Near the terminator the long slant path removes blue
   light, leaving the orange tint; on the day side the glow turns blue.
""")


if __name__ == "__main__":
    main()
