#!/usr/bin/env python3
"""
Run All Examples
================

This script runs all flightglobe examples sequentially.

Usage:
    python run_all.py              # Run all examples
    python run_all.py --no-plot    # Run without generating plots
    python run_all.py --list       # List available examples
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path


EXAMPLES = [
    ("01_subsolar_point.py", "Subsolar Point Through the Year"),
    ("02_terminator_profile.py", "Day/Night Terminator Profile"),
    ("03_flight_loop.py", "Looping Great-Circle Flight"),
    ("04_render_globe.py", "Globe Snapshots"),
    ("05_config_file_demo.py", "Configuration File Usage"),
]


def parse_args():
    parser = argparse.ArgumentParser(
        description="Run all flightglobe examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Disable plot generation for all examples"
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List available examples without running them"
    )
    parser.add_argument(
        "--example", type=int, nargs="+",
        help="Run specific example(s) by number (e.g., --example 1 3)"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    # Change to examples directory
    script_dir = Path(__file__).parent
    os.chdir(script_dir)

    if args.list:
        print("=" * 60)
        print("AVAILABLE FLIGHTGLOBE EXAMPLES")
        print("=" * 60)
        for filename, description in EXAMPLES:
            num = filename.split("_")[0]
            print(f"  {num}: {description}")
            print(f"       {filename}")
        print("=" * 60)
        return

    if args.example:
        selected = []
        for num in args.example:
            if 1 <= num <= len(EXAMPLES):
                selected.append(EXAMPLES[num - 1])
            else:
                print(f"Warning: Example {num} not found (valid: 1-{len(EXAMPLES)})")
        examples_to_run = selected
    else:
        examples_to_run = EXAMPLES

    if not examples_to_run:
        print("No examples to run!")
        return

    print("=" * 70)
    print("FLIGHTGLOBE EXAMPLES RUNNER")
    print("=" * 70)
    print(f"Running {len(examples_to_run)} example(s)...")
    if args.no_plot:
        print("(Plot generation disabled)")
    print()

    results = []

    for i, (filename, description) in enumerate(examples_to_run, 1):
        print("\n" + "=" * 70)
        print(f"[{i}/{len(examples_to_run)}] {description}")
        print(f"    Running: {filename}")
        print("=" * 70 + "\n")

        cmd = [sys.executable, filename]
        if args.no_plot:
            cmd.append("--no-plot")

        result = subprocess.run(cmd, check=False)
        success = result.returncode == 0
        results.append((filename, success))

        if success:
            print(f"\n[OK] {filename} completed successfully")
        else:
            print(f"\n[X] {filename} exited with code {result.returncode}")

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    passed = sum(1 for _, success in results if success)
    failed = len(results) - passed

    for filename, success in results:
        status = "[OK] PASS" if success else "[X] FAIL"
        print(f"  {status}  {filename}")

    print("-" * 70)
    print(f"Total: {passed} passed, {failed} failed out of {len(results)}")
    print("=" * 70)

    plots = list(Path(".").glob("*.png"))
    if plots:
        print(f"\nGenerated {len(plots)} plot(s):")
        for p in sorted(plots):
            print(f"  - {p}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
