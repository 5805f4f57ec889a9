#!/usr/bin/env python3
"""
Configuration File Usage
========================

This example shows how to drive a globe scene from a configuration file:
- Writing the example configuration (YAML or JSON)
- Loading and validating it with ConfigurationManager
- Reporting validation errors for a broken configuration

Usage:
    python 05_config_file_demo.py
    python 05_config_file_demo.py --format json
"""

import argparse
import sys
import tempfile
from pathlib import Path

# Add parent directory to path for running without installation
sys.path.insert(0, '..')

try:
    from flightglobe.config import ConfigurationManager
    from flightglobe.core import build_context
except ImportError:
    print("Error: flightglobe package not found.")
    print("Please install it first: pip install -e . (from the project root)")
    sys.exit(1)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Write, load and validate globe configuration files",
    )
    parser.add_argument(
        "--format", type=str, default="yaml", choices=["yaml", "json"],
        help="Configuration file format (default: yaml)"
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Accepted for run_all.py compatibility (no plots are produced)"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    print("=" * 70)
    print("CONFIGURATION FILE DEMO")
    print("=" * 70)

    with tempfile.TemporaryDirectory() as tmp:
        manager = ConfigurationManager(base_path=tmp)
        path = Path(tmp) / f"globe.{args.format}"

        # 1. Write the example
        manager.save_example_config(path.name)
        print(f"\n1. Example configuration written to {path.name}:\n")
        print(path.read_text())

        # 2. Load and build a context
        loaded = manager.load_config(path.name)
        print(f"2. Loaded: valid={loaded.is_valid}")
        context = build_context(loaded.config)
        frame = context.tick(0.0)
        print(f"   First frame: {frame.coordinate.latitude:.2f}, "
              f"{frame.coordinate.longitude:.2f} at {frame.local_time}")

        # 3. A broken configuration
        broken = manager.load_config({
            "flight": {
                "depart_latitude": 120.0,
                "depart_time": "2025-06-01T12:00:00Z",
                "arrive_time": "2025-06-01T11:00:00Z",
                "time_scale_factor": 0,
            },
            "solar": {"time_source": "sundial"},
            "atmosphere": {"day_color": "not-a-color"},
        })
        print(f"\n3. Broken configuration: valid={broken.is_valid}")
        for error in broken.validation_errors:
            print(f"   - {error}")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()
