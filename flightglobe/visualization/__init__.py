"""
Visualization Module
====================

matplotlib rendering of globe snapshots.

All functions return matplotlib figure objects or numpy images.
"""

from flightglobe.visualization.globe import (
    CameraBasis,
    project,
    shade_globe,
    render_globe,
    save_snapshot,
)

__all__ = [
    "CameraBasis",
    "project",
    "shade_globe",
    "render_globe",
    "save_snapshot",
]
