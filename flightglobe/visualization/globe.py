"""
Globe Snapshot Rendering
========================

Orthographic matplotlib rendering of the globe for one frame: a
per-pixel shaded sphere using the terminator/atmosphere model, the
graticule, the great-circle route and the flight markers.

All functions return matplotlib objects or numpy arrays; nothing is
shown interactively.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

import numpy as np
from matplotlib.colors import to_rgb

from flightglobe.config.settings import GlobeConfig
from flightglobe.core.context import FrameState, GlobeContext
from flightglobe.geometry.coordinates import normalize
from flightglobe.geometry.geodesic import full_path
from flightglobe.geometry.graticule import latitude_circle, longitude_circle
from flightglobe.illumination.terminator import (
    AtmospherePalette,
    composite,
    illumination_factors,
)

logger = logging.getLogger(__name__)

# Half-width of the view in globe radii
VIEW_EXTENT = 1.1

GRATICULE_COLOR = '#3355ff'
ROUTE_COLOR = '#ff2020'
MARKER_COLOR = '#ff3030'


@dataclass(frozen=True)
class CameraBasis:
    """Orthonormal camera frame for an orthographic view of the globe.

    Attributes:
        right: Screen x axis in world coordinates
        up: Screen y axis in world coordinates
        back: Unit vector from the globe center toward the camera
    """
    right: np.ndarray
    up: np.ndarray
    back: np.ndarray

    @classmethod
    def from_position(
        cls,
        position: Sequence[float],
        world_up: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> "CameraBasis":
        """Camera looking at the globe center from `position`."""
        back = normalize(position)
        right = np.cross(np.asarray(world_up, dtype=float), back)
        if np.linalg.norm(right) < 1e-9:
            # Looking straight down a pole
            right = np.array([1.0, 0.0, 0.0])
        right = normalize(right)
        up = np.cross(back, right)
        return cls(right=right, up=up, back=back)


def project(points, basis: CameraBasis) -> Tuple[np.ndarray, np.ndarray]:
    """
    Orthographic projection onto the screen plane.

    Parameters
    ----------
    points : array_like
        Points of shape (..., 3)
    basis : CameraBasis
        Camera frame

    Returns
    -------
    xy : ndarray
        Screen coordinates, shape (..., 2)
    visible : ndarray of bool
        True where the point faces the camera
    """
    p = np.asarray(points, dtype=float)
    xy = np.stack([p @ basis.right, p @ basis.up], axis=-1)
    visible = (p @ basis.back) > 0.0
    return xy, visible


def shade_globe(
    sun,
    basis: CameraBasis,
    resolution: int = 512,
    palette: Optional[AtmospherePalette] = None,
    night_color='#070b1a',
    lit_color='#2f6fa8',
    background='#000011',
) -> np.ndarray:
    """
    Shade the visible hemisphere of the unit globe.

    Parameters
    ----------
    sun : array_like
        Unit sun direction
    basis : CameraBasis
        Camera frame (orthographic, so the view vector is basis.back)
    resolution : int
        Image width and height in pixels
    palette : AtmospherePalette, optional
        Atmosphere colors
    night_color, lit_color, background
        matplotlib color specs

    Returns
    -------
    image : ndarray
        RGB image of shape (resolution, resolution, 3), row 0 at the bottom
    """
    coords = np.linspace(-VIEW_EXTENT, VIEW_EXTENT, int(resolution))
    u, v = np.meshgrid(coords, coords)
    rho2 = u**2 + v**2
    inside = rho2 <= 1.0

    w = np.sqrt(np.clip(1.0 - rho2, 0.0, None))
    normals = (
        u[..., None] * basis.right
        + v[..., None] * basis.up
        + w[..., None] * basis.back
    )

    factors = illumination_factors(normals, basis.back, np.asarray(sun, dtype=float), palette)
    surface = composite(to_rgb(night_color), to_rgb(lit_color), factors)

    image = np.empty(u.shape + (3,))
    image[...] = to_rgb(background)
    image[inside] = np.clip(surface[inside], 0.0, 1.0)
    return image


def _plot_polyline(ax, points, basis: CameraBasis, **kwargs):
    """Plot the camera-facing parts of a 3D polyline."""
    xy, visible = project(points, basis)
    xy = xy.copy()
    xy[~visible] = np.nan
    return ax.plot(xy[:, 0], xy[:, 1], **kwargs)


def _plot_marker(ax, point, basis: CameraBasis, **kwargs):
    xy, visible = project(np.asarray(point)[None, :], basis)
    if visible[0]:
        return ax.scatter(xy[:, 0], xy[:, 1], **kwargs)
    return None


def render_globe(
    context: GlobeContext,
    frame: FrameState,
    config: Optional[GlobeConfig] = None,
    ax=None,
):
    """
    Draw one frame of the globe.

    Parameters
    ----------
    context : GlobeContext
        Scene context (provides the flight leg)
    frame : FrameState
        Result of context.tick
    config : GlobeConfig, optional
        Colors and render settings (defaults if omitted)
    ax : matplotlib axis, optional
        Axis to draw into; a new figure is created if omitted

    Returns
    -------
    fig : matplotlib Figure
    """
    import matplotlib.pyplot as plt

    config = config or GlobeConfig()
    render = config.render
    atmosphere = config.atmosphere

    if ax is None:
        fig, ax = plt.subplots(figsize=(render.figure_size, render.figure_size))
    else:
        fig = ax.figure

    basis = CameraBasis.from_position(render.camera_position)
    palette = AtmospherePalette(atmosphere.day_color, atmosphere.twilight_color)

    image = shade_globe(
        frame.sun.direction,
        basis,
        resolution=render.resolution,
        palette=palette,
        night_color=atmosphere.night_color,
        lit_color=atmosphere.lit_color,
        background=render.background,
    )
    ax.imshow(
        image,
        origin='lower',
        extent=(-VIEW_EXTENT, VIEW_EXTENT, -VIEW_EXTENT, VIEW_EXTENT),
        interpolation='bilinear',
        zorder=0,
    )

    for lat in render.graticule_latitudes:
        _plot_polyline(ax, latitude_circle(lat), basis,
                       color=GRATICULE_COLOR, linewidth=1.0, alpha=0.8, zorder=2)
    for lon in render.graticule_longitudes:
        _plot_polyline(ax, longitude_circle(lon), basis,
                       color=GRATICULE_COLOR, linewidth=1.0, alpha=0.8, zorder=2)

    leg = context.leg
    route = full_path(leg.depart_point, leg.arrive_point,
                      segments=render.path_segments, radius=render.path_radius)
    _plot_polyline(ax, route, basis, color=ROUTE_COLOR, linewidth=1.5, zorder=3)

    for endpoint in (leg.depart_point, leg.arrive_point):
        _plot_marker(ax, endpoint, basis, s=30, c=MARKER_COLOR,
                     edgecolors='white', linewidths=0.5, zorder=4)
    _plot_marker(ax, frame.position, basis, s=60, c='#ffd24d',
                 edgecolors='black', linewidths=0.8, zorder=5)

    ax.text(
        0.02, 0.02,
        f"{frame.local_time}  |  {frame.progress.ratio * 100:5.1f}% flown",
        transform=ax.transAxes, color='white', fontsize=9, family='monospace',
    )
    ax.text(
        0.02, 0.96,
        f"Subsolar point: {frame.sun.latitude:+.2f} deg, {frame.sun.longitude:+.2f} deg",
        transform=ax.transAxes, color='white', fontsize=9, family='monospace',
    )

    ax.set_xlim(-VIEW_EXTENT, VIEW_EXTENT)
    ax.set_ylim(-VIEW_EXTENT, VIEW_EXTENT)
    ax.set_aspect('equal')
    ax.set_axis_off()
    fig.patch.set_facecolor(render.background)

    return fig


def save_snapshot(fig, output_path: str, dpi: int = 100) -> Path:
    """Save a rendered figure, creating parent directories as needed."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, facecolor=fig.get_facecolor())
    logger.info(f"Saved globe snapshot to {path}")
    return path
