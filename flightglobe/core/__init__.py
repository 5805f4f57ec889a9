"""
Core scene state for flightglobe.

This module provides:
- GlobeContext: Owned per-scene state and the per-frame tick
- FrameState: Result of one tick
- build_context: Construct a context from a GlobeConfig
"""

from flightglobe.core.context import (
    FrameState,
    GlobeContext,
    build_leg,
    build_context,
)

__all__ = [
    "FrameState",
    "GlobeContext",
    "build_leg",
    "build_context",
]
