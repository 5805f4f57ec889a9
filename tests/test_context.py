"""Tests for the globe context and per-frame tick."""

from datetime import datetime, timezone

import numpy as np
import pytest

from flightglobe.config import GlobeConfig
from flightglobe.core import FrameState, GlobeContext, build_context, build_leg
from flightglobe.exceptions import ValidationError
from flightglobe.flight import FlightTracker
from flightglobe.geometry import to_direction
from flightglobe.solar import SunDirectionUniform, sun_direction


@pytest.fixture
def context():
    return build_context(GlobeConfig())


class TestBuildContext:
    """Tests for context construction from configuration."""

    def test_default(self, context):
        assert isinstance(context, GlobeContext)
        assert context.solar_time_source == "simulated"
        assert context.tracker.time_scale_factor == 3600.0
        assert context.leg.depart.latitude == 31.0

    def test_invalid_config(self):
        config = GlobeConfig.from_dict({"flight": {"depart_latitude": 120.0}})
        with pytest.raises(ValidationError, match="depart_latitude"):
            build_context(config)

    def test_build_leg(self):
        leg = build_leg(GlobeConfig())
        assert leg.depart_time == datetime(2025, 6, 1, 2, 0, tzinfo=timezone.utc).timestamp() * 1000
        assert leg.arrive.longitude == -97.0

    def test_invalid_time_source(self, context):
        with pytest.raises(ValidationError):
            GlobeContext(context.tracker, solar_time_source="lunar")


class TestTick:
    """Tests for the per-frame update."""

    def test_frame_at_departure(self, context):
        frame = context.tick(0.0)
        assert isinstance(frame, FrameState)
        assert frame.progress.ratio == 0.0
        assert np.allclose(frame.position, to_direction(31.0, 121.0, 1.01))
        assert np.isclose(frame.coordinate.latitude, 31.0)
        assert np.isclose(frame.coordinate.longitude, 121.0)
        assert frame.timezone_label == "+08"
        assert frame.local_time == "2025-06-01 10:00 UTC+08"

    def test_sun_follows_simulated_time(self, context):
        frame = context.tick(100.0)
        expected = sun_direction(frame.progress.simulated_instant)
        assert np.array_equal(context.sun_uniform.value, expected)
        assert np.array_equal(frame.sun.direction, expected)

    def test_uniform_identity_preserved(self, context):
        """Test ticks overwrite the sun vector in place."""
        handle = context.sun_uniform.value
        for clock in np.linspace(0.0, 5000.0, 25):
            context.tick(clock)
            assert context.sun_uniform.value is handle

    def test_marker_radius(self, context):
        frame = context.tick(321.0)
        assert np.isclose(np.linalg.norm(frame.position), 1.01)

    def test_fixed_sun(self, context):
        fixed = GlobeContext(context.tracker, solar_time_source="fixed", fixed_sun=(23.5, -90.0))
        expected = to_direction(23.5, -90.0)
        assert np.allclose(fixed.sun_uniform.value, expected)
        frame = fixed.tick(200.0)
        assert np.allclose(frame.sun.direction, expected)
        assert frame.sun.latitude == 23.5

    def test_wall_clock_sun(self, context):
        wall = GlobeContext(context.tracker, solar_time_source="wall")
        instant = datetime(2025, 12, 21, 12, 0, tzinfo=timezone.utc)
        frame = wall.tick(50.0, wall_clock=instant)
        assert np.array_equal(frame.sun.direction, sun_direction(instant))
        assert frame.sun.longitude == 0.0

    def test_wall_clock_defaults_to_now(self, context):
        wall = GlobeContext(context.tracker, solar_time_source="wall")
        frame = wall.tick(0.0)
        assert np.isclose(np.linalg.norm(frame.sun.direction), 1.0)

    def test_shared_uniform(self, context):
        uniform = SunDirectionUniform()
        shared = GlobeContext(context.tracker, sun_uniform=uniform)
        shared.tick(10.0)
        assert shared.sun_uniform is uniform

    def test_frames_loop(self, context):
        period = context.tracker.loop_period
        a = context.tick(42.0)
        b = context.tick(42.0 + 3 * period)
        assert np.isclose(a.progress.ratio, b.progress.ratio, atol=1e-9)
        assert np.allclose(a.position, b.position, atol=1e-9)


class TestAnimationCallbacks:
    """Tests for per-frame callbacks."""

    def test_called_with_frame(self, context):
        seen = []
        context.add_animation_callback(seen.append)
        frame = context.tick(1.0)
        assert len(seen) == 1
        assert seen[0] is frame

    def test_registration_order(self, context):
        calls = []
        context.add_animation_callback(lambda frame: calls.append("first"))
        context.add_animation_callback(lambda frame: calls.append("second"))
        context.tick(0.0)
        context.tick(1.0)
        assert calls == ["first", "second", "first", "second"]

    def test_remove(self, context):
        seen = []
        context.add_animation_callback(seen.append)
        context.remove_animation_callback(seen.append)
        context.tick(0.0)
        assert seen == []
        assert context.callbacks == ()

    def test_remove_unknown(self, context):
        with pytest.raises(ValueError):
            context.remove_animation_callback(print)

    def test_exception_propagates(self, context):
        def broken(frame):
            raise RuntimeError("render failed")

        context.add_animation_callback(broken)
        with pytest.raises(RuntimeError, match="render failed"):
            context.tick(0.0)

    def test_sun_updated_before_callbacks(self, context):
        """Test callbacks observe the sun vector of the current frame."""
        observed = []
        context.add_animation_callback(
            lambda frame: observed.append(context.sun_uniform.value.copy())
        )
        frame = context.tick(77.0)
        assert np.array_equal(observed[0], frame.sun.direction)


class TestTrackerIntegration:
    """Tests for contexts built around custom trackers."""

    def test_time_scale(self, context):
        fast = GlobeContext(FlightTracker(context.leg, time_scale_factor=7200.0))
        assert np.isclose(fast.tracker.loop_period, context.tracker.loop_period / 2)
