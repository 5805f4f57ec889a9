"""Tests for the looping flight tracker."""

from datetime import datetime, timezone

import numpy as np
import pytest

from flightglobe.exceptions import ValidationError
from flightglobe.flight import FlightLeg, FlightProgress, FlightTracker
from flightglobe.geometry import GeoCoordinate, angular_distance, to_direction

T0 = 1_748_743_200_000.0  # 2025-06-01T02:00:00Z
DURATION = 1_500_000.0


@pytest.fixture
def leg():
    """Shanghai -> Dallas leg lasting 25 minutes of simulated time."""
    return FlightLeg(
        depart=GeoCoordinate(31.0, 121.0),
        arrive=GeoCoordinate(33.0, -97.0),
        depart_time=T0,
        arrive_time=T0 + DURATION,
    )


@pytest.fixture
def tracker(leg):
    return FlightTracker(leg, time_scale_factor=3600.0)


class TestFlightLeg:
    """Tests for flight leg construction."""

    def test_duration(self, leg):
        assert leg.duration == DURATION

    def test_datetime_times(self):
        leg = FlightLeg(
            depart=GeoCoordinate(31.0, 121.0),
            arrive=GeoCoordinate(33.0, -97.0),
            depart_time=datetime(2025, 6, 1, 2, 0, tzinfo=timezone.utc),
            arrive_time=datetime(2025, 6, 1, 15, 25, tzinfo=timezone.utc),
        )
        assert leg.depart_time == T0
        assert leg.duration == (13 * 60 + 25) * 60000.0

    @pytest.mark.parametrize("arrive_offset", [0.0, -1.0, -DURATION])
    def test_arrival_must_follow_departure(self, arrive_offset):
        with pytest.raises(ValidationError):
            FlightLeg(GeoCoordinate(0, 0), GeoCoordinate(10, 10), T0, T0 + arrive_offset)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            FlightLeg(GeoCoordinate(0, 0), GeoCoordinate(10, 10), T0, T0)

    def test_non_finite_time(self):
        with pytest.raises(ValidationError):
            FlightLeg(GeoCoordinate(0, 0), GeoCoordinate(10, 10), T0, float("inf"))

    def test_endpoint_positions(self, leg):
        assert np.allclose(leg.position(0.0, 1.01), to_direction(31.0, 121.0, 1.01))
        assert np.allclose(leg.position(1.0, 1.01), to_direction(33.0, -97.0, 1.01), atol=1e-9)


class TestFlightTracker:
    """Tests for clock -> progress mapping."""

    def test_start(self, tracker):
        progress = tracker.progress(0.0)
        assert progress.ratio == 0.0
        assert progress.simulated_instant == T0

    def test_loop_period(self, tracker):
        assert np.isclose(tracker.loop_period, DURATION / 3600.0)

    def test_half_period(self, tracker):
        progress = tracker.progress(tracker.loop_period / 2)
        assert np.isclose(progress.ratio, 0.5)
        assert np.isclose(progress.simulated_instant, T0 + DURATION / 2)

    def test_periodic(self, tracker):
        """Test progress repeats every duration / time_scale_factor."""
        period = DURATION / 3600.0
        clock = 123.4
        reference = tracker.progress(clock).ratio
        for k in range(1, 6):
            assert np.isclose(tracker.progress(clock + k * period).ratio, reference, atol=1e-9)

    def test_ratio_range(self, tracker):
        """Test ratio stays in [0, 1) for positive and negative clocks."""
        for clock in np.linspace(-2000.0, 2000.0, 4001):
            ratio = tracker.progress(clock).ratio
            assert 0.0 <= ratio < 1.0

    def test_simulated_instant_within_flight(self, tracker):
        for clock in [0.0, 10.0, 250.0, 416.0, 1e6]:
            instant = tracker.progress(clock).simulated_instant
            assert T0 <= instant < T0 + DURATION

    def test_negative_clock(self, tracker):
        """Test negative clocks count back from the end of the flight."""
        progress = tracker.progress(-tracker.loop_period / 4)
        assert np.isclose(progress.ratio, 0.75)

    def test_wrap_at_rounding_boundary(self, leg):
        """Test a cycle that rounds up to the full duration wraps to 0."""
        tracker = FlightTracker(leg, time_scale_factor=1.0)
        assert tracker.progress(-1e-300).ratio == 0.0

    @pytest.mark.parametrize("factor", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_time_scale_factor(self, leg, factor):
        with pytest.raises(ValidationError):
            FlightTracker(leg, time_scale_factor=factor)

    def test_position_at_start(self, tracker):
        assert np.allclose(tracker.position(0.0, 1.01), to_direction(31.0, 121.0, 1.01))

    def test_position_moves_toward_arrival(self, tracker, leg):
        arrive = leg.arrive_point
        distances = [
            angular_distance(tracker.position(clock), arrive)
            for clock in np.linspace(0.0, tracker.loop_period * 0.99, 20)
        ]
        assert np.all(np.diff(distances) < 0.0)


class TestFlightProgress:
    """Tests for the progress record."""

    def test_simulated_datetime(self):
        progress = FlightProgress(ratio=0.0, simulated_instant=T0)
        assert progress.simulated_datetime == datetime(2025, 6, 1, 2, 0, tzinfo=timezone.utc)
