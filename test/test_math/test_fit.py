"""Tests for the sliding linear trajectory fit."""

import numpy as np
import pytest

from pfoana.math.fit import sliding_fit


class TestSlidingFit:
    """Test the trajectory produced by the sliding fit."""

    def test_straight_track(self, make_line):
        """A straight track yields its own direction at every point."""
        direction = np.array([2.0, 1.0, 2.0]) / 3.0
        points = make_line([0.0, 0.0, 0.0], direction, 60, step=0.5)
        states = sliding_fit(points, vertex=[0.0, 0.0, 0.0], pitch=0.5)

        assert len(states) == len(points)
        for state in states:
            np.testing.assert_allclose(state.direction, direction, atol=1e-8)

    def test_ordering(self, make_line):
        """States are ordered from the vertex outwards."""
        points = make_line([0.0, 0.0, 0.0], [0.0, 0.0, 1.0], 30)
        shuffled = np.random.default_rng(seed=1).permutation(points)
        states = sliding_fit(shuffled, vertex=[0.0, 0.0, -1.0], pitch=1.0)

        lengths = [state.length for state in states]
        assert lengths == sorted(lengths)
        np.testing.assert_allclose(states[0].position, [0.0, 0.0, 0.0], atol=1e-8)

    def test_vertex_at_end(self, make_line):
        """The direction points away from the vertex."""
        points = make_line([0.0, 0.0, 0.0], [0.0, 1.0, 0.0], 30)
        states = sliding_fit(points, vertex=[0.0, 30.0, 0.0], pitch=1.0)

        np.testing.assert_allclose(states[0].direction, [0.0, -1.0, 0.0], atol=1e-8)
        np.testing.assert_allclose(states[0].position, points[-1], atol=1e-8)

    def test_local_direction(self, make_line):
        """The start direction only depends on the layers close to the vertex."""
        leg1 = make_line([0.0, 0.0, 0.0], [0.0, 0.0, 1.0], 51)
        leg2 = make_line([1.0, 0.0, 50.0], [1.0, 0.0, 0.0], 50)
        points = np.vstack((leg1, leg2))
        states = sliding_fit(points, vertex=[0.0, 0.0, 0.0], half_window=2, pitch=1.0)

        np.testing.assert_allclose(states[0].direction, [0.0, 0.0, 1.0], atol=1e-6)

    @pytest.mark.parametrize("num_points", [0, 1])
    def test_too_few_points(self, num_points):
        """Fewer than two points yield an empty trajectory."""
        assert sliding_fit(np.ones((num_points, 3)), np.zeros(3)) == []

    def test_no_spread(self):
        """Coincident points yield an empty trajectory."""
        points = np.tile([1.0, 2.0, 3.0], (4, 1))
        assert sliding_fit(points, np.zeros(3)) == []

    def test_no_spread_rounding(self):
        """Coincident points which are not exactly representable yield an
        empty trajectory."""
        points = np.tile([0.1, 0.7, 1.3], (7, 1))
        assert sliding_fit(points, np.zeros(3), pitch=0.01) == []

    def test_single_layer(self):
        """Points which all fall in one layer yield an empty trajectory."""
        points = np.array([[0.0, 0.0, 0.2], [0.0, 0.0, 0.3]])
        assert sliding_fit(points, np.zeros(3), pitch=1.0) == []

    @pytest.mark.parametrize("pitch", [0.0, -0.5])
    def test_bad_pitch(self, pitch):
        """The layer pitch must be positive."""
        with pytest.raises(ValueError):
            sliding_fit(np.eye(3), np.zeros(3), pitch=pitch)

    def test_bad_window(self):
        """The half window must be at least one layer."""
        with pytest.raises(ValueError):
            sliding_fit(np.eye(3), np.zeros(3), half_window=0)
