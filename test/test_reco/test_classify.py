"""Tests for the beam candidate classifier and direction estimators."""

import numpy as np
import pytest

from pfoana.geo import GeoManager
from pfoana.reco import (
    BeamClassifier,
    ShapeEstimator,
    ShowerEstimate,
    TrackEstimate,
    TrajectoryEstimator,
)
from pfoana.utils.errors import DegenerateFitError, GeometryError, VertexError
from pfoana.utils.globals import SHOWR_SHP, TRACK_SHP


class TestSelection:
    """Test the selection of beam-like candidates."""

    def test_order(self, make_pfo):
        """Selected candidates keep their original order."""
        pfos = [make_pfo(pfo_id=i, beam=(i % 2 == 0)) for i in range(6)]
        selected = BeamClassifier().select(pfos)
        assert [pfo.id for pfo in selected] == [0, 2, 4]

    def test_custom_predicate(self, make_pfo):
        """The beam-like predicate can be replaced."""
        pfos = [make_pfo(pfo_id=i, particle_id=pid) for i, pid in enumerate([13, 11])]
        classifier = BeamClassifier(predicate=lambda pfo: pfo.particle_id == 11)
        assert [pfo.id for pfo in classifier.select(pfos)] == [1]

    def test_empty(self):
        """No candidate yields an empty selection."""
        assert BeamClassifier().select([]) == []


class TestDispatch:
    """Test the track/shower dispatch."""

    def test_classify(self, make_pfo):
        """Electron-like candidates are shower-like, all others track-like."""
        assert BeamClassifier.classify(make_pfo(particle_id=-11)) == SHOWR_SHP
        assert BeamClassifier.classify(make_pfo(particle_id=2212)) == TRACK_SHP

    def test_track(self, make_pfo, geometry):
        """Track-like candidates carry the pitch of the configured view."""
        classifier = BeamClassifier(pitch_view="w", geometry=geometry)
        estimate = classifier.dispatch(make_pfo(particle_id=13))
        assert isinstance(estimate, TrackEstimate)
        assert estimate.shape == TRACK_SHP
        assert estimate.pitch == pytest.approx(0.4)

    def test_shower(self, make_pfo):
        """Shower-like candidates do not need a geometry."""
        estimate = BeamClassifier().dispatch(make_pfo(particle_id=11))
        assert isinstance(estimate, ShowerEstimate)
        assert estimate.shape == SHOWR_SHP

    def test_geometry_singleton(self, make_pfo, geometry):
        """Without an explicit geometry, the singleton is used."""
        GeoManager.set_instance(geometry)
        estimate = BeamClassifier(pitch_view="u").dispatch(make_pfo())
        assert estimate.pitch == pytest.approx(0.5)

    def test_non_uniform_pitch(self, make_pfo, tpc_cfg):
        """A non-uniform pitch aborts the dispatch of track-like candidates."""
        tpc_cfg["volumes"][0]["wire_pitch"] = {"u": 0.5, "v": 0.5, "w": 0.3}
        GeoManager.initialize(detector="test", tpc=tpc_cfg)
        with pytest.raises(GeometryError):
            BeamClassifier().dispatch(make_pfo())

    def test_no_vertex(self, make_pfo):
        """Candidates without a unique vertex cannot be dispatched."""
        with pytest.raises(VertexError):
            BeamClassifier().dispatch(make_pfo(particle_id=11, vertices=()))


class TestEstimators:
    """Test the direction estimators."""

    def test_trajectory(self, make_pfo, make_line):
        """Track directions are taken at the start of the trajectory."""
        direction = np.array([0.0, 0.6, 0.8])
        pfo = make_pfo(points=make_line([0, 0, 0], direction, 40))
        result = TrajectoryEstimator(half_window=5)(pfo, np.zeros(3), 1.0)
        np.testing.assert_allclose(result, direction, atol=1e-8)

    def test_empty_trajectory(self, make_pfo):
        """A track which cannot be fitted has no direction."""
        pfo = make_pfo(points=np.zeros((1, 3)))
        assert TrajectoryEstimator()(pfo, np.zeros(3), 0.5) is None

    def test_bad_window(self):
        """The half window must be a positive integer."""
        with pytest.raises(AssertionError):
            TrajectoryEstimator(half_window=0)

    def test_shape(self, make_pfo, make_line):
        """Shower directions are given by the primary axis."""
        pfo = make_pfo(particle_id=11, points=make_line([0, 0, 1], [0, 0, 1], 10))
        result = ShapeEstimator()(pfo, np.zeros(3))
        np.testing.assert_allclose(result, [0.0, 0.0, 1.0], atol=1e-8)

    def test_degenerate_shape(self, make_pfo):
        """A degenerate shower cannot be decomposed."""
        pfo = make_pfo(particle_id=11, points=np.zeros((1, 3)))
        with pytest.raises(DegenerateFitError):
            ShapeEstimator()(pfo, np.zeros(3))

    def test_estimate_dispatch(self, make_pfo, make_line, geometry):
        """Each tagged estimate runs its own estimator."""
        points = make_line([0, 0, 0], [1, 0, 0], 20)
        classifier = BeamClassifier(geometry=geometry)
        track = classifier.dispatch(make_pfo(particle_id=13, points=points))
        shower = classifier.dispatch(make_pfo(particle_id=11, points=points))

        def track_estimator(pfo, vertex, pitch):
            return "track"

        def shower_estimator(pfo, vertex):
            return "shower"

        assert track.estimate(track_estimator, shower_estimator) == "track"
        assert shower.estimate(track_estimator, shower_estimator) == "shower"
