"""Tests for the detector geometry service."""

import pytest

from pfoana.geo import Geometry, GeoManager, TPCVolume, geo_factory
from pfoana.utils.errors import GeometryError
from pfoana.utils.globals import TPC_3D, TPC_VIEW_U, TPC_VIEW_V, TPC_VIEW_W


class TestTPCVolume:
    """Test the individual TPC volumes."""

    def test_pitch(self):
        """Pitches are stored in view order, whatever the input order."""
        tpc = TPCVolume(name="tpc0", wire_pitch={"w": 0.4, "u": 0.5, "v": 0.6})
        assert tpc.name == "tpc0"
        assert tpc.wire_pitch(TPC_VIEW_U) == pytest.approx(0.5)
        assert tpc.wire_pitch(TPC_VIEW_V) == pytest.approx(0.6)
        assert tpc.wire_pitch(TPC_VIEW_W) == pytest.approx(0.4)

    def test_missing_view(self):
        """The pitch of every wire view must be provided."""
        with pytest.raises(AssertionError):
            TPCVolume("tpc0", {"u": 0.5, "w": 0.4})

    def test_bad_pitch(self):
        """Pitches must be positive."""
        with pytest.raises(AssertionError):
            TPCVolume("tpc0", {"u": 0.5, "v": 0.0, "w": 0.4})


class TestGeometry:
    """Test the detector-wide geometry queries."""

    def test_uniform_pitch(self, geometry):
        """Uniform pitches are returned as is."""
        assert [t.name for t in geometry.tpcs] == ["left", "right"]
        assert geometry.wire_pitch(TPC_VIEW_U) == pytest.approx(0.5)
        assert geometry.wire_pitch(TPC_VIEW_V) == pytest.approx(0.5)
        assert geometry.wire_pitch(TPC_VIEW_W) == pytest.approx(0.4)

    def test_non_uniform_pitch(self, tpc_cfg):
        """Volumes which disagree on the pitch of a view are an error."""
        tpc_cfg["volumes"][1]["wire_pitch"] = {"u": 0.5, "v": 0.5, "w": 0.45}
        geo = Geometry(name="test", tpc=tpc_cfg)

        assert geo.wire_pitch(TPC_VIEW_U) == pytest.approx(0.5)
        with pytest.raises(GeometryError, match="left=0.4, right=0.45"):
            geo.wire_pitch(TPC_VIEW_W)

    def test_default_names(self):
        """Unnamed volumes are labeled by their index."""
        geo = Geometry(
            name="test",
            tpc={"wire_pitch": {"u": 1, "v": 1, "w": 1}, "volumes": [{}, {}]},
        )
        assert [t.name for t in geo.tpcs] == ["tpc0", "tpc1"]

    def test_pitch_tolerance(self, tpc_cfg):
        """Pitches which only differ by rounding are considered uniform."""
        tpc_cfg["volumes"][1]["wire_pitch"] = {"u": 0.5, "v": 0.5, "w": 0.4 + 1e-12}
        geo = Geometry(name="test", tpc=tpc_cfg)
        assert geo.wire_pitch(TPC_VIEW_W) == pytest.approx(0.4)

    def test_not_a_wire_view(self, geometry):
        """3D hits have no wire pitch."""
        with pytest.raises(GeometryError):
            geometry.wire_pitch(TPC_3D)

    def test_no_volume(self):
        """A geometry needs at least one volume."""
        with pytest.raises(AssertionError):
            Geometry(name="test", tpc={"wire_pitch": {"u": 1, "v": 1, "w": 1}})


class TestGeoFactory:
    """Test the geometry factory."""

    def test_preset(self):
        """The ProtoDUNE-SP preset ships with the package."""
        geo = geo_factory(detector="protodune_sp")
        assert geo.name == "protodune_sp"
        assert len(geo.tpcs) == 6
        assert geo.wire_pitch(TPC_VIEW_U) == pytest.approx(0.4669)
        assert geo.wire_pitch(TPC_VIEW_W) == pytest.approx(0.4792)

    def test_preset_version(self):
        """Presets can be selected by tag and major version."""
        geo = geo_factory(detector="protodune_sp", tag="pdsp_v7", version=1)
        assert geo.tag == "pdsp_v7"

        with pytest.raises(ValueError):
            geo_factory(detector="protodune_sp", version=2)

    def test_unknown_detector(self):
        """Unknown detectors are rejected."""
        with pytest.raises(ValueError):
            geo_factory(detector="unknown")

    def test_inline(self, tpc_cfg):
        """Geometries can be defined inline."""
        geo = geo_factory(detector="mini", tpc=tpc_cfg)
        assert geo.name == "mini"
        assert len(geo.tpcs) == 2


class TestGeoManager:
    """Test the geometry singleton."""

    def test_not_initialized(self):
        """Accessing an uninitialized geometry is an error."""
        assert not GeoManager.is_initialized()
        with pytest.raises(ValueError, match="not initialized"):
            GeoManager.get_instance()

    def test_initialize(self):
        """The singleton can only be initialized once."""
        geo = GeoManager.initialize(detector="protodune_sp")
        assert GeoManager.get_instance() is geo

        with pytest.raises(ValueError):
            GeoManager.initialize(detector="protodune_sp")

    def test_set_instance(self, geometry):
        """An existing geometry can be registered."""
        GeoManager.set_instance(geometry)
        assert GeoManager.get_instance() is geometry
