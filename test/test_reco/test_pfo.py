"""Tests for the particle-flow object accessors."""

import numpy as np
import pytest

from pfoana.reco.pfo import (
    count_view_hits,
    get_3d_points,
    get_calo_hits,
    get_vertex,
    is_shower_like,
    is_test_beam,
)
from pfoana.utils.errors import VertexError
from pfoana.utils.globals import TPC_3D, TPC_VIEW_U, TPC_VIEW_V, TPC_VIEW_W


class TestViewHits:
    """Test the per-view hit access."""

    def test_counts(self, make_pfo):
        """Hits are counted separately in each wire view."""
        pfo = make_pfo(n_u=10, n_v=12, n_w=15, points=np.zeros((4, 3)))
        assert count_view_hits(pfo) == (10, 12, 15)
        assert len(get_calo_hits(pfo, TPC_VIEW_V)) == 12
        assert len(get_calo_hits(pfo, TPC_3D)) == 4

    def test_empty_view(self, make_pfo):
        """A view without hits yields an empty collection."""
        pfo = make_pfo(n_w=3)
        assert get_calo_hits(pfo, TPC_VIEW_U) == []
        assert count_view_hits(pfo) == (0, 0, 3)
        assert all(hit.view == TPC_VIEW_W for hit in get_calo_hits(pfo, TPC_VIEW_W))

    def test_3d_points(self, make_pfo, make_line):
        """3D points are stacked in hit order."""
        points = make_line([0, 0, 0], [1, 0, 0], 5)
        pfo = make_pfo(points=points, n_u=2)
        np.testing.assert_array_equal(get_3d_points(pfo), points)

    def test_no_3d_points(self, make_pfo):
        """A PFO without 3D hits yields an empty point array."""
        assert get_3d_points(make_pfo(n_u=2)).shape == (0, 3)


class TestVertex:
    """Test the reference vertex access."""

    def test_single_vertex(self, make_pfo):
        """The unique vertex is returned."""
        pfo = make_pfo(vertices=[(1.0, 2.0, 3.0)])
        np.testing.assert_array_equal(get_vertex(pfo), [1.0, 2.0, 3.0])

    @pytest.mark.parametrize("vertices", [(), ((0, 0, 0), (1, 1, 1))])
    def test_vertex_count(self, make_pfo, vertices):
        """Zero or several vertices is an error."""
        with pytest.raises(VertexError):
            get_vertex(make_pfo(vertices=vertices))


class TestFlags:
    """Test the candidate flags."""

    def test_beam_flag(self, make_pfo):
        """The beam flag is read from the PFO properties."""
        assert is_test_beam(make_pfo(beam=True))
        assert not is_test_beam(make_pfo(beam=False))

        pfo = make_pfo(beam=False)
        pfo.properties["IsBeamLike"] = 1.0
        assert is_test_beam(pfo, "IsBeamLike")

    @pytest.mark.parametrize(
        "particle_id, shower", [(11, True), (-11, True), (13, False), (22, False)]
    )
    def test_shower_like(self, make_pfo, particle_id, shower):
        """Only electron-like candidates are shower-like."""
        assert is_shower_like(make_pfo(particle_id=particle_id)) == shower
