"""Tests for the input data structures."""

import numpy as np
import pytest

from pfoana.data import CaloHit, Event, MCParticle, Pfo
from pfoana.utils.errors import MissingListError
from pfoana.utils.globals import TPC_3D, TPC_VIEW_W


class TestCaloHit:
    """Test the calorimetric hit data structure."""

    def test_default(self):
        """Default hits are 3D hits with an unset position."""
        hit = CaloHit()
        assert hit.is_3d
        assert hit.position.shape == (3,)
        assert np.all(np.isinf(hit.position))

    def test_cast(self):
        """Positions given as lists are cast to arrays."""
        hit = CaloHit(view=TPC_VIEW_W, position=[1, 2, 3], energy=0.5)
        assert not hit.is_3d
        assert hit.position.dtype == np.float64
        np.testing.assert_array_equal(hit.position, [1.0, 2.0, 3.0])

    def test_bad_view(self):
        """Unknown hit types are rejected."""
        with pytest.raises(AssertionError):
            CaloHit(view=7)

    def test_bad_position(self):
        """Positions must have three components."""
        with pytest.raises(AssertionError):
            CaloHit(position=[1.0, 2.0])


class TestMCParticle:
    """Test the truth particle data structure."""

    def test_trigger_information(self):
        """The endpoint packs the beam instrumentation output."""
        particle = MCParticle(energy=2.0, endpoint=[5.0, 0.9, 1.2])
        assert particle.tof == 5.0
        assert particle.ckov_status == (0, 1)


class TestPfo:
    """Test the particle-flow object data structure."""

    def test_default(self):
        """Default PFOs have no vertex, hit or property."""
        pfo = Pfo()
        assert pfo.vertices == []
        assert pfo.hits == []
        assert pfo.properties == {}
        assert pfo.size == 0

    def test_independent_defaults(self):
        """Default containers are not shared between instances."""
        pfo_a, pfo_b = Pfo(), Pfo()
        pfo_a.properties["IsTestBeam"] = 1.0
        assert pfo_b.properties == {}

    def test_equality(self):
        """PFOs with the same content are equal."""
        hits = [CaloHit(view=TPC_3D, position=[0, 0, 1])]
        pfo_a = Pfo(particle_id=13, vertices=[[0, 0, 0]], hits=hits)
        pfo_b = Pfo(particle_id=13, vertices=[np.zeros(3)], hits=list(hits))
        assert pfo_a == pfo_b
        assert pfo_a != Pfo(particle_id=11, vertices=[[0, 0, 0]], hits=hits)


class TestEvent:
    """Test the event store."""

    def test_get_list(self):
        """Lists can be fetched by name."""
        event = Event(lists={"Input": [MCParticle()]})
        assert event.has_list("Input")
        assert len(event.get_list("Input")) == 1

    def test_missing_list(self):
        """A missing list raises a dedicated error."""
        event = Event()
        with pytest.raises(MissingListError) as excinfo:
            event.get_list("Input")

        assert excinfo.value.name == "Input"
        assert isinstance(excinfo.value, KeyError)
        assert "Input" in str(excinfo.value)

    def test_save_list(self):
        """Objects are moved to the target list."""
        pfos = [Pfo(id=0), Pfo(id=1)]
        event = Event(lists={"A": pfos[:1], "B": pfos[1:]})
        assert event.save_list("A", "B") == 1
        assert not event.has_list("A")
        assert [pfo.id for pfo in event.get_list("B")] == [1, 0]

        assert event.save_list("B", "C") == 2
        assert [pfo.id for pfo in event.get_list("C")] == [1, 0]

    def test_save_empty_list(self):
        """Empty source lists are left untouched."""
        event = Event(lists={"A": []})
        assert event.save_list("A", "B") == 0
        assert event.has_list("A")
        assert not event.has_list("B")
