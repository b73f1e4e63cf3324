"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import numpy as np
import pytest

from pfoana.data import CaloHit, Event, MCParticle, Pfo
from pfoana.geo import Geometry, GeoManager
from pfoana.utils.globals import TPC_3D, TPC_VIEW_U, TPC_VIEW_V, TPC_VIEW_W

# Wire pitches of the test geometry
TEST_PITCH = {"u": 0.5, "v": 0.5, "w": 0.4}


@pytest.fixture(autouse=True)
def reset_geo():
    """Makes sure that no geometry singleton leaks between tests."""
    GeoManager.reset()
    yield
    GeoManager.reset()


@pytest.fixture(name="tpc_cfg")
def fixture_tpc_cfg():
    """TPC block of a small two-volume detector."""
    return {
        "wire_pitch": dict(TEST_PITCH),
        "volumes": [{"name": "left"}, {"name": "right"}],
    }


@pytest.fixture(name="geometry")
def fixture_geometry(tpc_cfg):
    """Small two-volume detector geometry with uniform wire pitches."""
    return Geometry(name="test", tpc=tpc_cfg)


def line_points(start, direction, num_points, step=1.0):
    """Builds equally spaced points along a straight line.

    Parameters
    ----------
    start : np.ndarray
        (3) First point of the line
    direction : np.ndarray
        (3) Direction of the line
    num_points : int
        Number of points
    step : float, default 1.0
        Distance between consecutive points

    Returns
    -------
    np.ndarray
        (N, 3) Points along the line
    """
    direction = np.asarray(direction, dtype=np.float64)
    direction /= np.linalg.norm(direction)
    steps = step * np.arange(num_points)[:, None]

    return np.asarray(start, dtype=np.float64) + steps * direction


def build_pfo(
    particle_id=211,
    vertices=((0.0, 0.0, 0.0),),
    points=None,
    n_u=0,
    n_v=0,
    n_w=0,
    beam=True,
    pfo_id=-1,
):
    """Builds a particle-flow object with the requested hit content.

    Parameters
    ----------
    particle_id : int, default 211
        Particle data group code
    vertices : List[np.ndarray]
        Vertices of the PFO
    points : np.ndarray, optional
        (N, 3) Positions of the 3D hits
    n_u, n_v, n_w : int, default 0
        Number of 2D hits in each wire view
    beam : bool, default True
        Whether the PFO is flagged as a beam-like candidate
    pfo_id : int, default -1
        Index of the PFO

    Returns
    -------
    Pfo
        Particle-flow object
    """
    hits = []
    for view, count in ((TPC_VIEW_U, n_u), (TPC_VIEW_V, n_v), (TPC_VIEW_W, n_w)):
        for i in range(count):
            hits.append(CaloHit(view=view, position=[0.0, 0.0, float(i)]))

    if points is not None:
        for point in points:
            hits.append(CaloHit(view=TPC_3D, position=point))

    return Pfo(
        id=pfo_id,
        particle_id=particle_id,
        vertices=list(vertices),
        hits=hits,
        properties={"IsTestBeam": 1.0 if beam else 0.0},
    )


def build_trigger(energy=2.0, momentum=(0, 0, 1), vertex=(1, 2, 3), endpoint=(5, 0, 1)):
    """Builds a beam trigger particle."""
    return MCParticle(
        particle_id=211,
        energy=energy,
        momentum=momentum,
        vertex=vertex,
        endpoint=endpoint,
    )


@pytest.fixture(name="make_pfo")
def fixture_make_pfo():
    """Provides the particle-flow object builder."""
    return build_pfo


@pytest.fixture(name="make_trigger")
def fixture_make_trigger():
    """Provides the beam trigger particle builder."""
    return build_trigger


@pytest.fixture(name="make_line")
def fixture_make_line():
    """Provides the straight line point builder."""
    return line_points


@pytest.fixture(name="make_event")
def fixture_make_event():
    """Provides a builder of events with a trigger list and a PFO list."""

    def make_event(particles=(), pfos=(), event=1):
        return Event(
            run=1,
            subrun=0,
            event=event,
            lists={
                "Input": list(particles),
                "ParticleFlowObjects": list(pfos),
            },
        )

    return make_event
