"""Functions which give access to the content of a particle-flow object."""

import numpy as np

from pfoana.utils.errors import VertexError
from pfoana.utils.globals import (
    E_MINUS,
    TEST_BEAM_PROPERTY,
    TPC_3D,
    TPC_VIEW_U,
    TPC_VIEW_V,
    TPC_VIEW_W,
)

__all__ = [
    "get_calo_hits",
    "count_view_hits",
    "get_3d_points",
    "get_vertex",
    "is_test_beam",
    "is_shower_like",
]


def get_calo_hits(pfo, view):
    """Fetches the hits of a PFO which belong to a given view.

    Parameters
    ----------
    pfo : Pfo
        Particle-flow object
    view : int
        Hit type (one of `TPC_VIEW_U`, `TPC_VIEW_V`, `TPC_VIEW_W`, `TPC_3D`)

    Returns
    -------
    List[CaloHit]
        Hits of the PFO in the requested view (may be empty)
    """
    return [hit for hit in pfo.hits if hit.view == view]


def count_view_hits(pfo):
    """Counts the hits of a PFO in each of the three wire views.

    Parameters
    ----------
    pfo : Pfo
        Particle-flow object

    Returns
    -------
    Tuple[int, int, int]
        Number of hits in the U, V and W views
    """
    return tuple(
        len(get_calo_hits(pfo, view)) for view in (TPC_VIEW_U, TPC_VIEW_V, TPC_VIEW_W)
    )


def get_3d_points(pfo):
    """Fetches the coordinates of the 3D hits of a PFO.

    Parameters
    ----------
    pfo : Pfo
        Particle-flow object

    Returns
    -------
    np.ndarray
        (N, 3) Coordinates of the 3D hits
    """
    hits = get_calo_hits(pfo, TPC_3D)
    if not len(hits):
        return np.empty((0, 3), dtype=np.float64)

    return np.vstack([hit.position for hit in hits])


def get_vertex(pfo):
    """Fetches the reference vertex of a PFO.

    Parameters
    ----------
    pfo : Pfo
        Particle-flow object

    Returns
    -------
    np.ndarray
        (3) Vertex position

    Raises
    ------
    VertexError
        If the PFO does not have exactly one vertex
    """
    if len(pfo.vertices) != 1:
        raise VertexError(
            f"PFO {pfo.id} must have exactly one vertex, found {len(pfo.vertices)}."
        )

    return pfo.vertices[0]


def is_test_beam(pfo, property_name=TEST_BEAM_PROPERTY):
    """Checks whether a PFO was flagged as a beam-like candidate.

    Parameters
    ----------
    pfo : Pfo
        Particle-flow object
    property_name : str, default 'IsTestBeam'
        Name of the metadata property which holds the flag

    Returns
    -------
    bool
        `True` if the PFO is beam-like
    """
    return float(pfo.properties.get(property_name, 0.0)) > 0.5


def is_shower_like(pfo):
    """Checks whether a PFO is shower-like, i.e. electron-like.

    Parameters
    ----------
    pfo : Pfo
        Particle-flow object

    Returns
    -------
    bool
        `True` if the absolute particle code is the electron one
    """
    return abs(pfo.particle_id) == E_MINUS
