"""Module with a data class object which represents a particle-flow object."""

from dataclasses import dataclass
from typing import List

import numpy as np

from .base import DataBase
from .hit import CaloHit

__all__ = ["Pfo"]


@dataclass(eq=False)
class Pfo(DataBase):
    """Reconstructed particle-flow object (PFO).

    PFOs are produced by the upstream pattern recognition. They are read-only
    to the analysis modules.

    Attributes
    ----------
    id : int
        Index of the PFO in its list
    particle_id : int
        Signed particle data group code assigned by the pattern recognition
    vertices : List[np.ndarray]
        List of (3) vertex positions associated with the PFO
    hits : List[CaloHit]
        Hits (2D, per view, and 3D) which make up the PFO
    properties : dict
        Free-form metadata attached by the pattern recognition
    """

    id: int = -1
    particle_id: int = 0
    vertices: List[np.ndarray] = None
    hits: List[CaloHit] = None
    properties: dict = None

    # Attributes which hold lists of objects
    _list_attrs = ("vertices", "hits")

    # Attributes which hold free-form dictionaries
    _dict_attrs = ("properties",)

    def __post_init__(self):
        """Casts the vertex positions to arrays."""
        super().__post_init__()
        self.vertices = [np.asarray(v, dtype=np.float64) for v in self.vertices]

    @property
    def size(self):
        """Total number of hits in the PFO, all hit types included.

        Returns
        -------
        int
            Number of hits
        """
        return len(self.hits)

    def __eq__(self, other):
        if self.__class__ != other.__class__:
            return False

        return (
            self.id == other.id
            and self.particle_id == other.particle_id
            and len(self.vertices) == len(other.vertices)
            and all(np.array_equal(v, w) for v, w in zip(self.vertices, other.vertices))
            and self.hits == other.hits
            and self.properties == other.properties
        )
