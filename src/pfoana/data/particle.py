"""Module with a data class object which represents a truth/trigger particle.

For beam data, the trigger information is carried by a single particle-like
object. The beam instrumentation fills its momentum, its position at the
entrance of the detector and packs the time-of-flight and the Cherenkov
detector statuses in the endpoint components.
"""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["MCParticle"]


@dataclass(eq=False)
class MCParticle(DataBase):
    """Truth (or beam trigger) particle information.

    Attributes
    ----------
    particle_id : int
        Particle data group code of the particle
    energy : float
        Energy of the particle
    momentum : np.ndarray
        (3) Momentum vector of the particle
    vertex : np.ndarray
        (3) Start position of the particle
    endpoint : np.ndarray
        (3) End position of the particle. For beam triggers, this holds the
        (time-of-flight, Cherenkov 0 status, Cherenkov 1 status) triplet
    """

    particle_id: int = 0
    energy: float = -1.0
    momentum: np.ndarray = None
    vertex: np.ndarray = None
    endpoint: np.ndarray = None

    # Fixed-length attributes
    _fixed_length_attrs = (("momentum", 3), ("vertex", 3), ("endpoint", 3))

    @property
    def tof(self):
        """Time-of-flight measured by the beam instrumentation.

        Returns
        -------
        float
            Time-of-flight
        """
        return float(self.endpoint[0])

    @property
    def ckov_status(self):
        """Status codes of the two Cherenkov detectors.

        Returns
        -------
        Tuple[int, int]
            Status of the first and second Cherenkov detectors
        """
        return int(self.endpoint[1]), int(self.endpoint[2])
