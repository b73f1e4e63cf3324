"""Selection and classification of beam candidates.

Beam-like candidates are split in two categories: shower-like candidates
(electron-like particle code) and track-like candidates (everything else).
Each category is resolved into a tagged estimate which carries the inputs of
its own direction estimator.
"""

from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

import numpy as np

from pfoana.data.pfo import Pfo
from pfoana.geo import GeoManager
from pfoana.utils.enums import enum_factory
from pfoana.utils.globals import SHOWR_SHP, TPC_VIEW_W, TRACK_SHP

from .pfo import get_vertex, is_shower_like, is_test_beam

__all__ = ["BeamClassifier", "TrackEstimate", "ShowerEstimate"]


@dataclass(frozen=True)
class TrackEstimate:
    """Inputs of the direction estimate of a track-like candidate.

    Attributes
    ----------
    pfo : Pfo
        Track-like particle-flow object
    vertex : np.ndarray
        (3) Reference vertex
    pitch : float
        Layer pitch of the sliding fit
    """

    shape: ClassVar[int] = TRACK_SHP

    pfo: Pfo
    vertex: np.ndarray
    pitch: float

    def estimate(self, track_estimator, shower_estimator):
        """Runs the trajectory estimator.

        Returns
        -------
        np.ndarray, optional
            (3) Direction estimate, `None` if the trajectory is empty
        """
        return track_estimator(self.pfo, self.vertex, self.pitch)


@dataclass(frozen=True)
class ShowerEstimate:
    """Inputs of the direction estimate of a shower-like candidate.

    Attributes
    ----------
    pfo : Pfo
        Shower-like particle-flow object
    vertex : np.ndarray
        (3) Reference vertex
    """

    shape: ClassVar[int] = SHOWR_SHP

    pfo: Pfo
    vertex: np.ndarray

    def estimate(self, track_estimator, shower_estimator):
        """Runs the shape estimator.

        Returns
        -------
        np.ndarray
            (3) Direction estimate
        """
        return shower_estimator(self.pfo, self.vertex)


class BeamClassifier:
    """Selects beam-like candidates and resolves their category."""

    def __init__(
        self,
        predicate: Optional[Callable[[Pfo], bool]] = None,
        pitch_view=TPC_VIEW_W,
        geometry=None,
    ):
        """Initialize the classifier.

        Parameters
        ----------
        predicate : Callable[[Pfo], bool], optional
            Function which flags beam-like candidates. Defaults to the
            `IsTestBeam` metadata flag.
        pitch_view : Union[int, str], default TPC_VIEW_W
            View whose wire pitch sets the layer pitch of the track fit
        geometry : Geometry, optional
            Detector geometry. If not provided, the geometry singleton is
            fetched when the first track-like candidate is dispatched.
        """
        self.predicate = predicate if predicate is not None else is_test_beam
        self.pitch_view = enum_factory("view", pitch_view)
        self._geometry = geometry

    @property
    def geometry(self):
        """Detector geometry used to fetch the wire pitch.

        Returns
        -------
        Geometry
            Detector geometry
        """
        if self._geometry is None:
            return GeoManager.get_instance()

        return self._geometry

    def select(self, pfos):
        """Selects the beam-like candidates, preserving their order.

        Parameters
        ----------
        pfos : List[Pfo]
            Candidate particle-flow objects

        Returns
        -------
        List[Pfo]
            Beam-like candidates
        """
        return [pfo for pfo in pfos if self.predicate(pfo)]

    @staticmethod
    def classify(pfo):
        """Assigns a topology to a candidate.

        Parameters
        ----------
        pfo : Pfo
            Particle-flow object

        Returns
        -------
        int
            Shape of the candidate (`SHOWR_SHP` or `TRACK_SHP`)
        """
        return SHOWR_SHP if is_shower_like(pfo) else TRACK_SHP

    def dispatch(self, pfo):
        """Resolves a candidate into the inputs of its direction estimator.

        Parameters
        ----------
        pfo : Pfo
            Beam-like particle-flow object

        Returns
        -------
        Union[TrackEstimate, ShowerEstimate]
            Tagged estimate inputs
        """
        vertex = get_vertex(pfo)
        if self.classify(pfo) == SHOWR_SHP:
            return ShowerEstimate(pfo, vertex)

        return TrackEstimate(pfo, vertex, self.geometry.wire_pitch(self.pitch_view))
