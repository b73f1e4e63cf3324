"""Module with a general-purpose geometry class.

This class supports the storage of a collection of TPC volumes, each read
out by three wire planes (U, V, W). It provides the geometry queries needed
by the reconstruction modules, i.e. the wire pitch of each view.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from pfoana.utils.enums import enum_factory
from pfoana.utils.errors import GeometryError
from pfoana.utils.globals import VIEW_LABELS, WIRE_VIEWS

__all__ = ["TPCVolume", "Geometry"]


@dataclass
class TPCVolume:
    """Class which holds all properties of an individual time-projection
    chamber (TPC) read out by three wire planes.

    Attributes
    ----------
    name : str
        Label of the TPC volume
    wire_pitches : np.ndarray
        (3) Wire pitch of the U, V and W views
    """

    name: str
    wire_pitches: np.ndarray

    def __init__(self, name, wire_pitch):
        """Initialize the TPC object.

        Parameters
        ----------
        name : str
            Label of the TPC volume
        wire_pitch : Dict[str, float]
            Wire pitch of each view, keyed by view name (`u`, `v`, `w`)
        """
        self.name = str(name)

        # Store the wire pitches in view order
        views = [enum_factory("view", key) for key in wire_pitch]
        assert sorted(views) == list(WIRE_VIEWS), (
            "Must provide the wire pitch of every view "
            f"({list(VIEW_LABELS.values())}) exactly once."
        )

        self.wire_pitches = np.empty(len(WIRE_VIEWS), dtype=np.float64)
        for view, pitch in zip(views, wire_pitch.values()):
            assert pitch > 0.0, f"Wire pitch must be positive, got {pitch}."
            self.wire_pitches[view] = pitch

    def wire_pitch(self, view: int) -> float:
        """Wire pitch of one view of this TPC.

        Parameters
        ----------
        view : int
            Wire view (one of `TPC_VIEW_U`, `TPC_VIEW_V`, `TPC_VIEW_W`)

        Returns
        -------
        float
            Wire pitch
        """
        return float(self.wire_pitches[view])


@dataclass
class Geometry:
    """Handles all geometry functions for a collection of TPC volumes.

    Attributes
    ----------
    name : str
        Name of the detector
    tag : str
        Tag or label for the geometry instance
    version : str
        Version number of the geometry
    tpcs : List[TPCVolume]
        TPC volumes which make up the detector
    pitch_tolerance : float
        Largest relative difference between the wire pitches of two TPCs
        which are considered identical
    """

    name: str
    tag: Optional[str]
    version: Optional[str]
    tpcs: List[TPCVolume]
    pitch_tolerance: float = 1e-6

    def __init__(
        self,
        name: str,
        tpc: Dict[str, Any],
        tag: Optional[str] = None,
        version: Optional[str] = None,
        pitch_tolerance: float = 1e-6,
    ):
        """Initialize the detector geometry.

        Parameters
        ----------
        name : str
            Name of the detector
        tpc : dict
            TPC configuration. Must provide a `volumes` list of TPC volume
            configurations. Keys which are shared by all volumes (e.g.
            `wire_pitch`) can be specified once at this level.
        tag : str, optional
            Tag or label for the geometry instance
        version : str, optional
            Version number of the geometry
        pitch_tolerance : float, default 1e-6
            Relative tolerance used to compare the wire pitch of TPCs
        """
        # Store basic geometry information
        self.name = name
        self.tag = tag
        self.version = None if version is None else str(version)
        self.pitch_tolerance = pitch_tolerance

        # Load the TPC volumes, shared keys are overridden by volume keys
        tpc = dict(tpc)
        volumes = tpc.pop("volumes", None)
        assert volumes, "Must provide at least one TPC volume under `volumes`."
        self.tpcs = []
        for i, volume in enumerate(volumes):
            volume = {"name": f"tpc{i}", **tpc, **volume}
            self.tpcs.append(TPCVolume(**volume))

    def wire_pitch(self, view: int) -> float:
        """Wire pitch of a view, shared by all TPC volumes.

        The reconstruction assumes that the wire pitch of a given view is
        identical in all TPC volumes. If it is not, the geometry is not
        usable as configured and an error is raised.

        Parameters
        ----------
        view : int
            Wire view (one of `TPC_VIEW_U`, `TPC_VIEW_V`, `TPC_VIEW_W`)

        Returns
        -------
        float
            Wire pitch

        Raises
        ------
        GeometryError
            If the view is not a wire view or if the TPC volumes disagree
        """
        if view not in WIRE_VIEWS:
            raise GeometryError(f"View {view} is not a wire view.")

        pitches = np.array([t.wire_pitch(view) for t in self.tpcs])
        if not np.allclose(pitches, pitches[0], rtol=self.pitch_tolerance, atol=0.0):
            values = ", ".join(f"{t.name}={p}" for t, p in zip(self.tpcs, pitches))
            raise GeometryError(
                f"The wire pitch of view {VIEW_LABELS[view]} is not uniform "
                f"across the TPC volumes of {self.name}: {values}."
            )

        return float(pitches[0])
