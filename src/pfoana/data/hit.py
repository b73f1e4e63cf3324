"""Module with a data class object which represents a calorimetric hit."""

from dataclasses import dataclass

import numpy as np

from pfoana.utils.globals import TPC_3D, WIRE_VIEWS

from .base import DataBase

__all__ = ["CaloHit"]


@dataclass(eq=False)
class CaloHit(DataBase):
    """Calorimetric hit information.

    A hit is either a 2D hit recorded on one of the three wire views or a 3D
    hit obtained by matching 2D hits across views.

    Attributes
    ----------
    view : int
        Hit type (one of `TPC_VIEW_U`, `TPC_VIEW_V`, `TPC_VIEW_W`, `TPC_3D`)
    position : np.ndarray
        (3) Position of the hit. For 2D hits, only the drift coordinate and
        the wire coordinate (stored in Z) are meaningful
    energy : float
        Deposited energy
    """

    view: int = TPC_3D
    position: np.ndarray = None
    energy: float = 0.0

    # Fixed-length attributes
    _fixed_length_attrs = (("position", 3),)

    def __post_init__(self):
        """Checks that the hit type is known."""
        super().__post_init__()
        assert self.view in WIRE_VIEWS or self.view == TPC_3D, (
            f"Hit type not recognized: {self.view}."
        )

    @property
    def is_3d(self):
        """Whether the hit lives in 3D space or on a wire view.

        Returns
        -------
        bool
            `True` if this is a 3D hit
        """
        return self.view == TPC_3D
