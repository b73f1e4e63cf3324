"""Direction estimators of beam candidates.

Track-like candidates use the starting direction of a sliding linear fit of
their 3D trajectory, shower-like candidates the primary axis of a principal
component analysis of their 3D points.
"""

from pfoana.math.decomposition import shower_principal_components
from pfoana.math.fit import sliding_fit
from pfoana.utils.globals import SLIDING_FIT_HALF_WINDOW

from .pfo import get_3d_points

__all__ = ["TrajectoryEstimator", "ShapeEstimator"]


class TrajectoryEstimator:
    """Estimates the direction of a track at its start point.

    The direction is that of the first point of the sliding fit trajectory,
    i.e. the point closest to the vertex. If the trajectory is empty, no
    direction is returned.
    """

    def __init__(self, half_window=SLIDING_FIT_HALF_WINDOW):
        """Store the sliding fit parameters.

        Parameters
        ----------
        half_window : int, default 20
            Number of layers on either side of a layer included in its fit
        """
        assert int(half_window) == half_window and half_window > 0, (
            f"The sliding fit half window must be a positive integer, "
            f"got {half_window}."
        )
        self.half_window = int(half_window)

    def trajectory(self, pfo, vertex, pitch):
        """Computes the ordered trajectory of a track-like PFO.

        Parameters
        ----------
        pfo : Pfo
            Track-like particle-flow object
        vertex : np.ndarray
            (3) Reference vertex
        pitch : float
            Layer pitch of the sliding fit

        Returns
        -------
        List[TrackState]
            Trajectory points, closest to the vertex first
        """
        return sliding_fit(get_3d_points(pfo), vertex, self.half_window, pitch)

    def __call__(self, pfo, vertex, pitch):
        """Estimates the starting direction of a track-like PFO.

        Parameters
        ----------
        pfo : Pfo
            Track-like particle-flow object
        vertex : np.ndarray
            (3) Reference vertex
        pitch : float
            Layer pitch of the sliding fit

        Returns
        -------
        np.ndarray, optional
            (3) Direction of the first trajectory point, `None` if the
            trajectory is empty
        """
        states = self.trajectory(pfo, vertex, pitch)
        if not len(states):
            return None

        return states[0].direction


class ShapeEstimator:
    """Estimates the direction of a shower from its principal axis."""

    def pca(self, pfo, vertex):
        """Runs the principal component analysis of a shower-like PFO.

        Parameters
        ----------
        pfo : Pfo
            Shower-like particle-flow object
        vertex : np.ndarray
            (3) Reference vertex

        Returns
        -------
        ShowerPCA
            Principal component summary
        """
        return shower_principal_components(get_3d_points(pfo), vertex)

    def __call__(self, pfo, vertex):
        """Estimates the direction of a shower-like PFO.

        Parameters
        ----------
        pfo : Pfo
            Shower-like particle-flow object
        vertex : np.ndarray
            (3) Reference vertex

        Returns
        -------
        np.ndarray
            (3) Primary axis, oriented away from the vertex
        """
        return self.pca(pfo, vertex).primary_axis
