"""Sliding local-linear fit of a 3D trajectory.

The trajectory is parametrized by its longitudinal coordinate along the
global principal axis of the point cloud, measured from a reference vertex.
Points are grouped in layers of fixed width (the wire pitch) and, for each
layer, both transverse coordinates are fitted linearly over a window of
neighboring layers.
"""

import numba as nb
import numpy as np

from pfoana.data.track import TrackState
from pfoana.utils.globals import SLIDING_FIT_HALF_WINDOW

from .decomposition import covariance, has_spread, principal_components

__all__ = ["sliding_fit"]


@nb.njit(cache=True)
def layer_fits(
    layers: nb.int64[:],
    lengths: nb.float64[:],
    trans1: nb.float64[:],
    trans2: nb.float64[:],
    half_window: nb.int64,
):
    """Fits both transverse coordinates linearly in a window around each layer.

    Parameters
    ----------
    layers : np.ndarray
        (N) Layer index of each point (starting at 0)
    lengths : np.ndarray
        (N) Longitudinal coordinate of each point
    trans1 : np.ndarray
        (N) First transverse coordinate of each point
    trans2 : np.ndarray
        (N) Second transverse coordinate of each point
    half_window : int
        Number of layers on either side of a layer included in its fit

    Returns
    -------
    np.ndarray
        (L, 4) Intercept and slope of both transverse coordinates per layer
    np.ndarray
        (L) Whether a fit could be obtained for each layer
    """
    # Accumulate the sums needed by the linear regression in each layer
    num_layers = np.max(layers) + 1
    sums = np.zeros((num_layers, 6), dtype=np.float64)
    counts = np.zeros(num_layers, dtype=np.int64)
    for i in range(len(layers)):
        k = layers[i]
        counts[k] += 1
        sums[k, 0] += lengths[i]
        sums[k, 1] += lengths[i] * lengths[i]
        sums[k, 2] += trans1[i]
        sums[k, 3] += lengths[i] * trans1[i]
        sums[k, 4] += trans2[i]
        sums[k, 5] += lengths[i] * trans2[i]

    # Slide the window over the occupied layers
    fits = np.zeros((num_layers, 4), dtype=np.float64)
    valid = np.zeros(num_layers, dtype=np.bool_)
    for k in range(num_layers):
        if counts[k] == 0:
            continue

        lo = max(0, k - half_window)
        hi = min(num_layers - 1, k + half_window)
        n = 0.0
        window = np.zeros(6, dtype=np.float64)
        for j in range(lo, hi + 1):
            n += counts[j]
            window += sums[j]

        denom = n * window[1] - window[0] * window[0]
        if denom <= 1e-12 * max(1.0, n * window[1]):
            continue

        slope1 = (n * window[3] - window[0] * window[2]) / denom
        slope2 = (n * window[5] - window[0] * window[4]) / denom
        fits[k, 0] = (window[2] - slope1 * window[0]) / n
        fits[k, 1] = slope1
        fits[k, 2] = (window[4] - slope2 * window[0]) / n
        fits[k, 3] = slope2
        valid[k] = True

    return fits, valid


def sliding_fit(points, vertex, half_window=SLIDING_FIT_HALF_WINDOW, pitch=1.0):
    """Computes the ordered trajectory of a track with a sliding linear fit.

    Parameters
    ----------
    points : np.ndarray
        (N, 3) Coordinates of the track points
    vertex : np.ndarray
        (3) Reference vertex of the track
    half_window : int, default 20
        Number of layers on either side of a layer included in its fit
    pitch : float, default 1.0
        Width of a layer along the track axis (wire pitch)

    Returns
    -------
    List[TrackState]
        Trajectory points, ordered by increasing distance from the vertex
        along the track axis. Empty if the track cannot be fitted.
    """
    # Check the fit parameters
    if pitch <= 0.0:
        raise ValueError(f"The layer pitch must be positive, got {pitch}.")
    if half_window < 1:
        raise ValueError(f"The half window must be at least 1, got {half_window}.")

    # A trajectory requires at least two distinct points
    points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    if len(points) < 2:
        return []

    centroid, _ = covariance(points)
    components, variances = principal_components(points)
    if not has_spread(centroid, variances):
        return []

    # Orient the track axis away from the vertex
    vertex = np.asarray(vertex, dtype=np.float64)
    axis, trans_axes = components[0], components[1:]
    if np.dot(centroid - vertex, axis) < 0.0:
        axis = -axis

    # Express the points in the track frame, group them in layers
    rel_points = points - vertex
    lengths = rel_points @ axis
    trans1, trans2 = rel_points @ trans_axes[0], rel_points @ trans_axes[1]
    layers = np.floor(lengths / pitch).astype(np.int64)
    layers -= np.min(layers)
    if len(np.unique(layers)) < 2:
        return []

    # Fit each layer, evaluate the local line at each point
    fits, valid = layer_fits(layers, lengths, trans1, trans2, int(half_window))
    states = []
    for i in np.argsort(lengths, kind="stable"):
        if not valid[layers[i]]:
            continue

        icpt1, slope1, icpt2, slope2 = fits[layers[i]]
        position = (
            vertex
            + lengths[i] * axis
            + (icpt1 + slope1 * lengths[i]) * trans_axes[0]
            + (icpt2 + slope2 * lengths[i]) * trans_axes[1]
        )
        direction = axis + slope1 * trans_axes[0] + slope2 * trans_axes[1]
        direction /= np.linalg.norm(direction)

        states.append(
            TrackState(position=position, direction=direction, length=lengths[i])
        )

    return states
