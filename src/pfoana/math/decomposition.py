"""Numba JIT compiled implementation of decomposition routines."""

import numba as nb
import numpy as np

from pfoana.data.track import ShowerPCA
from pfoana.utils.errors import DegenerateFitError

__all__ = [
    "covariance",
    "principal_components",
    "has_spread",
    "shower_principal_components",
]

# Smallest variance, relative to the squared centroid norm, of a cloud with spread
SPREAD_TOLERANCE = 1e-12


@nb.njit(cache=True)
def covariance(x: nb.float64[:, :]):
    """Computes the mean and the (biased) covariance matrix of a point cloud.

    Parameters
    ----------
    x : np.ndarray
        (N, d) Coordinates in d dimensions

    Returns
    -------
    np.ndarray
        (d) Mean of the point cloud
    np.ndarray
        (d, d) Covariance matrix
    """
    n, d = x.shape
    mean = np.zeros(d, dtype=x.dtype)
    for i in range(n):
        mean += x[i]
    mean /= n

    cov = np.zeros((d, d), dtype=x.dtype)
    for i in range(n):
        diff = x[i] - mean
        for a in range(d):
            for b in range(d):
                cov[a, b] += diff[a] * diff[b]

    return mean, cov / n


@nb.njit(cache=True)
def principal_components(x: nb.float64[:, :]):
    """Computes the principal components of a point cloud by computing the
    eigenvectors of the centered covariance matrix.

    Parameters
    ----------
    x : np.ndarray
        (N, d) Coordinates in d dimensions

    Returns
    -------
    np.ndarray
        (d, d) List of principal components (row-ordered, decreasing variance)
    np.ndarray
        (d) Variance along each of the principal components
    """
    # Get covariance matrix
    _, A = covariance(x)

    # Get eigenvectors, flip them to decreasing eigenvalue order
    w, v = np.linalg.eigh(A)
    w, v = w[::-1].copy(), np.ascontiguousarray(v[:, ::-1].T)

    return v, w


def has_spread(centroid, variances, tolerance=SPREAD_TOLERANCE):
    """Checks whether a point cloud extends along its primary axis.

    Coincident points which are not exactly representable yield a covariance
    of the order of the rounding error on the centroid rather than zero. The
    largest variance is therefore compared to the squared centroid norm.

    Parameters
    ----------
    centroid : np.ndarray
        (3) Mean of the point cloud
    variances : np.ndarray
        (3) Variance along each principal component, in decreasing order
    tolerance : float, default 1e-12
        Relative tolerance on the largest variance

    Returns
    -------
    bool
        `True` if the point cloud has a non-degenerate primary axis
    """
    scale = max(1.0, float(np.dot(centroid, centroid)))
    return variances[0] > tolerance * scale


def shower_principal_components(points, vertex):
    """Runs a principal component analysis of a shower point cloud.

    The primary axis is oriented so that it points away from the vertex.

    Parameters
    ----------
    points : np.ndarray
        (N, 3) Coordinates of the shower points
    vertex : np.ndarray
        (3) Reference vertex of the shower

    Returns
    -------
    ShowerPCA
        Principal component summary

    Raises
    ------
    DegenerateFitError
        If there are fewer than two points or if they all coincide
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    if len(points) < 2:
        raise DegenerateFitError(
            f"Cannot run a principal component analysis on {len(points)} point(s)."
        )

    centroid, _ = covariance(points)
    components, variances = principal_components(points)
    if not has_spread(centroid, variances):
        raise DegenerateFitError(
            "Cannot run a principal component analysis on a point cloud "
            "with no spread."
        )

    # Orient the primary axis away from the vertex
    primary = components[0]
    if np.dot(centroid - np.asarray(vertex, dtype=np.float64), primary) < 0.0:
        primary = -primary

    return ShowerPCA(
        centroid=centroid,
        primary_axis=primary,
        secondary_axis=components[1],
        tertiary_axis=components[2],
        eigenvalues=np.maximum(variances, 0.0),
    )
