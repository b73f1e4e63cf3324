"""Module with data class objects which hold direction fit outputs."""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["TrackState", "ShowerPCA"]


@dataclass(eq=False)
class TrackState(DataBase):
    """Fitted state at one point along a track trajectory.

    Attributes
    ----------
    position : np.ndarray
        (3) Fitted position of the trajectory point
    direction : np.ndarray
        (3) Unit vector of the local trajectory direction
    length : float
        Longitudinal distance of the point from the reference vertex
    """

    position: np.ndarray = None
    direction: np.ndarray = None
    length: float = -np.inf

    # Fixed-length attributes
    _fixed_length_attrs = (("position", 3), ("direction", 3))


@dataclass(eq=False)
class ShowerPCA(DataBase):
    """Principal component summary of a shower point cloud.

    Attributes
    ----------
    centroid : np.ndarray
        (3) Mean position of the point cloud
    primary_axis : np.ndarray
        (3) Axis of largest variance, oriented away from the vertex
    secondary_axis : np.ndarray
        (3) Axis of intermediate variance
    tertiary_axis : np.ndarray
        (3) Axis of smallest variance
    eigenvalues : np.ndarray
        (3) Variance along each axis, in decreasing order
    """

    centroid: np.ndarray = None
    primary_axis: np.ndarray = None
    secondary_axis: np.ndarray = None
    tertiary_axis: np.ndarray = None
    eigenvalues: np.ndarray = None

    # Fixed-length attributes
    _fixed_length_attrs = (
        ("centroid", 3),
        ("primary_axis", 3),
        ("secondary_axis", 3),
        ("tertiary_axis", 3),
        ("eigenvalues", 3),
    )
