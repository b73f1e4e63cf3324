"""Manages a singleton instance of a Geometry class."""

import inspect
from typing import Optional

from .base import Geometry
from .factories import geo_factory


class GeoManager:
    """Manages a singleton instance of a Geometry class."""

    _instance: Optional[Geometry] = None

    @classmethod
    def initialize(cls, **cfg) -> Geometry:
        """Initialize the geometry module.

        Parameters
        ----------
        **cfg : dict
            Geometry configuration, passed to :func:`geo_factory`

        Returns
        -------
        Geometry
            The initialized geometry instance.
        """
        if cls._instance is not None:
            raise ValueError("Geometry module already initialized.")

        cls._instance = geo_factory(**cfg)

        return cls._instance

    @classmethod
    def set_instance(cls, geometry: Geometry) -> Geometry:
        """Register an already built geometry as the singleton instance.

        Parameters
        ----------
        geometry : Geometry
            Geometry instance

        Returns
        -------
        Geometry
            The registered geometry instance.
        """
        cls._instance = geometry

        return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if the geometry instance is initialized.

        Returns
        -------
        bool
            True if the geometry instance is initialized, False otherwise.
        """
        return cls._instance is not None

    @classmethod
    def get_instance(cls) -> Geometry:
        """Get the current geometry instance.

        Returns
        -------
        Geometry
            The current geometry instance.
        """
        if cls._instance is None:
            # Raise an error with detailed information about the call site
            frame_info = inspect.stack()[1]
            frame = frame_info.frame
            func = frame.f_code.co_name
            cls_obj = frame.f_locals.get("self")
            class_name = cls_obj.__class__.__name__ if cls_obj else None

            location = f"{class_name}.{func}()" if class_name else f"{func}()"

            raise ValueError(
                "Geometry singleton instance is not initialized.\n"
                f"Attempted access from: {location}\n"
                f"File: {frame_info.filename}:{frame_info.lineno}\n\n"
                "If using the Driver, include a `geo` block in the configuration.\n"
                "If running standalone, initialize geometry with:\n"
                "    GeoManager.initialize(detector='your_detector_name')\n"
                "before calling geometry-dependent modules."
            )

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the geometry instance (useful for testing)."""
        cls._instance = None
