"""Typed exceptions raised by the reconstruction and analysis modules."""


class PfoAnaError(Exception):
    """Base exception for all reconstruction errors."""


class GeometryError(PfoAnaError):
    """Raised when the detector geometry cannot satisfy a request."""


class DegenerateFitError(PfoAnaError):
    """Raised when a numerical fit is run on a degenerate set of points."""


class VertexError(PfoAnaError):
    """Raised when a candidate does not have exactly one reference vertex."""


class MissingListError(PfoAnaError, KeyError):
    """Raised when a named object list cannot be found in the event."""

    def __init__(self, name):
        """Initialize with the name of the missing list.

        Parameters
        ----------
        name : str
            Name of the list which could not be found
        """
        self.name = name
        super().__init__(f"Object list not found in the event: `{name}`")

    def __str__(self):
        return self.args[0]
