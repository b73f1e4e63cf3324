"""Version of the pfoana package."""

__version__ = "0.1.0"
