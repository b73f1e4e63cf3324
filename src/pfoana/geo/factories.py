"""Construct a geometry object from a detector name or an inline block."""

from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from .base import Geometry

# Get config directory relative to this module
GEO_CONFIG_DIR = Path(__file__).parent / "config"

__all__ = ["geo_factory", "geo_dict"]


def geo_dict() -> Dict[Path, Dict[str, str]]:
    """Builds a dictionary of available geometry configurations.

    Returns
    -------
    dict
        Dictionary which maps configuration paths onto their
        (name, tag, version) identifiers
    """
    # Gather all geometry yaml files from the config directory
    options = {}
    for path in sorted(GEO_CONFIG_DIR.glob("*/*_geometry.yaml")):
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)

        options[path] = {k: cfg.get(k) for k in ("name", "tag", "version")}
        options[path]["version"] = str(float(options[path]["version"]))

    return options


def geo_factory(
    detector: Optional[str] = None,
    tag: Optional[str] = None,
    version: Optional[Union[str, int, float]] = None,
    tpc: Optional[dict] = None,
    **kwargs,
) -> Geometry:
    """Instantiates a geometry object.

    If a `tpc` block is provided, the geometry is built from it directly.
    Otherwise, the detector name is used to look up one of the geometry
    presets shipped with the package.

    Parameters
    ----------
    detector : str, optional
        Name of the detector (e.g. "protodune_sp")
    tag : str, optional
        Geometry tag
    version : str, optional
        Geometry version (e.g. "1", "1.1")
    tpc : dict, optional
        Inline TPC configuration
    **kwargs : dict, optional
        Additional arguments passed to :class:`Geometry`

    Returns
    -------
    Geometry
         Initialized geometry object
    """
    # If the geometry is provided inline, build it
    if tpc is not None:
        name = detector if detector is not None else "custom"
        return Geometry(name=name, tpc=tpc, tag=tag, version=version, **kwargs)

    # Find a geometry configuration that matches the requested parameters
    assert detector is not None, "Must provide a detector name or a `tpc` block."
    matches = {
        path: cfg
        for path, cfg in geo_dict().items()
        if cfg["name"].lower() == detector.lower()
    }
    if not matches:
        raise ValueError(f"No geometry found for detector '{detector}'.")

    if tag is not None:
        matches = {p: c for p, c in matches.items() if c["tag"] == tag}
        if not matches:
            raise ValueError(
                f"No geometry found for detector '{detector}' with tag '{tag}'."
            )

    if version is not None:
        major = str(version).split(".")[0]
        matches = {
            p: c for p, c in matches.items() if c["version"].split(".")[0] == major
        }
        if not matches:
            raise ValueError(
                f"No geometry found for detector '{detector}' with "
                f"version '{version}'."
            )

    # Use the most recent of the remaining versions
    file_path = max(matches, key=lambda p: float(matches[p]["version"]))

    # Parse configuration file as a dictionary
    with open(file_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    return Geometry(**cfg, **kwargs)
