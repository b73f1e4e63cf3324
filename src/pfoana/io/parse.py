"""Functions which build data objects from their serialized description.

The upstream reconstruction output is described with plain dictionaries
(as loaded from YAML). An event is laid out as follows:

.. code-block:: yaml

    run: 1
    subrun: 0
    event: 12
    mc_particles:
      Input:
        - particle_id: 211
          energy: 2.5
          momentum: [0.0, 0.0, 2.5]
          vertex: [-30.0, 420.0, 0.0]
          endpoint: [165.3, 1, 0]
    pfos:
      ParticleFlowObjects:
        - particle_id: 13
          vertices: [[-30.0, 420.0, 0.5]]
          properties: {IsTestBeam: 1.0}
          hits:
            u: [[-30.0, 0.0, 1.0], ...]
            3d: [[-30.0, 420.0, 1.0], ...]
"""

import numpy as np

from pfoana.data import CaloHit, Event, MCParticle, Pfo
from pfoana.utils.enums import enum_factory

__all__ = ["parse_event", "parse_pfo", "parse_particle", "parse_hits"]

# Aliases of the hit type names accepted in the input
VIEW_ALIASES = {"3d": "three_d"}


def parse_view(view):
    """Parses a hit type from its name or value.

    Parameters
    ----------
    view : Union[str, int]
        Name (`u`, `v`, `w`, `3d`) or value of the hit type

    Returns
    -------
    int
        Hit type value
    """
    if isinstance(view, str):
        view = VIEW_ALIASES.get(view.lower(), view)

    return enum_factory("view", view)


def parse_hits(cfg):
    """Builds a list of hits.

    The hits can either be provided as a list of hit descriptions, each with
    a `view`, a `position` and an optional `energy`, or as a dictionary which
    maps each hit type onto a list of positions.

    Parameters
    ----------
    cfg : Union[List[dict], Dict[str, list]]
        Hit descriptions

    Returns
    -------
    List[CaloHit]
        List of hits
    """
    if cfg is None:
        return []

    if isinstance(cfg, dict):
        hits = []
        for view, positions in cfg.items():
            view = parse_view(view)
            for pos in np.asarray(positions, dtype=np.float64).reshape(-1, 3):
                hits.append(CaloHit(view=view, position=pos))

        return hits

    return [
        CaloHit(
            view=parse_view(hit["view"]),
            position=hit["position"],
            energy=hit.get("energy", 0.0),
        )
        for hit in cfg
    ]


def parse_pfo(cfg, index=-1):
    """Builds a particle-flow object.

    Parameters
    ----------
    cfg : dict
        PFO description
    index : int, default -1
        Index of the PFO in its list, used if no `id` is provided

    Returns
    -------
    Pfo
        Particle-flow object
    """
    vertices = cfg.get("vertices")
    if vertices is None:
        vertices = [cfg["vertex"]] if cfg.get("vertex") is not None else []

    return Pfo(
        id=cfg.get("id", index),
        particle_id=cfg.get("particle_id", 0),
        vertices=vertices,
        hits=parse_hits(cfg.get("hits")),
        properties=dict(cfg.get("properties") or {}),
    )


def parse_particle(cfg):
    """Builds a truth (or trigger) particle.

    Parameters
    ----------
    cfg : dict
        Particle description

    Returns
    -------
    MCParticle
        Truth particle
    """
    keys = ("particle_id", "energy", "momentum", "vertex", "endpoint")
    return MCParticle(**{k: cfg[k] for k in keys if k in cfg})


def parse_event(cfg):
    """Builds an event from its description.

    Parameters
    ----------
    cfg : dict
        Event description

    Returns
    -------
    Event
        Event with its named object lists
    """
    lists = {}
    for name, particles in (cfg.get("mc_particles") or {}).items():
        lists[name] = [parse_particle(p) for p in particles or []]

    for name, pfos in (cfg.get("pfos") or {}).items():
        if name in lists:
            raise ValueError(f"List name `{name}` is used more than once.")
        lists[name] = [parse_pfo(p, i) for i, p in enumerate(pfos or [])]

    return Event(
        run=cfg.get("run", -1),
        subrun=cfg.get("subrun", -1),
        event=cfg.get("event", -1),
        lists=lists,
    )
