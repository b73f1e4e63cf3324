"""Manages the operation of analysis scripts."""

from collections import OrderedDict
from copy import deepcopy

import numpy as np

from .factories import ana_script_factory


class AnaManager:
    """Manager class to initialize and execute analysis scripts.

    Analysis scripts use the event content (after post-processing) and
    produce one record per event for each of their output tables.
    """

    def __init__(self, cfg, geometry=None):
        """Initialize the analysis manager.

        Parameters
        ----------
        cfg : dict
            Analysis script configurations
        geometry : Geometry, optional
            Detector geometry to provide to the analysis scripts
        """
        # Loop over the analyzer modules and get their priorities
        cfg = deepcopy(cfg)
        keys = np.array(list(cfg.keys()))
        priorities = -np.ones(len(keys), dtype=np.int32)
        for i, key in enumerate(keys):
            if "priority" in cfg[key]:
                priorities[i] = cfg[key].pop("priority")

        # Add the modules to a list in decreasing order of priority
        self.modules = OrderedDict()
        keys = keys[np.argsort(-priorities, kind="stable")]
        for key in keys:
            self.modules[key] = ana_script_factory(key, cfg[key], geometry)

        # Check that the output tables are unique
        tree_names = [module.tree_name for module in self.modules.values()]
        assert len(set(tree_names)) == len(tree_names), (
            f"Each analysis script must write to a different table, "
            f"got {tree_names}."
        )

    def __call__(self, event):
        """Pass one event through the analysis scripts.

        Parameters
        ----------
        event : Event
            Event to process

        Returns
        -------
        Dict[str, object]
            Record produced by each analysis script, keyed by table name
        """
        records = OrderedDict()
        for module in self.modules.values():
            records[module.tree_name] = module(event)

        return records
