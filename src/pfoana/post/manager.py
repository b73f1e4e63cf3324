"""Manages the operation of post-processors."""

from collections import OrderedDict
from copy import deepcopy

import numpy as np

from .factories import post_processor_factory


class PostManager:
    """Manager in charge of handling post-processing scripts.

    It loads all the post-processor objects once and feeds them events.
    """

    def __init__(self, cfg):
        """Initialize the post-processing manager.

        Parameters
        ----------
        cfg : dict
            Post-processor configurations
        """
        # Loop over the post-processor modules and get their priorities
        cfg = deepcopy(cfg)
        keys = np.array(list(cfg.keys()))
        priorities = -np.ones(len(keys), dtype=np.int32)
        for i, key in enumerate(keys):
            if "priority" in cfg[key]:
                priorities[i] = cfg[key].pop("priority")

        # Add the modules to a processor list in decreasing order of priority
        self.modules = OrderedDict()
        keys = keys[np.argsort(-priorities, kind="stable")]
        for key in keys:
            self.modules[key] = post_processor_factory(key, cfg[key])

    def __call__(self, event):
        """Pass one event through the post-processors.

        Parameters
        ----------
        event : Event
            Event to process, modified in place
        """
        for module in self.modules.values():
            module(event)
