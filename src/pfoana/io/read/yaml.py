"""Module to read events described in YAML files."""

import glob

import yaml

from pfoana.io.parse import parse_event
from pfoana.utils.logger import logger

__all__ = ["YAMLReader"]


class YAMLReader:
    """Reads events from one or more YAML files.

    Each file either contains one event per YAML document, or a single
    document with an `events` list.
    """

    name = "yaml"

    def __init__(self, file_keys, n_entry=-1, n_skip=0):
        """Load the events from the input files.

        Parameters
        ----------
        file_keys : Union[str, List[str]]
            Path or list of paths to the input files. Glob patterns are
            expanded
        n_entry : int, default -1
            Maximum number of events to load (-1 loads all of them)
        n_skip : int, default 0
            Number of events to skip at the start of the input
        """
        # Expand the list of files
        if isinstance(file_keys, str):
            file_keys = [file_keys]

        self.file_paths = []
        for key in file_keys:
            paths = sorted(glob.glob(key))
            if not paths:
                raise FileNotFoundError(f"No input file matches: {key}")
            self.file_paths.extend(paths)

        # Load the event descriptions
        events = []
        for path in self.file_paths:
            with open(path, "r", encoding="utf-8") as in_file:
                for doc in yaml.safe_load_all(in_file):
                    if doc is None:
                        continue
                    if "events" in doc:
                        events.extend(doc["events"])
                    else:
                        events.append(doc)

        if n_skip < 0:
            raise ValueError("The number of events to skip cannot be negative.")
        events = events[n_skip:]
        if n_entry > -1:
            events = events[:n_entry]

        logger.info(
            "Loaded %d event(s) from %d file(s).", len(events), len(self.file_paths)
        )
        self.events = events

    def __len__(self):
        return len(self.events)

    def __getitem__(self, idx):
        return parse_event(self.events[idx])

    def __iter__(self):
        for idx in range(len(self)):
            yield self[idx]
