"""pfoana driver class.

Takes care of everything in one centralized place:
- Geometry initialization
- Event reading
- Post-processing
- Analysis script execution
- Writing output to file
"""

import subprocess as sc

import yaml

from .ana import AnaManager
from .config.errors import ConfigValidationError
from .geo import GeoManager
from .io import reader_factory, writer_factory
from .post import PostManager
from .utils.logger import logger
from .version import __version__

__all__ = ["Driver"]


class Driver:
    """Central pfoana driver.

    Processes global configuration and runs the appropriate modules:
      1. Read an event
      2. Run post-processing
      3. Run analysis scripts
      4. Write the analysis records to file

    Events are processed strictly sequentially. It takes a configuration
    dictionary of the form:

    .. code-block:: yaml

        base:
          <Base driver configuration>
        geo:
          <Detector geometry configuration>
        io:
          <Input/output configuration>
        post:
          <Post-processors>
        ana:
          <Analysis scripts>
    """

    def __init__(self, cfg):
        """Initializes the class attributes.

        Parameters
        ----------
        cfg : dict
            Global configuration dictionary
        """
        # Process the full configuration dictionary and store it
        base, geo, io, post, ana = self.process_config(**cfg)

        # Initialize the base driver configuration parameters
        self.initialize_base(**base)

        # Initialize the detector geometry
        self.geo = None
        if geo is not None:
            GeoManager.reset()
            self.geo = GeoManager.initialize(**geo)

        # Initialize the input/output
        self.initialize_io(**io)

        # Initialize the post-processors
        self.post = None
        if post is not None:
            self.post = PostManager(post)

        # Initialize the analysis scripts
        self.ana = None
        if ana is not None:
            self.ana = AnaManager(ana, geometry=self.geo)

    def process_config(self, io, base=None, geo=None, post=None, ana=None):
        """Reads the configuration and dumps it to the logger.

        Parameters
        ----------
        io : dict
            I/O configuration dictionary
        base : dict, optional
            Base driver configuration dictionary
        geo : dict, optional
            Geometry configuration dictionary
        post : dict, optional
            Post-processor configutation dictionary
        ana : dict, optional
            Analysis script configuration dictionary

        Returns
        -------
        dict
            Processed configuration
        """
        # If there is no base configuration, make it empty (will use defaults)
        if base is None:
            base = {}

        # Set the verbosity of the logger
        verbosity = base.get("verbosity", "info")
        logger.setLevel(verbosity.upper())

        # Rebuild global configuration dictionary
        self.cfg = {"base": base}
        if geo is not None:
            self.cfg["geo"] = geo
        self.cfg["io"] = io
        if post is not None:
            self.cfg["post"] = post
        if ana is not None:
            self.cfg["ana"] = ana

        # Log environment information
        logger.info("Release version: %s\n", __version__)

        system_info = sc.getstatusoutput("uname -a")[1]
        logger.info("Configuration processed at: %s\n", system_info)

        # Log configuration
        logger.info(yaml.dump(self.cfg, default_flow_style=None, sort_keys=False))

        # Return updated configuration
        return base, geo, io, post, ana

    def initialize_base(self, iterations=-1, verbosity="info", parent_path=None):
        """Initialize the base driver parameters.

        Parameters
        ----------
        iterations : int, default -1
            Number of events to process (-1 processes all of them)
        verbosity : str, default 'info'
            Verbosity level of the logger
        parent_path : str, optional
            Path to the parent directory of the configuration file
        """
        self.iterations = iterations
        self.parent_path = parent_path

    def initialize_io(self, reader, writer=None):
        """Initializes the input/output scripts.

        Parameters
        ----------
        reader : dict
            Reader configuration dictionary
        writer : dict, optional
            Writer configuration dictionary
        """
        # Initialize the reader
        self.reader = reader_factory(reader)

        # Initialize the data writer, if provided
        self.writer = None
        if writer is not None:
            file_name = writer.get("file_name")
            if not isinstance(file_name, str) or not file_name.strip():
                raise ConfigValidationError(
                    "The writer `file_name` must be a non-empty string, "
                    f"got {file_name!r}."
                )
            self.writer = writer_factory(writer, cfg=self.cfg)

        # Harmonize the number of iterations with the input size
        if self.iterations is None or self.iterations < 0:
            self.iterations = len(self.reader)
        self.iterations = min(self.iterations, len(self.reader))

    def __len__(self):
        """Returns the number of events to process.

        Returns
        -------
        int
            Number of events
        """
        return self.iterations

    def run(self):
        """Loop over the requested number of events, process them.

        Returns
        -------
        int
            Number of processed events
        """
        for iteration in range(self.iterations):
            self.process(self.reader[iteration])

        logger.info("Processed %d event(s).", self.iterations)

        return self.iterations

    def process(self, event):
        """Process one event.

        Parameters
        ----------
        event : Event
            Event to process

        Returns
        -------
        Dict[str, object]
            Record produced by each analysis script, keyed by table name
        """
        # 1. Run post-processing, if requested
        if self.post is not None:
            self.post(event)

        # 2. Run analysis scripts, if requested
        records = {}
        if self.ana is not None:
            records = self.ana(event)

        # 3. Write output to file, if requested
        if self.writer is not None:
            for tree_name, record in records.items():
                self.writer.append(tree_name, record.as_dict())

        return records
