#!/usr/bin/env python3
"""Command line entry point of the beam candidate analysis."""

import argparse
import os
import pathlib

from pfoana.config import load_config_file
from pfoana.version import __version__


def main(config, source, output, n, nskip):
    """Main driver of the analysis.

    Performs these basic functions:
    - Update the configuration with the command-line arguments
    - Run the driver

    Parameters
    ----------
    config : str
        Path to the configuration file
    source : List[str]
        List of paths to the input files
    output : str
        Path to the output file
    n : int
        Number of events to process
    nskip : int
        Number of events to skip

    Returns
    -------
    int
        Number of processed events
    """
    # Try to find configuration file using the absolute path or under
    # the 'config' directory relative to the current working directory
    cfg_file = config
    if not os.path.isfile(cfg_file):
        cfg_file = os.path.join("config", config)
    if not os.path.isfile(cfg_file):
        raise FileNotFoundError(f"Configuration not found: {config}")

    # Load the configuration file
    cfg = load_config_file(cfg_file)

    # If there is no base block, build one
    if cfg.get("base") is None:
        cfg["base"] = {}

    # Propagate the configuration parent directory
    cfg["base"]["parent_path"] = str(pathlib.Path(cfg_file).parent)

    # The configuration must minimally contain an IO block with a reader
    assert "io" in cfg, "Must provide an `io` block in the configuration."
    assert "reader" in cfg["io"], "Must specify a `reader` in the `io` block."

    # Override the input/output command-line information into the configuration
    if source:
        cfg["io"]["reader"]["file_keys"] = source

    if n is not None:
        cfg["io"]["reader"]["n_entry"] = n

    if nskip is not None:
        cfg["io"]["reader"]["n_skip"] = nskip

    if output is not None:
        if "writer" not in cfg["io"]:
            cfg["io"]["writer"] = {"name": "hdf5"}
        cfg["io"]["writer"]["file_name"] = output

    # Import the driver only once the configuration is ready
    from pfoana.main import run

    return run(cfg)


def cli(argv=None):
    """Parses the command line arguments and runs the analysis.

    Parameters
    ----------
    argv : List[str], optional
        Command line arguments (defaults to `sys.argv[1:]`)
    """
    parser = argparse.ArgumentParser(
        description="pfoana - beam candidate feature extraction"
    )

    parser.add_argument(
        "--version", "-v", action="version", version=f"pfoana {__version__}"
    )

    parser.add_argument(
        "-c", "--config", required=True, help="Path to the configuration file"
    )

    parser.add_argument(
        "-s", "--source", nargs="+", type=str, help="List of paths to the input files"
    )

    parser.add_argument("-o", "--output", help="Path to the output file")

    parser.add_argument(
        "-n", "--iterations", type=int, help="Number of events to process"
    )

    parser.add_argument("--nskip", type=int, help="Number of events to skip")

    args = parser.parse_args(argv)

    main(
        config=args.config,
        source=args.source,
        output=args.output,
        n=args.iterations,
        nskip=args.nskip,
    )


if __name__ == "__main__":
    cli()
