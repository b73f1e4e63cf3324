"""Main function that calls the Driver class.

This is the first module called when launching the binary script under the
`bin` directory. It sets up the `Driver` object used to run the
post-processors, analysis scripts and writers.
"""

from .driver import Driver


def run(cfg):
    """Process the input events in a single process.

    Parameters
    ----------
    cfg : dict
        Full driver configuration

    Returns
    -------
    int
        Number of processed events
    """
    driver = Driver(cfg)

    return driver.run()
