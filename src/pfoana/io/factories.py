"""Functions that instantiate IO tools from configuration blocks."""

from pfoana.utils.factory import instantiate, module_dict

from . import read, write

READER_DICT = module_dict(read)
WRITER_DICT = module_dict(write)

__all__ = ["reader_factory", "writer_factory"]


def reader_factory(reader_cfg):
    """Instantiates reader based on type specified in configuration under
    `io.reader.name`. The name must match the name of a class under
    `pfoana.io.read`.

    Parameters
    ----------
    reader_cfg : dict
        Reader configuration dictionary

    Returns
    -------
    object
        Reader object

    Note
    ----
    Currently the choice is limited to `YAMLReader` only.
    """
    return instantiate(READER_DICT, reader_cfg)


def writer_factory(writer_cfg, cfg=None):
    """Instantiates writer based on type specified in configuration under
    `io.writer.name`. The name must match the name of a class under
    `pfoana.io.write`.

    Parameters
    ----------
    writer_cfg : dict
        Writer configuration dictionary
    cfg : dict, optional
        Full configuration to store alongside the output

    Returns
    -------
    object
        Writer object

    Note
    ----
    Currently the choice is limited to `HDF5Writer` only.
    """
    return instantiate(WRITER_DICT, writer_cfg, config=cfg)
