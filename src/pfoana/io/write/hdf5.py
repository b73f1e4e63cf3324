"""Module to write per-event analysis records to an HDF5 file."""

import os

import h5py
import numpy as np
import yaml

from pfoana.version import __version__

__all__ = ["HDF5Writer"]


class HDF5Writer:
    """Writes rows of analysis output to an HDF5 file.

    Each output table (tree) is stored as an HDF5 group which holds one
    resizable dataset per field. Scalar fields are stored as regular
    datasets, array fields (one value per candidate) as variable-length
    datasets. Rows are appended one at a time.

    Typical configuration should look like:

    .. code-block:: yaml

        io:
          ...
          writer:
            name: hdf5
            file_name: beam_ana.h5
            overwrite: false

    Each analysis script writes to the table named by its `tree_name`.
    """

    name = "hdf5"

    def __init__(self, file_name, overwrite=False, append=True, config=None):
        """Initialize the basics of the output file.

        Parameters
        ----------
        file_name : str
            Name of the output HDF5 file
        overwrite : bool, default False
            If `True`, overwrite the output file if it already exists
        append : bool, default True
            If `True`, add rows to an existing file (and to existing tables)
        config : dict, optional
            Configuration to store in the file attributes
        """
        # Check that the output file does not already exist, if requested
        if not overwrite and not append and os.path.isfile(file_name):
            raise FileExistsError(f"File with name {file_name} already exists.")

        # Store persistent attributes
        self.file_name = file_name
        self.config = config
        self.mode = "w" if overwrite else "a"
        self.num_rows = {}

    def create(self, out_file, tree_name, row, dtypes=None):
        """Initialize the group of a table and its datasets.

        Parameters
        ----------
        out_file : h5py.File
            Open output file
        tree_name : str
            Name of the table
        row : dict
            First row to be written, used to infer the dataset types
        dtypes : dict, optional
            Dictionary which maps field names onto their data types
        """
        group = out_file.create_group(tree_name)
        group.attrs.create(
            "field_order", list(row.keys()), dtype=h5py.string_dtype()
        )
        for key, value in row.items():
            dtype = None if dtypes is None else dtypes.get(key)
            if dtype is None:
                dtype = np.asarray(value).dtype
            if isinstance(value, np.ndarray):
                dtype = h5py.vlen_dtype(np.dtype(dtype))

            group.create_dataset(key, (0,), maxshape=(None,), dtype=dtype)

    def append(self, tree_name, row, dtypes=None):
        """Append one row to a table of the output file.

        Parameters
        ----------
        tree_name : str
            Name of the table
        row : dict
            Ordered (field, value) pairs. Array values are stored as
            variable-length entries
        dtypes : dict, optional
            Dictionary which maps field names onto their data types (only
            used when the table is created)
        """
        with h5py.File(self.file_name, self.mode) as out_file:
            # Store the environment information the first time through
            if self.mode == "w" or "version" not in out_file.attrs:
                out_file.attrs["version"] = __version__
                if self.config is not None:
                    out_file.attrs["cfg"] = yaml.dump(self.config)
            self.mode = "a"

            # Create the table if needed, otherwise check the fields
            if tree_name not in out_file:
                self.create(out_file, tree_name, row, dtypes)
            else:
                fields = list(out_file[tree_name].attrs["field_order"])
                if fields != list(row.keys()):
                    raise ValueError(
                        f"The fields of the row do not match those of the "
                        f"existing `{tree_name}` table.\n"
                        f"Expected: {fields}\nGot: {list(row.keys())}"
                    )

            # Append the row
            group = out_file[tree_name]
            for key, value in row.items():
                dataset = group[key]
                num_rows = len(dataset)
                dataset.resize((num_rows + 1,))
                dataset[num_rows] = value

            self.num_rows[tree_name] = num_rows + 1
