"""Module to read back the analysis records stored in an HDF5 file."""

import h5py

__all__ = ["HDF5RecordReader"]


class HDF5RecordReader:
    """Reads the rows of a table written by :class:`HDF5Writer`.

    Rows are returned as dictionaries whose keys follow the field order of
    the table. Variable-length fields are returned as numpy arrays.
    """

    def __init__(self, file_name, tree_name):
        """Open the file and check that the table exists.

        Parameters
        ----------
        file_name : str
            Path to the HDF5 file
        tree_name : str
            Name of the table to read
        """
        self.file_name = file_name
        self.tree_name = tree_name
        with h5py.File(file_name, "r") as in_file:
            if tree_name not in in_file:
                raise KeyError(
                    f"Table `{tree_name}` not found in {file_name}. "
                    f"Available tables: {list(in_file.keys())}"
                )

            group = in_file[tree_name]
            self.fields = list(group.attrs["field_order"])
            self.num_rows = len(group[self.fields[0]]) if self.fields else 0
            self.version = in_file.attrs.get("version")

    def __len__(self):
        return self.num_rows

    def __getitem__(self, idx):
        """Reads one row of the table.

        Parameters
        ----------
        idx : int
            Row index

        Returns
        -------
        dict
            Row content
        """
        if idx < 0:
            idx += self.num_rows
        if idx < 0 or idx >= self.num_rows:
            raise IndexError(f"Row {idx} out of range ({self.num_rows} rows).")

        with h5py.File(self.file_name, "r") as in_file:
            group = in_file[self.tree_name]
            return {key: group[key][idx] for key in self.fields}

    def __iter__(self):
        for idx in range(self.num_rows):
            yield self[idx]
