import numpy as np

class Field():
    """
    The Field class, which stores data related to one field in the overall simulation

    Attributes
    ----------

    data : ndarray
        flat, contiguous array holding one value per cell, x varying fastest
        use the method Field.get_cells() to get the same data shaped like the grid
    name : str
        Name of the field, for use in plotting images and the like
    colormap : Matplotlib formatted Colormap
        The colormap to be used for plotting images

    for reference, private attributes are included below

    _store : FieldStore
        pointer back to the FieldStore which owns this Field, and therefore to the grid geometry
    """

    def __init__(self, data, store=None, name=None, colormap="GnBu"):
        """
        Initialize a Field instance

        Parameters
        ----------

        data : ndarray
            flat array with one value per grid cell
        store : FieldStore
            a pointer back to the FieldStore which the Field is a part of
        name : str
            The name of the Field, for printing results
        colormap : Matplotlib formatted Colormap
            A colormap for producing plots of the fields, useful in case different colors show data best for different fields
        """
        self._store = store
        self.data = np.ascontiguousarray(data, dtype=float).reshape(-1)
        self.name = name
        self.colormap = colormap

    def __getitem__(self, key):
        #key is a grid coordinate (x, y) or (x, y, z)
        return self.data[self._store.index(*key)]

    def __setitem__(self, key, value):
        self.data[self._store.index(*key)] = value

    def __str__(self):
        return self.get_cells().__str__()

    def get_cells(self):
        """View of the data with the numpy shape of the grid, (Ny, Nx) or (Nz, Ny, Nx)"""
        return self.data.reshape(self._store.grid.shape)

    def get_active_slice(self):
        """View of the 2D slice the PDE is evolved on"""
        cells = self.get_cells()
        layer = self._store.grid.active_layer
        if(layer is None):
            return cells
        return cells[layer]
