"""
Grid geometry and per-cell storage shared by every part of the solver
"""
import dataclasses
import numpy as np
from .field import Field

PERIODIC = "PERIODIC"
NEUMANN = "NEUMANN"
BOUNDARY_CONDITIONS = (PERIODIC, NEUMANN)

#scipy.ndimage extension modes reproducing each policy for a stencil of radius 1
NDIMAGE_MODES = {PERIODIC: "wrap", NEUMANN: "nearest"}


@dataclasses.dataclass(frozen=True)
class Grid:
    """
    Immutable geometry of a simulation

    Attributes
    ----------

    dimensions : tuple of int
        (Nx, Ny) or (Nx, Ny, Nz). Note the x-first ordering, the numpy shape of the arrays is the reverse of this
    spacing : tuple of float
        (dx, dy) or (dx, dy, dz)
    dt : float
        Length of one sub-step
    boundary_conditions : str
        PERIODIC (wrap-around) or NEUMANN (zero flux, neighbors clamped to the edge cell)
    """
    dimensions: tuple
    spacing: tuple
    dt: float
    boundary_conditions: str = PERIODIC

    def __post_init__(self):
        dims = tuple(self.dimensions)
        spacing = tuple(self.spacing)
        if not (len(dims) in (2, 3)):
            raise ValueError("Grid must have 2 or 3 dimensions, got "+str(len(dims)))
        for n in dims:
            if not (isinstance(n, (int, np.integer)) and n > 0):
                raise ValueError("Grid dimensions must be positive integers, got "+str(dims))
        if(len(spacing) != len(dims)):
            raise ValueError("Need one cell spacing per dimension, got "+str(spacing)+" for "+str(dims))
        for d in spacing:
            if not (d > 0):
                raise ValueError("Cell spacing must be positive, got "+str(spacing))
        if not (self.dt > 0):
            raise ValueError("Time step must be positive, got "+str(self.dt))
        if not (self.boundary_conditions in BOUNDARY_CONDITIONS):
            raise ValueError("Unknown boundary conditions "+str(self.boundary_conditions)+", use PERIODIC or NEUMANN")
        #frozen dataclass, so bypass __setattr__ to store the normalized tuples
        object.__setattr__(self, "dimensions", tuple(int(n) for n in dims))
        object.__setattr__(self, "spacing", tuple(float(d) for d in spacing))
        object.__setattr__(self, "dt", float(self.dt))

    @property
    def rank(self):
        return len(self.dimensions)

    @property
    def shape(self):
        """numpy (C-order) shape: (Ny, Nx) or (Nz, Ny, Nx)"""
        return tuple(reversed(self.dimensions))

    @property
    def cell_count(self):
        return int(np.prod(self.dimensions))

    @property
    def center(self):
        return tuple(n//2 for n in self.dimensions)

    @property
    def active_layer(self):
        """z index of the slice the PDE is evolved on, None for 2D grids"""
        if(self.rank == 3):
            return self.dimensions[2]//2
        return None

    @property
    def ndimage_mode(self):
        return NDIMAGE_MODES[self.boundary_conditions]

    def resolve(self, i, axis):
        """
        Maps a (possibly out of range) index along an axis to a valid one, according to the boundary conditions
        """
        n = self.dimensions[axis]
        if(self.boundary_conditions == PERIODIC):
            return i % n
        return min(max(i, 0), n-1)


class FieldStore:
    """
    Owns every per-cell array of a simulation, and maps between grid coordinates and flat offsets

    Offsets are row-major with x varying fastest: offset = x + Nx*(y + Ny*z)

    Attributes
    ----------

    grid : Grid
        The (immutable) geometry
    fields : dict of str -> Field
        The named per-cell arrays, in insertion order
    """

    def __init__(self, grid):
        self.grid = grid
        self.fields = {}

    def add_field(self, name, colormap="GnBu"):
        """Allocates a zero-filled Field and registers it under name"""
        field = Field(np.zeros(self.grid.cell_count), store=self, name=name, colormap=colormap)
        self.fields[name] = field
        return field

    def __getitem__(self, name):
        return self.fields[name]

    def __contains__(self, name):
        return name in self.fields

    def zero_all(self):
        for field in self.fields.values():
            field.data[:] = 0.

    def index(self, x, y, z=0):
        """
        Flat offset of the cell at (x, y[, z])

        Coordinates outside the grid are first resolved with the boundary conditions,
            e.g. for PERIODIC, index(-1, y) == index(Nx-1, y)
        """
        g = self.grid
        nx, ny = g.dimensions[0], g.dimensions[1]
        x = g.resolve(x, 0)
        y = g.resolve(y, 1)
        if(g.rank == 3):
            z = g.resolve(z, 2)
        else:
            z = 0
        return x + nx*(y + ny*z)

    def coordinates(self, offset):
        """Inverse of index(), returns (x, y) or (x, y, z)"""
        g = self.grid
        nx, ny = g.dimensions[0], g.dimensions[1]
        x = offset % nx
        y = (offset//nx) % ny
        if(g.rank == 3):
            return (x, y, offset//(nx*ny))
        return (x, y)

    def neighbor(self, offset, axis, step=1):
        """
        Offset of the cell step cells away from offset along axis (0 = x, 1 = y, 2 = z)
        """
        coords = list(self.coordinates(offset))
        coords[axis] += step
        return self.index(*coords)

    def active(self, name):
        """2D view of a field on the active slice (the whole field for 2D grids)"""
        return self.fields[name].get_active_slice()

    def layer_neighbor(self, name, step):
        """
        2D view of the layer step layers above the active slice, resolved with the boundary conditions
        Only meaningful for 3D grids
        """
        layer = self.grid.resolve(self.grid.active_layer+step, 2)
        return self.fields[name].get_cells()[layer]
