"""
Seeding of the initial solid nucleus
"""
import numpy as np

def seed_cross(store, center=None):
    """
    Sets phi = 1 on a cell and its four in-plane axis neighbors (a 5 cell cross)

    Neighbors falling outside the grid are resolved with the boundary conditions

    Parameters
    ----------

    store : FieldStore
    center : tuple of int, optional
        (x, y) or (x, y, z) of the central cell. Defaults to the grid center
    """
    if center is None:
        center = store.grid.center
    phi = store["phi"]
    x, y = center[0], center[1]
    rest = tuple(center[2:])
    for cx, cy in [(x, y), (x-1, y), (x+1, y), (x, y-1), (x, y+1)]:
        phi[(cx, cy)+rest] = 1.

def seed_sphere(store, radius=3, center=None):
    """
    Sets phi = 1 on every cell within Euclidean distance radius (inclusive) of a center cell

    Parameters
    ----------

    store : FieldStore
    radius : float, default = 3
        Radius of the nucleus, in cells
    center : tuple of int, optional
        (x, y[, z]) of the nucleus center. Defaults to the grid center
    """
    grid = store.grid
    if center is None:
        center = grid.center
    #ogrid is in numpy order (z, y, x), center is in grid order (x, y, z)
    axes = np.ogrid[tuple(slice(0, n) for n in grid.shape)]
    dist2 = 0
    for i in range(grid.rank):
        dist2 = dist2 + (axes[i] - center[grid.rank-1-i])**2
    mask = dist2 <= radius*radius
    store["phi"].get_cells()[mask] = 1.

def seed_nucleus(store, radius=3, center=None):
    """
    Default nucleus for a grid: a cross in 2D, a filled sphere of the given radius in 3D
    """
    if(store.grid.rank == 3):
        seed_sphere(store, radius=radius, center=center)
    else:
        seed_cross(store, center=center)
