import numpy as np
import pydendrite as pyd
from pydendrite.nucleation import seed_cross, seed_sphere, seed_nucleus

def _store(dimensions, boundary_conditions="PERIODIC"):
    store = pyd.FieldStore(pyd.Grid(dimensions, [1.]*len(dimensions), 0.1, boundary_conditions))
    store.add_field("phi")
    store.add_field("T")
    return store

def test_cross_2d():
    store = _store((10, 10))
    seed_nucleus(store)
    phi = store["phi"]
    for cell in [(5, 5), (4, 5), (6, 5), (5, 4), (5, 6)]:
        assert phi[cell] == 1.
    assert phi.data.sum() == 5.
    assert phi[(4, 4)] == 0.
    assert np.all(store["T"].data == 0.)

def test_cross_wraps_at_the_edge():
    store = _store((6, 6))
    seed_cross(store, center=(0, 0))
    phi = store["phi"]
    assert phi[(5, 0)] == 1.
    assert phi[(0, 5)] == 1.
    assert phi.data.sum() == 5.

def test_cross_clamps_at_the_edge():
    store = _store((6, 6), "NEUMANN")
    seed_cross(store, center=(0, 0))
    #the two out of grid arms land back on the center cell
    assert store["phi"].data.sum() == 3.

def test_sphere_3d():
    store = _store((16, 16, 16), "NEUMANN")
    seed_nucleus(store, radius=3)
    phi = store["phi"]
    assert phi[(8, 8, 8)] == 1.
    assert phi[(11, 8, 8)] == 1.
    assert phi[(8, 8, 5)] == 1.
    assert phi[(12, 8, 8)] == 0.
    assert phi[(8, 4, 8)] == 0.
    #3^2 = 2^2 + 2^2 + 1^2
    assert phi[(10, 10, 9)] == 1.
    assert phi[(10, 10, 10)] == 0.
    assert np.all(store["T"].data == 0.)

def test_sphere_offset_center():
    store = _store((12, 10, 8), "NEUMANN")
    seed_sphere(store, radius=1, center=(2, 3, 4))
    cells = store["phi"].get_cells()
    assert cells.sum() == 7.
    assert cells[4, 3, 2] == 1.
    assert cells[4, 3, 3] == 1.
    assert cells[5, 3, 2] == 1.
