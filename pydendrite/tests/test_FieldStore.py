import numpy as np
import pytest
import pydendrite as pyd

def test_index_coordinates_bijection_2d():
    "Every offset maps to in-range coordinates and back"
    store = pyd.FieldStore(pyd.Grid((5, 3), (1., 1.), 0.1))
    offsets = set()
    for y in range(3):
        for x in range(5):
            offset = store.index(x, y)
            assert store.coordinates(offset) == (x, y)
            offsets.add(offset)
    assert offsets == set(range(15))

def test_index_coordinates_bijection_3d():
    store = pyd.FieldStore(pyd.Grid((4, 3, 2), (1., 1., 1.), 0.1, "NEUMANN"))
    for offset in range(store.grid.cell_count):
        assert store.index(*store.coordinates(offset)) == offset
    assert store.index(1, 2, 1) == 1 + 4*(2 + 3*1)

def test_periodic_wrap():
    store = pyd.FieldStore(pyd.Grid((6, 4), (1., 1.), 0.1, pyd.PERIODIC))
    assert store.index(-1, 2) == store.index(5, 2)
    assert store.index(6, 2) == store.index(0, 2)
    assert store.index(3, -1) == store.index(3, 3)
    assert store.neighbor(store.index(5, 0), 0, 1) == store.index(0, 0)
    assert store.neighbor(store.index(0, 0), 1, -1) == store.index(0, 3)

def test_neumann_clamp():
    store = pyd.FieldStore(pyd.Grid((6, 4), (1., 1.), 0.1, pyd.NEUMANN))
    assert store.index(-1, 2) == store.index(0, 2)
    assert store.index(6, 2) == store.index(5, 2)
    assert store.neighbor(store.index(5, 3), 1, 1) == store.index(5, 3)
    assert store.neighbor(store.index(2, 1), 0, 1) == store.index(3, 1)

def test_field_views_share_memory():
    "Coordinate access, grid shaped views and the flat array are the same storage"
    store = pyd.FieldStore(pyd.Grid((4, 3, 5), (1., 1., 1.), 0.1))
    field = store.add_field("phi")
    field[(1, 2, 3)] = 7.
    assert field.data[store.index(1, 2, 3)] == 7.
    assert field.get_cells().shape == (5, 3, 4)
    assert field.get_cells()[3, 2, 1] == 7.
    assert store.grid.active_layer == 2
    assert store.active("phi").shape == (3, 4)
    store.active("phi")[0, 0] = 1.
    assert field[(0, 0, 2)] == 1.
    assert np.shares_memory(store.layer_neighbor("phi", 1), field.data)

def test_grid_validation():
    with pytest.raises(ValueError):
        pyd.Grid((0, 4), (1., 1.), 0.1)
    with pytest.raises(ValueError):
        pyd.Grid((4,), (1.,), 0.1)
    with pytest.raises(ValueError):
        pyd.Grid((4, 4), (1., -1.), 0.1)
    with pytest.raises(ValueError):
        pyd.Grid((4, 4), (1., 1.), 0.)
    with pytest.raises(ValueError):
        pyd.Grid((4, 4), (1., 1.), 0.1, "DIRICHLET")
    with pytest.raises(ValueError):
        pyd.Grid((4, 4), (1.,), 0.1)

def test_grid_is_immutable():
    grid = pyd.Grid([8, 6], [0.5, 0.5], 0.1)
    assert grid.dimensions == (8, 6)
    assert grid.shape == (6, 8)
    assert grid.center == (4, 3)
    with pytest.raises(AttributeError):
        grid.dt = 1.
