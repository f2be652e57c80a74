import numpy as np
import pydendrite as pyd

def test_ramp_breakpoints():
    rgba = pyd.phi_to_rgba(np.array([0., 0.9, 1.]))
    assert tuple(rgba[0]) == (0, 0, 0, 255)
    assert tuple(rgba[1]) == (63, 127, 249, 255)
    assert tuple(rgba[2]) == (229, 255, 249, 255)

def test_ramp_clamps_out_of_range():
    rgba = pyd.phi_to_rgba(np.array([-0.5, 2.]))
    assert tuple(rgba[0]) == (0, 0, 0, 255)
    assert tuple(rgba[1]) == (255, 255, 249, 255)

def test_ramp_writes_into_buffer():
    out = np.zeros((3, 2, 4), dtype=np.uint8)
    result = pyd.phi_to_rgba(np.full((3, 2), 0.45), out=out)
    assert result is out
    assert np.all(out[..., 3] == 255)
    assert np.all(out[..., 0] == int(0.125*255))

def test_angle_helpers():
    np.testing.assert_allclose(pyd.normalize_angle(np.array([-0.5, 7.])), [2*np.pi - 0.5, 7. - 2*np.pi])
    assert pyd.normalize_angle(-1e-300) == 0.
    np.testing.assert_allclose(pyd.shortest_arc(np.array([0.2 - 2*np.pi, 3.5])), [0.2, 3.5 - 2*np.pi])
