import numpy as np
from pydendrite.derivatives import gradient, laplacian, interface_angle, anisotropy, AXIS_X, AXIS_Y

def _roll_laplacian(a, dx):
    n = np.roll(a, -1, 0)
    s = np.roll(a, 1, 0)
    e = np.roll(a, -1, 1)
    w = np.roll(a, 1, 1)
    corners = np.roll(n, -1, 1) + np.roll(n, 1, 1) + np.roll(s, -1, 1) + np.roll(s, 1, 1)
    return (2*(n+s+e+w) + corners - 12*a)/(3*dx*dx)

def test_gradient_central_difference():
    "Linear ramp along x: exact slope in the interior, half slope at a clamped edge"
    x = np.arange(8, dtype=float)
    a = np.tile(0.5*x, (4, 1))
    gx = gradient(a, AXIS_X, 0.25, "nearest")
    gy = gradient(a, AXIS_Y, 0.25, "nearest")
    np.testing.assert_allclose(gx[:, 1:-1], 2.)
    np.testing.assert_allclose(gx[:, 0], 1.)
    np.testing.assert_allclose(gy, 0.)

def test_gradient_periodic_matches_roll():
    rng = np.random.default_rng(3)
    a = rng.random((7, 9))
    expected = (np.roll(a, -1, 0) - np.roll(a, 1, 0))/(2*0.1)
    np.testing.assert_allclose(gradient(a, AXIS_Y, 0.1, "wrap"), expected)

def test_laplacian_of_constant_is_zero():
    a = np.full((6, 6), 3.7)
    for mode in ["wrap", "nearest"]:
        np.testing.assert_allclose(laplacian(a, 0.03, mode), 0., atol=1e-9)

def test_laplacian_periodic_matches_stencil():
    rng = np.random.default_rng(0)
    a = rng.random((8, 10))
    np.testing.assert_allclose(laplacian(a, 0.5, "wrap"), _roll_laplacian(a, 0.5))

def test_laplacian_writes_into_output():
    a = np.zeros((5, 5))
    a[2, 2] = 1.
    out = np.ones((5, 5))
    laplacian(a, 1., "nearest", output=out)
    assert out[2, 2] == -4.
    assert out[1, 2] == 2./3.
    assert out[1, 1] == 1./3.
    assert out[0, 0] == 0.

def test_interface_angle_points_down_the_gradient():
    theta = interface_angle(np.array([1., 0., 0.]), np.array([0., 1., 0.]))
    assert np.isclose(np.mod(theta[0], 2*np.pi), np.pi)
    assert np.isclose(theta[1], -np.pi/2)
    #zero gradient is finite
    assert np.isfinite(theta[2])

def test_anisotropy_formula():
    theta = interface_angle(np.array([1.]), np.array([0.]))
    eps, eps_deriv = anisotropy(theta, 0., 0.01, 0.05, 6.)
    np.testing.assert_allclose(eps, 0.01*1.05)
    np.testing.assert_allclose(eps_deriv, 0., atol=1e-15)

def test_anisotropy_follows_orientation():
    "Rotating both the interface and the preferred direction leaves epsilon unchanged"
    theta = np.linspace(-np.pi, np.pi, 13)
    eps0, deriv0 = anisotropy(theta, 0., 0.01, 0.05, 6.)
    eps1, deriv1 = anisotropy(theta + 0.3, 0.3, 0.01, 0.05, 6.)
    np.testing.assert_allclose(eps0, eps1)
    np.testing.assert_allclose(deriv0, deriv1, atol=1e-15)
    eps, deriv = anisotropy(np.array([np.pi/12]), 0., 0.01, 0.05, 6.)
    np.testing.assert_allclose(eps, 0.01)
    np.testing.assert_allclose(deriv, -0.01*6*0.05)
