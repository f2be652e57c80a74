"""
Spatial derivatives of the order parameter and temperature, and the anisotropic interfacial coefficient

All functions act on 2D arrays in C order, (y, x): axis -1 is x, axis -2 is y
The mode argument is the scipy.ndimage extension mode matching the grid's boundary conditions
    ("wrap" for periodic, "nearest" for neumann)
"""
import numpy as np
from scipy import ndimage

AXIS_X = -1
AXIS_Y = -2

CENTRAL_DIFFERENCE = np.array([-1., 0., 1.])

#isotropic 9-point laplacian: 2*(N+S+E+W) + (NE+NW+SE+SW) - 12*C, divided by 3*dx^2
LAPLACIAN_9PT = np.array([[1., 2., 1.],
                          [2., -12., 2.],
                          [1., 2., 1.]])

def gradient(array, axis, spacing, mode, output=None):
    """
    Central difference (a[i+1]-a[i-1])/(2*spacing) along one axis
    """
    output = ndimage.correlate1d(array, CENTRAL_DIFFERENCE, axis=axis, mode=mode, output=output)
    output *= 0.5/spacing
    return output

def laplacian(array, spacing, mode, output=None):
    """
    9-point laplacian of a 2D array, assumes the same cell spacing along x and y
    """
    output = ndimage.correlate(array, LAPLACIAN_9PT, mode=mode, output=output)
    output /= 3.*spacing*spacing
    return output

def interface_angle(grad_x, grad_y, output=None):
    """
    Angle of the outward normal of the solidification front, atan2(-dphi/dy, -dphi/dx)

    Finite everywhere, including where the gradient vanishes (the angle is then arbitrary but never NaN)
    """
    return np.arctan2(-grad_y, -grad_x, out=output)

def anisotropy(theta, omega, epsilon_bar, delta, k):
    """
    Anisotropic interfacial coefficient and its angular derivative

    Parameters
    ----------

    theta : ndarray
        Interface normal angle
    omega : ndarray or float
        Local preferred growth direction. Uniformly 0 recovers the original Kobayashi formulation
    epsilon_bar : float
        Mean interfacial coefficient
    delta : float
        Strength of anisotropy
    k : float
        Mode number of anisotropy (6 -> hexagonal symmetry)

    Returns
    -------
    (epsilon, epsilon_deriv) : tuple of ndarray
        epsilon = epsilon_bar*(1+delta*cos(k*(theta-omega)))
        epsilon_deriv = -epsilon_bar*k*delta*sin(k*(theta-omega))
    """
    relative = k*(theta - omega)
    epsilon = epsilon_bar*(1. + delta*np.cos(relative))
    epsilon_deriv = -epsilon_bar*k*delta*np.sin(relative)
    return epsilon, epsilon_deriv


class DerivativeEngine:
    """
    Computes, once per sub-step, the derived arrays the Evolver consumes

    Every array lives on the active slice of the FieldStore and is overwritten by compute()

    Attributes
    ----------

    grad_phi_x, grad_phi_y : ndarray
        Central difference gradient of phi
    grad_phi_z : ndarray or None
        Gradient of phi across the neighboring layers of the active slice, 3D grids only (not used by the 2D evolution)
    lap_phi, lap_T : ndarray
        9-point laplacians of phi and T
    theta : ndarray
        Interface normal angle
    epsilon, epsilon_deriv : ndarray
        Anisotropic interfacial coefficient and its derivative with respect to the angle
    """

    def __init__(self, store, epsilon_bar, delta, anisotropy_mode):
        self.store = store
        self.epsilon_bar = epsilon_bar
        self.delta = delta
        self.anisotropy_mode = anisotropy_mode
        shape = store.active("phi").shape
        self.grad_phi_x = np.zeros(shape)
        self.grad_phi_y = np.zeros(shape)
        self.grad_phi_z = None
        if(store.grid.rank == 3):
            self.grad_phi_z = np.zeros(shape)
        self.lap_phi = np.zeros(shape)
        self.lap_T = np.zeros(shape)
        self.theta = np.zeros(shape)
        self.epsilon = np.zeros(shape)
        self.epsilon_deriv = np.zeros(shape)

    def compute(self):
        grid = self.store.grid
        mode = grid.ndimage_mode
        dx = grid.spacing[0]
        dy = grid.spacing[1]
        phi = self.store.active("phi")
        T = self.store.active("T")
        omega = self.store.active("orientation")

        gradient(phi, AXIS_X, dx, mode, output=self.grad_phi_x)
        gradient(phi, AXIS_Y, dy, mode, output=self.grad_phi_y)
        if(self.grad_phi_z is not None):
            dz = grid.spacing[2]
            above = self.store.layer_neighbor("phi", 1)
            below = self.store.layer_neighbor("phi", -1)
            np.subtract(above, below, out=self.grad_phi_z)
            self.grad_phi_z *= 0.5/dz
        laplacian(phi, dx, mode, output=self.lap_phi)
        laplacian(T, dx, mode, output=self.lap_T)

        interface_angle(self.grad_phi_x, self.grad_phi_y, output=self.theta)
        self.epsilon[:], self.epsilon_deriv[:] = anisotropy(self.theta, omega, self.epsilon_bar,
                                                            self.delta, self.anisotropy_mode)
