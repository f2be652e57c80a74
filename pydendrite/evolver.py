"""
Explicit time integration of the coupled order parameter / temperature equations
"""
import numpy as np
from .derivatives import gradient, AXIS_X, AXIS_Y

class Evolver:
    """
    Advances phi and T on the active slice by one explicit step

    Uses the derived arrays of a DerivativeEngine, which must have been computed for the current step

    Update order:
        1. phi_new is computed into its own buffer, from the current step's values only
        2. T_new is computed from the (phi_old, phi_new) pair, so latent heat follows the instantaneous phase change
        3. both buffers are copied back into the FieldStore
    """

    def __init__(self, store, derivatives, tau, K, alpha, gamma, T_eq):
        self.store = store
        self.derivatives = derivatives
        self.tau = tau
        self.K = K
        self.alpha = alpha
        self.gamma = gamma
        self.T_eq = T_eq
        shape = store.active("phi").shape
        self._phi_next = np.zeros(shape)
        self._T_next = np.zeros(shape)

    def driving_force(self, T):
        """Undercooling forcing m(T) = (alpha/pi)*atan(gamma*(T_eq-T)), saturates at +-alpha/2"""
        return self.alpha/np.pi*np.arctan(self.gamma*(self.T_eq - T))

    def phi_rate(self):
        """d(phi)/dt for every cell of the active slice, computed from the current step only"""
        grid = self.store.grid
        mode = grid.ndimage_mode
        dx = grid.spacing[0]
        dy = grid.spacing[1]
        d = self.derivatives
        phi = self.store.active("phi")
        T = self.store.active("T")

        eps = d.epsilon
        eps_eps_deriv = eps*d.epsilon_deriv
        eps2 = eps*eps

        term1 = gradient(eps_eps_deriv*d.grad_phi_x, AXIS_Y, dy, mode)
        term2 = -gradient(eps_eps_deriv*d.grad_phi_y, AXIS_X, dx, mode)
        term3 = gradient(eps2, AXIS_X, dx, mode)*d.grad_phi_x + gradient(eps2, AXIS_Y, dy, mode)*d.grad_phi_y
        m = self.driving_force(T)

        return (term1 + term2 + eps2*d.lap_phi + term3 + phi*(1.-phi)*(phi - 0.5 + m))/self.tau

    def advance(self):
        dt = self.store.grid.dt
        phi = self.store.active("phi")
        T = self.store.active("T")

        np.multiply(self.phi_rate(), dt, out=self._phi_next)
        self._phi_next += phi

        #diffusion plus latent heat released by the phase change just computed
        np.subtract(self._phi_next, phi, out=self._T_next)
        self._T_next *= self.K
        self._T_next += T + self.derivatives.lap_T*dt

        np.copyto(phi, self._phi_next)
        np.copyto(T, self._T_next)
