from matplotlib.colors import LinearSegmentedColormap
import numpy as np

TWO_PI = 2.*np.pi

#display ramp for the order parameter: liquid (black) -> edge (blue) -> transition (cyan) -> crystal core (white)
CRYSTAL_COLORS = [(0., 0., 0.), (0.25, 0.50, 0.98), (0.36, 1.00, 0.98), (0.90, 1.00, 0.98)]
CRYSTAL_BOUNDARIES = [0., 0.9, 0.99, 1.]

COLORMAP_CRYSTAL = LinearSegmentedColormap.from_list('crystal', list(zip(CRYSTAL_BOUNDARIES, CRYSTAL_COLORS)))
colors = [(0, 0, 1), (0, 1, 1), (0, 1, 0), (1, 1, 0), (1, 0, 0)]
COLORMAP_OTHER = LinearSegmentedColormap.from_list('rgb', colors)
COLORMAP_ORIENTATION = "hsv"

def normalize_angle(angle):
    """
    Wraps an angle (or array of angles) into [0, 2pi)

    np.mod can round tiny negative values up to exactly 2pi, those are folded back to 0
    """
    wrapped = np.mod(angle, TWO_PI)
    return np.where(wrapped >= TWO_PI, 0., wrapped)

def shortest_arc(difference):
    """
    Wraps an angular difference into [-pi, pi), so that blending along it never goes the long way around the circle
    """
    return np.mod(np.asarray(difference) + np.pi, TWO_PI) - np.pi

def phi_to_rgba(phi, out=None):
    """
    Maps the order parameter onto the crystal display ramp

    Parameters
    ----------

    phi : ndarray
        Order parameter values, any shape
    out : ndarray of uint8, optional
        Destination with shape phi.shape + (4,). Written in place if given

    Returns
    -------
    uint8 ndarray of shape phi.shape + (4,), alpha is always 255

    Notes
    -----

    Each band is a linear interpolation between two colors of CRYSTAL_COLORS:
        phi <= 0.9:          c0 -> c1
        0.9 < phi <= 0.99:   c1 -> c2
        phi > 0.99:          c2 -> c3, reaching c3 at phi = 1
    Values outside [0, 1] extrapolate the outer bands, then every channel is clamped to [0, 1] and truncated to a byte
    """
    phi = np.asarray(phi, dtype=float)
    c0, c1, c2, c3 = [np.array(c) for c in CRYSTAL_COLORS]
    b1 = CRYSTAL_BOUNDARIES[1]
    b2 = CRYSTAL_BOUNDARIES[2]
    b3 = CRYSTAL_BOUNDARIES[3]
    p = phi[..., np.newaxis]

    r0 = p/b1
    r1 = (p-b1)/(b2-b1)
    r2 = (p-b2)/(b3-b2)
    color = np.where(p <= b1, c0*(1.-r0) + c1*r0,
                     np.where(p <= b2, c1*(1.-r1) + c2*r1, c2*(1.-r2) + c3*r2))

    if out is None:
        out = np.empty(phi.shape+(4,), dtype=np.uint8)
    out[..., 0:3] = (np.clip(color, 0., 1.)*255.).astype(np.uint8)
    out[..., 3] = 255
    return out
