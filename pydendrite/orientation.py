"""
Orientation field management (Ren et al. 2018): a per-cell preferred growth direction that guides the anisotropy
"""
import math
import numpy as np
from .dendrite_utils import normalize_angle, shortest_arc

#screen coordinates are mapped onto the grid as if the window were this many pixels wide and tall
REFERENCE_WINDOW_SIZE = 800.
BRUSH_RADIUS_RANGE = (1., 400.)
BLEND_FACTOR_RANGE = (0., 1.)

class OrientationField:
    """
    Generates and edits the "orientation" Field of a FieldStore

    Three mutually exclusive generators (uniform, vortex) plus an incremental brush.
    Every write leaves all angles in [0, 2pi). 2D patterns are applied identically on every z layer of a 3D grid.
    """

    def __init__(self, store):
        self.store = store

    @property
    def field(self):
        return self.store["orientation"]

    def _planes(self):
        #(..., Ny, Nx) view, a single plane for 2D grids
        return self.field.get_cells()

    def set_uniform(self, angle=0.):
        self.field.data[:] = normalize_angle(angle)

    def set_vortex(self, clockwise=False):
        """
        Tangential field around the grid center: atan2(y-cy, x-cx) + pi/2 (counter-clockwise) or - pi/2 (clockwise)
        """
        nx, ny = self.store.grid.dimensions[0], self.store.grid.dimensions[1]
        cx = nx/2.
        cy = ny/2.
        y, x = np.ogrid[0:ny, 0:nx]
        radial = np.arctan2(y-cy, x-cx)
        if(clockwise):
            angle = radial - 0.5*np.pi
        else:
            angle = radial + 0.5*np.pi
        self._planes()[...] = normalize_angle(angle)

    def screen_to_grid(self, screen_x, screen_y):
        """
        Maps a screen position (pixels, y pointing down) to an (x, y) grid cell, or None if it lands outside the grid
        """
        nx, ny = self.store.grid.dimensions[0], self.store.grid.dimensions[1]
        grid_x = math.floor(screen_x/REFERENCE_WINDOW_SIZE*nx)
        grid_y = ny - 1 - math.floor(screen_y/REFERENCE_WINDOW_SIZE*ny)
        if(grid_x < 0 or grid_x >= nx or grid_y < 0 or grid_y >= ny):
            return None
        return grid_x, grid_y

    def paint(self, screen_x, screen_y, angle, radius=20., blend_factor=0.6):
        """
        Blends angle into the orientation field around a screen position

        Parameters
        ----------

        screen_x, screen_y : float
            Brush center in screen pixels, silently ignored if it maps outside the grid
        angle : float
            Target orientation, radians
        radius : float, default = 20
            Brush radius in screen pixels, clamped to BRUSH_RADIUS_RANGE
        blend_factor : float, default = 0.6
            Blend strength at the brush center, clamped to BLEND_FACTOR_RANGE. Falls off linearly to 0 at the brush edge

        Returns
        -------
        True if any cell was painted
        """
        target = self.screen_to_grid(screen_x, screen_y)
        if target is None:
            return False
        grid_x, grid_y = target
        radius = min(max(radius, BRUSH_RADIUS_RANGE[0]), BRUSH_RADIUS_RANGE[1])
        blend_factor = min(max(blend_factor, BLEND_FACTOR_RANGE[0]), BLEND_FACTOR_RANGE[1])

        nx, ny = self.store.grid.dimensions[0], self.store.grid.dimensions[1]
        grid_radius = radius*nx/REFERENCE_WINDOW_SIZE
        r = int(grid_radius) + 1
        x0, x1 = max(grid_x-r, 0), min(grid_x+r+1, nx)
        y0, y1 = max(grid_y-r, 0), min(grid_y+r+1, ny)
        y, x = np.ogrid[y0:y1, x0:x1]
        dist = np.sqrt((x-grid_x)**2 + (y-grid_y)**2)
        weight = np.where(dist <= grid_radius, blend_factor*(1. - dist/grid_radius), 0.)

        window = self._planes()[..., y0:y1, x0:x1]
        window[...] = normalize_angle(window + shortest_arc(angle - window)*weight)
        return True
