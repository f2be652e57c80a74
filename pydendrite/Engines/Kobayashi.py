import numpy as np
import time
from pydendrite.simulation import Simulation
from pydendrite.derivatives import DerivativeEngine
from pydendrite.evolver import Evolver
from pydendrite.nucleation import seed_nucleus
from pydendrite.orientation import OrientationField
from pydendrite.camera import Camera
from pydendrite.dendrite_utils import COLORMAP_CRYSTAL, COLORMAP_OTHER, COLORMAP_ORIENTATION

class Kobayashi(Simulation):
    """
    Kobayashi (1993) dendritic solidification of a pure undercooled melt, with the orientation field
    of Ren et al. (2018) guiding the anisotropy

    Fields, in order: "phi" (order parameter, 0 = liquid, 1 = solid), "T" (dimensionless temperature),
    "orientation" (preferred growth direction, radians in [0, 2pi))

    user_data keys (defaults from Kobayashi's paper):
        tau = 0.0003, epsilon_bar = 0.010, K = 1.6, delta = 0.05, anisotropy = 6.,
        alpha = 0.9, gamma = 10., T_eq = 1., seed_radius = 3 (3D nucleus only)
    """
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.camera = Camera()
        self.orientation = None
        self.derivatives = None
        self.evolver = None

    def init_user_data(self):
        #missing keys only, so set_user_data() may be called at any time before a step
        self.default_value("tau", 0.0003) #relaxation time
        self.default_value("epsilon_bar", 0.010) #mean interfacial coefficient
        self.default_value("K", 1.6) #latent heat
        self.default_value("delta", 0.05) #strength of anisotropy
        self.default_value("anisotropy", 6.) #mode number, 6 = hexagonal
        self.default_value("alpha", 0.9)
        self.default_value("gamma", 10.)
        self.default_value("T_eq", 1.)
        self.default_value("seed_radius", 3)

    def init_fields(self):
        #runs on initialize_engine() and on every reset()
        self.init_user_data()
        self.add_field("phi", colormap=COLORMAP_CRYSTAL)
        self.add_field("T", colormap=COLORMAP_OTHER)
        self.add_field("orientation", colormap=COLORMAP_ORIENTATION)
        self.orientation = OrientationField(self.store)
        self.orientation.set_uniform(0.)
        seed_nucleus(self.store, radius=self.user_data["seed_radius"])
        self.derivatives = None
        self.evolver = None

    def just_before_simulating(self):
        super().just_before_simulating()
        self.init_user_data()
        self.derivatives = DerivativeEngine(self.store, self.user_data["epsilon_bar"], self.user_data["delta"],
                                            self.user_data["anisotropy"])
        self.evolver = Evolver(self.store, self.derivatives, self.user_data["tau"], self.user_data["K"],
                               self.user_data["alpha"], self.user_data["gamma"], self.user_data["T_eq"])

    def simulation_loop(self):
        if(self._debug_mode_flag):
            t0 = time.time()
            self.derivatives.compute()
            t1 = time.time()
            self.evolver.advance()
            t2 = time.time()
            print("Derivatives: {:.6f}, Evolution: {:.6f}".format(t1-t0, t2-t1))
        else:
            self.derivatives.compute()
            self.evolver.advance()

    def set_orientation_uniform(self):
        self._check_initialized()
        self.orientation.set_uniform(0.)

    def set_orientation_vortex(self, clockwise=False):
        self._check_initialized()
        self.orientation.set_vortex(clockwise=clockwise)

    def paint_orientation(self, x, y, angle, radius=20., blend_factor=0.6):
        """
        Brush stroke on the orientation field, see OrientationField.paint()

        x, y are screen pixels (origin top left) of a reference 800x800 window
        """
        self._check_initialized()
        return self.orientation.paint(x, y, angle, radius=radius, blend_factor=blend_factor)

    def rotate_camera(self, delta_x, delta_y):
        self.camera.rotate(delta_x, delta_y)

    def zoom_camera(self, delta):
        self.camera.zoom(delta)
