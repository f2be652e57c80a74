import numpy as np
from matplotlib import pyplot as plt
import time
from .fieldstore import Grid, FieldStore, PERIODIC, NEUMANN
from . import dendrite_utils

class Simulation:
    """
    Class used by pydendrite to store data related to a given simulation, and to drive it frame by frame

    Subclass engines fill in init_fields(), just_before_simulating() and simulation_loop()

    Attributes
    ----------

    dimensions : list of int
        defines the length, width (and possibly depth) of the simulation, x first: [Nx, Ny] or [Nx, Ny, Nz]
    dx : float or list of float
        the cell spacing, either one value for every dimension or one value per dimension
    dt : float
        the length of one sub-step
    time_step_counter : int, default = 0
        number of sub-steps simulated since initialization (or the last reset)
    substeps_per_frame : int, default = 10
        number of sub-steps run by every call to step(). Keeps visible growth speed independent of the frame rate,
        it is NOT derived from dt
    grid : Grid
        immutable geometry, built by initialize_engine()
    store : FieldStore
        owner of every per-cell array, built by initialize_engine() and rebuilt by reset()
    display_buffer : ndarray of uint8, shape (Ny, Nx, 4)
        RGBA image of the first field (phase by convention) on the active slice, republished after every
        unpaused step() and after reset(). External renderers should read this instead of the raw fields
    user_data : dict
        Arbitrary dictionary of parameters for the specific subclass engine

    for reference, private attributes are included below

    _boundary_conditions_type : str
        PERIODIC or NEUMANN. If None when the engine is initialized, 2D simulations use PERIODIC and 3D use NEUMANN
    _paused : Bool
        if True, step() does nothing
    _begun_simulation : Bool
        False until just_before_simulating() has run for the current set of fields
    _requires_initialization : Bool
        True until initialize_engine() has been called, and again after finish_simulation()
    _debug_mode_flag : Bool
        if True, step() prints timing information for every sub-step
    """
    DEFAULT_CELL_SPACING = 0.03
    DEFAULT_TIME_STEP = 0.0001
    DEFAULT_SUBSTEPS_PER_FRAME = 10

    def __init__(self, dimensions, dx=None, dt=None, initial_time_step=0, boundary_conditions=None,
                 substeps_per_frame=None, user_data=None):
        self.dimensions = list(dimensions)
        self.dx = dx
        self.dt = dt
        self.time_step_counter = initial_time_step
        self.substeps_per_frame = substeps_per_frame
        self._boundary_conditions_type = boundary_conditions

        self.grid = None
        self.store = None
        self.display_buffer = None

        self._paused = False
        self._begun_simulation = False
        self._requires_initialization = True
        self._debug_mode_flag = False

        if user_data is None:
            user_data = {}
        self.user_data = user_data

    def initialize_engine(self):
        """
        Function to initialize the simulation. Called after class attributes are set.

        Notes
        -----

        Builds (and validates) the Grid, allocates the FieldStore, then calls init_fields() so that the subclass
            can create and seed its fields. Geometry can not be changed afterwards.
        Raises ValueError if the geometry is invalid (non-positive dimensions, spacing or time step, unknown
            boundary conditions)
        """
        if(self.dx is None):
            self.dx = self.DEFAULT_CELL_SPACING
        if(self.dt is None):
            self.dt = self.DEFAULT_TIME_STEP
        if(self.substeps_per_frame is None):
            self.substeps_per_frame = self.DEFAULT_SUBSTEPS_PER_FRAME
        if(self._boundary_conditions_type is None):
            if(len(self.dimensions) == 3):
                self._boundary_conditions_type = NEUMANN
            else:
                self._boundary_conditions_type = PERIODIC
        spacing = self.dx
        if(np.isscalar(spacing)):
            spacing = [spacing]*len(self.dimensions)
        self.grid = Grid(dimensions=tuple(self.dimensions), spacing=tuple(spacing), dt=self.dt,
                         boundary_conditions=self._boundary_conditions_type)
        self._requires_initialization = False
        self._allocate_fields()

    def _allocate_fields(self):
        self.store = FieldStore(self.grid)
        self._begun_simulation = False
        self.init_fields()
        shape = self.grid.shape[-2:]
        self.display_buffer = np.zeros(shape+(4,), dtype=np.uint8)
        self.publish_display_buffer()

    def init_fields(self):
        """
        Creates and seeds the Fields of the simulation. Override this in the subclass!

        Runs every time the fields are (re)allocated: on initialize_engine() and on reset()
        """
        pass

    def just_before_simulating(self):
        """
        Runs once before the first sub-step after the fields were (re)allocated.
        Override in the subclass (calling super().just_before_simulating() first) to build helper objects bound to the fields
        """
        pass

    def simulation_loop(self):
        """
        This function will run once every sub-step. Override this in the subclass to put simulation code here!
        """
        pass

    def add_field(self, array_name, colormap="GnBu"):
        """
        Creates a zero-filled Field and adds it to the Simulation instance

        Parameters
        ----------

        array_name : str
            A string naming the field, used to look it up and for plotting graphs of the field
        colormap : Matplotlib colormap, str, etc.. Default = "GnBu"
            The colormap used for plotting the field. Defaults to a green blue sequential colormap

        Returns
        -------
        The new Field
        """
        return self.store.add_field(array_name, colormap=colormap)

    @property
    def fields(self):
        """List of the Fields, in the order they were added (phase first, by convention)"""
        if(self.store is None):
            return []
        return list(self.store.fields.values())

    def default_value(self, key, value):
        """
        One line helper function for setting default values in the user_data for a subclass

        If the value is already defined, this does nothing, otherwise sets the value of the corresponding key to a default value

        Parameters
        ----------

        key : str
            Name of the key in the user_data dictionary
        value : any
            Arbitrary value to be used as the default value of the previously specified key
        """
        if not (key in self.user_data):
            self.user_data[key] = value

    def _check_initialized(self):
        if(self._requires_initialization):
            raise RuntimeError("Simulation must be initialized with initialize_engine() first!")

    def simulate(self, number_of_timesteps):
        """
        Evolves the simulation for a specified number of sub-steps, regardless of the pause state

        Parameters
        ----------

        number_of_timesteps : int
        """
        self._check_initialized()
        if(self._begun_simulation == False):
            self._begun_simulation = True
            self.just_before_simulating()
        for i in range(number_of_timesteps):
            self._increment_time_step_counter()
            self.simulation_loop()

    def simulate_debug(self, number_of_timesteps):
        """
        Evolves the simulation for a specified number of sub-steps. Prints timing information
        """
        self._check_initialized()
        if(self._begun_simulation == False):
            t0 = time.time()
            self._begun_simulation = True
            self.just_before_simulating()
            t1 = time.time()
            print("Initialization time: {:.6f}".format(t1-t0))
        for i in range(number_of_timesteps):
            self._increment_time_step_counter()
            t0 = time.time()
            self.simulation_loop()
            t1 = time.time()
            print("Step: {}, Sim: {:.6f}".format(self.time_step_counter, t1-t0))

    def step(self):
        """
        Advances one external frame: substeps_per_frame sub-steps, then republishes the display buffer

        Does nothing at all while paused

        Returns
        -------
        True if the simulation advanced
        """
        self._check_initialized()
        if(self._paused):
            return False
        if(self._debug_mode_flag):
            self.simulate_debug(self.substeps_per_frame)
        else:
            self.simulate(self.substeps_per_frame)
        self.publish_display_buffer()
        return True

    def reset(self):
        """
        Reallocates every field and lets the subclass seed them again. Geometry and pause state are kept
        """
        self._check_initialized()
        self.time_step_counter = 0
        self._allocate_fields()

    def toggle_pause(self):
        self._paused = not self._paused
        return self._paused

    def is_paused(self):
        return self._paused

    def publish_display_buffer(self):
        fields = self.fields
        if(len(fields) == 0):
            return
        dendrite_utils.phi_to_rgba(fields[0].get_active_slice(), out=self.display_buffer)

    def finish_simulation(self):
        """
        Releases every array. initialize_engine() must be called again before the simulation can be used
        """
        self.store = None
        self.display_buffer = None
        self._begun_simulation = False
        self._requires_initialization = True

    def plot_simulation(self, fields=None, interpolation="nearest", save_path=None, show_images=True, size=None):
        """
        Plots images of the active slice of certain fields of the simulation

        Parameters
        ----------

        fields : list of int or str, optional
            Plot the fields corresponding to the indices (or names) in this list. If unspecified, plot all fields
        interpolation : str, default = "nearest"
            Matplotlib string corresponding to an interpolation scheme. Other options are "bicubic", "bilinear", etc.
        save_path : str, optional
            If defined, save each image as a .png in this folder
        show_images : Bool, default = True
            If true, plot images inline (jupyter notebook!)
        size : list of int, optional
            If defined, plot images of the defined size (matplotlib convention, inches)
        """
        self._check_initialized()
        _fields = self.fields
        if fields is None:
            fields = range(len(_fields))
        for i in fields:
            if(isinstance(i, str)):
                f = self.store[i]
            else:
                f = _fields[i]
            if not (size is None):
                plt.figure(figsize=size)
            plt.imshow(f.get_active_slice(), interpolation=interpolation, cmap=f.colormap, origin="lower")
            plt.title(f.name)
            plt.colorbar()
            if not (save_path is None):
                plt.savefig(save_path+"/"+f.name+"_"+str(self.get_time_step_counter())+".png")
            if(show_images):
                plt.show()
            else:
                plt.close()

    def plot_display_buffer(self, show_images=True, size=None):
        """Shows the published RGBA display buffer, y axis pointing up"""
        self._check_initialized()
        if not (size is None):
            plt.figure(figsize=size)
        plt.imshow(self.display_buffer, origin="lower")
        plt.title("step "+str(self.get_time_step_counter()))
        if(show_images):
            plt.show()
        else:
            plt.close()

    def _check_geometry_mutable(self):
        if not (self._requires_initialization):
            raise RuntimeError("Grid geometry is fixed once the engine is initialized!")

    def set_dimensions(self, dimensions):
        self._check_geometry_mutable()
        self.dimensions = list(dimensions)
    def get_dimensions(self):
        return self.dimensions

    def set_dx(self, dx):
        self._check_geometry_mutable()
        self.dx = dx
    def set_cell_spacing(self, dx):
        """See set_dx()"""
        self.set_dx(dx)
    def get_dx(self):
        return self.dx
    def get_cell_spacing(self):
        """See get_dx()"""
        return self.dx

    def set_dt(self, dt):
        self._check_geometry_mutable()
        self.dt = dt
    def set_time_step_length(self, dt):
        """See set_dt()"""
        self.set_dt(dt)
    def get_dt(self):
        return self.dt
    def get_time_step_length(self):
        """See get_dt()"""
        return self.dt

    def set_time_step_counter(self, time_step_counter):
        self.time_step_counter = time_step_counter
    def get_time_step_counter(self):
        return self.time_step_counter
    def _increment_time_step_counter(self):
        self.time_step_counter += 1

    def set_substeps_per_frame(self, substeps_per_frame):
        self.substeps_per_frame = substeps_per_frame

    def set_boundary_conditions(self, boundary_conditions_type):
        """
        Sets the boundary conditions, "PERIODIC" (wrap-around) or "NEUMANN" (zero flux), used in every dimension
        """
        self._check_geometry_mutable()
        self._boundary_conditions_type = boundary_conditions_type
    def get_boundary_conditions(self):
        return self._boundary_conditions_type

    def set_user_data(self, data):
        """
        Replaces user_data. After initialization the engine is rebuilt from the new values before the next sub-step
        """
        self.user_data = data
        self._begun_simulation = False

    def set_debug_mode_flag(self, debug_mode_flag):
        self._debug_mode_flag = debug_mode_flag
        return
