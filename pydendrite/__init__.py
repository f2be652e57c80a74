from .field import Field
from .fieldstore import Grid, FieldStore, PERIODIC, NEUMANN
from .simulation import Simulation
from .dendrite_utils import *
