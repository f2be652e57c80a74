import argparse
import math
import time
from pydendrite.Engines import Kobayashi

success = '\033[92m'
warning = '\033[93m'
end_color = '\033[0m'

parser = argparse.ArgumentParser(prog="python -m pydendrite",
                                 description="Headless Kobayashi dendrite growth, optionally guided by an orientation field")
parser.add_argument("--size", type=int, default=250, help="cells along each axis (default 250)")
parser.add_argument("--rank", type=int, choices=[2, 3], default=2, help="2D or 3D grid (3D evolves the middle layer)")
parser.add_argument("--frames", type=int, default=50, help="number of frames, each is substeps_per_frame sub-steps")
parser.add_argument("--vortex", choices=["ccw", "cw"], help="use a vortex orientation field instead of a uniform one")
parser.add_argument("--paint", type=float, nargs=3, metavar=("X", "Y", "ANGLE"),
                    help="one brush stroke at screen position X, Y (800x800 window) with ANGLE in degrees")
parser.add_argument("--debug", action="store_true", help="print timings for every sub-step")
parser.add_argument("--no-plot", action="store_true", help="skip the matplotlib plots at the end")
args = parser.parse_args()

dimensions = [args.size]*args.rank
sim = Kobayashi(dimensions=dimensions)
sim.set_debug_mode_flag(args.debug)
sim.initialize_engine()

if not (args.vortex is None):
    sim.set_orientation_vortex(clockwise=(args.vortex == "cw"))
if not (args.paint is None):
    if not (sim.paint_orientation(args.paint[0], args.paint[1], math.radians(args.paint[2]))):
        print(warning+"Brush position is outside of the grid, ignoring it"+end_color)

print("Running "+"x".join(str(n) for n in dimensions)+" Kobayashi simulation for "+str(args.frames)+" frames")
t0 = time.time()
for i in range(args.frames):
    sim.step()
t1 = time.time()

phi = sim.fields[0].get_active_slice()
print(success+"Done! Took {:.3f} seconds to run ".format(t1-t0)+str(sim.get_time_step_counter())+" sub-steps"+end_color)
print("Solid fraction of the active slice: {:.4f}".format((phi > 0.5).mean()))

if not (args.no_plot):
    sim.plot_simulation()
    sim.plot_display_buffer()
sim.finish_simulation()
