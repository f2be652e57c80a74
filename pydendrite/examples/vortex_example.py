import sys
sys.path.insert(0,"../..")
import numpy as np
import pydendrite.Engines as engines
import time

print("Running Kobayashi engine with a guiding orientation field!")

t0 = time.time()

frames = 100
length = 250

sim = engines.Kobayashi(dimensions=[length, length])
sim.set_boundary_conditions("PERIODIC")
sim.set_user_data({})
sim.initialize_engine()

#arms curl counter-clockwise around the center
sim.set_orientation_vortex(clockwise=False)

#straighten out the arms in the upper right corner of the window
sim.paint_orientation(600., 200., np.pi/4, radius=100., blend_factor=1.)

for i in range(frames):
    sim.step()
sim.plot_simulation(fields=["phi", "orientation"])

#reset keeps the pause state and geometry, brings back a uniform orientation field
sim.reset()
sim.set_orientation_vortex(clockwise=True)
for i in range(frames):
    sim.step()
sim.plot_display_buffer()

t1 = time.time()

print("Done! Took {:.3f} seconds".format(t1-t0))

length = 64
print("Running a "+str(length)+"^3 Kobayashi simulation (the middle layer is evolved)")
sim = engines.Kobayashi(dimensions=[length, length, length])
sim.set_user_data({"seed_radius":3})
sim.initialize_engine()
for i in range(frames):
    sim.step()
sim.plot_simulation(fields=["phi"])
