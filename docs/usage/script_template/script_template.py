import numpy as np
import pydendrite.Engines as engines

sim = engines.Kobayashi(dimensions=[250, 250])

#initialize non-array parameters
sim.set_dx(0.03)
sim.set_dt(0.0001)
sim.set_time_step_counter(0)
sim.set_substeps_per_frame(10)
sim.set_boundary_conditions("PERIODIC")

data = {
    "tau":0.0003,
    "epsilon_bar":0.010,
    "K":1.6,
    "delta":0.05,
    "anisotropy":6.,
    "alpha":0.9,
    "gamma":10.,
    "T_eq":1.
}
sim.set_user_data(data)

#initialize simulation arrays, all parameter changes should be BEFORE this point!
sim.initialize_engine()

#change orientation data here, for guided growth
sim.set_orientation_vortex(clockwise=False)
sim.paint_orientation(600., 200., np.pi/4, radius=80., blend_factor=0.8)

#run simulation
for i in range(10):
    for j in range(50):
        sim.step()
    sim.plot_simulation(fields=["phi"])
