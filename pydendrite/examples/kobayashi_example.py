import sys
sys.path.insert(0,"../..")
import pydendrite.Engines as engines
import time

print("Running Kobayashi engine!")

t0 = time.time()

#########################################
# Beginning of typical pydendrite script #
#########################################

frames = 100
length = 250

sim = engines.Kobayashi(dimensions=[length, length])

#initialize non-array parameters/flags
sim.set_dx(0.03)
sim.set_dt(0.0001)
sim.set_boundary_conditions("PERIODIC")

#empty user data - default values matching those from the paper
data = {
}
sim.set_user_data(data)

#initialize simulation arrays, all parameter changes should be BEFORE this point!
sim.initialize_engine()

#plot initial condition
sim.plot_simulation(fields=["phi"])

#run simulation, 10 sub-steps per frame
for i in range(frames):
    sim.step()

#plot final condition
sim.plot_simulation()
sim.plot_display_buffer()

######################################
# End of typical pydendrite script   #
######################################

t1 = time.time()

print("Done! Took {:.3f} seconds to run ".format(t1-t0)+str(sim.get_time_step_counter())+" sub-steps for a "+str(length)+"x"+str(length)+" simulation")
