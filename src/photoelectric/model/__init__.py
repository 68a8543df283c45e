"""
The MODEL layer contains pure data structures and simulation logic.
It has NO knowledge of the GUI (Qt).
It deals with Physics, Particles and Measurements.
"""
