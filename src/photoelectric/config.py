"""
Configuration & Constants
=========================
This module serves as the central registry for physical constants, control
ranges and scene geometry.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (Planck constant, pixel offsets,
   slider limits) scattered throughout the model and the views.
2. Consistency: The model clamps inputs to the same ranges the sliders use,
   so both sides read them from here.

Exports:
    PLANCK_EV (float): Planck constant in eV·s.
    FREQUENCY_SCALE (float): Frequency unit used by the controls (10^14 Hz).
    EXPORT_FILENAME (str): Default file name for exported measurements.
"""

# Physical constants
PLANCK_EV: float = 4.136e-15  # eV·s
SPEED_OF_LIGHT: float = 3e8  # m/s
FREQUENCY_SCALE: float = 1e14  # slider unit -> Hz
NANOMETER_SCALE: float = 1e9  # m -> nm

# Control ranges (frequency in 10^14 Hz, intensity in %)
FREQUENCY_MIN: float = 3.0
FREQUENCY_MAX: float = 12.0
FREQUENCY_STEP: float = 0.1
DEFAULT_FREQUENCY: float = 6.0

INTENSITY_MIN: int = 10
INTENSITY_MAX: int = 100
INTENSITY_STEP: int = 5
DEFAULT_INTENSITY: int = 50

DEFAULT_MATERIAL: str = "Na"

# Scene geometry (px)
SCENE_WIDTH: int = 800
SCENE_HEIGHT: int = 400
CATHODE_X: int = 240

# Particle engine
EMISSION_ORIGIN_X: float = 300.0
EMISSION_ORIGIN_Y: float = 200.0
EMISSION_JITTER: float = 60.0
SPEED_FACTOR: float = 20.0  # px/frame per sqrt(eV)
VERTICAL_SPREAD: float = 0.3
PARTICLE_LIFETIME: int = 100  # frames
VISIBLE_BOUND: float = float(SCENE_WIDTH)
SPAWN_DIVISOR: float = 1000.0  # spawn probability = intensity / SPAWN_DIVISOR
MAX_PARTICLES: int = 500

# Animation
FRAME_INTERVAL_MS: int = 16  # ~60 FPS

# Measurements
NOISE_AMPLITUDE: float = 0.02  # ±2 %
EXPORT_FILENAME: str = "efecto_fotoelectrico_datos.csv"
EXPORT_MIME_TYPE: str = "text/csv"

# Kinetic energy graph (pixel frame of the 600x400 plot)
PLOT_X_ORIGIN: float = 40.0
PLOT_X_SPAN: float = 480.0
PLOT_Y_ORIGIN: float = 380.0
PLOT_PX_PER_EV: float = 30.0
