"""Project constants and default tuning values.

Forces and speeds are expressed per nominal frame (1/60 s); the simulation
rescales them when the host reports a different elapsed time.
"""

# Version
__version__ = "0.1.0"

# Timing
NOMINAL_DT = 1.0 / 60.0  # seconds
MAX_FRAME_SCALE = 4.0  # caps catch-up after a long pause

# Forces
MOUSE_ATTRACTION = 0.0001
BUBBLE_REPULSION = 0.5
AMBIENT_LIFT = 0.02
FRICTION = 0.98
RESTITUTION = 0.8

# Bubble geometry
BASE_RADIUS_RANGE = (40.0, 80.0)
MIN_RADIUS = 10.0
INITIAL_SPEED = 1.0
MASS_PER_RADIUS = 0.1
MIN_MASS = 2.0  # keeps repulsion stable when intensity drops to 0

# Radius animation
SPRING_STIFFNESS = 0.05
PULSE_INCREMENT = 0.02  # radians per frame
PULSE_AMPLITUDE = 0.05
HOVER_GROWTH = 1.1
EXPAND_GROWTH = 1.3

# Ambient particles
AMBIENT_COUNT = 50
AMBIENT_SPEED = 0.5
AMBIENT_SIZE_RANGE = (2.0, 4.0)
AMBIENT_ALPHA_RANGE = (20.0, 60.0)
PARTICLE_DECAY = 0.995
LIFESPAN_EPSILON = 0.01

# Burst particles
BURST_COUNT = 20
BURST_SPEED_RANGE = (2.0, 5.0)
BURST_SIZE_RANGE = (3.0, 6.0)
BURST_ALPHA = 100.0

# Connection links between nearby bubbles
CONNECTION_DISTANCE = 150.0
CONNECTION_MAX_ALPHA = 50.0

__all__ = [
    "__version__",
    "NOMINAL_DT",
    "MAX_FRAME_SCALE",
    "MOUSE_ATTRACTION",
    "BUBBLE_REPULSION",
    "AMBIENT_LIFT",
    "FRICTION",
    "RESTITUTION",
    "BASE_RADIUS_RANGE",
    "MIN_RADIUS",
    "INITIAL_SPEED",
    "MASS_PER_RADIUS",
    "MIN_MASS",
    "SPRING_STIFFNESS",
    "PULSE_INCREMENT",
    "PULSE_AMPLITUDE",
    "HOVER_GROWTH",
    "EXPAND_GROWTH",
    "AMBIENT_COUNT",
    "AMBIENT_SPEED",
    "AMBIENT_SIZE_RANGE",
    "AMBIENT_ALPHA_RANGE",
    "PARTICLE_DECAY",
    "LIFESPAN_EPSILON",
    "BURST_COUNT",
    "BURST_SPEED_RANGE",
    "BURST_SIZE_RANGE",
    "BURST_ALPHA",
    "CONNECTION_DISTANCE",
    "CONNECTION_MAX_ALPHA",
]
