"""
Configuration for the Wavefront Vector-Field Animation

All tunables, caps, and constants in one place.
"""

import taichi as ti
import math

# =============================================================================
# Architecture & Platform
# =============================================================================
ARCH = ti.cpu     # metal has no f64 support
FLOAT = ti.f64    # point positions are double precision

# =============================================================================
# Wavefront Seeding (ring / helix layout)
# =============================================================================
POINT_OFFSET = 0.0   # starting angle of the ring (radians)
POINT_RADIUS = 1.0   # ring radius in the xy-plane
POINT_COUNT = 100    # half-turn resolution; 2*POINT_COUNT - 1 points total

# =============================================================================
# Vector-Field Parameters
# =============================================================================
# Axis selectors index into the shuffle [x, y, z]
AXIS_COUNT = 3
PARAM_MIN = -1.0     # coefficient lower bound
PARAM_MAX = 1.0      # coefficient upper bound

# =============================================================================
# Simulation Clock
# =============================================================================
TIME_STEP = 1.0            # elapsed increment per update tick
TIME_MAX = 100.0           # phase period for the sinusoidal step size
DEFAULT_SIM_SPEED = 15.0   # speed restored when unpausing from zero
SIM_SPEED_STEP = 0.1       # +/- per AdjustSpeed command
PAUSE_EPS = 0.001          # |speed| below this counts as paused

# =============================================================================
# Camera
# =============================================================================
CAMERA_POS = (0.0, 0.0, -10.0)
CAMERA_DIR = (0.0, 0.0, 1.0)
CAMERA_UP = (0.0, 1.0, 0.0)
CAMERA_SCALE = 50.0        # world units -> pixels

# Orbit (perspective mode only)
ORBIT_RADIUS = 10.0
ORBIT_RATE = 0.004         # radians per elapsed tick
ORBIT_HEIGHT = 0.5

# =============================================================================
# Presentation
# =============================================================================
DRAW_WIDTH = 1.0           # line width in pixels
HUE_SATURATION = 0.8
HUE_VALUE = 1.0

# =============================================================================
# Window
# =============================================================================
WINDOW_TITLE = "Wavefront"
WINDOW_RES = (800, 600)
VSYNC = True
UPDATE_DT = 1.0 / 60.0     # fixed update interval fed to the clock

# =============================================================================
# Derived Constants (computed at runtime)
# =============================================================================
PI = math.pi
WAVEFRONT_SIZE = 2 * POINT_COUNT - 1
