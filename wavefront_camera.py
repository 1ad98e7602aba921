"""
Camera & Projection: 3D wavefront -> 2D draw coordinates
Orthographic / orbiting perspective view, hue colours, plot styles
"""

import colorsys
import math
from enum import Enum

import numpy as np
import wavefront_config as C
from wavefront_params import Point3

# =============================================================================
# Modes
# =============================================================================

class Projection(Enum):
    ORTHOGRAPHIC = "Orthographic"
    PERSPECTIVE = "Perspective"


class PlotStyle(Enum):
    POINT = "Point"     # current -> previous position (velocity trail)
    LINE = "Line"       # current -> neighbour i-1
    RADIAL = "Radial"   # current -> world origin


# =============================================================================
# View Matrix
# =============================================================================

def look_at(eye, center, up) -> np.ndarray:
    """Right-handed 4x4 view matrix looking from `eye` toward `center`."""
    eye = np.asarray(eye, dtype=np.float64)
    center = np.asarray(center, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    f = center - eye
    f = f / np.linalg.norm(f)
    s = np.cross(f, up)
    s = s / np.linalg.norm(s)
    u = np.cross(s, f)

    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[:3, 3] = -np.array([np.dot(s, eye), np.dot(u, eye), np.dot(-f, eye)])
    return m


# =============================================================================
# Camera
# =============================================================================

class Camera:
    """
    Viewpoint, scale and projection mode.

    In PERSPECTIVE mode the position orbits the origin as a function of
    elapsed simulation time (see `update`) and always looks at the origin.
    """

    def __init__(self, position=C.CAMERA_POS, look_direction=C.CAMERA_DIR,
                 scale=C.CAMERA_SCALE, projection=Projection.ORTHOGRAPHIC):
        if not scale > 0:
            raise ValueError(f"scale must be > 0, got {scale}")
        self.position = Point3(*position)
        self.look_direction = Point3(*look_direction)
        self.scale = scale
        self.projection = projection

    def toggle_projection(self):
        if self.projection is Projection.ORTHOGRAPHIC:
            self.projection = Projection.PERSPECTIVE
        else:
            self.projection = Projection.ORTHOGRAPHIC

    def update(self, elapsed: float):
        """Orbit: position = (r cos θ, h, r sin θ), θ = ORBIT_RATE * elapsed."""
        if self.projection is not Projection.PERSPECTIVE:
            return
        theta = C.ORBIT_RATE * elapsed
        self.position = Point3(C.ORBIT_RADIUS * math.cos(theta),
                               C.ORBIT_HEIGHT,
                               C.ORBIT_RADIUS * math.sin(theta))
        d = -np.asarray(self.position)
        self.look_direction = Point3(*(d / np.linalg.norm(d)))

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, (0.0, 0.0, 0.0), C.CAMERA_UP)

    def project(self, points) -> np.ndarray:
        """(N, 3) world points -> (N, 2) camera-plane coordinates."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if self.projection is Projection.ORTHOGRAPHIC:
            return pts[:, :2].copy()

        homo = np.hstack([pts, np.ones((len(pts), 1))])
        with np.errstate(invalid="ignore", over="ignore"):
            view = homo @ self.view_matrix().T
        return view[:, :2]

    def to_screen(self, points, viewport) -> np.ndarray:
        """screen = viewport_center + projected_xy * scale."""
        width, height = viewport
        center = np.array([width / 2.0, height / 2.0])
        with np.errstate(invalid="ignore", over="ignore"):
            return center + self.project(points) * self.scale


# =============================================================================
# Colours
# =============================================================================

def hue_colors(n: int) -> np.ndarray:
    """One full hue cycle across n points, fixed saturation/value. (n, 3) RGB in [0, 1]."""
    return np.array([colorsys.hsv_to_rgb(i / n, C.HUE_SATURATION, C.HUE_VALUE)
                     for i in range(n)], dtype=np.float64).reshape(n, 3)


# =============================================================================
# Segments
# =============================================================================

def build_segments(style: PlotStyle, camera: Camera, viewport, current, previous):
    """
    Build the screen-space segment list for one frame.

    Args:
        style: PlotStyle
        camera: Camera used for projection
        viewport: (width, height) in pixels
        current, previous: (N, 3) wavefront positions, index-aligned

    Returns:
        segments: (M, 2, 2) start/end screen points
        colors: (M, 3) RGB per segment
    """
    current = np.asarray(current, dtype=np.float64)
    n = len(current)
    colors = hue_colors(n)
    start = camera.to_screen(current, viewport)

    if style is PlotStyle.POINT:
        end = camera.to_screen(previous, viewport)
    elif style is PlotStyle.LINE:
        start, end, colors = start[1:], start[:-1], colors[1:]
    elif style is PlotStyle.RADIAL:
        end = np.repeat(camera.to_screen(np.zeros((1, 3)), viewport), n, axis=0)
    else:
        raise ValueError(f"Unknown plot style: {style}")

    return np.stack([start, end], axis=1), colors
