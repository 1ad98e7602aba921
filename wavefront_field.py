"""
Vector Field + Euler Integration
Host-side (numpy) evaluation and the matching Taichi device functions
"""

import taichi as ti
import numpy as np
import wavefront_config as C
from wavefront_params import ParameterSet

# =============================================================================
# Host Evaluation (numpy)
# =============================================================================

def evaluate(points, params: ParameterSet) -> np.ndarray:
    """
    Evaluate the vector field at one point or a batch of points.

    Args:
        points: array-like of shape (3,) or (N, 3), ordered (x, y, z)
        params: active ParameterSet

    Returns:
        displacement (i, j, k) with the same shape as `points`

    With shuffle = [x, y, z]:
        i = q * cos(shuffle[a3] / (shuffle[a2] + p*(shuffle[a1] + q)*π + z) * π)
        j = r * sin(shuffle[a2]*cos(π*x) / (shuffle[a2] + r*-(x + s)) * π + x)
        k = w * sin(shuffle[a1] / (shuffle[a2] + v/(shuffle[a3] - shuffle[a2] + w)) * π + shuffle[a1])

    Near-zero denominators produce inf/NaN, which are returned unchanged.
    """
    pts = np.asarray(points, dtype=np.float64)
    x, y, z = pts[..., 0], pts[..., 1], pts[..., 2]
    shuffle = (x, y, z)
    s1, s2, s3 = shuffle[params.a1], shuffle[params.a2], shuffle[params.a3]

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        i = params.q * np.cos(s3 / (s2 + params.p * (s1 + params.q) * C.PI + z) * C.PI)
        j = params.r * np.sin(s2 * np.cos(C.PI * x) / (s2 + params.r * -(x + params.s)) * C.PI + x)
        k = params.w * np.sin(s1 / (s2 + params.v / (s3 - s2 + params.w)) * C.PI + s1)

    return np.stack([i, j, k], axis=-1)


def step(points, dt: float, params: ParameterSet) -> np.ndarray:
    """
    Advance every point one explicit Euler step: x += dt * F(x).

    Returns a new (N, 3) array; count and order are preserved.
    """
    pts = np.asarray(points, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        return pts + dt * evaluate(pts, params)


# =============================================================================
# Device Evaluation (Taichi)
# =============================================================================

@ti.func
def pick_axis(x, y, z, axis):
    """shuffle[axis] for shuffle = [x, y, z]."""
    v = x
    if axis == 1:
        v = y
    elif axis == 2:
        v = z
    return v


@ti.func
def field_at(pt, a1, a2, a3,
             p, q, r, s, v, w):
    """Device twin of `evaluate` for a single point."""
    x, y, z = pt[0], pt[1], pt[2]
    s1 = pick_axis(x, y, z, a1)
    s2 = pick_axis(x, y, z, a2)
    s3 = pick_axis(x, y, z, a3)

    i = q * ti.cos(s3 / (s2 + p * (s1 + q) * C.PI + z) * C.PI)
    j = r * ti.sin(s2 * ti.cos(C.PI * x) / (s2 + r * -(x + s)) * C.PI + x)
    k = w * ti.sin(s1 / (s2 + v / (s3 - s2 + w)) * C.PI + s1)

    return ti.Vector([i, j, k])
