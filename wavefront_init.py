"""
Initialization: Seed the Wavefront on a Ring / Helix
"""

import numpy as np
import wavefront_config as C

# =============================================================================
# Ring Seeding
# =============================================================================

def seed_ring(offset=C.POINT_OFFSET, radius=C.POINT_RADIUS, count=C.POINT_COUNT):
    """
    Lay out 2*count - 1 points on a helix around the z-axis.

    For i in [1, 2*count):
        θ = offset + (i / count) * π
        point = (radius*cos θ, radius*sin θ, 2*i/count*radius - radius)

    Every point sits at `radius` from the z-axis; z ramps linearly from just
    above -radius to just below 3*radius, so the ring opens into a helix.

    Returns:
        (2*count - 1, 3) float64 array
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if not radius > 0:
        raise ValueError(f"radius must be > 0, got {radius}")

    i = np.arange(1, 2 * count, dtype=np.float64)
    theta = offset + (i / count) * C.PI

    pts = np.empty((i.size, 3), dtype=np.float64)
    pts[:, 0] = radius * np.cos(theta)
    pts[:, 1] = radius * np.sin(theta)
    pts[:, 2] = 2.0 * i / count * radius - radius
    return pts
