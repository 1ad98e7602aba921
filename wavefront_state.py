"""
State buffers for the Wavefront Animation
Current and previous point positions held in Taichi fields
"""

import taichi as ti
import numpy as np
import wavefront_config as C
import wavefront_field as field
from wavefront_init import seed_ring
from wavefront_params import ParameterSet

# =============================================================================
# Initialize Taichi
# =============================================================================

def init_backend(arch=None):
    """Initialize Taichi. Must run once before any WavefrontState is built."""
    arch = C.ARCH if arch is None else arch
    ti.init(arch=arch, default_fp=C.FLOAT)
    print(f"[INIT] Taichi backend ready (arch={arch}, fp={C.FLOAT})")


# =============================================================================
# Wavefront State
# =============================================================================

@ti.data_oriented
class WavefrontState:
    """
    Owns the wavefront on the device.

    `pos` holds the current positions and `pos_prev` the positions at the
    previous render; index i in one corresponds to index i in the other.
    """

    def __init__(self, offset=C.POINT_OFFSET, radius=C.POINT_RADIUS, count=C.POINT_COUNT):
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        self.offset = offset
        self.radius = radius
        self.count = count
        self.n = 2 * count - 1

        self.pos = ti.Vector.field(3, dtype=C.FLOAT, shape=self.n)       # current
        self.pos_prev = ti.Vector.field(3, dtype=C.FLOAT, shape=self.n)  # at last render

        self.reset()

    def __len__(self):
        return self.n

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def reset(self):
        """Re-seed the ring; previous == current so the first frame has zero-length segments."""
        pts = seed_ring(self.offset, self.radius, self.count)
        self.pos.from_numpy(pts)
        self.pos_prev.from_numpy(pts)

    def commit(self):
        """Mark the current positions as the previous frame."""
        self._copy_to_prev()

    # -------------------------------------------------------------------------
    # Integration
    # -------------------------------------------------------------------------

    def advance(self, dt: float, params: ParameterSet):
        """One explicit Euler step of every point on the device."""
        self._advance(dt, params.a1, params.a2, params.a3,
                      params.p, params.q, params.r, params.s, params.v, params.w)

    @ti.kernel
    def _advance(self, dt: C.FLOAT, a1: ti.i32, a2: ti.i32, a3: ti.i32,
                 p: C.FLOAT, q: C.FLOAT, r: C.FLOAT, s: C.FLOAT,
                 v: C.FLOAT, w: C.FLOAT):
        for i in self.pos:
            self.pos[i] += dt * field.field_at(self.pos[i], a1, a2, a3, p, q, r, s, v, w)

    @ti.kernel
    def _copy_to_prev(self):
        for i in self.pos:
            self.pos_prev[i] = self.pos[i]

    # -------------------------------------------------------------------------
    # Host access
    # -------------------------------------------------------------------------

    def current(self) -> np.ndarray:
        return self.pos.to_numpy()

    def previous(self) -> np.ndarray:
        return self.pos_prev.to_numpy()

    def load(self, points):
        """Replace both buffers with host positions (shape (n, 3))."""
        pts = np.asarray(points, dtype=np.float64)
        if pts.shape != (self.n, 3):
            raise ValueError(f"expected shape {(self.n, 3)}, got {pts.shape}")
        self.pos.from_numpy(pts)
        self.pos_prev.from_numpy(pts)
