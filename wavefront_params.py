"""
Vector-Field Parameters: Point3, ParameterSet, ParameterGenerator
"""

from dataclasses import dataclass, astuple
from typing import NamedTuple, Optional

import numpy as np
import wavefront_config as C


class Point3(NamedTuple):
    """Named 3-component value (position or direction)."""
    x: float
    y: float
    z: float


# =============================================================================
# ParameterSet
# =============================================================================

@dataclass(frozen=True)
class ParameterSet:
    """
    One instance of the vector field.

    Fields:
        a1, a2, a3: axis selectors, indices into the shuffle [x, y, z]
        p, q, r, s, v, w, u: scalar coefficients

    `u` is drawn and displayed but not read by the field.
    """
    a1: int
    a2: int
    a3: int
    p: float
    q: float
    r: float
    s: float
    v: float
    w: float
    u: float

    def __post_init__(self):
        for name in ("a1", "a2", "a3"):
            axis = getattr(self, name)
            if isinstance(axis, bool) or not isinstance(axis, (int, np.integer)):
                raise ValueError(f"{name} must be an integer axis index, got {axis!r}")
            if not 0 <= axis < C.AXIS_COUNT:
                raise ValueError(f"{name}={axis} out of range [0, {C.AXIS_COUNT})")
            object.__setattr__(self, name, int(axis))

    @property
    def axes(self):
        return self.a1, self.a2, self.a3

    @property
    def coefficients(self):
        return astuple(self)[3:]

    def __str__(self):
        return (f"a1: {self.a1}, a2: {self.a2}, a3: {self.a3}, "
                f"p: {self.p:.3f}, q: {self.q:.3f}, r: {self.r:.3f}, "
                f"s: {self.s:.3f}, v: {self.v:.3f}, w: {self.w:.3f}, "
                f"u: {self.u:.3f}")


# =============================================================================
# Random Generation
# =============================================================================

class ParameterGenerator:
    """
    Draws random ParameterSets.

    Axis selectors are uniform over {0, .., AXIS_COUNT-1}; coefficients are
    uniform over [PARAM_MIN, PARAM_MAX). Pass `seed` (or an existing numpy
    Generator as `rng`) for reproducible sequences.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self) -> ParameterSet:
        axes = self.rng.integers(0, C.AXIS_COUNT, size=3)
        coeffs = self.rng.uniform(C.PARAM_MIN, C.PARAM_MAX, size=7)
        return ParameterSet(*(int(a) for a in axes), *(float(c) for c in coeffs))
