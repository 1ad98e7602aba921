"""
Simulation Clock: elapsed ticks, speed control, and step size
"""

import math
import wavefront_config as C


class SimulationClock:
    """
    Tracks elapsed simulation time and the signed speed control.

    `elapsed` grows by TIME_STEP per tick whatever the speed; speed only
    scales the motion step handed to the integrator:

        dt = speed * frame_dt * sin(elapsed / max_phase)
    """

    def __init__(self, max_phase=C.TIME_MAX, speed=C.DEFAULT_SIM_SPEED):
        if not max_phase > 0:
            raise ValueError(f"max_phase must be > 0, got {max_phase}")
        self.max_phase = max_phase
        self.elapsed = 0.0
        self.speed = speed
        self.speed_buffer = C.DEFAULT_SIM_SPEED

    def tick(self, frame_dt: float) -> float:
        """Advance one tick and return the motion step size."""
        self.elapsed += C.TIME_STEP
        return self.speed * frame_dt * math.sin(self.elapsed / self.max_phase)

    def reset(self):
        self.elapsed = 0.0

    def adjust_speed(self, delta: float):
        self.speed += delta

    @property
    def paused(self) -> bool:
        return abs(self.speed) <= C.PAUSE_EPS

    def toggle_pause(self):
        """Store and zero a running speed, or restore the stored one."""
        if not self.paused:
            self.speed_buffer = self.speed
            self.speed = 0.0
        elif abs(self.speed_buffer) > C.PAUSE_EPS:
            self.speed = self.speed_buffer
        else:
            self.speed = C.DEFAULT_SIM_SPEED
