"""
Simulation Session: owned state, operator commands, update/render steps
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np
import wavefront_config as C
from wavefront_camera import Camera, PlotStyle, build_segments
from wavefront_clock import SimulationClock
from wavefront_history import ParameterHistory
from wavefront_params import ParameterGenerator, ParameterSet
from wavefront_state import WavefrontState

CONTROLS_TEXT = ("Ctrl: Reset,  Space: Pause Time,  Right: Next Params,  "
                 "Left: Prev Params,  Down/Up: Simulation Speed,  "
                 "Tab: Projection,  P/L/R: Plot Style")

# =============================================================================
# Commands
# =============================================================================

class CommandKind(Enum):
    CHANGE_STYLE = "ChangeStyle"
    ADJUST_SPEED = "AdjustSpeed"
    RESET = "Reset"
    TOGGLE_PAUSE = "TogglePause"
    TOGGLE_PROJECTION = "ToggleProjection"
    HISTORY_BACK = "HistoryBack"
    HISTORY_FORWARD = "HistoryForward"


@dataclass(frozen=True)
class Command:
    """
    One operator command, independent of the input device.

    `style` is read by CHANGE_STYLE, `direction` (+1 / -1) by ADJUST_SPEED.
    """
    kind: CommandKind
    style: Optional[PlotStyle] = None
    direction: int = 0

    @classmethod
    def change_style(cls, style: PlotStyle) -> "Command":
        return cls(CommandKind.CHANGE_STYLE, style=style)

    @classmethod
    def adjust_speed(cls, direction: int) -> "Command":
        return cls(CommandKind.ADJUST_SPEED, direction=1 if direction > 0 else -1)


RESET = Command(CommandKind.RESET)
TOGGLE_PAUSE = Command(CommandKind.TOGGLE_PAUSE)
TOGGLE_PROJECTION = Command(CommandKind.TOGGLE_PROJECTION)
HISTORY_BACK = Command(CommandKind.HISTORY_BACK)
HISTORY_FORWARD = Command(CommandKind.HISTORY_FORWARD)


# =============================================================================
# Frame Output
# =============================================================================

@dataclass
class Frame:
    """Everything the presenter needs to draw one frame."""
    segments: np.ndarray                  # (M, 2, 2) screen-space start/end
    colors: np.ndarray                    # (M, 3) RGB in [0, 1]
    width: float
    status: Tuple[str, ...] = field(default_factory=tuple)


# =============================================================================
# Session
# =============================================================================

class Session:
    """
    The single running simulation.

    Owns the parameter history, clock, camera and wavefront. The frame loop
    calls `update` and `render` in strict alternation; commands are applied
    between them.
    """

    def __init__(self, generator: Optional[ParameterGenerator] = None,
                 params: Optional[ParameterSet] = None,
                 count=C.POINT_COUNT, style=PlotStyle.POINT):
        self.history = ParameterHistory(generator or ParameterGenerator(), params)
        self.clock = SimulationClock()
        self.camera = Camera()
        self.wavefront = WavefrontState(count=count)
        self.plot_style = style
        self.draw_width = C.DRAW_WIDTH
        print(f"[SESSION] {len(self.wavefront)} points, params: {self.params}")

    @property
    def params(self) -> ParameterSet:
        return self.history.active

    # -------------------------------------------------------------------------
    # Frame steps
    # -------------------------------------------------------------------------

    def update(self, frame_dt: float):
        """Tick the clock, orbit the camera, integrate one step."""
        dt = self.clock.tick(frame_dt)
        self.camera.update(self.clock.elapsed)
        self.wavefront.advance(dt, self.params)

    def render(self, fps: float, viewport) -> Frame:
        """Project the wavefront into a Frame, then roll current into previous."""
        segments, colors = build_segments(self.plot_style, self.camera, viewport,
                                          self.wavefront.current(),
                                          self.wavefront.previous())
        self.wavefront.commit()
        return Frame(segments, colors, self.draw_width, self.status(fps))

    def status(self, fps: float) -> Tuple[str, ...]:
        return (
            f"fps : {fps:.2f}",
            str(self.params),
            f"Camera: {self.camera.projection.value}",
            f"Sim Speed: {self.clock.speed:.3f}",
            CONTROLS_TEXT,
        )

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def reset(self):
        self.clock.reset()
        self.wavefront.reset()

    def apply(self, command: Command):
        kind = command.kind
        if kind is CommandKind.CHANGE_STYLE:
            if not isinstance(command.style, PlotStyle):
                raise ValueError(f"ChangeStyle needs a PlotStyle, got {command.style!r}")
            self.plot_style = command.style
        elif kind is CommandKind.ADJUST_SPEED:
            self.clock.adjust_speed(command.direction * C.SIM_SPEED_STEP)
        elif kind is CommandKind.RESET:
            self.reset()
        elif kind is CommandKind.TOGGLE_PAUSE:
            self.clock.toggle_pause()
            print(f"[SESSION] {'PAUSED' if self.clock.paused else 'RESUMED'}")
        elif kind is CommandKind.TOGGLE_PROJECTION:
            self.camera.toggle_projection()
        elif kind is CommandKind.HISTORY_BACK:
            if self.history.navigate_back():
                self.reset()
        elif kind is CommandKind.HISTORY_FORWARD:
            self.history.navigate_forward()
            self.reset()
        else:
            raise ValueError(f"Unknown command: {command!r}")
