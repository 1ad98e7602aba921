"""
Visualization: Taichi GUI Window
Draws a session Frame as coloured line segments with a status overlay
"""

import numpy as np
import taichi as ti
import wavefront_config as C
from wavefront_camera import PlotStyle
from wavefront_session import (
    Command, Frame, RESET, TOGGLE_PAUSE, TOGGLE_PROJECTION,
    HISTORY_BACK, HISTORY_FORWARD,
)

# =============================================================================
# Key Bindings
# =============================================================================

KEY_COMMANDS = {
    'p': Command.change_style(PlotStyle.POINT),
    'l': Command.change_style(PlotStyle.LINE),
    'r': Command.change_style(PlotStyle.RADIAL),
    ti.ui.UP: Command.adjust_speed(+1),
    ti.ui.DOWN: Command.adjust_speed(-1),
    ti.ui.CTRL: RESET,
    ti.ui.SPACE: TOGGLE_PAUSE,
    ti.ui.TAB: TOGGLE_PROJECTION,
    ti.ui.LEFT: HISTORY_BACK,
    ti.ui.RIGHT: HISTORY_FORWARD,
}


# =============================================================================
# Viewer
# =============================================================================

class Viewer:
    """Window, input polling and line drawing for up to `n_segments` segments."""

    def __init__(self, n_segments: int, title=C.WINDOW_TITLE, res=C.WINDOW_RES):
        self.window = ti.ui.Window(title, res, vsync=C.VSYNC)
        self.canvas = self.window.get_canvas()
        self.n_segments = n_segments

        # canvas.lines consumes vertex pairs in [0, 1]^2
        self.vertices = ti.Vector.field(2, dtype=ti.f32, shape=2 * n_segments)
        self.vertex_colors = ti.Vector.field(3, dtype=ti.f32, shape=2 * n_segments)
        print(f"[VIZ] Window {res[0]}x{res[1]}, {n_segments} segments")

    @property
    def viewport(self):
        return self.window.get_window_shape()

    def poll_commands(self):
        """Translate pending key presses into Commands."""
        commands = []
        while self.window.get_event(ti.ui.PRESS):
            key = self.window.event.key
            if isinstance(key, str) and len(key) == 1:
                key = key.lower()
            command = KEY_COMMANDS.get(key)
            if command is not None:
                commands.append(command)
        return commands

    def should_close(self):
        """Check if window should close."""
        return self.window.is_pressed(ti.ui.ESCAPE) or not self.window.running

    def draw(self, frame: Frame):
        width, height = self.viewport
        m = min(len(frame.segments), self.n_segments)

        verts = np.zeros((2 * self.n_segments, 2), dtype=np.float32)
        colors = np.zeros((2 * self.n_segments, 3), dtype=np.float32)
        if m > 0:
            pts = frame.segments[:m].reshape(-1, 2)
            verts[:2 * m, 0] = pts[:, 0] / width
            verts[:2 * m, 1] = 1.0 - pts[:, 1] / height   # screen y grows downward
            colors[:2 * m] = np.repeat(frame.colors[:m], 2, axis=0)
            # Unused slots collapse onto the first vertex
            verts[2 * m:] = verts[0]

        self.vertices.from_numpy(verts)
        self.vertex_colors.from_numpy(colors)

        self.canvas.set_background_color((0.0, 0.0, 0.0))
        self.canvas.lines(self.vertices, width=frame.width / width,
                          per_vertex_color=self.vertex_colors)

        gui = self.window.get_gui()
        with gui.sub_window("Status", 0.01, 0.01, 0.6, 0.22):
            for line in frame.status:
                gui.text(line)

        self.window.show()
