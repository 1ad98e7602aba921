"""
Main Loop: Input -> Update -> Render
"""

import time
import wavefront_config as C

# =============================================================================
# Frame Loop
# =============================================================================

def run_loop(session, viewer, max_frames=None, update_dt=C.UPDATE_DT):
    """
    Alternate update and render until the window closes.

    Args:
        session: Session being animated
        viewer: presenter exposing poll_commands / should_close / draw / viewport
        max_frames: stop after this many frames (None = until closed)
        update_dt: interval fed to the simulation clock each update

    Returns:
        number of frames rendered
    """
    frame = 0
    prev_time = time.time()

    while max_frames is None or frame < max_frames:
        if viewer.should_close():
            print(f"[LOOP] Window closed at frame {frame}")
            break

        for command in viewer.poll_commands():
            session.apply(command)

        session.update(update_dt)

        # Frame rate from wall-clock interval between renders
        now = time.time()
        elapsed = now - prev_time
        prev_time = now
        fps = 1.0 / elapsed if elapsed > 0 else 0.0

        viewer.draw(session.render(fps, viewer.viewport))
        frame += 1

    return frame
