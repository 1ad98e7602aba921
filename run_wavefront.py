"""
Main Entry Point: Wavefront Vector-Field Animation
Browse random field parameterisations while the wavefront moves
"""

import argparse

import taichi as ti
import wavefront_config as C
import wavefront_state as state
from wavefront_loop import run_loop
from wavefront_params import ParameterGenerator
from wavefront_session import Session
from wavefront_viz import Viewer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Animate a point wavefront through a random 3D vector field.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the parameter generator")
    parser.add_argument("--count", type=int, default=C.POINT_COUNT,
                        help="ring resolution (2*count - 1 points)")
    parser.add_argument("--arch", choices=("cpu", "gpu", "cuda", "vulkan"), default=None,
                        help="Taichi backend (default from config)")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point.

    Steps:
        1. Initialize Taichi
        2. Build the session (first parameter set + seeded wavefront)
        3. Run the frame loop until the window closes
    """
    args = parse_args(argv)

    print("\n" + "="*60)
    print("Wavefront Vector-Field Animation")
    print("="*60 + "\n")

    state.init_backend(getattr(ti, args.arch) if args.arch else None)

    session = Session(ParameterGenerator(seed=args.seed), count=args.count)
    viewer = Viewer(n_segments=len(session.wavefront))
    frames = run_loop(session, viewer, max_frames=args.frames)

    print(f"\nDone. {frames} frames.")


if __name__ == "__main__":
    main()
