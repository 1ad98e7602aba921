"""
Parameter History: back/forward navigation over ParameterSets
"""

from typing import List

from wavefront_params import ParameterGenerator, ParameterSet


class ParameterHistory:
    """
    Two unbounded stacks around one active ParameterSet.

    The active set is never stored in either stack. Moving back pops `back`
    and pushes the old active onto `forward`; moving forward does the
    reverse, drawing a fresh set from the generator when `forward` is empty.
    """

    def __init__(self, generator: ParameterGenerator, active: ParameterSet = None):
        self.generator = generator
        self.active = active if active is not None else generator.generate()
        self.back: List[ParameterSet] = []
        self.forward: List[ParameterSet] = []

    def navigate_back(self) -> bool:
        """Returns False (and changes nothing) when there is no older set."""
        if not self.back:
            return False
        self.forward.append(self.active)
        self.active = self.back.pop()
        print(f"[HISTORY] Back  -> {self.active} (back={len(self.back)}, forward={len(self.forward)})")
        return True

    def navigate_forward(self) -> bool:
        """
        Step to the next set. Returns True when it was generated rather than
        redone from the forward stack.
        """
        self.back.append(self.active)
        if self.forward:
            self.active = self.forward.pop()
            generated = False
        else:
            self.active = self.generator.generate()
            generated = True
        print(f"[HISTORY] {'New ' if generated else 'Redo'} -> {self.active} "
              f"(back={len(self.back)}, forward={len(self.forward)})")
        return generated
