"""The per-tick input reading consumed by the simulation."""
from typing import NamedTuple, Optional, Tuple

DIRECTIONS = ("up", "down", "left", "right")
HORIZONTAL = ("left", "right")


class InputSample(NamedTuple):
    pointer: Optional[Tuple[float, float]] = None
    held: frozenset = frozenset()

    def holds_any(self, directions):
        return any(d in self.held for d in directions)


NO_INPUT = InputSample()
