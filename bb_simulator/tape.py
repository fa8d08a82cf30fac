import numpy as np

from bb_simulator.transitions import BLANK


class Tape:
    """
    Binary tape, unbounded in both directions.

    Position p >= 0 is stored at index p of the right side, position p < 0
    at index -p - 1 of the left side. Cells are appended one at a time the
    first time the head reaches them; position 0 exists from the start.
    """

    def __init__(self):
        self.left = bytearray()
        self.right = bytearray(1)
        self.head = 0

    def _side(self, position):
        if position >= 0:
            return self.right, position
        return self.left, -position - 1

    def read(self, position):
        side, index = self._side(position)
        return side[index]

    def read_current(self):
        return self.read(self.head)

    def write(self, position, symbol):
        side, index = self._side(position)
        side[index] = symbol

    def ensure_allocated(self, position):
        side, index = self._side(position)
        if len(side) == index:
            side.append(BLANK)

    def move(self, direction):
        self.head += direction
        self.ensure_allocated(self.head)

    @property
    def extent(self):
        """Allocated cells as (left, right) lengths."""
        return len(self.left), len(self.right)

    def snapshot(self):
        """Every allocated cell, leftmost position first."""
        return np.concatenate([
            np.frombuffer(bytes(self.left[::-1]), dtype=np.uint8),
            np.frombuffer(bytes(self.right), dtype=np.uint8),
        ])

    def count_marks(self):
        return int(np.count_nonzero(self.snapshot()))
