"""Block output: a working bit array plus a circular history with change tracking."""

from __future__ import annotations

import itertools
import sys

from bitarray import bitarray

CURR = 0
PREV = 1

_ids = itertools.count()


def _zeros(length: int) -> bitarray:
    bits = bitarray(length)
    bits.setall(0)
    return bits


class BlockOutput:
    """Output of a block with a history of past states.

    ``state`` is the working bit array. :meth:`store` copies it into the
    history and records whether it differs from the previous time step.
    History is indexed by relative time: 0 is the current step, 1 the
    previous one, and so on.
    """

    def __init__(self):
        self.state = _zeros(0)
        self._history: list[bitarray] = []
        self._changes: list[bool] = []
        self._changed = False
        self._curr_idx = 0
        self._id = next(_ids)

    def setup(self, num_t, num_b):
        """Allocate ``num_t`` time steps of ``num_b`` bits each."""
        if num_t < 2:
            raise ValueError("num_t must be >= 2")
        if num_b <= 0:
            raise ValueError("num_b must be > 0")
        self.state = _zeros(num_b)
        self._history = [_zeros(num_b) for _ in range(num_t)]
        self._changes = [True] * num_t
        self._curr_idx = 0
        self._changed = True

    def clear(self):
        """Zero the state and every history entry, marking all as changed."""
        self.state.setall(0)
        self._changed = True
        for bits in self._history:
            bits.setall(0)
        self._changes = [True] * len(self._history)

    def step(self):
        """Advance the circular history by one time step."""
        self._curr_idx += 1
        if self._curr_idx >= len(self._history):
            self._curr_idx = 0

    def store(self):
        """Copy the state into the current history slot and detect change."""
        self._changed = self.state != self._history[self._idx(PREV)]
        self._history[self._curr_idx] = bitarray(self.state)
        self._changes[self._curr_idx] = self._changed

    def get_bitarray(self, time):
        """History entry ``time`` steps back (0 is the current step)."""
        return self._history[self._idx(time)]

    def has_changed(self):
        """Whether the last :meth:`store` found the state changed."""
        return self._changed

    def has_changed_at(self, time):
        """Whether the state had changed at ``time`` steps back."""
        return self._changes[self._idx(time)]

    def num_t(self):
        return len(self._history)

    def id(self):
        return self._id

    def memory_usage(self):
        """Rough estimate of the memory held, in bytes."""
        total = sys.getsizeof(self)
        total += self.state.nbytes
        total += sum(bits.nbytes for bits in self._history)
        total += len(self._changes)
        return total

    def _idx(self, time: int) -> int:
        num_t = len(self._history)
        if not 0 <= time < num_t:
            raise IndexError("time offset out of bounds")
        if time <= self._curr_idx:
            return self._curr_idx - time
        return num_t + self._curr_idx - time