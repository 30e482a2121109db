"""Discrete transformer: encodes categories as non-overlapping bit windows."""

from __future__ import annotations

import random
import sys

from gnomics.block_output import BlockOutput


class DiscreteTransformer:
    """Encodes a category in ``0..num_v-1`` as a contiguous window of bits.

    The ``num_s`` output bits are split into ``num_v`` equal windows of
    ``num_s // num_v`` bits each, so different categories never overlap.
    """

    def __init__(self, num_v, num_s, num_t, seed):
        if num_v <= 0:
            raise ValueError("num_v must be > 0")
        if num_s <= 0:
            raise ValueError("num_s must be > 0")
        if num_t < 2:
            raise ValueError("num_t must be at least 2")

        self._num_v = num_v
        self._num_s = num_s
        self._num_as = num_s // num_v
        self._dif_s = num_s - self._num_as
        self._rng = random.Random(seed)

        self.output = BlockOutput()
        self.output.setup(num_t, num_s)

        self._value = 0
        self._value_prev: int | None = None
        self._initialized = True

    def _require_initialized(self):
        if not self._initialized:
            raise RuntimeError("must call init() first")

    def set_value(self, value):
        """Set the category to encode."""
        if not 0 <= value < self._num_v:
            raise ValueError("value must be < num_v")
        self._value = value

    def get_value(self):
        return self._value

    def num_v(self):
        return self._num_v

    def num_s(self):
        return self._num_s

    def num_as(self):
        return self._num_as

    def init(self):
        """Mark the transformer ready; its output is set up on construction."""
        self._initialized = True

    def clear(self):
        """Zero the output and reset the value to 0."""
        self.output.clear()
        self._value = 0
        self._value_prev = None

    def step(self):
        """Advance the output history by one time step."""
        self.output.step()

    def pull(self):
        """Check readiness; the transformer has no inputs to copy."""
        self._require_initialized()

    def compute(self):
        """Write the window for the current value, if the value changed."""
        if not 0 <= self._value < self._num_v:
            raise ValueError("value must be < num_v")
        if self._value == self._value_prev:
            return
        percent = self._value / (self._num_v - 1) if self._num_v > 1 else 0.0
        beg = int(self._dif_s * percent)
        state = self.output.state
        state.setall(0)
        state[beg : beg + self._num_as] = 1
        self._value_prev = self._value

    def learn(self):
        """Check readiness; the transformer is a fixed encoder and never adapts."""
        self._require_initialized()

    def store(self):
        """Store the output state into its history."""
        self.output.store()

    def memory_usage(self):
        """Rough estimate of the memory held, in bytes."""
        return sys.getsizeof(self) + self.output.memory_usage()