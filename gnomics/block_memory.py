"""Synaptic memory: dendrites whose receptors learn permanences over input bits."""

from __future__ import annotations

import random
import sys

from bitarray import bitarray

PERM_MIN = 0
PERM_MAX = 99


def _zeros(length: int) -> bitarray:
    bits = bitarray(length)
    bits.setall(0)
    return bits


class BlockMemory:
    """Dendrites with receptors that connect to input bits.

    Each receptor has an input address and a permanence in 0..99. A receptor
    counts as connected once its permanence reaches ``perm_thr``.
    """

    def __init__(self, num_d, num_rpd, perm_thr, perm_inc, perm_dec, pct_learn):
        if num_d <= 0:
            raise ValueError("num_d must be > 0")
        if num_rpd < 0:
            raise ValueError("num_rpd must be >= 0")
        for name, value in (("perm_thr", perm_thr), ("perm_inc", perm_inc), ("perm_dec", perm_dec)):
            if not PERM_MIN <= value <= PERM_MAX:
                raise ValueError(f"{name} must be {PERM_MIN}-{PERM_MAX}")
        if not 0.0 <= pct_learn <= 1.0:
            raise ValueError("pct_learn must be 0.0-1.0")

        self.state = _zeros(num_d)
        self._num_i = 0
        self._num_d = num_d
        self._num_rpd = num_rpd
        self._perm_thr = perm_thr
        self._perm_inc = perm_inc
        self._perm_dec = perm_dec
        self._pct_learn = pct_learn

        self._addrs: list[list[int]] = [[0] * num_rpd for _ in range(num_d)]
        self._perms: list[bytearray] = [bytearray(num_rpd) for _ in range(num_d)]
        self._conns: list[bitarray] = []
        self._lmask = _zeros(num_rpd)

        self._initialized = False
        self._use_conns = False

    # ------------------------------------------------------------------ setup

    def _reset_learning_mask(self) -> None:
        num_learn = int(self._num_rpd * self._pct_learn)
        self._lmask = _zeros(self._num_rpd)
        self._lmask[:num_learn] = 1

    def init(self, num_i, rng):
        """Address every receptor at a random input bit, all permanences zero."""
        if num_i <= 0:
            raise ValueError("num_i must be > 0")
        self._num_i = num_i
        self._reset_learning_mask()
        self._addrs = [
            [rng.randrange(num_i) for _ in range(self._num_rpd)] for _ in range(self._num_d)
        ]
        self._perms = [bytearray(self._num_rpd) for _ in range(self._num_d)]
        self._initialized = True

    def init_conn(self, num_i, rng):
        """Like :meth:`init`, also keeping a connection bit array per dendrite."""
        self.init(num_i, rng)
        self._conns = [_zeros(num_i) for _ in range(self._num_d)]
        self._use_conns = True

    def init_pooled(self, num_i, rng, pct_pool, pct_conn):
        """Give each dendrite a random pool of distinct input bits.

        The first ``pct_conn`` of each pool starts connected; the rest start
        one step below the threshold.
        """
        if num_i <= 0:
            raise ValueError("num_i must be > 0")
        if not 0.0 <= pct_pool <= 1.0:
            raise ValueError("pct_pool must be 0.0-1.0")
        if not 0.0 <= pct_conn <= 1.0:
            raise ValueError("pct_conn must be 0.0-1.0")

        self._num_i = num_i
        self._num_rpd = int(num_i * pct_pool)
        self._reset_learning_mask()

        num_init = int(self._num_rpd * pct_conn)
        below = max(self._perm_thr - 1, 0)
        pool = list(range(num_i))
        self._addrs = []
        self._perms = []
        for _ in range(self._num_d):
            rng.shuffle(pool)
            self._addrs.append(pool[: self._num_rpd])
            self._perms.append(
                bytearray(self._perm_thr if j < num_init else below for j in range(self._num_rpd))
            )
        self._initialized = True

    def init_pooled_conn(self, num_i, rng, pct_pool, pct_conn):
        """Like :meth:`init_pooled`, also keeping connection bit arrays."""
        self.init_pooled(num_i, rng, pct_pool, pct_conn)
        self._conns = [_zeros(num_i) for _ in range(self._num_d)]
        self._use_conns = True
        for d in range(self._num_d):
            self._update_conns(d)

    # ------------------------------------------------------------------ checks

    def _check(self, d: int) -> None:
        if not self._initialized:
            raise RuntimeError("must call init() first")
        if not 0 <= d < self._num_d:
            raise IndexError("dendrite index out of bounds")

    def _check_conns(self, d: int) -> None:
        self._check(d)
        if not self._use_conns:
            raise RuntimeError("connection arrays not initialised")

    def _shuffle_mask(self, rng: random.Random) -> None:
        if self._pct_learn < 1.0:
            rng.shuffle(self._lmask)

    def _learning(self, d: int):
        """Yield (receptor index, address, permanences) for learning receptors."""
        perms = self._perms[d]
        for j, addr in enumerate(self._addrs[d]):
            if self._lmask[j]:
                yield j, addr, perms

    # ----------------------------------------------------------------- compute

    def overlap(self, d, input_bits):
        """Count receptors that are connected and sit on an active input bit."""
        self._check(d)
        thr = self._perm_thr
        return sum(
            1
            for addr, perm in zip(self._addrs[d], self._perms[d])
            if perm >= thr and input_bits[addr]
        )

    def overlap_conn(self, d, input_bits):
        """Overlap computed from the dendrite's connection bit array."""
        self._check_conns(d)
        conns = self._conns[d]
        if len(conns) != len(input_bits):
            raise ValueError("input size does not match connection size")
        return (conns & input_bits).count()

    # ----------------------------------------------------------------- learning

    def learn(self, d, input_bits, rng):
        """Raise permanences on active inputs and lower them on inactive ones."""
        self._check(d)
        self._shuffle_mask(rng)
        for j, addr, perms in self._learning(d):
            if input_bits[addr]:
                perms[j] = min(perms[j] + self._perm_inc, PERM_MAX)
            else:
                perms[j] = max(perms[j], self._perm_dec) - self._perm_dec

    def learn_conn(self, d, input_bits, rng):
        """Learn, then refresh the dendrite's connection bit array."""
        self._check_conns(d)
        self.learn(d, input_bits, rng)
        self._update_conns(d)

    def _find_available(self, available: bitarray, start: int) -> int:
        pos = available.find(1, start, self._num_i)
        if pos < 0:
            pos = available.find(1, 0, start)
        return pos

    def learn_move(self, d, input_bits, rng):
        """Learn, moving receptors with zero permanence onto uncovered active bits."""
        self._check(d)
        next_addr = rng.randrange(self._num_i)
        self._shuffle_mask(rng)

        addrs = self._addrs[d]
        available = bitarray(input_bits)
        for addr, perm in zip(addrs, self._perms[d]):
            if perm > 0:
                available[addr] = 0

        for j, addr, perms in self._learning(d):
            if perms[j] > 0:
                if input_bits[addr]:
                    perms[j] = min(perms[j] + self._perm_inc, PERM_MAX)
                else:
                    perms[j] = max(perms[j], self._perm_dec) - self._perm_dec
                continue
            found = self._find_available(available, next_addr)
            if found >= 0:
                addrs[j] = found
                perms[j] = self._perm_thr
                available[found] = 0
                next_addr = rng.randrange(self._num_i)

    def learn_move_conn(self, d, input_bits, rng):
        """:meth:`learn_move`, then refresh the connection bit array."""
        self._check_conns(d)
        self.learn_move(d, input_bits, rng)
        self._update_conns(d)

    def punish(self, d, input_bits, rng):
        """Lower permanences of receptors on active input bits by ``perm_inc``."""
        self._check(d)
        self._shuffle_mask(rng)
        for j, addr, perms in self._learning(d):
            if input_bits[addr]:
                perms[j] = max(perms[j], self._perm_inc) - self._perm_inc

    def punish_conn(self, d, input_bits, rng):
        """Punish, then refresh the connection bit array."""
        self._check_conns(d)
        self.punish(d, input_bits, rng)
        self._update_conns(d)

    # ------------------------------------------------------------------ access

    def clear(self):
        """Deactivate every dendrite."""
        self.state.setall(0)

    def num_dendrites(self):
        return self._num_d

    def addrs(self, d):
        """Copy of the receptor addresses of dendrite ``d``."""
        self._check(d)
        return list(self._addrs[d])

    def perms(self, d):
        """Copy of the receptor permanences of dendrite ``d``."""
        self._check(d)
        return list(self._perms[d])

    def conns(self, d):
        """Copy of the connection bit array of ``d``, or None when not kept."""
        if not self._use_conns:
            return None
        return bitarray(self._conns[d])

    def memory_usage(self):
        """Rough estimate of the memory held, in bytes."""
        total = sys.getsizeof(self)
        total += self.state.nbytes
        total += sum(len(a) for a in self._addrs) * 8
        total += sum(len(p) for p in self._perms)
        total += self._lmask.nbytes
        if self._use_conns:
            total += sum(c.nbytes for c in self._conns)
        return total

    def _update_conns(self, d: int) -> None:
        conns = self._conns[d]
        conns.setall(0)
        thr = self._perm_thr
        for addr, perm in zip(self._addrs[d], self._perms[d]):
            if perm >= thr:
                conns[addr] = 1