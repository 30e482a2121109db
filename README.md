# gnomics

Building blocks for learning with sparse distributed representations (SDRs).
Bit patterns are `bitarray` objects. Random choices come from a
`random.Random` instance, so a fixed seed gives the same results every time.

## Modules

- `gnomics.block_memory.BlockMemory`: a set of dendrites. Each dendrite has
  receptors, and each receptor has an input address and a permanence from
  `PERM_MIN` (0) to `PERM_MAX` (99). A receptor is connected once its
  permanence reaches the threshold.
  - `init(num_i, rng)` sends each receptor to a random input bit and sets
    every permanence to zero. `init_pooled(num_i, rng, pct_pool, pct_conn)`
    gives each dendrite its own random pool of `int(num_i * pct_pool)`
    distinct input bits. The first `pct_conn` of each pool starts connected
    and the rest start one step below the threshold.
  - `init_conn` and `init_pooled_conn` work the same way, and also keep one
    connection bit array per dendrite. This is used by `overlap_conn`,
    `learn_conn`, `learn_move_conn`, `punish_conn` and `conns`.
  - `overlap(d, input_bits)` counts the connected receptors that sit on
    active input bits.
  - `learn` raises permanences on active bits by `perm_inc` and lowers them
    on inactive bits by `perm_dec`. `punish` lowers permanences on active
    bits by `perm_inc`. `learn_move` learns the same way as `learn`, and
    also moves any receptor whose permanence is zero onto an active input
    bit that no other receptor of that dendrite covers.
  - When `pct_learn` is below 1.0, only a random `pct_learn` share of the
    receptors is updated on each call.
  - `addrs(d)`, `perms(d)` and `conns(d)` return copies. `conns` returns
    `None` when no connection arrays are kept. `memory_usage()` gives a
    rough size in bytes.
- `gnomics.block_output.BlockOutput`: a working bit array `state` with a
  circular history.
  - `setup(num_t, num_b)` allocates the history, with `num_t` of at least 2.
  - `store()` copies the state into the current slot and records whether it
    differs from the previous step. `step()` advances the history.
  - `get_bitarray(time)` and `has_changed_at(time)` take a relative time.
    `CURR` (0) is the current step and `PREV` (1) the previous one.
  - Each instance gets a distinct `id()`.
- `gnomics.discrete_transformer.DiscreteTransformer`: encodes a value in
  `0..num_v-1` as a window of `num_s // num_v` contiguous active bits.
  Different values never overlap.
  - `compute()` rewrites the output only when the value has changed since
    the last encoding.
  - `store()` and `step()` manage the output history.
  - `clear()` zeroes the output and resets the value to 0.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

### Encoding a category

```python
from gnomics.discrete_transformer import DiscreteTransformer

dt = DiscreteTransformer(4, 1024, 2, 0)   # 4 categories, 1024 bits, history 2
dt.set_value(2)
dt.compute()
dt.store()

print(dt.output.state.count())            # 256
```

### Output history and change tracking

```python
from gnomics.block_output import BlockOutput, PREV

out = BlockOutput()
out.setup(3, 1024)        # 3 time steps, 1024 bits
out.state[10] = 1
out.store()
assert out.has_changed()

out.step()
out.store()               # the state has not changed since the last store
assert not out.has_changed()
assert out.get_bitarray(PREV)[10] == 1
```

### Dendrite memory

```python
import random
from bitarray import bitarray
from gnomics.block_memory import BlockMemory

rng = random.Random(42)
memory = BlockMemory(100, 0, 20, 2, 1, 0.3)
memory.init_pooled_conn(1024, rng, 0.8, 0.5)

pattern = bitarray(1024)
pattern.setall(0)
pattern[10] = pattern[20] = pattern[30] = 1

score = memory.overlap(0, pattern)
assert score == memory.overlap_conn(0, pattern)
memory.learn_conn(0, pattern, rng)
```

## Errors

- Invalid arguments raise `ValueError`. This includes an `overlap_conn`
  input whose size differs from the connection array.
- Using a `BlockMemory` before it has been initialised, or calling a
  `*_conn` method without connection arrays, raises `RuntimeError`.
- A dendrite index or a history time offset out of range raises
  `IndexError`.

## What is not included

- The package has no way to wire one block's output into another block's
  input.
- There are no pooling, classification or sequence-learning blocks built on
  `BlockMemory`.
- Memories, outputs and encoders cannot be saved to or loaded from disk.
- The package has no command-line program.

## Running the tests

```
pytest
```