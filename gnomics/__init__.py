"""Sparse distributed representation building blocks: dendrite memory, output history with change tracking, and discrete category encoding."""

__version__ = "1.0.0"
__all__ = ["block_memory", "block_output", "discrete_transformer"]