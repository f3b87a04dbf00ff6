"""Classic algorithm and data-structure exercises: lists, trees, bits, numbers, strings,
stateful designs, arrays, greedy methods, graphs and dynamic programming."""

__version__ = "0.1.0"