"""Solutions to classic array, sampling, grid, bitwise and arithmetic problems."""

__version__ = "0.1.0"