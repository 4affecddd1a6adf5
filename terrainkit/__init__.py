"""Building blocks for fractal terrain: colours, matrices, mesh edges, noise and parameters."""

__version__ = "0.1.0"