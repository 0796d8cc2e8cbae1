"""Parse and validate .cub map files for grid-based raycasting games."""

__version__ = "0.1.0"