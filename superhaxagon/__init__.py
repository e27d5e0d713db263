"""Level packs, wall patterns, level simulation and high-score records for a hexagon arcade game."""

__version__ = "0.1.0"