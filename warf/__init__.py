"""Simulation core for a tile-based dwarf colony game: maps, rooms, dwarves, jobs and rails."""

__version__ = "0.1.0"