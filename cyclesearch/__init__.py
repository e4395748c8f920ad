"""Simulation of a distributed cycle-detection protocol over random directed graphs."""

__version__ = "0.1.0"
__all__ = ["message", "node", "simulation", "util"]