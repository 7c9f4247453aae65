"""Helpers for object poses, transform broadcasting, spawning, physics settings and world plugins in a simulation world."""

__version__ = "0.1.0"