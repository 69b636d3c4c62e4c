"""Procedural dungeon map generation."""

__version__ = "0.1.0"
