"""Raycasting engine for .cub maps: parsing, player movement, ray casting and rendering to canvases."""

__version__ = "0.1.0"