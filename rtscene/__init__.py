"""Vectors, noise, .rt scene parsing, sphere and cone intersection, textures, motion and key controls for a small ray tracer."""

__version__ = "0.1.0"