"""
radarscope package
==================

Animated radar scope: spokes, range rings, a rotating sweep beam and a
field of fading blips that hop whenever the beam passes over them.
"""

__all__ = [
    "constants",
    "config",
    "rng",
    "blips",
    "sweep",
    "canvas",
    "renderer",
    "simulation",
    "window",
    "app",
]

__version__ = "1.0"
