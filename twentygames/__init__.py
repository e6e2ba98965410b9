"""A small fixed-timestep 2D game engine on pygame, with a playable Pong."""

__version__ = "0.0.1"