"""A raycasting maze explorer drawn through a software framebuffer."""

__version__ = "0.1.0"