"""A spaceship flying around a planet, with its scene drawn through OpenGL."""

__version__ = "0.1.0"