"""A small dependency-injection container with example services built on it."""

__version__ = "0.1.0"