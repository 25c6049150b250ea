"""A side-scrolling flapping-bird arcade game, with its rules usable without a window."""

__version__ = "0.1.0"