"""Building blocks of a static site generator."""

__version__ = "0.19.8"