"""A small top-down sprite game built on pygame: an animated hunter, an idle zombie and a gem."""

__version__ = "0.1.0"