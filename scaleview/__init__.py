"""A small viewer with a scalable rectangle, an overlay button and a side panel of controls."""

__version__ = "0.1.0"