"""Falling-sand simulation, simple pygame widgets, a timer and a selection sort visualizer."""

__version__ = "0.1.0"