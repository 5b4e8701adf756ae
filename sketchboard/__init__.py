"""Sketch lines and rectangles, draw them through a painter, and store them as plain text."""

__version__ = "0.1.0"
__all__ = ["__version__"]