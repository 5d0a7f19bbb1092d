"""Disc golf flight path diagrams."""

__version__ = "0.1.0"
