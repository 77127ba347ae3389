"""Quire - rendering helpers for static site generation."""

__version__ = "0.1.0"
