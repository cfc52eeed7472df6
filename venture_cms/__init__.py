"""Venture CMS: business listing management for the Naga Venture tourism platform."""

__version__ = "0.1.0"
