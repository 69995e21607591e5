"""Satyata - search-augmented fact checking for Bengali news."""

__version__ = "0.1.0"
