"""Refreshable list: a pull-to-refresh list of random strings for the terminal."""

__version__ = "0.1.0"
