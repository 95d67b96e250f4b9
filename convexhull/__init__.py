"""Convex hulls of planar point sets with the Graham scan, with a command line tool."""

__version__ = "0.1.0"