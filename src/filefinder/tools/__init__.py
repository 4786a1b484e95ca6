"""
Search tools for filefinder.

This module contains the breadth-first filesystem walker and the predicate
constructors it is composed with.
"""
