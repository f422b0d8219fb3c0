# bspgeom/euclidean/__init__.py
"""Euclidean hyperplanes and regions, one package per dimension."""
