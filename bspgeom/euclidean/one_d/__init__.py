# bspgeom/euclidean/one_d/__init__.py
"""One-dimensional regions."""

from __future__ import annotations

from bspgeom.euclidean.one_d.intervals import Interval, IntervalsSet

__all__ = ["Interval", "IntervalsSet"]
