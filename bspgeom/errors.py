# bspgeom/errors.py
"""Exceptions raised by the geometric primitives."""

from __future__ import annotations

from typing import Any


class DegenerateGeometryError(ValueError):
    """A construction was given inputs that do not define the object.

    Raised for near-zero normals or directions, collinear point triples and
    coincident points defining a line.

    Attributes:
        operation: Name of the constructor or reset that failed
        inputs: The offending inputs, as passed by the caller
    """

    def __init__(self, operation: str, reason: str, **inputs: Any) -> None:
        self.operation = operation
        self.reason = reason
        self.inputs = inputs
        details = ", ".join(f"{key}={value!r}" for key, value in inputs.items())
        message = f"{operation}: {reason}"
        if details:
            message = f"{message} ({details})"
        super().__init__(message)


__all__ = ["DegenerateGeometryError"]
