# bspgeom/utils/__init__.py
"""Utility package re-exporting shared helpers for bspgeom."""

from bspgeom.utils.format import format_matrix, format_vector, numpy_print_options
from bspgeom.utils.logger import configure, get_logger, logging_context

__all__ = [
    "configure",
    "format_matrix",
    "format_vector",
    "get_logger",
    "logging_context",
    "numpy_print_options",
]
