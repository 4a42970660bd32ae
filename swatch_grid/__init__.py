"""Swatch grid core.

Turns a :class:`~swatch_grid.request.SwatchRequest` (count, seed, step) into
an ordered sequence of solid-color encoded images whose hues are spread over
the color wheel by repeated fixed-angle steps. Everything here is pure apart
from the explicit cursor held by :class:`~swatch_grid.hues.HueSequence`; the
host UI owns the viewer state and calls :func:`~swatch_grid.render.render`
once per refresh.
"""

from swatch_grid.errors import (
    EncodingOverflow,
    InternalInvariantViolation,
    InvalidCount,
    InvalidSeed,
    InvalidStep,
    SwatchError,
)
from swatch_grid.request import GridShape, SwatchRequest
from swatch_grid.render import SwatchRenderer, render

__all__ = [
    "EncodingOverflow",
    "GridShape",
    "InternalInvariantViolation",
    "InvalidCount",
    "InvalidSeed",
    "InvalidStep",
    "SwatchError",
    "SwatchRenderer",
    "SwatchRequest",
    "render",
]
