"""Typed failures raised by the swatch pipeline.

Every failure is terminal for the render call that raised it: the pipeline is
deterministic, so retrying with the same input gives the same result. Each
exception keeps the offending values as attributes so a host can log or show
them and skip the frame.
"""

from typing import Optional


class SwatchError(Exception):
    """Base class for all swatch pipeline failures."""


class InvalidCount(SwatchError, ValueError):
    """Swatch count is not a positive integer or exceeds the configured limit."""

    def __init__(self, count: object, limit: Optional[int] = None):
        self.count = count
        self.limit = limit
        if limit is not None:
            message = f"Swatch count {count!r} exceeds the limit of {limit}"
        else:
            message = f"Swatch count must be a positive integer, got {count!r}"
        super().__init__(message)


class InvalidStep(SwatchError, ValueError):
    """Hue step is not a finite real or a known preset name."""

    def __init__(self, step: object):
        self.step = step
        super().__init__(f"Hue step must be a finite real or preset, got {step!r}")


class InvalidSeed(SwatchError, ValueError):
    """Seed is not a finite real."""

    def __init__(self, seed: object):
        self.seed = seed
        super().__init__(f"Seed must be a finite real, got {seed!r}")


class EncodingOverflow(SwatchError):
    """Encoded image does not fit in the output buffer."""

    def __init__(
        self, capacity: int, required: int, angle: Optional[float] = None
    ):
        self.capacity = capacity
        self.required = required
        self.angle = angle
        where = f" for angle {angle!r}" if angle is not None else ""
        super().__init__(
            f"Encoded image{where} needs at least {required} bytes, "
            f"buffer holds {capacity}"
        )


class InternalInvariantViolation(SwatchError):
    """A hue outside ``[0, 1)`` reached the color converter."""

    def __init__(self, angle: float, sector: Optional[int] = None):
        self.angle = angle
        self.sector = sector
        super().__init__(
            f"Hue angle {angle!r} maps to sector {sector!r}, expected 0..5"
        )
