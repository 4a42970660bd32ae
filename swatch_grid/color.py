"""Hue to RGB conversion at full saturation and value.

The hue circle is split into six sectors. In each sector two channels are
fixed (one at 255, one at 0) and the third ramps linearly::

    h' = angle * 6
    x  = trunc((1 - |h' mod 2 - 1|) * 255)

    sector: 0          1          2          3          4          5
    rgb:    (255,x,0)  (x,255,0)  (0,255,x)  (0,x,255)  (x,0,255)  (255,0,x)

Quantization truncates rather than rounds so results are reproducible
bit-for-bit.
"""

import math

from swatch_grid.errors import InternalInvariantViolation
from swatch_grid.types import HueSample, RGBColor


def hue_to_rgb(angle: HueSample) -> RGBColor:
    """Convert a hue in ``[0, 1)`` to an 8-bit RGB triple.

    Raises:
        InternalInvariantViolation: If ``angle`` is not finite or falls outside
            ``[0, 1)``, i.e. the sector is not in ``0..5``.
    """
    if not math.isfinite(angle):
        raise InternalInvariantViolation(angle)
    h_prime = angle * 6.0
    sector = math.floor(h_prime)
    x = int((1.0 - abs(h_prime % 2.0 - 1.0)) * 255.0)
    if sector == 0:
        return (255, x, 0)
    if sector == 1:
        return (x, 255, 0)
    if sector == 2:
        return (0, 255, x)
    if sector == 3:
        return (0, x, 255)
    if sector == 4:
        return (x, 0, 255)
    if sector == 5:
        return (255, 0, x)
    raise InternalInvariantViolation(angle, sector)
