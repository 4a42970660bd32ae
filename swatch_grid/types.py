"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from typing import Tuple

HueSample = float
"""Position on the color wheel, always in ``[0, 1)``."""

RGBColor = Tuple[int, int, int]
"""Three 8-bit channel values."""


class StepPreset(StrEnum):
    """Named hue steps offered by the viewer.

    Members:
        PHI: Golden ratio, the default low-discrepancy step.
        SQRT2, PI, E: Other irrational steps.
        RANDOM: A fresh uniform draw in ``[0, 1)`` per selection.
    """

    PHI = auto()
    SQRT2 = auto()
    PI = auto()
    E = auto()
    RANDOM = auto()
