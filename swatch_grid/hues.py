"""Hue sequence generator.

Walks the color wheel by a fixed step, modulo 1::

    sample_0     = seed mod 1
    sample_(n+1) = (sample_n + step) mod 1

Irrational steps such as the golden ratio never revisit a hue exactly and
keep consecutive samples well apart, which is what makes neighbouring
swatches distinguishable.
"""

import math
import random
from typing import Callable, Dict, Iterator, List, Optional, Union

from swatch_grid.errors import InvalidSeed, InvalidStep
from swatch_grid.types import HueSample, StepPreset

PHI = 1.618033988749895
DEFAULT_STEP = PHI

StepFn = Callable[[random.Random], float]

STEP_PRESET_REGISTRY: Dict[StepPreset, StepFn] = {
    StepPreset.PHI: lambda rng: PHI,
    StepPreset.SQRT2: lambda rng: math.sqrt(2),
    StepPreset.PI: lambda rng: math.pi,
    StepPreset.E: lambda rng: math.e,
    StepPreset.RANDOM: lambda rng: rng.random(),
}


def wrap_unit(value: float) -> HueSample:
    """Reduce ``value`` into ``[0, 1)``.

    Python's float modulo can return exactly ``1.0`` for tiny negative inputs
    (``-1e-20 % 1.0``); that case is folded back to ``0.0``.
    """
    wrapped = value % 1.0
    if wrapped >= 1.0:
        return 0.0
    return wrapped


def resolve_step(
    preset_or_value: Union[StepPreset, str, float],
    rng: Optional[random.Random] = None,
) -> float:
    """Return the numeric step for a preset name or a literal real.

    Raises:
        InvalidStep: Unknown preset name or non-finite value.
    """
    if isinstance(preset_or_value, str):
        try:
            preset = StepPreset(preset_or_value.lower())
        except ValueError:
            raise InvalidStep(preset_or_value) from None
        step = STEP_PRESET_REGISTRY[preset](rng or random.Random())
    else:
        step = float(preset_or_value)
    if not math.isfinite(step):
        raise InvalidStep(preset_or_value)
    return step


class HueSequence:
    """Restartable, infinite stream of hue samples.

    The only mutable state is the cursor. Each caller should own its own
    instance; calling :meth:`reset` with the same seed replays the same
    samples.
    """

    step: float
    angle: HueSample

    def __init__(self, seed: float = 0.0, step: float = DEFAULT_STEP):
        if not math.isfinite(step):
            raise InvalidStep(step)
        self.step = step
        self.reset(seed)

    def reset(self, seed: float) -> None:
        if not math.isfinite(seed):
            raise InvalidSeed(seed)
        self.angle = wrap_unit(seed)

    def next(self) -> HueSample:
        """Return the current sample and advance the cursor by ``step``."""
        sample = self.angle
        self.angle = wrap_unit(self.angle + self.step)
        return sample

    def take(self, n: int) -> List[HueSample]:
        return [self.next() for _ in range(n)]

    def __iter__(self) -> Iterator[HueSample]:
        return self

    def __next__(self) -> HueSample:
        return self.next()
